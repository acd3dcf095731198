from typing import Union

from . import config, utils
from .otp import OTP


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(
        self,
        s: Union[str, bytes],
        digits: int = config.DEFAULT_DIGITS,
        initial_count: int = 0,
    ) -> None:
        """
        :param s: raw secret key
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param initial_count: starting HMAC counter value, defaults to 0
        """
        self.initial_count = config.validate_counter(initial_count, "initial_count")
        super().__init__(s=s, digits=digits)

    def at(self, count: int) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(self.initial_count + count)
    # hotp = HOTP(b"12345678901234567890")
    # hotp.at(0) -> "755224"
    # hotp.at(1) -> "287082"

    def verify(self, otp: str, counter: int) -> bool:
        """
        Verifies the OTP passed in against the current counter OTP.

        Only ``counter`` itself is checked; look-ahead windows and replay
        tracking are up to the caller.

        :param otp: the OTP to check against
        :param counter: the OTP HMAC counter
        """
        return utils.strings_equal(str(otp), str(self.at(counter)))
