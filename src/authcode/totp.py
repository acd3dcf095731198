import datetime
import time
from typing import Optional, Union

from . import config, utils
from .otp import OTP


class TOTP(OTP):
    """
    Handler for time-based OTP counters.

    The counter is the number of whole ``interval`` periods since the Unix
    epoch.
    """

    def __init__(
        self,
        s: Union[str, bytes],
        digits: int = config.DEFAULT_DIGITS,
        interval: int = config.DEFAULT_INTERVAL,
    ) -> None:
        """
        :param s: raw secret key
        :param digits: number of integers in the OTP
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        """
        self.interval = config.validate_interval(interval)
        super().__init__(s=s, digits=digits)

    def at(self, for_time: Union[int, float, datetime.datetime], counter_offset: int = 0) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :param counter_offset: the amount of ticks to add to the time counter
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time) + counter_offset)

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.generate_otp(self.timecode(time.time()))

    def verify(self, otp: str, for_time: Optional[Union[int, float, datetime.datetime]] = None) -> bool:
        """
        Verifies the OTP passed in against the current time OTP.

        There is no drift window: the code must belong to the period
        containing ``for_time``.

        :param otp: the OTP to check against
        :param for_time: Time to check OTP at (defaults to now)
        :returns: True if verification succeeded, False otherwise
        """
        if for_time is None:
            for_time = time.time()
        return utils.strings_equal(str(otp), str(self.at(for_time)))

    def timecode(self, for_time: Union[int, float, datetime.datetime]) -> int:
        """
        Accepts either a timezone naive (`for_time.tzinfo is None`) or
        a timezone aware datetime as argument and returns the
        corresponding counter value (timecode).
        """
        if isinstance(for_time, datetime.datetime):
            for_time = for_time.timestamp()
        if for_time < 0:
            raise ValueError("for_time must not be before the Unix epoch")
        return int(for_time) // self.interval
