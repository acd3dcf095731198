import logging
from typing import Any, Union

from . import config, mac, utils
from .digest import DIGEST_SIZE

logger = logging.getLogger(__name__)

# OTP (base class)


def dynamic_truncate(hmac_hash: bytes) -> int:
    """
    RFC 4226 dynamic truncation.

    :param hmac_hash: the 20-byte HMAC-SHA1 value
    :returns: a non-negative 31-bit integer
    """
    if len(hmac_hash) < DIGEST_SIZE:
        raise ValueError("HMAC value must be at least {} bytes".format(DIGEST_SIZE))
    # The last nibble picks where to read; 15 + 4 still fits inside 20 bytes
    offset = hmac_hash[-1] & 0xF
    logger.debug("truncation offset=%d", offset)
    return utils.bytes_to_int(hmac_hash[offset : offset + 4]) & 0x7FFFFFFF
    # offset = 10, bytes [10..13] = 50 ef 7f 19 -> 0x50ef7f19
    # & 0x7FFFFFFF drops the top bit so the value stays positive on every platform


def format_code(value: int, digits: int) -> str:
    # Last `digits` decimal digits, zero-padded on the left.
    # 1284755224 -> "755224", 4223 -> "004223"
    return str(value % 10**digits).rjust(digits, "0")


class OTP(object):
    """
    Base class for OTP handlers.
    """

    def __init__(self, s: Union[str, bytes], digits: int = config.DEFAULT_DIGITS) -> None:
        """
        :param s: raw secret key, bytes or text (UTF-8)
        :param digits: number of integers in the OTP, from 1 to 10
        """
        # Checked once here, never again per code
        self.digits = config.validate_digits(digits)
        self.secret = utils.to_bytes(s)

    @classmethod
    def from_base32(cls, secret: str, **kwargs: Any) -> "OTP":
        """
        Builds a handler from a Base32 encoded secret, the form secrets
        are usually stored in.
        """
        return cls(utils.decode_base32(secret), **kwargs)

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        """
        # Implements RFC 4226
        if input < 0:
            raise ValueError("input must be positive integer")
        logger.debug("generating %d-digit code for counter=%d", self.digits, input)

        hmac_hash = mac.hmac_sha1(self.byte_secret(), self.int_to_bytestring(input))
        return format_code(dynamic_truncate(hmac_hash), self.digits)

    def byte_secret(self) -> bytes:
        return self.secret

    @staticmethod
    def int_to_bytestring(i: int, padding: int = config.COUNTER_BYTES) -> bytes:
        """
        Turns an integer to the OATH specified
        bytestring, which is fed to the HMAC
        along with the secret
        """
        # Always the full 8-byte field, even when only 32 bits are in use:
        # 1 -> 00 00 00 00 00 00 00 01
        try:
            return utils.int_to_bytes(i, padding)
        except ValueError as e:
            raise ValueError("counter must fit in {} bytes".format(padding)) from e


def generate_code(key: Union[str, bytes], counter: int, digits: int = config.DEFAULT_DIGITS) -> str:
    """
    Derives the one-time code for ``counter`` under ``key``.

    Functional form of :meth:`OTP.generate_otp`.

    :param key: raw secret key
    :param counter: non-negative counter, encoded as 8 big-endian bytes
    :param digits: code width
    :returns: the code, exactly ``digits`` decimal characters
    """
    return OTP(key, digits=digits).generate_otp(counter)

# Input (counter or time)
#       int_to_bytestring() -> 8 bytes (padded with zeros)
#           HMAC-SHA1 (secret, input) -> 20 bytes
#               dynamic_truncate() -> 31-bit integer
#               format_code()      -> "755224"
