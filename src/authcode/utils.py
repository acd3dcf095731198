import base64
import binascii
import unicodedata
from hmac import compare_digest
from typing import Union


def int_to_bytes(value: int, length: int) -> bytes:
    """
    Encodes an unsigned integer as exactly ``length`` big-endian bytes.

    This is the only place byte order is decided; the digest length field,
    the schedule words and the OTP counter all go through it.

    :param value: non-negative integer to encode
    :param length: number of output bytes
    :returns: big-endian bytes, left-padded with zeros
    """
    if value < 0:
        raise ValueError("value must be a non-negative integer")
    if value >> (8 * length):
        raise ValueError("value {} does not fit in {} bytes".format(value, length))
    return value.to_bytes(length, "big")


def bytes_to_int(data: bytes) -> int:
    """
    Decodes big-endian bytes as an unsigned integer.
    """
    return int.from_bytes(data, "big")


def to_bytes(data: Union[str, bytes, bytearray]) -> bytes:
    # Text is hashed as its UTF-8 encoding
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError("expected str or bytes-like object, got {}".format(type(data).__name__))


def decode_base32(secret: str) -> bytes:
    """
    Decodes a Base32 secret into raw key bytes.

    Secrets are commonly stored without the trailing ``=`` padding, so it
    is added back before decoding. Decoding is case-insensitive.

    :param secret: Base32 encoded secret
    :returns: raw key bytes
    """
    missing_padding = len(secret) % 8
    if missing_padding != 0:
        secret += "=" * (8 - missing_padding)
    try:
        return base64.b32decode(secret, casefold=True)
    except binascii.Error as e:
        raise ValueError("Invalid Base32 secret") from e


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    s1 = unicodedata.normalize("NFKC", s1)
    s2 = unicodedata.normalize("NFKC", s2)
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))
