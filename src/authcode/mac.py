"""
HMAC-SHA1 (RFC 2104) on top of :mod:`authcode.digest`.
"""
from typing import Optional, Union

from . import utils
from .digest import BLOCK_SIZE, DIGEST_SIZE, SHA1, sha1

IPAD = 0x36
OPAD = 0x5C


def _prepare_key(key: bytes) -> bytes:
    # Keys longer than a block are replaced by their digest, then zero-filled
    if len(key) > BLOCK_SIZE:
        key = sha1(key)
    return key.ljust(BLOCK_SIZE, b"\x00")


class HMAC(object):
    """
    Keyed message authenticator using SHA-1 as the underlying digest.

    :param key: secret key, bytes or text (UTF-8); any length
    :param msg: optional initial message
    """

    name = "hmac-sha1"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, key: Union[str, bytes], msg: Optional[Union[str, bytes]] = None) -> None:
        block_key = _prepare_key(utils.to_bytes(key))

        self._inner = SHA1(bytes(b ^ IPAD for b in block_key))
        self._outer = SHA1(bytes(b ^ OPAD for b in block_key))
        if msg is not None:
            self.update(msg)

    def update(self, msg: Union[str, bytes]) -> "HMAC":
        self._inner.update(msg)
        return self

    def copy(self) -> "HMAC":
        other = type(self).__new__(type(self))
        other._inner = self._inner.copy()
        other._outer = self._outer.copy()
        return other

    def digest(self) -> bytes:
        outer = self._outer.copy()
        outer.update(self._inner.digest())
        return outer.digest()

    def hexdigest(self) -> str:
        return self.digest().hex()


def new(key: Union[str, bytes], msg: Optional[Union[str, bytes]] = None) -> HMAC:
    return HMAC(key, msg)


def hmac_sha1(key: Union[str, bytes], msg: Union[str, bytes]) -> bytes:
    """
    Computes the 20-byte HMAC-SHA1 of ``msg`` under ``key``.
    """
    return HMAC(key, msg).digest()


def hmac_sha1_hex(key: Union[str, bytes], msg: Union[str, bytes]) -> str:
    return HMAC(key, msg).hexdigest()
