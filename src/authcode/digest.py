"""
SHA-1 digest engine.

Pure-Python FIPS 180-4 SHA-1. The hasher mirrors the ``hashlib`` object
interface (``update``/``digest``/``hexdigest``/``copy``) so it can be
used wherever a content fingerprint is needed.
"""
from typing import Optional, Sequence, Tuple, Union

from . import utils

BLOCK_SIZE = 64
DIGEST_SIZE = 20

INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

K0 = 0x5A827999
K1 = 0x6ED9EBA1
K2 = 0x8F1BBCDC
K3 = 0xCA62C1D6

MASK = 0xFFFFFFFF

# Byte offset of the 64-bit length field inside the final block
LENGTH_OFFSET = BLOCK_SIZE - 8


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & MASK


def _schedule(block: bytes) -> list:
    w = [utils.bytes_to_int(block[i : i + 4]) for i in range(0, BLOCK_SIZE, 4)]
    for i in range(16, 80):
        w.append(_rotl(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))
    return w


def compress(state: Sequence[int], block: bytes) -> Tuple[int, ...]:
    """
    Runs the SHA-1 compression function over one 64-byte block.

    :param state: the five 32-bit accumulator words
    :param block: exactly 64 bytes of message
    :returns: the updated accumulator words
    """
    if len(block) != BLOCK_SIZE:
        raise ValueError("block must be exactly {} bytes, got {}".format(BLOCK_SIZE, len(block)))

    w = _schedule(block)
    a, b, c, d, e = state

    for i in range(80):
        if i < 20:
            f = (b & c) | (~b & d)
            k = K0
        elif i < 40:
            f = b ^ c ^ d
            k = K1
        elif i < 60:
            f = (b & c) | (b & d) | (c & d)
            k = K2
        else:
            f = b ^ c ^ d
            k = K3

        tmp = (_rotl(a, 5) + f + e + w[i] + k) & MASK
        e, d, c, b, a = d, c, _rotl(b, 30), a, tmp

    return tuple((x + y) & MASK for x, y in zip(state, (a, b, c, d, e)))


class SHA1(object):
    """
    Incremental SHA-1 hasher.

    Every instance owns its accumulator and block buffer, so separate
    instances can be used from separate threads without locking.
    """

    name = "sha1"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    __slots__ = ("_state", "_buffer", "_length")

    def __init__(self, data: Optional[Union[str, bytes]] = None) -> None:
        self._state: Tuple[int, ...] = INITIAL_STATE
        self._buffer = bytearray()
        self._length = 0
        if data is not None:
            self.update(data)

    def update(self, data: Union[str, bytes]) -> "SHA1":
        """
        :param data: more input; text is hashed as UTF-8
        :returns: the hasher, for chaining
        """
        data = utils.to_bytes(data)
        if not data:
            return self
        self._length += len(data)
        self._buffer.extend(data)

        full = len(self._buffer) - len(self._buffer) % BLOCK_SIZE
        state = self._state
        for i in range(0, full, BLOCK_SIZE):
            state = compress(state, bytes(self._buffer[i : i + BLOCK_SIZE]))
        self._state = state
        del self._buffer[:full]
        return self

    def copy(self) -> "SHA1":
        h = type(self)()
        h._state = self._state
        h._buffer = bytearray(self._buffer)
        h._length = self._length
        return h

    def digest(self) -> bytes:
        """
        Pads a copy of the pending input and returns the 20-byte digest.

        The hasher itself is left untouched, so more data may be fed in
        afterwards.
        """
        state = self._state
        block = bytearray(self._buffer)
        block.append(0x80)

        # No room for the length field: flush this block and start a fresh one
        if len(block) > LENGTH_OFFSET:
            block.extend(b"\x00" * (BLOCK_SIZE - len(block)))
            state = compress(state, bytes(block))
            block = bytearray()

        block.extend(b"\x00" * (LENGTH_OFFSET - len(block)))
        block.extend(utils.int_to_bytes((self._length * 8) & 0xFFFFFFFFFFFFFFFF, 8))
        state = compress(state, bytes(block))

        return b"".join(utils.int_to_bytes(word, 4) for word in state)

    def hexdigest(self) -> str:
        return self.digest().hex()


def sha1(data: Union[str, bytes] = b"") -> bytes:
    return SHA1(data).digest()


def sha1_hex(data: Union[str, bytes] = b"") -> str:
    """
    Returns the 40-character lowercase hex SHA-1 digest of ``data``.
    """
    return SHA1(data).hexdigest()
