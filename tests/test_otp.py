import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from authcode import HOTP, OTP, generate_code
from authcode.otp import dynamic_truncate, format_code

RFC4226_KEY = b"12345678901234567890"
RFC4226_KEY_B32 = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"

# RFC 4226, Appendix D
RFC4226_CODES = [
    "755224",
    "287082",
    "359152",
    "969429",
    "338314",
    "254676",
    "287922",
    "162583",
    "399871",
    "520489",
]


@pytest.mark.parametrize("counter,expected", list(enumerate(RFC4226_CODES)))
def test_rfc4226_vectors(counter, expected):
    assert generate_code(RFC4226_KEY, counter) == expected
    assert HOTP(RFC4226_KEY).at(counter) == expected


def test_end_to_end_text_key():
    assert generate_code("12345678901234567890", 0) == "755224"


@pytest.mark.parametrize(
    "hmac_hex,expected",
    [
        ("cc93cf18508d94934c64b65d8ba7667fb7cde4b0", 1284755224),
        ("75a48a19d4cbe100644e8ac1397eea747a2d33ab", 1094287082),
    ],
)
def test_dynamic_truncate(hmac_hex, expected):
    assert dynamic_truncate(bytes.fromhex(hmac_hex)) == expected


def test_dynamic_truncate_clears_sign_bit():
    # offset 0 via the last nibble, first four bytes all 0xff
    value = dynamic_truncate(b"\xff" * 19 + b"\xf0")
    assert value == 0x7FFFFFFF


def test_dynamic_truncate_rejects_short_mac():
    with pytest.raises(ValueError):
        dynamic_truncate(b"\x00" * 19)


def test_format_code():
    assert format_code(1284755224, 6) == "755224"
    assert format_code(4223, 6) == "004223"
    assert format_code(0, 6) == "000000"
    assert format_code(1284755224, 10) == "1284755224"


def test_short_values_are_left_padded():
    # counter 7 truncates to 82162583
    assert HOTP(RFC4226_KEY, digits=8).at(7) == "82162583"
    assert HOTP(RFC4226_KEY, digits=10).at(7) == "0082162583"


@pytest.mark.parametrize("digits", [0, -1, 11, "6", 6.0, True])
def test_invalid_digits_rejected_at_construction(digits):
    with pytest.raises(ValueError):
        OTP(RFC4226_KEY, digits=digits)


@pytest.mark.parametrize("digits", [1, 6, 8, 10])
def test_code_format(digits):
    otp = OTP(RFC4226_KEY, digits=digits)
    for counter in range(50):
        code = otp.generate_otp(counter)
        assert len(code) == digits
        assert code.isdigit()


def test_counter_bounds():
    otp = OTP(RFC4226_KEY)
    with pytest.raises(ValueError):
        otp.generate_otp(-1)
    with pytest.raises(ValueError):
        otp.generate_otp(2**64)
    assert len(otp.generate_otp(2**64 - 1)) == 6


def test_counter_encoding_uses_full_eight_bytes():
    assert OTP.int_to_bytestring(0) == b"\x00" * 8
    assert OTP.int_to_bytestring(1) == b"\x00" * 7 + b"\x01"
    assert OTP.int_to_bytestring(0xFFFFFFFF) == b"\x00" * 4 + b"\xff" * 4


def test_adjacent_counters_rarely_collide():
    otp = OTP(RFC4226_KEY)
    codes = [otp.generate_otp(c) for c in range(200)]
    collisions = sum(1 for a, b in zip(codes, codes[1:]) if a == b)
    assert collisions <= 1


def test_from_base32():
    assert HOTP.from_base32(RFC4226_KEY_B32).at(0) == "755224"
    assert HOTP.from_base32(RFC4226_KEY_B32.lower(), digits=8).at(1) == "94287082"


def test_from_base32_invalid():
    with pytest.raises(ValueError):
        HOTP.from_base32("not base32!")


def test_hotp_initial_count():
    hotp = HOTP(RFC4226_KEY, initial_count=5)
    assert hotp.at(0) == "254676"
    assert hotp.at(4) == "520489"
    with pytest.raises(ValueError):
        HOTP(RFC4226_KEY, initial_count=-1)


@pytest.mark.parametrize("initial_count", [1.0, 2.5, True, "3", None])
def test_hotp_initial_count_must_be_integer(initial_count):
    with pytest.raises(ValueError):
        HOTP(RFC4226_KEY, initial_count=initial_count)


def test_hotp_verify():
    hotp = HOTP(RFC4226_KEY)
    assert hotp.verify("755224", 0)
    assert hotp.verify(755224, 0)
    assert not hotp.verify("755224", 1)
    assert not hotp.verify("000000", 0)
    # Fullwidth digits normalise to ASCII
    assert hotp.verify("７５５２２４", 0)


def test_concurrent_generation_is_deterministic():
    otp = OTP(RFC4226_KEY)
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(otp.generate_otp, list(range(10)) * 5))
    assert results == RFC4226_CODES * 5


def test_debug_log_never_contains_code(caplog):
    with caplog.at_level(logging.DEBUG, logger="authcode"):
        code = generate_code(RFC4226_KEY, 0)
    assert "counter=0" in caplog.text
    assert code not in caplog.text
