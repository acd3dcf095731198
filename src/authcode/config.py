# Initialisation-time settings. Generator and verifier must agree on these.

DEFAULT_DIGITS = 6
# 2**31 - 1 has ten decimal digits
MAX_DIGITS = 10
DEFAULT_INTERVAL = 30
COUNTER_BYTES = 8


def validate_digits(digits: int) -> int:
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise ValueError("digits must be an integer")
    if digits < 1:
        raise ValueError("digits must be at least 1")
    if digits > MAX_DIGITS:
        raise ValueError("digits must be no greater than {}".format(MAX_DIGITS))
    return digits


def validate_interval(interval: int) -> int:
    if isinstance(interval, bool) or not isinstance(interval, int):
        raise ValueError("interval must be an integer")
    if interval < 1:
        raise ValueError("interval must be a positive number of seconds")
    return interval


def validate_counter(counter: int, name: str = "counter") -> int:
    if isinstance(counter, bool) or not isinstance(counter, int):
        raise ValueError("{} must be an integer".format(name))
    if counter < 0:
        raise ValueError("{} must be a non-negative integer".format(name))
    return counter
