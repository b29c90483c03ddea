"""
Arbitrary-base digit strings <-> integers.

Digits are drawn from 0-9a-z (case-insensitive), so bases 2 through 36
are supported. Decoding is exact: values of any length decode to the
precise integer, never a float approximation.
"""

from .errors import InvalidBaseError, InvalidDigitError

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = 36


def check_base(base) -> int:
    """Return base as an int, or raise InvalidBaseError."""
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBaseError(base)
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBaseError(base)
    return base


def decode(value: str, base: int) -> int:
    """
    Convert a digit string in the given base to an integer.

    Args:
        value: Non-empty digit string, e.g. "111" or "1A3f"
        base: Integer base in [2, 36]

    Returns:
        The decoded integer

    Raises:
        InvalidBaseError: If base is out of range
        InvalidDigitError: If value is empty or holds a digit not valid for base
    """
    base = check_base(base)
    if not value:
        raise InvalidDigitError('', base, f"Empty value for base {base}")

    result = 0
    power = 0
    # Least significant digit first
    for char in reversed(value):
        digit = char.lower()
        digit_value = DIGITS.find(digit)
        if digit_value == -1 or digit_value >= base:
            raise InvalidDigitError(digit, base)
        result += digit_value * base ** power
        power += 1

    return result


def encode(number: int, base: int) -> str:
    """Inverse of decode() for non-negative integers."""
    base = check_base(base)
    if number < 0:
        raise ValueError(f"Cannot encode negative number {number}")
    if number == 0:
        return '0'

    digits = []
    while number:
        number, rem = divmod(number, base)
        digits.append(DIGITS[rem])
    return ''.join(reversed(digits))
