"""
ternary.py - Codepoint <-> Base-3 Conversion

Converts a single Unicode scalar value to and from its base-3 digit string.
The conversion is written out as an explicit division/remainder loop so that
the edge cases (zero, the largest scalar value, surrogates) are visible and
testable on their own.

    to_ternary(72)      -> "2200"
    from_ternary("2200") -> 72

The largest scalar value, U+10FFFF, needs 13 ternary digits.
"""

from typing import List

try:
    from .errors import InvalidCodepoint, InvalidDigitSequence
except ImportError:
    from errors import InvalidCodepoint, InvalidDigitSequence

MAX_SCALAR_VALUE = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF
MAX_TERNARY_DIGITS = 13

_DIGIT_VALUES = {"0": 0, "1": 1, "2": 2}


def is_scalar_value(value: int) -> bool:
    """Check if an integer is a Unicode scalar value (in range and not a surrogate)."""
    return 0 <= value <= MAX_SCALAR_VALUE and not SURROGATE_MIN <= value <= SURROGATE_MAX


def to_ternary(scalar: int) -> str:
    """
    Render a Unicode scalar value as a base-3 digit string.

    Digits are produced lowest remainder first and then reversed, so the
    result is most-significant first with no leading zeros. Zero is the
    single digit "0".

    Args:
        scalar: A Unicode scalar value, e.g. ord("H")

    Returns:
        The ternary digit string.

    Raises:
        TypeError: If scalar is not an int.
        InvalidCodepoint: If scalar is negative, above U+10FFFF, or a surrogate.
    """
    if not isinstance(scalar, int) or isinstance(scalar, bool):
        raise TypeError(f"scalar must be an int, not {type(scalar).__name__}")
    if not is_scalar_value(scalar):
        raise InvalidCodepoint(scalar)

    if scalar == 0:
        return "0"

    digits: List[str] = []
    n = scalar
    while n > 0:
        n, rem = divmod(n, 3)
        digits.append(str(rem))
    digits.reverse()
    return "".join(digits)


def from_ternary(digits: str) -> int:
    """
    Parse a base-3 digit string back into a Unicode scalar value.

    Computes sum(digit[i] * 3 ** (len - 1 - i)) by Horner accumulation.
    Leading zeros are tolerated. Accumulation stops as soon as the running
    value passes U+10FFFF, so a corrupted run of any length is rejected
    without building a huge integer.

    Raises:
        InvalidDigitSequence: If digits is empty or holds a symbol outside {0, 1, 2}.
        InvalidCodepoint: If the value is not a Unicode scalar value.
    """
    if not digits:
        raise InvalidDigitSequence(digits, "sequence is empty")

    value = 0
    for symbol in digits:
        digit = _DIGIT_VALUES.get(symbol)
        if digit is None:
            raise InvalidDigitSequence(digits, f"symbol {symbol!r} is not a ternary digit")
        value = value * 3 + digit
        if value > MAX_SCALAR_VALUE:
            # keep validating the remaining symbols before reporting the overflow
            if any(s not in _DIGIT_VALUES for s in digits):
                raise InvalidDigitSequence(digits, "sequence contains non-ternary symbols")
            raise InvalidCodepoint(value)

    if not is_scalar_value(value):
        raise InvalidCodepoint(value)
    return value
