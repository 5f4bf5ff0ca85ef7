"""
Radix Decoding
Turn a share's digit string in base 2..16 into an exact integer.

Digits are read big-endian: each character shifts the running value one place
left in the given base and adds its own value. Overflow against the
configured integer range is detected before each step, never after.
"""

from shamir_recover.errors import EmptyValue, InvalidBase, InvalidDigit, NumericOverflow
from shamir_recover.precision import IntegerRange, UNBOUNDED

MIN_BASE = 2
MAX_BASE = 16

_DIGITS = "0123456789abcdef"


def digit_value(char: str) -> int:
    """
    Map a single character to its digit value.

    '0'-'9' map to 0-9 and ASCII letters (either case) to 10 and up, so 'g'
    is 16 and invalid in every supported base. Anything else returns -1.
    """
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    lower = char.lower()
    if len(lower) == 1 and "a" <= lower <= "z":
        return ord(lower) - ord("a") + 10
    return -1


def check_base(base: int) -> None:
    """Raise InvalidBase unless MIN_BASE <= base <= MAX_BASE."""
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(base)
    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidBase(base)


def decode(digits: str, base: int, int_range: IntegerRange = UNBOUNDED) -> int:
    """
    Decode a digit string in the given base.

    Args:
        digits: Non-empty string of digits, letters case-insensitive.
        base: Radix between 2 and 16.
        int_range: Range the result must fit. Unbounded by default.

    Returns:
        The decoded non-negative integer.

    Raises:
        InvalidBase: If base is outside [2, 16].
        EmptyValue: If digits is empty.
        InvalidDigit: If a character is not a digit of this base.
        NumericOverflow: If the value would leave int_range.
    """
    check_base(base)
    if not digits:
        raise EmptyValue()

    limit = int_range.max
    value = 0
    for char in digits:
        digit = digit_value(char)
        if digit < 0 or digit >= base:
            raise InvalidDigit(char, base)
        if limit is not None and value > (limit - digit) // base:
            raise NumericOverflow(digits, base)
        value = value * base + digit
    return value


def encode(value: int, base: int) -> str:
    """Render a non-negative integer as lowercase digits in base 2..16."""
    check_base(base)
    if value < 0:
        raise ValueError("Only non-negative values can be encoded")
    if value == 0:
        return "0"
    out = []
    while value:
        value, digit = divmod(value, base)
        out.append(_DIGITS[digit])
    return "".join(reversed(out))
