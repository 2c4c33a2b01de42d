"""Digit-string decoding in radix 2..36.

Shares are encoded as unsigned magnitudes in an arbitrary base. Decoding
is plain Horner accumulation, most-significant digit first, over Python
ints so no width limit applies.
"""

from polysecret.errors import InvalidDigit, DigitOutOfRange, InvalidRadix
from polysecret.numtext import is_decimal_text

MIN_RADIX = 2
MAX_RADIX = 36


def parse_radix(base) -> int:
    """Coerce a base given as int or decimal string to a validated radix.

    This is the only place a radix is converted; everything downstream
    takes a plain int in [MIN_RADIX, MAX_RADIX].
    """
    if isinstance(base, bool):
        raise InvalidRadix(base, "booleans are not a base")
    if isinstance(base, str):
        text = base.strip()
        if not is_decimal_text(text):
            raise InvalidRadix(base, "not a decimal integer")
        radix = parse(text, 10)
    elif isinstance(base, int):
        radix = base
    else:
        raise InvalidRadix(base, f"unsupported type {type(base).__name__}")

    if not (MIN_RADIX <= radix <= MAX_RADIX):
        raise InvalidRadix(base, f"must be in [{MIN_RADIX}, {MAX_RADIX}]")
    return radix


def digit_value(ch: str, radix: int = MAX_RADIX, position: int = None) -> int:
    """Value of a single alphanumeric character: '0'-'9' -> 0-9, 'a'-'z' -> 10-35."""
    if len(ch) != 1 or not ch.isascii():
        raise InvalidDigit(ch, radix, position)
    c = ch.lower()
    if '0' <= c <= '9':
        return ord(c) - ord('0')
    if 'a' <= c <= 'z':
        return ord(c) - ord('a') + 10
    raise InvalidDigit(ch, radix, position)


def parse(digits: str, radix: int) -> int:
    """Decode `digits` in base `radix` into a non-negative int.

    Raises:
        InvalidRadix: radix outside [2, 36].
        InvalidDigit: a character is not in [0-9a-zA-Z].
        DigitOutOfRange: a character's value is >= radix.
    """
    if isinstance(radix, bool) or not (MIN_RADIX <= radix <= MAX_RADIX):
        raise InvalidRadix(radix)

    result = 0
    for pos, ch in enumerate(digits):
        d = digit_value(ch, radix, pos)
        if d >= radix:
            raise DigitOutOfRange(ch, d, radix, pos)
        result = result * radix + d
    return result
