"""Decimal text for arbitrarily large ints.

Since 3.11 `str(n)` refuses ints past sys.get_int_max_str_digits()
(4300 by default). Secrets and fractions here can be far larger, so
anything that renders them goes through to_decimal, which converts in
fixed-size chunks that each stay under that limit.
"""

_CHUNK_DIGITS = 1000
_CHUNK = 10 ** _CHUNK_DIGITS


def to_decimal(n: int) -> str:
    """Exact base-10 text of n, independent of the interpreter's digit limit."""
    if -_CHUNK < n < _CHUNK:
        return str(n)

    sign = '-' if n < 0 else ''
    n = -n if n < 0 else n
    chunks = []
    while n:
        n, r = divmod(n, _CHUNK)
        chunks.append(r)
    # most significant chunk unpadded, the rest zero-filled to full width
    head = str(chunks[-1])
    tail = ''.join(str(c).zfill(_CHUNK_DIGITS) for c in reversed(chunks[:-1]))
    return sign + head + tail


def is_decimal_text(text: str, signed: bool = False) -> bool:
    """True for plain ASCII decimal digits, optionally with one leading '-'.

    Rejects what int() would otherwise accept: '+', '_' separators,
    and non-ASCII digits.
    """
    if signed and text.startswith('-'):
        text = text[1:]
    return bool(text) and text.isascii() and text.isdigit()
