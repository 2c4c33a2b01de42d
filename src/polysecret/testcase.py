"""Typed test-case records and the JSON-structure loader.

A case on the wire looks like:

    {"keys": {"n": 4, "k": 3},
     "1": {"base": "10", "value": "4"},
     "2": {"base": "2", "value": "111"},
     ...}

Every key except "keys" names an x-coordinate. Key order is kept: when
more than k shares are supplied, the first k in input order are used.
"""

from dataclasses import dataclass
from typing import Optional

from polysecret.digits import parse, parse_radix
from polysecret.errors import InvalidTestCase
from polysecret.interpolate import Point, reconstruct
from polysecret.numtext import is_decimal_text, to_decimal

KEYS_FIELD = 'keys'


def _parse_int(value, what: str) -> int:
    """int, or a plain ASCII decimal string with an optional leading '-'."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip()
        if is_decimal_text(text, signed=True):
            magnitude = parse(text.lstrip('-'), 10)
            return -magnitude if text.startswith('-') else magnitude
        raise InvalidTestCase(f"{what} must be an integer, got {value!r}")
    raise InvalidTestCase(
        f"{what} must be an integer, got {type(value).__name__}")


@dataclass(frozen=True)
class ShareEntry:
    """One share: x label plus its encoded y value."""
    label: str
    x: int
    radix: int
    digits: str

    def decode(self) -> Point:
        return Point(self.x, parse(self.digits, self.radix))


@dataclass(frozen=True)
class TestCase:
    """Threshold k plus the first k shares in input order.

    Shares past the threshold are kept verbatim in `extra` and never
    validated or decoded.
    """
    __test__ = False  # not a pytest class

    k: int
    shares: tuple
    n: Optional[int] = None
    extra: tuple = ()

    @classmethod
    def from_dict(cls, data: dict) -> 'TestCase':
        if not isinstance(data, dict):
            raise InvalidTestCase(
                f"Test case must be an object, got {type(data).__name__}")

        keys = data.get(KEYS_FIELD)
        if not isinstance(keys, dict) or 'k' not in keys:
            raise InvalidTestCase("Missing 'keys.k' threshold")
        k = _parse_int(keys['k'], "keys.k")
        if k < 1:
            raise InvalidTestCase(f"keys.k must be >= 1, got {to_decimal(k)}")
        n = _parse_int(keys['n'], "keys.n") if 'n' in keys else None

        entries = [(label, entry) for label, entry in data.items()
                   if label != KEYS_FIELD]
        shares = tuple(_share_entry(label, entry) for label, entry in entries[:k])
        return cls(k=k, shares=shares, n=n, extra=tuple(entries[k:]))

    def points(self) -> list:
        """Decode the chosen shares into Points, in input order."""
        return [s.decode() for s in self.shares]


def _share_entry(label, entry) -> ShareEntry:
    x = _parse_int(label, "Share label")
    if not isinstance(entry, dict) or 'base' not in entry or 'value' not in entry:
        raise InvalidTestCase(f"Share {label!r} needs 'base' and 'value' fields")
    if not isinstance(entry['value'], str):
        raise InvalidTestCase(
            f"Share {label!r} value must be a string, "
            f"got {type(entry['value']).__name__}")
    return ShareEntry(label, x, parse_radix(entry['base']), entry['value'])


def compute_constant_term(testcase) -> int:
    """Reconstruct f(0) for one case (a TestCase or its raw mapping)."""
    if not isinstance(testcase, TestCase):
        testcase = TestCase.from_dict(testcase)
    return reconstruct(testcase.points(), testcase.k)
