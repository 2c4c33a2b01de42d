"""Exact rational arithmetic over Python ints.

Every Rational is stored in lowest terms with a positive denominator.
Reduction happens on every construction so chained products during
interpolation never carry common factors forward.
"""

from polysecret.errors import DivisionByZero, NonIntegralResult
from polysecret.numtext import to_decimal


def gcd(a: int, b: int) -> int:
    """Greatest common divisor via the Euclidean algorithm.

    Sign-independent: works on absolute values. gcd(0, 0) == 0.
    """
    a = -a if a < 0 else a
    b = -b if b < 0 else b
    while b != 0:
        a, b = b, a % b
    return a


class Rational:
    """Immutable fraction n/d with d > 0 and gcd(|n|, d) == 1."""

    __slots__ = ('_n', '_d')

    def __init__(self, numerator: int, denominator: int = 1):
        if denominator == 0:
            raise DivisionByZero(numerator)
        if denominator < 0:
            numerator = -numerator
            denominator = -denominator
        g = gcd(numerator, denominator)
        # g >= 1 here since denominator > 0
        self._n = numerator // g
        self._d = denominator // g

    @property
    def numerator(self) -> int:
        return self._n

    @property
    def denominator(self) -> int:
        return self._d

    def add(self, other: 'Rational') -> 'Rational':
        """a/b + c/d = (ad + cb) / bd."""
        return Rational(self._n * other._d + other._n * self._d,
                        self._d * other._d)

    def multiply(self, other: 'Rational') -> 'Rational':
        """(a/b) * (c/d) = ac / bd."""
        return Rational(self._n * other._n, self._d * other._d)

    def negate(self) -> 'Rational':
        return Rational(-self._n, self._d)

    def is_integer(self) -> bool:
        return self._d == 1

    def to_int(self) -> int:
        """Narrow to int. Never rounds: a non-unit denominator is an error."""
        if self._d != 1:
            raise NonIntegralResult(self._n, self._d)
        return self._n

    def __add__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            other = Rational(other)
        if not isinstance(other, Rational):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __mul__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            other = Rational(other)
        if not isinstance(other, Rational):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __neg__(self):
        return self.negate()

    def __eq__(self, other):
        if isinstance(other, Rational):
            return self._n == other._n and self._d == other._d
        if isinstance(other, int):
            return self._d == 1 and self._n == other
        return NotImplemented

    def __hash__(self):
        # must agree with int hashing since Rational(3) == 3
        if self._d == 1:
            return hash(self._n)
        return hash((self._n, self._d))

    def __setattr__(self, name, value):
        if hasattr(self, '_d'):
            raise AttributeError("Rational is immutable")
        object.__setattr__(self, name, value)

    def __repr__(self):
        return f"Rational({to_decimal(self._n)}, {to_decimal(self._d)})"

    def __str__(self):
        n = to_decimal(self._n)
        return n if self._d == 1 else f"{n}/{to_decimal(self._d)}"


ZERO = Rational(0)
ONE = Rational(1)


def add(a: Rational, b: Rational) -> Rational:
    return a.add(b)


def multiply(a: Rational, b: Rational) -> Rational:
    return a.multiply(b)
