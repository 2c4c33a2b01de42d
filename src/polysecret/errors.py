"""Error taxonomy for polysecret.

Every error derives from PolysecretError and from the builtin it refines,
so `except ValueError` / `except ZeroDivisionError` keep working for
callers that don't know about this package.

Errors carrying big ints keep them as ints and only render them in
__str__, through numtext.to_decimal.
"""

from polysecret.numtext import to_decimal


class PolysecretError(Exception):
    """Base class for all reconstruction failures."""


class InvalidDigit(PolysecretError, ValueError):
    """A character outside [0-9a-z] appeared in a digit string."""

    def __init__(self, char: str, radix: int, position: int = None):
        self.char = char
        self.radix = radix
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid digit {char!r}{where} for base {radix}")


class DigitOutOfRange(PolysecretError, ValueError):
    """A valid alphanumeric digit whose value is >= the radix."""

    def __init__(self, char: str, value: int, radix: int, position: int = None):
        self.char = char
        self.value = value
        self.radix = radix
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Digit {char!r}{where} (value {value}) out of range for base {radix}"
        )


class InvalidRadix(PolysecretError, ValueError):
    def __init__(self, radix, reason: str = "must be an integer in [2, 36]"):
        self.radix = radix
        self.reason = reason
        super().__init__(radix, reason)

    def __str__(self):
        radix = self.radix
        shown = to_decimal(radix) if type(radix) is int else repr(radix)
        return f"Invalid base {shown}: {self.reason}"


class DivisionByZero(PolysecretError, ZeroDivisionError):
    """A Rational was built with a zero denominator.

    During interpolation this means two chosen shares have the same x.
    """

    def __init__(self, numerator: int):
        self.numerator = numerator
        super().__init__(numerator)

    def __str__(self):
        return f"Denominator cannot be zero (numerator {to_decimal(self.numerator)})"


class NonIntegralResult(PolysecretError, ArithmeticError):
    """The reconstructed value does not reduce to an integer."""

    def __init__(self, numerator: int, denominator: int):
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(numerator, denominator)

    def __str__(self):
        return (f"Result is not an integer: "
                f"{to_decimal(self.numerator)}/{to_decimal(self.denominator)}")


class InsufficientShares(PolysecretError, ValueError):
    def __init__(self, k: int, available: int):
        self.k = k
        self.available = available
        super().__init__(k, available)

    def __str__(self):
        return f"Need k={to_decimal(self.k)} shares (k >= 1), got {self.available}"


class InvalidPoint(PolysecretError, TypeError):
    """A point coordinate is not an int. Coordinates are never coerced."""

    def __init__(self, index: int, value):
        self.index = index
        self.value = value
        super().__init__(
            f"Point {index} has non-integer coordinate of type "
            f"{type(value).__name__}")


class InvalidTestCase(PolysecretError, ValueError):
    """The case structure is malformed (missing keys, bad labels, ...)."""
