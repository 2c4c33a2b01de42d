"""Exact Lagrange interpolation over the rationals.

Shares are (x, y) integer points of an unknown polynomial with integer
coefficients. Evaluating the interpolant at x = 0 recovers the constant
term (the shared secret). All arithmetic goes through Rational, so the
result is exact and is checked to be an integer before it is returned.
"""

import logging
from typing import NamedTuple

from polysecret.errors import InsufficientShares, InvalidPoint
from polysecret.numtext import to_decimal
from polysecret.rational import Rational, ONE, ZERO

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    x: int
    y: int


def poly_eval_low(coeffs: list, x: int) -> int:
    """Evaluate polynomial at x using Horner's method.

    coeffs = [a_0, a_1, ..., a_d] (lowest degree first)
    Returns a_0 + a_1 * x + ... + a_d * x^d exactly.
    """
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def lagrange_basis_at(xs: list, i: int, target: int) -> Rational:
    """Compute Lagrange basis coefficient L_i(target).

    xs = list of x-coordinates.
    Returns prod_{j!=i} (target - x_j) / (x_i - x_j), one reduced factor
    at a time. Raises DivisionByZero if x_i repeats in xs.
    """
    xi = xs[i]
    basis = ONE
    for j, xj in enumerate(xs):
        if j == i:
            continue
        basis = basis.multiply(Rational(target - xj, xi - xj))
    return basis


def lagrange_basis_at_zero(xs: list, i: int) -> Rational:
    """Compute Lagrange basis coefficient L_i(0) = prod_{j!=i} (-x_j) / (x_i - x_j)."""
    return lagrange_basis_at(xs, i, 0)


def lagrange_interpolate(points: list, target: int) -> Rational:
    """Evaluate the interpolating polynomial at target given a set of points.

    points = [(x_0, y_0), (x_1, y_1), ...]; every point is used.
    Uses the Lagrange basis form: L(x) = sum_i y_i * prod_{j!=i} (x - x_j)/(x_i - x_j).
    """
    xs = [p[0] for p in points]
    result = ZERO
    for i, (xi, yi) in enumerate(points):
        basis = lagrange_basis_at(xs, i, target)
        result = result.add(basis.multiply(Rational(yi)))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("L_%d(%s) = %s at x=%s, running sum %s",
                         i, to_decimal(target), basis, to_decimal(xi), result)
    return result


def reconstruct(points: list, k: int) -> int:
    """Reconstruct f(0) from the first k of `points`.

    Args:
        points: Sequence of (x, y) pairs in input order.
        k: Threshold. Only points[:k] take part; any trailing points are
           ignored, not checked for consistency.

    Returns:
        The constant term as an int.

    Raises:
        InsufficientShares: k < 1 or fewer than k points.
        InvalidPoint: a chosen coordinate is not an int.
        DivisionByZero: two of the chosen points share an x.
        NonIntegralResult: the chosen points don't fit a polynomial with
            an integer constant term.
    """
    if k < 1 or len(points) < k:
        raise InsufficientShares(k, len(points))

    chosen = []
    for i, (x, y) in enumerate(points[:k]):
        for v in (x, y):
            if not isinstance(v, int) or isinstance(v, bool):
                raise InvalidPoint(i, v)
        chosen.append(Point(x, y))
    if len(points) > k:
        logger.debug("ignoring %d share(s) beyond threshold k=%d",
                     len(points) - k, k)

    return lagrange_interpolate(chosen, 0).to_int()
