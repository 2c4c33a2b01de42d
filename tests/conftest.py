"""Shared fixtures for polysecret tests."""

import random
import pytest
from polysecret.interpolate import Point, poly_eval_low


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def make_shares(rng):
    """Build shares of a random integer polynomial with a chosen secret.

    Returns a function (secret, k, xs) -> list of Points on a degree-(k-1)
    polynomial with constant term `secret`.
    """
    def _make(secret: int, k: int, xs: list) -> list:
        coeffs = [secret] + [rng.randint(-10**20, 10**20) for _ in range(k - 1)]
        return [Point(x, poly_eval_low(coeffs, x)) for x in xs]
    return _make


@pytest.fixture
def sample_case():
    """k=3 over f(x) = x^2 + x + 3, shares in mixed bases plus one extra."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "5"},
        "2": {"base": "2", "value": "1001"},
        "3": {"base": 16, "value": "F"},
        "6": {"base": "4", "value": "231"},
    }
