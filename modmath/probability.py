"""Expected number of inversions in a sequence of independent uniform integers."""

from __future__ import annotations

from fractions import Fraction
from itertools import combinations


def _inversion_chance(first, second):
    """Probability that a uniform draw from 1..first exceeds one from 1..second."""
    if first <= second:
        return Fraction(first - 1, 2 * second)
    return Fraction(2 * first - second - 1, 2 * first)


def expected_inversions(ranges):
    """Exact expected inversion count when element i is uniform on 1..ranges[i]."""
    bounds = list(ranges)
    if any(r < 1 for r in bounds):
        raise ValueError("ranges must be positive integers")
    return sum(
        (_inversion_chance(a, b) for a, b in combinations(bounds, 2)),
        Fraction(0),
    )


def format_expectation(value):
    """Render a fraction as ``num/denom`` followed by its value to six decimals."""
    value = Fraction(value)
    return f"{value.numerator}/{value.denominator}\n{float(value):.6f}"