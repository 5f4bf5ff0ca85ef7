"""
Lagrange Interpolation at Zero
Recover f(0) from k points on a polynomial of degree < k.

Reconstruction runs over the ordinary integers, not a prime field, so the
basis coefficients are genuine fractions. They are accumulated exactly with
fractions.Fraction and the result is only accepted if it is a whole number.
"""

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Sequence

from shamir_recover.errors import (
    DegenerateInterpolation,
    InexactResult,
    InsufficientPoints,
    ResultOverflow,
)
from shamir_recover.precision import IntegerRange, UNBOUNDED


@dataclass(frozen=True, order=True)
class Point:
    """A decoded share: x is the share index, y the decoded value."""
    x: int
    y: int


def lagrange_basis_at_zero(xs: Sequence[int]) -> list[Fraction]:
    """
    Compute L_i(0) = prod_{j != i} (-x_j / (x_i - x_j)) for every x_i.

    Raises:
        DegenerateInterpolation: If two x-coordinates are equal.
    """
    basis = []
    for i, xi in enumerate(xs):
        numerator = 1
        denominator = 1
        for j, xj in enumerate(xs):
            if i == j:
                continue
            if xi == xj:
                raise DegenerateInterpolation(xi)
            numerator *= -xj
            denominator *= xi - xj
        basis.append(Fraction(numerator, denominator))
    return basis


def round_half_away(value: Fraction) -> int:
    """Round to the nearest integer, halves away from zero (C llround)."""
    magnitude = math.floor(abs(value) + Fraction(1, 2))
    return -magnitude if value < 0 else magnitude


def interpolate(
    points: Sequence[Point],
    k: int,
    int_range: IntegerRange = UNBOUNDED,
    strict: bool = True,
) -> int:
    """
    Evaluate the interpolating polynomial of the first k points at x=0.

    Points past the first k are ignored, so callers may oversupply. The
    caller is responsible for ordering; sort by x first for a deterministic
    choice.

    Args:
        points: Points in the order they should be considered.
        k: Threshold — how many points define the polynomial.
        int_range: Range the secret must fit. Unbounded by default.
        strict: Reject a non-integer result instead of rounding it.

    Returns:
        The secret, f(0).

    Raises:
        InsufficientPoints: If k < 1 or fewer than k points are given.
        DegenerateInterpolation: If two of the chosen points share an x.
        InexactResult: If strict and f(0) is not an integer.
        ResultOverflow: If the secret does not fit int_range.
    """
    if k < 1 or len(points) < k:
        raise InsufficientPoints(k, len(points))

    chosen = points[:k]
    basis = lagrange_basis_at_zero([p.x for p in chosen])

    total = Fraction(0)
    for point, coefficient in zip(chosen, basis):
        total += point.y * coefficient

    if total.denominator != 1:
        if strict:
            raise InexactResult(total)
        secret = round_half_away(total)
    else:
        secret = total.numerator

    if not int_range.contains(secret):
        raise ResultOverflow(secret)
    return secret
