"""Orientation predicate for points relative to a directed segment."""

from __future__ import annotations

import math
import sys
from fractions import Fraction

from .types import Coordinate, Point, Side

# Half machine epsilon (2**-53) and the orient2d forward error bound.
_EPSILON = sys.float_info.epsilon * 0.5
_CCW_ERRBOUND = (3.0 + 16.0 * _EPSILON) * _EPSILON

# Magnitudes below this may hold subnormal products.
_SAFE_MAGNITUDE = sys.float_info.min / _EPSILON


def _sign(value: Coordinate) -> Side:
    if value > 0:
        return Side.LEFT
    if value < 0:
        return Side.RIGHT
    return Side.COLLINEAR


def _uncertain(det: float, lhs: float, rhs: float) -> bool:
    """True when rounding of ``lhs - rhs`` may have changed the sign of ``det``."""

    magnitude = abs(lhs) + abs(rhs)
    if not math.isfinite(magnitude):
        return False
    if magnitude < _SAFE_MAGNITUDE:
        return True
    return -_CCW_ERRBOUND * magnitude <= det <= _CCW_ERRBOUND * magnitude


def side_value(p: Point, q: Point, r: Point) -> Coordinate:
    """Return the cross product ``(q - p) x (r - p)``.

    Positive when ``r`` is left of the directed line ``p -> q``.
    """

    return (q[0] - p[0]) * (r[1] - p[1]) - (q[1] - p[1]) * (r[0] - p[0])


def exact_side_value(p: Point, q: Point, r: Point) -> Fraction:
    return exact_cross_product(p, q, p, r)


def exact_cross_product(p1: Point, p2: Point, q1: Point, q2: Point) -> Fraction:
    dx_p = Fraction(p2[0]) - Fraction(p1[0])
    dy_p = Fraction(p2[1]) - Fraction(p1[1])
    dx_q = Fraction(q2[0]) - Fraction(q1[0])
    dy_q = Fraction(q2[1]) - Fraction(q1[1])
    return dx_p * dy_q - dy_p * dx_q


def cross_product(p1: Point, p2: Point, q1: Point, q2: Point, *, exact: bool = True) -> Coordinate:
    """Return ``(p2 - p1) x (q2 - q1)``.

    Float results whose sign rounding could have flipped are replaced by the
    exact rational value when ``exact`` is set, so the result agrees with
    :func:`side_by_triangle` on the same points.
    """

    lhs = (p2[0] - p1[0]) * (q2[1] - q1[1])
    rhs = (p2[1] - p1[1]) * (q2[0] - q1[0])
    det = lhs - rhs
    if exact and isinstance(det, float) and _uncertain(det, lhs, rhs):
        return exact_cross_product(p1, p2, q1, q2)
    return det


def side_by_triangle(p: Point, q: Point, r: Point, *, exact: bool = True) -> Side:
    """Classify ``r`` as left of, right of, or on the line through ``p`` and ``q``.

    Integer and rational coordinates are evaluated exactly. For floats the
    determinant is trusted only when it exceeds the rounding error bound of
    its two products; otherwise, and when ``exact`` is set, the sign is
    recomputed with rationals.
    """

    lhs = (q[0] - p[0]) * (r[1] - p[1])
    rhs = (q[1] - p[1]) * (r[0] - p[0])
    det = lhs - rhs
    if exact and isinstance(det, float) and _uncertain(det, lhs, rhs):
        return _sign(exact_side_value(p, q, r))
    return _sign(det)
