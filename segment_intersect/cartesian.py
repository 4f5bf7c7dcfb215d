"""Relate two cartesian segments robustly.

The classification (disjoint, degenerate, crossing, collinear) is decided on
robust coordinates supplied by a :class:`~segment_intersect.rescale.RobustnessPolicy`.
Reported magnitudes, the deltas and the crossing ratio ``r``, are computed on
the original coordinates. See http://mathworld.wolfram.com/Line-LineIntersection.html
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional, Tuple, Type, TypeVar

from .config import RelateConfig, current_relate_config
from .logging_utils import debug_log_call
from .policies import (
    IntersectionPoints,
    IntersectionPointsPolicy,
    RelationKind,
    RelationPolicy,
    ResultPolicy,
    SegmentRelation,
)
from .ratio import SegmentRatio
from .rescale import NoRescalePolicy, RobustnessPolicy
from .side import cross_product, side_by_triangle
from .types import Coordinate, IntersectionInfo, RobustnessEvent, RobustPoint, SegmentLike, SideInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")

DiagnosticsHook = Callable[[RobustnessEvent], None]
RobustPoints = Tuple[RobustPoint, RobustPoint, RobustPoint, RobustPoint]

COLLINEAR_FALLBACK = "collinear_fallback"
ZERO_DETERMINANT = "zero_determinant"
RATIO_CLAMPED = "ratio_clamped"


def log_robustness_event(event: RobustnessEvent) -> None:
    """Default diagnostics hook: report the event through :mod:`logging`."""

    if event.kind == RATIO_CLAMPED:
        logger.debug("Robustness issue: %s", event)
    else:
        logger.warning("Robustness issue: %s", event)


def _report(hook: Optional[DiagnosticsHook], event: RobustnessEvent) -> None:
    if hook is None:
        return
    try:
        hook(event)
    except Exception:
        logger.exception("Diagnostics hook failed while reporting %s", event.kind)


def _determinant(a: Coordinate, b: Coordinate, c: Coordinate, d: Coordinate) -> Coordinate:
    return a * d - b * c


def _cramers_rule(
    dx_a: Coordinate,
    dy_a: Coordinate,
    dx_b: Coordinate,
    dy_b: Coordinate,
    wx: Coordinate,
    wy: Coordinate,
) -> Tuple[Coordinate, Coordinate]:
    """Return ``(d, da)``; the segments meet at ``da / d`` along the first one.

    ``d == 0`` means the supporting lines are parallel.
    """

    return _determinant(dx_a, dy_a, dx_b, dy_b), _determinant(dx_b, dy_b, wx, wy)


def _clamp_ratio(r):
    if r < 0:
        return 0.0
    if r > 1:
        return 1.0
    return r


def _point_within(
    point: RobustPoint,
    start: RobustPoint,
    end: RobustPoint,
    ratio_type: Type[SegmentRatio],
) -> bool:
    """Check a point known to be on the line ``start -> end`` against its extent."""

    axis = 0 if abs(end.x - start.x) >= abs(end.y - start.y) else 1
    return ratio_type(point[axis] - start[axis], end[axis] - start[axis]).on_segment()


def _relate_collinear(
    a: SegmentLike,
    b: SegmentLike,
    policy: ResultPolicy[T],
    ratio_type: Type[SegmentRatio],
    oa_1: Coordinate,
    oa_2: Coordinate,
    ob_1: Coordinate,
    ob_2: Coordinate,
) -> T:
    # Lengths keep their sign: ratios stay relative to each segment's direction.
    length_a = oa_2 - oa_1
    length_b = ob_2 - ob_1

    ra_from = ratio_type(oa_1 - ob_1, length_b)
    ra_to = ratio_type(oa_2 - ob_1, length_b)
    rb_from = ratio_type(ob_1 - oa_1, length_a)
    rb_to = ratio_type(ob_2 - oa_1, length_a)

    if (rb_from.left() and rb_to.left()) or (rb_from.right() and rb_to.right()):
        return policy.disjoint()

    return policy.segments_collinear(a, b, ra_from, ra_to, rb_from, rb_to)


def relate_segments(
    a: SegmentLike,
    b: SegmentLike,
    policy: ResultPolicy[T],
    robust_policy: Optional[RobustnessPolicy] = None,
    *,
    robust_points: Optional[RobustPoints] = None,
    diagnostics: Optional[DiagnosticsHook] = None,
    config: Optional[RelateConfig] = None,
) -> T:
    """Relate segments ``a`` and ``b`` and return what ``policy`` builds.

    ``robust_points`` may carry the already converted endpoints
    ``(a0, a1, b0, b1)``; otherwise they are produced by ``robust_policy``,
    which defaults to :class:`NoRescalePolicy`. Recovered numerical anomalies
    are passed to ``diagnostics`` (default :func:`log_robustness_event`) and
    never change the outcome.

    A point segment lying on the other segment's line but beyond its ends is
    reported through ``policy.disjoint()``. Boost.Geometry's cartesian
    strategy hands every such point to ``policy.degenerate`` instead.
    """

    cfg = config or current_relate_config()
    if robust_policy is None:
        robust_policy = NoRescalePolicy()
    hook: Optional[DiagnosticsHook] = None
    if cfg.report_robustness:
        hook = diagnostics or log_robustness_event

    if robust_points is None:
        robust_a1 = robust_policy.to_robust(a[0])
        robust_a2 = robust_policy.to_robust(a[1])
        robust_b1 = robust_policy.to_robust(b[0])
        robust_b2 = robust_policy.to_robust(b[1])
    else:
        robust_a1, robust_a2, robust_b1, robust_b2 = robust_points
    ratio_type = robust_policy.ratio_type
    exact = cfg.exact_orientation

    a_is_point = robust_a1 == robust_a2
    b_is_point = robust_b1 == robust_b2

    if a_is_point and b_is_point:
        if robust_a1 == robust_b1:
            return policy.degenerate(a, True)
        return policy.disjoint()

    sides = SideInfo()
    sides.set(
        0,
        side_by_triangle(robust_b1, robust_b2, robust_a1, exact=exact),
        side_by_triangle(robust_b1, robust_b2, robust_a2, exact=exact),
    )
    sides.set(
        1,
        side_by_triangle(robust_a1, robust_a2, robust_b1, exact=exact),
        side_by_triangle(robust_a1, robust_a2, robust_b2, exact=exact),
    )

    if sides.same(0) or sides.same(1):
        return policy.disjoint()

    # A single point surviving the side test lies on the other segment's line.
    if a_is_point:
        if not _point_within(robust_a1, robust_b1, robust_b2, ratio_type):
            return policy.disjoint()
        return policy.degenerate(a, True)
    if b_is_point:
        if not _point_within(robust_b1, robust_a1, robust_a2, ratio_type):
            return policy.disjoint()
        return policy.degenerate(b, False)

    collinear = sides.collinear()

    robust_dx_a = robust_a2.x - robust_a1.x
    robust_dy_a = robust_a2.y - robust_a1.y
    robust_dx_b = robust_b2.x - robust_b1.x
    robust_dy_b = robust_b2.y - robust_b1.y

    if not collinear:
        info = IntersectionInfo(
            dx_a=a[1][0] - a[0][0],
            dy_a=a[1][1] - a[0][1],
            dx_b=b[1][0] - b[0][0],
            dy_b=b[1][1] - b[0][1],
        )
        d, da = _cramers_rule(
            info.dx_a, info.dy_a, info.dx_b, info.dy_b,
            a[0][0] - b[0][0], a[0][1] - b[0][1],
        )
        # Same precision as the side tests, so a zero here is a real disagreement.
        robust_da0 = cross_product(robust_a1, robust_a2, robust_b1, robust_b2, exact=exact)
        robust_db0 = -robust_da0
        robust_da = cross_product(robust_b1, robust_b2, robust_b1, robust_a1, exact=exact)
        robust_db = cross_product(robust_a1, robust_a2, robust_a1, robust_b1, exact=exact)

        if robust_da0 == 0:
            # Parallel in robust space although the side test disagreed.
            _report(hook, RobustnessEvent(COLLINEAR_FALLBACK, a, b, {"sides": repr(sides)}))
            sides.set(0, 0, 0)
            sides.set(1, 0, 0)
            collinear = True
        else:
            if d == 0:
                _report(hook, RobustnessEvent(ZERO_DETERMINANT, a, b, {"robust_d": robust_da0}))
                r = 0.0
            else:
                r = da / d
            clamped = _clamp_ratio(r)
            if clamped != r:
                _report(hook, RobustnessEvent(RATIO_CLAMPED, a, b, {"r": r, "clamped": clamped}))
            info.r = clamped
            info.robust_ra = ratio_type(robust_da, robust_da0)
            info.robust_rb = ratio_type(robust_db, robust_db0)

    if collinear:
        # Project on the axis where the segments are widest.
        if abs(robust_dx_a) + abs(robust_dx_b) >= abs(robust_dy_a) + abs(robust_dy_b):
            axis = 0
        else:
            axis = 1
        return _relate_collinear(
            a, b, policy, ratio_type,
            robust_a1[axis], robust_a2[axis], robust_b1[axis], robust_b2[axis],
        )

    return policy.segments_cross(sides, info, a, b)


def robust_endpoints(a: SegmentLike, b: SegmentLike, robust_policy: RobustnessPolicy) -> RobustPoints:
    """Return ``(a0, a1, b0, b1)`` in robust coordinates."""

    return (
        robust_policy.to_robust(a[0]),
        robust_policy.to_robust(a[1]),
        robust_policy.to_robust(b[0]),
        robust_policy.to_robust(b[1]),
    )


def promote_equal_points(relation: SegmentRelation, robust: RobustPoints) -> SegmentRelation:
    """Report two coincident robust points as :attr:`RelationKind.EQUAL`."""

    if relation.kind is RelationKind.DEGENERATE and robust[0] == robust[1] and robust[2] == robust[3]:
        return replace(relation, kind=RelationKind.EQUAL)
    return relation


@debug_log_call(logger)
def relate(
    a: SegmentLike,
    b: SegmentLike,
    robust_policy: Optional[RobustnessPolicy] = None,
    *,
    diagnostics: Optional[DiagnosticsHook] = None,
    config: Optional[RelateConfig] = None,
) -> SegmentRelation:
    """Classify the relationship between ``a`` and ``b``.

    Two coincident points are reported as :attr:`RelationKind.EQUAL`.
    """

    if robust_policy is None:
        robust_policy = NoRescalePolicy()
    robust = robust_endpoints(a, b, robust_policy)
    relation = relate_segments(
        a, b, RelationPolicy(), robust_policy,
        robust_points=robust, diagnostics=diagnostics, config=config,
    )
    return promote_equal_points(relation, robust)


@debug_log_call(logger)
def intersection_points(
    a: SegmentLike,
    b: SegmentLike,
    robust_policy: Optional[RobustnessPolicy] = None,
    *,
    diagnostics: Optional[DiagnosticsHook] = None,
    config: Optional[RelateConfig] = None,
) -> IntersectionPoints:
    """Return the zero, one or two points shared by ``a`` and ``b``."""

    return relate_segments(
        a, b, IntersectionPointsPolicy(), robust_policy,
        diagnostics=diagnostics, config=config,
    )
