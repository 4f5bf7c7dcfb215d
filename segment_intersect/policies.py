"""Result policies turning classified segment evidence into concrete results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Optional, Protocol, Tuple, TypeVar

from .ratio import SegmentRatio
from .types import IntersectionInfo, SegmentLike, SideInfo

T = TypeVar("T", covariant=True)
T1 = TypeVar("T1")
T2 = TypeVar("T2")

Point2D = Tuple[float, float]


class ResultPolicy(Protocol[T]):
    """Outcome builder invoked exactly once per relate call."""

    def disjoint(self) -> T:
        ...

    def degenerate(self, segment: SegmentLike, a_degenerate: bool) -> T:
        ...

    def segments_cross(self, sides: SideInfo, info: IntersectionInfo, a: SegmentLike, b: SegmentLike) -> T:
        ...

    def segments_collinear(
        self,
        a: SegmentLike,
        b: SegmentLike,
        ra_from: SegmentRatio,
        ra_to: SegmentRatio,
        rb_from: SegmentRatio,
        rb_to: SegmentRatio,
    ) -> T:
        ...


def _as_point(point) -> Point2D:
    return float(point[0]), float(point[1])


@dataclass
class IntersectionFraction:
    """Position of an intersection point along segment a and along segment b."""

    robust_ra: SegmentRatio
    robust_rb: SegmentRatio


@dataclass
class IntersectionPoints:
    count: int = 0
    points: List[Point2D] = field(default_factory=list)
    fractions: List[Optional[IntersectionFraction]] = field(default_factory=list)

    def append(self, point: Point2D, fraction: Optional[IntersectionFraction]) -> None:
        self.points.append(point)
        self.fractions.append(fraction)
        self.count += 1


class IntersectionPointsPolicy:
    """Construct zero, one or two intersection points."""

    def disjoint(self) -> IntersectionPoints:
        return IntersectionPoints()

    def degenerate(self, segment: SegmentLike, a_degenerate: bool) -> IntersectionPoints:
        result = IntersectionPoints()
        result.append(_as_point(segment[0]), None)
        return result

    def segments_cross(
        self, sides: SideInfo, info: IntersectionInfo, a: SegmentLike, b: SegmentLike
    ) -> IntersectionPoints:
        result = IntersectionPoints()
        if info.r == 0:
            point = _as_point(a[0])
        elif info.r == 1:
            point = _as_point(a[1])
        else:
            point = (
                float(a[0][0] + info.r * info.dx_a),
                float(a[0][1] + info.r * info.dy_a),
            )
        result.append(point, IntersectionFraction(info.robust_ra, info.robust_rb))
        return result

    def segments_collinear(
        self,
        a: SegmentLike,
        b: SegmentLike,
        ra_from: SegmentRatio,
        ra_to: SegmentRatio,
        rb_from: SegmentRatio,
        rb_to: SegmentRatio,
    ) -> IntersectionPoints:
        result = IntersectionPoints()
        on_a: List[SegmentRatio] = []

        # An endpoint of a on the closed span of b wins over an endpoint of b
        # sitting exactly on an end of a, so shared endpoints are taken once.
        candidates = (
            (ra_from.on_segment(), a[0], SegmentRatio.zero(), ra_from),
            (rb_from.in_segment(), b[0], rb_from, SegmentRatio.zero()),
            (ra_to.on_segment(), a[1], SegmentRatio.one(), ra_to),
            (rb_to.in_segment(), b[1], rb_to, SegmentRatio.one()),
        )
        for selected, point, along_a, along_b in candidates:
            if not selected or result.count >= 2:
                continue
            result.append(_as_point(point), IntersectionFraction(along_a, along_b))
            on_a.append(along_a)

        if result.count == 2 and on_a[1] < on_a[0]:
            result.points.reverse()
            result.fractions.reverse()
        return result


class RelationKind(str, Enum):
    DISJOINT = "disjoint"
    EQUAL = "degenerate-equal"
    DEGENERATE = "degenerate-touching"
    CROSSING = "crossing"
    TOUCHING = "touching"
    COLLINEAR = "collinear-overlap"


@dataclass(frozen=True)
class SegmentRelation:
    """Topological classification of a segment pair with its evidence."""

    kind: RelationKind
    a_degenerate: Optional[bool] = None
    sides: Optional[SideInfo] = None
    r: Optional[float] = None
    ratios: Tuple[SegmentRatio, ...] = ()

    @property
    def intersects(self) -> bool:
        return self.kind is not RelationKind.DISJOINT


class RelationPolicy:
    """Classify the pair without constructing any points."""

    def disjoint(self) -> SegmentRelation:
        return SegmentRelation(RelationKind.DISJOINT)

    def degenerate(self, segment: SegmentLike, a_degenerate: bool) -> SegmentRelation:
        return SegmentRelation(RelationKind.DEGENERATE, a_degenerate=a_degenerate)

    def segments_cross(
        self, sides: SideInfo, info: IntersectionInfo, a: SegmentLike, b: SegmentLike
    ) -> SegmentRelation:
        kind = RelationKind.TOUCHING if sides.zero_count() else RelationKind.CROSSING
        return SegmentRelation(kind, sides=sides, r=info.r, ratios=(info.robust_ra, info.robust_rb))

    def segments_collinear(
        self,
        a: SegmentLike,
        b: SegmentLike,
        ra_from: SegmentRatio,
        ra_to: SegmentRatio,
        rb_from: SegmentRatio,
        rb_to: SegmentRatio,
    ) -> SegmentRelation:
        return SegmentRelation(RelationKind.COLLINEAR, ratios=(ra_from, ra_to, rb_from, rb_to))


class TupledPolicy(Generic[T1, T2]):
    """Run two policies on the same evidence and return both results."""

    def __init__(self, first: ResultPolicy[T1], second: ResultPolicy[T2]) -> None:
        self.first = first
        self.second = second

    def disjoint(self) -> Tuple[T1, T2]:
        return self.first.disjoint(), self.second.disjoint()

    def degenerate(self, segment: SegmentLike, a_degenerate: bool) -> Tuple[T1, T2]:
        return (
            self.first.degenerate(segment, a_degenerate),
            self.second.degenerate(segment, a_degenerate),
        )

    def segments_cross(
        self, sides: SideInfo, info: IntersectionInfo, a: SegmentLike, b: SegmentLike
    ) -> Tuple[T1, T2]:
        return (
            self.first.segments_cross(sides, info, a, b),
            self.second.segments_cross(sides, info, a, b),
        )

    def segments_collinear(
        self,
        a: SegmentLike,
        b: SegmentLike,
        ra_from: SegmentRatio,
        ra_to: SegmentRatio,
        rb_from: SegmentRatio,
        rb_to: SegmentRatio,
    ) -> Tuple[T1, T2]:
        return (
            self.first.segments_collinear(a, b, ra_from, ra_to, rb_from, rb_to),
            self.second.segments_collinear(a, b, ra_from, ra_to, rb_from, rb_to),
        )
