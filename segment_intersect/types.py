"""Value types shared by the segment relate pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Iterator, List, Sequence, Tuple, Union

from .ratio import SegmentRatio

Coordinate = Union[int, float]
Point = Sequence[Coordinate]
SegmentLike = Sequence[Point]


class Side(IntEnum):
    """Position of a point relative to a directed line."""

    RIGHT = -1
    COLLINEAR = 0
    LEFT = 1


@dataclass(frozen=True)
class RobustPoint:
    """Point in the robust (possibly rescaled) coordinate system.

    Kept distinct from original points so the two representations are never
    mixed inside a single orientation test.
    """

    x: Coordinate
    y: Coordinate

    def __getitem__(self, axis: int) -> Coordinate:
        if axis == 0:
            return self.x
        if axis == 1:
            return self.y
        raise IndexError(f"axis out of range: {axis}")

    def __iter__(self) -> Iterator[Coordinate]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2


@dataclass(frozen=True)
class Segment:
    """Directed segment between two original-precision points."""

    start: Tuple[float, float]
    end: Tuple[float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", (self.start[0], self.start[1]))
        object.__setattr__(self, "end", (self.end[0], self.end[1]))

    def __getitem__(self, index: int) -> Tuple[float, float]:
        if index == 0:
            return self.start
        if index == 1:
            return self.end
        raise IndexError(f"segment index out of range: {index}")

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        yield self.start
        yield self.end

    def __len__(self) -> int:
        return 2


class SideInfo:
    """Orientation of each segment's endpoints relative to the other segment.

    ``sides[0]`` holds the endpoints of the first segment tested against the
    second one, ``sides[1]`` the endpoints of the second tested against the
    first.
    """

    __slots__ = ("sides",)

    def __init__(self) -> None:
        self.sides: List[List[Side]] = [
            [Side.COLLINEAR, Side.COLLINEAR],
            [Side.COLLINEAR, Side.COLLINEAR],
        ]

    def set(self, index: int, first: int, second: int) -> None:
        self.sides[index][0] = Side(first)
        self.sides[index][1] = Side(second)

    def get(self, index: int, which: int) -> Side:
        return self.sides[index][which]

    def same(self, index: int) -> bool:
        """Both endpoints lie strictly on the same side."""

        return self.sides[index][0] * self.sides[index][1] == 1

    def collinear(self) -> bool:
        return all(side == Side.COLLINEAR for pair in self.sides for side in pair)

    def crossing(self) -> bool:
        """Both segments strictly straddle each other."""

        return self.sides[0][0] * self.sides[0][1] == -1 and self.sides[1][0] * self.sides[1][1] == -1

    def zero_count(self) -> int:
        return sum(1 for pair in self.sides for side in pair if side == Side.COLLINEAR)

    def one_zero(self) -> bool:
        return self.zero_count() == 1

    def touching(self) -> bool:
        """At least one endpoint lies on the other segment's line, but not all."""

        return 0 < self.zero_count() < 4

    def reversed(self) -> "SideInfo":
        result = SideInfo()
        result.set(0, *self.sides[1])
        result.set(1, *self.sides[0])
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SideInfo):
            return NotImplemented
        return self.sides == other.sides

    def __repr__(self) -> str:
        values = [[int(side) for side in pair] for pair in self.sides]
        return f"SideInfo({values!r})"


@dataclass
class IntersectionInfo:
    """Evidence collected for a transversal intersection.

    Deltas are in original precision; ``r`` is the clamped position of the
    intersection along the first segment. ``robust_ra`` and ``robust_rb`` are
    the positions along the first and second segment in robust coordinates.
    """

    dx_a: Coordinate
    dy_a: Coordinate
    dx_b: Coordinate
    dy_b: Coordinate
    r: float = 0.0
    robust_ra: SegmentRatio = field(default_factory=SegmentRatio.zero)
    robust_rb: SegmentRatio = field(default_factory=SegmentRatio.zero)


@dataclass(frozen=True)
class RobustnessEvent:
    """Numerically anomalous situation recovered from during a relate call."""

    kind: str
    a: Any
    b: Any
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.kind}: a={self.a!r} b={self.b!r} {self.details!r}"
