"""Robustness policies producing the coordinates used for orientation tests."""

from __future__ import annotations

import logging
import math
import numbers
import sys
from typing import Iterable, List, Optional, Protocol, Tuple, Type

import numpy as np

from .config import RelateConfig, current_relate_config
from .logging_utils import debug_log_call
from .ratio import SegmentRatio
from .types import Coordinate, Point, RobustPoint

logger = logging.getLogger(__name__)

# Largest multiplier that keeps every in-envelope offset finite once scaled.
_MAX_MULTIPLIER = sys.float_info.max / 4.0


class RobustnessPolicy(Protocol):
    """Supplies robust point coordinates and the ratio type built from them."""

    ratio_type: Type[SegmentRatio]

    def to_robust(self, point: Point) -> RobustPoint:
        ...


def _plain_number(value: object) -> Coordinate:
    # numpy integers would overflow in the orientation products.
    if isinstance(value, numbers.Integral):
        return int(value)
    return float(value)  # type: ignore[arg-type]


class NoRescalePolicy:
    """Use the original coordinates unchanged as robust coordinates."""

    ratio_type = SegmentRatio

    def to_robust(self, point: Point) -> RobustPoint:
        return RobustPoint(_plain_number(point[0]), _plain_number(point[1]))

    def __repr__(self) -> str:
        return "NoRescalePolicy()"


class RescalePolicy:
    """Map original coordinates onto an integer grid.

    ``robust = robust_offset + round((value - fp_offset) * multiplier)``.
    Integer robust coordinates make every orientation test and ratio exact.
    """

    ratio_type = SegmentRatio

    def __init__(
        self,
        fp_offset: Tuple[float, float],
        robust_offset: Tuple[int, int],
        multiplier: float,
    ) -> None:
        self.fp_offset = (float(fp_offset[0]), float(fp_offset[1]))
        self.robust_offset = (int(robust_offset[0]), int(robust_offset[1]))
        self.multiplier = float(multiplier)

    def _scale(self, value: Coordinate, axis: int) -> int:
        scaled = (float(value) - self.fp_offset[axis]) * self.multiplier
        return self.robust_offset[axis] + int(np.rint(scaled))

    def to_robust(self, point: Point) -> RobustPoint:
        return RobustPoint(self._scale(point[0], 0), self._scale(point[1], 1))

    def to_original(self, point: RobustPoint) -> Tuple[float, float]:
        """Approximate inverse of :meth:`to_robust`."""

        return (
            self.fp_offset[0] + (point.x - self.robust_offset[0]) / self.multiplier,
            self.fp_offset[1] + (point.y - self.robust_offset[1]) / self.multiplier,
        )

    def __repr__(self) -> str:
        return (
            f"RescalePolicy(fp_offset={self.fp_offset!r}, "
            f"robust_offset={self.robust_offset!r}, multiplier={self.multiplier!r})"
        )


def _collect_points(geometries: Iterable[object]) -> List[Tuple[float, float]]:
    points: List[Tuple[float, float]] = []
    for geometry in geometries:
        first = geometry[0]  # type: ignore[index]
        if isinstance(first, numbers.Real):
            points.append((float(first), float(geometry[1])))  # type: ignore[index]
        else:
            points.extend(_collect_points(geometry))  # type: ignore[arg-type]
    return points


@debug_log_call(logger)
def get_rescale_policy(*geometries: object, config: Optional[RelateConfig] = None) -> RescalePolicy:
    """Build a :class:`RescalePolicy` covering all points of ``geometries``.

    Each geometry may be a point, a segment or a nested sequence of those.
    The larger side of the common envelope is scaled to
    ``config.rescale_range`` robust units.
    """

    cfg = config or current_relate_config()
    points = _collect_points(geometries)
    if not points:
        raise ValueError("get_rescale_policy needs at least one point")

    coords = np.asarray(points, dtype=float)
    lower = coords.min(axis=0)
    upper = coords.max(axis=0)
    diff = float(np.max(upper - lower))

    multiplier = 1.0
    if diff > 0.0:
        multiplier = float(np.rint(0.5 + cfg.rescale_range / diff))
        if not math.isfinite(multiplier):
            logger.debug("rescale multiplier overflowed for envelope size %r, capping", diff)
            multiplier = _MAX_MULTIPLIER
    min_coordinate = int(-cfg.rescale_range / 2.0)

    policy = RescalePolicy(
        (float(lower[0]), float(lower[1])),
        (min_coordinate, min_coordinate),
        multiplier,
    )
    logger.debug("rescale envelope=%s..%s multiplier=%s", lower.tolist(), upper.tolist(), multiplier)
    return policy
