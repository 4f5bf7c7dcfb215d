import argparse
import logging
import sys
from typing import Optional, Sequence

from segment_intersect import (
    IntersectionPointsPolicy,
    NoRescalePolicy,
    RelationPolicy,
    Segment,
    TupledPolicy,
    get_rescale_policy,
    promote_equal_points,
    relate_segments,
    robust_endpoints,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_segment(value: str) -> Segment:
    parts = [part.strip() for part in value.replace(";", ",").split(",") if part.strip()]
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(f"expected x0,y0,x1,y1 (got {value!r})")
    try:
        x0, y0, x1, y1 = (float(part) for part in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"non-numeric coordinate in {value!r}") from exc
    return Segment((x0, y0), (x1, y1))


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Relate two 2-D line segments")
    parser.add_argument("a", type=_parse_segment, help="First segment as x0,y0,x1,y1")
    parser.add_argument("b", type=_parse_segment, help="Second segment as x0,y0,x1,y1")
    parser.add_argument(
        "--rescale",
        action="store_true",
        help="Decide orientation on an integer grid covering both segments",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.rescale:
        robust_policy = get_rescale_policy(args.a, args.b)
    else:
        robust_policy = NoRescalePolicy()
    logger.info("Relating %s and %s using %r", args.a, args.b, robust_policy)

    robust = robust_endpoints(args.a, args.b, robust_policy)
    relation, points = relate_segments(
        args.a,
        args.b,
        TupledPolicy(RelationPolicy(), IntersectionPointsPolicy()),
        robust_policy,
        robust_points=robust,
    )
    relation = promote_equal_points(relation, robust)

    print(f"Relation: {relation.kind.value}")
    if relation.a_degenerate is not None:
        print(f"Degenerate input: {'a' if relation.a_degenerate else 'b'}")
    if relation.r is not None:
        print(f"Ratio along a: {relation.r:.6f}")
    print(f"Points ({points.count}):")
    for x, y in points.points:
        print(f"  ({x:.6f}, {y:.6f})")


if __name__ == "__main__":
    main(sys.argv[1:])
