"""Example: classify a handful of segment pairs and print their shared points."""

from segment_intersect import Segment, intersection_points, relate

SCENARIOS = [
    ("crossing", Segment((0, 0), (10, 0)), Segment((5, -5), (5, 5))),
    ("parallel", Segment((0, 0), (10, 0)), Segment((0, 1), (10, 1))),
    ("overlap", Segment((0, 0), (10, 0)), Segment((5, 0), (15, 0))),
    ("end to end", Segment((0, 0), (10, 0)), Segment((10, 0), (20, 0))),
    ("point on start", Segment((0, 0), (0, 0)), Segment((0, 0), (10, 0))),
]


def main() -> None:
    for label, a, b in SCENARIOS:
        relation = relate(a, b)
        points = intersection_points(a, b)
        print(f"{label}: {relation.kind.value}")
        for x, y in points.points:
            print(f"  ({x:.3f}, {y:.3f})")


if __name__ == "__main__":
    main()
