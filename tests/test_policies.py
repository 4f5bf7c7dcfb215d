import pytest

from segment_intersect import (
    IntersectionPointsPolicy,
    RelationKind,
    RelationPolicy,
    Segment,
    SegmentRatio,
    TupledPolicy,
    relate_segments,
)


class _RecordingPolicy:
    """Policy returning the name of the hook that was invoked."""

    def __init__(self):
        self.calls = []

    def disjoint(self):
        self.calls.append("disjoint")
        return "disjoint"

    def degenerate(self, segment, a_degenerate):
        self.calls.append("degenerate")
        return ("degenerate", tuple(segment[0]), a_degenerate)

    def segments_cross(self, sides, info, a, b):
        self.calls.append("segments_cross")
        return ("cross", info.r)

    def segments_collinear(self, a, b, ra_from, ra_to, rb_from, rb_to):
        self.calls.append("segments_collinear")
        return ("collinear", rb_from, rb_to)


@pytest.mark.parametrize(
    "b, expected_call",
    [
        (Segment((5, -5), (5, 5)), "segments_cross"),
        (Segment((0, 1), (10, 1)), "disjoint"),
        (Segment((5, 0), (15, 0)), "segments_collinear"),
        (Segment((4, 0), (4, 0)), "degenerate"),
    ],
)
def test_exactly_one_hook_is_invoked(b, expected_call):
    policy = _RecordingPolicy()
    relate_segments(Segment((0, 0), (10, 0)), b, policy)
    assert policy.calls == [expected_call]


def test_policy_result_is_returned_verbatim():
    policy = _RecordingPolicy()
    result = relate_segments(Segment((0, 0), (10, 0)), Segment((4, 0), (4, 0)), policy)
    assert result == ("degenerate", (4, 0), False)

    collinear = relate_segments(Segment((0, 0), (10, 0)), Segment((5, 0), (15, 0)), policy)
    assert collinear == ("collinear", SegmentRatio(1, 2), SegmentRatio(3, 2))


def test_reversed_inner_segment_points_follow_first_segment():
    a = Segment((0, 0), (10, 0))
    b = Segment((8, 0), (2, 0))
    result = relate_segments(a, b, IntersectionPointsPolicy())

    assert result.count == 2
    assert result.points == [(2.0, 0.0), (8.0, 0.0)]
    assert result.fractions[0].robust_ra == SegmentRatio(1, 5)
    assert result.fractions[0].robust_rb == SegmentRatio.one()
    assert result.fractions[1].robust_ra == SegmentRatio(4, 5)
    assert result.fractions[1].robust_rb == SegmentRatio.zero()


@pytest.mark.parametrize(
    "b",
    [Segment((0, 0), (10, 0)), Segment((10, 0), (0, 0))],
    ids=["same-direction", "opposite-direction"],
)
def test_identical_segments_yield_both_endpoints(b):
    a = Segment((0, 0), (10, 0))
    result = relate_segments(a, b, IntersectionPointsPolicy())
    assert result.count == 2
    assert result.points == [(0.0, 0.0), (10.0, 0.0)]


def test_degenerate_point_has_no_fraction():
    result = relate_segments(Segment((2, 0), (2, 0)), Segment((0, 0), (10, 0)), IntersectionPointsPolicy())
    assert result.points == [(2.0, 0.0)]
    assert result.fractions == [None]


def test_crossing_point_carries_robust_fractions():
    result = relate_segments(Segment((0, 0), (8, 8)), Segment((0, 8), (8, 0)), IntersectionPointsPolicy())
    assert result.points == [pytest.approx((4.0, 4.0))]
    fraction = result.fractions[0]
    assert fraction.robust_ra == SegmentRatio(1, 2)
    assert fraction.robust_rb == SegmentRatio(1, 2)


def test_tupled_policy_runs_both_policies():
    policy = TupledPolicy(RelationPolicy(), IntersectionPointsPolicy())
    relation, points = relate_segments(Segment((0, 0), (10, 0)), Segment((5, -5), (5, 5)), policy)

    assert relation.kind is RelationKind.CROSSING
    assert relation.intersects
    assert points.points == [pytest.approx((5.0, 0.0))]

    relation, points = relate_segments(Segment((0, 0), (10, 0)), Segment((0, 1), (10, 1)), policy)
    assert relation.kind is RelationKind.DISJOINT
    assert not relation.intersects
    assert points.count == 0


def test_relation_kind_values_are_readable():
    assert RelationKind.COLLINEAR.value == "collinear-overlap"
    assert RelationKind.DEGENERATE.value == "degenerate-touching"
    assert RelationKind("crossing") is RelationKind.CROSSING
