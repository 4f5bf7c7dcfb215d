from fractions import Fraction

import pytest

from segment_intersect import SegmentRatio


@pytest.mark.parametrize(
    "numerator, denominator, left, on_segment, in_segment, right",
    [
        (-3, 5, True, False, False, False),
        (0, 5, False, True, False, False),
        (3, 5, False, True, True, False),
        (5, 5, False, True, False, False),
        (6, 5, False, False, False, True),
    ],
)
def test_classification_without_division(numerator, denominator, left, on_segment, in_segment, right):
    ratio = SegmentRatio(numerator, denominator)
    assert ratio.left() is left
    assert ratio.on_segment() is on_segment
    assert ratio.in_segment() is in_segment
    assert ratio.right() is right


def test_negative_denominator_is_normalized():
    ratio = SegmentRatio(-1, -5)
    assert (ratio.numerator, ratio.denominator) == (1, 5)
    assert ratio.in_segment()

    behind = SegmentRatio(2, -5)
    assert behind.left()
    assert behind.approximation == pytest.approx(-0.4)


def test_on_end_and_constructors():
    assert SegmentRatio.zero().on_end()
    assert SegmentRatio.one().on_end()
    assert SegmentRatio(7, 7).on_end()
    assert not SegmentRatio(3, 7).on_end()
    assert SegmentRatio.zero() < SegmentRatio.one()


def test_equality_is_exact():
    assert SegmentRatio(1, 2) == SegmentRatio(2, 4)
    assert SegmentRatio(0.5, 1.0) == SegmentRatio(1, 2)
    # 0.1 is not exactly one tenth in binary floating point.
    assert SegmentRatio(0.1, 1) != SegmentRatio(1, 10)
    assert SegmentRatio(1, 3).as_fraction() == Fraction(1, 3)


def test_ordering_and_hashing():
    ratios = [SegmentRatio(3, 4), SegmentRatio(-1, 2), SegmentRatio(2, 8), SegmentRatio(6, 5)]
    assert [float(r) for r in sorted(ratios)] == [-0.5, 0.25, 0.75, 1.2]
    assert len({SegmentRatio(1, 2), SegmentRatio(2, 4), SegmentRatio(-3, -6)}) == 1


def test_zero_denominator_classifies_by_numerator_sign():
    before = SegmentRatio(-3, 0)
    after = SegmentRatio(3, 0)
    assert before.left() and not before.right()
    assert after.right() and not after.left()
    assert after.approximation == 0.0
    assert SegmentRatio(0, 0).on_segment()


def test_comparison_with_other_types_is_not_supported():
    assert SegmentRatio(1, 2) != 0.5
    with pytest.raises(TypeError):
        SegmentRatio(1, 2) < 0.5


def test_rational_parts_below_float_range_still_approximate():
    tiny = Fraction(1, 10 ** 400)
    ratio = SegmentRatio(tiny, 2 * tiny)
    assert ratio.approximation == 0.5
    assert ratio == SegmentRatio(1, 2)
