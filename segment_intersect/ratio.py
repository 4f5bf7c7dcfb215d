"""Rational position of a point along a segment."""

from __future__ import annotations

from fractions import Fraction
from functools import total_ordering
from typing import Union

Number = Union[int, float, Fraction]


@total_ordering
class SegmentRatio:
    """Ratio ``numerator / denominator`` where 0 is the segment start and 1 its end.

    The denominator is normalized to be non-negative, so classification needs
    no division. Comparisons are exact: both sides are converted to
    :class:`~fractions.Fraction` before cross multiplication.
    """

    __slots__ = ("numerator", "denominator", "_exact")

    def __init__(self, numerator: Number = 0, denominator: Number = 1) -> None:
        if denominator < 0:
            numerator = -numerator
            denominator = -denominator
        self.numerator = numerator
        self.denominator = denominator
        self._exact = None

    @classmethod
    def zero(cls) -> "SegmentRatio":
        return cls(0, 1)

    @classmethod
    def one(cls) -> "SegmentRatio":
        return cls(1, 1)

    def left(self) -> bool:
        """Located before the segment start."""

        return self.numerator < 0

    def right(self) -> bool:
        """Located after the segment end."""

        return self.numerator > self.denominator

    def on_segment(self) -> bool:
        return 0 <= self.numerator <= self.denominator

    def in_segment(self) -> bool:
        return 0 < self.numerator < self.denominator

    def on_end(self) -> bool:
        return self.numerator == 0 or self.numerator == self.denominator

    @property
    def approximation(self) -> float:
        # A zero denominator only shows up for a collapsed reference span.
        if self.denominator == 0:
            return 0.0
        if isinstance(self.numerator, Fraction) or isinstance(self.denominator, Fraction):
            # Rational parts can be far below the float range.
            return float(self.as_fraction())
        return float(self.numerator) / float(self.denominator)

    def as_fraction(self) -> Fraction:
        if self._exact is None:
            if self.denominator == 0:
                self._exact = Fraction(0)
            else:
                self._exact = Fraction(self.numerator) / Fraction(self.denominator)
        return self._exact

    def __float__(self) -> float:
        return self.approximation

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SegmentRatio):
            return NotImplemented
        return self.as_fraction() == other.as_fraction()

    def __lt__(self, other: "SegmentRatio") -> bool:
        if not isinstance(other, SegmentRatio):
            return NotImplemented
        return self.as_fraction() < other.as_fraction()

    def __hash__(self) -> int:
        return hash(self.as_fraction())

    def __repr__(self) -> str:
        return f"SegmentRatio({self.numerator!r}/{self.denominator!r})"
