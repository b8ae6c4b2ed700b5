from typing import Optional, Tuple

from sweepline.models.line_segment import LineSegment
from sweepline.models.point import Point


class IntersectionPair:
    """
    Unordered pair of segments reported by a detector.

    (A, B) and (B, A) are the same pair: equality checks both orders and
    the hash combines the two segment hashes commutatively (frozenset),
    so pairs can be deduplicated in sets whichever segment found the other.
    """

    __slots__ = ("_segment1", "_segment2")

    def __init__(self, segment1: LineSegment, segment2: LineSegment):
        self._segment1 = segment1
        self._segment2 = segment2

    @property
    def segment1(self) -> LineSegment:
        return self._segment1

    @property
    def segment2(self) -> LineSegment:
        return self._segment2

    def segments(self) -> Tuple[LineSegment, LineSegment]:
        return self._segment1, self._segment2

    def contains(self, segment: LineSegment) -> bool:
        return segment == self._segment1 or segment == self._segment2

    def intersection_point(self) -> Optional[Point]:
        """Derived on demand, see LineSegment.intersection_point_with()."""
        return self._segment1.intersection_point_with(self._segment2)

    # ------------------------------------------------------------------
    # Equality & hashing (order independent)
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, IntersectionPair):
            return NotImplemented
        if self._segment1 == other._segment1 and self._segment2 == other._segment2:
            return True
        return self._segment1 == other._segment2 and self._segment2 == other._segment1

    def __hash__(self):
        return hash(frozenset((self._segment1, self._segment2)))

    def __repr__(self):
        return f"IntersectionPair({self._segment1!r}, {self._segment2!r})"
