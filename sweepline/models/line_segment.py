import math
import struct
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Optional, Tuple

from sweepline.models.line import Line
from sweepline.models.point import Point


def _float_bits(*values) -> bytes:
    """
    Raw IEEE-754 bit pattern of the given floats.
    -0.0 is folded onto 0.0 first, since the two compare equal.
    """
    return struct.pack("<%dd" % len(values), *(float(v) + 0.0 for v in values))


def _three_way(k1: float, k2: float) -> int:
    """-1 / 0 / 1; unordered values (NaN) count as equal."""
    if k1 < k2:
        return -1
    if k1 > k2:
        return 1
    return 0


@dataclass(frozen=True, eq=False)
class LineSegment:
    """
    Bounded segment between (x1, y1) and (x2, y2).

    Supports:
      - derived implicit line (not cached)
      - segment-line touch test and segment-segment intersection test
      - intersection points against a line or another segment
      - sweep-dependent ordering (see compare_segments)

    Equality is exact on the four coordinates in endpoint order; the
    reversed segment is a different value.
    """

    x1: float
    y1: float
    x2: float
    y2: float

    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> "LineSegment":
        return cls(p1.x, p1.y, p2.x, p2.y)

    # ------------------------------------------------------------
    # Basic geometric properties
    # ------------------------------------------------------------
    @property
    def start(self) -> Point:
        return Point(self.x1, self.y1)

    @property
    def end(self) -> Point:
        return Point(self.x2, self.y2)

    def endpoints(self) -> Tuple[Point, Point]:
        return self.start, self.end

    @property
    def length(self) -> float:
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)

    def to_line(self) -> Line:
        return Line.from_coordinates(self.x1, self.y1, self.x2, self.y2)

    # ------------------------------------------------------------
    # Intersection predicates
    # ------------------------------------------------------------
    def touches(self, line: Line) -> bool:
        """
        Signed-distance test: the endpoints straddle the line, or at
        least one of them lies exactly on it.

            t1 = a*x1 + b*y1 + c
            t2 = a*x2 + b*y2 + c
            touches  <=>  t1 * t2 <= 0
        """
        t1 = line.evaluate(self.x1, self.y1)
        t2 = line.evaluate(self.x2, self.y2)
        return t1 * t2 <= 0

    def intersects(self, other: "LineSegment") -> bool:
        """
        Each segment must touch the other's infinite line.
        Collinear contacts count as intersections.
        """
        return self.touches(other.to_line()) and other.touches(self.to_line())

    def intersection_point(self, line: Line) -> Optional[Point]:
        if not self.touches(line):
            return None
        return line.intersect(self.to_line())

    def intersection_point_with(self, other: "LineSegment") -> Optional[Point]:
        """
        Intersection point with another segment.

        Only this segment's touch test against the other's line is
        checked, not the mutual test used by intersects(). A point can
        therefore come back for segments that do not intersect, when the
        other segment stops short of this one.
        """
        other_line = other.to_line()
        if not self.touches(other_line):
            return None
        return other_line.intersect(self.to_line())

    # ------------------------------------------------------------
    # Sweep ordering
    # ------------------------------------------------------------
    def sweep_key(self, line: Line) -> float:
        """
        x where this segment's line crosses the given (horizontal) line.
        Falls back to x1 when the segment is parallel to it.
        """
        p = self.to_line().intersect(line)
        if p is None:
            return self.x1
        return p.x

    def compare(self, other: "LineSegment", state) -> int:
        return compare_segments(self, other, state)

    # ------------------------------------------------------------
    # Equality & hashing
    # ------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, LineSegment):
            return NotImplemented
        return (
            self.x1 == other.x1
            and self.y1 == other.y1
            and self.x2 == other.x2
            and self.y2 == other.y2
        )

    def __hash__(self):
        return hash(_float_bits(self.x1, self.y1, self.x2, self.y2))

    def __repr__(self):
        return f"LineSegment(({self.x1}, {self.y1}) -> ({self.x2}, {self.y2}))"


def compare_segments(seg_a: LineSegment, seg_b: LineSegment, state) -> int:
    """
    Order two segments under the given sweep state.

    Each segment is keyed by the x at which it crosses state.sweep.
    Segments crossing at the same x are ordered by where they cross
    state.below, i.e. an instant further along the sweep. Anything still
    tied, or unordered because of NaN, compares equal.

    Returns -1, 0 or 1 (cmp convention).
    """
    sweep = state.sweep
    order = _three_way(seg_a.sweep_key(sweep), seg_b.sweep_key(sweep))
    if order != 0:
        return order

    below = state.below
    return _three_way(seg_a.sweep_key(below), seg_b.sweep_key(below))


def segment_sort_key(state):
    """
    Key factory for sorted() / bisect under a fixed sweep state:

        sorted(segments, key=segment_sort_key(state))
    """
    return cmp_to_key(lambda a, b: compare_segments(a, b, state))
