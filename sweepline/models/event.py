from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sweepline.models.intersection import IntersectionPair
from sweepline.models.line_segment import LineSegment


class EventKind(Enum):
    START = "start"
    END = "end"
    INTERSECTION = "intersection"


def _compare_positions(y1, y2, x1, x2) -> int:
    """Order by y, then by x. Unordered values (NaN) compare equal."""
    if y1 < y2:
        return -1
    if y1 > y2:
        return 1
    if x1 < x2:
        return -1
    if x1 > x2:
        return 1
    return 0


@dataclass(frozen=True, eq=False, repr=False)
class Event:
    """
    A sweep occurrence at (x, y): a segment starts, ends, or two segments
    intersect.

    Events are ordered by position only (y ascending, then x), which is the
    order a sweep consumes them in. Equality compares every field, so two
    different events at the same position are ordered "equal" without
    being ==.
    """

    kind: EventKind
    x: float
    y: float
    segment1: LineSegment
    segment2: Optional[LineSegment] = None

    def __post_init__(self):
        if self.kind is EventKind.INTERSECTION and self.segment2 is None:
            raise ValueError("intersection events need two segments")
        if self.kind is not EventKind.INTERSECTION and self.segment2 is not None:
            raise ValueError(f"{self.kind.value} events take a single segment")

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def start(cls, segment: LineSegment) -> "Event":
        return cls(EventKind.START, segment.x1, segment.y1, segment)

    @classmethod
    def end(cls, segment: LineSegment) -> "Event":
        return cls(EventKind.END, segment.x2, segment.y2, segment)

    @classmethod
    def intersection(cls, pair: IntersectionPair) -> Optional["Event"]:
        """Event at the pair's intersection point; None when there is none."""
        p = pair.intersection_point()
        if p is None:
            return None
        return cls(EventKind.INTERSECTION, p.x, p.y, pair.segment1, pair.segment2)

    # ------------------------------------------------------------------
    # Ordering (by position)
    # ------------------------------------------------------------------

    def compare(self, other: "Event") -> int:
        return _compare_positions(self.y, other.y, self.x, other.x)

    def __lt__(self, other):
        if not isinstance(other, Event):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, Event):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Event):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Event):
            return NotImplemented
        return self.compare(other) >= 0

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Event):
            return NotImplemented
        return (
            self.kind is other.kind
            and self.x == other.x
            and self.y == other.y
            and self.segment1 == other.segment1
            and self.segment2 == other.segment2
        )

    def __hash__(self):
        return hash((self.kind, self.x, self.y, self.segment1, self.segment2))

    def __repr__(self):
        extra = f", {self.segment2!r}" if self.segment2 is not None else ""
        return f"Event({self.kind.value}, x={self.x}, y={self.y}, {self.segment1!r}{extra})"
