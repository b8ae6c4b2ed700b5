"""
Sweep-based detection.

A horizontal sweep line moves in increasing y over START / END events
drained from a BoundedMinQueue. The detector is an active-interval filter:
it keeps the segments whose y-extent contains the sweep position, tests
every segment entering that set against all segments already in it, and
deduplicates pairs through their symmetric equality.

A pair is reported when the closed y-extents of the two segments overlap
and LineSegment.intersects() holds. This matches the brute-force detector
except for collinear segments (or zero-length ones lying on another
segment's line) whose y-extents are disjoint: the touch test counts those
as intersecting, the sweep never sees them active together.

SweepStatus is the ordered status structure a neighbour-based sweep driver
keeps: active segments left to right under one shared SweepState.
"""

import logging
import math
from itertools import groupby
from typing import Iterator, List, Optional, Sequence

from sweepline.detectors.base import IntersectionDetector
from sweepline.models.event import Event, EventKind
from sweepline.models.intersection import IntersectionPair
from sweepline.models.line_segment import LineSegment, compare_segments, segment_sort_key
from sweepline.models.sweep_state import SweepState
from sweepline.utils.priority_queue import BoundedMinQueue

logger = logging.getLogger(__name__)


class SweepStatus:
    """
    Active segments, ordered by where they cross the sweep line.

    The order is only maintained against the state's current position:
    after moving the shared state, call reorder() before inserting.
    """

    def __init__(self, state: SweepState):
        self._state = state
        self._active: List[LineSegment] = []

    def reorder(self):
        """Re-sort after the shared state moved; segments may have crossed."""
        self._active.sort(key=segment_sort_key(self._state))

    def insert(self, segment: LineSegment) -> int:
        """Binary-search insert; equal segments go left of their ties."""
        lo, hi = 0, len(self._active)
        while lo < hi:
            mid = (lo + hi) // 2
            if compare_segments(self._active[mid], segment, self._state) < 0:
                lo = mid + 1
            else:
                hi = mid
        self._active.insert(lo, segment)
        return lo

    def remove(self, segment: LineSegment) -> int:
        pos = self._active.index(segment)
        self._active.pop(pos)
        return pos

    def neighbor(self, pos: int, offset: int) -> Optional[LineSegment]:
        n = pos + offset
        if 0 <= n < len(self._active):
            return self._active[n]
        return None

    def __iter__(self) -> Iterator[LineSegment]:
        return iter(list(self._active))

    def __len__(self):
        return len(self._active)


def _sweep_events(segment: LineSegment):
    """START at the endpoint met first by the sweep (smaller y, then x), END at the other."""
    p, q = segment.endpoints()
    if (q.y, q.x) < (p.y, p.x):
        p, q = q, p
    return (
        Event(EventKind.START, p.x, p.y, segment),
        Event(EventKind.END, q.x, q.y, segment),
    )


class SweepDetector(IntersectionDetector):
    """
    Active-interval sweep over the IntersectionDetector contract.

    Reduced contract: only pairs with overlapping y-extents are found (see
    the module docstring). Pairs are returned in the order the sweep
    discovers them, as IntersectionPair(already_active, entering), and are
    distinct by value: duplicated input segments yield each pair once.
    """

    name = "sweep"

    def detect(self, segments: Sequence[LineSegment]) -> List[IntersectionPair]:
        # NaN coordinates never pass the touch test and cannot be ordered
        usable = [
            s for s in segments
            if not any(math.isnan(v) for v in (s.x1, s.y1, s.x2, s.y2))
        ]
        if len(usable) < 2:
            return []

        queue = BoundedMinQueue(2 * len(usable))
        for seg in usable:
            queue.extend(_sweep_events(seg))
        events = queue.drain_sorted()

        active: List[LineSegment] = []
        seen = set()
        intersections = []

        for _, row in groupby(events, key=lambda e: e.y):
            row = list(row)

            # starts before ends, so contacts on this row are seen
            for event in row:
                if event.kind is not EventKind.START:
                    continue
                entering = event.segment1
                for other in active:
                    if not other.intersects(entering):
                        continue
                    pair = IntersectionPair(other, entering)
                    if pair not in seen:
                        seen.add(pair)
                        intersections.append(pair)
                active.append(entering)

            for event in row:
                if event.kind is EventKind.END:
                    active.remove(event.segment1)

        logger.debug(
            "Sweep: %d segments, %d events, %d intersecting pairs",
            len(usable), len(events), len(intersections),
        )
        return intersections
