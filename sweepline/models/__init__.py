"""
Data Models

Defines the core geometric values and sweep primitives:
- Point
- Line
- LineSegment (+ sweep comparator)
- SweepState
- IntersectionPair
- Event
"""

from .point import Point
from .line import Line
from .line_segment import LineSegment, compare_segments, segment_sort_key
from .sweep_state import SweepState
from .intersection import IntersectionPair
from .event import Event, EventKind

__all__ = [
    "Point",
    "Line",
    "LineSegment",
    "compare_segments",
    "segment_sort_key",
    "SweepState",
    "IntersectionPair",
    "Event",
    "EventKind",
]
