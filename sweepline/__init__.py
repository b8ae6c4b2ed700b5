"""
Sweepline Package

Planar line-segment intersection primitives, including:

- Implicit lines and line-line intersection
- Segment touch / intersection predicates
- Sweep-position-dependent segment ordering
- Symmetric intersection pairs and pluggable detectors
- Sweep events and a bounded event priority queue
"""

from .models import (
    Point,
    Line,
    LineSegment,
    compare_segments,
    segment_sort_key,
    SweepState,
    IntersectionPair,
    Event,
    EventKind,
)
from .detectors import (
    IntersectionDetector,
    BruteForceDetector,
    VectorizedDetector,
    SweepDetector,
    get_detector,
)
from .utils import BoundedMinQueue, schedule_events

__all__ = [
    "config",
    "models",
    "detectors",
    "utils",
    "Point",
    "Line",
    "LineSegment",
    "compare_segments",
    "segment_sort_key",
    "SweepState",
    "IntersectionPair",
    "Event",
    "EventKind",
    "IntersectionDetector",
    "BruteForceDetector",
    "VectorizedDetector",
    "SweepDetector",
    "get_detector",
    "BoundedMinQueue",
    "schedule_events",
]
