"""
Utility Functions

Provides the bounded event queue, event scheduling and numpy
conversion helpers used across detectors.
"""

from .priority_queue import BoundedMinQueue
from .scheduling import events_for_segments, intersection_events, schedule_events
from .arrays import segments_from_array, segments_to_array

__all__ = [
    "BoundedMinQueue",
    "events_for_segments",
    "intersection_events",
    "schedule_events",
    "segments_from_array",
    "segments_to_array",
]
