"""
Event scheduling.

This module provides:
    • events_for_segments()  START / END events of each segment
    • schedule_events()      segment and intersection events in a BoundedMinQueue

Intersection events are only created for pairs whose intersection point
exists.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from sweepline.config import get_active_params
from sweepline.models.event import Event
from sweepline.models.intersection import IntersectionPair
from sweepline.models.line_segment import LineSegment
from sweepline.utils.priority_queue import BoundedMinQueue

logger = logging.getLogger(__name__)


def events_for_segments(segments: Iterable[LineSegment]) -> List[Event]:
    """One START event at (x1, y1) and one END event at (x2, y2) per segment."""
    events = []
    for seg in segments:
        events.append(Event.start(seg))
        events.append(Event.end(seg))
    return events


def intersection_events(pairs: Iterable[IntersectionPair]) -> List[Event]:
    events = []
    for pair in pairs:
        event = Event.intersection(pair)
        if event is not None:
            events.append(event)
    return events


def schedule_events(
    segments: Sequence[LineSegment],
    pairs: Iterable[IntersectionPair] = (),
    capacity: Optional[int] = None,
) -> BoundedMinQueue:
    """
    Build the event queue of a sweep.

    Parameters
    ----------
    segments : sequence[LineSegment]
        Segments contributing START / END events.
    pairs : iterable[IntersectionPair]
        Detected pairs contributing INTERSECTION events.
    capacity : int, optional
        Queue capacity. Defaults to DEFAULT_QUEUE_CAPACITY from config; when
        that is None too, the queue is sized to hold every event.

    Returns
    -------
    BoundedMinQueue
        Queue holding (at most `capacity` of) the smallest events.
    """
    events = events_for_segments(segments) + intersection_events(pairs)

    if capacity is None:
        capacity = get_active_params()["DEFAULT_QUEUE_CAPACITY"]
    if capacity is None:
        capacity = max(len(events), 1)

    queue = BoundedMinQueue(capacity)
    queue.extend(events)

    if not queue.is_exact:
        logger.debug(
            "Event queue capacity %d retained %d of %d events",
            capacity, len(queue), queue.appended,
        )
    return queue
