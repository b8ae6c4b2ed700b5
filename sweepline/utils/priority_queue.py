"""
Capacity-bounded priority queue for sweep events.

Keeps the K smallest items seen so far in a max-heap (heapq over an
order-inverting wrapper) so the largest retained item can be evicted in
O(log K). The true minimum of everything ever appended is tracked
separately and is never evicted.
"""

import heapq
from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class _Inverted:
    """Flips the ordering of the wrapped item, turning heapq into a max-heap."""

    __slots__ = ("item",)

    def __init__(self, item):
        self.item = item

    def __lt__(self, other):
        return other.item < self.item


class BoundedMinQueue(Generic[T]):
    """
    Retains at most `capacity` items: the smallest ones appended so far.

      - peek_min()     exact minimum of every appended item
      - peek_max()     largest *retained* item
      - drain_sorted() retained items, ascending; empties the queue

    Once more than `capacity` items were appended, peek_max() and
    drain_sorted() only describe the retained subset (still the globally
    smallest `capacity` items).
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._heap: List[_Inverted] = []
        self._min: Optional[T] = None
        self._has_min = False
        self._appended = 0

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def append(self, item: T):
        self._appended += 1

        if not self._has_min or item < self._min:
            self._min = item
            self._has_min = True

        if len(self._heap) < self._capacity:
            heapq.heappush(self._heap, _Inverted(item))
        elif item < self._heap[0].item:
            heapq.heapreplace(self._heap, _Inverted(item))

    def extend(self, items: Iterable[T]):
        for item in items:
            self.append(item)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def peek_min(self) -> Optional[T]:
        return self._min if self._has_min else None

    def peek_max(self) -> Optional[T]:
        if not self._heap:
            return None
        return self._heap[0].item

    def drain_sorted(self) -> List[T]:
        """Retained items in ascending order. The tracked minimum is kept."""
        items = [entry.item for entry in self._heap]
        self._heap = []
        items.sort()
        return items

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def appended(self) -> int:
        """Number of append() calls so far."""
        return self._appended

    @property
    def is_exact(self) -> bool:
        """True while nothing has been evicted or discarded."""
        return self._appended <= self._capacity

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)

    def __repr__(self):
        return f"BoundedMinQueue(capacity={self._capacity}, retained={len(self._heap)})"
