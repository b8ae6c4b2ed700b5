from abc import ABC, abstractmethod
from typing import Iterator, List, Sequence, Tuple

from sweepline.models.intersection import IntersectionPair
from sweepline.models.line_segment import LineSegment
from sweepline.models.point import Point


class IntersectionDetector(ABC):
    """
    Strategy for finding every intersecting pair in a set of segments.

    Implementations are stateless between calls; the caller picks one (see
    detectors.get_detector). They share the call signature, not always the
    result:
      - BruteForceDetector / VectorizedDetector report every pair that
        LineSegment.intersects() accepts, in ascending index order.
      - SweepDetector skips pairs whose y-extents are disjoint (collinear
        or zero-length segments the touch test still accepts), and
        reports duplicated segments' pairs once.
    """

    name = "base"

    @abstractmethod
    def detect(self, segments: Sequence[LineSegment]) -> List[IntersectionPair]:
        """Return every intersecting unordered pair, each at most once."""

    def __call__(self, segments: Sequence[LineSegment]) -> List[IntersectionPair]:
        return self.detect(segments)

    def intersection_points(
        self, segments: Sequence[LineSegment]
    ) -> Iterator[Tuple[IntersectionPair, Point]]:
        """Detected pairs together with their point, skipping pairs without one."""
        for pair in self.detect(segments):
            point = pair.intersection_point()
            if point is not None:
                yield pair, point

    def __repr__(self):
        return f"{type(self).__name__}()"
