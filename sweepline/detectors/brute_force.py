import logging
from typing import List, Sequence

from sweepline.detectors.base import IntersectionDetector
from sweepline.models.intersection import IntersectionPair
from sweepline.models.line_segment import LineSegment

logger = logging.getLogger(__name__)


class BruteForceDetector(IntersectionDetector):
    """
    Reference detector: tests every unordered pair (i < j) with
    LineSegment.intersects().

    Pairs come out in ascending index order of discovery, (i, j) before
    (i, j + 1) before (i + 1, ...). O(n^2).
    """

    name = "brute_force"

    def detect(self, segments: Sequence[LineSegment]) -> List[IntersectionPair]:
        """
        Parameters
        ----------
        segments : sequence[LineSegment]

        Returns
        -------
        list[IntersectionPair]
            IntersectionPair(segments[i], segments[j]) for every i < j that
            intersect.
        """
        intersections = []

        for i in range(len(segments)):
            seg1 = segments[i]
            for j in range(i + 1, len(segments)):
                seg2 = segments[j]
                if seg1.intersects(seg2):
                    intersections.append(IntersectionPair(seg1, seg2))

        logger.debug(
            "Brute force: %d segments, %d intersecting pairs",
            len(segments), len(intersections),
        )
        return intersections
