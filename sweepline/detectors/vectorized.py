import logging
from typing import List, Optional, Sequence

import numpy as np

from sweepline.config import get_active_params
from sweepline.detectors.base import IntersectionDetector
from sweepline.models.intersection import IntersectionPair
from sweepline.models.line_segment import LineSegment
from sweepline.utils.arrays import segments_to_array

logger = logging.getLogger(__name__)


def _line_coefficients(data: np.ndarray):
    """a, b, c arrays of the implicit lines, same arithmetic as Line.from_coordinates."""
    x1, y1 = data[:, 0, 0], data[:, 0, 1]
    x2, y2 = data[:, 1, 0], data[:, 1, 1]
    dx = x2 - x1
    dy = y2 - y1
    return dy, -dx, dx * y1 - dy * x1


def _touch_matrix(a, b, c, x1, y1, x2, y2) -> np.ndarray:
    """
    touch[r, k] = segment k touches line r.

    Line coefficients are column vectors (rows of the result), segment
    endpoints row vectors.
    """
    t1 = a * x1 + b * y1 + c
    t2 = a * x2 + b * y2 + c
    return t1 * t2 <= 0


class VectorizedDetector(IntersectionDetector):
    """
    Brute-force detection evaluated with numpy broadcasting.

    Same predicate, same floating-point operations and same output order as
    BruteForceDetector. The n x n pair matrix is computed in row blocks of
    `block_size` rows to keep memory at O(block_size * n).
    """

    name = "vectorized"

    def __init__(self, block_size: Optional[int] = None):
        if block_size is None:
            block_size = get_active_params()["VECTORIZED_BLOCK_SIZE"]
        if block_size < 1:
            raise ValueError(f"block_size must be at least 1, got {block_size}")
        self.block_size = block_size

    def detect(self, segments: Sequence[LineSegment]) -> List[IntersectionPair]:
        n = len(segments)
        if n < 2:
            return []

        data = segments_to_array(segments)
        a, b, c = _line_coefficients(data)
        x1, y1 = data[:, 0, 0], data[:, 0, 1]
        x2, y2 = data[:, 1, 0], data[:, 1, 1]
        columns = np.arange(n)

        intersections = []

        # NaN / inf inputs propagate as "no touch", exactly as in pure Python
        with np.errstate(invalid="ignore", over="ignore"):
            for lo in range(0, n, self.block_size):
                hi = min(lo + self.block_size, n)
                rows = slice(lo, hi)

                # segment j touches line i
                others_touch = _touch_matrix(
                    a[rows, None], b[rows, None], c[rows, None],
                    x1[None, :], y1[None, :], x2[None, :], y2[None, :],
                )
                # segment i touches line j
                self_touch = _touch_matrix(
                    a[None, :], b[None, :], c[None, :],
                    x1[rows, None], y1[rows, None], x2[rows, None], y2[rows, None],
                )

                upper = columns[None, :] > np.arange(lo, hi)[:, None]
                hits = others_touch & self_touch & upper

                for i, j in zip(*np.nonzero(hits)):
                    intersections.append(IntersectionPair(segments[lo + i], segments[j]))

        logger.debug(
            "Vectorized: %d segments, %d intersecting pairs (block size %d)",
            n, len(intersections), self.block_size,
        )
        return intersections
