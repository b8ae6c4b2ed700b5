"""
numpy conversion helpers.

This module provides:
    • segments_from_array(array)
    • segments_to_array(segments)

Segment arrays use the N x 2 x 2 layout of line-segment detector output:
array[i] = [[x1, y1], [x2, y2]].
"""

from typing import List, Sequence

import numpy as np

from sweepline.models.line_segment import LineSegment


def segments_from_array(array) -> List[LineSegment]:
    """
    Wrap every row of an N x 2 x 2 (or N x 4) array as a LineSegment.

    Parameters
    ----------
    array : array_like
        Anything numpy can reshape to (-1, 2, 2).

    Returns
    -------
    list[LineSegment]
        One segment per row, endpoint order preserved.
    """
    data = np.asarray(array, dtype=np.float64)
    if data.size % 4 != 0:
        raise ValueError(
            f"cannot reshape array of size {data.size} into segments (N x 2 x 2)"
        )

    data = data.reshape(-1, 2, 2)

    segments = []
    for (pt1, pt2) in data:
        segments.append(LineSegment(float(pt1[0]), float(pt1[1]), float(pt2[0]), float(pt2[1])))
    return segments


def segments_to_array(segments: Sequence[LineSegment]) -> np.ndarray:
    """Inverse of segments_from_array(): float64 array of shape (N, 2, 2)."""
    data = np.empty((len(segments), 2, 2), dtype=np.float64)
    for i, seg in enumerate(segments):
        data[i] = (seg.start.as_tuple(), seg.end.as_tuple())
    return data
