"""Shared pytest fixtures."""

import pytest

from sweepline.models import LineSegment


@pytest.fixture
def fixture_segments():
    """Six segments with exactly four intersecting pairs: (0,1) (0,2) (1,2) (4,5)."""
    return [
        LineSegment(0.0, 1.0, 6.0, 4.0),
        LineSegment(-3.0, 4.0, 6.0, 1.0),
        LineSegment(0.0, 4.0, 6.0, 1.0),
        LineSegment(0.0, 10.0, 12.0, 20.0),
        LineSegment(20.0, 1.0, 12.0, 4.0),
        LineSegment(12.0, 4.0, 20.0, 1.0),
    ]
