"""
Detectors Package

Pluggable strategies for finding intersecting segment pairs:
- Brute force (reference oracle)
- Vectorized brute force (numpy), same results
- Active-interval sweep (skips pairs with disjoint y-extents)
"""

from typing import Optional

from sweepline.config import get_active_params

from .base import IntersectionDetector
from .brute_force import BruteForceDetector
from .vectorized import VectorizedDetector
from .sweep import SweepDetector, SweepStatus

DETECTORS = {
    BruteForceDetector.name: BruteForceDetector,
    VectorizedDetector.name: VectorizedDetector,
    SweepDetector.name: SweepDetector,
}


def get_detector(name: Optional[str] = None) -> IntersectionDetector:
    """
    Instantiate a detector by name; DEFAULT_DETECTOR from config when
    no name is given.

    "brute_force" and "vectorized" return identical results. "sweep" can
    return fewer pairs: collinear or zero-length segments with disjoint
    y-extents are never tested against each other.
    """
    if name is None:
        name = get_active_params()["DEFAULT_DETECTOR"]
    try:
        return DETECTORS[name]()
    except KeyError:
        raise ValueError(
            f"unknown detector {name!r}, expected one of {sorted(DETECTORS)}"
        ) from None


__all__ = [
    "IntersectionDetector",
    "BruteForceDetector",
    "VectorizedDetector",
    "SweepDetector",
    "SweepStatus",
    "DETECTORS",
    "get_detector",
]
