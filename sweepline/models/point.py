from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """Immutable 2D coordinate. Non-finite values are accepted as-is."""

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)
