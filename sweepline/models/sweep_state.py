from typing import Optional

from sweepline.config import get_active_params
from sweepline.models.line import Line


class SweepState:
    """
    Shared ordering context for one sweep pass.

    Holds two horizontal lines:
      - sweep : y = position
      - below : y = position + SWEEP_BELOW_OFFSET

    The driver owns a single instance, moves it with set_position() between
    events and passes it to every compare_segments() call. Segments never
    keep a copy of it.
    """

    def __init__(self, position: Optional[float] = None):
        params = get_active_params()
        self._offset = params["SWEEP_BELOW_OFFSET"]
        if position is None:
            position = params["INITIAL_SWEEP_POSITION"]
        self.set_position(position)

    def set_position(self, y: float):
        """Move the sweep to y; both lines are replaced together."""
        self._position = y
        self._sweep = Line.horizontal(y)
        self._below = Line.horizontal(y + self._offset)

    @property
    def position(self) -> float:
        return self._position

    @property
    def sweep(self) -> Line:
        return self._sweep

    @property
    def below(self) -> Line:
        return self._below

    def __repr__(self):
        return f"SweepState(position={self._position})"
