"""Frame timer that reports a capped time step."""

from __future__ import annotations

import time
from typing import Callable

MAX_DELTA_TIME = 0.4


class GameTimer:
    """Measures the time between successive frames.

    ``clock`` returns the current time in seconds; the reported step is
    never larger than ``MAX_DELTA_TIME``.
    """

    def __init__(
        self,
        prev_frame_time: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._clock = clock
        self.prev_frame_time = prev_frame_time
        self.frame_time = prev_frame_time
        self.raw_delta = 0.0

    def delta_time(self) -> float:
        """Advance to a new frame and return the elapsed time, capped."""
        self.frame_time = self._clock()
        self.raw_delta = self.frame_time - self.prev_frame_time
        self.prev_frame_time = self.frame_time
        return min(self.raw_delta, MAX_DELTA_TIME)