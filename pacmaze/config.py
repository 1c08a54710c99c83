"""Project-wide settings, frame timing and error reporting."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

SUCCESS = 0
FAILURE = -1

WIN_MAX_X = 672
WIN_MAX_Y = 864
COLOR_BIT = 32

OBJECT_SIZE = 24.0
"""Edge length of one maze tile in pixels."""

DEFAULT_REFRESH_RATE = 60

logger = logging.getLogger("pacmaze")


@dataclass
class FrameTimer:
    """Measures the time between frames, capped at one display refresh."""

    old_time: float = 0.0
    delta_second: float = 0.0

    def tick(self, now: float | None = None, refresh_rate: float = DEFAULT_REFRESH_RATE) -> float:
        """Record a frame at ``now`` (seconds) and return the capped frame time."""
        if now is None:
            now = time.perf_counter()
        delta = now - self.old_time
        self.old_time = now
        if refresh_rate > 0:
            delta = min(delta, 1.0 / refresh_rate)
        self.delta_second = delta
        return delta


def report_error(message: str) -> int:
    """Log an error message and return the failure exit status."""
    logger.error("%s", message)
    return FAILURE