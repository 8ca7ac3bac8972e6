"""
Fixed-step tick scheduler.

Accumulates elapsed time from a monotonic clock and releases one
simulation step for every full cadence that has passed. Rendering and
input polling may happen as often as the host loop likes; the game state
only changes when a step is released.
"""

import logging
import time
from typing import Callable

from domain.constants import TICK_SECONDS

logger = logging.getLogger(__name__)

# Most steps the scheduler will owe the host loop before dropping time
DEFAULT_MAX_BACKLOG = 3


class TickScheduler:
    """
    Accumulator-based scheduler.

    Attributes:
        cadence: seconds per simulation step
        ticks: number of steps released since the last reset
    """

    def __init__(
        self,
        cadence: float = TICK_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        max_backlog: int = DEFAULT_MAX_BACKLOG,
    ):
        if cadence <= 0:
            raise ValueError(f"Cadence must be positive, got {cadence}")
        if max_backlog < 1:
            raise ValueError(f"max_backlog must be at least 1, got {max_backlog}")
        self.cadence = cadence
        self.clock = clock
        self.max_backlog = max_backlog
        self.reset()

    def reset(self):
        self._last = self.clock()
        self._accumulated = 0.0
        self.ticks = 0

    def _accumulate(self):
        now = self.clock()
        self._accumulated += max(0.0, now - self._last)
        self._last = now

        limit = self.cadence * self.max_backlog
        if self._accumulated > limit:
            logger.warning(
                "Scheduler fell behind by %.3fs; dropping %.3fs",
                self._accumulated,
                self._accumulated - limit,
            )
            self._accumulated = limit

    def due(self) -> bool:
        """
        Return True, and consume one cadence, if a step should run now.

        Call repeatedly to drain a backlog one step at a time.
        """
        self._accumulate()
        if self._accumulated >= self.cadence:
            self._accumulated -= self.cadence
            self.ticks += 1
            return True
        return False

    def time_until_next(self) -> float:
        """Seconds until the next step is due (0 if one is already owed)."""
        self._accumulate()
        return max(0.0, self.cadence - self._accumulated)
