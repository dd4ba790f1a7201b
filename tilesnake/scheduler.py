"""
scheduler.py — Fixed-delay tick scheduling.

The model never schedules itself. The controller feeds frame time in here and
gets back how many advance() calls are due, so the simulation runs at the same
rate whatever the frame rate is, and tests can step it without a clock.
"""

import logging

from .config import TICK_DELAY_MS, MAX_CATCH_UP

logger = logging.getLogger(__name__)


class TickScheduler:
    """Accumulates elapsed seconds and releases whole ticks of `delay_ms`."""

    def __init__(self, delay_ms: int = TICK_DELAY_MS, max_catch_up: int = MAX_CATCH_UP):
        if delay_ms <= 0:
            raise ValueError(f"tick delay must be > 0 ms, got {delay_ms}")
        if max_catch_up < 1:
            raise ValueError(f"max_catch_up must be >= 1, got {max_catch_up}")
        self.delay_ms = delay_ms
        self.max_catch_up = max_catch_up
        self._interval = delay_ms / 1000.0
        self._elapsed = 0.0

    @property
    def interval(self) -> float:
        """Seconds between ticks."""
        return self._interval

    def feed(self, dt: float) -> int:
        """Add `dt` seconds and return the number of ticks now due."""
        if dt < 0:
            raise ValueError(f"elapsed time cannot be negative, got {dt}")
        self._elapsed += dt
        due = int(self._elapsed // self._interval)
        if due > self.max_catch_up:
            # after a long stall, skip the backlog instead of fast-forwarding
            logger.debug("Dropping %d overdue ticks", due - self.max_catch_up)
            self._elapsed = 0.0
            return self.max_catch_up
        self._elapsed -= due * self._interval
        return due

    def reset(self) -> None:
        self._elapsed = 0.0
