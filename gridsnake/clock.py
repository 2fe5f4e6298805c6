"""Fixed-interval tick scheduling on top of a millisecond clock."""

from __future__ import annotations

import time
from typing import Callable


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class TickClock:
    """Accumulates elapsed time and reports when a fixed-length tick is due."""

    def __init__(self, clock: Callable[[], int] = _monotonic_ms) -> None:
        self._clock = clock
        self._last_tick_time = clock()
        self.accumulator = 0

    def should_tick(self, tick_interval: int) -> bool:
        """Return True when at least ``tick_interval`` ms have built up.

        Each True consumes one interval, so a long pause yields several
        consecutive ticks until the backlog is worked off.
        """
        current_time = self._clock()
        self.accumulator += current_time - self._last_tick_time
        self._last_tick_time = current_time

        if self.accumulator >= tick_interval:
            self.accumulator -= tick_interval
            return True
        return False