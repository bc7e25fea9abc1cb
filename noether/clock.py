"""Frame clock measuring elapsed seconds between ticks."""

from __future__ import annotations

import time
from typing import Callable


class Clock:
    """Measures the time between successive ticks."""

    def __init__(self, time_source: Callable[[], float] = time.perf_counter) -> None:
        self._time_source = time_source
        self._now = 0.0
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    def start(self) -> None:
        self._now = self._time_source()
        self._started = True

    def tick(self) -> float:
        """Return seconds since the last tick or start; 0.0 before starting."""
        if not self._started:
            return 0.0
        following = self._time_source()
        dt = following - self._now
        self._now = following
        return dt