"""Time sources for the frame loop."""
from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def elapsed(self) -> float:
        """Seconds since the clock started."""
        ...


class MonotonicClock:
    """Wall clock based on time.perf_counter()."""

    def __init__(self) -> None:
        self._start = time.perf_counter()

    def elapsed(self) -> float:
        return time.perf_counter() - self._start


class ManualClock:
    """A clock that only moves when told to. Used for tests and stepping."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def elapsed(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        self._now += seconds
