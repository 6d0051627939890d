"""A millisecond stopwatch based on the wall clock."""

from __future__ import annotations

import time
from typing import Callable


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class Timer:
    """Stopwatch that can be started, stopped and reset.

    *clock* returns the current time in whole milliseconds; it defaults to
    the system wall clock.
    """

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _now_ms
        self._count = 0
        self.is_running = False

    def start(self) -> None:
        """Start (or resume) timing."""
        self._count = self._clock() - self._count
        self.is_running = True

    def stop(self) -> None:
        """Stop timing, keeping the elapsed time."""
        current = int(self.elapsed_ms())
        self.is_running = False
        self._count = current

    def reset(self) -> None:
        """Set the elapsed time back to zero, keeping the running state."""
        self._count = self._clock() if self.is_running else 0

    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return self.elapsed_ms() / 1000

    def elapsed_ms(self) -> float:
        """Elapsed time in milliseconds."""
        if self.is_running:
            return float(self._clock() - self._count)
        return float(self._count)