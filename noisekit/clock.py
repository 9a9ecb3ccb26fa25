"""Wall-clock helpers: current time, time since start, and a pausable timer.

Time points and durations are floats measured in seconds.
"""

from __future__ import annotations

import time

_start: float | None = None


def now() -> float:
    """Return the current high-resolution clock reading in seconds."""
    return time.perf_counter()


def _start_time() -> float:
    global _start
    if _start is None:
        _start = now()
    return _start


def elapsed() -> float:
    """Return the seconds elapsed since the clock was first consulted."""
    start = _start_time()
    return now() - start


class Timer:
    """Measures accumulated wall-clock time across start/stop intervals."""

    def __init__(self, start_on_creation: bool = True) -> None:
        self._start_time = now()
        self._elapsed = 0.0
        self._running = False
        if start_on_creation:
            self.start()

    def start(self) -> None:
        """Start or resume the timer; raises RuntimeError if already running."""
        if self._running:
            raise RuntimeError("Timer already running")
        self._start_time = now()
        self._running = True

    def stop(self) -> float:
        """Pause the timer and return the total elapsed seconds."""
        if self._running:
            self._elapsed += now() - self._start_time
            self._running = False
        return self._elapsed

    def reset(self) -> None:
        """Clear the elapsed time and start the timer again."""
        self._elapsed = 0.0
        self.start()