"""A simple wall-clock timer reporting milliseconds."""

from __future__ import annotations

import time
import warnings
from typing import Callable


class Timer:
    """Accumulating stopwatch; elapsed time is reported in milliseconds."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start_time = 0.0
        self._elapsed = 0.0
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Reset and start measuring."""
        self._elapsed = 0.0
        self.cont()

    def cont(self) -> None:
        """Continue measuring, adding to the time already accumulated."""
        self._start_time = self._clock()
        self._running = True

    def stop(self) -> "Timer":
        """Stop measuring and return the timer."""
        end = self._clock()
        self._elapsed += end - self._start_time
        self._running = False
        return self

    def elapsed(self) -> float:
        """Elapsed time in milliseconds; the timer should be stopped."""
        if self._running:
            warnings.warn(
                "Timer: stop timer before calling elapsed()",
                RuntimeWarning,
                stacklevel=2,
            )
        return 1000.0 * self._elapsed

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def __str__(self) -> str:
        return f"{self.elapsed():g} ms"