"""Millisecond countdown timer."""

from __future__ import annotations

import sys
import time
from typing import Callable, TextIO


class Timer:
    """Reports when more than a given number of milliseconds have passed."""

    def __init__(self, delay_ms: int = 0, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self.delay_ms = delay_ms
        self._start = self._clock()

    def reset(self, delay_ms: int) -> None:
        """Set a new delay and restart from now."""
        self.delay_ms = delay_ms
        self._start = self._clock()

    def destroy(self) -> None:
        """Disarm the timer; it then counts as always over."""
        self.delay_ms = -1

    def elapsed_ms(self) -> int:
        """Whole milliseconds since the timer last started."""
        return int((self._clock() - self._start) * 1000)

    def time_over(self) -> bool:
        """True once the delay has passed; the timer then restarts."""
        if self.elapsed_ms() > self.delay_ms:
            self._start = self._clock()
            return True
        return False

    def report(self, stream: TextIO | None = None) -> None:
        """Write the elapsed time to a stream."""
        out = stream if stream is not None else sys.stdout
        out.write(f"Timer:  {self.elapsed_ms()}")