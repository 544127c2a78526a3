"""Exponential moving average over unevenly spaced samples."""

from __future__ import annotations

import math
import time
from typing import Callable, Optional

Clock = Callable[[], int]

_ULONG_MASK = (1 << 64) - 1


def _milliseconds() -> int:
    return time.monotonic_ns() // 1_000_000


class Ema:
    """Moving average whose weights decay with the time between samples.

    ``clock`` returns the current time in milliseconds; ``alpha`` sets how
    slowly old samples lose weight.
    """

    def __init__(self, alpha: float, clock: Optional[Clock] = None) -> None:
        self.alpha = alpha
        self._clock: Clock = clock if clock is not None else _milliseconds
        self._first = True
        self._ema = 0.0
        self._last_sample = 0.0
        self._last_time = 0

    def update(self, sample: float) -> None:
        """Take a new sample at the current time."""
        now = self._clock()
        if self._first:
            self._first = False
            self._ema = sample
        else:
            if now == self._last_time:
                return
            elapsed = (now - self._last_time) & _ULONG_MASK
            scale = 1 - self.alpha
            tmp = elapsed / 1000.0 / scale if scale else math.inf
            w = math.exp(-tmp)
            w2 = (1 - w) / tmp
            self._ema = w * self._ema + (w2 - w) * self._last_sample + (1 - w2) * sample
        self._last_time = now
        self._last_sample = sample

    def avg(self) -> float:
        """Return the current average; at least one sample must have been taken."""
        if self._first:
            raise RuntimeError("no samples taken yet")
        return self._ema