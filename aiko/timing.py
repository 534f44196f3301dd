"""Millisecond clock that starts counting on first use."""

from __future__ import annotations

import time
from typing import Callable

_NANOSECONDS_PER_MILLISECOND = 1_000_000
_MILLIS_MASK = 0xFFFFFFFF  # the count is an unsigned 32-bit value and wraps


class TimingManager:
    """Counts milliseconds from the first call to :meth:`millis`.

    ``clock`` returns a monotonic time in integer nanoseconds.
    """

    def __init__(self, clock: Callable[[], int] = time.monotonic_ns) -> None:
        self._clock = clock
        self._start: int | None = None

    @property
    def is_set_up(self) -> bool:
        return self._start is not None

    def millis(self) -> int:
        """Return elapsed milliseconds, wrapping at 2**32."""
        now = self._clock()
        if self._start is None:
            self._start = now
        elapsed = (now - self._start) // _NANOSECONDS_PER_MILLISECOND
        return elapsed & _MILLIS_MASK