"""Monotonic stopwatch and duration conversions."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

_NS_PER_S = 1_000_000_000


@dataclass(frozen=True)
class Duration:
    """Elapsed time as whole seconds plus a nanosecond part (may be negative)."""

    seconds: int
    nanoseconds: int

    def as_seconds(self) -> float:
        return float(self.seconds) + float(self.nanoseconds) * 1.0e-9

    def as_milliseconds(self) -> float:
        return float(self.seconds) * 1.0e3 + float(self.nanoseconds) * 1.0e-6

    def as_microseconds(self) -> float:
        return float(self.seconds) * 1.0e6 + float(self.nanoseconds) * 1.0e-3

    def as_nanoseconds(self) -> float:
        return float(self.seconds) * 1.0e9 + float(self.nanoseconds)


class Chrono:
    """Stopwatch reading a nanosecond clock; usable as a context manager."""

    def __init__(self, clock: Callable[[], int] = time.monotonic_ns) -> None:
        self._clock = clock
        self._start: int | None = None
        self._end: int | None = None

    def start(self) -> None:
        self._start = self._clock()

    def stop(self) -> None:
        if self._start is None:
            raise RuntimeError("chrono stopped before it was started")
        self._end = self._clock()

    def elapsed(self) -> Duration:
        """Return the time between the last start and stop."""
        if self._start is None or self._end is None:
            raise RuntimeError("chrono must be started and stopped first")
        start_s, start_ns = divmod(self._start, _NS_PER_S)
        end_s, end_ns = divmod(self._end, _NS_PER_S)
        return Duration(end_s - start_s, end_ns - start_ns)

    def __enter__(self) -> Chrono:
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.stop()