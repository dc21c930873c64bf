"""
Wall-clock anchored match clock with pause/resume support.

Remaining time is computed from the recorded start of the current running
segment plus the time banked by earlier segments, so the result does not
depend on how often the display polls it. A wall clock that moves backward
contributes no time for the affected segment instead of raising.
"""

from __future__ import annotations

import time

import structlog

logger = structlog.get_logger()

MILLIS_PER_MINUTE = 60_000
_NANOS_PER_MILLI = 1_000_000


def _segment_millis(started_ns: int, now_ns: int) -> int:
    """Whole milliseconds between two wall-clock readings, never negative."""
    return max(0, (now_ns - started_ns) // _NANOS_PER_MILLI)


class MatchClock:
    """
    Count down a fixed match duration across any number of pauses.

    The (elapsed, last_started, running) triple is only meaningful as a unit:
    remaining time reads all three, so callers must not update them piecemeal.
    """

    def __init__(self, duration_ms: int = 0) -> None:
        if duration_ms < 0:
            raise ValueError(f"duration_ms must be non-negative, got {duration_ms}")
        self.duration_ms = duration_ms
        self._elapsed_ms = 0
        self._last_started: int | None = None  # time.time_ns() at the latest start
        self._running = False

    @classmethod
    def from_minutes(cls, minutes: int) -> MatchClock:
        return cls(duration_ms=minutes * MILLIS_PER_MINUTE)

    @property
    def running(self) -> bool:
        return self._running

    @property
    def has_started(self) -> bool:
        """True once the clock has been started at least once."""
        return self._last_started is not None

    def start(self) -> None:
        """Begin a running segment. No-op while already running."""
        if self._running:
            return
        self._running = True
        self._last_started = time.time_ns()
        logger.debug("clock started", elapsed_ms=self._elapsed_ms, duration_ms=self.duration_ms)

    def stop(self) -> None:
        """Close the running segment and bank its time. No-op while stopped."""
        if not self._running:
            return
        segment = 0
        if self._last_started is not None:
            segment = _segment_millis(self._last_started, time.time_ns())
        self._running = False
        self._elapsed_ms += segment
        logger.debug("clock stopped", segment_ms=segment, elapsed_ms=self._elapsed_ms)

    def toggle(self) -> None:
        if self._running:
            self.stop()
        else:
            self.start()

    def elapsed_ms(self) -> int:
        """Banked time plus the current segment when running."""
        if self._running and self._last_started is not None:
            return self._elapsed_ms + _segment_millis(self._last_started, time.time_ns())
        return self._elapsed_ms

    def remaining_ms(self) -> int:
        """Time left on the clock, floored at zero."""
        return max(0, self.duration_ms - self.elapsed_ms())
