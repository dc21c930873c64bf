"""Shared builders for scoreboard tests."""

from scoreboard.logic.enums import Country
from scoreboard.logic.match import Match, new_match
from scoreboard.logic.models import Competitor

_NANOS_PER_MILLI = 1_000_000


class FakeWallClock:
    """Controllable stand-in for ``time.time_ns`` in the clock module."""

    def __init__(self, start_ns: int = 1_700_000_000 * 1_000_000_000) -> None:
        self.now_ns = start_ns

    def advance_ms(self, millis: int) -> None:
        self.now_ns += millis * _NANOS_PER_MILLI

    def rewind_ms(self, millis: int) -> None:
        self.now_ns -= millis * _NANOS_PER_MILLI

    def time_ns(self) -> int:
        return self.now_ns


def create_match(
    *,
    duration_minutes: int = 5,
    mat_number: int = 1,
    fight_number: int = 1,
) -> Match:
    """Create a match between two fixed competitors with sensible defaults for testing."""
    return new_match(
        Competitor("Shane", "Poppleton", "Fight Club Jiu-Jitsu", Country.AUSTRALIA),
        Competitor("Ronaldo", "Mendes Dos Santos", "Caza BJJ", Country.BRAZIL),
        duration_minutes,
        mat_number,
        fight_number,
    )
