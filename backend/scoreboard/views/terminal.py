"""Plain-text scoreboard layout for terminal displays."""

from __future__ import annotations

from typing import TYPE_CHECKING

from scoreboard.logic.enums import CompetitorNumber
from scoreboard.logic.formatting import format_millis

if TYPE_CHECKING:
    from scoreboard.logic.match import Match


def _score_line(match: Match, competitor: CompetitorNumber) -> str:
    return (
        f"Points: {match.points(competitor)}    "
        f"Advantages: {match.advantages(competitor)}    "
        f"Penalties: {match.penalties(competitor)}"
    )


def render_lines(match: Match) -> list[str]:
    """Return the scoreboard rows, top to bottom, blank rows included."""
    return [
        match.competitor(CompetitorNumber.ONE).full_name,
        _score_line(match, CompetitorNumber.ONE),
        "",
        match.competitor(CompetitorNumber.TWO).full_name,
        _score_line(match, CompetitorNumber.TWO),
        "",
        f"Time remaining: {format_millis(match.remaining_time_ms())}",
    ]
