"""
Pydantic read models of a match for display collaborators.

Snapshots are built fresh for every render/poll; they never feed back into
the engine.
"""

from pydantic import BaseModel, ConfigDict

from scoreboard.logic.enums import CompetitorNumber, Country, MatchState
from scoreboard.logic.formatting import format_millis
from scoreboard.logic.match import Match, derive_state


class CompetitorView(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    team_name: str
    country: Country
    points: int
    advantages: int
    penalties: int


class MatchSnapshot(BaseModel):
    """Everything a scoreboard display needs for one frame."""

    model_config = ConfigDict(frozen=True)

    state: MatchState
    remaining_ms: int
    remaining: str
    clock_running: bool
    match_time_minutes: int
    mat_number: int
    fight_number: int
    competitor_one: CompetitorView
    competitor_two: CompetitorView


def _competitor_view(match: Match, number: CompetitorNumber) -> CompetitorView:
    competitor = match.competitor(number)
    return CompetitorView(
        first_name=competitor.first_name,
        last_name=competitor.last_name,
        team_name=competitor.team_name,
        country=competitor.country,
        points=match.points(number),
        advantages=match.advantages(number),
        penalties=match.penalties(number),
    )


def build_snapshot(match: Match) -> MatchSnapshot:
    # read the clock once so remaining_ms, remaining and state agree
    remaining_ms = match.remaining_time_ms()
    return MatchSnapshot(
        state=derive_state(has_started=match.clock.has_started, remaining_ms=remaining_ms),
        remaining_ms=remaining_ms,
        remaining=format_millis(remaining_ms),
        clock_running=match.clock.running,
        match_time_minutes=match.info.match_time_minutes,
        mat_number=match.info.mat_number,
        fight_number=match.info.fight_number,
        competitor_one=_competitor_view(match, CompetitorNumber.ONE),
        competitor_two=_competitor_view(match, CompetitorNumber.TWO),
    )
