"""
Match scoring engine.

A Match composes the setup information, both competitors' scores and the
match clock. Its coarse state (not started, in progress, finished) is derived
from the clock on every read rather than stored, so it cannot drift from the
timer. Finishing is observed, not triggered: once the clock runs out the
match reports FINISHED without any call.

Scoring commands never check the match state. Referees may correct the
scoresheet after the buzzer, so every command is accepted in every state.
"""

from __future__ import annotations

import structlog

from scoreboard.logic.clock import MILLIS_PER_MINUTE, MatchClock
from scoreboard.logic.enums import CompetitorNumber, MatchState, ScoreField
from scoreboard.logic.models import Competitor, MatchInformation, MatchScore, PlayerScore

logger = structlog.get_logger()


def derive_state(*, has_started: bool, remaining_ms: int) -> MatchState:
    """Map one clock reading onto the coarse match state."""
    if not has_started:
        return MatchState.NOT_STARTED
    if remaining_ms == 0:
        return MatchState.FINISHED
    return MatchState.IN_PROGRESS


class Match:
    """A single grappling match: setup info, running score and clock."""

    def __init__(
        self,
        info: MatchInformation | None = None,
        score: MatchScore | None = None,
        clock: MatchClock | None = None,
    ) -> None:
        self.info = info or MatchInformation()
        self.score = score or MatchScore()
        self.clock = clock or MatchClock.from_minutes(self.info.match_time_minutes)

    def _score_for(self, competitor: CompetitorNumber) -> PlayerScore:
        if competitor is CompetitorNumber.ONE:
            return self.score.competitor_one_score
        if competitor is CompetitorNumber.TWO:
            return self.score.competitor_two_score
        raise ValueError(f"Unknown competitor: {competitor!r}")

    def competitor(self, competitor: CompetitorNumber) -> Competitor:
        if competitor is CompetitorNumber.ONE:
            return self.info.competitor_one
        if competitor is CompetitorNumber.TWO:
            return self.info.competitor_two
        raise ValueError(f"Unknown competitor: {competitor!r}")

    # --- clock control ---

    def start_match(self) -> None:
        """Apply the configured duration to the clock and start it.

        Duration edits made during setup take effect here; the duration is
        not re-read by later pause/resume cycles.
        """
        self.clock.duration_ms = self.info.match_time_minutes * MILLIS_PER_MINUTE
        self.clock.start()
        logger.info(
            "match started",
            mat=self.info.mat_number,
            fight=self.info.fight_number,
            duration_ms=self.clock.duration_ms,
        )

    def toggle_clock(self) -> None:
        """Pause or resume the clock; the first toggle starts the match."""
        if not self.clock.has_started:
            self.start_match()
            return
        self.clock.toggle()
        logger.info("clock toggled", running=self.clock.running, remaining_ms=self.clock.remaining_ms())

    # --- queries ---

    def match_state(self) -> MatchState:
        return derive_state(has_started=self.clock.has_started, remaining_ms=self.clock.remaining_ms())

    def remaining_time_ms(self) -> int:
        return self.clock.remaining_ms()

    def points(self, competitor: CompetitorNumber) -> int:
        return self._score_for(competitor).points

    def advantages(self, competitor: CompetitorNumber) -> int:
        return self._score_for(competitor).advantages

    def penalties(self, competitor: CompetitorNumber) -> int:
        return self._score_for(competitor).penalties

    # --- scoring ---

    def add_points(self, points: int, competitor: CompetitorNumber) -> None:
        if points < 0:
            raise ValueError(f"points must be non-negative, got {points}")
        score = self._score_for(competitor)
        score.points += points
        logger.info("points added", competitor=competitor, added=points, points=score.points)

    def add_advantage(self, competitor: CompetitorNumber) -> None:
        score = self._score_for(competitor)
        score.advantages += 1
        logger.info("advantage added", competitor=competitor, advantages=score.advantages)

    def add_penalty(self, competitor: CompetitorNumber) -> None:
        score = self._score_for(competitor)
        score.penalties += 1
        logger.info("penalty added", competitor=competitor, penalties=score.penalties)

    def subtract_point(self, competitor: CompetitorNumber) -> None:
        self._subtract(competitor, ScoreField.POINTS)

    def subtract_advantage(self, competitor: CompetitorNumber) -> None:
        self._subtract(competitor, ScoreField.ADVANTAGES)

    def subtract_penalty(self, competitor: CompetitorNumber) -> None:
        self._subtract(competitor, ScoreField.PENALTIES)

    def _subtract(self, competitor: CompetitorNumber, score_field: ScoreField) -> None:
        score = self._score_for(competitor)
        score.subtract(score_field)
        logger.info("score corrected", competitor=competitor, field=score_field, value=getattr(score, score_field))


def new_match(
    competitor_one: Competitor,
    competitor_two: Competitor,
    duration_minutes: int,
    mat_number: int,
    fight_number: int,
) -> Match:
    """Create a match in the NOT_STARTED state."""
    if duration_minutes < 0:
        raise ValueError(f"duration_minutes must be non-negative, got {duration_minutes}")
    info = MatchInformation(
        competitor_one=competitor_one,
        competitor_two=competitor_two,
        match_time_minutes=duration_minutes,
        mat_number=mat_number,
        fight_number=fight_number,
    )
    return Match(info=info)
