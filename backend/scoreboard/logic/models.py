"""Mutable records owned by a single match: competitors, scores, match metadata."""

from dataclasses import dataclass, field

from scoreboard.logic.enums import Country, ScoreField


@dataclass
class Competitor:
    """Display identity of one competitor.

    Edited during match setup only; treated as read-only once the clock starts.
    """

    first_name: str = "Competitor"
    last_name: str = "Name"
    team_name: str = "BJJ Team"
    country: Country = Country.AUSTRALIA

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass
class PlayerScore:
    points: int = 0
    advantages: int = 0
    penalties: int = 0

    def subtract(self, score_field: ScoreField) -> None:
        """Remove one unit from a field. A field already at zero is left unchanged."""
        if score_field is ScoreField.POINTS:
            if self.points > 0:
                self.points -= 1
        elif score_field is ScoreField.ADVANTAGES:
            if self.advantages > 0:
                self.advantages -= 1
        elif score_field is ScoreField.PENALTIES:
            if self.penalties > 0:
                self.penalties -= 1
        else:
            raise ValueError(f"Unknown score field: {score_field!r}")


@dataclass
class MatchScore:
    competitor_one_score: PlayerScore = field(default_factory=PlayerScore)
    competitor_two_score: PlayerScore = field(default_factory=PlayerScore)


@dataclass
class MatchInformation:
    competitor_one: Competitor = field(default_factory=lambda: Competitor(last_name="One"))
    competitor_two: Competitor = field(default_factory=lambda: Competitor(last_name="Two"))
    match_time_minutes: int = 5
    mat_number: int = 1
    fight_number: int = 1
