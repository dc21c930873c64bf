from pydantic import BaseModel, ConfigDict, Field

from scoreboard.logic.enums import Country
from scoreboard.logic.models import Competitor
from scoreboard.server.settings import FIGHT_NUMBER_RANGE, MAT_NUMBER_RANGE, MATCH_MINUTES_RANGE

_NAME_FIELD = Field(min_length=1, max_length=50)


class CompetitorSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    first_name: str = _NAME_FIELD
    last_name: str = _NAME_FIELD
    team_name: str = Field(default="", max_length=80)
    country: Country = Country.AUSTRALIA

    def to_competitor(self) -> Competitor:
        return Competitor(
            first_name=self.first_name,
            last_name=self.last_name,
            team_name=self.team_name,
            country=self.country,
        )


class MatchSetupRequest(BaseModel):
    """Competitors and bookkeeping numbers entered before the match starts."""

    model_config = ConfigDict(extra="forbid")

    competitor_one: CompetitorSpec
    competitor_two: CompetitorSpec
    match_time_minutes: int = Field(ge=MATCH_MINUTES_RANGE[0], le=MATCH_MINUTES_RANGE[1], strict=True)
    mat_number: int = Field(default=1, ge=MAT_NUMBER_RANGE[0], le=MAT_NUMBER_RANGE[1], strict=True)
    fight_number: int = Field(default=1, ge=FIGHT_NUMBER_RANGE[0], le=FIGHT_NUMBER_RANGE[1], strict=True)


class KeyPressRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    key: str = Field(min_length=1, max_length=1)
