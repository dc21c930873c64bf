from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from scoreboard.logic.enums import CompetitorNumber


class ActionType(StrEnum):
    START_MATCH = "start_match"
    TOGGLE_CLOCK = "toggle_clock"
    ADD_POINTS = "add_points"
    ADD_ADVANTAGE = "add_advantage"
    ADD_PENALTY = "add_penalty"
    SUBTRACT_POINT = "subtract_point"
    SUBTRACT_ADVANTAGE = "subtract_advantage"
    SUBTRACT_PENALTY = "subtract_penalty"


class ClockAction(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    action: Literal[ActionType.START_MATCH, ActionType.TOGGLE_CLOCK]


class AddPointsAction(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    action: Literal[ActionType.ADD_POINTS] = ActionType.ADD_POINTS
    competitor: CompetitorNumber
    points: int = Field(ge=0, le=100, strict=True)


class CompetitorAction(BaseModel):
    """Single-unit scoring action that only names the competitor."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    action: Literal[
        ActionType.ADD_ADVANTAGE,
        ActionType.ADD_PENALTY,
        ActionType.SUBTRACT_POINT,
        ActionType.SUBTRACT_ADVANTAGE,
        ActionType.SUBTRACT_PENALTY,
    ]
    competitor: CompetitorNumber


ScoreboardAction = Annotated[
    ClockAction | AddPointsAction | CompetitorAction,
    Field(discriminator="action"),
]

_action_adapter = TypeAdapter(ScoreboardAction)


def parse_action(data: dict[str, Any]) -> ClockAction | AddPointsAction | CompetitorAction:
    """Validate a raw dict into a typed operator action.

    Raises pydantic.ValidationError for unknown actions or bad fields.
    """
    return _action_adapter.validate_python(data)
