"""Enumerations shared by the scoring engine and its display collaborators."""

from enum import StrEnum


class CompetitorNumber(StrEnum):
    ONE = "one"
    TWO = "two"


class MatchState(StrEnum):
    """Coarse match state, derived from the clock on every read."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class ScoreField(StrEnum):
    POINTS = "points"
    ADVANTAGES = "advantages"
    PENALTIES = "penalties"


class Country(StrEnum):
    AUSTRALIA = "australia"
    BRAZIL = "brazil"
    UNITED_STATES = "united_states"
