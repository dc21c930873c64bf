"""Scoreboard server configuration via environment variables."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from shared.validators import StringListEnvSettingsSource, parse_string_list

if TYPE_CHECKING:
    from pydantic_settings.sources.base import PydanticBaseSettingsSource

# Ranges offered by the match setup form.
MATCH_MINUTES_RANGE = (1, 30)
MAT_NUMBER_RANGE = (1, 20)
FIGHT_NUMBER_RANGE = (1, 30)


class ScoreboardServerSettings(BaseSettings):
    model_config = {"env_prefix": "SCOREBOARD_"}

    log_dir: str | None = None
    cors_origins: list[str] = []

    # Used for the match the server creates on startup.
    default_match_minutes: int = Field(default=5, ge=MATCH_MINUTES_RANGE[0], le=MATCH_MINUTES_RANGE[1])
    default_mat_number: int = Field(default=1, ge=MAT_NUMBER_RANGE[0], le=MAT_NUMBER_RANGE[1])
    default_fight_number: int = Field(default=1, ge=FIGHT_NUMBER_RANGE[0], le=FIGHT_NUMBER_RANGE[1])

    @field_validator("cors_origins", mode="before")
    @classmethod
    def validate_cors_origins(cls, v: str | list[str]) -> list[str]:
        return parse_string_list(v, allow_empty=True)

    @field_validator("log_dir")
    @classmethod
    def validate_log_dir(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("log_dir must not be blank")
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, StringListEnvSettingsSource(settings_cls), dotenv_settings, file_secret_settings)
