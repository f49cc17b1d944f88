"""Game server configuration via environment variables."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from fastwriting.logic.settings import GameSettings
from fastwriting.shared.validators import StringListEnvSettingsSource, parse_string_list

if TYPE_CHECKING:
    from pydantic_settings.sources.base import PydanticBaseSettingsSource


class GameServerSettings(BaseSettings):
    model_config = {"env_prefix": "FASTWRITING_"}

    max_sessions: int = Field(default=100, ge=1)
    log_dir: str = Field(default="backend/logs", min_length=1)
    cors_origins: list[str] = ["http://localhost:8710"]

    # gameplay overrides, forwarded into GameSettings
    initial_time_limit: int = Field(default=20, ge=1)
    min_time_limit: int = Field(default=2, ge=1)
    next_target_delay_seconds: float = Field(default=1.5, ge=0)
    end_on_incorrect: bool = False

    @field_validator("cors_origins", mode="before")
    @classmethod
    def validate_cors_origins(cls, v: str | list[str]) -> list[str]:
        return parse_string_list(v)

    @property
    def game_settings(self) -> GameSettings:
        return GameSettings(
            initial_time_limit=self.initial_time_limit,
            min_time_limit=self.min_time_limit,
            next_target_delay_seconds=self.next_target_delay_seconds,
            end_on_incorrect=self.end_on_incorrect,
        )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return init_settings, StringListEnvSettingsSource(settings_cls), dotenv_settings, file_secret_settings
