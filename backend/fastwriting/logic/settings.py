"""Centralized gameplay settings - all configurable timing and scoring rules."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GameSettings(BaseModel):
    """
    Configuration for one typing game.

    All fields default to the classic rules: a 20 second countdown that loses
    2 seconds every 5 levels, never dropping below 2 seconds.
    """

    model_config = ConfigDict(frozen=True)

    # --- Countdown ---
    initial_time_limit: int = Field(default=20, ge=1)
    min_time_limit: int = Field(default=2, ge=1)
    time_limit_step: int = Field(default=2, ge=0)
    levels_per_time_step: int = Field(default=5, ge=1)
    tick_interval_seconds: float = Field(default=1.0, gt=0)

    # --- Flow ---
    next_target_delay_seconds: float = Field(default=1.5, ge=0)
    end_on_incorrect: bool = False  # strict mode: any wrong answer ends the game

    @model_validator(mode="after")
    def _validate_time_limits(self) -> Self:
        if self.min_time_limit > self.initial_time_limit:
            raise ValueError(
                f"min_time_limit ({self.min_time_limit}) must not exceed "
                f"initial_time_limit ({self.initial_time_limit})",
            )
        return self
