"""Outcome notifications emitted by the typing game core.

Every state change a view needs to render is announced as one of the frozen
event models below. Listeners receive them synchronously, in the order the
session produced them. All layers import event types from this module.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict

from fastwriting.logic.enums import Tier, TimerUrgency
from fastwriting.logic.types import StatisticsSnapshot


class EventType(StrEnum):
    """Types of game events."""

    TARGET_LOADED = "target_loaded"
    CORRECT_ADVANCE = "correct_advance"
    INCORRECT_RETRY = "incorrect_retry"
    EMPTY_INPUT_WARNING = "empty_input_warning"
    ALREADY_COMPLETED_WARNING = "already_completed_warning"
    TIMER_TICK = "timer_tick"
    TIME_UP = "time_up"
    VOLUNTARY_END = "voluntary_end"
    INCORRECT_GAME_OVER = "incorrect_game_over"


class GameEvent(BaseModel):
    """Base class for all game events."""

    model_config = ConfigDict(frozen=True)

    type: EventType


class TargetLoadedEvent(GameEvent):
    """A new target is on screen and its countdown has started."""

    type: Literal[EventType.TARGET_LOADED] = EventType.TARGET_LOADED
    target: str
    level: int
    tier: Tier
    tier_label: str
    time_limit: int
    progress: float


class CorrectAdvanceEvent(GameEvent):
    """The target was typed correctly and the player moved up a level."""

    type: Literal[EventType.CORRECT_ADVANCE] = EventType.CORRECT_ADVANCE
    level: int
    tier: Tier
    tier_label: str
    time_limit: int
    time_limit_reduced: bool = False
    time_spent: int


class IncorrectRetryEvent(GameEvent):
    type: Literal[EventType.INCORRECT_RETRY] = EventType.INCORRECT_RETRY
    remaining_time: int


class EmptyInputWarningEvent(GameEvent):
    type: Literal[EventType.EMPTY_INPUT_WARNING] = EventType.EMPTY_INPUT_WARNING


class AlreadyCompletedWarningEvent(GameEvent):
    """The completed target was submitted again before the next one loaded."""

    type: Literal[EventType.ALREADY_COMPLETED_WARNING] = EventType.ALREADY_COMPLETED_WARNING


class TimerTickEvent(GameEvent):
    type: Literal[EventType.TIMER_TICK] = EventType.TIMER_TICK
    remaining_time: int
    urgency: TimerUrgency


class GameEndEvent(GameEvent):
    """Base for terminal events; carries the finalized statistics."""

    final_level: int
    statistics: StatisticsSnapshot


class TimeUpEvent(GameEndEvent):
    type: Literal[EventType.TIME_UP] = EventType.TIME_UP


class VoluntaryEndEvent(GameEndEvent):
    type: Literal[EventType.VOLUNTARY_END] = EventType.VOLUNTARY_END


class IncorrectGameOverEvent(GameEndEvent):
    """Strict mode only: a wrong submission ended the game."""

    type: Literal[EventType.INCORRECT_GAME_OVER] = EventType.INCORRECT_GAME_OVER


EventListener = Callable[[GameEvent], None]
