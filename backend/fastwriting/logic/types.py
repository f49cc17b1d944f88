"""
Pydantic models for typing game data that crosses component boundaries.

Snapshots are frozen copies handed to the presentation layer; the live
mutable state stays inside GameSession and StatisticsTracker.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from fastwriting.logic.enums import PerformanceRating, SessionStatus, Tier


class StatisticsSnapshot(BaseModel):
    """Statistics of one session as shown on the results screen."""

    model_config = ConfigDict(frozen=True)

    final_level: int
    words_attempted: int
    correct_words: int
    incorrect_words: int
    total_time_spent: int
    accuracy_percentage: float
    words_per_minute: float
    performance_rating: PerformanceRating
    session_duration_seconds: int
    start_time: datetime
    end_time: datetime | None = None


class GameStateSnapshot(BaseModel):
    """Display-binding view of the current session."""

    model_config = ConfigDict(frozen=True)

    status: SessionStatus
    level: int
    tier: Tier
    tier_label: str
    time_limit: int
    remaining_time: int
    current_target: str
    word_completed: bool
    progress: float
