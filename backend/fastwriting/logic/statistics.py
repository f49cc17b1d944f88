"""Per-session attempt counters and the performance metrics derived from them."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from fastwriting.logic.enums import PerformanceRating
from fastwriting.logic.exceptions import StatisticsFinalizedError
from fastwriting.logic.types import StatisticsSnapshot

if TYPE_CHECKING:
    from collections.abc import Callable

# (minimum final level, rating), highest band first
_RATING_BANDS: tuple[tuple[int, PerformanceRating], ...] = (
    (50, PerformanceRating.LEGENDARY),
    (40, PerformanceRating.MASTER),
    (30, PerformanceRating.EXPERT),
    (20, PerformanceRating.ADVANCED),
    (10, PerformanceRating.INTERMEDIATE),
)

_ENCOURAGEMENT_BANDS: tuple[tuple[int, str], ...] = (
    (50, "LEGENDARY! You're a typing master! Amazing performance!"),
    (40, "INCREDIBLE! Master level achieved! You're truly skilled!"),
    (30, "EXCELLENT! Expert level reached! Outstanding typing!"),
    (20, "GREAT JOB! Advanced level achieved! Keep practicing!"),
    (10, "GOOD WORK! Intermediate level reached! You're improving!"),
    (5, "NICE TRY! You're getting the hang of it! Don't give up!"),
)
_DEFAULT_ENCOURAGEMENT = "KEEP PRACTICING! Everyone starts somewhere! Try again!"


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def rating_for_level(level: int) -> PerformanceRating:
    for minimum, rating in _RATING_BANDS:
        if level >= minimum:
            return rating
    return PerformanceRating.BEGINNER


def encouragement_for_level(level: int) -> str:
    for minimum, message in _ENCOURAGEMENT_BANDS:
        if level >= minimum:
            return message
    return _DEFAULT_ENCOURAGEMENT


class StatisticsTracker:
    """
    Accumulate attempt counts and timing for one game session.

    Counters only grow. ``finalize()`` stamps the end time and final level and
    may run once; derived metrics are computed on access and return 0 instead of
    dividing by zero.
    """

    def __init__(self, now: Callable[[], datetime] | None = None) -> None:
        self._now = now or _utc_now
        self.start_time: datetime = self._now()
        self.end_time: datetime | None = None
        self.final_level = 1
        self.words_attempted = 0
        self.correct_words = 0
        self.incorrect_words = 0
        self.total_time_spent = 0  # seconds spent on correctly typed targets

    @property
    def is_finalized(self) -> bool:
        return self.end_time is not None

    def record_attempt(self) -> None:
        self.words_attempted += 1

    def record_correct(self, time_spent: int) -> None:
        self.correct_words += 1
        self.total_time_spent += max(0, time_spent)

    def record_incorrect(self) -> None:
        self.incorrect_words += 1

    def finalize(self, final_level: int) -> None:
        if self.is_finalized:
            raise StatisticsFinalizedError("statistics were already finalized")
        self.end_time = self._now()
        self.final_level = final_level

    @property
    def session_duration(self) -> timedelta:
        """Elapsed time from start to end, or to now while the session is running."""
        end = self.end_time if self.end_time is not None else self._now()
        return max(timedelta(0), end - self.start_time)

    @property
    def session_duration_seconds(self) -> int:
        return int(self.session_duration.total_seconds())

    @property
    def accuracy_percentage(self) -> float:
        if self.words_attempted == 0:
            return 0.0
        return self.correct_words / self.words_attempted * 100.0

    @property
    def words_per_minute(self) -> float:
        seconds = self.session_duration_seconds
        if seconds == 0 or self.correct_words == 0:
            return 0.0
        return self.correct_words / (seconds / 60.0)

    @property
    def performance_rating(self) -> PerformanceRating:
        return rating_for_level(self.final_level)

    @property
    def encouragement(self) -> str:
        return encouragement_for_level(self.final_level)

    def snapshot(self) -> StatisticsSnapshot:
        return StatisticsSnapshot(
            final_level=self.final_level,
            words_attempted=self.words_attempted,
            correct_words=self.correct_words,
            incorrect_words=self.incorrect_words,
            total_time_spent=self.total_time_spent,
            accuracy_percentage=self.accuracy_percentage,
            words_per_minute=self.words_per_minute,
            performance_rating=self.performance_rating,
            session_duration_seconds=self.session_duration_seconds,
            start_time=self.start_time,
            end_time=self.end_time,
        )

    def summary(self) -> str:
        minutes, seconds = divmod(self.session_duration_seconds, 60)
        return "\n".join(
            [
                "Game Statistics:",
                f"Final Level: {self.final_level}",
                f"Words Attempted: {self.words_attempted}",
                f"Correct Words: {self.correct_words}",
                f"Incorrect Words: {self.incorrect_words}",
                f"Accuracy: {self.accuracy_percentage:.1f}%",
                f"Words Per Minute: {self.words_per_minute:.1f}",
                f"Performance Rating: {self.performance_rating.value}",
                f"Session Duration: {minutes} minutes {seconds} seconds",
            ],
        )
