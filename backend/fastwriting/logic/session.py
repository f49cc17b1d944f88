"""
Level, timer and scoring state machine for one play-through.

A session starts ACTIVE at level 1 and ends exactly once: on countdown expiry,
on a voluntary end, or (strict mode) on a wrong answer. It never leaves ENDED;
restarting creates a new session.

Within ACTIVE, each target goes through two phases:
- typing: the countdown runs; wrong answers may be retried until it expires
- advancing: after a correct answer the countdown is paused while the success
  feedback shows, then the next target loads and the countdown restarts
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from fastwriting.logic.clock import GameClock, urgency_for_remaining
from fastwriting.logic.enums import EndReason, SessionStatus, Tier
from fastwriting.logic.events import (
    AlreadyCompletedWarningEvent,
    CorrectAdvanceEvent,
    EmptyInputWarningEvent,
    GameEndEvent,
    IncorrectGameOverEvent,
    IncorrectRetryEvent,
    TargetLoadedEvent,
    TimerTickEvent,
    TimeUpEvent,
    VoluntaryEndEvent,
)
from fastwriting.logic.statistics import StatisticsTracker
from fastwriting.logic.types import GameStateSnapshot

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from fastwriting.logic.content import ContentBank
    from fastwriting.logic.difficulty import DifficultyPolicy
    from fastwriting.logic.events import EventListener
    from fastwriting.logic.scheduler import ScheduledCall, Scheduler
    from fastwriting.logic.settings import GameSettings

logger = structlog.get_logger()

_END_EVENTS: dict[EndReason, type[GameEndEvent]] = {
    EndReason.TIME_UP: TimeUpEvent,
    EndReason.VOLUNTARY: VoluntaryEndEvent,
    EndReason.INCORRECT: IncorrectGameOverEvent,
}


class GameSession:
    """
    Own the mutable state of one play-through and turn inbound input into events.

    Handlers run to completion before the next one starts; the scheduler and
    the caller deliver input one call at a time.
    """

    def __init__(
        self,
        *,
        content: ContentBank,
        policy: DifficultyPolicy,
        scheduler: Scheduler,
        settings: GameSettings,
        emit: EventListener,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._content = content
        self._policy = policy
        self._scheduler = scheduler
        self._settings = settings
        self._emit = emit
        self._statistics = StatisticsTracker(now=now)
        self._clock = GameClock(
            scheduler,
            on_tick=self._handle_tick,
            on_expire=self._handle_expire,
            interval=settings.tick_interval_seconds,
        )
        self._pending_advance: ScheduledCall | None = None

        self._status = SessionStatus.ACTIVE
        self._end_reason: EndReason | None = None
        self._level = 1
        self._time_limit = policy.initial_time_limit()
        self._remaining_time = self._time_limit
        self._current_target = content.pick_random(policy.tier_for_level(self._level))
        self._word_completed = False
        self._started = False

    # --- accessors ---

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        return self._status == SessionStatus.ACTIVE

    @property
    def end_reason(self) -> EndReason | None:
        return self._end_reason

    @property
    def level(self) -> int:
        return self._level

    @property
    def tier(self) -> Tier:
        return self._policy.tier_for_level(self._level)

    @property
    def tier_label(self) -> str:
        return self._policy.label_for_level(self._level)

    @property
    def time_limit(self) -> int:
        return self._time_limit

    @property
    def remaining_time(self) -> int:
        return self._remaining_time

    @property
    def current_target(self) -> str:
        return self._current_target

    @property
    def word_completed(self) -> bool:
        return self._word_completed

    @property
    def progress(self) -> float:
        return self._policy.progress_for_level(self._level)

    @property
    def statistics(self) -> StatisticsTracker:
        return self._statistics

    def state(self) -> GameStateSnapshot:
        return GameStateSnapshot(
            status=self._status,
            level=self._level,
            tier=self.tier,
            tier_label=self.tier_label,
            time_limit=self._time_limit,
            remaining_time=self._remaining_time,
            current_target=self._current_target,
            word_completed=self._word_completed,
            progress=self.progress,
        )

    # --- inbound ---

    def start(self) -> None:
        """Announce the first target and arm its countdown. Idempotent."""
        if self._started or not self.is_active:
            return
        self._started = True
        logger.info("session started", time_limit=self._time_limit)
        self._announce_target()

    def submit(self, text: str) -> None:
        if not self.is_active:
            logger.debug("submission ignored, session ended")
            return

        typed = text.strip()
        if not typed:
            self._emit(EmptyInputWarningEvent())
            return

        self._statistics.record_attempt()
        if typed == self._current_target:
            if self._word_completed:
                self._emit(AlreadyCompletedWarningEvent())
                return
            self._complete_target()
        else:
            self._reject_attempt()

    def tick(self) -> None:
        """Consume one second of the running countdown (ignored while paused or ended)."""
        if not self.is_active:
            return
        self._clock.tick()

    def end_voluntarily(self) -> None:
        if not self.is_active:
            return
        self._end(EndReason.VOLUNTARY)

    def cancel_timers(self) -> None:
        """Stop the countdown and drop any pending target load."""
        self._clock.cancel()
        if self._pending_advance is not None:
            self._pending_advance.cancel()
            self._pending_advance = None

    # --- transitions ---

    def _complete_target(self) -> None:
        self._word_completed = True
        self._clock.cancel()
        time_spent = self._time_limit - self._remaining_time
        self._statistics.record_correct(time_spent)

        self._level += 1
        previous_limit = self._time_limit
        self._time_limit = self._policy.next_time_limit(previous_limit, self._level)
        self._remaining_time = min(self._remaining_time, self._time_limit)
        logger.info("target completed", level=self._level, time_limit=self._time_limit, time_spent=time_spent)
        self._emit(
            CorrectAdvanceEvent(
                level=self._level,
                tier=self.tier,
                tier_label=self.tier_label,
                time_limit=self._time_limit,
                time_limit_reduced=self._time_limit < previous_limit,
                time_spent=time_spent,
            ),
        )

        delay = self._settings.next_target_delay_seconds
        if delay > 0:
            self._pending_advance = self._scheduler.call_later(delay, self._advance_to_next_target)
        else:
            self._advance_to_next_target()

    def _advance_to_next_target(self) -> None:
        self._pending_advance = None
        if not self.is_active:
            return
        self._current_target = self._content.pick_random(self.tier)
        self._word_completed = False
        self._announce_target()

    def _announce_target(self) -> None:
        self._remaining_time = self._time_limit
        self._emit(
            TargetLoadedEvent(
                target=self._current_target,
                level=self._level,
                tier=self.tier,
                tier_label=self.tier_label,
                time_limit=self._time_limit,
                progress=self.progress,
            ),
        )
        # a listener may have ended the session while handling the announcement
        if self.is_active:
            self._clock.start(self._time_limit)

    def _reject_attempt(self) -> None:
        self._statistics.record_incorrect()
        if self._settings.end_on_incorrect:
            self._end(EndReason.INCORRECT)
            return
        self._emit(IncorrectRetryEvent(remaining_time=self._remaining_time))

    def _handle_tick(self, remaining: int) -> None:
        self._remaining_time = remaining
        self._emit(TimerTickEvent(remaining_time=remaining, urgency=urgency_for_remaining(remaining)))

    def _handle_expire(self) -> None:
        if self.is_active:
            self._end(EndReason.TIME_UP)

    def _end(self, reason: EndReason) -> None:
        self.cancel_timers()
        self._status = SessionStatus.ENDED
        self._end_reason = reason
        self._statistics.finalize(self._level)
        logger.info("session ended", reason=reason, final_level=self._level)
        event_cls = _END_EVENTS[reason]
        self._emit(event_cls(final_level=self._level, statistics=self._statistics.snapshot()))
