"""
Per-target countdown with one-second granularity.

The clock counts whole seconds down from a duration. Each decrement fires
``on_tick`` with the new remaining value; reaching zero stops the clock and
fires ``on_expire``. Decrements come from a Scheduler interval or from direct
``tick()`` calls, and at most one countdown is armed at a time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from fastwriting.logic.enums import TimerUrgency

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastwriting.logic.scheduler import ScheduledCall, Scheduler

logger = structlog.get_logger()

DANGER_THRESHOLD_SECONDS = 5
WARNING_THRESHOLD_SECONDS = 10


def urgency_for_remaining(remaining: int) -> TimerUrgency:
    if remaining <= DANGER_THRESHOLD_SECONDS:
        return TimerUrgency.DANGER
    if remaining <= WARNING_THRESHOLD_SECONDS:
        return TimerUrgency.WARNING
    return TimerUrgency.NORMAL


def _noop_tick(_remaining: int) -> None:
    pass


def _noop_expire() -> None:
    pass


class GameClock:
    """Countdown timer for the current target.

    Tick handling is non-reentrant: a ``tick()`` issued from inside a tick or
    expire handler is ignored.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        *,
        on_tick: Callable[[int], None] | None = None,
        on_expire: Callable[[], None] | None = None,
        interval: float = 1.0,
    ) -> None:
        self._scheduler = scheduler
        self._on_tick = on_tick or _noop_tick
        self._on_expire = on_expire or _noop_expire
        self._interval = interval
        self._remaining = 0
        self._active_call: ScheduledCall | None = None
        self._running = False
        self._in_tick = False

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def running(self) -> bool:
        return self._running

    def start(self, duration_seconds: int) -> None:
        """Arm a new countdown, replacing any countdown already running."""
        if duration_seconds < 1:
            raise ValueError(f"countdown duration must be >= 1 second, got {duration_seconds}")
        self.cancel()
        self._remaining = duration_seconds
        self._running = True
        self._active_call = self._scheduler.call_every(self._interval, self.tick)

    def tick(self) -> None:
        """Consume one second of the countdown."""
        if not self._running:
            return
        if self._in_tick:
            logger.debug("ignoring re-entrant clock tick", remaining=self._remaining)
            return
        self._in_tick = True
        try:
            self._remaining -= 1
            expired = self._remaining <= 0
            if expired:
                self._remaining = 0
                self.cancel()
            self._on_tick(self._remaining)
            if expired:
                self._on_expire()
        finally:
            self._in_tick = False

    def cancel(self) -> None:
        """Stop ticking. No-op when the clock is already stopped."""
        if self._active_call is not None:
            self._active_call.cancel()
            self._active_call = None
        self._running = False
