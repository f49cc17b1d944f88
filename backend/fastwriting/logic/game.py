"""
Typing game facade: owns the current session and fans its events out to listeners.

The presentation layer holds a reference to one TypingGame and talks only to it.
Restarting swaps in a fresh GameSession (with fresh statistics) after cancelling
every timer of the old one. Each session is tagged with a generation number, and
an event from an older generation is dropped instead of reaching listeners.
"""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING

import structlog

from fastwriting.logic.content import ContentBank
from fastwriting.logic.difficulty import DifficultyPolicy
from fastwriting.logic.exceptions import GameNotStartedError
from fastwriting.logic.scheduler import VirtualScheduler
from fastwriting.logic.session import GameSession
from fastwriting.logic.settings import GameSettings

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from fastwriting.logic.events import EventListener, GameEvent
    from fastwriting.logic.scheduler import Scheduler
    from fastwriting.logic.statistics import StatisticsTracker
    from fastwriting.logic.types import GameStateSnapshot

logger = structlog.get_logger()


class TypingGame:
    """
    Entry point for a single player's game.

    Without an explicit scheduler the game owns a VirtualScheduler and each
    ``tick()`` advances it by one tick interval. The countdown and the pause
    before the next target both move only when the view ticks.
    """

    def __init__(
        self,
        *,
        settings: GameSettings | None = None,
        content: ContentBank | None = None,
        scheduler: Scheduler | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._settings = settings or GameSettings()
        self._content = content or ContentBank()
        self._policy = DifficultyPolicy(self._settings)
        self._owned_scheduler = VirtualScheduler() if scheduler is None else None
        self._scheduler: Scheduler = scheduler or self._owned_scheduler
        self._now = now
        self._listeners: list[EventListener] = []
        self._generations = itertools.count(1)
        self._generation = 0
        self._session: GameSession | None = None

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def content(self) -> ContentBank:
        return self._content

    @property
    def policy(self) -> DifficultyPolicy:
        return self._policy

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def started(self) -> bool:
        return self._session is not None

    def subscribe(self, listener: EventListener) -> Callable[[], None]:
        """Register a listener; return a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- lifecycle ---

    def start(self) -> None:
        """Begin the first session. Equivalent to ``restart()`` once a session exists."""
        self.restart()

    def restart(self) -> None:
        """Discard the current session (if any) and begin a new one at level 1."""
        self._discard_session()
        generation = next(self._generations)
        self._generation = generation
        self._session = GameSession(
            content=self._content,
            policy=self._policy,
            scheduler=self._scheduler,
            settings=self._settings,
            emit=lambda event: self._dispatch(generation, event),
            now=self._now,
        )
        logger.debug("new session created", generation=generation)
        self._session.start()

    def close(self) -> None:
        """Stop all timers; used when the player navigates away from the game."""
        if self._session is not None:
            self._session.cancel_timers()

    # --- inbound ---

    def submit_text(self, text: str) -> None:
        self._require_session().submit(text)

    def tick(self) -> None:
        session = self._require_session()
        if self._owned_scheduler is not None:
            # the periodic countdown call fires from the advance
            self._owned_scheduler.advance(self._settings.tick_interval_seconds)
            return
        session.tick()

    def end_voluntarily(self) -> None:
        self._require_session().end_voluntarily()

    # --- display binding ---

    @property
    def session(self) -> GameSession:
        return self._require_session()

    @property
    def statistics(self) -> StatisticsTracker:
        return self._require_session().statistics

    @property
    def is_active(self) -> bool:
        return self._session is not None and self._session.is_active

    @property
    def level(self) -> int:
        return self._require_session().level

    @property
    def time_limit(self) -> int:
        return self._require_session().time_limit

    @property
    def remaining_time(self) -> int:
        return self._require_session().remaining_time

    @property
    def current_target(self) -> str:
        return self._require_session().current_target

    @property
    def tier_label(self) -> str:
        return self._require_session().tier_label

    @property
    def progress(self) -> float:
        return self._require_session().progress

    def state(self) -> GameStateSnapshot:
        return self._require_session().state()

    # --- internals ---

    def _require_session(self) -> GameSession:
        if self._session is None:
            raise GameNotStartedError("call start() before interacting with the game")
        return self._session

    def _discard_session(self) -> None:
        if self._session is not None:
            self._session.cancel_timers()
            self._session = None

    def _dispatch(self, generation: int, event: GameEvent) -> None:
        if generation != self._generation:
            logger.warning("dropping event from superseded session", event_type=event.type, generation=generation)
            return
        for listener in list(self._listeners):
            listener(event)
