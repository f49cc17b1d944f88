"""Builders and recorders shared by game logic and session tests."""

from datetime import UTC, datetime, timedelta

from fastwriting.logic.content import ContentBank
from fastwriting.logic.difficulty import DifficultyPolicy
from fastwriting.logic.enums import Tier
from fastwriting.logic.events import EventType, GameEvent
from fastwriting.logic.scheduler import VirtualScheduler
from fastwriting.logic.session import GameSession
from fastwriting.logic.settings import GameSettings

# one entry per tier, so every pick is predictable
SINGLE_ENTRY_CONTENT: dict[Tier, list[str]] = {
    Tier.EASY: ["cat"],
    Tier.MEDIUM: ["garden"],
    Tier.HARD: ["algorithm"],
    Tier.EXPERT: ["onomatopoeia"],
    Tier.SHORT_PHRASE: ["practice makes perfect"],
    Tier.COMPLEX_PHRASE: ["the quick brown fox jumps over the lazy dog"],
}


class SteppingClock:
    """Wall-clock stand-in for statistics: a fixed time moved forward by ``advance()``."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += timedelta(seconds=seconds)


class EventRecorder:
    """Listener that keeps every event it receives."""

    def __init__(self) -> None:
        self.events: list[GameEvent] = []

    def __call__(self, event: GameEvent) -> None:
        self.events.append(event)

    @property
    def types(self) -> list[EventType]:
        return [event.type for event in self.events]

    def of_type(self, event_type: EventType) -> list[GameEvent]:
        return [event for event in self.events if event.type == event_type]

    def last(self) -> GameEvent:
        return self.events[-1]

    def clear(self) -> None:
        self.events.clear()


def make_session(
    *,
    settings: GameSettings | None = None,
    content: ContentBank | None = None,
    scheduler: VirtualScheduler | None = None,
    recorder: EventRecorder | None = None,
    now: SteppingClock | None = None,
    start: bool = True,
) -> tuple[GameSession, EventRecorder, VirtualScheduler]:
    """Create a GameSession on virtual time, started unless ``start=False``."""
    settings = settings or GameSettings()
    scheduler = scheduler or VirtualScheduler()
    recorder = recorder or EventRecorder()
    session = GameSession(
        content=content or ContentBank(SINGLE_ENTRY_CONTENT),
        policy=DifficultyPolicy(settings),
        scheduler=scheduler,
        settings=settings,
        emit=recorder,
        now=now,
    )
    if start:
        session.start()
    return session, recorder, scheduler


def advance_levels(session: GameSession, scheduler: VirtualScheduler, count: int, delay: float = 1.5) -> None:
    """Answer ``count`` targets correctly, letting each success delay elapse."""
    for _ in range(count):
        session.submit(session.current_target)
        scheduler.advance(delay)
