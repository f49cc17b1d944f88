from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Callable
from typing import TYPE_CHECKING

import structlog

from fastwriting.logic.content import ContentBank
from fastwriting.logic.game import TypingGame
from fastwriting.logic.scheduler import AsyncioScheduler
from fastwriting.logic.settings import GameSettings
from fastwriting.messaging.types import (
    ErrorMessage,
    GameStateMessage,
    PongMessage,
    SessionErrorCode,
    StatisticsMessage,
)
from fastwriting.session.models import PlayerSession

if TYPE_CHECKING:
    from fastwriting.logic.events import GameEvent
    from fastwriting.logic.scheduler import Scheduler
    from fastwriting.messaging.protocol import ConnectionProtocol

logger = structlog.get_logger()

CAPACITY_CLOSE_CODE = 4003


class SessionManager:
    """
    Own one TypingGame per connected player.

    Game events are produced synchronously by the core (from inbound messages
    and from countdown ticks) and queued on the player's outbox; a per-player
    sender task drains the outbox so messages reach the client in the order
    the game produced them.
    """

    def __init__(
        self,
        settings: GameSettings | None = None,
        content: ContentBank | None = None,
        *,
        max_sessions: int = 100,
        scheduler_factory: Callable[[], Scheduler] = AsyncioScheduler,
    ) -> None:
        self._settings = settings or GameSettings()
        self._content = content or ContentBank()
        self._max_sessions = max_sessions
        self._scheduler_factory = scheduler_factory
        self._sessions: dict[str, PlayerSession] = {}  # connection_id -> PlayerSession

    @property
    def session_count(self) -> int:
        return len(self._sessions)

    @property
    def max_sessions(self) -> int:
        return self._max_sessions

    @property
    def content(self) -> ContentBank:
        return self._content

    def get_session(self, connection_id: str) -> PlayerSession | None:
        return self._sessions.get(connection_id)

    async def open_session(self, connection: ConnectionProtocol) -> PlayerSession | None:
        """Start a game for a new connection, or refuse it when the server is full."""
        if self.session_count >= self._max_sessions:
            logger.warning("refusing session, server at capacity", max_sessions=self._max_sessions)
            await connection.send_message(
                ErrorMessage(
                    code=SessionErrorCode.SERVER_AT_CAPACITY,
                    message="Server at capacity",
                ).model_dump(mode="json"),
            )
            await connection.close(code=CAPACITY_CLOSE_CODE, reason="server_at_capacity")
            return None

        game = TypingGame(settings=self._settings, content=self._content, scheduler=self._scheduler_factory())
        player = PlayerSession(connection=connection, game=game)
        player.unsubscribe = game.subscribe(lambda event: self._queue_event(player, event))
        player.sender = asyncio.create_task(self._run_sender(player))
        self._sessions[connection.connection_id] = player

        game.start()
        logger.info("session opened", active_sessions=self.session_count)
        return player

    async def close_session(self, connection: ConnectionProtocol) -> None:
        player = self._sessions.pop(connection.connection_id, None)
        if player is None:
            return
        await self._dispose(player)
        logger.info("session closed", active_sessions=self.session_count)

    async def shutdown(self) -> None:
        """Close every session (server shutdown)."""
        players = list(self._sessions.values())
        self._sessions.clear()
        for player in players:
            await self._dispose(player)

    # --- inbound commands ---

    async def submit_text(self, connection: ConnectionProtocol, text: str) -> None:
        player = await self._require_session(connection)
        if player is not None:
            player.game.submit_text(text)

    async def restart(self, connection: ConnectionProtocol) -> None:
        player = await self._require_session(connection)
        if player is not None:
            logger.info("player restarted game")
            player.game.restart()

    async def end_game(self, connection: ConnectionProtocol) -> None:
        player = await self._require_session(connection)
        if player is not None:
            player.game.end_voluntarily()

    async def send_state(self, connection: ConnectionProtocol) -> None:
        player = await self._require_session(connection)
        if player is not None:
            player.enqueue(GameStateMessage(state=player.game.state()).model_dump(mode="json"))

    async def send_statistics(self, connection: ConnectionProtocol) -> None:
        player = await self._require_session(connection)
        if player is not None:
            statistics = player.game.statistics
            message = StatisticsMessage(
                statistics=statistics.snapshot(),
                summary=statistics.summary(),
                encouragement=statistics.encouragement,
            )
            player.enqueue(message.model_dump(mode="json"))

    async def handle_ping(self, connection: ConnectionProtocol) -> None:
        player = self._sessions.get(connection.connection_id)
        if player is not None:
            player.enqueue(PongMessage().model_dump(mode="json"))
        else:
            await connection.send_message(PongMessage().model_dump(mode="json"))

    async def send_error(self, connection: ConnectionProtocol, code: SessionErrorCode, message: str) -> None:
        """Send an error in order with any queued game events for this connection."""
        payload = ErrorMessage(code=code, message=message).model_dump(mode="json")
        logger.warning("session error sent to client", error_code=code.value, error_message=message)
        player = self._sessions.get(connection.connection_id)
        if player is not None:
            player.enqueue(payload)
        else:
            with contextlib.suppress(ConnectionError, RuntimeError, OSError):
                await connection.send_message(payload)

    # --- internals ---

    async def _require_session(self, connection: ConnectionProtocol) -> PlayerSession | None:
        player = self._sessions.get(connection.connection_id)
        if player is None:
            await self.send_error(connection, SessionErrorCode.NOT_IN_GAME, "No game for this connection")
        return player

    def _queue_event(self, player: PlayerSession, event: GameEvent) -> None:
        player.enqueue(event.model_dump(mode="json"))

    async def _run_sender(self, player: PlayerSession) -> None:
        while True:
            message = await player.outbox.get()
            try:
                await player.connection.send_message(message)
            except (ConnectionError, RuntimeError, OSError):  # fmt: skip
                logger.info("connection gone, stopping game", connection_id=player.connection_id)
                player.game.close()
                return

    async def _dispose(self, player: PlayerSession) -> None:
        player.game.close()
        if player.unsubscribe is not None:
            player.unsubscribe()
        if player.sender is not None and not player.sender.done():
            player.sender.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await player.sender
