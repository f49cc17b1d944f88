from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from fastwriting.messaging.types import (
    EndGameMessage,
    GetStateMessage,
    GetStatisticsMessage,
    PingMessage,
    RestartMessage,
    SessionErrorCode,
    SubmitTextMessage,
    parse_client_message,
)

if TYPE_CHECKING:
    from fastwriting.messaging.protocol import ConnectionProtocol
    from fastwriting.session.manager import SessionManager

logger = logging.getLogger(__name__)


class MessageRouter:
    """
    Routes incoming messages to the session manager.

    This class contains pure dispatch logic and can be tested
    without real WebSocket connections.
    """

    def __init__(self, session_manager: SessionManager) -> None:
        self._session_manager = session_manager

    async def handle_connect(self, connection: ConnectionProtocol) -> bool:
        """Open a game for the connection. Returns False if the server refused it."""
        return await self._session_manager.open_session(connection) is not None

    async def handle_disconnect(self, connection: ConnectionProtocol) -> None:
        await self._session_manager.close_session(connection)

    async def send_error(self, connection: ConnectionProtocol, code: SessionErrorCode, message: str) -> None:
        await self._session_manager.send_error(connection, code, message)

    async def handle_message(
        self,
        connection: ConnectionProtocol,
        raw_message: dict[str, Any],
    ) -> None:
        try:
            message = parse_client_message(raw_message)
        except (ValidationError, KeyError, TypeError, ValueError) as e:
            logger.warning("invalid message from %s: %s", connection.connection_id, e)
            await self._session_manager.send_error(connection, SessionErrorCode.INVALID_MESSAGE, str(e))
            return

        if isinstance(message, SubmitTextMessage):
            await self._session_manager.submit_text(connection, message.text)
        elif isinstance(message, RestartMessage):
            await self._session_manager.restart(connection)
        elif isinstance(message, EndGameMessage):
            await self._session_manager.end_game(connection)
        elif isinstance(message, GetStateMessage):
            await self._session_manager.send_state(connection)
        elif isinstance(message, GetStatisticsMessage):
            await self._session_manager.send_statistics(connection)
        elif isinstance(message, PingMessage):
            await self._session_manager.handle_ping(connection)
