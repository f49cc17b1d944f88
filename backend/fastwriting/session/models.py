from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastwriting.logic.game import TypingGame
    from fastwriting.messaging.protocol import ConnectionProtocol


@dataclass
class PlayerSession:
    """Bind one connection to the one game it plays.

    Lifecycle:
    - Created when the WebSocket is accepted; the game starts immediately
    - Outbound messages go through ``outbox`` and are sent in order by ``sender``
    - Closed on disconnect or server shutdown: timers cancelled, sender stopped
    """

    connection: ConnectionProtocol
    game: TypingGame
    outbox: asyncio.Queue[dict[str, Any]] = field(default_factory=asyncio.Queue)
    sender: asyncio.Task[None] | None = None
    unsubscribe: Callable[[], None] | None = None

    @property
    def connection_id(self) -> str:
        return self.connection.connection_id

    def enqueue(self, message: dict[str, Any]) -> None:
        self.outbox.put_nowait(message)
