"""Abstract connection protocol for MessagePack binary communication."""

from abc import ABC, abstractmethod
from typing import Any

from fastwriting.messaging.encoder import decode, encode


class ConnectionProtocol(ABC):
    """
    One player's connection to the game server.

    Session and routing logic depend only on this interface, so they can be
    tested with in-memory connections instead of real WebSockets.
    """

    @property
    @abstractmethod
    def connection_id(self) -> str: ...

    @abstractmethod
    async def send_bytes(self, data: bytes) -> None:
        """Send raw bytes; raises ConnectionError once the peer is gone."""
        ...

    @abstractmethod
    async def receive_bytes(self) -> bytes:
        """Receive raw bytes; raises ConnectionError once the peer is gone."""
        ...

    @abstractmethod
    async def close(self, code: int = 1000, reason: str = "") -> None: ...

    async def send_message(self, data: dict[str, Any]) -> None:
        await self.send_bytes(encode(data))

    async def receive_message(self) -> dict[str, Any]:
        return decode(await self.receive_bytes())
