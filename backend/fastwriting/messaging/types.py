from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from fastwriting.logic.types import GameStateSnapshot, StatisticsSnapshot

# ASCII control character boundaries for typed-text validation
_SPACE_ORD = 0x20
_DEL_ORD = 0x7F

MAX_SUBMISSION_LENGTH = 500


class ClientMessageType(StrEnum):
    SUBMIT_TEXT = "submit_text"
    RESTART = "restart"
    END_GAME = "end_game"
    GET_STATE = "get_state"
    GET_STATISTICS = "get_statistics"
    PING = "ping"


class SessionMessageType(StrEnum):
    GAME_STATE = "game_state"
    STATISTICS = "statistics"
    ERROR = "session_error"
    PONG = "pong"


class SessionErrorCode(StrEnum):
    INVALID_MESSAGE = "invalid_message"
    RATE_LIMITED = "rate_limited"
    SERVER_AT_CAPACITY = "server_at_capacity"
    NOT_IN_GAME = "not_in_game"


# --- client -> server ---


class SubmitTextMessage(BaseModel):
    type: Literal[ClientMessageType.SUBMIT_TEXT] = ClientMessageType.SUBMIT_TEXT
    text: str = Field(max_length=MAX_SUBMISSION_LENGTH)

    @field_validator("text")
    @classmethod
    def _reject_control_characters(cls, v: str) -> str:
        if any(ord(ch) < _SPACE_ORD or ord(ch) == _DEL_ORD for ch in v.strip()):
            raise ValueError("text must not contain control characters")
        return v


class RestartMessage(BaseModel):
    type: Literal[ClientMessageType.RESTART] = ClientMessageType.RESTART


class EndGameMessage(BaseModel):
    type: Literal[ClientMessageType.END_GAME] = ClientMessageType.END_GAME


class GetStateMessage(BaseModel):
    type: Literal[ClientMessageType.GET_STATE] = ClientMessageType.GET_STATE


class GetStatisticsMessage(BaseModel):
    type: Literal[ClientMessageType.GET_STATISTICS] = ClientMessageType.GET_STATISTICS


class PingMessage(BaseModel):
    type: Literal[ClientMessageType.PING] = ClientMessageType.PING


ClientMessage = Annotated[
    SubmitTextMessage | RestartMessage | EndGameMessage | GetStateMessage | GetStatisticsMessage | PingMessage,
    Field(discriminator="type"),
]

_client_message_adapter: TypeAdapter[ClientMessage] = TypeAdapter(ClientMessage)


def parse_client_message(data: dict[str, Any]) -> ClientMessage:
    """Validate a decoded frame into a typed client message (raises ValidationError)."""
    return _client_message_adapter.validate_python(data)


# --- server -> client ---


class GameStateMessage(BaseModel):
    type: Literal[SessionMessageType.GAME_STATE] = SessionMessageType.GAME_STATE
    state: GameStateSnapshot


class StatisticsMessage(BaseModel):
    type: Literal[SessionMessageType.STATISTICS] = SessionMessageType.STATISTICS
    statistics: StatisticsSnapshot
    summary: str
    encouragement: str


class ErrorMessage(BaseModel):
    type: Literal[SessionMessageType.ERROR] = SessionMessageType.ERROR
    code: SessionErrorCode
    message: str


class PongMessage(BaseModel):
    type: Literal[SessionMessageType.PONG] = SessionMessageType.PONG
