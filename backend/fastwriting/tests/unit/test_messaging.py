import pytest
from pydantic import ValidationError

from fastwriting.messaging.types import (
    MAX_SUBMISSION_LENGTH,
    EndGameMessage,
    ErrorMessage,
    GetStateMessage,
    GetStatisticsMessage,
    PingMessage,
    RestartMessage,
    SessionErrorCode,
    SubmitTextMessage,
    parse_client_message,
)


class TestParseClientMessage:
    @pytest.mark.parametrize(
        ("raw", "expected_cls"),
        [
            ({"type": "submit_text", "text": "cat"}, SubmitTextMessage),
            ({"type": "restart"}, RestartMessage),
            ({"type": "end_game"}, EndGameMessage),
            ({"type": "get_state"}, GetStateMessage),
            ({"type": "get_statistics"}, GetStatisticsMessage),
            ({"type": "ping"}, PingMessage),
        ],
    )
    def test_dispatches_on_type(self, raw, expected_cls):
        assert isinstance(parse_client_message(raw), expected_cls)

    def test_submit_text_keeps_text_verbatim(self):
        message = parse_client_message({"type": "submit_text", "text": "  cat "})
        assert message.text == "  cat "

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            parse_client_message({"type": "cheat"})

    def test_missing_type_rejected(self):
        with pytest.raises(ValidationError):
            parse_client_message({"text": "cat"})

    def test_submit_text_requires_text(self):
        with pytest.raises(ValidationError, match="text"):
            parse_client_message({"type": "submit_text"})

    def test_text_length_capped(self):
        with pytest.raises(ValidationError, match="text"):
            parse_client_message({"type": "submit_text", "text": "a" * (MAX_SUBMISSION_LENGTH + 1)})

    def test_control_characters_rejected(self):
        with pytest.raises(ValidationError, match="control characters"):
            parse_client_message({"type": "submit_text", "text": "c\x00at"})

    def test_surrounding_newline_allowed(self):
        message = parse_client_message({"type": "submit_text", "text": "cat\n"})
        assert message.text == "cat\n"

    def test_empty_text_allowed(self):
        message = parse_client_message({"type": "submit_text", "text": ""})
        assert message.text == ""


class TestServerMessages:
    def test_error_message_dump(self):
        payload = ErrorMessage(code=SessionErrorCode.RATE_LIMITED, message="slow down").model_dump(mode="json")
        assert payload == {"type": "session_error", "code": "rate_limited", "message": "slow down"}
