import pytest
from pydantic import ValidationError

from fastwriting.server.settings import GameServerSettings


class TestGameServerSettings:
    def test_cors_origins_json_array(self, monkeypatch):
        monkeypatch.setenv("FASTWRITING_CORS_ORIGINS", '["http://a.com","http://b.com"]')
        settings = GameServerSettings()
        assert settings.cors_origins == ["http://a.com", "http://b.com"]

    def test_cors_origins_csv(self, monkeypatch):
        monkeypatch.setenv("FASTWRITING_CORS_ORIGINS", "http://a.com,http://b.com")
        settings = GameServerSettings()
        assert settings.cors_origins == ["http://a.com", "http://b.com"]

    def test_cors_origins_invalid_raises(self, monkeypatch):
        monkeypatch.setenv("FASTWRITING_CORS_ORIGINS", "")
        with pytest.raises(ValidationError, match="cors_origins"):
            GameServerSettings()

    def test_max_sessions_zero_rejected(self):
        with pytest.raises(ValidationError, match="max_sessions"):
            GameServerSettings(max_sessions=0)

    def test_log_dir_empty_rejected(self):
        with pytest.raises(ValidationError, match="log_dir"):
            GameServerSettings(log_dir="")

    def test_gameplay_overrides_from_env(self, monkeypatch):
        monkeypatch.setenv("FASTWRITING_INITIAL_TIME_LIMIT", "30")
        monkeypatch.setenv("FASTWRITING_END_ON_INCORRECT", "true")
        game_settings = GameServerSettings().game_settings
        assert game_settings.initial_time_limit == 30
        assert game_settings.end_on_incorrect is True

    def test_invalid_gameplay_combination_rejected(self):
        settings = GameServerSettings(initial_time_limit=3, min_time_limit=5)
        with pytest.raises(ValidationError, match="must not exceed"):
            _ = settings.game_settings
