"""Tests for config/settings.py."""

import pytest

from config.settings import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        for name in (
            "LOG_FILE",
            "LOG_LEVEL",
            "TELEGRAM_ESCAPE_LINK_URLS",
            "DISCORD_DIALECT",
        ):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_file == "transcoder.log"
        assert settings.log_level == "DEBUG"
        assert settings.telegram_escape_link_urls is True
        assert settings.discord_dialect is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DISCORD_DIALECT", "telegram")
        monkeypatch.setenv("TELEGRAM_ESCAPE_LINK_URLS", "false")
        settings = Settings(_env_file=None)
        assert settings.discord_dialect == "telegram"
        assert settings.telegram_escape_link_urls is False

    def test_empty_dialect_is_none(self, monkeypatch):
        monkeypatch.setenv("DISCORD_DIALECT", "")
        assert Settings(_env_file=None).discord_dialect is None

    def test_invalid_dialect_rejected(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, discord_dialect="irc")

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="info").log_level == "INFO"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, log_level="verbose")


def test_get_settings_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
