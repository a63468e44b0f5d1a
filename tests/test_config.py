"""
Тесты конфигурации.
"""

import pytest

from ticket_bot.config import Settings, load_settings
from ticket_core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("BOT_TOKEN", "TARGET_CHAT_ID", "PORT", "WEBHOOK_URL", "DEBUG"):
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:

    def test_missing_token_is_fatal(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(_env_file=None, target_chat_id="-100")

        assert "BOT_TOKEN" in str(exc_info.value)

    def test_missing_destination_is_fatal(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(_env_file=None, bot_token="42:abc")

        assert "TARGET_CHAT_ID" in str(exc_info.value)

    def test_empty_token_is_fatal(self):
        with pytest.raises(ConfigurationError):
            load_settings(_env_file=None, bot_token="", target_chat_id="-100")

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("BOT_TOKEN", "42:abc")
        monkeypatch.setenv("TARGET_CHAT_ID", "-1001234")
        monkeypatch.setenv("PORT", "8080")

        settings = load_settings(_env_file=None)

        assert settings.bot_token == "42:abc"
        assert settings.port == 8080
        assert settings.destination == -1001234


class TestSettings:

    def make(self, **kwargs) -> Settings:
        kwargs.setdefault("bot_token", "42:abc")
        kwargs.setdefault("target_chat_id", "@support_tickets")
        return Settings(_env_file=None, **kwargs)

    def test_defaults(self):
        settings = self.make()

        assert settings.port == 3000
        assert settings.state_ttl == 1800
        assert settings.sweep_interval == 300
        assert settings.use_webhook is False

    def test_channel_username_destination(self):
        assert self.make().destination == "@support_tickets"

    def test_webhook_urls(self):
        settings = self.make(webhook_url="https://bot.example.com/")

        assert settings.use_webhook is True
        assert settings.webhook_path == "/webhook/42:abc"
        assert settings.webhook_full_url == "https://bot.example.com/webhook/42:abc"
