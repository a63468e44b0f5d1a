"""
Конфигурация приложения.

Загружает настройки из переменных окружения и .env файла
с использованием Pydantic Settings. Токен бота и целевой чат
обязательны: без них бот не запускается.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ticket_core.exceptions import ConfigurationError
from ticket_core.store import STATE_TTL, SWEEP_INTERVAL


# Корневая директория проекта
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """
    Настройки приложения.

    Все настройки типизированы и валидируются при запуске.
    """

    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # ========== Telegram ==========
    bot_token: str = Field(min_length=1)
    target_chat_id: str = Field(min_length=1)  # ID канала/чата или @channel

    # ========== HTTP ==========
    host: str = "0.0.0.0"
    port: int = 3000
    webhook_url: str = ""  # Публичный URL; пусто - режим polling

    # ========== Application Settings ==========
    debug: bool = False
    log_file: str = ""

    # ========== Conversation ==========
    state_ttl: float = STATE_TTL
    sweep_interval: float = SWEEP_INTERVAL

    # ========== Computed Properties ==========
    @property
    def use_webhook(self) -> bool:
        return bool(self.webhook_url)

    @property
    def webhook_path(self) -> str:
        """Путь webhook'а, содержит токен как секрет."""
        return f"/webhook/{self.bot_token}"

    @property
    def webhook_full_url(self) -> str:
        return self.webhook_url.rstrip("/") + self.webhook_path

    @property
    def destination(self) -> int | str:
        """Целевой чат: числовой ID как int, @username как есть."""
        value = self.target_chat_id.strip()
        try:
            return int(value)
        except ValueError:
            return value


def load_settings(**overrides) -> Settings:
    """
    Загрузить настройки.

    Raises:
        ConfigurationError: Не заданы обязательные переменные
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]).upper()
            for error in e.errors()
        )
        raise ConfigurationError(f"Invalid or missing configuration: {fields}") from e


@lru_cache
def get_settings() -> Settings:
    """Глобальный объект настроек (singleton)."""
    return load_settings()
