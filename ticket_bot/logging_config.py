"""
Конфигурация логирования.

Модуль обеспечивает:
- Структурированное логирование через structlog
- Опциональную запись в файл с ротацией
- Фильтрацию чувствительных данных (токен бота)
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

import structlog


# ============================================================
# КОНСТАНТЫ
# ============================================================

LOG_FORMAT = "%(message)s"

# Размеры файлов логов
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5

# Чувствительные поля для фильтрации
SENSITIVE_FIELDS = {
    "token",
    "secret",
    "password",
    "authorization",
}


# ============================================================
# ПРОЦЕССОРЫ ДЛЯ STRUCTLOG
# ============================================================

def filter_sensitive_data(
    logger: Any,
    method_name: str,
    event_dict: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Процессор для фильтрации чувствительных данных из логов.

    Заменяет значения полей с токенами/паролями на [REDACTED].
    """
    for key in list(event_dict.keys()):
        if any(sensitive in key.lower() for sensitive in SENSITIVE_FIELDS):
            event_dict[key] = "[REDACTED]"

    return event_dict


def add_app_context(
    logger: Any,
    method_name: str,
    event_dict: Dict[str, Any],
) -> Dict[str, Any]:
    """Процессор для добавления контекста приложения."""
    event_dict["app"] = "ticket_bot"
    return event_dict


# ============================================================
# НАСТРОЙКА ЛОГГЕРОВ
# ============================================================

def setup_logging(debug: bool = False, log_file: Optional[str] = None) -> None:
    """
    Настройка structlog для логирования.

    В режиме debug использует ConsoleRenderer (цветной вывод),
    в production - JSONRenderer (структурированный JSON).

    Args:
        debug: Режим отладки
        log_file: Путь к файлу логов (пусто - только stdout)
    """
    log_level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(file_handler)

    # Сторонние библиотеки шумят
    logging.getLogger("aiogram").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)

    if debug:
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            add_app_context,
            filter_sensitive_data,
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
