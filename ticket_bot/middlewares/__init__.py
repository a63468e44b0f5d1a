"""
Middleware бота.

Содержит:
- UserLockMiddleware - последовательная обработка событий пользователя
- LoggingMiddleware - логирование входящих обновлений
"""

from ticket_bot.middlewares.request_logging import LoggingMiddleware
from ticket_bot.middlewares.user_lock import UserLockMiddleware

__all__ = [
    "LoggingMiddleware",
    "UserLockMiddleware",
]
