"""
Middleware для логирования запросов.

Привязывает user_id и тип события к контексту structlog
на время обработки, чтобы все записи хода имели общий контекст.
"""

from typing import Any, Awaitable, Callable, Dict

from aiogram import BaseMiddleware
from aiogram.types import Message, TelegramObject
import structlog


logger = structlog.get_logger()


class LoggingMiddleware(BaseMiddleware):
    """Логирует все входящие обновления для отладки."""

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        """Логирует обновление и вызывает обработчик."""
        event_type = type(event).__name__

        user_id = None
        if isinstance(event, Message) and event.from_user:
            user_id = event.from_user.id

        with structlog.contextvars.bound_contextvars(
            event_type=event_type,
            user_id=user_id,
        ):
            logger.debug("incoming_update")

            try:
                result = await handler(event, data)
                logger.debug("update_handled")
                return result
            except Exception as e:
                logger.error("handler_failed", error=str(e))
                raise
