"""
Middleware для последовательной обработки событий одного пользователя.

aiogram обрабатывает апдейты конкурентно, и два сообщения одного
пользователя могут прочитать одно и то же состояние диалога до того,
как любое из них его запишет. Этот middleware держит asyncio.Lock
на каждого пользователя на всё время работы обработчика.
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, Optional

from aiogram import BaseMiddleware
from aiogram.types import Message, TelegramObject
import structlog


logger = structlog.get_logger()


class UserLockMiddleware(BaseMiddleware):
    """
    Сериализация обработчиков по user_id.

    Блокировка удаляется, когда её больше никто не ждёт,
    поэтому словарь не растёт бесконечно.
    """

    def __init__(self) -> None:
        # {user_id: lock} и {user_id: число ожидающих и владельца}
        self._locks: Dict[int, asyncio.Lock] = {}
        self._waiters: Dict[int, int] = {}

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        """Вызывает обработчик под блокировкой пользователя."""
        user_id = self._get_user_id(event)
        if user_id is None:
            return await handler(event, data)

        lock = self._locks.setdefault(user_id, asyncio.Lock())
        self._waiters[user_id] = self._waiters.get(user_id, 0) + 1

        if lock.locked():
            logger.debug("user_event_queued", user_id=user_id)

        try:
            async with lock:
                return await handler(event, data)
        finally:
            self._waiters[user_id] -= 1
            if self._waiters[user_id] == 0:
                del self._waiters[user_id]
                del self._locks[user_id]

    @property
    def active_users(self) -> int:
        """Количество пользователей с активной блокировкой."""
        return len(self._locks)

    def _get_user_id(self, event: TelegramObject) -> Optional[int]:
        """Получить user_id из события."""
        if isinstance(event, Message) and event.from_user:
            return event.from_user.id
        return None
