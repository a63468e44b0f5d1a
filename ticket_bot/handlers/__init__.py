"""
Handlers Package.

Объединяет все обработчики бота.
"""

from aiogram import F, Router

from .commands import get_commands_router
from .tickets import get_tickets_router


def get_main_router() -> Router:
    """
    Создать и настроить главный роутер.

    Каждый вызов возвращает новое дерево роутеров.

    Returns:
        Router: Настроенный роутер со всеми обработчиками
    """
    main_router = Router(name="main")

    # Сообщения без автора (каналы, анонимные админы) не обрабатываем
    main_router.message.filter(F.from_user)

    # Порядок важен: команды первыми
    main_router.include_router(get_commands_router())
    main_router.include_router(get_tickets_router())

    return main_router


__all__ = [
    "get_main_router",
    "get_commands_router",
    "get_tickets_router",
]
