"""
Обработчики шагов создания тикета.

Текст, фото и видео передаются в движок диалога. Фильтр по фазе
не нужен: движок сам решает, что делать с событием в текущей фазе.
"""

from aiogram import F, Router
from aiogram.types import Message

from ticket_bot.handlers.events import event_from_message
from ticket_core.engine import ConversationEngine
from ticket_core.events import EventKind


async def handle_photo(message: Message, engine: ConversationEngine) -> None:
    await engine.handle_media(event_from_message(message, EventKind.PHOTO))


async def handle_video(message: Message, engine: ConversationEngine) -> None:
    await engine.handle_media(event_from_message(message, EventKind.VIDEO))


async def handle_text(message: Message, engine: ConversationEngine) -> None:
    """Текст без активного диалога и неизвестные команды игнорируются движком."""
    await engine.handle_text(event_from_message(message, EventKind.TEXT))


def get_tickets_router() -> Router:
    """Создаёт новый экземпляр роутера шагов диалога."""
    router = Router(name="tickets")

    router.message.register(handle_photo, F.photo)
    router.message.register(handle_video, F.video)
    router.message.register(handle_text, F.text)

    return router
