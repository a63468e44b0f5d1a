"""
Обработчики команд.

Обрабатывает /start, /help, /newticket, /cancel.
"""

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.types import Message

from ticket_bot.handlers.events import event_from_message
from ticket_core.engine import ConversationEngine
from ticket_core.events import EventKind


async def cmd_start(message: Message, engine: ConversationEngine) -> None:
    """Приветствие и список команд."""
    await engine.start(event_from_message(message, EventKind.COMMAND, "start"))


async def cmd_help(message: Message, engine: ConversationEngine) -> None:
    await engine.help(event_from_message(message, EventKind.COMMAND, "help"))


async def cmd_new_ticket(message: Message, engine: ConversationEngine) -> None:
    """Начать создание тикета (сбрасывает прежний черновик)."""
    await engine.new_ticket(event_from_message(message, EventKind.COMMAND, "newticket"))


async def cmd_cancel(message: Message, engine: ConversationEngine) -> None:
    await engine.cancel(event_from_message(message, EventKind.COMMAND, "cancel"))


def get_commands_router() -> Router:
    """
    Создаёт новый экземпляр роутера команд.

    Роутер может быть прикреплён только к одному диспетчеру,
    поэтому каждый вызов собирает свежий.
    """
    router = Router(name="commands")

    router.message.register(cmd_start, CommandStart())
    router.message.register(cmd_help, Command("help"))
    router.message.register(cmd_new_ticket, Command("newticket"))
    router.message.register(cmd_cancel, Command("cancel"))

    return router
