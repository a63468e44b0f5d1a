"""Перевод сообщений aiogram во входящие события ядра."""

from typing import Optional

from aiogram.types import Message

from ticket_core.events import EventKind, InboundEvent


def event_from_message(
    message: Message,
    kind: EventKind,
    command: Optional[str] = None,
) -> InboundEvent:
    """
    Собрать InboundEvent из сообщения Telegram.

    Для фото берётся самый крупный размер (последний в списке).
    """
    user = message.from_user
    file_id = None

    if kind is EventKind.PHOTO and message.photo:
        file_id = message.photo[-1].file_id
    elif kind is EventKind.VIDEO and message.video:
        file_id = message.video.file_id

    return InboundEvent(
        kind=kind,
        user_id=user.id,
        chat_id=message.chat.id,
        username=user.username,
        text=message.text,
        command=command,
        file_id=file_id,
    )
