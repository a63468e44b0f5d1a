"""
Входящие события диалога.

Транспорт (polling или webhook) переводит сообщения Telegram
в InboundEvent, и движок работает только с ними.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ticket_core.states import MediaKind


ChatId = Union[int, str]


class EventKind(str, Enum):
    """Тип входящего события."""

    COMMAND = "command"
    TEXT = "text"
    PHOTO = "photo"
    VIDEO = "video"


@dataclass(frozen=True)
class InboundEvent:
    """
    Входящее событие от пользователя.

    Attributes:
        kind: Тип события
        user_id: Telegram ID пользователя
        chat_id: ID чата, куда отвечать
        username: Публичный username (без @), если есть
        text: Текст сообщения (для TEXT)
        command: Имя команды без "/" (для COMMAND)
        file_id: Ссылка на медиа в Telegram (для PHOTO/VIDEO)
    """

    kind: EventKind
    user_id: int
    chat_id: ChatId
    username: Optional[str] = None
    text: Optional[str] = None
    command: Optional[str] = None
    file_id: Optional[str] = None

    @property
    def media_kind(self) -> Optional[MediaKind]:
        if self.kind is EventKind.PHOTO:
            return MediaKind.PHOTO
        if self.kind is EventKind.VIDEO:
            return MediaKind.VIDEO
        return None
