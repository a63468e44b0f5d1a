"""
Абстракция отправки сообщений.

Ядро не зависит от aiogram напрямую: всё, что ему нужно от транспорта,
описано протоколом Messenger. Реализация для Telegram лежит
в ticket_bot/messenger.py.
"""

from typing import Optional, Protocol

from ticket_core.events import ChatId


class Messenger(Protocol):
    """Минимальный набор операций отправки."""

    async def send_text(
        self,
        chat_id: ChatId,
        text: str,
        parse_mode: Optional[str] = None,
    ) -> None:
        ...

    async def send_photo(
        self,
        chat_id: ChatId,
        file_id: str,
        caption: Optional[str] = None,
    ) -> None:
        ...

    async def send_video(
        self,
        chat_id: ChatId,
        file_id: str,
        caption: Optional[str] = None,
    ) -> None:
        ...
