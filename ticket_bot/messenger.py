"""
Реализация Messenger поверх aiogram.Bot.

У Bot нет parse_mode по умолчанию: HTML включает только вызывающий
(текст тикета), ответы пользователю и подписи к вложениям - простой текст.
"""

from typing import Optional

from aiogram import Bot

from ticket_core.events import ChatId


class AiogramMessenger:
    """Отправка сообщений через Telegram Bot API."""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def send_text(
        self,
        chat_id: ChatId,
        text: str,
        parse_mode: Optional[str] = None,
    ) -> None:
        await self.bot.send_message(
            chat_id=chat_id,
            text=text,
            parse_mode=parse_mode,
        )

    async def send_photo(
        self,
        chat_id: ChatId,
        file_id: str,
        caption: Optional[str] = None,
    ) -> None:
        await self.bot.send_photo(
            chat_id=chat_id,
            photo=file_id,
            caption=caption,
        )

    async def send_video(
        self,
        chat_id: ChatId,
        file_id: str,
        caption: Optional[str] = None,
    ) -> None:
        await self.bot.send_video(
            chat_id=chat_id,
            video=file_id,
            caption=caption,
        )
