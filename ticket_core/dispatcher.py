"""
Отправка готового тикета в целевой чат.

Сначала отправляется текст тикета, затем вложения по одному.
Ошибка отправки текста - фатальна для тикета, ошибка отдельного
вложения - нет: о ней пишется предупреждение, и отправка продолжается.
"""

from datetime import datetime, timezone
from typing import Callable

import structlog

from ticket_core.events import ChatId
from ticket_core.exceptions import TicketDispatchError
from ticket_core.messenger import Messenger
from ticket_core.states import MediaItem, MediaKind, TicketDraft
from ticket_core.templates import (
    attachment_caption,
    attachment_failed_message,
    ticket_message,
)


logger = structlog.get_logger()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TicketDispatcher:
    """
    Отправщик тикетов.

    Привязан к одному целевому чату (каналу администраторов).
    """

    def __init__(
        self,
        messenger: Messenger,
        destination: ChatId,
        now: Callable[[], datetime] = _utcnow,
    ):
        """
        Args:
            messenger: Транспорт отправки
            destination: ID целевого чата
            now: Источник времени создания тикета
        """
        self.messenger = messenger
        self.destination = destination
        self._now = now

    async def dispatch(self, draft: TicketDraft) -> bool:
        """
        Отправить тикет и вложения.

        Args:
            draft: Провалидированный черновик

        Returns:
            True, если текст тикета отправлен

        Raises:
            TicketDispatchError: Не удалось отправить текст тикета
        """
        text = ticket_message(draft, self._now())

        try:
            await self.messenger.send_text(self.destination, text, parse_mode="HTML")
        except Exception as e:
            logger.error(
                "ticket_dispatch_failed",
                destination=self.destination,
                merchant=draft.merchant_name,
                reporter=draft.reporter,
                error=str(e),
            )
            raise TicketDispatchError() from e

        for item in draft.media:
            await self._send_attachment(item, draft.reporter)

        logger.info(
            "ticket_dispatched",
            destination=self.destination,
            reporter=draft.reporter,
            media_count=len(draft.media),
        )
        return True

    async def _send_attachment(self, item: MediaItem, reporter: str) -> None:
        """Отправить одно вложение, при ошибке - предупреждение в чат."""
        caption = attachment_caption(reporter)

        try:
            if item.kind is MediaKind.PHOTO:
                await self.messenger.send_photo(self.destination, item.file_id, caption=caption)
            else:
                await self.messenger.send_video(self.destination, item.file_id, caption=caption)
        except Exception as e:
            logger.error(
                "media_send_failed",
                kind=item.kind.value,
                file_id=item.file_id,
                error=str(e),
            )
            try:
                await self.messenger.send_text(
                    self.destination,
                    attachment_failed_message(item.kind, reporter),
                )
            except Exception as warn_error:
                logger.error(
                    "media_failure_notice_failed",
                    kind=item.kind.value,
                    error=str(warn_error),
                )
