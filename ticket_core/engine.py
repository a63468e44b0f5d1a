"""
Движок диалога создания тикета.

Конечный автомат:
    /newticket → AWAITING_MERCHANT → AWAITING_DESCRIPTION → AWAITING_MEDIA → "done"

Каждый ход пользователя обрабатывается целиком: чтение состояния,
переход, ответ пользователю. Любая ошибка в ходе диалога
показывается пользователю, а состояние удаляется - начинать
придётся заново через /newticket.
"""

import structlog

from ticket_core import templates
from ticket_core.dispatcher import TicketDispatcher
from ticket_core.events import ChatId, EventKind, InboundEvent
from ticket_core.messenger import Messenger
from ticket_core.states import (
    NO_USERNAME,
    AwaitingDescription,
    AwaitingMedia,
    AwaitingMerchant,
    ConversationState,
    MediaItem,
    TicketDraft,
)
from ticket_core.store import StateStore
from ticket_core.validator import ensure_valid


logger = structlog.get_logger()


DONE_KEYWORD = "done"


class ConversationEngine:
    """
    Обработчик входящих событий.

    Единственный, кто пишет в StateStore.
    """

    def __init__(
        self,
        store: StateStore,
        messenger: Messenger,
        dispatcher: TicketDispatcher,
    ):
        self.store = store
        self.messenger = messenger
        self.dispatcher = dispatcher

    # ============================================================
    # ТОЧКА ВХОДА
    # ============================================================

    async def handle(self, event: InboundEvent) -> None:
        """Обработать любое входящее событие."""
        if event.kind is EventKind.COMMAND:
            await self.handle_command(event)
        elif event.kind is EventKind.TEXT:
            await self.handle_text(event)
        elif event.kind in (EventKind.PHOTO, EventKind.VIDEO):
            await self.handle_media(event)

    async def handle_command(self, event: InboundEvent) -> None:
        command = (event.command or "").lower()

        if command == "start":
            await self.start(event)
        elif command == "help":
            await self.help(event)
        elif command == "newticket":
            await self.new_ticket(event)
        elif command == "cancel":
            await self.cancel(event)
        else:
            logger.debug("unknown_command_ignored", user_id=event.user_id, command=command)

    # ============================================================
    # КОМАНДЫ
    # ============================================================

    async def start(self, event: InboundEvent) -> None:
        """/start - приветствие и список команд."""
        try:
            await self.messenger.send_text(event.chat_id, templates.WELCOME_MESSAGE)
            logger.info("start_command_received", user_id=event.user_id)
        except Exception as e:
            logger.error("welcome_message_failed", user_id=event.user_id, error=str(e))
            await self.send_error(event.chat_id, templates.START_FAILED)

    async def help(self, event: InboundEvent) -> None:
        """/help - инструкция."""
        try:
            await self.messenger.send_text(event.chat_id, templates.HELP_MESSAGE)
            logger.info("help_command_received", user_id=event.user_id)
        except Exception as e:
            logger.error("help_message_failed", user_id=event.user_id, error=str(e))
            await self.send_error(event.chat_id, templates.HELP_FAILED)

    async def new_ticket(self, event: InboundEvent) -> None:
        """/newticket - начать диалог заново, затирая прежний черновик."""
        try:
            await self.store.set(event.user_id, AwaitingMerchant())
            await self.messenger.send_text(event.chat_id, templates.MERCHANT_PROMPT)
            logger.info("new_ticket_started", user_id=event.user_id)
        except Exception as e:
            logger.error("new_ticket_failed", user_id=event.user_id, error=str(e))
            await self.store.delete(event.user_id)
            await self.send_error(event.chat_id, templates.NEW_TICKET_FAILED)

    async def cancel(self, event: InboundEvent) -> None:
        """/cancel - прервать создание тикета."""
        try:
            if await self.store.delete(event.user_id):
                await self.messenger.send_text(event.chat_id, templates.CANCELLED_MESSAGE)
                logger.info("ticket_creation_cancelled", user_id=event.user_id)
            else:
                await self.messenger.send_text(event.chat_id, templates.NOTHING_TO_CANCEL_MESSAGE)
        except Exception as e:
            logger.error("cancel_failed", user_id=event.user_id, error=str(e))
            await self.send_error(event.chat_id, templates.CANCEL_FAILED)

    # ============================================================
    # МЕДИА
    # ============================================================

    async def handle_media(self, event: InboundEvent) -> None:
        """Принять фото или видео к тикету."""
        state = await self.store.get(event.user_id)

        if state is None:
            await self._reply(event.chat_id, templates.NO_ACTIVE_TICKET_MESSAGE)
            return

        if not isinstance(state, AwaitingMedia):
            await self._reply(event.chat_id, templates.MEDIA_NOT_EXPECTED_MESSAGE)
            return

        # Вложение сохраняется только после подтверждения пользователю,
        # иначе повторная отправка после ошибки задвоит его в тикете
        try:
            item = MediaItem(kind=event.media_kind, file_id=event.file_id)
            await self.messenger.send_text(event.chat_id, templates.MEDIA_ATTACHED_MESSAGE)
            await self.store.set(
                event.user_id,
                AwaitingMedia(draft=state.draft.with_media(item)),
            )
            logger.info(
                "media_received",
                user_id=event.user_id,
                kind=item.kind.value,
                media_count=len(state.draft.media) + 1,
            )
        except Exception as e:
            logger.error("media_processing_failed", user_id=event.user_id, error=str(e))
            await self.send_error(event.chat_id, templates.MEDIA_FAILED)

    # ============================================================
    # ТЕКСТ
    # ============================================================

    async def handle_text(self, event: InboundEvent) -> None:
        """
        Обработать текст в зависимости от фазы.

        Команды и текст без активного диалога игнорируются,
        чтобы не пересекаться с обработчиками команд.
        """
        text = event.text
        if text is None or text.startswith("/"):
            return

        state = await self.store.get(event.user_id)
        if state is None:
            return

        try:
            await self._advance(event, state, text)
        except Exception as e:
            logger.error(
                "message_processing_failed",
                user_id=event.user_id,
                phase=state.phase.value,
                error=str(e),
            )
            await self.send_error(event.chat_id, str(e))
            await self.store.delete(event.user_id)

    async def _advance(self, event: InboundEvent, state: ConversationState, text: str) -> None:
        if isinstance(state, AwaitingMerchant):
            await self.store.set(event.user_id, AwaitingDescription(merchant_name=text))
            await self.messenger.send_text(event.chat_id, templates.DESCRIPTION_PROMPT)
            logger.info("merchant_name_received", user_id=event.user_id)

        elif isinstance(state, AwaitingDescription):
            draft = ensure_valid(
                TicketDraft(
                    merchant_name=state.merchant_name,
                    description=text,
                    reporter=event.username or NO_USERNAME,
                )
            )
            await self.store.set(event.user_id, AwaitingMedia(draft=draft))
            await self.messenger.send_text(event.chat_id, templates.MEDIA_PROMPT)
            logger.info("description_received", user_id=event.user_id)

        elif isinstance(state, AwaitingMedia):
            if text.lower() == DONE_KEYWORD:
                await self.dispatcher.dispatch(state.draft)
                await self.messenger.send_text(event.chat_id, templates.TICKET_SUBMITTED_MESSAGE)
                await self.store.delete(event.user_id)
                logger.info(
                    "ticket_completed",
                    user_id=event.user_id,
                    media_count=len(state.draft.media),
                )
            else:
                await self.messenger.send_text(event.chat_id, templates.MEDIA_REPROMPT)

    # ============================================================
    # ВСПОМОГАТЕЛЬНЫЕ
    # ============================================================

    async def send_error(self, chat_id: ChatId, reason: str) -> None:
        """
        Сообщить пользователю об ошибке.

        Если не удалось отправить и это - только логируем.
        """
        try:
            await self.messenger.send_text(chat_id, templates.error_message(reason))
            logger.warning("error_sent_to_user", chat_id=chat_id, reason=reason)
        except Exception as e:
            logger.error("failed_to_send_error_message", chat_id=chat_id, error=str(e))

    async def _reply(self, chat_id: ChatId, text: str) -> None:
        """Ответ без смены состояния, ошибки отправки только логируются."""
        try:
            await self.messenger.send_text(chat_id, text)
        except Exception as e:
            logger.error("reply_failed", chat_id=chat_id, error=str(e))
