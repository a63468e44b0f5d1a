"""
Тесты отправки тикета в целевой чат.
"""

from unittest.mock import call

import pytest

from ticket_core.dispatcher import TicketDispatcher
from ticket_core.exceptions import TicketDispatchError
from ticket_core.states import MediaItem, MediaKind, TicketDraft
from ticket_core.templates import ticket_message

from helpers import CREATED_AT, DESTINATION


def make_draft(*media: MediaItem) -> TicketDraft:
    return TicketDraft(
        merchant_name="Acme Corp",
        description="Screen freezes on checkout page",
        reporter="alice",
        media=tuple(media),
    )


class TestTicketMessage:
    """Тесты форматирования тикета."""

    def test_contains_fields(self):
        text = ticket_message(make_draft(), CREATED_AT)

        assert "<b>New Support Ticket</b>" in text
        assert "<b>Merchant:</b> Acme Corp" in text
        assert "<b>Reported by:</b> @alice" in text
        assert "<b>Description:</b> Screen freezes on checkout page" in text
        assert "2024-05-01T12:30:00+00:00" in text

    def test_user_text_is_escaped(self):
        draft = TicketDraft(
            merchant_name="<b>Evil & Co</b>",
            description='He said "hi" and it\'s broken',
            reporter="x<y>",
        )

        text = ticket_message(draft, CREATED_AT)

        assert "&lt;b&gt;Evil &amp; Co&lt;/b&gt;" in text
        assert "He said &quot;hi&quot; and it&#x27;s broken" in text
        assert "@x&lt;y&gt;" in text
        assert "<b>Evil" not in text


class TestDispatch:
    """Тесты отправки."""

    @pytest.mark.asyncio
    async def test_text_only(self, dispatcher, messenger):
        assert await dispatcher.dispatch(make_draft()) is True

        messenger.send_text.assert_awaited_once_with(
            DESTINATION,
            ticket_message(make_draft(), CREATED_AT),
            parse_mode="HTML",
        )
        messenger.send_photo.assert_not_awaited()
        messenger.send_video.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_timestamp_taken_at_dispatch(self, messenger):
        moments = iter([CREATED_AT, CREATED_AT.replace(hour=13)])
        dispatcher = TicketDispatcher(messenger, DESTINATION, now=lambda: next(moments))

        await dispatcher.dispatch(make_draft())
        await dispatcher.dispatch(make_draft())

        second_text = messenger.send_text.await_args_list[1].args[1]
        assert "2024-05-01T13:30:00+00:00" in second_text

    @pytest.mark.asyncio
    async def test_media_sent_in_order(self, dispatcher, messenger):
        draft = make_draft(
            MediaItem(MediaKind.PHOTO, "p1"),
            MediaItem(MediaKind.VIDEO, "v1"),
            MediaItem(MediaKind.PHOTO, "p2"),
        )

        await dispatcher.dispatch(draft)

        caption = "Attachment for ticket from @alice"
        assert messenger.send_photo.await_args_list == [
            call(DESTINATION, "p1", caption=caption),
            call(DESTINATION, "p2", caption=caption),
        ]
        messenger.send_video.assert_awaited_once_with(DESTINATION, "v1", caption=caption)

    @pytest.mark.asyncio
    async def test_failed_attachment_does_not_abort(self, dispatcher, messenger):
        messenger.send_video.side_effect = RuntimeError("file is too big")
        draft = make_draft(
            MediaItem(MediaKind.PHOTO, "p1"),
            MediaItem(MediaKind.VIDEO, "v1"),
            MediaItem(MediaKind.PHOTO, "p2"),
        )

        assert await dispatcher.dispatch(draft) is True

        assert messenger.send_photo.await_count == 2
        assert messenger.send_text.await_args_list[-1] == call(
            DESTINATION,
            "⚠️ Failed to send video attachment for ticket from @alice",
        )

    @pytest.mark.asyncio
    async def test_failed_warning_is_swallowed(self, dispatcher, messenger):
        async def send_text(chat_id, text, parse_mode=None):
            if text.startswith("⚠️"):
                raise RuntimeError("chat unavailable")

        messenger.send_text.side_effect = send_text
        messenger.send_photo.side_effect = RuntimeError("bad file")

        draft = make_draft(MediaItem(MediaKind.PHOTO, "p1"), MediaItem(MediaKind.PHOTO, "p2"))

        assert await dispatcher.dispatch(draft) is True
        assert messenger.send_photo.await_count == 2

    @pytest.mark.asyncio
    async def test_text_failure_raises(self, dispatcher, messenger):
        messenger.send_text.side_effect = RuntimeError("chat not found")

        with pytest.raises(TicketDispatchError) as exc_info:
            await dispatcher.dispatch(make_draft(MediaItem(MediaKind.PHOTO, "p1")))

        assert str(exc_info.value) == "Failed to create ticket. Please try again."
        messenger.send_photo.assert_not_awaited()
