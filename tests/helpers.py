"""Общие константы и построители событий для тестов."""

from datetime import datetime, timezone

from ticket_core.events import EventKind, InboundEvent


DESTINATION = -100500
USER_ID = 12345
CHAT_ID = 12345
CREATED_AT = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


class FakeClock:
    """Управляемые часы для проверки TTL."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_event(kind: EventKind, **kwargs) -> InboundEvent:
    kwargs.setdefault("user_id", USER_ID)
    kwargs.setdefault("chat_id", CHAT_ID)
    kwargs.setdefault("username", "reporter")
    return InboundEvent(kind=kind, **kwargs)


def text_event(text: str, **kwargs) -> InboundEvent:
    return make_event(EventKind.TEXT, text=text, **kwargs)


def command_event(command: str, **kwargs) -> InboundEvent:
    return make_event(EventKind.COMMAND, command=command, text=f"/{command}", **kwargs)


def photo_event(file_id: str = "photo-1", **kwargs) -> InboundEvent:
    return make_event(EventKind.PHOTO, file_id=file_id, **kwargs)


def video_event(file_id: str = "video-1", **kwargs) -> InboundEvent:
    return make_event(EventKind.VIDEO, file_id=file_id, **kwargs)
