"""
Состояния диалога создания тикета.

Каждая фаза диалога представлена отдельным неизменяемым dataclass:
переход между фазами создаёт новое значение, а не мутирует старое.

Flow: /newticket → AwaitingMerchant → AwaitingDescription → AwaitingMedia → done
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Tuple, Union


NO_USERNAME = "No username"


class Phase(str, Enum):
    """Фаза диалога."""

    AWAITING_MERCHANT = "awaiting_merchant"
    AWAITING_DESCRIPTION = "awaiting_description"
    AWAITING_MEDIA = "awaiting_media"


class MediaKind(str, Enum):
    """Тип вложения."""

    PHOTO = "photo"
    VIDEO = "video"


@dataclass(frozen=True)
class MediaItem:
    """Вложение тикета: тип и file_id в Telegram."""

    kind: MediaKind
    file_id: str


@dataclass(frozen=True)
class TicketDraft:
    """
    Черновик тикета.

    Attributes:
        merchant_name: Название мерчанта
        description: Описание проблемы
        reporter: Username автора или NO_USERNAME
        media: Вложения в порядке получения
    """

    merchant_name: str
    description: str
    reporter: str = NO_USERNAME
    media: Tuple[MediaItem, ...] = field(default_factory=tuple)

    def with_media(self, item: MediaItem) -> "TicketDraft":
        """Вернуть копию черновика с добавленным вложением."""
        return replace(self, media=self.media + (item,))


@dataclass(frozen=True)
class AwaitingMerchant:
    """Ждём название мерчанта."""

    updated_at: float = 0.0

    @property
    def phase(self) -> Phase:
        return Phase.AWAITING_MERCHANT


@dataclass(frozen=True)
class AwaitingDescription:
    """Мерчант получен, ждём описание проблемы."""

    merchant_name: str
    updated_at: float = 0.0

    @property
    def phase(self) -> Phase:
        return Phase.AWAITING_DESCRIPTION


@dataclass(frozen=True)
class AwaitingMedia:
    """Черновик провалидирован, принимаем фото/видео до "done"."""

    draft: TicketDraft
    updated_at: float = 0.0

    @property
    def phase(self) -> Phase:
        return Phase.AWAITING_MEDIA


ConversationState = Union[AwaitingMerchant, AwaitingDescription, AwaitingMedia]
