"""
Ядро бота поддержки.

Содержит:
- states.py - фазы диалога и черновик тикета
- store.py - хранилище состояний с TTL
- engine.py - конечный автомат диалога
- validator.py - валидация черновика
- dispatcher.py - отправка тикета в целевой чат
- exceptions.py - кастомные исключения
"""

from ticket_core.dispatcher import TicketDispatcher
from ticket_core.engine import ConversationEngine
from ticket_core.events import EventKind, InboundEvent
from ticket_core.exceptions import (
    ConfigurationError,
    TicketBotError,
    TicketDispatchError,
    TicketValidationError,
)
from ticket_core.messenger import Messenger
from ticket_core.states import (
    AwaitingDescription,
    AwaitingMedia,
    AwaitingMerchant,
    ConversationState,
    MediaItem,
    MediaKind,
    Phase,
    TicketDraft,
)
from ticket_core.store import MemoryStateStore, StateStore
from ticket_core.validator import ensure_valid, validate_ticket


__all__ = [
    # Exceptions
    "TicketBotError",
    "TicketValidationError",
    "TicketDispatchError",
    "ConfigurationError",
    # States
    "Phase",
    "MediaKind",
    "MediaItem",
    "TicketDraft",
    "AwaitingMerchant",
    "AwaitingDescription",
    "AwaitingMedia",
    "ConversationState",
    # Events / transport
    "EventKind",
    "InboundEvent",
    "Messenger",
    # Components
    "StateStore",
    "MemoryStateStore",
    "ConversationEngine",
    "TicketDispatcher",
    "validate_ticket",
    "ensure_valid",
]
