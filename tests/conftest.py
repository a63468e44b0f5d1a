"""Общие фикстуры тестов."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from ticket_core.dispatcher import TicketDispatcher
from ticket_core.engine import ConversationEngine
from ticket_core.store import MemoryStateStore

from helpers import CREATED_AT, DESTINATION, FakeClock


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def messenger():
    mock = MagicMock()
    mock.send_text = AsyncMock()
    mock.send_photo = AsyncMock()
    mock.send_video = AsyncMock()
    return mock


@pytest.fixture
def store(clock):
    return MemoryStateStore(clock=clock)


@pytest.fixture
def dispatcher(messenger):
    return TicketDispatcher(messenger, DESTINATION, now=lambda: CREATED_AT)


@pytest.fixture
def engine(store, messenger, dispatcher):
    return ConversationEngine(store=store, messenger=messenger, dispatcher=dispatcher)
