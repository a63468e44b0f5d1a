"""
Хранилище состояний диалогов.

Модуль обеспечивает:
- Абстрактный интерфейс StateStore (можно заменить на Redis/БД)
- In-memory реализацию с TTL
- Фоновую периодическую очистку устаревших диалогов
"""

import asyncio
import time
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Callable, Dict, Optional

import structlog

from ticket_core.states import ConversationState


logger = structlog.get_logger()


# ============================================================
# КОНСТАНТЫ
# ============================================================

STATE_TTL = 30 * 60          # Диалог живёт 30 минут без активности
SWEEP_INTERVAL = 5 * 60      # Очистка каждые 5 минут


# ============================================================
# ИНТЕРФЕЙС
# ============================================================

class StateStore(ABC):
    """Хранилище состояний диалогов по user_id."""

    @abstractmethod
    async def get(self, user_id: int) -> Optional[ConversationState]:
        """Получить состояние пользователя или None."""

    @abstractmethod
    async def set(self, user_id: int, state: ConversationState) -> ConversationState:
        """Сохранить состояние, обновив updated_at. Возвращает сохранённое значение."""

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        """Удалить состояние. Возвращает True, если запись была."""

    @abstractmethod
    async def sweep_expired(self) -> None:
        """Удалить все диалоги старше TTL."""

    async def start(self) -> None:
        """Запустить фоновые задачи хранилища."""

    async def stop(self) -> None:
        """Остановить фоновые задачи хранилища."""


# ============================================================
# IN-MEMORY РЕАЛИЗАЦИЯ
# ============================================================

class MemoryStateStore(StateStore):
    """
    Хранилище состояний в памяти процесса.

    Состояния не переживают перезапуск. Устаревшие записи
    удаляются фоновой задачей, запускаемой через start().
    """

    def __init__(
        self,
        ttl: float = STATE_TTL,
        sweep_interval: float = SWEEP_INTERVAL,
        clock: Callable[[], float] = time.time,
    ):
        """
        Args:
            ttl: Время жизни диалога без активности (сек)
            sweep_interval: Период очистки (сек)
            clock: Источник текущего времени
        """
        self.ttl = ttl
        self.sweep_interval = sweep_interval
        self._clock = clock
        self._states: Dict[int, ConversationState] = {}
        self._running = False
        self._task: Optional[asyncio.Task] = None

    def __len__(self) -> int:
        return len(self._states)

    async def get(self, user_id: int) -> Optional[ConversationState]:
        return self._states.get(user_id)

    async def set(self, user_id: int, state: ConversationState) -> ConversationState:
        stored = replace(state, updated_at=self._clock())
        self._states[user_id] = stored

        logger.info(
            "conversation_state_updated",
            user_id=user_id,
            phase=stored.phase.value,
        )
        return stored

    async def delete(self, user_id: int) -> bool:
        if self._states.pop(user_id, None) is None:
            return False

        logger.info("conversation_state_deleted", user_id=user_id)
        return True

    async def sweep_expired(self) -> None:
        now = self._clock()

        expired_users = [
            user_id
            for user_id, state in self._states.items()
            if now - state.updated_at > self.ttl
        ]

        for user_id in expired_users:
            self._states.pop(user_id, None)
            logger.info("conversation_state_expired", user_id=user_id)

    async def start(self) -> None:
        """Запустить периодическую очистку."""
        if self._running:
            return

        self._running = True
        self._task = asyncio.create_task(self._run_sweeper())
        logger.info(
            "state_sweeper_started",
            ttl=self.ttl,
            interval=self.sweep_interval,
        )

    async def stop(self) -> None:
        """Остановить периодическую очистку."""
        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("state_sweeper_stopped")

    async def _run_sweeper(self) -> None:
        """Основной цикл очистки."""
        while self._running:
            try:
                await asyncio.sleep(self.sweep_interval)
                await self.sweep_expired()
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error("state_sweeper_error", error=str(e))
