"""
Точка входа бота поддержки.

Этот модуль инициализирует и запускает бота:
- Загружает конфигурацию и настраивает логирование
- Собирает хранилище, движок диалога и отправщик тикетов
- Регистрирует middleware и обработчики
- Запускает polling или webhook вместе с HTTP health-check
"""

import asyncio
import signal
import sys

import structlog
from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.types import BotCommand, BotCommandScopeDefault
from aiogram.webhook.aiohttp_server import setup_application
from aiohttp import web

from ticket_bot.config import Settings, get_settings
from ticket_bot.handlers import get_main_router
from ticket_bot.logging_config import setup_logging
from ticket_bot.messenger import AiogramMessenger
from ticket_bot.middlewares import LoggingMiddleware, UserLockMiddleware
from ticket_bot.web import create_app
from ticket_core.dispatcher import TicketDispatcher
from ticket_core.engine import ConversationEngine
from ticket_core.exceptions import ConfigurationError
from ticket_core.store import MemoryStateStore, StateStore


logger = structlog.get_logger()


BOT_COMMANDS = [
    BotCommand(command="newticket", description="Create a new support ticket"),
    BotCommand(command="cancel", description="Cancel ticket creation"),
    BotCommand(command="help", description="Show help"),
    BotCommand(command="start", description="Start the bot"),
]


STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def create_bot(settings: Settings) -> Bot:
    """
    Создать экземпляр бота.

    parse_mode по умолчанию не задаётся: HTML включается только
    для текста тикета, ответы пользователю - простой текст.
    """
    return Bot(
        token=settings.bot_token,
        default=DefaultBotProperties(link_preview_is_disabled=True),
    )


def create_dispatcher(settings: Settings, bot: Bot) -> Dispatcher:
    """
    Собрать диспетчер со всеми зависимостями.

    Движок доступен обработчикам как аргумент `engine`,
    хранилище - как `store`.
    """
    store = MemoryStateStore(
        ttl=settings.state_ttl,
        sweep_interval=settings.sweep_interval,
    )
    messenger = AiogramMessenger(bot)
    engine = ConversationEngine(
        store=store,
        messenger=messenger,
        dispatcher=TicketDispatcher(messenger, settings.destination),
    )

    dp = Dispatcher(engine=engine, store=store, settings=settings)

    # Регистрация lifecycle callbacks
    dp.startup.register(on_startup)
    dp.shutdown.register(on_shutdown)

    # Регистрация middleware (порядок важен!)
    dp.message.middleware(LoggingMiddleware())
    dp.message.middleware(UserLockMiddleware())

    dp.include_router(get_main_router())

    return dp


async def on_startup(bot: Bot, store: StateStore, settings: Settings) -> None:
    """
    Callback при старте бота.

    - Запускает очистку устаревших диалогов
    - Регистрирует команды бота
    - Устанавливает или снимает webhook
    """
    await store.start()

    try:
        await bot.set_my_commands(BOT_COMMANDS, scope=BotCommandScopeDefault())
        logger.info("bot_commands_registered")
    except Exception as e:
        logger.warning("failed_to_register_commands", error=str(e))

    if settings.use_webhook:
        await bot.set_webhook(
            settings.webhook_full_url,
            allowed_updates=["message"],
            drop_pending_updates=True,
        )
        logger.info("webhook_set")
    else:
        # Удаляем webhook на случай если был установлен ранее
        await bot.delete_webhook(drop_pending_updates=True)

    bot_info = await bot.get_me()
    logger.info(
        "bot_started",
        bot_username=bot_info.username,
        bot_id=bot_info.id,
        mode="webhook" if settings.use_webhook else "polling",
    )


async def on_shutdown(bot: Bot, store: StateStore) -> None:
    """Callback при остановке бота."""
    logger.info("bot_stopping")

    await store.stop()
    await bot.session.close()

    logger.info("bot_stopped")


async def run_polling(settings: Settings, bot: Bot, dp: Dispatcher) -> None:
    """Long polling + отдельный HTTP-сервер для /health."""
    runner = web.AppRunner(create_app())
    await runner.setup()
    site = web.TCPSite(runner, host=settings.host, port=settings.port)
    await site.start()
    logger.info("http_server_started", host=settings.host, port=settings.port)

    try:
        logger.info("polling_started")
        await dp.start_polling(
            bot,
            allowed_updates=dp.resolve_used_update_types(),
        )
    finally:
        await runner.cleanup()


async def wait_for_stop_signal() -> None:
    """
    Ждать SIGINT или SIGTERM.

    Обработчики сигналов снимаются после выхода, чтобы повторный
    сигнал во время остановки обработал Python по умолчанию.
    """
    loop = asyncio.get_running_loop()
    stop = asyncio.Event()
    installed = []

    for sig in STOP_SIGNALS:
        try:
            loop.add_signal_handler(sig, stop.set)
            installed.append(sig)
        except NotImplementedError:
            # Windows: остаётся только KeyboardInterrupt
            logger.warning("signal_handler_unavailable", signal=sig.name)

    try:
        await stop.wait()
        logger.info("stop_signal_received")
    finally:
        for sig in installed:
            loop.remove_signal_handler(sig)


async def run_webhook(settings: Settings, bot: Bot, dp: Dispatcher) -> None:
    """HTTP-сервер с webhook и /health."""
    app = create_app(dp, bot, settings.webhook_path)
    setup_application(app, dp, bot=bot)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, host=settings.host, port=settings.port)
    await site.start()
    logger.info("http_server_started", host=settings.host, port=settings.port)

    try:
        await wait_for_stop_signal()
    finally:
        await runner.cleanup()


async def main() -> None:
    """
    Главная функция запуска бота.

    Последовательность запуска:
    1. Загрузка настроек (без токена и целевого чата - выход)
    2. Настройка логирования
    3. Инициализация бота и диспетчера
    4. Запуск polling или webhook
    """
    settings = get_settings()

    setup_logging(debug=settings.debug, log_file=settings.log_file or None)

    logger.info(
        "starting_bot",
        debug=settings.debug,
        mode="webhook" if settings.use_webhook else "polling",
        port=settings.port,
    )

    bot = create_bot(settings)
    dp = create_dispatcher(settings, bot)

    try:
        if settings.use_webhook:
            await run_webhook(settings, bot, dp)
        else:
            await run_polling(settings, bot, dp)
    except Exception as e:
        logger.error("bot_error", error=str(e), exc_info=True)
        raise


def run() -> None:
    """Синхронная обёртка для консольного скрипта."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\n⛔ Бот остановлен пользователем")
    except ConfigurationError as e:
        print(f"\n❌ Ошибка конфигурации: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
