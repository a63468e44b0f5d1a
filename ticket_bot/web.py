"""
HTTP-приложение бота.

- GET /health - проверка живости, всегда {"status": "ok"}
- POST /webhook/<token> - приём апдейтов Telegram (только в режиме webhook)
"""

from typing import Optional

from aiogram import Bot, Dispatcher
from aiogram.webhook.aiohttp_server import SimpleRequestHandler
from aiohttp import web
import structlog


logger = structlog.get_logger()


async def health(request: web.Request) -> web.Response:
    """Проверка, что процесс жив."""
    return web.json_response({"status": "ok"})


def create_app(
    dispatcher: Optional[Dispatcher] = None,
    bot: Optional[Bot] = None,
    webhook_path: Optional[str] = None,
) -> web.Application:
    """
    Создать aiohttp-приложение.

    Если переданы dispatcher, bot и webhook_path - регистрирует
    обработчик webhook. Апдейт подтверждается сразу, а обрабатывается
    в фоне.

    Args:
        dispatcher: Диспетчер aiogram
        bot: Экземпляр бота
        webhook_path: Путь webhook'а

    Returns:
        Приложение aiohttp
    """
    app = web.Application()
    app.router.add_get("/health", health)

    if dispatcher is not None and bot is not None and webhook_path:
        SimpleRequestHandler(
            dispatcher=dispatcher,
            bot=bot,
            handle_in_background=True,
        ).register(app, path=webhook_path)
        logger.debug("webhook_route_registered")

    return app
