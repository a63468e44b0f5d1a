"""
Тесты HTTP-приложения.
"""

import asyncio

import pytest
from aiogram import Bot, Dispatcher
from aiohttp.test_utils import TestClient, TestServer

from ticket_bot.web import create_app


WEBHOOK_PATH = "/webhook/42:TEST"


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_ok(self):
        async with TestClient(TestServer(create_app())) as client:
            response = await client.get("/health")

            assert response.status == 200
            assert await response.json() == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_no_webhook_route_in_polling_mode(self):
        async with TestClient(TestServer(create_app())) as client:
            response = await client.post(WEBHOOK_PATH, json={"update_id": 1})

            assert response.status in (404, 405)


class TestWebhook:

    @pytest.mark.asyncio
    async def test_update_acknowledged(self):
        bot = Bot(token="42:TEST")
        app = create_app(Dispatcher(), bot, WEBHOOK_PATH)

        update = {
            "update_id": 1,
            "message": {
                "message_id": 1,
                "date": 0,
                "chat": {"id": 1, "type": "private"},
                "from": {"id": 1, "is_bot": False, "first_name": "Test"},
                "text": "hello",
            },
        }

        async with TestClient(TestServer(app)) as client:
            response = await client.post(WEBHOOK_PATH, json=update)
            assert response.status == 200

            # Даём фоновой обработке завершиться
            await asyncio.sleep(0.05)

        await bot.session.close()
