"""
Telegram-оболочка бота поддержки.

Содержит:
- handlers/ - обработчики команд и сообщений
- middlewares/ - блокировка по пользователю и логирование
- config.py - конфигурация из .env
- messenger.py - отправка сообщений через aiogram
- web.py - webhook и health-check
- main.py - точка входа
"""
