"""
Кастомные исключения бота поддержки.

Иерархия исключений позволяет обрабатывать ошибки на разных уровнях:
- TicketBotError - базовое исключение для всех ошибок бота
  - TicketValidationError - поля тикета не прошли валидацию
  - TicketDispatchError - не удалось отправить тикет в целевой чат
  - ConfigurationError - ошибки конфигурации при запуске
"""


class TicketBotError(Exception):
    """
    Базовое исключение бота.

    Все кастомные исключения проекта наследуются от этого класса.
    Позволяет ловить все ошибки бота одним except блоком.
    """
    pass


class TicketValidationError(TicketBotError):
    """
    Черновик тикета не прошёл валидацию.

    Текст исключения показывается пользователю как есть,
    поэтому он должен быть понятным.
    """

    def __init__(self, message: str, field: str | None = None):
        """
        Args:
            message: Текст ошибки для пользователя
            field: Имя поля, не прошедшего проверку
        """
        super().__init__(message)
        self.field = field


class TicketDispatchError(TicketBotError):
    """
    Ошибка отправки тикета.

    Возникает, когда не удалось отправить основное сообщение тикета
    в целевой чат. Ошибки отправки вложений сюда не относятся.
    """

    def __init__(self, message: str = "Failed to create ticket. Please try again."):
        super().__init__(message)


class ConfigurationError(TicketBotError):
    """
    Ошибка конфигурации.

    Возникает при отсутствии или неверных настройках:
    - Не задан токен бота
    - Не задан целевой чат
    - Невалидные значения переменных окружения
    """
    pass
