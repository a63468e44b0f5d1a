"""
Валидация черновика тикета.

Правила проверяются по порядку, возвращается первая ошибка:
1. Название мерчанта - минимум 2 символа после strip()
2. Описание проблемы - минимум 10 символов после strip()
"""

from typing import Optional

from ticket_core.exceptions import TicketValidationError
from ticket_core.states import TicketDraft


MIN_MERCHANT_LENGTH = 2
MIN_DESCRIPTION_LENGTH = 10

MERCHANT_TOO_SHORT = (
    f"Merchant name must be at least {MIN_MERCHANT_LENGTH} characters long"
)
DESCRIPTION_TOO_SHORT = (
    f"Problem description must be at least {MIN_DESCRIPTION_LENGTH} characters long"
)


def validate_ticket(draft: TicketDraft) -> Optional[str]:
    """
    Проверить черновик тикета.

    Args:
        draft: Черновик тикета

    Returns:
        Текст ошибки или None, если черновик валиден
    """
    if not draft.merchant_name or len(draft.merchant_name.strip()) < MIN_MERCHANT_LENGTH:
        return MERCHANT_TOO_SHORT

    if not draft.description or len(draft.description.strip()) < MIN_DESCRIPTION_LENGTH:
        return DESCRIPTION_TOO_SHORT

    return None


def ensure_valid(draft: TicketDraft) -> TicketDraft:
    """
    Проверить черновик и выбросить исключение при ошибке.

    Raises:
        TicketValidationError: Черновик не прошёл валидацию
    """
    error = validate_ticket(draft)
    if error == MERCHANT_TOO_SHORT:
        raise TicketValidationError(error, field="merchant_name")
    if error:
        raise TicketValidationError(error, field="description")
    return draft
