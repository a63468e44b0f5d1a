"""
Шаблоны сообщений бота.

Все тексты, которые видит пользователь и целевой чат,
собраны здесь, чтобы движок и диспетчер не содержали строк.
"""

import html
from datetime import datetime
from typing import Optional

from ticket_core.states import MediaKind, TicketDraft


# ============================================================
# КОМАНДЫ
# ============================================================

WELCOME_MESSAGE = (
    "Welcome to the Support Ticket Bot! 🎫\n\n"
    "Available commands:\n"
    "/newticket - Create a new support ticket\n"
    "/cancel - Cancel ticket creation\n"
    "/help - Show this help message"
)

HELP_MESSAGE = (
    "🔍 Help Guide:\n\n"
    "1. Use /newticket to start creating a ticket\n"
    "2. Enter the merchant name when prompted\n"
    "3. Describe your problem\n"
    "4. Optionally add photos or videos\n"
    '5. Type "done" to submit the ticket\n\n'
    "Use /cancel at any time to cancel ticket creation"
)

CANCELLED_MESSAGE = (
    "❌ Ticket creation cancelled.\n"
    "Use /newticket to start again."
)

NOTHING_TO_CANCEL_MESSAGE = (
    "⚠️ No active ticket creation to cancel.\n"
    "Use /newticket to start a new ticket."
)


# ============================================================
# ШАГИ ДИАЛОГА
# ============================================================

MERCHANT_PROMPT = "📝 Please enter the merchant name:"

DESCRIPTION_PROMPT = "📝 Please describe the problem in detail:"

MEDIA_PROMPT = (
    "✅ Information received!\n\n"
    "Now you can:\n"
    "📎 Send photos or videos related to the issue (optional)\n"
    '✍️ Type "done" to submit the ticket without media\n'
    "❌ Use /cancel to cancel ticket creation"
)

MEDIA_ATTACHED_MESSAGE = (
    "✅ Media attached successfully!\n\n"
    "You can:\n"
    "📎 Send more photos or videos\n"
    '✍️ Type "done" to submit the ticket\n'
    "❌ Use /cancel to cancel ticket creation"
)

MEDIA_REPROMPT = (
    "⚠️ Please either:\n"
    "📎 Send photos/videos\n"
    '✍️ Type "done" to submit\n'
    "❌ Use /cancel to cancel"
)

TICKET_SUBMITTED_MESSAGE = (
    "🎉 Success! Your ticket has been created and sent to our administrators.\n\n"
    "Use /newticket to create another ticket."
)

NO_ACTIVE_TICKET_MESSAGE = (
    "⚠️ No active ticket creation found.\n"
    "Use /newticket to start a new ticket."
)

MEDIA_NOT_EXPECTED_MESSAGE = (
    "⚠️ Media not expected at this stage.\n"
    "Please follow the prompts."
)


# ============================================================
# ОШИБКИ
# ============================================================

START_FAILED = "Failed to start bot. Please try again."
HELP_FAILED = "Failed to show help. Please try again."
NEW_TICKET_FAILED = "Failed to start new ticket. Please try again."
CANCEL_FAILED = "Failed to cancel ticket. Please try again."
MEDIA_FAILED = 'Failed to process media. Please try again or type "done" to submit without it.'


def error_message(reason: str) -> str:
    """Сообщение об ошибке для пользователя."""
    return f"❌ Error: {reason}\n\nPlease try again with /newticket"


# ============================================================
# ТИКЕТ В ЦЕЛЕВОМ ЧАТЕ
# ============================================================

def escape_html(text: Optional[str]) -> str:
    """Экранирует & < > " ' для HTML parse mode."""
    if not text:
        return ""
    return html.escape(text, quote=True)


def ticket_message(draft: TicketDraft, created_at: datetime) -> str:
    """
    Текст тикета для целевого чата (HTML).

    Args:
        draft: Готовый черновик
        created_at: Время создания тикета

    Returns:
        HTML-сообщение с экранированными пользовательскими полями
    """
    return (
        "🎫 <b>New Support Ticket</b>\n\n"
        f"🏪 <b>Merchant:</b> {escape_html(draft.merchant_name)}\n"
        f"👤 <b>Reported by:</b> @{escape_html(draft.reporter)}\n"
        f"📝 <b>Description:</b> {escape_html(draft.description)}\n"
        f"⏰ <b>Created:</b> {created_at.isoformat()}"
    )


def attachment_caption(reporter: str) -> str:
    return f"Attachment for ticket from @{reporter}"


def attachment_failed_message(kind: MediaKind, reporter: str) -> str:
    return f"⚠️ Failed to send {kind.value} attachment for ticket from @{reporter}"
