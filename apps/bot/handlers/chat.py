"""Chat message relay handler."""

import logging

from aiogram import Router
from aiogram.types import Message

from apps.bot.events import is_command, payload_from_message
from engine import ActionDispatcher
from models import InboundEvent

logger = logging.getLogger(__name__)
router = Router()


@router.message()
async def handle_chat_message(message: Message, engine: ActionDispatcher) -> None:
    """
    Relay any non-command message to the sender's active chat partner.

    This is a catch-all handler. It must be registered LAST in bot.py to avoid
    intercepting commands.
    """
    if not message.from_user or message.from_user.is_bot:
        return

    if is_command(message):
        return

    try:
        event = InboundEvent(user_id=message.from_user.id, payload=payload_from_message(message))
        await engine.dispatch(event)
    except Exception as e:
        logger.error(f"Failed to relay message from user {message.from_user.id}: {e}")
        await message.answer("⚠️ Your message could not be delivered. Please try again.")
