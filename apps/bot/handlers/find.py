"""Match finding handlers."""

import logging

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.types import CallbackQuery, Message

from engine import ActionDispatcher
from models import Action, InboundEvent

logger = logging.getLogger(__name__)
router = Router()


@router.message(Command("find"))
async def cmd_find(message: Message, engine: ActionDispatcher) -> None:
    """Handle /find command - join the waiting queue or get matched right away."""
    if not message.from_user:
        return

    try:
        await engine.dispatch(InboundEvent(user_id=message.from_user.id, action=Action.FIND))
    except Exception as e:
        logger.error(f"Failed to find partner for user {message.from_user.id}: {e}")
        await message.answer("⚠️ Something went wrong. Please try /find again.")


@router.callback_query(F.data == Action.FIND_AGAIN.value)
async def on_find_again(callback: CallbackQuery, engine: ActionDispatcher) -> None:
    """
    Handle "Find another" button.

    Unlike /find, this retracts the previous conversation from both the
    user's chat and the new partner's chat.
    """
    try:
        await engine.dispatch(InboundEvent(user_id=callback.from_user.id, action=Action.FIND_AGAIN))
        await callback.answer()
    except Exception as e:
        logger.error(f"Failed to find another partner for user {callback.from_user.id}: {e}")
        await callback.answer("⚠️ Error. Please try again later.", show_alert=True)
