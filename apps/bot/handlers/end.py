"""End chat session handlers."""

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.types import CallbackQuery, Message

from engine import ActionDispatcher
from models import Action, InboundEvent

router = Router()


@router.message(Command("stop"))
async def cmd_stop(message: Message, engine: ActionDispatcher) -> None:
    """Handle /stop command - end active chat session."""
    if not message.from_user:
        return

    await engine.dispatch(InboundEvent(user_id=message.from_user.id, action=Action.STOP))


@router.callback_query(F.data == Action.STOP_CHAT.value)
async def on_stop_chat(callback: CallbackQuery, engine: ActionDispatcher) -> None:
    try:
        await engine.dispatch(InboundEvent(user_id=callback.from_user.id, action=Action.STOP_CHAT))
    finally:
        await callback.answer()
