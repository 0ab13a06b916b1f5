"""Report handlers for complaints about peers."""

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.types import CallbackQuery, Message

from engine import ActionDispatcher
from models import Action, InboundEvent

router = Router()


@router.message(Command("report"))
async def cmd_report(message: Message, engine: ActionDispatcher) -> None:
    """
    Handle /report command - report the current partner and leave the chat.

    Repeated reports against the same user block them from matching for
    5 minutes, 30 minutes, 24 hours, and finally indefinitely.
    """
    if not message.from_user:
        return

    await engine.dispatch(InboundEvent(user_id=message.from_user.id, action=Action.REPORT))


@router.callback_query(F.data == Action.REPORT_PARTNER.value)
async def on_report_partner(callback: CallbackQuery, engine: ActionDispatcher) -> None:
    try:
        await engine.dispatch(InboundEvent(user_id=callback.from_user.id, action=Action.REPORT_PARTNER))
    finally:
        await callback.answer()
