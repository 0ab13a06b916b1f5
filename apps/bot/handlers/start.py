"""Informational command handlers."""

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.types import Message

from engine import ActionDispatcher
from models import Action, InboundEvent

router = Router()


async def _dispatch(message: Message, engine: ActionDispatcher, action: Action) -> None:
    if not message.from_user:
        return
    await engine.dispatch(InboundEvent(user_id=message.from_user.id, action=action))


@router.message(CommandStart())
async def cmd_start(message: Message, engine: ActionDispatcher) -> None:
    """Handle /start command - welcome text and Web App button."""
    await _dispatch(message, engine, Action.START)


@router.message(Command("help"))
async def cmd_help(message: Message, engine: ActionDispatcher) -> None:
    """Handle /help command - list of commands."""
    await _dispatch(message, engine, Action.HELP)


@router.message(Command("premium"))
async def cmd_premium(message: Message, engine: ActionDispatcher) -> None:
    await _dispatch(message, engine, Action.PREMIUM)


@router.message(Command("webchat"))
async def cmd_webchat(message: Message, engine: ActionDispatcher) -> None:
    await _dispatch(message, engine, Action.WEBCHAT)
