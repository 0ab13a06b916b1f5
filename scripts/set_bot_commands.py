#!/usr/bin/env python3
"""
Register the GhostChats command menu and profile texts with Telegram.

Usage: python -m scripts.set_bot_commands [--delete]
"""

import asyncio
import os
import sys

from aiogram import Bot
from aiogram.types import BotCommand, BotCommandScopeAllPrivateChats

COMMANDS = [
    BotCommand(command="start", description="Welcome and commands list"),
    BotCommand(command="find", description="Find a random chat partner"),
    BotCommand(command="stop", description="End current chat"),
    BotCommand(command="report", description="Report abusive partner"),
    BotCommand(command="help", description="Show commands list"),
    BotCommand(command="premium", description="View premium features"),
    BotCommand(command="webchat", description="Open the Web App"),
]

SHORT_DESCRIPTION = "👻 Anonymous chats with random strangers"
DESCRIPTION = (
    "GhostChats pairs you with a random stranger for an anonymous conversation.\n\n"
    "Press Start, then /find to meet someone. /stop leaves, /report flags abuse."
)


async def set_bot_commands(token: str, delete: bool = False) -> bool:
    """Set (or remove) the command menu for private chats."""
    bot = Bot(token=token)
    scope = BotCommandScopeAllPrivateChats()

    try:
        if delete:
            await bot.delete_my_commands(scope=scope)
            print("🗑 Bot commands removed")
            return True

        if not await bot.set_my_commands(COMMANDS, scope=scope):
            print("❌ Failed to register bot commands")
            return False

        await bot.set_my_short_description(SHORT_DESCRIPTION)
        await bot.set_my_description(DESCRIPTION)

        print("✅ Bot commands registered:")
        for cmd in COMMANDS:
            print(f"  /{cmd.command} - {cmd.description}")
        return True
    except Exception as e:
        print(f"❌ Error registering commands: {e}")
        return False
    finally:
        await bot.session.close()


if __name__ == "__main__":
    from dotenv import load_dotenv

    load_dotenv()

    token = os.getenv("TELEGRAM_BOT_TOKEN")
    if not token:
        print("Error: TELEGRAM_BOT_TOKEN environment variable not set")
        sys.exit(1)

    ok = asyncio.run(set_bot_commands(token, delete="--delete" in sys.argv[1:]))
    sys.exit(0 if ok else 1)
