"""Main bot module: bot, dispatcher and chat engine wiring."""

import asyncio
import logging

from aiogram import Bot, Dispatcher

from apps.bot.handlers import chat, end, find, report, start
from apps.bot.middlewares.engine import EngineMiddleware
from apps.bot.transport import TelegramTransport
from core.config import settings
from engine import build_engine

logger = logging.getLogger(__name__)

# Initialize bot, engine and dispatcher
bot = Bot(token=settings.telegram_bot_token)
engine = build_engine(TelegramTransport(bot), web_app_url=settings.web_app_url)
dp = Dispatcher()

# Register middlewares
dp.message.middleware(EngineMiddleware(engine))
dp.callback_query.middleware(EngineMiddleware(engine))

# Register handlers (chat relay must stay last)
dp.include_router(start.router)
dp.include_router(find.router)
dp.include_router(end.router)
dp.include_router(report.router)
dp.include_router(chat.router)


async def on_startup() -> None:
    """Set webhook on startup."""
    webhook_url = settings.webhook_url
    if not webhook_url:
        logger.warning("PUBLIC_BASE_URL not set, webhook not registered")
        return
    await bot.set_webhook(webhook_url, secret_token=settings.telegram_webhook_secret)
    logger.info(f"Webhook set to: {webhook_url}")


async def on_shutdown() -> None:
    """Clean up on shutdown."""
    await bot.session.close()


async def run_polling() -> None:
    """Run the bot with long polling (local development without a public URL)."""
    await bot.delete_webhook(drop_pending_updates=False)
    try:
        await dp.start_polling(bot)
    finally:
        await on_shutdown()


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    asyncio.run(run_polling())
