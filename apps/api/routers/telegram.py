"""Telegram webhook router for FastAPI."""

import logging

from fastapi import APIRouter, Header, Request, Response, status
from fastapi.exceptions import HTTPException

from apps.bot.bot import bot, dp
from core.config import settings
from core.metrics import webhook_updates_total

router = APIRouter()
logger = logging.getLogger(__name__)

# Update fields other than update_id, in the order Telegram documents them
_UPDATE_TYPES = ("message", "edited_message", "callback_query", "my_chat_member")


def _update_type(update_data: dict) -> str:
    for key in _UPDATE_TYPES:
        if key in update_data:
            return key
    return "other"


@router.post("/webhook")
async def telegram_webhook(
    request: Request,
    x_telegram_bot_api_secret_token: str | None = Header(None),
) -> Response:
    """Handle incoming Telegram webhook updates.

    This endpoint receives updates from Telegram and feeds them to the aiogram dispatcher.
    """
    # Validate secret token if configured (recommended for production)
    webhook_secret = settings.telegram_webhook_secret
    if webhook_secret and x_telegram_bot_api_secret_token != webhook_secret:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid secret token",
        )

    update_data = await request.json()
    webhook_updates_total.labels(update_type=_update_type(update_data)).inc()

    try:
        result = await dp.feed_webhook_update(bot=bot, update=update_data)
    except Exception as e:
        logger.error(f"Webhook error: {e}")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    # If handler returns a method to execute, handle it
    # (rare case, usually handlers don't return responses)
    if result:
        return Response(content=result.model_dump_json(), media_type="application/json")

    return Response(status_code=status.HTTP_200_OK)
