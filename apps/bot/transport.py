"""Telegram Bot API implementation of the engine transport."""

import logging

from aiogram import Bot
from aiogram.types import Message

from apps.bot.keyboards.inline import get_buttons_keyboard
from models import Payload, PayloadKind

logger = logging.getLogger(__name__)


class TelegramTransport:
    """Delivers payloads to users' private chats and deletes them on request."""

    def __init__(self, bot: Bot) -> None:
        self.bot = bot

    async def deliver(self, user_id: int, payload: Payload) -> int:
        """
        Send a payload to a user's chat.

        Returns:
            Telegram message_id of the sent message

        Raises:
            ValueError: If the payload kind cannot be sent
            TelegramAPIError: If Telegram rejects the request
        """
        message = await self._send(user_id, payload)
        return message.message_id

    async def _send(self, chat_id: int, payload: Payload) -> Message:
        kind = payload.kind
        if kind is PayloadKind.TEXT:
            return await self.bot.send_message(
                chat_id=chat_id, text=payload.text or "", reply_markup=get_buttons_keyboard(payload.buttons)
            )
        if kind is PayloadKind.DOCUMENT:
            return await self.bot.send_document(chat_id=chat_id, document=payload.file_id)
        if kind is PayloadKind.PHOTO:
            return await self.bot.send_photo(chat_id=chat_id, photo=payload.largest_variant().file_id)
        if kind is PayloadKind.AUDIO:
            return await self.bot.send_audio(chat_id=chat_id, audio=payload.file_id)
        if kind is PayloadKind.VIDEO:
            return await self.bot.send_video(chat_id=chat_id, video=payload.file_id)
        if kind is PayloadKind.VOICE:
            return await self.bot.send_voice(chat_id=chat_id, voice=payload.file_id)
        raise ValueError(f"Cannot deliver {kind.value} payloads")

    async def retract(self, user_id: int, handle: int) -> None:
        await self.bot.delete_message(chat_id=user_id, message_id=handle)
