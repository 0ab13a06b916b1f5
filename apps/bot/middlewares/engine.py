"""Engine middleware for bot handlers."""

from collections.abc import Awaitable, Callable
from typing import Any

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject

from engine import ActionDispatcher


class EngineMiddleware(BaseMiddleware):
    """Middleware to inject the chat engine into handlers."""

    def __init__(self, engine: ActionDispatcher) -> None:
        self.engine = engine
        super().__init__()

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        """Inject chat engine."""
        data["engine"] = self.engine
        return await handler(event, data)
