# tests/conftest.py
from __future__ import annotations

import os
from itertools import count
from typing import Any

import pytest

os.environ.setdefault("TELEGRAM_BOT_TOKEN", "123456789:TEST-token-for-pytest")

from engine import ActionDispatcher, BlockRegistry, ChatStore, HistoryTracker, build_engine
from models import Payload


class FakeTransport:
    """Records deliveries and retractions; can be told to fail for given users or handles."""

    def __init__(self) -> None:
        self.sent: list[tuple[int, int, Payload]] = []
        self.retracted: list[tuple[int, int]] = []
        self.fail_deliver_to: set[int] = set()
        self.fail_retract: set[int] = set()
        self._handles = count(1)

    async def deliver(self, user_id: int, payload: Payload) -> int:
        if user_id in self.fail_deliver_to:
            raise RuntimeError("Forbidden: bot was blocked by the user")
        handle = next(self._handles)
        self.sent.append((user_id, handle, payload))
        return handle

    async def retract(self, user_id: int, handle: int) -> None:
        if handle in self.fail_retract:
            raise RuntimeError("Bad Request: message to delete not found")
        self.retracted.append((user_id, handle))

    def payloads_for(self, user_id: int) -> list[Payload]:
        return [payload for uid, _, payload in self.sent if uid == user_id]

    def texts_for(self, user_id: int) -> list[str]:
        return [p.text for p in self.payloads_for(user_id) if p.text is not None]

    def reset(self) -> None:
        self.sent.clear()
        self.retracted.clear()


class FakeClock:
    """Manually advanced epoch clock."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def engine(transport: FakeTransport, clock: FakeClock) -> ActionDispatcher:
    return build_engine(transport, clock=clock, web_app_url="https://example.test/chat")


@pytest.fixture()
def store(engine: ActionDispatcher) -> ChatStore:
    return engine.store


@pytest.fixture()
def blocks(engine: ActionDispatcher) -> BlockRegistry:
    return engine.matchmaker.blocks


@pytest.fixture()
def history(engine: ActionDispatcher) -> HistoryTracker:
    return engine.matchmaker.history


async def pair_users(engine: ActionDispatcher, user_a: int, user_b: int) -> None:
    """Queue ``user_a`` then match ``user_b`` against them."""
    await engine.find(user_a)
    await engine.find(user_b)
    assert engine.sessions.partner_of(user_a) == user_b


@pytest.fixture()
def bot_engine(engine: ActionDispatcher, monkeypatch: pytest.MonkeyPatch) -> ActionDispatcher:
    """Point the aiogram dispatcher's engine middlewares at the test engine."""
    from apps.bot.bot import dp
    from apps.bot.middlewares.engine import EngineMiddleware

    for observer in (dp.message, dp.callback_query):
        for middleware in observer.middleware:
            if isinstance(middleware, EngineMiddleware):
                monkeypatch.setattr(middleware, "engine", engine)
    return engine


@pytest.fixture()
def bot_api_calls(monkeypatch: pytest.MonkeyPatch) -> list[Any]:
    """Capture Bot API methods instead of sending them to Telegram."""
    from aiogram import Bot

    calls: list[Any] = []

    async def fake_call(self: Bot, method: Any, request_timeout: int | None = None) -> Any:
        calls.append(method)
        return True

    monkeypatch.setattr(Bot, "__call__", fake_call)
    return calls
