# tests/test_sessions.py
import pytest

from engine import ActionDispatcher, ChatStore, HistoryTracker
from models import Action
from tests.conftest import FakeTransport, pair_users


@pytest.mark.asyncio
async def test_end_session_without_partner_is_noop(
    engine: ActionDispatcher, store: ChatStore, transport: FakeTransport
) -> None:
    await engine.matchmaker.find_partner(1)
    transport.reset()

    assert await engine.sessions.end_session(1) is None
    assert await engine.sessions.end_session(77) is None

    assert transport.sent == []
    assert store.waiting == {1}


@pytest.mark.asyncio
async def test_end_session_removes_both_sides(
    engine: ActionDispatcher, store: ChatStore, transport: FakeTransport
) -> None:
    await pair_users(engine, 1, 2)
    transport.reset()

    assert await engine.sessions.end_session(1) == 2

    assert store.partners == {}
    (left,) = transport.payloads_for(1)
    (partner_left,) = transport.payloads_for(2)
    assert left.text == "🛑 You left the chat."
    assert [b.action for b in left.buttons] == [Action.FIND_AGAIN, Action.REPORT_PARTNER]
    assert partner_left.text == "⚠️ Your partner left the chat."
    assert [b.action for b in partner_left.buttons] == [Action.FIND_AGAIN, Action.REPORT_PARTNER]


@pytest.mark.asyncio
async def test_partner_always_gets_options(engine: ActionDispatcher, transport: FakeTransport) -> None:
    await pair_users(engine, 1, 2)
    transport.reset()

    await engine.sessions.end_session(2, notify_with_options=False)

    (left,) = transport.payloads_for(2)
    (partner_left,) = transport.payloads_for(1)
    assert left.buttons == ()
    assert len(partner_left.buttons) == 2


@pytest.mark.asyncio
async def test_passive_end_keeps_history(engine: ActionDispatcher, history: HistoryTracker) -> None:
    await pair_users(engine, 1, 2)
    before = history.handles(2)

    await engine.sessions.end_session(1)

    assert history.handles(2) == before


@pytest.mark.asyncio
async def test_pairing_with_self_is_rejected(engine: ActionDispatcher, store: ChatStore) -> None:
    async with store.transaction():
        with pytest.raises(ValueError):
            engine.sessions.pair(1, 1)
    assert store.partners == {}


@pytest.mark.asyncio
async def test_snapshot_counts_sessions_not_users(engine: ActionDispatcher, store: ChatStore) -> None:
    await pair_users(engine, 1, 2)
    await pair_users(engine, 3, 4)
    await engine.matchmaker.find_partner(5)

    assert store.snapshot() == {"waiting": 1, "sessions": 2, "blocked": 0}
