"""Matchmaking, session relay and moderation engine."""

import time
from collections.abc import Callable

from engine.blocks import PERMANENT_BLOCK, BlockRegistry
from engine.dispatcher import ActionDispatcher
from engine.history import HistoryTracker
from engine.matchmaker import Matchmaker
from engine.notifier import DEFAULT_WEB_APP_URL, Notifier
from engine.relay import RelayEngine
from engine.reports import BLOCK_THRESHOLDS, ReportLedger, block_duration
from engine.sessions import SessionRegistry
from engine.store import ChatStore
from engine.transport import Transport


def build_engine(
    transport: Transport,
    clock: Callable[[], float] = time.time,
    web_app_url: str = DEFAULT_WEB_APP_URL,
) -> ActionDispatcher:
    """Wire a fresh store and all components around ``transport``."""
    store = ChatStore(clock=clock)
    history = HistoryTracker(store, transport)
    notifier = Notifier(transport, history, web_app_url=web_app_url)
    blocks = BlockRegistry(store)
    sessions = SessionRegistry(store, notifier)
    ledger = ReportLedger(store, blocks)
    matchmaker = Matchmaker(store, blocks, history, sessions, notifier)
    relay = RelayEngine(sessions, history, transport)
    return ActionDispatcher(store, matchmaker, sessions, ledger, relay, notifier)


__all__ = [
    "build_engine",
    "ActionDispatcher",
    "BlockRegistry",
    "ChatStore",
    "HistoryTracker",
    "Matchmaker",
    "Notifier",
    "RelayEngine",
    "ReportLedger",
    "SessionRegistry",
    "Transport",
    "BLOCK_THRESHOLDS",
    "PERMANENT_BLOCK",
    "block_duration",
]
