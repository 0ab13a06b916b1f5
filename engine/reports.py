"""Report tally and the blocking policy derived from it."""

import logging
from datetime import timedelta

from core.metrics import blocks_total, reports_total
from engine.blocks import BlockRegistry
from engine.store import ChatStore
from models import FOREVER, BlockOutcome

logger = logging.getLogger(__name__)

# (minimum cumulative reports, block term), highest threshold first
BLOCK_THRESHOLDS: tuple[tuple[int, timedelta], ...] = (
    (30, FOREVER),
    (20, timedelta(hours=24)),
    (10, timedelta(minutes=30)),
    (3, timedelta(minutes=5)),
)


def block_duration(reports: int) -> timedelta | None:
    """Block term for a cumulative report count, or None below the lowest threshold."""
    for threshold, duration in BLOCK_THRESHOLDS:
        if reports >= threshold:
            return duration
    return None


class ReportLedger:
    """Counts reports per user and applies blocks as thresholds are crossed."""

    def __init__(self, store: ChatStore, blocks: BlockRegistry) -> None:
        self.store = store
        self.blocks = blocks

    def report_user(self, user_id: int) -> BlockOutcome:
        """
        File one report against a user.

        Must be called inside ``store.transaction()``. The block term is
        re-derived from the new cumulative tally on every report.
        """
        reports = self.store.report_counts.get(user_id, 0) + 1
        self.store.report_counts[user_id] = reports
        reports_total.inc()

        duration = block_duration(reports)
        outcome = BlockOutcome(user_id=user_id, reports=reports, duration=duration)
        if duration is not None:
            self.blocks.block(user_id, duration)
            blocks_total.labels(term=outcome.describe()).inc()
            logger.info(f"User {user_id} blocked {outcome.describe()} after {reports} reports")
        else:
            logger.info(f"User {user_id} reported ({reports} total)")
        return outcome

    def reports_against(self, user_id: int) -> int:
        return self.store.report_counts.get(user_id, 0)
