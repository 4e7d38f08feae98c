"""Recency tier classification for tab records."""

import time
from collections.abc import Iterable

from tabsearch.models.record import RecordTier, TabRecord

HISTORY_THRESHOLD_MS = 24 * 60 * 60 * 1000  # 24 hours


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def is_history_tab(
    last_accessed: float,
    now: float,
    threshold_ms: float = HISTORY_THRESHOLD_MS,
) -> bool:
    """Check whether a record last accessed at ``last_accessed`` is history.

    The boundary itself is not history, and future timestamps never are.
    """
    return now - last_accessed > threshold_ms


def record_tier(
    record: TabRecord,
    now: float,
    threshold_ms: float = HISTORY_THRESHOLD_MS,
) -> RecordTier:
    """Resolve the tier of a record, preferring its explicit flag."""
    if record.is_history_tab is not None:
        history = record.is_history_tab
    else:
        history = is_history_tab(record.last_accessed, now, threshold_ms)
    return RecordTier.HISTORY if history else RecordTier.ACTIVE


def partition_records(
    records: Iterable[TabRecord],
    now: float,
    threshold_ms: float = HISTORY_THRESHOLD_MS,
) -> tuple[list[TabRecord], list[TabRecord]]:
    """Split records into (active, history), preserving input order.

    Args:
        records: Records to classify
        now: Reference time in milliseconds
        threshold_ms: Age beyond which a record without a flag is history

    Returns:
        Tuple of (active records, history records)
    """
    active: list[TabRecord] = []
    history: list[TabRecord] = []
    for record in records:
        if record_tier(record, now, threshold_ms) is RecordTier.HISTORY:
            history.append(record)
        else:
            active.append(record)
    return active, history
