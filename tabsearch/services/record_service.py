"""Assembly of searchable records from open tabs and browsing history."""

from collections.abc import Sequence

from tabsearch.config import Settings, get_settings
from tabsearch.logging_config import get_logger
from tabsearch.models.record import BrowserTab, HistoryEntry, TabRecord
from tabsearch.search.classifier import now_ms

logger = get_logger(__name__)

# Spacing between synthesized access times of tabs the host reports without one
FALLBACK_ACCESS_STEP_MS = 1000


class RecordService:
    """Merges open tabs and history entries into one ordered record set.

    Open tabs always come first in the current window, then everything is
    ordered by last access, most recent first. History entries that are
    already open, have no URL, or fall outside the history window are
    dropped.
    """

    def __init__(self, settings: Settings | None = None):
        """Initialize record service.

        Args:
            settings: Application settings (global settings when omitted)
        """
        self.settings = settings or get_settings()

    def collect_records(
        self,
        tabs: Sequence[BrowserTab],
        history: Sequence[HistoryEntry],
        current_window_id: int,
        now: float | None = None,
    ) -> list[TabRecord]:
        """Build the record set for a search session.

        Args:
            tabs: Open tabs in host order
            history: History entries, most relevant first
            current_window_id: Window the user is searching from
            now: Reference time in ms (current time when omitted)

        Returns:
            Ordered list of records ready to be searched
        """
        if now is None:
            now = now_ms()

        current = [
            self._record_from_tab(tab, index, current_window_id, now)
            for index, tab in enumerate(tabs)
        ]
        past = self._records_from_history(history, current, now)

        records = current + past
        records.sort(
            key=lambda r: (r.window_id != current_window_id, -r.last_accessed)
        )

        logger.info(
            f"Collected {len(records)} records: {len(current)} open tabs, "
            f"{len(past)} history entries"
        )
        return records

    def _record_from_tab(
        self,
        tab: BrowserTab,
        index: int,
        current_window_id: int,
        now: float,
    ) -> TabRecord:
        """Convert an open tab, synthesizing an access time if missing."""
        if tab.last_accessed is not None:
            last_accessed = tab.last_accessed
        elif tab.active:
            last_accessed = now
        else:
            last_accessed = now - (index + 1) * FALLBACK_ACCESS_STEP_MS

        return TabRecord(
            id=tab.id,
            title=tab.title,
            url=tab.url,
            last_accessed=last_accessed,
            window_id=tab.window_id,
            active=tab.active and tab.window_id == current_window_id,
            fav_icon_url=tab.fav_icon_url,
            is_history_tab=False,
        )

    def _records_from_history(
        self,
        history: Sequence[HistoryEntry],
        current: Sequence[TabRecord],
        now: float,
    ) -> list[TabRecord]:
        """Convert history entries that are recent and not already open."""
        window_start = now - self.settings.history_threshold_ms
        open_urls = {record.url for record in current}

        entries = [
            entry
            for entry in history
            if entry.url
            and entry.url not in open_urls
            and (entry.last_visit_time is None or entry.last_visit_time >= window_start)
        ][: self.settings.max_history_records]

        return [
            TabRecord(
                id=-(index + 1),
                title=entry.title,
                url=entry.url,
                last_accessed=(
                    entry.last_visit_time
                    if entry.last_visit_time is not None
                    else window_start
                ),
                window_id=-1,
                active=False,
                is_history_tab=True,
            )
            for index, entry in enumerate(entries)
        ]
