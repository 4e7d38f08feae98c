"""Record models for tab-like entries and their upstream sources."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RecordTier(str, Enum):
    """Recency tier a record is searched in."""

    ACTIVE = "active"
    HISTORY = "history"


class TabRecord(BaseModel):
    """A searchable tab-like record.

    Records are owned by the caller; the search engine never mutates them.
    ``last_accessed`` is a millisecond timestamp. ``is_history_tab`` is an
    optional explicit tier flag; when it is None the tier is derived from
    ``last_accessed``.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: str = ""
    url: str = ""
    last_accessed: float = Field(description="Last access time in ms since the epoch")
    window_id: int = Field(default=-1, description="Owning window, -1 for history entries")
    active: bool = False
    fav_icon_url: str | None = None
    is_history_tab: bool | None = None


class BrowserTab(BaseModel):
    """Snapshot of an open tab as reported by the host."""

    id: int
    title: str = ""
    url: str = ""
    window_id: int
    active: bool = False
    last_accessed: float | None = None
    fav_icon_url: str | None = None


class HistoryEntry(BaseModel):
    """Snapshot of a browsing history item as reported by the host."""

    url: str = ""
    title: str = ""
    last_visit_time: float | None = None
