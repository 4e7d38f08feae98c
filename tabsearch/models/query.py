"""Request and response models for the search API."""

from pydantic import BaseModel, Field

from tabsearch.models.record import BrowserTab, HistoryEntry, TabRecord
from tabsearch.models.search import SearchResult


class SearchRequest(BaseModel):
    """Search request over a caller-supplied record set."""

    query: str = Field(default="", max_length=2048)
    records: list[TabRecord] = Field(default_factory=list)
    now: float | None = Field(
        default=None, description="Reference time in ms; server time when omitted"
    )


class SearchResponse(BaseModel):
    """Ranked results for a search request."""

    query: str
    results: list[SearchResult]
    destination: str | None = Field(
        default=None, description="Fallback navigation target when nothing matched"
    )
    processing_time: float = Field(ge=0.0, description="Processing time in seconds (non-negative)")


class DestinationResponse(BaseModel):
    """Navigation target for a free-text query."""

    query: str
    is_url: bool
    destination: str


class CollectRecordsRequest(BaseModel):
    """Open tabs and history entries to merge into one record set."""

    tabs: list[BrowserTab] = Field(default_factory=list)
    history: list[HistoryEntry] = Field(default_factory=list)
    current_window_id: int
    now: float | None = Field(
        default=None, description="Reference time in ms; server time when omitted"
    )
