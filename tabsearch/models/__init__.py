"""Pydantic models for the tab search engine."""

from tabsearch.models.error import ErrorResponse
from tabsearch.models.query import (
    CollectRecordsRequest,
    DestinationResponse,
    SearchRequest,
    SearchResponse,
)
from tabsearch.models.record import (
    BrowserTab,
    HistoryEntry,
    RecordTier,
    TabRecord,
)
from tabsearch.models.search import (
    MatchedField,
    MatchHighlight,
    MatchKind,
    MatchResult,
    SearchResult,
    SearchTier,
)

__all__ = [
    # Record models
    "TabRecord",
    "RecordTier",
    "BrowserTab",
    "HistoryEntry",
    # Search models
    "MatchKind",
    "MatchResult",
    "MatchHighlight",
    "MatchedField",
    "SearchTier",
    "SearchResult",
    # API models
    "SearchRequest",
    "SearchResponse",
    "DestinationResponse",
    "CollectRecordsRequest",
    # Error models
    "ErrorResponse",
]
