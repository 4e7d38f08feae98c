"""Tiered fuzzy search and ranking for tab-like records."""

from tabsearch.search.classifier import (
    HISTORY_THRESHOLD_MS,
    is_history_tab,
    now_ms,
    partition_records,
    record_tier,
)
from tabsearch.search.destination import build_search_destination, is_url
from tabsearch.search.recency import recency_bonus
from tabsearch.search.scoring import fold_case, score_field
from tabsearch.search.tiered_search import TieredSearchEngine, search

__all__ = [
    "HISTORY_THRESHOLD_MS",
    "TieredSearchEngine",
    "build_search_destination",
    "fold_case",
    "is_history_tab",
    "is_url",
    "now_ms",
    "partition_records",
    "recency_bonus",
    "record_tier",
    "score_field",
    "search",
]
