"""Search service wiring configuration into the tiered search engine."""

import time
from collections.abc import Sequence

from tabsearch.config import Settings, get_settings
from tabsearch.logging_config import get_logger
from tabsearch.models.query import DestinationResponse, SearchResponse
from tabsearch.models.record import TabRecord
from tabsearch.search.classifier import now_ms
from tabsearch.search.destination import build_search_destination, is_url
from tabsearch.search.tiered_search import TieredSearchEngine

logger = get_logger(__name__)


class SearchService:
    """Service handling tab search requests.

    Resolves the reference time, runs the tiered search and, when a
    non-blank query matches nothing, suggests where to navigate instead.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        engine: TieredSearchEngine | None = None,
    ):
        """Initialize search service.

        Args:
            settings: Application settings (global settings when omitted)
            engine: Search engine (built from settings when omitted)
        """
        self.settings = settings or get_settings()
        self.engine = engine or TieredSearchEngine(
            history_threshold_ms=self.settings.history_threshold_ms,
            enable_recency_bonus=self.settings.enable_recency_bonus,
            recency_max_bonus=self.settings.recency_max_bonus,
            recency_min_bonus=self.settings.recency_min_bonus,
            recency_full_bonus_minutes=self.settings.recency_full_bonus_minutes,
            recency_decay_minutes=self.settings.recency_decay_minutes,
        )

        logger.info(
            f"SearchService initialized: "
            f"history_threshold_hours={self.settings.history_threshold_hours}, "
            f"recency_bonus={self.settings.enable_recency_bonus}"
        )

    def search(
        self,
        records: Sequence[TabRecord],
        query: str,
        now: float | None = None,
    ) -> SearchResponse:
        """Search records and package the outcome.

        Args:
            records: Records to search
            query: User-typed query
            now: Reference time in ms (current time when omitted)

        Returns:
            SearchResponse with ranked results and an optional fallback destination
        """
        start_time = time.time()
        if now is None:
            now = now_ms()

        results = self.engine.search(records, query, now)

        destination = None
        if not results and query.strip():
            destination = self.destination(query).destination

        processing_time = time.time() - start_time
        logger.info(
            f"Search '{query}' over {len(records)} records: {len(results)} results "
            f"({results[0].search_tier.value if results else 'none'}) "
            f"in {processing_time * 1000:.2f}ms"
        )

        return SearchResponse(
            query=query,
            results=results,
            destination=destination,
            processing_time=processing_time,
        )

    def destination(self, query: str) -> DestinationResponse:
        """Resolve where to navigate for a query."""
        return DestinationResponse(
            query=query,
            is_url=is_url(query.strip()),
            destination=build_search_destination(query, self.settings.search_url_template),
        )
