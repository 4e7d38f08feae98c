"""Tiered search over open tabs and browsing history."""

import logging
from collections.abc import Sequence

from tabsearch.models.record import TabRecord
from tabsearch.models.search import MatchedField, MatchHighlight, SearchResult, SearchTier
from tabsearch.search.classifier import HISTORY_THRESHOLD_MS, partition_records
from tabsearch.search.recency import recency_bonus
from tabsearch.search.scoring import score_field

logger = logging.getLogger(__name__)


class TieredSearchEngine:
    """Search records pass by pass, stopping at the first pass with matches.

    Passes run in a fixed priority order: active records by URL, active
    records by title, history records by URL, history records by title.
    Later passes only run when every earlier pass matched nothing. Within
    a pass results are sorted by descending score; ties keep input order.
    """

    PASSES = (
        (False, MatchedField.URL, SearchTier.TABS_URL),
        (False, MatchedField.TITLE, SearchTier.TABS_TITLE),
        (True, MatchedField.URL, SearchTier.HISTORY_URL),
        (True, MatchedField.TITLE, SearchTier.HISTORY_TITLE),
    )

    def __init__(
        self,
        history_threshold_ms: float = HISTORY_THRESHOLD_MS,
        enable_recency_bonus: bool = False,
        recency_max_bonus: float = 50.0,
        recency_min_bonus: float = 5.0,
        recency_full_bonus_minutes: float = 5.0,
        recency_decay_minutes: float = 60.0,
    ):
        """Initialize tiered search engine.

        Args:
            history_threshold_ms: Age beyond which unflagged records are history
            enable_recency_bonus: Add a recency bonus to scores within a pass
            recency_max_bonus: Bonus for the most recently accessed records
            recency_min_bonus: Bonus floor for older records
            recency_full_bonus_minutes: Window that receives the full bonus
            recency_decay_minutes: Age at which the linear decay reaches zero
        """
        self.history_threshold_ms = history_threshold_ms
        self.enable_recency_bonus = enable_recency_bonus
        self.recency_max_bonus = recency_max_bonus
        self.recency_min_bonus = recency_min_bonus
        self.recency_full_bonus_minutes = recency_full_bonus_minutes
        self.recency_decay_minutes = recency_decay_minutes

    def search(
        self,
        records: Sequence[TabRecord],
        query: str,
        now: float,
    ) -> list[SearchResult]:
        """Rank records against a query.

        Args:
            records: Records to search
            query: User-typed query
            now: Reference time in ms used for tiering and recency

        Returns:
            Results of the first pass that matched anything, best first.
            A blank query returns every active record unranked.
        """
        active, history = partition_records(records, now, self.history_threshold_ms)

        query = query.strip()
        if not query:
            return [
                SearchResult(
                    item=record,
                    score=0,
                    matched_field=MatchedField.TITLE,
                    search_tier=SearchTier.TABS_TITLE,
                    highlight=MatchHighlight(text=record.title),
                )
                for record in active
            ]

        for is_history, field, tier in self.PASSES:
            candidates = history if is_history else active
            results = self._run_pass(candidates, query, field, tier, now)
            logger.debug(
                f"Pass {tier.value}: {len(results)}/{len(candidates)} records matched"
            )
            if results:
                return results

        return []

    def _run_pass(
        self,
        candidates: Sequence[TabRecord],
        query: str,
        field: MatchedField,
        tier: SearchTier,
        now: float,
    ) -> list[SearchResult]:
        """Score every candidate on one field and sort the matches."""
        results = []
        for record in candidates:
            text = record.url if field is MatchedField.URL else record.title
            match = score_field(text, query)
            if match is None:
                continue

            score = match.score
            if self.enable_recency_bonus:
                score += recency_bonus(
                    record.last_accessed,
                    now,
                    max_bonus=self.recency_max_bonus,
                    min_bonus=self.recency_min_bonus,
                    full_bonus_minutes=self.recency_full_bonus_minutes,
                    decay_minutes=self.recency_decay_minutes,
                )

            results.append(
                SearchResult(
                    item=record,
                    score=score,
                    matched_field=field,
                    search_tier=tier,
                    highlight=MatchHighlight(text=text, positions=match.positions),
                )
            )

        results.sort(key=lambda r: r.score, reverse=True)
        return results


def search(
    records: Sequence[TabRecord],
    query: str,
    now: float,
) -> list[SearchResult]:
    """Search records with the default engine configuration."""
    return TieredSearchEngine().search(records, query, now)
