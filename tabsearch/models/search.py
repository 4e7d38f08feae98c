"""Match and search result models produced by the ranking engine."""

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from tabsearch.models.record import TabRecord


class MatchKind(str, Enum):
    """Strategy that produced a field match."""

    EXACT = "exact"
    PREFIX = "prefix"
    SUBSTRING = "substring"
    FUZZY = "fuzzy"


class MatchedField(str, Enum):
    """Record field a result was matched on."""

    TITLE = "title"
    URL = "url"


class SearchTier(str, Enum):
    """Search pass that produced a result."""

    TABS_URL = "tabs-url"
    TABS_TITLE = "tabs-title"
    HISTORY_URL = "history-url"
    HISTORY_TITLE = "history-title"


@dataclass
class MatchResult:
    """Score and highlight positions for one field scored against one query.

    Attributes:
        score: Match score (higher is better)
        positions: Strictly ascending character indices into the field
        kind: Strategy that produced the match
    """

    score: float
    positions: list[int] = field(default_factory=list)
    kind: MatchKind = MatchKind.FUZZY


class MatchHighlight(BaseModel):
    """Matched field text with the character positions to highlight."""

    model_config = ConfigDict(frozen=True)

    text: str
    positions: list[int] = Field(default_factory=list)

    def segments(self) -> list[tuple[str, bool]]:
        """Split the text into runs of highlighted and plain characters.

        Returns:
            List of (chunk, matched) tuples covering the whole text in order
        """
        marked = set(self.positions)
        segments: list[tuple[str, bool]] = []
        start = 0
        for i in range(1, len(self.text) + 1):
            if i == len(self.text) or (i in marked) != (start in marked):
                segments.append((self.text[start:i], start in marked))
                start = i
        return segments


class SearchResult(BaseModel):
    """One ranked record from the winning search pass."""

    model_config = ConfigDict(frozen=True)

    item: TabRecord
    score: float
    matched_field: MatchedField
    search_tier: SearchTier
    highlight: MatchHighlight
