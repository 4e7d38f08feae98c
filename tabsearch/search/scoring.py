"""Field scoring for tab search.

Scores one text field against one query and reports which characters
justify the match. Strategies are tried in order and the first one that
applies wins outright:

1. exact match (case-insensitive)
2. prefix match
3. contiguous substring, for queries of three or more characters
4. a left-to-right fuzzy scan with positional bonuses, gap penalties and
   quality gates that reject sparse or scattered subsequence matches
"""

import logging

from tabsearch.models.search import MatchKind, MatchResult

logger = logging.getLogger(__name__)

SEPARATORS = frozenset("/\\-_. :,;|()[]{}")

# Strategy weights, per query character
EXACT_BONUS = 100
PREFIX_BONUS = 50
SUBSTRING_SCORE = 20
WORD_BOUNDARY_BONUS = 8
MIN_SUBSTRING_LENGTH = 3

# Fuzzy scan weights, per matched character
BASE_SCORE = 1
CONSECUTIVE_BONUS = 5
GAP_PENALTY = 0.5
FIRST_CHAR_BONUS = 8
SEPARATOR_BONUS = 4
CAMEL_CASE_BONUS = 2
CASE_MATCH_BONUS = 1
RUN_BONUS = 3

# Quality gates
MIN_SCORE_PER_CHAR = 2
MAX_SPAN_RATIO = 8
MAX_AVERAGE_GAP = 15


def fold_case(text: str) -> str:
    """Lowercase text one character at a time.

    A character whose lowercase form expands to several code points keeps
    only the first one, so indices into the result line up with the input.
    """
    return "".join(ch.lower()[0] for ch in text)


def score_field(text: str, query: str) -> MatchResult | None:
    """Score a single field against a query.

    Args:
        text: Field text (title or URL), may be empty
        query: Trimmed, non-empty query

    Returns:
        MatchResult with score and highlight positions, or None when the
        field does not match
    """
    if not text or not query:
        return None

    text_lower = fold_case(text)
    query_lower = fold_case(query)
    n = len(query)

    if text_lower == query_lower:
        return MatchResult(
            score=WORD_BOUNDARY_BONUS * n + EXACT_BONUS * n,
            positions=list(range(n)),
            kind=MatchKind.EXACT,
        )

    if text_lower.startswith(query_lower):
        return MatchResult(
            score=WORD_BOUNDARY_BONUS * n + PREFIX_BONUS * n,
            positions=list(range(n)),
            kind=MatchKind.PREFIX,
        )

    if n >= MIN_SUBSTRING_LENGTH:
        start = text_lower.find(query_lower)
        if start >= 0:
            score = SUBSTRING_SCORE * n
            if start == 0 or text[start - 1] in SEPARATORS:
                score += WORD_BOUNDARY_BONUS * n
            return MatchResult(
                score=score,
                positions=list(range(start, start + n)),
                kind=MatchKind.SUBSTRING,
            )

    return _fuzzy_scan(text, text_lower, query, query_lower)


def _position_bonus(text: str, index: int) -> int:
    """Bonus for matching at the start of the field or of a word."""
    if index == 0:
        return FIRST_CHAR_BONUS

    prev, curr = text[index - 1], text[index]
    if prev in SEPARATORS:
        return SEPARATOR_BONUS
    if (prev.islower() and curr.isupper()) or (prev.isdigit() and not curr.isdigit()):
        return CAMEL_CASE_BONUS
    return 0


def _fuzzy_scan(
    text: str,
    text_lower: str,
    query: str,
    query_lower: str,
) -> MatchResult | None:
    """Greedy subsequence scan with positional scoring and quality gates."""
    n = len(query)
    positions: list[int] = []
    score = 0.0
    qi = 0

    for ti, ch in enumerate(text_lower):
        if qi == n:
            break
        if ch != query_lower[qi]:
            continue

        char_score = BASE_SCORE
        if positions:
            gap = ti - positions[-1] - 1
            if gap == 0:
                char_score += CONSECUTIVE_BONUS
            else:
                char_score -= GAP_PENALTY * gap

        char_score += _position_bonus(text, ti)

        if text[ti] == query[qi]:
            char_score += CASE_MATCH_BONUS

        score += char_score
        positions.append(ti)
        qi += 1

    if qi < n:
        return None

    if score < MIN_SCORE_PER_CHAR * n:
        logger.debug(f"Rejected '{query}': score {score} below density gate")
        return None

    span = positions[-1] - positions[0] + 1
    if span / n > MAX_SPAN_RATIO:
        logger.debug(f"Rejected '{query}': span {span} too wide")
        return None

    gaps = [b - a - 1 for a, b in zip(positions, positions[1:])]
    if gaps and sum(gaps) / len(gaps) > MAX_AVERAGE_GAP:
        logger.debug(f"Rejected '{query}': average gap too large")
        return None

    longest_run = run = 1
    for gap in gaps:
        run = run + 1 if gap == 0 else 1
        longest_run = max(longest_run, run)

    return MatchResult(
        score=score + RUN_BONUS * longest_run,
        positions=positions,
        kind=MatchKind.FUZZY,
    )
