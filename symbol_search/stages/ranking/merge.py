"""
Cross-source merge: combine per-source ranked lists into one bounded list.

Score bands are shared across sources, so results from local symbols and
remote documentation are compared directly.
"""

import logging
from itertools import chain
from typing import Dict, List

from ...models.config import DEFAULT_CONFIG
from ...models.scoring import MatchType, ScoredResult, SearchSummary
from .ordering import sort_and_truncate

logger = logging.getLogger(__name__)


def merge_results(
    result_sets: List[List[ScoredResult]],
    max_results: int = DEFAULT_CONFIG.merge_max_results,
) -> List[ScoredResult]:
    """Concatenate result_sets in order, re-sort, and keep the first max_results."""
    combined = list(chain.from_iterable(result_sets))
    merged = sort_and_truncate(combined, max_results)
    if len(merged) < len(combined):
        logger.debug("[merge] truncated %d results to %d", len(combined), len(merged))
    return merged


def summarize_match_types(results: List[ScoredResult], query: str = "") -> SearchSummary:
    """Count results per match type (priority order) with a one-line description."""
    counts: Dict[str, int] = {}
    for match_type in MatchType:
        n = sum(1 for r in results if r.match_type == match_type)
        if n:
            counts[match_type.value] = n

    if not results:
        text = f"No symbols found matching: {query}"
    else:
        breakdown = ", ".join(f"{n} {name}" for name, n in counts.items())
        text = f"Found {len(results)} matching symbols ({breakdown})"
    return SearchSummary(total=len(results), match_types=counts, text=text)
