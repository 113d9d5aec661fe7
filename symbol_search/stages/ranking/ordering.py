"""
Result ordering shared by per-source ranking and the cross-source merge.

Order: score descending, then name length ascending. Python's sort is stable,
so results that tie on both keep their input order.
"""

from typing import Iterable, List, Tuple

from ...models.scoring import ScoredResult


def result_sort_key(result: ScoredResult) -> Tuple[float, int]:
    """Higher score first, then shorter names."""
    return (-result.score, len(result.name))


def sort_and_truncate(results: Iterable[ScoredResult], max_results: int) -> List[ScoredResult]:
    """Sort by result_sort_key and keep the first max_results (none when max_results <= 0)."""
    ordered = sorted(results, key=result_sort_key)
    return ordered[: max(max_results, 0)]
