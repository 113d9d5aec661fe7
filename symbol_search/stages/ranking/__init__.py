"""
Ranking: per-source scan and cross-source merge.

Public API: rank_one, rank_documentation, merge_results, summarize_match_types.
- core: candidate scoring and per-source ranking.
- Submodules: ordering (shared sort key), merge.
"""

from .core import rank_documentation, rank_one, score_candidate
from .merge import merge_results, summarize_match_types
from .ordering import result_sort_key

__all__ = [
    "rank_one",
    "rank_documentation",
    "score_candidate",
    "merge_results",
    "summarize_match_types",
    "result_sort_key",
]
