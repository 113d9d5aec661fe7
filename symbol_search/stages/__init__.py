"""Pipeline stages: match classification, per-source ranking, cross-source orchestration."""

from .matching import classify
from .orchestrator import search, search_sources
from .ranking import merge_results, rank_documentation, rank_one, summarize_match_types

__all__ = [
    "classify",
    "rank_one",
    "rank_documentation",
    "merge_results",
    "summarize_match_types",
    "search_sources",
    "search",
]
