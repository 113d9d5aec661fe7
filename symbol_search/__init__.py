"""
Symbol Search — query-time matching and ranking for developer symbol search

Single entry point for the symbol_search package:
- models/: Candidate, CandidateSource, MatchType, ScoredResult, SearchConfig
- stages/: matching (classify), ranking (rank_one, merge_results), orchestrator (search_sources)
"""

from .models import (
    DEFAULT_CONFIG,
    Candidate,
    CandidateSource,
    MatchScore,
    MatchType,
    ScoredResult,
    SearchConfig,
    SearchSummary,
    SourceKind,
    ensure_candidates,
    resolve_config,
)
from .stages import (
    classify,
    merge_results,
    rank_documentation,
    rank_one,
    search,
    search_sources,
    summarize_match_types,
)

__version__ = "1.0.0"

__all__ = [
    "Candidate",
    "CandidateSource",
    "DEFAULT_CONFIG",
    "MatchScore",
    "MatchType",
    "ScoredResult",
    "SearchConfig",
    "SearchSummary",
    "SourceKind",
    "classify",
    "ensure_candidates",
    "merge_results",
    "rank_documentation",
    "rank_one",
    "resolve_config",
    "search",
    "search_sources",
    "summarize_match_types",
]
