"""Data models for symbol search ranking."""

from .candidate import (
    Candidate,
    CandidateSource,
    SourceKind,
    ensure_candidates,
    ensure_sources,
)
from .config import DEFAULT_CONFIG, SearchConfig, resolve_config
from .scoring import MatchScore, MatchType, ScoredResult, SearchSummary

__all__ = [
    "DEFAULT_CONFIG",
    "Candidate",
    "CandidateSource",
    "MatchScore",
    "MatchType",
    "ScoredResult",
    "SearchConfig",
    "SearchSummary",
    "SourceKind",
    "ensure_candidates",
    "ensure_sources",
    "resolve_config",
]
