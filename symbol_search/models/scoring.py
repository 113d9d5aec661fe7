"""
Scoring model — match types and scored results produced by the ranking stages.

Contains:
- MatchType: the closed set of match tags, listed in ladder order
- MatchScore: what the classifier returns for one (query, target) pair
- ScoredResult: a candidate's display fields plus its score and match type
- SearchSummary: per-match-type counts for a final result list
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict


class MatchType(str, Enum):
    """How a candidate matched. Declaration order is descending priority."""

    EXACT = "exact"
    PREFIX = "prefix"
    CAMEL_CASE = "camelCase"
    CONTAINS = "contains"
    WORD_BOUNDARY = "wordBoundary"
    FUZZY = "fuzzy"
    SUBSEQUENCE = "subsequence"
    DESCRIPTION = "description"

    @property
    def priority(self) -> int:
        """0 for exact, increasing toward description."""
        return list(MatchType).index(self)


class MatchScore(BaseModel):
    """Score and tag for a single (query, target) comparison."""

    model_config = ConfigDict(frozen=True)

    score: float
    match_type: MatchType


class ScoredResult(BaseModel):
    """A matched candidate with its score. Never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    name: str
    fully_qualified_name: Optional[str] = None
    category: Optional[str] = None
    source: str
    description: Optional[str] = None
    declaration: Optional[str] = None
    score: float
    match_type: MatchType


class SearchSummary(BaseModel):
    """Match-type breakdown of a final result list."""

    total: int
    match_types: Dict[str, int]
    text: str
