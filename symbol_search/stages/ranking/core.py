"""
Per-source ranking: score every candidate in one collection, sort, truncate.

rank_one is the symbol path (name, then fully-qualified name, then description,
with name hits boosted). rank_documentation is the documentation-listing path
(title only, no boost).
"""

import logging
from typing import List, Optional

from ...models.candidate import Candidate
from ...models.config import DEFAULT_CONFIG
from ...models.scoring import MatchScore, MatchType, ScoredResult
from ..matching import classify
from .ordering import sort_and_truncate

logger = logging.getLogger(__name__)

DESCRIPTION_SCORE = 0.3


def score_candidate(
    query: str,
    candidate: Candidate,
    name_match_boost: float = DEFAULT_CONFIG.name_match_boost,
) -> Optional[MatchScore]:
    """
    Score one candidate: name (boosted), else fully-qualified name, else description.

    Returns None when nothing matches.
    """
    name_score = classify(query, candidate.name)
    if name_score is not None:
        return MatchScore(
            score=name_score.score * name_match_boost,
            match_type=name_score.match_type,
        )

    if candidate.fully_qualified_name is not None:
        fqn_score = classify(query, candidate.fully_qualified_name)
        if fqn_score is not None:
            return fqn_score

    if candidate.description and query.lower() in candidate.description.lower():
        return MatchScore(score=DESCRIPTION_SCORE, match_type=MatchType.DESCRIPTION)

    return None


def build_scored_result(
    candidate: Candidate,
    match: MatchScore,
    source_label: str,
) -> ScoredResult:
    """Copy the candidate's display fields forward with its score.

    The result is labelled with source_label, or the candidate's own source when
    source_label is empty.
    """
    return ScoredResult(
        name=candidate.name,
        fully_qualified_name=candidate.fully_qualified_name,
        category=candidate.category,
        source=source_label or candidate.source,
        description=candidate.description,
        declaration=candidate.declaration,
        score=match.score,
        match_type=match.match_type,
    )


def rank_one(
    query: str,
    candidates: List[Candidate],
    source_label: str,
    max_results: int = DEFAULT_CONFIG.primary_max_results,
    name_match_boost: float = DEFAULT_CONFIG.name_match_boost,
) -> List[ScoredResult]:
    """
    Rank one candidate collection against query.

    Non-matches are dropped; survivors are sorted by score (desc) then name
    length (asc) and truncated to max_results.
    """
    scored: List[ScoredResult] = []
    for candidate in candidates:
        match = score_candidate(query, candidate, name_match_boost)
        if match is not None:
            scored.append(build_scored_result(candidate, match, source_label))

    ranked = sort_and_truncate(scored, max_results)
    logger.debug(
        "[rank] source=%s candidates=%d matched=%d kept=%d",
        source_label, len(candidates), len(scored), len(ranked),
    )
    return ranked


def rank_documentation(
    query: str,
    entries: List[Candidate],
    source_label: str,
    max_results: int = DEFAULT_CONFIG.secondary_max_results,
) -> List[ScoredResult]:
    """
    Rank documentation entries by title only.

    No name boost and no fully-qualified-name or description fallback, so
    documentation hits stay on the un-boosted scale.
    """
    scored: List[ScoredResult] = []
    for entry in entries:
        match = classify(query, entry.name)
        if match is not None:
            scored.append(build_scored_result(entry, match, source_label))

    ranked = sort_and_truncate(scored, max_results)
    logger.debug(
        "[rank_docs] source=%s entries=%d matched=%d kept=%d",
        source_label, len(entries), len(scored), len(ranked),
    )
    return ranked
