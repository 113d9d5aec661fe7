"""
Search orchestrator — ranks every candidate source, then merges them into one list.

The main entry point is search_sources. Each source is ranked independently
(symbols through rank_one, documentation through rank_documentation), on a
thread pool when there is more than one source. Per-source lists are collected
in source order, so the merged output is the same as a sequential run.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Tuple, Union

from ..models.candidate import CandidateSource, SourceKind, ensure_sources
from ..models.config import SearchConfig, resolve_config
from ..models.scoring import ScoredResult, SearchSummary
from .ranking import merge_results, rank_documentation, rank_one, summarize_match_types

logger = logging.getLogger(__name__)


def _source_limit(source: CandidateSource, config: SearchConfig) -> int:
    """Explicit per-source limit, else the primary/secondary default."""
    if source.max_results is not None:
        return source.max_results
    return config.max_results_for(source.primary)


def _rank_source(
    query: str,
    source: CandidateSource,
    config: SearchConfig,
) -> List[ScoredResult]:
    """Rank one source with the scan that matches its kind."""
    limit = _source_limit(source, config)
    if source.kind == SourceKind.DOCUMENTATION:
        return rank_documentation(query, source.candidates, source.label, limit)
    return rank_one(
        query,
        source.candidates,
        source.label,
        limit,
        name_match_boost=config.name_match_boost,
    )


def _rank_all(
    query: str,
    sources: List[CandidateSource],
    config: SearchConfig,
) -> List[List[ScoredResult]]:
    """Rank every source; results are in source order."""
    if len(sources) <= 1 or config.max_workers <= 1:
        return [_rank_source(query, source, config) for source in sources]

    workers = min(config.max_workers, len(sources))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(lambda source: _rank_source(query, source, config), sources))


def search_sources(
    query: str,
    sources: List[Union[Dict[str, Any], CandidateSource]],
    config: Optional[SearchConfig] = None,
    max_results: Optional[int] = None,
) -> List[ScoredResult]:
    """
    Rank each source and merge into one list.

    max_results overrides config.merge_max_results for this call.
    """
    config = resolve_config(config)
    sources_typed = ensure_sources(sources)

    result_sets = _rank_all(query, sources_typed, config)
    limit = max_results if max_results is not None else config.merge_max_results
    merged = merge_results(result_sets, limit)

    logger.info(
        "[search] query=%r sources=%d per_source=%s merged=%d",
        query, len(sources_typed), [len(r) for r in result_sets], len(merged),
    )
    return merged


def search(
    query: str,
    sources: List[Union[Dict[str, Any], CandidateSource]],
    config: Optional[SearchConfig] = None,
    max_results: Optional[int] = None,
) -> Tuple[List[ScoredResult], SearchSummary]:
    """
    Run search_sources and summarize the result by match type.

    Returns:
        results: merged ScoredResults, best first
        summary: per-match-type counts and a one-line description
    """
    results = search_sources(query, sources, config, max_results)
    return results, summarize_match_types(results, query)
