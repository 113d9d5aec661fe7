"""Symbol search endpoint."""

from fastapi import APIRouter, HTTPException

from symbol_search import CandidateSource, search

from ..models import SearchRequest, SearchResponse
from ..state import get_state

router = APIRouter()


def _log_search(msg: str) -> None:
    """Log to stdout with flush so Docker/capture shows it immediately."""
    print(f"[search] {msg}", flush=True)


@router.post("", response_model=SearchResponse)
def search_symbols(request: SearchRequest):
    """Rank the supplied candidate sources against the query and merge them into one list."""
    if request.max_results is not None and request.max_results < 0:
        raise HTTPException(status_code=400, detail="max_results must be >= 0")

    state = get_state()
    sources = [
        CandidateSource(
            label=s.label,
            kind=s.kind,
            primary=s.primary,
            max_results=s.max_results,
            candidates=s.candidates,
        )
        for s in request.sources
    ]
    _log_search(
        f"query={request.query!r} sources={len(sources)} "
        f"candidates={sum(len(s.candidates) for s in sources)}"
    )

    results, summary = search(
        request.query,
        sources,
        config=state.search_config,
        max_results=request.max_results,
    )
    _log_search(summary.text)

    return SearchResponse(
        query=request.query,
        results=results,
        total=summary.total,
        match_types=summary.match_types,
        summary=summary.text,
    )
