"""Root and health endpoints."""

from fastapi import APIRouter

from symbol_search import MatchType, __version__

from ..state import get_state

router = APIRouter()


@router.get("/")
def root():
    return {
        "name": "Symbol Search API",
        "version": __version__,
        "match_types": [m.value for m in MatchType],
        "endpoints": {
            "search": ["/api/search"],
            "health": ["/api/health"],
        },
    }


@router.get("/api/health")
def health():
    config = get_state().search_config
    return {
        "status": "healthy",
        "limits": {
            "primary": config.primary_max_results,
            "secondary": config.secondary_max_results,
            "merge": config.merge_max_results,
        },
        "max_workers": config.max_workers,
    }
