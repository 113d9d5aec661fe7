"""Pydantic request/response models for the API."""

from .search import SearchRequest, SearchResponse, SourceRequest

__all__ = [
    "SearchRequest",
    "SearchResponse",
    "SourceRequest",
]
