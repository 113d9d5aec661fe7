"""Request/response models for the search endpoint."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from symbol_search import Candidate, ScoredResult, SourceKind


class SourceRequest(BaseModel):
    label: str
    kind: SourceKind = SourceKind.SYMBOLS
    primary: bool = False
    max_results: Optional[int] = Field(default=None, ge=0)
    candidates: List[Candidate] = []


class SearchRequest(BaseModel):
    query: str
    sources: List[SourceRequest] = []
    max_results: Optional[int] = None


class SearchResponse(BaseModel):
    query: str
    results: List[ScoredResult]
    total: int
    match_types: Dict[str, int] = {}
    summary: str
