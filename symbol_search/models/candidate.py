"""
Candidate model — typed representation of one searchable named item.

Candidates are built by whatever collaborator enumerated them (symbol graph
extraction, documentation fetch) and handed to the ranking stages as plain records.
Built from dicts via Candidate.model_validate(d).
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Candidate(BaseModel):
    """
    One named thing to search over.

    Only name is required; the rest is carried through to results for display.
    source is used as the result's label only when the ranking call is given
    an empty source label.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    fully_qualified_name: Optional[str] = None
    description: Optional[str] = None
    declaration: Optional[str] = None
    source: str = ""
    category: Optional[str] = None


class SourceKind(str, Enum):
    """How a source's candidates are scored."""

    # Name, then fully-qualified name, then description; name hits are boosted.
    SYMBOLS = "symbols"
    # Title only, no boost (remote documentation listings).
    DOCUMENTATION = "documentation"


class CandidateSource(BaseModel):
    """A labelled candidate collection scanned as one unit."""

    label: str
    kind: SourceKind = SourceKind.SYMBOLS
    primary: bool = False
    max_results: Optional[int] = Field(default=None, ge=0)
    candidates: List[Candidate] = Field(default_factory=list)


def ensure_candidates(
    candidates: List[Union[Dict[str, Any], "Candidate"]],
) -> List["Candidate"]:
    """Convert list of dicts or Candidates to list of Candidate models."""
    return [
        Candidate.model_validate(c) if isinstance(c, dict) else c
        for c in candidates
    ]


def ensure_sources(
    sources: List[Union[Dict[str, Any], "CandidateSource"]],
) -> List["CandidateSource"]:
    """Convert list of dicts or CandidateSources to CandidateSource models."""
    return [
        CandidateSource.model_validate(s) if isinstance(s, dict) else s
        for s in sources
    ]
