"""
Match ladder: classify a query against one target string.

Rules are tried in priority order and the first one that fires decides the
match type and score. Several rules can hold for the same pair; only the
first in order is reported.

    exact         1.0
    prefix        0.90 + coverage * 0.09     [0.90, 0.99]
    camelCase     0.85
    contains      0.60 + coverage * 0.20     [0.60, 0.80]
    wordBoundary  0.70
    fuzzy         similarity * 0.5           (0.30, 0.50], similarity > 0.6
    subsequence   0.40 + coverage * 0.10     [0.40, 0.50]
"""

from typing import Optional

from ...models.scoring import MatchScore, MatchType
from .edit_distance import edit_similarity
from .rules import (
    coverage,
    is_subsequence,
    matches_camel_case_prefix,
    matches_word_boundary,
)

EXACT_SCORE = 1.0
PREFIX_BASE, PREFIX_SPAN = 0.9, 0.09
CAMEL_CASE_SCORE = 0.85
CONTAINS_BASE, CONTAINS_SPAN = 0.6, 0.2
WORD_BOUNDARY_SCORE = 0.7
FUZZY_MIN_SIMILARITY = 0.6
FUZZY_WEIGHT = 0.5
SUBSEQUENCE_BASE, SUBSEQUENCE_SPAN = 0.4, 0.1


def classify(query: str, target: str) -> Optional[MatchScore]:
    """
    Classify how query matches target, case-insensitively.

    Returns None when no rule fires. An empty query is a prefix of every
    non-empty target and scores 0.90.
    """
    q = query.lower()
    t = target.lower()

    if t == q:
        return MatchScore(score=EXACT_SCORE, match_type=MatchType.EXACT)

    if t.startswith(q):
        return MatchScore(
            score=PREFIX_BASE + coverage(q, t) * PREFIX_SPAN,
            match_type=MatchType.PREFIX,
        )

    # Initials come from the original casing
    if matches_camel_case_prefix(query, target):
        return MatchScore(score=CAMEL_CASE_SCORE, match_type=MatchType.CAMEL_CASE)

    if q in t:
        return MatchScore(
            score=CONTAINS_BASE + coverage(q, t) * CONTAINS_SPAN,
            match_type=MatchType.CONTAINS,
        )

    if matches_word_boundary(q, t):
        return MatchScore(score=WORD_BOUNDARY_SCORE, match_type=MatchType.WORD_BOUNDARY)

    similarity = edit_similarity(q, t)
    if similarity > FUZZY_MIN_SIMILARITY:
        return MatchScore(score=similarity * FUZZY_WEIGHT, match_type=MatchType.FUZZY)

    if is_subsequence(q, t):
        return MatchScore(
            score=SUBSEQUENCE_BASE + coverage(q, t) * SUBSEQUENCE_SPAN,
            match_type=MatchType.SUBSEQUENCE,
        )

    return None
