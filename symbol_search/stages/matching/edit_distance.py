"""
Edit distance — Levenshtein distance and the normalized similarity used for fuzzy matches.
"""

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(s1: str, s2: str) -> int:
    """Minimum single-character insertions, deletions, or substitutions turning s1 into s2."""
    return Levenshtein.distance(s1, s2)


def edit_similarity(s1: str, s2: str) -> float:
    """1 - distance / longer length (1.0 for two empty strings)."""
    return Levenshtein.normalized_similarity(s1, s2)
