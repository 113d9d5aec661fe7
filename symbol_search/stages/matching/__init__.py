"""
Match classification: one query against one target string.

Public API: classify.
- ladder: the priority-ordered rules and their score bands.
- Submodules: rules (string predicates), edit_distance (Levenshtein).
"""

from .edit_distance import edit_similarity, levenshtein_distance
from .ladder import classify

__all__ = [
    "classify",
    "edit_similarity",
    "levenshtein_distance",
]
