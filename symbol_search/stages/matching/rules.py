"""
Match predicates used by the ladder: coverage, camelCase initials, word boundaries, subsequence.

All helpers take already-lowered strings except camelCase, which needs the
target's original casing to find its initials.
"""

import re
from typing import List

_WORD_SPLIT = re.compile(r"[\W_]+")


def coverage(query: str, target: str) -> float:
    """Share of the target covered by the query (0 for an empty target)."""
    if not target:
        return 0.0
    return len(query) / len(target)


def camel_case_initials(target: str) -> str:
    """First character plus every later uppercase character, uppercased ("ViewModel" -> "VM")."""
    if not target:
        return ""
    return (target[0] + "".join(ch for ch in target[1:] if ch.isupper())).upper()


def matches_camel_case_prefix(query: str, target: str) -> bool:
    """True if the uppercased query is a prefix of the target's initials."""
    return camel_case_initials(target).startswith(query.upper())


def split_words(target: str) -> List[str]:
    """Split on any non-alphanumeric run, dropping empty pieces."""
    return [w for w in _WORD_SPLIT.split(target) if w]


def matches_word_boundary(query: str, target: str) -> bool:
    """True if any word of the target starts with the query."""
    return any(word.lower().startswith(query) for word in split_words(target))


def is_subsequence(query: str, target: str) -> bool:
    """True if every query character appears in target in order."""
    it = iter(target)
    return all(ch in it for ch in query)
