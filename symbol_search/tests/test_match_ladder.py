#!/usr/bin/env python3
"""
Match Ladder Tests

Tests that classify() picks the right match type for a (query, target) pair
and scores it inside that type's band.

Score Bands:
------------
- exact: 1.0
- prefix: [0.90, 0.99]
- camelCase: 0.85
- contains: [0.60, 0.80]
- wordBoundary: 0.70
- fuzzy: (0.30, 0.50]
- subsequence: [0.40, 0.50]

Run:
----
    pytest symbol_search/tests/test_match_ladder.py -v
"""

import pytest

from symbol_search import MatchType, classify
from symbol_search.stages.matching import edit_similarity, levenshtein_distance
from symbol_search.stages.matching.rules import (
    camel_case_initials,
    coverage,
    is_subsequence,
    matches_word_boundary,
    split_words,
)


class TestMatchTypes:
    """One representative pair per rule."""

    def test_exact_is_case_insensitive(self):
        match = classify("view", "View")
        assert match.match_type == MatchType.EXACT
        assert match.score == 1.0

    def test_prefix_scales_with_coverage(self):
        match = classify("View", "ViewModel")
        assert match.match_type == MatchType.PREFIX
        assert match.score == pytest.approx(0.9 + (4 / 9) * 0.09)

    def test_camel_case_initials(self):
        match = classify("VM", "ViewModel")
        assert match.match_type == MatchType.CAMEL_CASE
        assert match.score == 0.85

    def test_camel_case_partial_initials(self):
        match = classify("UR", "URLSessionTask")
        # "urlsessiontask" starts with "ur", so prefix wins
        assert match.match_type == MatchType.PREFIX
        match = classify("URLST", "URLSessionTask")
        assert match.match_type == MatchType.CAMEL_CASE

    def test_contains(self):
        match = classify("custom", "MyCustomView")
        assert match.match_type == MatchType.CONTAINS
        assert match.score == pytest.approx(0.6 + (6 / 12) * 0.2)

    def test_fuzzy_typo(self):
        """One deletion away: similarity 5/6, score ~0.417."""
        match = classify("buton", "Button")
        assert match.match_type == MatchType.FUZZY
        assert match.score == pytest.approx((1 - 1 / 6) * 0.5)
        assert match.score == pytest.approx(0.417, abs=1e-3)

    def test_subsequence(self):
        match = classify("nvc", "NavigationController")
        assert match.match_type == MatchType.SUBSEQUENCE
        assert match.score == pytest.approx(0.4 + (3 / 20) * 0.1)
        assert match.score == pytest.approx(0.415)

    def test_no_match(self):
        assert classify("xyz123", "Button") is None
        assert classify("VM", "ViewController") is None
        assert classify("VM", "URLSessionTask") is None


class TestPriority:
    """When two rules could fire, the earlier one in the ladder wins."""

    def test_exact_over_prefix(self):
        assert classify("textfield", "TextField").match_type == MatchType.EXACT

    def test_prefix_over_camel_case(self):
        # "V" is both a prefix and the first initial
        assert classify("V", "ViewModel").match_type == MatchType.PREFIX

    def test_camel_case_over_contains(self):
        # initials "VC"; "videocvc" also contains "vc"
        assert "vc" in "videocvc"
        assert classify("VC", "VideoCvc").match_type == MatchType.CAMEL_CASE

    def test_contains_over_word_boundary(self):
        # "con" starts the word "controller" and is also a substring
        assert matches_word_boundary("con", "ui.view-controller")
        assert classify("con", "ui.view-controller").match_type == MatchType.CONTAINS

    def test_contains_over_fuzzy(self):
        # similarity 1 - 2/6 would also pass the fuzzy threshold
        assert edit_similarity("utto", "button") > 0.6
        assert classify("utto", "Button").match_type == MatchType.CONTAINS

    def test_fuzzy_over_subsequence(self):
        assert is_subsequence("buton", "button")
        assert classify("buton", "Button").match_type == MatchType.FUZZY

    def test_match_type_priority_follows_ladder_order(self):
        assert [m.priority for m in MatchType] == list(range(8))
        assert MatchType.EXACT.priority < MatchType.FUZZY.priority < MatchType.DESCRIPTION.priority


class TestScoreBands:
    """Every classification lands inside its type's band."""

    PAIRS = [
        ("view", "View"),
        ("v", "ViewModel"),
        ("view", "ViewBuilderConfigurationFactory"),
        ("VM", "ViewModel"),
        ("model", "ViewModel"),
        ("x", "ab.xcode-tools"),
        ("buton", "Button"),
        ("labl", "Label"),
        ("nvc", "NavigationController"),
        ("tfs", "TextFieldStyle"),
    ]

    BANDS = {
        MatchType.EXACT: (1.0, 1.0),
        MatchType.PREFIX: (0.90, 0.99),
        MatchType.CAMEL_CASE: (0.85, 0.85),
        MatchType.CONTAINS: (0.6, 0.8),
        MatchType.WORD_BOUNDARY: (0.7, 0.7),
        MatchType.FUZZY: (0.3, 0.5),
        MatchType.SUBSEQUENCE: (0.4, 0.5),
    }

    @pytest.mark.parametrize("query,target", PAIRS)
    def test_score_in_band(self, query, target):
        match = classify(query, target)
        assert match is not None
        low, high = self.BANDS[match.match_type]
        assert low - 1e-9 <= match.score <= high + 1e-9
        if match.match_type == MatchType.FUZZY:
            assert match.score > 0.3


class TestMonotonicity:
    """Longer queries never lower the score within a coverage-scaled type."""

    def _scores(self, queries, target, expected_type):
        matches = [classify(q, target) for q in queries]
        assert all(m.match_type == expected_type for m in matches)
        return [m.score for m in matches]

    def test_prefix(self):
        scores = self._scores(["n", "na", "nav", "navi", "navigation"], "NavigationController", MatchType.PREFIX)
        assert scores == sorted(scores)

    def test_contains(self):
        scores = self._scores(["n", "na", "nav", "navigation"], "MyNavigationController", MatchType.CONTAINS)
        assert scores == sorted(scores)

    def test_subsequence(self):
        scores = self._scores(["nv", "nvc", "nvct", "nvctl"], "NavigationController", MatchType.SUBSEQUENCE)
        assert scores == sorted(scores)


class TestBoundaries:
    """Empty and degenerate inputs."""

    def test_empty_query_is_prefix_with_zero_coverage(self):
        match = classify("", "anything")
        assert match.match_type == MatchType.PREFIX
        assert match.score == pytest.approx(0.90)

    def test_empty_query_and_target_is_exact(self):
        match = classify("", "")
        assert match.match_type == MatchType.EXACT

    def test_empty_target_never_matches_non_empty_query(self):
        assert classify("view", "") is None

    def test_coverage_of_empty_target_is_zero(self):
        assert coverage("", "") == 0.0


class TestHelpers:
    """String predicates and edit distance."""

    def test_levenshtein(self):
        assert levenshtein_distance("kitten", "sitting") == 3
        assert levenshtein_distance("", "abc") == 3
        assert levenshtein_distance("abc", "") == 3
        assert levenshtein_distance("same", "same") == 0

    def test_edit_similarity_of_empty_strings(self):
        assert edit_similarity("", "") == 1.0

    def test_camel_case_initials(self):
        assert camel_case_initials("ViewModel") == "VM"
        assert camel_case_initials("URLSessionTask") == "URLST"
        assert camel_case_initials("viewModel") == "VM"
        assert camel_case_initials("") == ""

    def test_split_words(self):
        assert split_words("Foo.bar_baz-qux 42") == ["Foo", "bar", "baz", "qux", "42"]
        assert split_words("...") == []

    def test_is_subsequence(self):
        assert is_subsequence("nvc", "navigationcontroller")
        assert not is_subsequence("cvn", "navigationcontroller")
        assert is_subsequence("", "anything")

    def test_edit_distance_values(self):
        """Distances and similarities the fuzzy rule depends on."""
        assert levenshtein_distance("buton", "button") == 1
        assert edit_similarity("buton", "button") == pytest.approx(1 - 1 / 6)
        assert edit_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)
        assert edit_similarity("", "abc") == 0.0
        assert levenshtein_distance("nvc", "navigationcontroller") == 17
        assert edit_similarity("nvc", "navigationcontroller") == pytest.approx(1 - 17 / 20)
