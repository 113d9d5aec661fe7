#!/usr/bin/env python3
"""
Search Config Tests

Defaults, validation, and from_dict() flattening of grouped JSON.

Run:
----
    pytest symbol_search/tests/test_search_config.py -v
"""

import pytest

from symbol_search import DEFAULT_CONFIG, SearchConfig, resolve_config


class TestSearchConfig:

    def test_defaults(self):
        assert DEFAULT_CONFIG.primary_max_results == 50
        assert DEFAULT_CONFIG.secondary_max_results == 20
        assert DEFAULT_CONFIG.merge_max_results == 100
        assert DEFAULT_CONFIG.name_match_boost == 1.1

    def test_max_results_for(self):
        assert DEFAULT_CONFIG.max_results_for(primary=True) == 50
        assert DEFAULT_CONFIG.max_results_for(primary=False) == 20

    def test_resolve_config(self):
        custom = SearchConfig(max_workers=2)
        assert resolve_config(None) is DEFAULT_CONFIG
        assert resolve_config(custom) is custom

    def test_from_dict_grouped(self):
        config = SearchConfig.from_dict({
            "limits": {"primary": 10, "secondary": 5, "merge": 25},
            "scoring": {"name_match_boost": 1.2},
            "concurrency": {"max_workers": 8},
        })
        assert config.primary_max_results == 10
        assert config.secondary_max_results == 5
        assert config.merge_max_results == 25
        assert config.name_match_boost == 1.2
        assert config.max_workers == 8

    def test_from_dict_flat_keys_override_and_unknown_dropped(self):
        config = SearchConfig.from_dict({
            "limits": {"merge": 25},
            "merge_max_results": 40,
            "unknown_key": "ignored",
        })
        assert config.merge_max_results == 40
        assert config.primary_max_results == 50

    @pytest.mark.parametrize("kwargs", [
        {"primary_max_results": -1},
        {"merge_max_results": -10},
        {"max_workers": 0},
        {"name_match_boost": 0},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            SearchConfig(**kwargs)
