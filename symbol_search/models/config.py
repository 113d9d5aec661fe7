"""
Search configuration — per-source limits, merge limit, name boost, and fan-out.

SearchConfig defaults are defined here. The server may pass a dict
(e.g. from a JSON file named by SEARCH_CONFIG_PATH); from_dict() merges it with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, model_validator


class SearchConfig(BaseModel):
    """Configuration for symbol search ranking."""

    # -------------------------------------------------------------------------
    # Result limits
    # -------------------------------------------------------------------------

    # Max results kept from a primary source (the caller's own project symbols).
    primary_max_results: int = 50
    # Max results kept from each secondary source (framework docs, dependencies).
    secondary_max_results: int = 20
    # Max results kept after merging every source into one list.
    merge_max_results: int = 100

    # -------------------------------------------------------------------------
    # Scoring
    # score = ladder_score * name_match_boost when the candidate's own name matched
    # -------------------------------------------------------------------------

    # Multiplier for name matches vs fully-qualified-name matches.
    # 1.1 lifts an exact name match to 1.1, above every other match band.
    name_match_boost: float = 1.1

    # -------------------------------------------------------------------------
    # Fan-out
    # -------------------------------------------------------------------------

    # Worker threads used to rank sources concurrently. 1 = rank inline.
    max_workers: int = 4

    @model_validator(mode="after")
    def limits_are_valid(self):
        for field in ("primary_max_results", "secondary_max_results", "merge_max_results"):
            if getattr(self, field) < 0:
                raise ValueError(f"{field} must be >= 0, got {getattr(self, field)}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.name_match_boost <= 0:
            raise ValueError(f"name_match_boost must be positive, got {self.name_match_boost}")
        return self

    def max_results_for(self, primary: bool) -> int:
        """Default per-source limit for a primary or secondary source."""
        return self.primary_max_results if primary else self.secondary_max_results

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "SearchConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "limits" in config_dict:
            limits = config_dict["limits"]
            if "primary" in limits:
                flat["primary_max_results"] = limits["primary"]
            if "secondary" in limits:
                flat["secondary_max_results"] = limits["secondary"]
            if "merge" in limits:
                flat["merge_max_results"] = limits["merge"]
        if "scoring" in config_dict:
            sc = config_dict["scoring"]
            if "name_match_boost" in sc:
                flat["name_match_boost"] = sc["name_match_boost"]
        if "concurrency" in config_dict:
            flat["max_workers"] = config_dict["concurrency"].get("max_workers", 4)
        # Flat keys win over grouped ones
        flat.update({k: v for k, v in config_dict.items() if not isinstance(v, dict)})
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = SearchConfig()


def resolve_config(config: Optional["SearchConfig"]) -> "SearchConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
