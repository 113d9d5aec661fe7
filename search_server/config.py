"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from symbol_search import SearchConfig

# Single .env at project root
root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"

    # Optional JSON file with grouped search settings (see SearchConfig.from_dict)
    search_config_path: Optional[Path] = None

    # Search limits (override the JSON file when set in the environment)
    primary_max_results: Optional[int] = None
    secondary_max_results: Optional[int] = None
    merge_max_results: Optional[int] = None
    max_workers: Optional[int] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent

        def _int_env(key: str) -> Optional[int]:
            v = os.getenv(key)
            return int(v) if v and v.strip() else None

        def _path_env(key: str) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return None
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "info").lower(),
            search_config_path=_path_env("SEARCH_CONFIG_PATH"),
            primary_max_results=_int_env("PRIMARY_MAX_RESULTS"),
            secondary_max_results=_int_env("SECONDARY_MAX_RESULTS"),
            merge_max_results=_int_env("MERGE_MAX_RESULTS"),
            max_workers=_int_env("SEARCH_MAX_WORKERS"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.search_config_path is not None and not self.search_config_path.exists():
            errors.append(f"Search config not found: {self.search_config_path}")

        if not (0 < self.port < 65536):
            errors.append(f"Invalid port: {self.port}")

        if self.log_level.upper() not in LOG_LEVELS:
            errors.append(f"Invalid log level: {self.log_level} (expected one of {', '.join(LOG_LEVELS).lower()})")

        return len(errors) == 0, errors

    @property
    def resolved_log_level(self) -> str:
        """LOG_LEVEL as a logging level name, INFO when it is not a known level."""
        level = self.log_level.upper()
        return level if level in LOG_LEVELS else "INFO"

    def build_search_config(self) -> SearchConfig:
        """SearchConfig from the JSON file (if any) with environment overrides applied."""
        data = {}
        if self.search_config_path is not None and self.search_config_path.exists():
            with open(self.search_config_path) as f:
                data = json.load(f)
        overrides = {
            "primary_max_results": self.primary_max_results,
            "secondary_max_results": self.secondary_max_results,
            "merge_max_results": self.merge_max_results,
            "max_workers": self.max_workers,
        }
        data.update({k: v for k, v in overrides.items() if v is not None})
        return SearchConfig.from_dict(data)


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
