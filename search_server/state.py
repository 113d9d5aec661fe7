"""Application state: server config and the active search config."""

from typing import Optional

from symbol_search import SearchConfig

from .config import ServerConfig, get_config


class AppState:
    """Global application state."""

    def __init__(self, config: ServerConfig):
        self.config = config
        self.search_config: SearchConfig = config.build_search_config()


_state: Optional[AppState] = None


def get_state() -> AppState:
    """Get the global state instance."""
    global _state
    if _state is None:
        _state = AppState(get_config())
    return _state


def reset_state() -> None:
    """Drop the cached state so the next get_state() rereads config."""
    global _state
    _state = None
