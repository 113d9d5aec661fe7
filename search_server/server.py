#!/usr/bin/env python3
"""
Symbol Search API — entrypoint for uvicorn search_server.server:app.

For uvicorn search_server:app use search_server/__init__.py (exposes app from search_server.app).
"""

from .app import app

if __name__ == "__main__":
    import uvicorn

    from .config import get_config

    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.resolved_log_level.lower())
