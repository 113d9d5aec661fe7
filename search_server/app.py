"""
Symbol Search API — FastAPI app factory.

Use: uvicorn search_server.app:app
Or:  from search_server import app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from symbol_search import __version__

from .config import get_config
from .routes import register_routes
from .state import get_state


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, and startup."""
    app = FastAPI(
        title="Symbol Search API",
        description="Ranked symbol search across project and documentation sources",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)

    @app.on_event("startup")
    async def _startup_logging():
        config = get_config()
        ok, errors = config.validate()
        if not ok:
            for error in errors:
                print(f"[startup] WARNING: {error}")
        logging.basicConfig(level=config.resolved_log_level)
        search_config = get_state().search_config
        print("Symbol Search API starting...")
        print(
            f"Limits: primary={search_config.primary_max_results} "
            f"secondary={search_config.secondary_max_results} "
            f"merge={search_config.merge_max_results}"
        )
        print(f"Workers: {search_config.max_workers}")

    return app


app = create_app()
