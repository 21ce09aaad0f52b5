"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from snake_graph.config import SnakeConfig
from snake_graph.server.routes import router


def create_app(config: SnakeConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    config = config if config is not None else SnakeConfig()
    app = FastAPI(title="Snake Graph", version=config.version)
    app.state.config = config
    app.include_router(router)
    return app
