"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geocoin import __version__
from geocoin.api.dependencies import set_game_session
from geocoin.api.routes import api_router
from geocoin.config import GameConfig
from geocoin.engine.session import GameSession
from geocoin.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        set_game_session(GameSession(_config))
        logger.info("API server started: session ready.")
        yield
        set_game_session(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Geocoin Cache Engine",
        description=(
            "Deterministic location-based coin caches.\n\n"
            "## API Groups\n\n"
            "- **State**: Player position, wallet, trail and visible caches\n"
            "- **Caches**: Inspect a visible cache, collect or deposit coins\n"
            "- **Control**: Move the player, report a sensed position, reset the session\n"
            "- **Config**: Read-only game configuration\n"
        ),
        version=__version__,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "State", "description": "Player and visible-cache state polled by the map."},
            {"name": "Caches", "description": "Per-tile cache inspection and coin transfers."},
            {"name": "Control", "description": "Player movement and session lifecycle."},
            {"name": "Config", "description": "Read-only configuration (tile size, spawn probability, radius)."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
