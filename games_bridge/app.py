"""FastAPI application factory"""

import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from . import __version__
from .core import SERVICE_NAME, AppState, Settings
from .routers import games_router, stats_router

if TYPE_CHECKING:
    from discord.ext.commands import Bot

logger = logging.getLogger(__name__)


def create_app(settings: Settings, state: AppState, bot: "Bot | None" = None) -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Discord Games Bridge",
        description="Read-only games list and guild statistics mirrored from Discord",
        version=__version__,
    )
    app.state.cache = state
    app.state.bot = bot

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Access-Control-Allow-Origin"],
    )

    # Register routers
    app.include_router(games_router.router)
    app.include_router(stats_router.router)

    @app.get("/")
    async def root():
        """Root endpoint - minimal service info"""
        return {"service": SERVICE_NAME, "status": "running"}

    @app.get("/health")
    async def health():
        """Liveness check - always 200, reports whether the bot is connected"""
        ready = bot is not None and bot.is_ready()
        return {
            "status": "healthy" if ready else "starting",
            "ready": ready,
        }

    @app.api_route("/ping", methods=["GET", "HEAD"], response_class=PlainTextResponse)
    async def ping():
        """Ping endpoint"""
        return "pong"

    logger.info(f"FastAPI application configured (CORS: {', '.join(settings.cors_origins)})")

    return app
