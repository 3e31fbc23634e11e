"""API Routers package

Routers are organized by feature domain.
"""

from . import games_router, stats_router

__all__ = [
    "games_router",
    "stats_router",
]
