"""Data models shared by the refresher and the HTTP API."""

from .game import GameEntry, GuildPresence, StatsSnapshot

__all__ = [
    "GameEntry",
    "GuildPresence",
    "StatsSnapshot",
]
