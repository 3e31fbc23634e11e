"""Cache refresher - rebuilds the games list and guild stats from Discord."""

from __future__ import annotations

import logging
from datetime import timezone, tzinfo

from ..core.state import AppState
from ..models import GameEntry, StatsSnapshot
from .chat_source import ChatSource
from .parser import parse_game_message

logger = logging.getLogger(__name__)

ONLINE_STATUSES = frozenset({"online", "idle", "dnd"})


class CacheRefresher:
    """Fetches upstream data and swaps it into the shared AppState.

    Refreshes may overlap. Every refresh draws a ticket when it starts, and
    its result is only applied if no refresh that started later has already
    been applied, so a slow fetch can never overwrite a newer snapshot.
    Upstream errors are logged and the previous snapshot is kept.
    """

    def __init__(
        self,
        state: AppState,
        source: ChatSource,
        *,
        history_limit: int = 100,
        display_tz: tzinfo = timezone.utc,
    ) -> None:
        self.state = state
        self.source = source
        self.history_limit = history_limit
        self.display_tz = display_tz

        self._games_issued = 0
        self._games_applied = 0
        self._stats_issued = 0
        self._stats_applied = 0

    async def refresh_games(self) -> list[GameEntry]:
        """Rebuild the games cache from the newest channel messages"""
        self._games_issued += 1
        ticket = self._games_issued

        try:
            messages = await self.source.fetch_recent_messages(self.history_limit)
            games = [
                game
                for game in (parse_game_message(msg, self.display_tz) for msg in messages)
                if game is not None
            ]
        except Exception as e:
            logger.exception(f"Error updating cache: {e}")
            return self.state.games

        games.sort(key=lambda game: game.timestamp, reverse=True)

        if ticket < self._games_applied:
            logger.debug(f"Dropping games refresh #{ticket}, #{self._games_applied} is newer")
            return self.state.games

        self._games_applied = ticket
        self.state.games = games
        logger.info(f"Cache updated: {len(games)} games found")
        return games

    async def refresh_stats(self) -> StatsSnapshot:
        """Recompute guild member counts"""
        self._stats_issued += 1
        ticket = self._stats_issued

        try:
            presence = await self.source.fetch_member_presence()
        except Exception as e:
            logger.exception(f"Error updating member counts: {e}")
            return self.state.stats

        online = sum(1 for status in presence.statuses if status in ONLINE_STATUSES)
        stats = StatsSnapshot(total_members=presence.member_count, online_members=online)

        if ticket < self._stats_applied:
            logger.debug(f"Dropping stats refresh #{ticket}, #{self._stats_applied} is newer")
            return self.state.stats

        self._stats_applied = ticket
        self.state.stats = stats
        logger.debug(f"Member counts updated: {stats.online_members}/{stats.total_members} online")
        return stats
