"""Games channel mirror cog

Keeps the games list and member counts fresh: both are refreshed once the
bot is ready and then on a timer, and any new message in the games channel
triggers an immediate games refresh.
"""

import logging

import discord
from discord.ext import commands, tasks

from ..services import CacheRefresher

logger = logging.getLogger(__name__)


class GamesMirror(commands.Cog):
    """Games channel mirror"""

    def __init__(
        self,
        bot: commands.Bot,
        refresher: CacheRefresher,
        channel_id: int,
        games_refresh_minutes: float = 5,
        stats_refresh_seconds: float = 60,
    ):
        self.bot = bot
        self.refresher = refresher
        self.channel_id = channel_id

        self.games_refresh_task.change_interval(minutes=games_refresh_minutes)
        self.stats_refresh_task.change_interval(seconds=stats_refresh_seconds)

    async def cog_load(self) -> None:
        self.games_refresh_task.start()
        self.stats_refresh_task.start()
        logger.info("Games mirror loaded")

    async def cog_unload(self) -> None:
        self.games_refresh_task.cancel()
        self.stats_refresh_task.cancel()

    # ==================== Background Tasks ====================

    @tasks.loop(minutes=5)
    async def games_refresh_task(self) -> None:
        await self.refresher.refresh_games()

    @tasks.loop(seconds=60)
    async def stats_refresh_task(self) -> None:
        await self.refresher.refresh_stats()

    @games_refresh_task.before_loop
    @stats_refresh_task.before_loop
    async def _wait_ready(self) -> None:
        await self.bot.wait_until_ready()

    # ==================== Events ====================

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        if message.channel.id != self.channel_id:
            return
        logger.debug(f"New message {message.id} in games channel, refreshing")
        await self.refresher.refresh_games()


async def setup(bot: commands.Bot) -> None:
    """Extension entry point."""
    settings = bot.settings  # type: ignore[attr-defined]
    await bot.add_cog(
        GamesMirror(
            bot,
            bot.refresher,  # type: ignore[attr-defined]
            channel_id=settings.discord_channel_id,
            games_refresh_minutes=settings.games_refresh_minutes,
            stats_refresh_seconds=settings.stats_refresh_seconds,
        )
    )
