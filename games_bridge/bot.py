"""Games bridge Discord bot

A discord.py 2.x client that only listens: it watches the games channel and
reads guild presence for the HTTP API.
"""

import logging

import discord
from discord.ext import commands

from .core import AppState, Settings
from .services import CacheRefresher, DiscordChatSource

logger = logging.getLogger(__name__)


class GamesBridgeBot(commands.Bot):
    """Discord client feeding the shared AppState"""

    def __init__(self, settings: Settings, state: AppState):
        intents = discord.Intents.default()
        intents.message_content = True  # game titles come from message bodies
        intents.members = True  # full member list for totals
        intents.presences = True  # member status for online counts

        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=intents,
            help_command=None,
        )

        self.settings = settings
        self.state = state
        self.chat_source = DiscordChatSource(
            self,
            guild_id=settings.discord_guild_id,
            channel_id=settings.discord_channel_id,
        )
        self.refresher = CacheRefresher(
            state,
            self.chat_source,
            history_limit=settings.history_limit,
            display_tz=settings.display_tz,
        )

        self.initial_extensions = [
            "games_bridge.cogs.mirror",
        ]

    async def setup_hook(self):
        """Load cogs before connecting"""
        loaded = []
        failed = []

        for extension in self.initial_extensions:
            try:
                await self.load_extension(extension)
                loaded.append(extension.split(".")[-1])
            except Exception as e:
                failed.append(f"{extension.split('.')[-1]} ({e})")

        if loaded:
            logger.info(f"[green]Loaded cogs:[/green] {', '.join(loaded)}")
        if failed:
            logger.error(f"[red]Failed to load:[/red] {', '.join(failed)}")

        logger.info("[yellow]Connecting to Discord...[/yellow]")

    async def on_ready(self):
        """Fired when the gateway session is ready"""
        logger.info(
            f"[bold green]Bot is ready:[/bold green] {self.user} [dim](ID: {self.user.id})[/dim]"
        )
        logger.info(
            f"[cyan]Watching:[/cyan] guild {self.settings.discord_guild_id} | "
            f"channel {self.settings.discord_channel_id} | discord.py {discord.__version__}"
        )
