"""Chat sources the refresher reads from.

``ChatSource`` is the only surface the refresher depends on.
``DiscordChatSource`` implements it on top of a connected discord.py bot.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

import discord

from ..models import GuildPresence

if TYPE_CHECKING:
    from discord.ext.commands import Bot

logger = logging.getLogger(__name__)


class ChatSource(Protocol):
    async def fetch_recent_messages(self, limit: int) -> list[Any]:
        """Return up to ``limit`` of the newest messages in the games channel."""
        ...

    async def fetch_member_presence(self) -> GuildPresence:
        """Return the guild member count and every member's presence status."""
        ...


class DiscordChatSource:
    """ChatSource backed by the discord.py gateway cache and REST API"""

    def __init__(self, bot: "Bot", guild_id: int, channel_id: int) -> None:
        self.bot = bot
        self.guild_id = guild_id
        self.channel_id = channel_id

    async def _get_channel(self) -> discord.abc.Messageable:
        channel = self.bot.get_channel(self.channel_id)
        if channel is None:
            channel = await self.bot.fetch_channel(self.channel_id)
        if not isinstance(channel, discord.abc.Messageable):
            raise TypeError(f"Channel {self.channel_id} has no message history")
        return channel

    async def fetch_recent_messages(self, limit: int) -> list[discord.Message]:
        channel = await self._get_channel()
        return [message async for message in channel.history(limit=limit)]

    async def fetch_member_presence(self) -> GuildPresence:
        # Presence only arrives over the gateway, so the guild must be cached
        guild = self.bot.get_guild(self.guild_id)
        if guild is None:
            raise LookupError(f"Guild {self.guild_id} is not available to the bot")

        if not guild.chunked:
            logger.debug(f"Requesting member list for guild {guild.id}")
            await guild.chunk(cache=True)

        statuses = [str(member.status) for member in guild.members]
        member_count = guild.member_count or len(statuses)
        return GuildPresence(member_count=member_count, statuses=statuses)
