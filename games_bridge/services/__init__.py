"""Services layer - Business logic

Parsing, upstream access and cache refresh. The HTTP routers and the
Discord cog both go through these.
"""

from .chat_source import ChatSource, DiscordChatSource
from .parser import clean_game_name, format_file_size, is_archive_name, parse_game_message
from .refresher import ONLINE_STATUSES, CacheRefresher

__all__ = [
    "CacheRefresher",
    "ChatSource",
    "DiscordChatSource",
    "ONLINE_STATUSES",
    "clean_game_name",
    "format_file_size",
    "is_archive_name",
    "parse_game_message",
]
