"""Turn channel messages into game entries.

A message is a game post when any of its attachments is an archive
(``.zip``, ``.rar`` or ``.7z``). The title comes from the first line of the
message body, or from the first attachment's filename when the body is
empty, with archive extensions and ``[...]`` tags removed.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone, tzinfo
from typing import Any

from ..models import GameEntry

ARCHIVE_EXTENSIONS = (".zip", ".rar", ".7z")

SIZE_UNITS = ["Bytes", "KB", "MB", "GB", "TB"]

_ARCHIVE_SUFFIX_RE = re.compile(r"\.(zip|rar|7z)$", re.IGNORECASE)
_BRACKET_TAG_RE = re.compile(r"\[.*?\]")


def is_archive_name(filename: str) -> bool:
    return filename.lower().endswith(ARCHIVE_EXTENSIONS)


def format_file_size(num_bytes: int | float) -> str:
    """Format a byte count with 1024-based units, e.g. ``1536 -> "1.5 KB"``.

    The unit is the largest one whose scaled value is at least 1, capped at
    TB. Anything below one byte, negatives included, stays in Bytes.
    """
    if num_bytes == 0:
        return "0 Bytes"

    index = 0
    while index < len(SIZE_UNITS) - 1 and num_bytes >= 1024 ** (index + 1):
        index += 1

    scaled = f"{num_bytes / 1024**index:.2f}".rstrip("0").rstrip(".")
    return f"{scaled} {SIZE_UNITS[index]}"


def clean_game_name(raw: str) -> str:
    """Strip one archive extension and every ``[...]`` tag from a title."""
    name = _ARCHIVE_SUFFIX_RE.sub("", raw)
    name = _BRACKET_TAG_RE.sub("", name)
    return name.strip()


def format_posted_at(timestamp_ms: int, tz: tzinfo = timezone.utc) -> str:
    """Render a message timestamp as an en-US short date (``M/D/YYYY``)."""
    posted = datetime.fromtimestamp(timestamp_ms / 1000, tz=tz)
    return f"{posted.month}/{posted.day}/{posted.year}"


def message_timestamp(message: Any) -> int:
    """Creation time of a discord message in epoch milliseconds."""
    return round(message.created_at.timestamp() * 1000)


def parse_game_message(message: Any, tz: tzinfo = timezone.utc) -> GameEntry | None:
    """Build a GameEntry from a message, or return None if it has no archive.

    ``message`` is anything shaped like ``discord.Message``: ``attachments``
    with ``filename``/``size``, ``content``, ``id``, ``channel.id``,
    ``author.name`` and an aware ``created_at``.
    """
    attachments = list(message.attachments or [])
    if not any(is_archive_name(att.filename) for att in attachments):
        return None

    first = attachments[0]

    game_name = (message.content or "").split("\n")[0].strip()
    if not game_name:
        game_name = _ARCHIVE_SUFFIX_RE.sub("", first.filename)

    timestamp = message_timestamp(message)

    return GameEntry(
        name=clean_game_name(game_name),
        channel_id=str(message.channel.id),
        message_id=str(message.id),
        size=format_file_size(first.size),
        file_name=first.filename,
        timestamp=timestamp,
        posted_by=message.author.name,
        posted_at=format_posted_at(timestamp, tz),
    )
