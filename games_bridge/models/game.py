"""Data models for the mirrored games list and guild statistics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameEntry:
    """One archive upload found in the games channel."""

    name: str
    channel_id: str
    message_id: str
    size: str
    file_name: str
    timestamp: int  # epoch milliseconds
    posted_by: str
    posted_at: str
    available: bool = True


@dataclass(frozen=True)
class StatsSnapshot:
    """Guild member counts from the latest stats refresh."""

    total_members: int = 0
    online_members: int = 0


@dataclass(frozen=True)
class GuildPresence:
    """Raw member data returned by a chat source.

    ``statuses`` holds one presence status string per member
    (``online``, ``idle``, ``dnd``, ``offline``, ``invisible``).
    """

    member_count: int
    statuses: list[str]
