"""Shared fakes standing in for discord.py objects."""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone

import pytest

from games_bridge.core import AppState
from games_bridge.models import GuildPresence


@dataclass
class FakeAttachment:
    filename: str
    size: int = 1024


@dataclass
class FakeAuthor:
    name: str = "uploader"


@dataclass
class FakeChannel:
    id: int = 555


@dataclass
class FakeMessage:
    id: int
    content: str = ""
    attachments: list[FakeAttachment] = field(default_factory=list)
    timestamp_ms: int = 0
    author: FakeAuthor = field(default_factory=FakeAuthor)
    channel: FakeChannel = field(default_factory=FakeChannel)

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp_ms / 1000, tz=timezone.utc)


def make_message(
    message_id: int,
    content: str = "",
    files: list[str] | None = None,
    timestamp_ms: int = 0,
    size: int = 1024,
) -> FakeMessage:
    return FakeMessage(
        id=message_id,
        content=content,
        attachments=[FakeAttachment(name, size) for name in files or []],
        timestamp_ms=timestamp_ms,
    )


class FakeChatSource:
    """In-memory ChatSource.

    ``messages`` and ``presence`` are returned as-is; set ``error`` to make
    every fetch raise. ``gates`` holds events that individual fetches wait on,
    consumed in call order.
    """

    def __init__(self, messages=None, presence=None):
        self.messages = list(messages or [])
        self.presence = presence or GuildPresence(member_count=0, statuses=[])
        self.error: Exception | None = None
        self.gates: list[asyncio.Event | None] = []
        self.message_calls = 0
        self.presence_calls = 0
        self.last_limit: int | None = None

    async def _wait_gate(self) -> None:
        if self.gates:
            gate = self.gates.pop(0)
            if gate is not None:
                await gate.wait()

    async def fetch_recent_messages(self, limit):
        self.message_calls += 1
        self.last_limit = limit
        snapshot = list(self.messages)
        await self._wait_gate()
        if self.error is not None:
            raise self.error
        return snapshot[:limit]

    async def fetch_member_presence(self):
        self.presence_calls += 1
        snapshot = self.presence
        await self._wait_gate()
        if self.error is not None:
            raise self.error
        return snapshot


@pytest.fixture
def state() -> AppState:
    return AppState()


@pytest.fixture
def source() -> FakeChatSource:
    return FakeChatSource()
