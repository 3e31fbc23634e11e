"""Process-wide application state"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..models import GameEntry, StatsSnapshot


@dataclass
class AppState:
    """Caches shared by the refresher and the HTTP handlers.

    Both caches are replaced wholesale, never mutated in place, so a reader
    always sees one complete snapshot.
    """

    games: list[GameEntry] = field(default_factory=list)
    stats: StatsSnapshot = field(default_factory=StatsSnapshot)

    @property
    def total_games(self) -> int:
        return len(self.games)
