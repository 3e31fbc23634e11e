"""Games list API routes"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from ..core import AppState
from ..core.dependencies import get_app_state
from ..models import GameEntry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/games", tags=["games"])


class GameResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    available: bool
    channel: str
    message_id: str = Field(alias="messageId")
    size: str
    file_name: str = Field(alias="fileName")
    timestamp: int
    posted_by: str = Field(alias="postedBy")
    posted_at: str = Field(alias="postedAt")

    @classmethod
    def from_entry(cls, entry: GameEntry) -> "GameResponse":
        return cls(
            name=entry.name,
            available=entry.available,
            channel=entry.channel_id,
            message_id=entry.message_id,
            size=entry.size,
            file_name=entry.file_name,
            timestamp=entry.timestamp,
            posted_by=entry.posted_by,
            posted_at=entry.posted_at,
        )


@router.get("", response_model=list[GameResponse])
async def list_games(state: AppState = Depends(get_app_state)) -> list[GameResponse]:
    """Current games list, newest first"""
    return [GameResponse.from_entry(entry) for entry in state.games]
