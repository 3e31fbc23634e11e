"""Guild statistics API routes"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from ..core import AppState
from ..core.dependencies import get_app_state

router = APIRouter(prefix="/api/stats", tags=["stats"])


class StatsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_members: int = Field(alias="totalMembers")
    online_members: int = Field(alias="onlineMembers")
    total_games: int = Field(alias="totalGames")


@router.get("", response_model=StatsResponse)
async def get_stats(state: AppState = Depends(get_app_state)) -> StatsResponse:
    """Member counts from the last stats refresh plus the current games count"""
    stats = state.stats
    return StatsResponse(
        total_members=stats.total_members,
        online_members=stats.online_members,
        total_games=state.total_games,
    )
