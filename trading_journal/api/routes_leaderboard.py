from typing import List

from fastapi import APIRouter, Depends

from trading_journal.api.dependencies import get_leaderboard_service
from trading_journal.schemas import LeaderboardEntry
from trading_journal.services import LeaderboardService

router = APIRouter()


@router.get("", response_model=List[LeaderboardEntry])
def get_leaderboard(service: LeaderboardService = Depends(get_leaderboard_service)):
    """Operators ranked by average response time, fastest first."""
    return [LeaderboardEntry.model_validate(stats) for stats in service.compute()]
