from typing import List

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import ORJSONResponse

from ..config import server
from ..core.scoring import rules
from ..logger import get_logger
from ..models.data import NICKNAME_MAX_LENGTH, ScoreRecord
from ..models.response import (BestScoreResponse, LeaderboardEntry,
                               ReadinessResponse, RulesResponse)
from ..storage import ScoreLedger
from .deps import get_ledger

logger = get_logger(__name__)
router = APIRouter(prefix="/api/scores", tags=["scores"])


@router.get("/leaderboard", response_model=List[LeaderboardEntry])
def get_leaderboard(
    limit: int = Query(server.default_leaderboard_limit, ge=1, le=server.max_leaderboard_limit),
    ledger: ScoreLedger = Depends(get_ledger),
):
    """
    Get the best winning results.

    - **limit**: Number of entries to return
    """
    logger.info(f"Getting leaderboard with limit {limit}")
    return LeaderboardEntry.ranked(ledger.top_scores(limit))


@router.get("/all", response_model=List[LeaderboardEntry])
def get_full_leaderboard(ledger: ScoreLedger = Depends(get_ledger)):
    return LeaderboardEntry.ranked(ledger.full_leaderboard())


@router.get("/player/{nickname}/best", response_model=BestScoreResponse)
def get_player_best(
    nickname: str = Path(..., min_length=1, max_length=NICKNAME_MAX_LENGTH),
    ledger: ScoreLedger = Depends(get_ledger),
):
    return BestScoreResponse(nickname=nickname.strip(), best_score=ledger.best_score_for(nickname))


@router.get("/player/{nickname}/history", response_model=List[ScoreRecord])
def get_player_history(
    nickname: str = Path(..., min_length=1, max_length=NICKNAME_MAX_LENGTH),
    ledger: ScoreLedger = Depends(get_ledger),
):
    """All results of a player, newest first"""
    return ledger.history_for(nickname)


@router.get("/rules", response_model=RulesResponse)
def get_rules():
    return rules()


@router.get("/health", response_model=ReadinessResponse)
def check_health(ledger: ScoreLedger = Depends(get_ledger)):
    """Ready when the score file exists and is readable"""
    if ledger.is_available():
        return ReadinessResponse(status="ready")
    return ORJSONResponse(
        status_code=503,
        content=ReadinessResponse(
            status="not ready",
            message="The score system is not ready - a problem with the score file",
        ).model_dump(),
    )
