from fastapi import APIRouter, Depends
from ..models.score import ScoreRequest
from ..models.data import ScoreRecord
from ..storage import ScoreLedger
from ..logger import get_logger
from .deps import get_ledger

logger = get_logger(__name__)
router = APIRouter(prefix="/api/scores", tags=["scores"])

@router.post("", response_model=ScoreRecord, status_code=201)
def save_game_result(data: ScoreRequest, ledger: ScoreLedger = Depends(get_ledger)):
    """
    Record a finished game. The score is computed server-side.

    - **nickname**: Player name, at most 20 characters
    - **gameTimeSeconds**: Non-negative game duration
    - **attemptCount**: Non-negative number of guesses
    - **usedHint**: Whether the hint was revealed
    - **category** / **wordGuessed**: What was played
    - **won**: Whether the word was guessed

    Returns the player's stored record, which is the previous one when this
    game did not beat it.
    """
    logger.info(f"Received game result for {data.nickname!r}")
    return ledger.record_result(
        nickname=data.nickname,
        game_time_seconds=data.game_time_seconds,
        attempt_count=data.attempt_count,
        used_hint=data.used_hint,
        category=data.category,
        word_guessed=data.word_guessed,
        won=data.won,
    )
