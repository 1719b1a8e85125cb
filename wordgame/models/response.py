from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .data import ScoreRecord


class _Response(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(_Response):
    status: Literal["healthy"] = "healthy"
    uptime: float

class ReadinessResponse(_Response):
    status: Literal["ready", "not ready"]
    message: str = ""

class ErrorResponse(_Response):
    error: str

class WordChangeResponse(_Response):
    message: str
    category: str
    word: str

class WordUpdateResponse(_Response):
    message: str
    old_category: str
    old_word: str
    new_category: str
    new_word: str

class WordStatisticsResponse(_Response):
    total_words: int
    total_categories: int
    per_category: Dict[str, int]

class LeaderboardEntry(ScoreRecord):
    rank: int

    @classmethod
    def ranked(cls, records: List[ScoreRecord]) -> List["LeaderboardEntry"]:
        return [cls(rank=idx + 1, **record.model_dump()) for idx, record in enumerate(records)]

class BestScoreResponse(_Response):
    nickname: str
    best_score: int

class RulesResponse(_Response):
    base_score: int
    free_seconds: int
    penalty_per_second: int
    free_attempts: int
    penalty_per_attempt: int
    hint_penalty: int
    min_winning_score: int

