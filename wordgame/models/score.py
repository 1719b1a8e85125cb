# --- Request Models ---
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .data import WordRecord


class _Request(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScoreRequest(_Request):
    nickname: str = Field(..., description="Player nickname, at most 20 characters")
    game_time_seconds: int = Field(..., description="Seconds taken to finish the game")
    attempt_count: int = Field(..., description="Number of guesses made")
    used_hint: bool = False
    category: str
    word_guessed: str
    won: bool


class WordRequest(_Request):
    category: str = Field(..., description="Letters a-z only, case-insensitive")
    word: str = Field(..., description="Letters a-z only, case-insensitive")
    hint: str

    def to_record(self) -> WordRecord:
        return WordRecord(category=self.category, word=self.word, hint=self.hint)
