import re
from datetime import datetime, timezone
from typing import List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..errors import ValidationError

LETTERS_ONLY = re.compile(r'^[a-z]+$')
NICKNAME_MAX_LENGTH = 20


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def normalize_key(value: Optional[str]) -> str:
    """Lower-case and trim a category or word for comparison"""
    return (value or '').strip().lower()


def same_nickname(a: Optional[str], b: Optional[str]) -> bool:
    return (a or '').strip().casefold() == (b or '').strip().casefold()


class WordKey(NamedTuple):
    category: str
    word: str

    @classmethod
    def of(cls, category: Optional[str], word: Optional[str]) -> 'WordKey':
        return cls(normalize_key(category), normalize_key(word))


class Record(BaseModel):
    """Base for persisted records.

    Records are immutable; a change is expressed by storing a copy. Construction
    only normalizes values, the record invariants are enforced by ``check``.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def problems(self) -> List[str]:
        return []

    def check(self):
        """Raise ValidationError listing every violated invariant"""
        problems = self.problems()
        if problems:
            raise ValidationError('; '.join(problems))
        return self


class WordRecord(Record):
    category: str
    word: str
    hint: str

    @field_validator('category', 'word', mode='before')
    @classmethod
    def lower_case(cls, v):
        if isinstance(v, str):
            return normalize_key(v)
        return v

    @field_validator('hint', mode='before')
    @classmethod
    def strip_hint(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def key(self) -> WordKey:
        return WordKey(self.category, self.word)

    def problems(self) -> List[str]:
        problems = []
        if not self.category:
            problems.append('Category is a required field.')
        elif not LETTERS_ONLY.match(self.category):
            problems.append('Category must contain only letters a-z.')
        if not self.word:
            problems.append('Word is a required field.')
        elif not LETTERS_ONLY.match(self.word):
            problems.append('Word must contain only letters a-z.')
        if not self.hint:
            problems.append('Hint is a required field.')
        return problems


class ScoreRecord(Record):
    nickname: str
    final_score: int = Field(..., ge=0)
    game_time_seconds: int
    attempt_count: int
    used_hint: bool
    category: str
    word_guessed: str
    won: bool
    created_at: datetime = Field(default_factory=utcnow)

    def belongs_to(self, nickname: Optional[str]) -> bool:
        return same_nickname(self.nickname, nickname)

    def problems(self) -> List[str]:
        problems = []
        if not self.nickname.strip():
            problems.append('Player name cannot be empty.')
        elif len(self.nickname) > NICKNAME_MAX_LENGTH:
            problems.append(f'Player name cannot be longer than {NICKNAME_MAX_LENGTH} characters.')
        if self.game_time_seconds < 0:
            problems.append('Game time cannot be negative.')
        if self.attempt_count < 0:
            problems.append('Number of attempts cannot be negative.')
        if not self.category.strip():
            problems.append('Category cannot be empty.')
        if not self.word_guessed.strip():
            problems.append('The word guessed cannot be empty.')
        return problems
