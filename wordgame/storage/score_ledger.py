from datetime import datetime
from typing import Callable, List

from sortedcontainers import SortedKeyList

from ..core.scoring import score
from ..errors import ValidationError
from ..logger import get_logger
from ..models.data import NICKNAME_MAX_LENGTH, ScoreRecord, normalize_key, utcnow
from .store import FileStore

logger = get_logger(__name__)


def _rank_key(record: ScoreRecord):
    # Highest score, then fastest game, then newest record
    return (-record.final_score, record.game_time_seconds, -record.created_at.timestamp())


def _require_count(value, message: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(message)
    return value


def _require_nickname(nickname) -> str:
    if nickname is None or not str(nickname).strip():
        raise ValidationError('Player name cannot be empty.')
    return str(nickname).strip()


class ScoreLedger:
    """Best result per player, backed by one FileStore.

    A player (nickname, case-insensitive) owns at most one record. A new result
    replaces it only when its score is strictly higher.
    """

    def __init__(self, store: FileStore[ScoreRecord], clock: Callable[[], datetime] = utcnow):
        self.store = store
        self._clock = clock

    def record_result(self, nickname: str, game_time_seconds: int, attempt_count: int,
                      used_hint: bool, category: str, word_guessed: str, won: bool) -> ScoreRecord:
        """Score a finished game and keep it if it is the player's best"""
        nickname = _require_nickname(nickname)
        if len(nickname) > NICKNAME_MAX_LENGTH:
            raise ValidationError(f'Player name cannot be longer than {NICKNAME_MAX_LENGTH} characters.')
        game_time_seconds = _require_count(game_time_seconds, 'Game time must be a non-negative whole number of seconds.')
        attempt_count = _require_count(attempt_count, 'Number of attempts must be a non-negative whole number.')
        category = normalize_key(category)
        if not category:
            raise ValidationError('Category cannot be empty.')
        word_guessed = normalize_key(word_guessed)
        if not word_guessed:
            raise ValidationError('The word guessed cannot be empty.')

        used_hint, won = bool(used_hint), bool(won)
        final_score = score(game_time_seconds, attempt_count, used_hint, won)

        with self.store.transaction() as txn:
            records = txn.load()
            for index, existing in enumerate(records):
                if not existing.belongs_to(nickname):
                    continue
                if final_score <= existing.final_score:
                    logger.info(f'Kept best score {existing.final_score} for {existing.nickname!r}, '
                                f'new score {final_score} discarded')
                    return existing
                updated = ScoreRecord.model_validate({
                    **existing.model_dump(),
                    'final_score': final_score,
                    'game_time_seconds': game_time_seconds,
                    'attempt_count': attempt_count,
                    'used_hint': used_hint,
                    'category': category,
                    'word_guessed': word_guessed,
                    'won': won,
                })
                records[index] = updated
                txn.save(records)
                logger.info(f'New best score {final_score} for {existing.nickname!r} '
                            f'(was {existing.final_score})')
                return updated

            record = ScoreRecord(
                nickname=nickname,
                final_score=final_score,
                game_time_seconds=game_time_seconds,
                attempt_count=attempt_count,
                used_hint=used_hint,
                category=category,
                word_guessed=word_guessed,
                won=won,
                created_at=self._clock(),
            )
            records.append(record)
            txn.save(records)
        logger.info(f'Stored first score {final_score} for {nickname!r}')
        return record

    def top_scores(self, limit: int) -> List[ScoreRecord]:
        """Winning records in rank order; ``limit <= 0`` returns all of them"""
        ranked = SortedKeyList((r for r in self.store.load_all() if r.won), key=_rank_key)
        if limit <= 0:
            return list(ranked)
        return list(ranked.islice(0, limit))

    def full_leaderboard(self) -> List[ScoreRecord]:
        return self.top_scores(0)

    def best_score_for(self, nickname: str) -> int:
        nickname = _require_nickname(nickname)
        return max(
            (r.final_score for r in self.store.load_all() if r.won and r.belongs_to(nickname)),
            default=0,
        )

    def history_for(self, nickname: str) -> List[ScoreRecord]:
        """Every record of the player, newest first"""
        nickname = _require_nickname(nickname)
        records = SortedKeyList(
            (r for r in self.store.load_all() if r.belongs_to(nickname)),
            key=lambda r: -r.created_at.timestamp(),
        )
        return list(records)

    def is_available(self) -> bool:
        return self.store.is_available()
