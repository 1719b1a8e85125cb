"""Score formula for a finished game.

A win starts at ``BASE_SCORE`` and loses points for slow play, extra attempts
and hint use, but never drops below ``MIN_WINNING_SCORE``. A loss scores 0.
"""
from typing import Dict

BASE_SCORE = 1000
FREE_SECONDS = 30
PENALTY_PER_SECOND = 10
FREE_ATTEMPTS = 3
PENALTY_PER_ATTEMPT = 50
HINT_PENALTY = 100
MIN_WINNING_SCORE = 50


def score(game_time_seconds: int, attempt_count: int, used_hint: bool, won: bool) -> int:
    if not won:
        return 0
    points = BASE_SCORE
    points -= max(0, game_time_seconds - FREE_SECONDS) * PENALTY_PER_SECOND
    points -= max(0, attempt_count - FREE_ATTEMPTS) * PENALTY_PER_ATTEMPT
    if used_hint:
        points -= HINT_PENALTY
    return max(points, MIN_WINNING_SCORE)


def rules() -> Dict[str, int]:
    return {
        'base_score': BASE_SCORE,
        'free_seconds': FREE_SECONDS,
        'penalty_per_second': PENALTY_PER_SECOND,
        'free_attempts': FREE_ATTEMPTS,
        'penalty_per_attempt': PENALTY_PER_ATTEMPT,
        'hint_penalty': HINT_PENALTY,
        'min_winning_score': MIN_WINNING_SCORE,
    }
