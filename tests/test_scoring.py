import pytest

from wordgame.core.scoring import MIN_WINNING_SCORE, rules, score


@pytest.mark.parametrize(
    "game_time, attempts, used_hint, expected",
    [
        (20, 2, False, 1000),
        (35, 2, False, 950),
        (60, 2, False, 700),
        (20, 5, False, 900),
        (20, 10, False, 650),
        (20, 2, True, 900),
        (100, 20, True, 50),
        (30, 3, False, 1000),
    ],
)
def test_winning_scores(game_time, attempts, used_hint, expected):
    assert score(game_time, attempts, used_hint, True) == expected


@pytest.mark.parametrize("game_time, attempts, used_hint", [(0, 0, False), (20, 2, True), (10_000, 500, True)])
def test_loss_always_scores_zero(game_time, attempts, used_hint):
    assert score(game_time, attempts, used_hint, False) == 0


def test_extreme_penalties_hit_the_floor():
    assert score(10**6, 10**6, True, True) == MIN_WINNING_SCORE


def test_rules_match_formula():
    r = rules()
    assert r["base_score"] == score(0, 0, False, True)
    assert r["base_score"] - r["hint_penalty"] == score(0, 0, True, True)
    assert r["min_winning_score"] == 50
