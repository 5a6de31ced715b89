from __future__ import annotations

import pytest

from pokerduel import scoreboard
from pokerduel.cards import Card, Rank, Suit
from pokerduel.engine import GameResult
from pokerduel.rules import OpeningResult, Outcome


def _summary(number: int, outcome: Outcome, lives: tuple[int, int], rounds: int = 20) -> scoreboard.GameSummary:
    return scoreboard.GameSummary(game_number=number, outcome=outcome, lives=lives, rounds=rounds)


def test_match_history_accumulates_totals() -> None:
    history = scoreboard.MatchHistory()
    history.record(_summary(1, Outcome.PLAYER_ONE, (9, -1), rounds=18))
    history.record(_summary(2, Outcome.PLAYER_TWO, (4, 6), rounds=26))
    history.record(_summary(3, Outcome.DRAW, (5, 5), rounds=25))
    history.record(_summary(4, Outcome.PLAYER_ONE, (3, 0), rounds=11))

    totals = history.totals()
    assert len(history.games) == 4
    assert totals[0].wins == 2
    assert totals[1].wins == 1
    assert history.draws == 1
    assert totals[0].life_total == 21
    assert totals[1].life_total == 10
    assert history.average_rounds() == pytest.approx(20.0)


def test_record_result_numbers_games() -> None:
    history = scoreboard.MatchHistory()
    opening = OpeningResult(
        reveals=(Card(Suit.CLUBS, Rank.KING), Card(Suit.HEARTS, Rank.TWO)),
        first_player=0,
    )
    result = GameResult(outcome=Outcome.PLAYER_TWO, lives=(0, 3), rounds=12, opening=opening)

    first = history.record_result(result)
    second = history.record_result(result)

    assert (first.game_number, second.game_number) == (1, 2)
    assert history.totals()[1].wins == 2


def test_empty_history_averages_zero() -> None:
    assert scoreboard.MatchHistory().average_rounds() == 0.0


def test_match_history_validates_input() -> None:
    with pytest.raises(ValueError):
        scoreboard.MatchHistory(num_players=3)

    history = scoreboard.MatchHistory()
    with pytest.raises(ValueError):
        history.record(_summary(1, Outcome.DRAW, (5, 5), rounds=-1))
