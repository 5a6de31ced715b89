from __future__ import annotations

import pytest

from pokerduel import actions, rules
from pokerduel.actions import PlayAction
from pokerduel.cards import Card, Deck, Rank, Suit
from pokerduel.rules import CardEffect, IllegalPlay
from pokerduel.state import PLAYER_ONE, PLAYER_TWO, GameState, new_game_state


def _state_with_hands(p1: list[Card], p2: list[Card], deck: list[Card] | None = None) -> GameState:
    state = new_game_state(deck=Deck.from_cards(deck or [Card(Suit.CLUBS, Rank.NINE)]))
    state.players[PLAYER_ONE].hand.extend(p1)
    state.players[PLAYER_TWO].hand.extend(p2)
    return state


def test_legal_play_actions_cover_hand() -> None:
    state = _state_with_hands(
        [Card(Suit.HEARTS, Rank.TWO), Card(Suit.SPADES, Rank.THREE)],
        [Card(Suit.CLUBS, Rank.FOUR)],
    )

    assert actions.legal_play_actions(state) == [PlayAction(0), PlayAction(1)]


def test_apply_play_action_moves_card_and_flips_turn() -> None:
    played = Card(Suit.SPADES, Rank.THREE)
    state = _state_with_hands([Card(Suit.HEARTS, Rank.TWO), played], [Card(Suit.CLUBS, Rank.FOUR)])

    report = actions.apply_play_action(state, PlayAction(1))

    assert report.card == played
    assert report.player_index == PLAYER_ONE
    assert report.effect is None
    assert not report.penalty
    assert report.suit_before is None
    assert report.suit_after is Suit.SPADES
    assert report.messages == ()
    assert played not in state.players[PLAYER_ONE].hand
    assert state.active_player == PLAYER_TWO
    assert state.turn_index == 1


def test_effect_resolves_before_suit_penalty() -> None:
    state = _state_with_hands([Card(Suit.HEARTS, Rank.ACE)], [Card(Suit.CLUBS, Rank.FOUR)])
    state.current_suit = Suit.CLUBS

    report = actions.apply_play_action(state, PlayAction(0))

    assert report.effect is CardEffect.DAMAGE_OPPONENT
    assert report.penalty
    assert report.messages == ("Opponent loses 2 HP!", "Wrong suit, lost 2 HP!")
    assert state.lives == (13, 13)
    assert state.current_suit is Suit.HEARTS


def test_valid_joker_keeps_enforced_suit() -> None:
    state = _state_with_hands([Card.joker()], [Card(Suit.CLUBS, Rank.FOUR)])
    state.current_suit = Suit.DIAMONDS

    report = actions.apply_play_action(state, PlayAction(0))

    assert not report.penalty
    assert report.suit_after is Suit.DIAMONDS
    assert state.lives == (15, 15)


def test_draw_blocked_is_reported() -> None:
    state = _state_with_hands([Card(Suit.HEARTS, Rank.TWO)], [])

    report = actions.apply_play_action(state, PlayAction(0), draw_blocked=True)

    assert report.draw_blocked
    assert report.messages[0] == rules.DRAW_SKIPPED_MESSAGE


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_out_of_range_index_is_rejected(index: int) -> None:
    state = _state_with_hands(
        [Card(Suit.HEARTS, Rank.TWO), Card(Suit.SPADES, Rank.THREE)],
        [Card(Suit.CLUBS, Rank.FOUR)],
    )

    with pytest.raises(IllegalPlay):
        actions.apply_play_action(state, PlayAction(index))

    assert len(state.players[PLAYER_ONE].hand) == 2
    assert state.active_player == PLAYER_ONE
    assert state.turn_index == 0


def test_no_play_after_game_over() -> None:
    state = _state_with_hands([Card(Suit.HEARTS, Rank.TWO)], [Card(Suit.CLUBS, Rank.FOUR)])
    state.players[PLAYER_TWO].life = 0

    assert actions.legal_play_actions(state) == []
    with pytest.raises(IllegalPlay):
        actions.apply_play_action(state, PlayAction(0))


def test_pass_turn_requires_empty_hand() -> None:
    state = _state_with_hands([Card(Suit.HEARTS, Rank.TWO)], [Card(Suit.CLUBS, Rank.FOUR)])

    with pytest.raises(IllegalPlay):
        actions.pass_turn(state)

    state.players[PLAYER_ONE].hand.clear()
    report = actions.pass_turn(state)

    assert report.passed
    assert state.active_player == PLAYER_TWO
