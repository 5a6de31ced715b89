"""Play actions and their application to the game state."""

from __future__ import annotations

from dataclasses import dataclass

from . import rules
from .cards import Card, Suit
from .rules import CardEffect, IllegalPlay
from .state import GameState


@dataclass(frozen=True)
class PlayAction:
    """Play the card at ``card_index`` (0-based) of the active hand."""

    card_index: int


@dataclass(frozen=True, slots=True)
class RoundReport:
    """Everything a front-end needs to narrate one play."""

    turn_index: int
    player_index: int
    card: Card | None
    effect: CardEffect | None
    penalty: bool
    suit_before: Suit | None
    suit_after: Suit | None
    draw_blocked: bool = False
    messages: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.card is None


def legal_play_actions(state: GameState) -> list[PlayAction]:
    """Return one action per card in the active player's hand."""

    if rules.is_game_over(state):
        return []
    return [PlayAction(card_index=idx) for idx in range(len(state.active.hand))]


def _effect_message(state: GameState, effect: CardEffect) -> str:
    amount = 0
    if effect is CardEffect.DAMAGE_OPPONENT:
        amount = state.config.hearts_ace_damage
    elif effect is CardEffect.HEAL_SELF:
        amount = state.config.clubs_ace_heal
    return rules.EFFECT_MESSAGES[effect].format(amount=amount)


def apply_play_action(state: GameState, action: PlayAction, *, draw_blocked: bool = False) -> RoundReport:
    """Play a card for the active player and hand the turn over.

    The Ace effect resolves first, then the suit rule. Raises ``IllegalPlay``
    when the game is over or the index does not address a card in hand.
    """

    if rules.is_game_over(state):
        raise IllegalPlay("game is already over")

    player_index = state.active_player
    hand = state.active.hand
    if not 0 <= action.card_index < len(hand):
        raise IllegalPlay(f"card index {action.card_index} out of range for a hand of {len(hand)}")

    card = hand.pop(action.card_index)
    suit_before = state.current_suit
    messages: list[str] = [rules.DRAW_SKIPPED_MESSAGE] if draw_blocked else []

    effect = rules.resolve_effect(state, player_index, card)
    if effect is not None:
        messages.append(_effect_message(state, effect))

    valid = rules.apply_suit_rule(state, player_index, card)
    if not valid:
        messages.append(rules.PENALTY_MESSAGE.format(amount=state.config.suit_penalty))

    report = RoundReport(
        turn_index=state.turn_index,
        player_index=player_index,
        card=card,
        effect=effect,
        penalty=not valid,
        suit_before=suit_before,
        suit_after=state.current_suit,
        draw_blocked=draw_blocked,
        messages=tuple(messages),
    )
    state.flip_turn()
    return report


def pass_turn(state: GameState, *, draw_blocked: bool = False) -> RoundReport:
    """Record an empty-handed turn and hand the turn over."""

    if state.active.hand:
        raise IllegalPlay("cannot pass while holding cards")
    report = RoundReport(
        turn_index=state.turn_index,
        player_index=state.active_player,
        card=None,
        effect=None,
        penalty=False,
        suit_before=state.current_suit,
        suit_after=state.current_suit,
        draw_blocked=draw_blocked,
        messages=((rules.DRAW_SKIPPED_MESSAGE,) if draw_blocked else ()) + ("No cards to play.",),
    )
    state.flip_turn()
    return report
