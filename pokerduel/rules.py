"""Rule utilities for Poker Duel: draws, effects, suit following and scoring."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, List

from .cards import Card, Deck, Rank, Suit
from .state import PLAYER_ONE, PLAYER_TWO, GameState

__all__ = [
    "CardEffect",
    "Outcome",
    "IllegalPlay",
    "OpeningResult",
    "EFFECT_MESSAGES",
    "PENALTY_MESSAGE",
    "DRAW_SKIPPED_MESSAGE",
    "SUIT_PRIORITY",
    "refill_hand",
    "draw_phase",
    "resolve_effect",
    "is_valid_follow",
    "apply_suit_rule",
    "compare_reveals",
    "is_game_over",
    "determine_outcome",
    "suit_display",
]


class CardEffect(str, Enum):
    """Special effects triggered by the four Aces."""

    DAMAGE_OPPONENT = "damage_opponent"
    BLOCK_DRAW = "block_draw"
    RESTRICT_NUMBERS = "restrict_numbers"
    HEAL_SELF = "heal_self"


class Outcome(str, Enum):
    """Final result of a duel."""

    PLAYER_ONE = "player_one"
    PLAYER_TWO = "player_two"
    DRAW = "draw"

    @property
    def winner_index(self) -> int | None:
        if self is Outcome.PLAYER_ONE:
            return PLAYER_ONE
        if self is Outcome.PLAYER_TWO:
            return PLAYER_TWO
        return None


class IllegalPlay(RuntimeError):
    """Raised when a player attempts an impossible play."""


_ACE_EFFECTS: Final[dict[Suit, CardEffect]] = {
    Suit.HEARTS: CardEffect.DAMAGE_OPPONENT,
    Suit.DIAMONDS: CardEffect.BLOCK_DRAW,
    Suit.SPADES: CardEffect.RESTRICT_NUMBERS,
    Suit.CLUBS: CardEffect.HEAL_SELF,
}

EFFECT_MESSAGES: Final[dict[CardEffect, str]] = {
    CardEffect.DAMAGE_OPPONENT: "Opponent loses {amount} HP!",
    CardEffect.BLOCK_DRAW: "Opponent's draw blocked!",
    CardEffect.RESTRICT_NUMBERS: "Opponent restricted to low cards!",
    CardEffect.HEAL_SELF: "Player gains {amount} HP!",
}

PENALTY_MESSAGE: Final[str] = "Wrong suit, lost {amount} HP!"
DRAW_SKIPPED_MESSAGE: Final[str] = "Player 2 skips this draw."

# Highest first. Jokers rank below every real suit.
SUIT_PRIORITY: Final[tuple[Suit, ...]] = (
    Suit.SPADES,
    Suit.HEARTS,
    Suit.DIAMONDS,
    Suit.CLUBS,
    Suit.JOKER,
)


@dataclass(frozen=True, slots=True)
class OpeningResult:
    """Reveal cards and the player who moves first."""

    reveals: tuple[Card, Card]
    first_player: int


def refill_hand(hand: List[Card], deck: Deck, target: int = 3) -> list[Card]:
    """Draw into ``hand`` until it holds ``target`` cards or the deck runs out."""

    drawn: list[Card] = []
    while len(hand) < target and deck.count > 0:
        card = deck.draw()
        if card is None:  # pragma: no cover - count guard above
            break
        hand.append(card)
        drawn.append(card)
    return drawn


def draw_phase(state: GameState) -> bool:
    """Refill both hands; returns ``True`` when player two's refill was blocked.

    Player one always refills. Player two skips exactly one refill while
    ``block_draw`` is set, and the flag is cleared either way.
    """

    target = state.config.hand_target
    refill_hand(state.players[PLAYER_ONE].hand, state.deck, target)
    blocked = state.block_draw
    if not blocked:
        refill_hand(state.players[PLAYER_TWO].hand, state.deck, target)
    state.block_draw = False
    return blocked


def resolve_effect(state: GameState, player_index: int, card: Card) -> CardEffect | None:
    """Apply the Ace effect of ``card`` played by ``player_index``.

    Jokers and non-Ace cards have no effect. Lives may drop below zero; the
    termination check deals with that.
    """

    if card.is_joker or card.rank is not Rank.ACE:
        return None

    effect = _ACE_EFFECTS[card.suit]
    config = state.config
    if effect is CardEffect.DAMAGE_OPPONENT:
        state.players[1 - player_index].life -= config.hearts_ace_damage
    elif effect is CardEffect.BLOCK_DRAW:
        state.block_draw = True
    elif effect is CardEffect.RESTRICT_NUMBERS:
        state.restrict_numbers = True
    elif effect is CardEffect.HEAL_SELF:
        state.players[player_index].life += config.clubs_ace_heal
    return effect


def is_valid_follow(current_suit: Suit | None, card: Card) -> bool:
    """Return ``True`` when ``card`` may be played on ``current_suit``."""

    if card.is_joker or current_suit is None:
        return True
    return card.suit is current_suit


def apply_suit_rule(state: GameState, player_index: int, card: Card) -> bool:
    """Penalise a suit break and update the enforced suit.

    Returns ``True`` for a valid follow. A valid Joker leaves the enforced
    suit untouched; any other card becomes the new enforced suit.
    """

    valid = is_valid_follow(state.current_suit, card)
    if not valid:
        state.players[player_index].life -= state.config.suit_penalty
        state.current_suit = card.suit
    elif not card.is_joker:
        state.current_suit = card.suit
    return valid


def _reveal_key(card: Card) -> tuple[int, int]:
    return card.value, len(SUIT_PRIORITY) - SUIT_PRIORITY.index(card.suit)


def compare_reveals(player_one_card: Card, player_two_card: Card) -> int:
    """Return the index of the player who moves first.

    Higher value wins, ties are broken by suit priority and an exact tie
    favours player one.
    """

    if _reveal_key(player_one_card) >= _reveal_key(player_two_card):
        return PLAYER_ONE
    return PLAYER_TWO


def is_game_over(state: GameState) -> bool:
    """Return ``True`` when a life total is exhausted or every card is spent."""

    p1_life, p2_life = state.lives
    if p1_life <= 0 or p2_life <= 0:
        return True
    return state.deck.count == 0 and all(not player.hand for player in state.players)


def determine_outcome(state: GameState) -> Outcome:
    """Return the result of a finished duel."""

    if not is_game_over(state):
        raise ValueError("winner has not been determined")
    p1_life, p2_life = state.lives
    if p1_life <= 0:
        return Outcome.PLAYER_TWO
    if p2_life <= 0:
        return Outcome.PLAYER_ONE
    if p1_life == p2_life:
        return Outcome.DRAW
    return Outcome.PLAYER_ONE if p1_life > p2_life else Outcome.PLAYER_TWO


def suit_display(suit: Suit | None) -> str:
    """Render the enforced suit, ``ANY`` when unset."""

    if suit is None or suit is Suit.JOKER:
        return "ANY"
    return suit.value
