"""Core game state data structures for Poker Duel."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .cards import Card, Deck, RandomSource, Suit

PLAYER_ONE = 0
PLAYER_TWO = 1


@dataclass(slots=True)
class DuelConfig:
    """Runtime configuration for a single duel."""

    starting_life: int = 15
    hand_target: int = 3
    opening_hand_size: int = 4
    suit_penalty: int = 2
    hearts_ace_damage: int = 2
    clubs_ace_heal: int = 2

    def __post_init__(self) -> None:
        if self.starting_life <= 0:
            raise ValueError("starting_life must be positive")
        if self.hand_target <= 0:
            raise ValueError("hand_target must be positive")
        if self.opening_hand_size <= 0:
            raise ValueError("opening_hand_size must be positive")
        if 2 * self.opening_hand_size > 54:
            raise ValueError("opening hands exceed the deck size")
        for name in ("suit_penalty", "hearts_ace_damage", "clubs_ace_heal"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")


@dataclass(slots=True)
class PlayerState:
    """State tracked for each seat."""

    life: int
    hand: List[Card] = field(default_factory=list)


@dataclass(slots=True)
class GameState:
    """Mutable duel session owned by the orchestrator."""

    deck: Deck
    players: List[PlayerState]
    config: DuelConfig = field(default_factory=DuelConfig)
    current_suit: Suit | None = None
    active_player: int = PLAYER_ONE
    vs_computer: bool = False
    block_draw: bool = False
    # Set by the Spades Ace; nothing reads it yet.
    restrict_numbers: bool = False
    turn_index: int = 0

    @property
    def is_player_one_turn(self) -> bool:
        return self.active_player == PLAYER_ONE

    @property
    def active(self) -> PlayerState:
        return self.players[self.active_player]

    @property
    def lives(self) -> tuple[int, int]:
        return self.players[PLAYER_ONE].life, self.players[PLAYER_TWO].life

    def flip_turn(self) -> None:
        self.active_player = 1 - self.active_player
        self.turn_index += 1


def new_game_state(
    config: DuelConfig | None = None,
    *,
    rng: RandomSource | None = None,
    deck: Deck | None = None,
    vs_computer: bool = False,
) -> GameState:
    """Return a fresh session with a shuffled deck and empty hands."""

    config = config if config is not None else DuelConfig()
    if deck is None:
        deck = Deck(rng)
    players = [PlayerState(life=config.starting_life) for _ in range(2)]
    return GameState(deck=deck, players=players, config=config, vs_computer=vs_computer)
