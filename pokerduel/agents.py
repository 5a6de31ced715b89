"""Players that supply card choices to the duel engine."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Protocol

from .cards import RandomSource
from .state import GameState


class Agent(Protocol):
    """Source of card choices for one seat.

    Both methods return a 0-based index into the seat's current hand.
    """

    def choose_reveal(self, state: GameState, player_index: int) -> int: ...

    def choose_play(self, state: GameState, player_index: int) -> int: ...


@dataclass(slots=True)
class RandomAgent:
    """Computer opponent picking uniformly among the cards in hand."""

    rng: RandomSource = field(default_factory=random.Random)

    def _pick(self, state: GameState, player_index: int) -> int:
        hand = state.players[player_index].hand
        if not hand:
            raise ValueError("cannot choose from an empty hand")
        return self.rng.randrange(len(hand))

    def choose_reveal(self, state: GameState, player_index: int) -> int:
        return self._pick(state, player_index)

    def choose_play(self, state: GameState, player_index: int) -> int:
        return self._pick(state, player_index)
