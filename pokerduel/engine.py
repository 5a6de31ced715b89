"""Turn orchestration for a single Poker Duel session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from . import actions, rules
from .actions import PlayAction, RoundReport
from .agents import Agent
from .cards import Deck, RandomSource
from .logging_utils import get_logger
from .rules import IllegalPlay, OpeningResult, Outcome
from .state import PLAYER_ONE, PLAYER_TWO, DuelConfig, GameState, new_game_state

__all__ = ["GameResult", "DuelSession"]

logger = get_logger(__name__)

RoundCallback = Callable[[GameState, RoundReport], None]


@dataclass(frozen=True, slots=True)
class GameResult:
    """Final summary returned by ``DuelSession.run``."""

    outcome: Outcome
    lives: tuple[int, int]
    rounds: int
    opening: OpeningResult

    @property
    def winner_index(self) -> int | None:
        return self.outcome.winner_index


class DuelSession:
    """Drives the opening reveal and the alternating rounds of one duel.

    The session is the only mutator of its ``GameState``. Agents are asked
    for 0-based indices; an out-of-range answer raises ``IllegalPlay`` and
    leaves the state untouched.
    """

    def __init__(
        self,
        agents: Sequence[Agent],
        *,
        config: DuelConfig | None = None,
        rng: RandomSource | None = None,
        deck: Deck | None = None,
        vs_computer: bool = False,
        on_round: RoundCallback | None = None,
    ) -> None:
        if len(agents) != 2:
            raise ValueError("a duel needs exactly two agents")
        self.agents = list(agents)
        self.state: GameState = new_game_state(config, rng=rng, deck=deck, vs_computer=vs_computer)
        self.on_round = on_round
        self.opening: OpeningResult | None = None
        self.reports: list[RoundReport] = []

    def deal_opening_hands(self) -> None:
        """Deal the opening hands one card at a time, player one first."""

        state = self.state
        for _ in range(state.config.opening_hand_size):
            for player in state.players:
                card = state.deck.draw()
                if card is not None:
                    player.hand.append(card)

    def resolve_opening(self) -> OpeningResult:
        """Deal, collect both reveal cards and decide who moves first.

        The reveal cards leave the game for good.
        """

        if self.opening is not None:
            raise IllegalPlay("opening already resolved")
        state = self.state
        self.deal_opening_hands()
        if not all(player.hand for player in state.players):
            raise ValueError("deck too small to deal opening hands")

        choices = []
        for idx in (PLAYER_ONE, PLAYER_TWO):
            choice = self.agents[idx].choose_reveal(state, idx)
            hand = state.players[idx].hand
            if not 0 <= choice < len(hand):
                raise IllegalPlay(f"reveal index {choice} out of range for a hand of {len(hand)}")
            choices.append(choice)

        p1_card = state.players[PLAYER_ONE].hand.pop(choices[0])
        p2_card = state.players[PLAYER_TWO].hand.pop(choices[1])
        first = rules.compare_reveals(p1_card, p2_card)
        state.active_player = first
        self.opening = OpeningResult(reveals=(p1_card, p2_card), first_player=first)
        logger.debug("opening reveals %s vs %s, player %d starts", p1_card, p2_card, first + 1)
        return self.opening

    def is_over(self) -> bool:
        return rules.is_game_over(self.state)

    def play_round(self) -> RoundReport:
        """Run one draw phase and one play by the active player."""

        state = self.state
        if self.opening is None:
            raise IllegalPlay("resolve the opening before playing rounds")
        if self.is_over():
            raise IllegalPlay("game is already over")

        blocked = rules.draw_phase(state)
        player_index = state.active_player
        if not state.active.hand:
            report = actions.pass_turn(state, draw_blocked=blocked)
        else:
            choice = self.agents[player_index].choose_play(state, player_index)
            report = actions.apply_play_action(state, PlayAction(choice), draw_blocked=blocked)

        self.reports.append(report)
        logger.debug(
            "turn %d: player %d played %s (effect=%s, penalty=%s) lives=%s deck=%d",
            report.turn_index,
            player_index + 1,
            report.card if report.card is not None else "nothing",
            report.effect.value if report.effect is not None else None,
            report.penalty,
            state.lives,
            state.deck.count,
        )
        if self.on_round is not None:
            self.on_round(state, report)
        return report

    def result(self) -> GameResult:
        if self.opening is None:
            raise ValueError("opening has not been resolved")
        outcome = rules.determine_outcome(self.state)
        return GameResult(
            outcome=outcome,
            lives=self.state.lives,
            rounds=len(self.reports),
            opening=self.opening,
        )

    def run(self) -> GameResult:
        """Play the whole duel and return its result."""

        if self.opening is None:
            self.resolve_opening()
        while not self.is_over():
            self.play_round()
        result = self.result()
        logger.info(
            "game over after %d rounds: %s (lives %d/%d)",
            result.rounds,
            result.outcome.value,
            *result.lives,
        )
        return result
