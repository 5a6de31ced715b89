"""Helpers for tracking results across several duels in one process."""

from __future__ import annotations

from dataclasses import dataclass, field

from .engine import GameResult
from .rules import Outcome

__all__ = ["GameSummary", "PlayerMatchTotal", "MatchHistory"]


@dataclass(frozen=True, slots=True)
class GameSummary:
    """Summary captured after a single duel."""

    game_number: int
    outcome: Outcome
    lives: tuple[int, int]
    rounds: int

    @classmethod
    def from_result(cls, game_number: int, result: GameResult) -> "GameSummary":
        return cls(
            game_number=game_number,
            outcome=result.outcome,
            lives=result.lives,
            rounds=result.rounds,
        )


@dataclass(frozen=True, slots=True)
class PlayerMatchTotal:
    """Aggregate totals for one seat across all recorded duels."""

    player_index: int
    wins: int
    life_total: int


@dataclass(slots=True)
class MatchHistory:
    """Mutable tracker that accumulates duel summaries."""

    num_players: int = 2
    games: list[GameSummary] = field(default_factory=list)
    _wins: list[int] = field(init=False, repr=False)
    _life: list[int] = field(init=False, repr=False)
    _draws: int = field(init=False, repr=False, default=0)
    _rounds: int = field(init=False, repr=False, default=0)

    def __post_init__(self) -> None:
        if self.num_players != 2:
            raise ValueError("Poker Duel is played by exactly two players")
        self._wins = [0 for _ in range(self.num_players)]
        self._life = [0 for _ in range(self.num_players)]

    def record(self, summary: GameSummary) -> None:
        """Record ``summary`` and update cumulative totals."""

        if len(summary.lives) != self.num_players:
            raise ValueError("life count does not match number of players")
        if summary.rounds < 0:
            raise ValueError("rounds must not be negative")
        self.games.append(summary)
        self._rounds += summary.rounds
        for idx, life in enumerate(summary.lives):
            self._life[idx] += life
        winner = summary.outcome.winner_index
        if winner is None:
            self._draws += 1
        else:
            self._wins[winner] += 1

    def record_result(self, result: GameResult) -> GameSummary:
        summary = GameSummary.from_result(len(self.games) + 1, result)
        self.record(summary)
        return summary

    @property
    def draws(self) -> int:
        return self._draws

    def average_rounds(self) -> float:
        if not self.games:
            return 0.0
        return self._rounds / len(self.games)

    def totals(self) -> list[PlayerMatchTotal]:
        """Return the cumulative totals for each player in seating order."""

        return [
            PlayerMatchTotal(
                player_index=idx,
                wins=self._wins[idx],
                life_total=self._life[idx],
            )
            for idx in range(self.num_players)
        ]
