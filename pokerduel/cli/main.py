"""Typer entry-point wiring for the Poker Duel CLI."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import typer
from rich import box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from .. import rules, scoreboard
from ..actions import RoundReport
from ..agents import Agent, RandomAgent
from ..engine import DuelSession, GameResult
from ..logging_utils import LOG_LEVEL, get_logger, setup_logging
from ..rules import OpeningResult, Outcome
from ..state import DuelConfig, GameState
from .render import format_card, format_hand, render_status

logger = get_logger(__name__)


class Mode(str, Enum):
    PVP = "pvp"
    PVE = "pve"


@dataclass(slots=True)
class PlayerContext:
    """Runtime metadata describing each seat."""

    label: str
    role: str  # "Human" or "AI"


app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def _prompt_index(out: Console, count: int) -> int:
    """Ask for a 1-based choice until it falls in ``1..count``; return it 0-based."""

    while True:
        choice = IntPrompt.ask(f"Select (1-{count})", console=out)
        if 1 <= choice <= count:
            return choice - 1
        out.print(f"[red]Please enter a number between 1 and {count}.[/red]")


@dataclass(slots=True)
class ConsoleAgent:
    """Human seat reading choices from the terminal."""

    label: str
    out: Console

    def choose_reveal(self, state: GameState, player_index: int) -> int:
        hand = state.players[player_index].hand
        self.out.print(f"\n[bold]{self.label}'s hand:[/bold]")
        self.out.print(format_hand(hand))
        return _prompt_index(self.out, len(hand))

    def choose_play(self, state: GameState, player_index: int) -> int:
        hand = state.players[player_index].hand
        self.out.print(f"\n[bold]{self.label}[/bold], required suit: {rules.suit_display(state.current_suit)}")
        self.out.print(format_hand(hand))
        return _prompt_index(self.out, len(hand))


def _select_mode(out: Console) -> Mode:
    menu = Table.grid()
    menu.add_column(justify="left")
    menu.add_row("1. Player vs Player")
    menu.add_row("2. Player vs Computer")
    out.print(Panel(menu, title="[bold cyan]POKER DUEL[/bold cyan]", border_style="cyan", box=box.DOUBLE))
    answer = Prompt.ask("Select", choices=["1", "2"], console=out)
    return Mode.PVE if answer == "2" else Mode.PVP


def _players_for(mode: Mode, rng: random.Random) -> tuple[list[PlayerContext], list[Agent]]:
    if mode is Mode.PVE:
        contexts = [PlayerContext("Player 1", "Human"), PlayerContext("Computer", "AI")]
        agents: list[Agent] = [ConsoleAgent("Player 1", console), RandomAgent(rng)]
    else:
        contexts = [PlayerContext("Player 1", "Human"), PlayerContext("Player 2", "Human")]
        agents = [ConsoleAgent("Player 1", console), ConsoleAgent("Player 2", console)]
    return contexts, agents


def _describe_report(report: RoundReport, contexts: Sequence[PlayerContext]) -> list[str]:
    ctx = contexts[report.player_index]
    lines: list[str] = []
    if report.card is None:
        lines.append(f"{ctx.label} passes.")
    else:
        lines.append(f"{ctx.label} plays {format_card(report.card)}")
    lines.extend(report.messages)
    return lines


def _print_opening(opening: OpeningResult, contexts: Sequence[PlayerContext]) -> None:
    p1_card, p2_card = opening.reveals
    console.print(f"\n{contexts[0].label}'s card: {format_card(p1_card)}")
    console.print(f"{contexts[1].label}'s card: {format_card(p2_card)}")
    console.print(f"\n[bold green]{contexts[opening.first_player].label} goes first![/bold green]")


def _outcome_text(outcome: Outcome, contexts: Sequence[PlayerContext]) -> str:
    winner = outcome.winner_index
    if winner is None:
        return "[bold yellow]Draw![/bold yellow]"
    return f"[bold green]{contexts[winner].label} Wins![/bold green]"


def _render_game_result(result: GameResult, contexts: Sequence[PlayerContext]) -> Panel:
    body = Table.grid()
    body.add_column(justify="center")
    body.add_row(_outcome_text(result.outcome, contexts))
    body.add_row(f"{contexts[0].label} HP: {result.lives[0]}  |  {contexts[1].label} HP: {result.lives[1]}")
    body.add_row(f"Rounds played: {result.rounds}")
    return Panel(Align.center(body), title="GAME OVER", border_style="red", box=box.DOUBLE)


def _render_match_summary(
    history: scoreboard.MatchHistory,
    contexts: Sequence[PlayerContext],
    *,
    title: str = "Match Summary",
) -> Table:
    """Return the aggregated match summary table."""

    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("Player", justify="center")
    table.add_column("Role", justify="center")
    table.add_column("Wins", justify="right")
    table.add_column("Total HP", justify="right")

    totals = history.totals()
    best = max((total.wins for total in totals), default=0)
    for total in totals:
        ctx = contexts[total.player_index]
        label = ctx.label
        if best and total.wins == best:
            label = f"[bold blue]{label}[/bold blue]"
        table.add_row(label, ctx.role, str(total.wins), str(total.life_total))
    table.caption = (
        f"{len(history.games)} game(s), {history.draws} draw(s), "
        f"{history.average_rounds():.1f} rounds on average"
    )
    return table


@app.command()
def play(
    mode: Mode | None = typer.Option(None, case_sensitive=False, help="pvp or pve; omit to choose from the menu."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible games (omit for randomness)."),
    starting_life: int = typer.Option(15, min=1, help="Life each player starts with."),
    log_level: str = typer.Option(LOG_LEVEL, help="Logging level (DEBUG, INFO, WARNING, ERROR)."),
) -> None:
    """Play Poker Duel in the terminal."""

    setup_logging(log_level)
    config = DuelConfig(starting_life=starting_life)

    if mode is None:
        mode = _select_mode(console)
    rng = random.Random(seed)
    contexts, agents = _players_for(mode, rng)
    history = scoreboard.MatchHistory()

    def on_round(game_state: GameState, report: RoundReport) -> None:
        console.rule(f"Turn {report.turn_index + 1}")
        messages = _describe_report(report, contexts)
        console.print(
            render_status(
                game_state,
                [ctx.label for ctx in contexts],
                messages=messages,
            )
        )

    while True:
        session = DuelSession(
            agents,
            config=config,
            rng=rng,
            vs_computer=mode is Mode.PVE,
            on_round=on_round,
        )
        console.print("\n[bold]=== INITIAL CARD SELECT ===[/bold]")
        opening = session.resolve_opening()
        _print_opening(opening, contexts)
        result = session.run()
        console.print(_render_game_result(result, contexts))
        history.record_result(result)
        if not Confirm.ask("Play again?", default=False, console=console):
            break

    console.print(_render_match_summary(history, contexts))


@app.command()
def simulate(
    games: int = typer.Option(10, min=1, help="Number of computer vs computer games."),
    seed: int | None = typer.Option(None, help="Random seed for the simulation."),
    starting_life: int = typer.Option(15, min=1, help="Life each player starts with."),
    log_level: str = typer.Option("WARNING", help="Logging level (DEBUG, INFO, WARNING, ERROR)."),
) -> None:
    """Run computer vs computer duels and summarise the results."""

    setup_logging(log_level)
    config = DuelConfig(starting_life=starting_life)
    rng = random.Random(seed)
    contexts = [PlayerContext("Computer 1", "AI"), PlayerContext("Computer 2", "AI")]
    history = scoreboard.MatchHistory()

    for game_number in range(1, games + 1):
        session = DuelSession([RandomAgent(rng), RandomAgent(rng)], config=config, rng=rng, vs_computer=True)
        result = session.run()
        history.record_result(result)
        logger.debug("game %d finished: %s", game_number, result.outcome.value)

    console.print(_render_match_summary(history, contexts, title="Simulation Summary"))


def main() -> None:
    """Entry-point for ``python -m pokerduel.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
