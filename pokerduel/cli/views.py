"""Composable view primitives for the Poker Duel CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, Set

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from .. import rules
from ..cards import Card
from ..state import GameState


@dataclass(slots=True)
class StatusView:
    """Renderable summarising lives, deck, enforced suit and recent messages."""

    state: GameState
    labels: Sequence[str]
    reveal_players: Set[int]
    messages: Sequence[str]
    card_formatter: Callable[[Card], str]

    def _hand_markup(self, cards: list[Card], visible: bool) -> str:
        if not visible:
            return f"{len(cards)} card(s)"
        if not cards:
            return "-"
        return " ".join(self.card_formatter(card) for card in cards)

    def _metadata_panel(self) -> Panel:
        state = self.state
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_row(f"[cyan]Deck[/cyan]: {state.deck.count} card(s)")
        grid.add_row(f"[cyan]Required suit[/cyan]: {rules.suit_display(state.current_suit)}")
        grid.add_row(f"[cyan]Next turn[/cyan]: {self.labels[state.active_player]}")
        return Panel(grid, title="Table", box=box.SQUARE, border_style="blue")

    def render(self) -> RenderableType:
        table = Table(box=box.ROUNDED, expand=True)
        table.add_column("Player", justify="left", style="bold")
        table.add_column("HP", justify="right")
        table.add_column("Hand", justify="left")

        for idx, player in enumerate(self.state.players):
            name = self.labels[idx] if idx < len(self.labels) else f"Player {idx + 1}"
            if idx == self.state.active_player:
                name = f"[bold yellow]{name}[/bold yellow]"
            life = str(player.life) if player.life > 0 else f"[red]{player.life}[/red]"
            table.add_row(name, life, self._hand_markup(player.hand, idx in self.reveal_players))

        components: list[RenderableType] = [table, self._metadata_panel()]
        if self.messages:
            log = Table.grid(expand=True)
            log.add_column(justify="left")
            for line in self.messages:
                log.add_row(f"[bold magenta]![/bold magenta] {line}")
            components.append(Panel(log, title="Events", box=box.SIMPLE, border_style="magenta"))
        return Group(*components)
