"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Card, Suit
from ..state import GameState
from .views import StatusView

_SUIT_COLOURS = {
    Suit.SPADES: "cyan",
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "magenta",
    Suit.CLUBS: "green",
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    if card.is_joker:
        return "[bold yellow]JOKER[/bold yellow]"
    colour = _SUIT_COLOURS.get(card.suit, "white")
    return f"[{colour}]{card.label()}[/{colour}]"


def format_hand(hand: Sequence[Card]) -> str:
    """Return the numbered hand listing, e.g. ``[1]HA  [2]S7``."""

    if not hand:
        return "[dim]empty[/dim]"
    return "  ".join(f"[bold][{idx}][/bold]{format_card(card)}" for idx, card in enumerate(hand, start=1))


def render_status(
    state: GameState,
    labels: Sequence[str],
    *,
    messages: Sequence[str] = (),
    reveal_players: Iterable[int] | None = None,
    title: str = "Poker Duel",
) -> RenderableType:
    """Return a Rich panel describing the current duel state."""

    view = StatusView(
        state=state,
        labels=labels,
        reveal_players=set(reveal_players or set()),
        messages=tuple(messages),
        card_formatter=format_card,
    )
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")
