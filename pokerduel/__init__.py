"""Top-level package for the Poker Duel rules engine."""

from . import actions, agents, cards, engine, rules, scoreboard, state

__all__ = [
    "actions",
    "agents",
    "cards",
    "engine",
    "rules",
    "scoreboard",
    "state",
]
