"""Card abstractions and the shared duel deck."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Protocol, Sequence


class RandomSource(Protocol):
    """Minimal random capability needed by the deck and computer players."""

    def randrange(self, stop: int) -> int:
        """Return a uniformly chosen integer in ``[0, stop)``."""


class Suit(str, Enum):
    """Suits of a Poker Duel deck, including the Joker pseudo-suit."""

    HEARTS = "H"
    SPADES = "S"
    DIAMONDS = "D"
    CLUBS = "C"
    JOKER = "JOKER"

    @classmethod
    def standard(cls) -> tuple["Suit", ...]:
        """Return the four real suits in deck construction order."""

        return (cls.HEARTS, cls.SPADES, cls.DIAMONDS, cls.CLUBS)


class Rank(str, Enum):
    """Card ranks, Ace low."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @property
    def value_points(self) -> int:
        if self is Rank.ACE:
            return 1
        if self in (Rank.JACK, Rank.QUEEN, Rank.KING):
            return 10
        return int(self.value)


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a physical card.

    ``copy`` tells apart cards that share a face, which in a single deck only
    happens for the two Jokers.
    """

    suit: Suit
    rank: Rank | None
    copy: int = 0

    @classmethod
    def joker(cls, copy: int = 0) -> "Card":
        return cls(suit=Suit.JOKER, rank=None, copy=copy)

    @property
    def is_joker(self) -> bool:
        return self.suit is Suit.JOKER

    @property
    def is_ace(self) -> bool:
        return self.rank is Rank.ACE

    @property
    def value(self) -> int:
        """Comparison value: Ace 1, faces 10, numerics face value, Joker 0."""

        if self.rank is None:
            return 0
        return self.rank.value_points

    def label(self) -> str:
        """Plain text label such as ``HA``, ``D10`` or ``JOKER``."""

        if self.is_joker or self.rank is None:
            return "JOKER"
        return f"{self.suit.value}{self.rank.value}"

    def __str__(self) -> str:
        return self.label()


def iter_full_deck() -> Iterator[Card]:
    """Yield the 54 cards of a fresh, unshuffled deck."""

    for suit in Suit.standard():
        for rank in Rank:
            yield Card(suit=suit, rank=rank)
    yield Card.joker(copy=0)
    yield Card.joker(copy=1)


class Deck:
    """Draw pile shared by both players.

    Cards are drawn from the front and the deck is never replenished.
    """

    def __init__(self, rng: RandomSource | None = None, *, shuffle: bool = True) -> None:
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._cards: List[Card] = list(iter_full_deck())
        if shuffle:
            self.shuffle()

    @classmethod
    def from_cards(cls, cards: Iterable[Card], rng: RandomSource | None = None) -> "Deck":
        """Return a deck holding ``cards`` in the given order, unshuffled."""

        deck = cls(rng, shuffle=False)
        deck._cards = list(cards)
        return deck

    def shuffle(self) -> None:
        """Fisher-Yates shuffle driven by the injected random source."""

        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randrange(i + 1)
            cards[i], cards[j] = cards[j], cards[i]

    def draw(self) -> Card | None:
        """Remove and return the front card, or ``None`` when empty."""

        if not self._cards:
            return None
        return self._cards.pop(0)

    @property
    def count(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def peek_all(self) -> Sequence[Card]:
        """Return a snapshot of the remaining cards, front first."""

        return tuple(self._cards)


def format_cards(cards: Sequence[Card]) -> str:
    return " ".join(card.label() for card in cards)
