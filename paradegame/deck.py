"""Draw deck for Parade."""

from __future__ import annotations

import random

from .cards import DEFAULT_CARDS_PER_COLOUR, Card, iter_full_deck


class Deck:
    """A deck shuffled once at construction and drawn through a cursor."""

    def __init__(
        self,
        cards_per_colour: int = DEFAULT_CARDS_PER_COLOUR,
        rng: random.Random | None = None,
    ) -> None:
        if cards_per_colour <= 0:
            raise ValueError("cards_per_colour must be positive")
        self._cards = list(iter_full_deck(cards_per_colour))
        (rng or random.Random()).shuffle(self._cards)
        self._cursor = 0

    def draw(self) -> Card | None:
        """Return the next card, or ``None`` once the deck is exhausted."""

        if self._cursor >= len(self._cards):
            return None
        card = self._cards[self._cursor]
        self._cursor += 1
        return card

    def remaining_count(self) -> int:
        return len(self._cards) - self._cursor

    @property
    def total(self) -> int:
        return len(self._cards)

    @property
    def drawn_count(self) -> int:
        return self._cursor

    @property
    def is_empty(self) -> bool:
        return self._cursor >= len(self._cards)

    def __len__(self) -> int:
        return self.remaining_count()
