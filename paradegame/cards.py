"""Card abstractions and helpers for Parade."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Sequence

DEFAULT_CARDS_PER_COLOUR = 11


class Colour(str, Enum):
    """Enumeration of the six parade colours in deck order."""

    BLUE = "BLUE"
    ORANGE = "ORANGE"
    GREEN = "GREEN"
    GREY = "GREY"
    PURPLE = "PURPLE"
    RED = "RED"

    @property
    def order(self) -> int:
        """Return the position of the colour in declaration order."""

        return _COLOUR_ORDER[self]


_COLOUR_ORDER = {colour: idx for idx, colour in enumerate(Colour)}
NUM_COLOURS = len(_COLOUR_ORDER)


@dataclass(eq=False, slots=True)
class Card:
    """A physical card; two cards with the same face are still distinct."""

    colour: Colour
    value: int
    flipped: bool = False

    def flip(self) -> None:
        """Turn the card face down for scoring, making it worth one point."""

        self.value = 1
        self.flipped = True

    def snapshot(self) -> "Card":
        return Card(self.colour, self.value, self.flipped)

    def label(self) -> str:
        """Create a plain display label such as ``BLUE 4``."""

        prefix = "FLIPPED" if self.flipped else self.colour.value
        return f"{prefix} {self.value}"

    def __repr__(self) -> str:
        return f"Card({self.label()})"


def iter_full_deck(cards_per_colour: int = DEFAULT_CARDS_PER_COLOUR) -> Iterator[Card]:
    """Yield one card for every colour and value combination."""

    for colour in Colour:
        for value in range(cards_per_colour):
            yield Card(colour, value)


def sort_key(card: Card) -> tuple[int, int]:
    return (card.colour.order, card.value)


def group_by_colour(cards: Iterable[Card]) -> dict[Colour, list[Card]]:
    """Group ``cards`` by colour in colour order, sorting each group by value."""

    grouped: dict[Colour, list[Card]] = {}
    for card in sorted(cards, key=sort_key):
        grouped.setdefault(card.colour, []).append(card)
    return grouped


def colours_in(cards: Iterable[Card]) -> set[Colour]:
    return {card.colour for card in cards}


def total_value(cards: Iterable[Card]) -> int:
    return sum(card.value for card in cards)


def format_cards(cards: Sequence[Card]) -> str:
    return ", ".join(card.label() for card in cards)
