"""The parade line and the rule that decides which cards a play collects."""

from __future__ import annotations

from typing import Iterable, Iterator

from .cards import Card


def _split_collected(cards: list[Card], played: Card) -> tuple[list[Card], list[Card]]:
    """Return ``(collected, survivors)`` for ``played`` sitting last in ``cards``."""

    size = len(cards)
    value = played.value
    if not (size > value or (value == 0 and size > 0)):
        return [], list(cards)

    # Everything from ``safe_start`` onwards is the safe zone, played card included.
    safe_start = size - 1 - value
    collected: list[Card] = []
    survivors: list[Card] = []
    for pos, candidate in enumerate(cards):
        if pos < safe_start and (candidate.colour is played.colour or candidate.value <= value):
            collected.append(candidate)
        else:
            survivors.append(candidate)
    return collected, survivors


class Parade:
    """Ordered line of face-up cards shared by all players."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    def add_card(self, card: Card) -> None:
        self._cards.append(card)

    def apply_play(self, played_card: Card) -> list[Card]:
        """Remove and return the cards collected by ``played_card``.

        ``played_card`` must already be the last card of the parade. The
        collected cards are returned in parade order and the survivors keep
        their relative order.
        """

        if not self._cards or self._cards[-1] is not played_card:
            raise ValueError("played card must be appended to the parade before it is applied")
        collected, survivors = _split_collected(self._cards, played_card)
        self._cards = survivors
        return collected

    def simulate_apply(self, candidate: Card) -> list[Card]:
        """Return what ``candidate`` would collect, leaving the parade untouched."""

        trial = list(self._cards)
        trial.append(candidate)
        collected, _ = _split_collected(trial, candidate)
        return collected

    preview = simulate_apply

    def copy(self) -> "Parade":
        return Parade(self._cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))

    def __repr__(self) -> str:
        return f"Parade([{', '.join(card.label() for card in self._cards)}])"
