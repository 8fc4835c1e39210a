"""Per-player hand and collected pile."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

from .cards import Card, colours_in, total_value

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .ai import Strategy


@dataclass(eq=False, slots=True)
class Player:
    """A seated player; ``strategy`` is ``None`` for human-controlled seats."""

    id: int
    name: str
    hand: list[Card] = field(default_factory=list)
    collected: list[Card] = field(default_factory=list)
    strategy: "Strategy | None" = None

    @property
    def is_ai(self) -> bool:
        return self.strategy is not None

    def add_to_hand(self, card: Card) -> None:
        self.hand.append(card)

    def take_from_hand(self, index: int) -> Card:
        return self.hand.pop(index)

    def add_collected(self, cards: Iterable[Card]) -> None:
        self.collected.extend(cards)

    def collected_colour_count(self) -> int:
        return len(colours_in(self.collected))

    def collected_value(self) -> int:
        return total_value(self.collected)

    def __repr__(self) -> str:
        kind = "AI" if self.is_ai else "Human"
        return f"Player(id={self.id}, name={self.name!r}, {kind})"
