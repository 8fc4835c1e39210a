"""Strategy contract shared by the AI difficulty tiers."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, Sequence

from ..cards import Card
from ..parade import Parade
from ..player import Player


class Difficulty(str, Enum):
    """Selectable AI difficulty tiers."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, name: str) -> "Difficulty":
        """Return the tier for ``name``; unknown names fall back to medium."""

        try:
            return cls(name.strip().lower())
        except ValueError:
            return cls.MEDIUM


class Strategy(Protocol):
    """Decision interface used by AI-controlled seats.

    Implementations must only read their arguments; mutating the hand, the
    collected piles or the parade is left to the rules layer.
    """

    difficulty: Difficulty

    def choose_card(self, hand: Sequence[Card], parade: Parade) -> Card:
        """Return the card from ``hand`` to play next."""

    def choose_discards(
        self,
        hand: Sequence[Card],
        collected: Sequence[Card],
        players: Sequence[Player],
        me: Player,
    ) -> tuple[int, int]:
        """Return two distinct indices into ``hand`` to discard."""
