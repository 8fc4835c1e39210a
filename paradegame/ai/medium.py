"""Medium AI: second-cheapest play and a majority-aware discard search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..cards import Card
from ..parade import Parade
from ..player import Player
from .base import Difficulty
from .evaluation import best_discard_pair, collected_value, rank_by_cost


@dataclass(slots=True)
class MediumStrategy:
    """Plays the card with the second-lowest collected value."""

    difficulty: Difficulty = Difficulty.MEDIUM

    def choose_card(self, hand: Sequence[Card], parade: Parade) -> Card:
        ranked = rank_by_cost(hand, parade, collected_value)
        return ranked[1] if len(ranked) > 1 else ranked[0]

    def choose_discards(
        self,
        hand: Sequence[Card],
        collected: Sequence[Card],
        players: Sequence[Player],
        me: Player,
    ) -> tuple[int, int]:
        return best_discard_pair(hand, collected, players, me)
