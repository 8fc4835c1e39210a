"""Easy AI: plays loosely and discards its highest cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..cards import Card
from ..parade import Parade
from ..player import Player
from .base import Difficulty
from .evaluation import collected_count, rank_by_cost

# Rank of the card to play among candidates ordered by cards collected.
PLAY_RANK = 2


@dataclass(slots=True)
class EasyStrategy:
    """Prefers the third-least collecting card and dumps high values."""

    difficulty: Difficulty = Difficulty.EASY

    def choose_card(self, hand: Sequence[Card], parade: Parade) -> Card:
        ranked = rank_by_cost(hand, parade, collected_count)
        return ranked[min(PLAY_RANK, len(ranked) - 1)]

    def choose_discards(
        self,
        hand: Sequence[Card],
        collected: Sequence[Card],
        players: Sequence[Player],
        me: Player,
    ) -> tuple[int, int]:
        first, second = 0, 1
        if hand[second].value > hand[first].value:
            first, second = second, first
        for idx in range(2, len(hand)):
            value = hand[idx].value
            if value > hand[first].value:
                first, second = idx, first
            elif value > hand[second].value:
                second = idx
        return first, second
