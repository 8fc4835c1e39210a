"""Hard AI: greedy cheapest play and a pessimistic discard search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..cards import Card
from ..parade import Parade
from ..player import Player
from .base import Difficulty
from .evaluation import best_discard_pair, collected_value

# Cards of every colour each opponent is assumed to still pick up.
OPPONENT_PADDING = 2


@dataclass(slots=True)
class HardStrategy:
    """Minimises collected value now and assumes opponents keep collecting."""

    difficulty: Difficulty = Difficulty.HARD
    opponent_padding: int = OPPONENT_PADDING

    def choose_card(self, hand: Sequence[Card], parade: Parade) -> Card:
        best_card = hand[0]
        best_cost: int | None = None
        for card in hand:
            cost = collected_value(parade, card)
            if best_cost is None or cost < best_cost:
                best_cost = cost
                best_card = card
        return best_card

    def choose_discards(
        self,
        hand: Sequence[Card],
        collected: Sequence[Card],
        players: Sequence[Player],
        me: Player,
    ) -> tuple[int, int]:
        return best_discard_pair(
            hand,
            collected,
            players,
            me,
            opponent_padding=self.opponent_padding,
        )
