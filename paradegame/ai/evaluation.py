"""Heuristic evaluators used by the AI strategies."""

from __future__ import annotations

from itertools import combinations
from typing import Callable, Sequence

import numpy as np

from ..cards import NUM_COLOURS, Card
from ..parade import Parade
from ..player import Player


def collected_count(parade: Parade, card: Card) -> int:
    """Return how many cards ``card`` would collect from ``parade``."""

    return len(parade.simulate_apply(card))


def collected_value(parade: Parade, card: Card) -> int:
    """Return the summed value of the cards ``card`` would collect."""

    return sum(collected.value for collected in parade.simulate_apply(card))


def rank_by_cost(
    hand: Sequence[Card],
    parade: Parade,
    cost: Callable[[Parade, Card], int],
) -> list[Card]:
    """Return ``hand`` stably sorted by ascending simulated cost."""

    scored = [(cost(parade, card), idx) for idx, card in enumerate(hand)]
    scored.sort()
    return [hand[idx] for _, idx in scored]


def _colour_vector(cards: Sequence[Card]) -> np.ndarray:
    counts = np.zeros(NUM_COLOURS, dtype=np.int64)
    for card in cards:
        counts[card.colour.order] += 1
    return counts


def _opponent_counts(players: Sequence[Player], me: Player, padding: int) -> np.ndarray:
    rows = [_colour_vector(player.collected) + padding for player in players if player is not me]
    if not rows:
        return np.zeros((0, NUM_COLOURS), dtype=np.int64)
    return np.vstack(rows)


def pile_cost(pile: Sequence[Card], opponent_counts: np.ndarray) -> int:
    """Score ``pile`` assuming it flips every colour no opponent leads."""

    mine = _colour_vector(pile)
    if opponent_counts.shape[0]:
        flips = ~(opponent_counts > mine).any(axis=0)
    else:
        flips = np.ones(NUM_COLOURS, dtype=bool)
    return sum(1 if flips[card.colour.order] else card.value for card in pile)


def best_discard_pair(
    hand: Sequence[Card],
    collected: Sequence[Card],
    players: Sequence[Player],
    me: Player,
    *,
    opponent_padding: int = 0,
) -> tuple[int, int]:
    """Search every index pair for the discard leaving the cheapest final pile.

    The remaining hand joins ``collected``; opponents are judged on their
    actual piles, each colour raised by ``opponent_padding``. The first pair
    reaching the minimum wins.
    """

    opponents = _opponent_counts(players, me, opponent_padding)
    best = (0, 1)
    best_cost: int | None = None
    for first, second in combinations(range(len(hand)), 2):
        pile = list(collected)
        pile.extend(card for idx, card in enumerate(hand) if idx not in (first, second))
        cost = pile_cost(pile, opponents)
        if best_cost is None or cost < best_cost:
            best_cost = cost
            best = (first, second)
    return best
