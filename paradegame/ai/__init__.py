"""Heuristic AI players for Parade."""

from __future__ import annotations

from .base import Difficulty, Strategy
from .easy import EasyStrategy
from .hard import HardStrategy
from .medium import MediumStrategy

_STRATEGIES = {
    Difficulty.EASY: EasyStrategy,
    Difficulty.MEDIUM: MediumStrategy,
    Difficulty.HARD: HardStrategy,
}


def make_strategy(difficulty: Difficulty | str) -> Strategy:
    """Return a fresh strategy for ``difficulty`` (unknown names mean medium)."""

    if not isinstance(difficulty, Difficulty):
        difficulty = Difficulty.parse(difficulty)
    return _STRATEGIES[difficulty]()


__all__ = [
    "Difficulty",
    "EasyStrategy",
    "HardStrategy",
    "MediumStrategy",
    "Strategy",
    "make_strategy",
]
