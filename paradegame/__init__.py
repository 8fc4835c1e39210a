"""Top-level package for the Parade game engine."""

from . import ai, cards, config, deck, parade, player, rules, state

__all__ = [
    "ai",
    "cards",
    "config",
    "deck",
    "parade",
    "player",
    "rules",
    "state",
]
