"""Core game state and the turn/phase state machine for Parade."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Sequence

from .cards import NUM_COLOURS, Card
from .config import ParadeConfig
from .deck import Deck
from .parade import Parade
from .player import Player

logger = logging.getLogger(__name__)

DISCARD_HAND_RANGE = (2, 4)


class GamePhase(str, Enum):
    """High-level phases a game moves through."""

    NORMAL_PLAY = "normal_play"
    LAST_ROUND = "last_round"
    DISCARD = "discard"
    SCORED = "scored"


class GameState:
    """Mutable state for one game: players, deck, parade and round tracking."""

    def __init__(
        self,
        players: Sequence[Player],
        config: ParadeConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if len(players) < 2:
            raise ValueError("a game needs at least two players")
        if len({player.id for player in players}) != len(players):
            raise ValueError("player ids must be unique")

        self.config = config or ParadeConfig()
        self._players = list(players)
        self.deck = Deck(self.config.cards_per_colour, rng)
        self.parade = Parade()
        self.current_player_index = 0
        self.last_round_triggered = False
        self.last_round_counter = 0
        self.scored = False

        self._initialise_parade()
        self._deal_initial_hands()

    def _initialise_parade(self) -> None:
        for _ in range(self.config.parade_size):
            card = self.deck.draw()
            if card is not None:
                self.parade.add_card(card)

    def _deal_initial_hands(self) -> None:
        for player in self._players:
            for _ in range(self.config.hand_size):
                card = self.deck.draw()
                if card is not None:
                    player.add_to_hand(card)

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    @property
    def current_player(self) -> Player:
        return self._players[self.current_player_index]

    def player_by_id(self, player_id: int) -> Player:
        for player in self._players:
            if player.id == player_id:
                return player
        raise KeyError(player_id)

    def check_last_round(self) -> None:
        """Evaluate the end-of-game trigger for the player who just acted."""

        all_colours = self.current_player.collected_colour_count() >= NUM_COLOURS
        if all_colours or self.deck.remaining_count() <= 1 or self.last_round_counter > 0:
            if not self.last_round_triggered:
                logger.debug(
                    "Last round triggered by %s (all colours=%s, deck=%d)",
                    self.current_player.name,
                    all_colours,
                    self.deck.remaining_count(),
                )
            self.last_round_counter += 1
            self.last_round_triggered = True

    def should_draw(self) -> bool:
        """Return ``True`` when the acting player draws a replacement card."""

        if not self.last_round_triggered:
            return True
        return self.last_round_counter == 1 and not self.deck.is_empty

    def is_discard_phase(self) -> bool:
        low, high = DISCARD_HAND_RANGE
        return low < len(self.current_player.hand) <= high

    def is_game_over(self) -> bool:
        return self.last_round_counter == len(self._players) + 1

    def next_turn(self) -> None:
        self.current_player_index = (self.current_player_index + 1) % len(self._players)

    @property
    def phase(self) -> GamePhase:
        if self.scored:
            return GamePhase.SCORED
        if self.is_discard_phase() and self.last_round_triggered:
            return GamePhase.DISCARD
        if self.last_round_triggered:
            return GamePhase.LAST_ROUND
        return GamePhase.NORMAL_PLAY

    def snapshot_collected(self) -> dict[int, list[Card]]:
        """Return value copies of every collected pile keyed by player id."""

        return {player.id: [card.snapshot() for card in player.collected] for player in self._players}
