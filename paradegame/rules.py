"""Turn orchestration, scoring and winner selection for Parade."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Sequence

import numpy as np

from .cards import NUM_COLOURS, Card, Colour
from .player import Player
from .state import GameState

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .ai import Strategy

logger = logging.getLogger(__name__)

TWO_PLAYER_MARGIN = 2


class ParadeError(RuntimeError):
    """Base class for rule violations raised by the engine."""


class IllegalPlay(ParadeError):
    """Raised when a player attempts to play a card illegally."""


class IllegalDiscard(ParadeError):
    """Raised when a player attempts an illegal end-of-game discard."""


@dataclass(frozen=True, slots=True)
class TurnResult:
    """Outcome of a single play."""

    player: Player
    played: Card
    collected: tuple[Card, ...]
    drawn: Card | None


@dataclass(frozen=True, slots=True)
class DiscardResult:
    """Outcome of a player's end-of-game discard."""

    player: Player
    discarded: tuple[Card, Card]
    added_to_collected: tuple[Card, ...]


@dataclass(frozen=True, slots=True)
class PlayerScore:
    """Final scoring row for a single player."""

    player_id: int
    name: str
    score: int
    collected: int
    flipped: int
    winner: bool


def play_card(state: GameState, hand_index: int) -> TurnResult:
    """Play the card at ``hand_index`` for the current player.

    The card moves to the end of the parade, collected cards move into the
    player's pile, the last-round trigger is evaluated and a replacement card
    is drawn when the round still allows it. The turn is not advanced.
    """

    player = state.current_player
    if state.scored:
        raise IllegalPlay("game already scored")
    if not player.hand:
        raise IllegalPlay(f"{player.name} has no cards to play")
    if not 0 <= hand_index < len(player.hand):
        raise IllegalPlay(f"hand index {hand_index} out of range 0-{len(player.hand) - 1}")

    played = player.take_from_hand(hand_index)
    state.parade.add_card(played)
    collected = state.parade.apply_play(played)
    player.add_collected(collected)

    state.check_last_round()
    drawn: Card | None = None
    if state.should_draw():
        drawn = state.deck.draw()
        if drawn is not None:
            player.add_to_hand(drawn)

    logger.debug(
        "%s played %s, collected [%s], drew %s",
        player.name,
        played.label(),
        ", ".join(card.label() for card in collected),
        drawn.label() if drawn is not None else "nothing",
    )
    return TurnResult(player=player, played=played, collected=tuple(collected), drawn=drawn)


def _require_strategy(player: Player, error: type[ParadeError]) -> "Strategy":
    if player.strategy is None:
        raise error(f"{player.name} is not controlled by an AI strategy")
    return player.strategy


def play_ai_turn(state: GameState) -> TurnResult:
    """Let the current player's strategy choose and play a card."""

    player = state.current_player
    strategy = _require_strategy(player, IllegalPlay)
    if not player.hand:
        raise IllegalPlay(f"{player.name} has no cards to play")
    chosen = strategy.choose_card(player.hand, state.parade)
    for idx, card in enumerate(player.hand):
        if card is chosen:
            return play_card(state, idx)
    raise IllegalPlay(f"strategy for {player.name} chose a card outside its hand")


def discard_cards(state: GameState, first: int, second: int) -> DiscardResult:
    """Discard two hand cards and move the rest of the hand into the pile.

    Both indices refer to the hand before either card is removed.
    """

    player = state.current_player
    if not state.is_discard_phase():
        raise IllegalDiscard(f"{player.name} is not in the discard phase")
    size = len(player.hand)
    for index in (first, second):
        if not 0 <= index < size:
            raise IllegalDiscard(f"hand index {index} out of range 0-{size - 1}")
    if first == second:
        raise IllegalDiscard("discard indices must be distinct")

    discarded = (player.hand[first], player.hand[second])
    for index in sorted((first, second), reverse=True):
        player.take_from_hand(index)
    kept = tuple(player.hand)
    player.add_collected(kept)
    player.hand.clear()

    logger.debug(
        "%s discarded %s and %s, added %d card(s) to collected",
        player.name,
        discarded[0].label(),
        discarded[1].label(),
        len(kept),
    )
    return DiscardResult(player=player, discarded=discarded, added_to_collected=kept)


def discard_ai_turn(state: GameState) -> DiscardResult:
    """Let the current player's strategy pick its two discards."""

    player = state.current_player
    strategy = _require_strategy(player, IllegalDiscard)
    if len(player.hand) < 2:
        raise IllegalDiscard(f"{player.name} has fewer than two cards")
    first, second = strategy.choose_discards(
        list(player.hand), list(player.collected), state.players, player
    )
    return discard_cards(state, first, second)


def colour_counts(players: Sequence[Player]) -> np.ndarray:
    """Return a ``players x colours`` matrix of collected card counts."""

    counts = np.zeros((len(players), NUM_COLOURS), dtype=np.int64)
    for row, player in enumerate(players):
        for card in player.collected:
            counts[row, card.colour.order] += 1
    return counts


def majority_owners(counts: np.ndarray) -> np.ndarray:
    """Return a boolean ``players x colours`` mask of who flips each colour."""

    num_players = counts.shape[0]
    if num_players == 2:
        margin = counts[0] - counts[1]
        owners = np.zeros_like(counts, dtype=bool)
        owners[0] = margin >= TWO_PLAYER_MARGIN
        owners[1] = -margin >= TWO_PLAYER_MARGIN
        return owners
    # Every player tied at the maximum flips; zero counts have no cards to flip.
    return counts == counts.max(axis=0, keepdims=True)


def calculate_scores(state: GameState) -> dict[int, int]:
    """Flip majority colours and return each player's score keyed by id.

    With more than two players every player tied for the most cards of a
    colour flips that colour. With exactly two players a colour only flips
    for a player holding at least two more cards of it than the opponent.
    Flipped cards are worth one point; lower totals are better.
    """

    players = state.players
    owners = majority_owners(colour_counts(players))
    colours = list(Colour)
    for row, player in enumerate(players):
        flip_colours = {colours[col] for col in np.flatnonzero(owners[row])}
        for card in player.collected:
            if card.colour in flip_colours:
                card.flip()

    scores = {player.id: player.collected_value() for player in players}
    state.scored = True
    logger.debug("Final scores: %s", scores)
    return scores


def select_winner(players: Sequence[Player], scores: Mapping[int, int]) -> Player:
    """Return the lowest scorer; ties go to the smaller pile, then the lower id."""

    if not players:
        raise ValueError("cannot select a winner without players")
    return min(players, key=lambda player: (scores[player.id], len(player.collected), player.id))


def score_table(state: GameState, scores: Mapping[int, int]) -> list[PlayerScore]:
    """Return scoring rows in seating order, flagging the winner."""

    winner = select_winner(state.players, scores)
    return [
        PlayerScore(
            player_id=player.id,
            name=player.name,
            score=scores[player.id],
            collected=len(player.collected),
            flipped=sum(1 for card in player.collected if card.flipped),
            winner=player is winner,
        )
        for player in state.players
    ]
