"""Tests covering turn orchestration in the rules layer."""

from __future__ import annotations

import random

import pytest

from paradegame import rules
from paradegame.ai import EasyStrategy, HardStrategy
from paradegame.cards import Card, Colour
from paradegame.parade import Parade
from paradegame.player import Player
from paradegame.state import GameState


def _state(*strategies: object, seed: int = 11) -> GameState:
    players = [
        Player(id=idx, name=f"P{idx}", strategy=strategy)
        for idx, strategy in enumerate(strategies, start=1)
    ]
    return GameState(players, rng=random.Random(seed))


def test_play_card_moves_cards_and_draws_replacement() -> None:
    state = _state(None, None)
    state.parade = Parade(
        [
            Card(Colour.BLUE, 3),
            Card(Colour.RED, 5),
            Card(Colour.BLUE, 2),
            Card(Colour.GREEN, 0),
            Card(Colour.PURPLE, 6),
        ]
    )
    player = state.current_player
    played = Card(Colour.BLUE, 0)
    player.hand[0] = played
    deck_before = state.deck.remaining_count()

    result = rules.play_card(state, 0)

    assert result.played is played
    assert [(card.colour, card.value) for card in result.collected] == [
        (Colour.BLUE, 3),
        (Colour.BLUE, 2),
        (Colour.GREEN, 0),
    ]
    assert list(result.collected) == player.collected
    assert played not in player.hand
    assert result.drawn is not None and result.drawn in player.hand
    assert len(player.hand) == 5
    assert state.deck.remaining_count() == deck_before - 1
    assert state.parade.cards[-1] is played
    assert state.current_player is player


@pytest.mark.parametrize("index", [-1, 5, 99])
def test_play_card_rejects_bad_index_without_mutation(index: int) -> None:
    state = _state(None, None)
    hand_before = list(state.current_player.hand)
    parade_before = state.parade.cards

    with pytest.raises(rules.IllegalPlay):
        rules.play_card(state, index)

    assert state.current_player.hand == hand_before
    assert state.parade.cards == parade_before


def test_play_card_skips_draw_after_first_last_round_turn() -> None:
    state = _state(None, None)
    state.last_round_triggered = True
    state.last_round_counter = 1

    result = rules.play_card(state, 0)

    assert result.drawn is None
    assert len(state.players[0].hand) == 4
    assert state.last_round_counter == 2


def test_play_ai_turn_plays_strategy_choice() -> None:
    state = _state(HardStrategy(), None)
    player = state.current_player
    expected = HardStrategy().choose_card(player.hand, state.parade)

    result = rules.play_ai_turn(state)

    assert result.played is expected


def test_play_ai_turn_requires_strategy() -> None:
    state = _state(None, None)

    with pytest.raises(rules.IllegalPlay):
        rules.play_ai_turn(state)


def test_discard_uses_indices_of_original_hand() -> None:
    state = _state(None, None)
    player = state.current_player
    hand = [Card(Colour.RED, 1), Card(Colour.BLUE, 2), Card(Colour.GREY, 3), Card(Colour.GREEN, 4)]
    player.hand = list(hand)
    player.collected = [Card(Colour.ORANGE, 9)]

    result = rules.discard_cards(state, 3, 1)

    assert result.discarded == (hand[3], hand[1])
    assert result.added_to_collected == (hand[0], hand[2])
    assert player.hand == []
    assert player.collected[1:] == [hand[0], hand[2]]


@pytest.mark.parametrize(("first", "second"), [(0, 0), (0, 4), (-1, 2)])
def test_discard_rejects_bad_indices(first: int, second: int) -> None:
    state = _state(None, None)
    player = state.current_player
    player.hand = [Card(Colour.RED, value) for value in range(4)]
    hand_before = list(player.hand)

    with pytest.raises(rules.IllegalDiscard):
        rules.discard_cards(state, first, second)

    assert player.hand == hand_before


def test_discard_only_allowed_in_discard_phase() -> None:
    state = _state(None, None)

    with pytest.raises(rules.IllegalDiscard):
        rules.discard_cards(state, 0, 1)


def test_discard_ai_turn_uses_strategy() -> None:
    state = _state(EasyStrategy(), None)
    player = state.current_player
    hand = [Card(Colour.RED, 3), Card(Colour.BLUE, 9), Card(Colour.GREY, 1), Card(Colour.GREEN, 9)]
    player.hand = list(hand)

    result = rules.discard_ai_turn(state)

    assert result.discarded == (hand[1], hand[3])
    assert set(map(id, result.added_to_collected)) == {id(hand[0]), id(hand[2])}
