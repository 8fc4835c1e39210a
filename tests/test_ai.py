"""Tests covering the three AI difficulty tiers."""

from __future__ import annotations

import pytest

from paradegame.ai import Difficulty, EasyStrategy, HardStrategy, MediumStrategy, make_strategy
from paradegame.ai.evaluation import (
    _opponent_counts,
    best_discard_pair,
    collected_count,
    collected_value,
    pile_cost,
)
from paradegame.cards import Card, Colour
from paradegame.parade import Parade
from paradegame.player import Player


def _red_parade() -> Parade:
    return Parade([Card(Colour.RED, value) for value in range(5, 11)])


def _hand() -> list[Card]:
    # Collected counts: 0, 6, 0, 1, 0; collected values: 0, 45, 0, 5, 0.
    return [
        Card(Colour.BLUE, 10),
        Card(Colour.RED, 0),
        Card(Colour.GREEN, 9),
        Card(Colour.BLUE, 5),
        Card(Colour.GREEN, 4),
    ]


def _discard_table() -> tuple[list[Card], list[Card], Player, list[Player]]:
    me = Player(id=1, name="Me", collected=[Card(Colour.BLUE, 2)])
    opponent = Player(
        id=2,
        name="Opp",
        collected=[Card(Colour.RED, 1), Card(Colour.RED, 2), Card(Colour.RED, 3)],
    )
    hand = [Card(Colour.BLUE, 3), Card(Colour.GREEN, 8), Card(Colour.RED, 10), Card(Colour.BLUE, 4)]
    return hand, list(me.collected), me, [me, opponent]


def test_simulated_costs() -> None:
    parade = _red_parade()
    hand = _hand()

    assert [collected_count(parade, card) for card in hand] == [0, 6, 0, 1, 0]
    assert [collected_value(parade, card) for card in hand] == [0, 45, 0, 5, 0]
    assert len(parade) == 6


def test_easy_plays_third_least_collecting_card() -> None:
    hand = _hand()
    original = list(hand)

    choice = EasyStrategy().choose_card(hand, _red_parade())

    assert choice is hand[4]
    assert hand == original


@pytest.mark.parametrize(("size", "expected_index"), [(1, 0), (2, 1)])
def test_easy_small_hands(size: int, expected_index: int) -> None:
    hand = [Card(Colour.BLUE, 10), Card(Colour.RED, 0)][:size]

    assert EasyStrategy().choose_card(hand, _red_parade()) is hand[expected_index]


def test_easy_discards_two_highest_first_seen() -> None:
    hand = [Card(Colour.RED, 3), Card(Colour.BLUE, 9), Card(Colour.GREY, 1), Card(Colour.GREEN, 9)]

    assert EasyStrategy().choose_discards(hand, [], [], Player(id=1, name="Me")) == (1, 3)


def test_medium_plays_second_cheapest_card() -> None:
    hand = _hand()
    original = list(hand)

    choice = MediumStrategy().choose_card(hand, _red_parade())

    assert choice is hand[2]
    assert hand == original


def test_medium_single_card() -> None:
    hand = [Card(Colour.RED, 0)]

    assert MediumStrategy().choose_card(hand, _red_parade()) is hand[0]


def test_hard_plays_first_cheapest_card() -> None:
    hand = _hand()

    assert HardStrategy().choose_card(hand, _red_parade()) is hand[0]


def test_medium_discards_against_actual_piles() -> None:
    hand, collected, me, players = _discard_table()

    assert MediumStrategy().choose_discards(hand, collected, players, me) == (0, 2)
    assert [card.value for card in me.collected] == [2]
    assert len(players[1].collected) == 3


def test_hard_discards_against_padded_opponents() -> None:
    hand, collected, me, players = _discard_table()

    assert HardStrategy().choose_discards(hand, collected, players, me) == (1, 2)


def test_discard_search_defaults_to_first_pair() -> None:
    hand = [Card(Colour.BLUE, 1), Card(Colour.BLUE, 1), Card(Colour.BLUE, 1)]
    me = Player(id=1, name="Me")

    assert best_discard_pair(hand, [], [me], me) == (0, 1)


def test_pile_cost_counts_flipped_colours_as_one() -> None:
    me = Player(id=1, name="Me")
    opponent = Player(id=2, name="Opp", collected=[Card(Colour.RED, 1), Card(Colour.RED, 1)])
    pile = [Card(Colour.RED, 9), Card(Colour.BLUE, 7)]

    assert pile_cost(pile, _opponent_counts([me, opponent], me, 0)) == 9 + 1


@pytest.mark.parametrize(
    ("name", "expected"),
    [("easy", EasyStrategy), ("Hard", HardStrategy), ("medium", MediumStrategy), ("bogus", MediumStrategy)],
)
def test_make_strategy(name: str, expected: type) -> None:
    assert isinstance(make_strategy(name), expected)


def test_difficulty_attribute_matches_tier() -> None:
    assert make_strategy(Difficulty.HARD).difficulty is Difficulty.HARD
