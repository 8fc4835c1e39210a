from __future__ import annotations

import random

import pytest

from paradegame import benchmark, rules
from paradegame.ai import Difficulty, make_strategy
from paradegame.player import Player
from paradegame.state import GameState


@pytest.mark.parametrize("num_players", [2, 3, 6])
def test_self_play_game_reaches_scoring(num_players: int) -> None:
    players = [
        Player(id=idx, name=f"Bot {idx}", strategy=make_strategy(list(Difficulty)[idx % 3]))
        for idx in range(1, num_players + 1)
    ]
    state = GameState(players, rng=random.Random(num_players))

    report = benchmark.run_game(state)

    assert state.scored
    assert state.is_game_over() or state.last_round_triggered
    assert all(not player.hand for player in state.players)
    # Every card ends in the parade, the deck, a pile or among the two discards per player.
    in_play = len(state.parade) + state.deck.remaining_count()
    in_piles = sum(len(player.collected) for player in state.players)
    assert in_play + in_piles + 2 * num_players == 66
    assert report.scores == {player.id: player.collected_value() for player in state.players}
    assert report.winner_id == rules.select_winner(state.players, report.scores).id


def test_tournament_accumulates_per_seat() -> None:
    seats = [Difficulty.EASY, Difficulty.HARD]

    report = benchmark.run_tournament(seats, 3, seed=5)

    assert len(report.games) == 3
    assert sum(seat.wins for seat in report.seats) == 3
    assert all(seat.games == 3 for seat in report.seats)
    assert report.seats[1].total_score == sum(game.scores[2] for game in report.games)


def test_tournament_is_reproducible() -> None:
    seats = [Difficulty.MEDIUM, Difficulty.HARD, Difficulty.EASY]

    first = benchmark.run_tournament(seats, 2, seed=9)
    second = benchmark.run_tournament(seats, 2, seed=9)

    assert [game.scores for game in first.games] == [game.scores for game in second.games]


def test_tournament_validates_arguments() -> None:
    with pytest.raises(ValueError):
        benchmark.run_tournament([Difficulty.EASY, Difficulty.EASY], 0)
    with pytest.raises(ValueError):
        benchmark.run_tournament([Difficulty.EASY], 1)
