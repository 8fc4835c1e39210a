"""Self-play harness for comparing Parade AI difficulty tiers."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Sequence

from . import rules
from .ai import Difficulty, make_strategy
from .config import ParadeConfig
from .player import Player
from .state import GameState

logger = logging.getLogger(__name__)

__all__ = ["GameReport", "SeatTotals", "TournamentReport", "play_game", "run_tournament"]


@dataclass(frozen=True, slots=True)
class GameReport:
    """Result of a single completed game."""

    scores: dict[int, int]
    winner_id: int
    turns: int


@dataclass(slots=True)
class SeatTotals:
    """Aggregate statistics for one seat across a tournament."""

    difficulty: Difficulty
    wins: int = 0
    total_score: int = 0
    games: int = 0

    @property
    def average_score(self) -> float:
        return self.total_score / self.games if self.games else 0.0


@dataclass(slots=True)
class TournamentReport:
    """Per-seat totals accumulated over a series of games."""

    seats: list[SeatTotals] = field(default_factory=list)
    games: list[GameReport] = field(default_factory=list)


def run_game(state: GameState) -> GameReport:
    """Drive ``state`` to completion; every seat must have a strategy."""

    turns = 0
    while not state.is_game_over():
        if state.is_discard_phase():
            break
        rules.play_ai_turn(state)
        state.next_turn()
        turns += 1

    while state.is_discard_phase():
        rules.discard_ai_turn(state)
        state.next_turn()

    scores = rules.calculate_scores(state)
    winner = rules.select_winner(state.players, scores)
    return GameReport(scores=scores, winner_id=winner.id, turns=turns)


def play_game(
    difficulties: Sequence[Difficulty],
    config: ParadeConfig | None = None,
    rng: random.Random | None = None,
) -> GameReport:
    """Play one all-AI game with one seat per entry of ``difficulties``."""

    players = [
        Player(id=idx + 1, name=f"Bot {idx + 1} ({difficulty.value})", strategy=make_strategy(difficulty))
        for idx, difficulty in enumerate(difficulties)
    ]
    return run_game(GameState(players, config, rng))


def run_tournament(
    difficulties: Sequence[Difficulty],
    games: int,
    *,
    seed: int | None = None,
    config: ParadeConfig | None = None,
) -> TournamentReport:
    """Play ``games`` games and accumulate wins and scores per seat."""

    if games <= 0:
        raise ValueError("games must be positive")
    if len(difficulties) < 2:
        raise ValueError("a tournament needs at least two seats")

    rng = random.Random(seed)
    report = TournamentReport(seats=[SeatTotals(difficulty) for difficulty in difficulties])
    for game_number in range(1, games + 1):
        result = play_game(difficulties, config, random.Random(rng.getrandbits(64)))
        report.games.append(result)
        for idx, seat in enumerate(report.seats):
            seat_id = idx + 1
            seat.games += 1
            seat.total_score += result.scores[seat_id]
            if result.winner_id == seat_id:
                seat.wins += 1
        logger.debug("Game %d won by seat %d in %d turns", game_number, result.winner_id, result.turns)
    return report
