"""Typer entry-point wiring for the Parade CLI."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.prompt import Confirm, IntPrompt
from rich.table import Table

from .. import benchmark, rules
from ..ai import Difficulty, make_strategy
from ..cards import Card
from ..config import ParadeConfig, load_config
from ..player import Player
from ..state import GameState
from .render import format_card, format_hand, format_line, render_state
from .views import render_scores, render_turn_summary

MIN_PLAYERS = 2
MAX_PLAYERS = 6

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    """Logging levels accepted by ``--log-level``."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(slots=True)
class TableSetup:
    """Resolved seating for a game."""

    humans: int
    bots: int
    difficulty: Difficulty

    def build_players(self) -> list[Player]:
        players = [Player(id=idx, name=f"Player {idx}") for idx in range(1, self.humans + 1)]
        for bot in range(1, self.bots + 1):
            players.append(
                Player(
                    id=self.humans + bot,
                    name=f"Bot {bot}",
                    strategy=make_strategy(self.difficulty),
                )
            )
        return players


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _resolve_config(
    config_path: Path | None,
    parade_size: int | None,
    hand_size: int | None,
    cards_per_colour: int | None,
    colour: bool | None,
) -> ParadeConfig:
    return load_config(config_path).with_overrides(
        parade_size=parade_size,
        hand_size=hand_size,
        cards_per_colour=cards_per_colour,
        use_colour=colour,
    )


def _ask_index(prompt: str, size: int) -> int:
    while True:
        index = IntPrompt.ask(f"{prompt} (enter index 0-{size - 1})", console=console)
        if 0 <= index < size:
            return index
        console.print(f"[red]Invalid input. Please enter a number between 0 and {size - 1}.[/red]")


def _human_play(state: GameState) -> rules.TurnResult:
    player = state.current_player
    use_colour = state.config.use_colour
    while True:
        for entry in format_hand(player.hand, use_colour):
            console.print(entry)
        index = _ask_index("Choose a card to play", len(player.hand))
        card = player.hand[index]
        preview = state.parade.preview(card)
        console.print(f"\nYou're going to play: {format_card(card, use_colour)}")
        if preview:
            console.print(f"Possible cards you might collect: {format_line(preview, use_colour)}")
        else:
            console.print("No cards collected.")
        if not Confirm.ask(f"Are you sure you want to play {format_card(card, use_colour)}?", console=console):
            console.print("Card selection cancelled. Please choose another card.\n")
            continue
        try:
            return rules.play_card(state, index)
        except rules.IllegalPlay as exc:
            console.print(f"[red]{exc}[/red]")


def _pick_discard(hand: list[Card], prompt: str, use_colour: bool) -> int:
    while True:
        for entry in format_hand(hand, use_colour):
            console.print(entry)
        index = _ask_index(prompt, len(hand))
        if Confirm.ask(f"Are you sure you want to discard {format_card(hand[index], use_colour)}?", console=console):
            return index
        console.print("Card selection cancelled. Please choose another card.\n")


def _human_discard(state: GameState) -> rules.DiscardResult:
    hand = list(state.current_player.hand)
    use_colour = state.config.use_colour
    first = _pick_discard(hand, "Choose a card to discard", use_colour)
    remaining = hand[:first] + hand[first + 1 :]
    picked = _pick_discard(remaining, "Choose another card to discard", use_colour)
    # The second pick indexes the shrunken hand; map it back to the original hand.
    second = picked if picked < first else picked + 1
    return rules.discard_cards(state, first, second)


def run_game(state: GameState) -> None:
    """Play ``state`` to completion, prompting human seats on the console."""

    use_colour = state.config.use_colour
    while not state.is_game_over():
        if state.is_discard_phase():
            break
        player = state.current_player
        console.rule(f"{player.name.upper()}'S TURN")
        if state.last_round_triggered:
            console.print("[bold red]THIS IS THE LAST TURN BEFORE THE DISCARD PHASE[/bold red]")
        if player.is_ai:
            console.print(render_state(state))
            result = rules.play_ai_turn(state)
        else:
            console.print(render_state(state, reveal_player=player.id))
            result = _human_play(state)
        console.print(
            render_turn_summary(
                result,
                lambda cards: format_line(cards, use_colour),
                hide_draw=player.is_ai,
            )
        )
        state.next_turn()

    before_discard = state.snapshot_collected()
    while state.is_discard_phase():
        player = state.current_player
        console.rule(f"DISCARD PHASE — {player.name.upper()}")
        if player.is_ai:
            console.print(render_state(state, collected_override=before_discard))
            rules.discard_ai_turn(state)
        else:
            console.print(render_state(state, reveal_player=player.id, collected_override=before_discard))
            _human_discard(state)
        state.next_turn()

    scores = rules.calculate_scores(state)
    console.rule("GAME OVER")
    console.print(render_state(state, title="Final Cards Collected"))
    rows = rules.score_table(state, scores)
    console.print(render_scores(rows))
    winner = next(row for row in rows if row.winner)
    console.print(f"\n[bold green]Congratulations {winner.name}![/bold green]")


@app.command()
def play(
    humans: int = typer.Option(1, min=0, max=MAX_PLAYERS, help="Human-controlled seats."),
    bots: int = typer.Option(1, min=0, max=MAX_PLAYERS, help="AI-controlled seats."),
    difficulty: Difficulty = typer.Option(Difficulty.MEDIUM, case_sensitive=False, help="AI difficulty."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible games (omit for randomness)."),
    config: Path | None = typer.Option(None, "--config", help="Properties file with table settings."),
    parade_size: int | None = typer.Option(None, min=1, help="Override the initial parade size."),
    hand_size: int | None = typer.Option(None, min=1, help="Override the initial hand size."),
    cards_per_colour: int | None = typer.Option(None, min=1, help="Override the cards per colour."),
    colour: bool | None = typer.Option(None, "--colour/--no-colour", help="Colour card labels."),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, case_sensitive=False, help="Logging level for engine diagnostics."
    ),
) -> None:
    """Play a game of Parade on the console."""

    total = humans + bots
    if not MIN_PLAYERS <= total <= MAX_PLAYERS:
        raise typer.BadParameter(f"Total players must be between {MIN_PLAYERS} and {MAX_PLAYERS}.")

    _configure_logging(log_level)
    table_config = _resolve_config(config, parade_size, hand_size, cards_per_colour, colour)
    setup = TableSetup(humans=humans, bots=bots, difficulty=difficulty)
    state = GameState(setup.build_players(), table_config, random.Random(seed))
    logger.info("Starting game with %d human(s) and %d %s bot(s)", humans, bots, difficulty.value)
    run_game(state)


@app.command("benchmark")
def benchmark_cli(
    games: int = typer.Option(20, min=1, help="Number of self-play games."),
    seats: list[Difficulty] = typer.Option(
        [Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD],
        "--seat",
        case_sensitive=False,
        help="Difficulty for each seat; repeat the option per seat.",
    ),
    seed: int = typer.Option(123, help="Random seed for the benchmark."),
    config: Path | None = typer.Option(None, "--config", help="Properties file with table settings."),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, case_sensitive=False, help="Logging level for engine diagnostics."
    ),
) -> None:
    """Run all-AI games and compare the difficulty tiers."""

    if not MIN_PLAYERS <= len(seats) <= MAX_PLAYERS:
        raise typer.BadParameter(f"Seat count must be between {MIN_PLAYERS} and {MAX_PLAYERS}.")

    _configure_logging(log_level)
    report = benchmark.run_tournament(seats, games, seed=seed, config=load_config(config))

    table = Table(title="Self-Play Benchmark", box=box.SIMPLE_HEAVY)
    table.add_column("Seat", justify="center")
    table.add_column("Difficulty", justify="center")
    table.add_column("Wins", justify="right")
    table.add_column("Avg score", justify="right")
    for idx, seat in enumerate(report.seats, start=1):
        table.add_row(str(idx), seat.difficulty.value, str(seat.wins), f"{seat.average_score:.1f}")

    console.print(table)
    console.print(f"[cyan]{len(report.games)} game(s) simulated.[/cyan]")


def main() -> None:
    """Entry-point for ``python -m paradegame.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
