"""Composable view primitives for the Parade CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from ..cards import Card
from ..rules import PlayerScore, TurnResult
from ..state import GameState


@dataclass(slots=True)
class StateSummaryView:
    """Renderable summarising the parade, deck and every collected pile."""

    state: GameState
    reveal_player: int | None
    collected_override: dict[int, list[Card]] | None
    line_formatter: Callable[[Sequence[Card]], str]
    pile_formatter: Callable[[Sequence[Card]], str]

    def _metadata_panel(self) -> Panel:
        state = self.state
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_row(f"[cyan]Parade[/cyan]: {self.line_formatter(state.parade.cards)}")
        grid.add_row(f"[cyan]Deck[/cyan]: {state.deck.remaining_count()} card(s)")
        grid.add_row(f"[cyan]Phase[/cyan]: {state.phase.value.replace('_', ' ').title()}")
        return Panel(grid, title="Table State", box=box.SQUARE, border_style="blue")

    def _pile(self, player_id: int, cards: Sequence[Card]) -> Sequence[Card]:
        if self.collected_override is None:
            return cards
        return self.collected_override.get(player_id, [])

    def render(self) -> RenderableType:
        table = Table(box=box.ROUNDED, expand=True)
        table.add_column("Player", justify="left", style="bold")
        table.add_column("Role", justify="left")
        table.add_column("Hand", justify="left")
        table.add_column("Collected", justify="left")

        current = self.state.current_player
        for player in self.state.players:
            name = player.name
            if player is current:
                name = f"[bold yellow]{name}[/bold yellow]"
            role = "AI" if player.is_ai else "Human"
            if player.id == self.reveal_player:
                hand_display = self.line_formatter(player.hand)
            else:
                hand_display = f"{len(player.hand)} cards"
            table.add_row(name, role, hand_display, self.pile_formatter(self._pile(player.id, player.collected)))

        return Group(self._metadata_panel(), table)


def render_turn_summary(
    result: TurnResult,
    line_formatter: Callable[[Sequence[Card]], str],
    *,
    hide_draw: bool,
) -> Panel:
    """Return a panel describing what a play collected and drew."""

    grid = Table.grid(expand=True)
    grid.add_column(justify="left")
    grid.add_row(f"Played: {line_formatter([result.played])}")
    if result.collected:
        grid.add_row(f"Collected: {line_formatter(result.collected)}")
    else:
        grid.add_row("Collected: None for this turn")
    if hide_draw:
        grid.add_row("Drawn card: [dim]No peeking at the AI's cards![/dim]")
    elif result.drawn is not None:
        grid.add_row(f"Drawn card: {line_formatter([result.drawn])}")
    else:
        grid.add_row("Drawn card: None for last round")
    return Panel(grid, title=f"{result.player.name} — Turn Summary", border_style="magenta", box=box.SIMPLE)


def render_scores(rows: Sequence[PlayerScore]) -> Table:
    """Return the final scores table with the winner highlighted."""

    table = Table(title="Final Scores", box=box.DOUBLE_EDGE)
    table.add_column("Player", justify="center")
    table.add_column("Collected", justify="right")
    table.add_column("Flipped", justify="right")
    table.add_column("Score", justify="right")

    for row in rows:
        label = row.name
        score = str(row.score)
        if row.winner:
            label = f"[bold green]{label}[/bold green]"
            score = f"[bold green]{score}[/bold green]"
        table.add_row(label, str(row.collected), str(row.flipped), score)
    return table
