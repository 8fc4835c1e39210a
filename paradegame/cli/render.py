"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Card, Colour, group_by_colour
from ..state import GameState
from .views import StateSummaryView

_COLOUR_STYLES = {
    Colour.BLUE: "blue",
    Colour.ORANGE: "dark_orange",
    Colour.GREEN: "green",
    Colour.GREY: "grey70",
    Colour.PURPLE: "magenta",
    Colour.RED: "red",
}


def format_card(card: Card, use_colour: bool = True) -> str:
    """Return a Rich-markup label for ``card``."""

    label = card.label()
    if not use_colour:
        return label
    style = _COLOUR_STYLES.get(card.colour, "white")
    if card.flipped:
        style = f"{style} dim"
    return f"[{style}]{label}[/]"


def format_line(cards: Sequence[Card], use_colour: bool = True) -> str:
    """Return ``cards`` in their given order, comma separated."""

    if not cards:
        return "—"
    return ", ".join(format_card(card, use_colour) for card in cards)


def format_grouped(cards: Iterable[Card], use_colour: bool = True) -> str:
    """Return ``cards`` grouped by colour and sorted by value within a group."""

    groups = group_by_colour(cards)
    if not groups:
        return "[dim](No cards collected yet)[/dim]" if use_colour else "(No cards collected yet)"
    return ", ".join(format_line(group, use_colour) for group in groups.values())


def format_hand(hand: Sequence[Card], use_colour: bool = True) -> list[str]:
    """Return one ``index: card`` entry per hand card."""

    return [f"[bold]{idx}[/bold]: {format_card(card, use_colour)}" for idx, card in enumerate(hand)]


def render_state(
    state: GameState,
    *,
    reveal_player: int | None = None,
    collected_override: dict[int, list[Card]] | None = None,
    title: str = "Parade",
) -> RenderableType:
    """Return a Rich panel describing the current table state."""

    use_colour = state.config.use_colour
    view = StateSummaryView(
        state=state,
        reveal_player=reveal_player,
        collected_override=collected_override,
        line_formatter=lambda cards: format_line(cards, use_colour),
        pile_formatter=lambda cards: format_grouped(cards, use_colour),
    )
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")
