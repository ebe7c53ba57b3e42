"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from rich import box
from rich.markup import escape
from rich.table import Table

from ..cards import Suit
from ..ordered_card import OrderedCard

_SUIT_SYMBOLS = {
    Suit.SPADES: ("♠", "cyan"),
    Suit.HEARTS: ("♥", "red"),
    Suit.DIAMONDS: ("♦", "magenta"),
    Suit.CLUBS: ("♣", "green"),
}


def format_run(run: Sequence[int]) -> str:
    return "[" + ", ".join(str(size) for size in run) + "]"


def format_shape(shape: Iterable[Sequence[int]]) -> str:
    """Return ``shape`` as plain text, e.g. ``[2, 2] [1]``."""

    return " ".join(format_run(run) for run in shape)


def format_card(card: OrderedCard) -> str:
    """Return a Rich-rendered label for ``card``."""

    if card.card.is_joker:
        return f"[magenta]{card.card.code}[/magenta]"
    assert card.card.number is not None and card.card.suit is not None
    symbol, color = _SUIT_SYMBOLS[card.card.suit]
    return f"[{color}]{card.card.number.value}{symbol}[/{color}]"


def shape_table(title: str, shapes: Sequence[Iterable[Sequence[int]]]) -> Table:
    """Return a numbered table with one shape per row."""

    table = Table(title=escape(title), box=box.SIMPLE)
    table.add_column("#", justify="right", style="bold")
    table.add_column("Shape", justify="left")
    for idx, shape in enumerate(shapes, start=1):
        table.add_row(str(idx), escape(format_shape(shape)))
    if not shapes:
        table.add_row("-", "[dim]no shapes[/dim]")
    return table


def counts_table(title: str, counts: Mapping[OrderedCard, int]) -> Table:
    table = Table(title=escape(title), box=box.SIMPLE)
    table.add_column("Card", justify="left")
    table.add_column("Count", justify="right")
    for card, count in counts.items():
        table.add_row(format_card(card), str(count))
    return table
