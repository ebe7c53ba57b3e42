"""Typer entry-point wiring for the shengji-shapes CLI."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from .. import cards as cards_module
from .. import ordered_card
from ..decomposition import PlayRequirements, full_decompositions, subsequent_decompositions
from ..partitions import adjacency_assignments, partitions_of
from ..trump import Trump
from .render import counts_table, format_shape, shape_table

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def parse_shape(text: str) -> PlayRequirements:
    """Parse ``"2,2 3 2"`` into ``[[2, 2], [3], [2]]``."""

    shape: PlayRequirements = []
    for token in text.split():
        try:
            run = [int(part) for part in token.split(",")]
        except ValueError as exc:
            raise ValueError(f"invalid run '{token}'") from exc
        if any(size < 1 for size in run):
            raise ValueError(f"tuple sizes must be positive in '{token}'")
        shape.append(run)
    if not shape:
        raise ValueError("shape must contain at least one run")
    return shape


def parse_trump(number: str, suit: str | None) -> Trump:
    try:
        trump_number = cards_module.Number(number.upper())
        trump_suit = cards_module.Suit(suit.upper()) if suit else None
    except ValueError as exc:
        raise ValueError(f"invalid trump '{number}{suit or ''}'") from exc
    return Trump(number=trump_number, suit=trump_suit)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log cache activity to stderr."),
) -> None:
    """Inspect play shapes for tractor/shengji trick-taking games."""

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@app.command()
def partitions(num_cards: int = typer.Argument(..., min=1, help="Number of cards to split.")) -> None:
    """List every tuple partition of NUM_CARDS, most complex first."""

    shapes = [[[size] for size in partition] for partition in partitions_of(num_cards)]
    console.print(shape_table(f"Tuple partitions of {num_cards}", shapes))


@app.command()
def assignments(length: int = typer.Argument(..., min=1, help="Number of positions to cluster.")) -> None:
    """List every clustering of LENGTH positions."""

    console.print(shape_table(f"Adjacency assignments of {length}", adjacency_assignments(length)))


@app.command()
def full(num_cards: int = typer.Argument(..., min=1, help="Number of cards in the play.")) -> None:
    """List every shape NUM_CARDS cards can take, most demanding first."""

    console.print(shape_table(f"Decompositions of {num_cards}", full_decompositions(num_cards)))


@app.command()
def follow(
    shape: str = typer.Argument(..., help='Led shape: runs split by spaces, sizes by commas, e.g. "2,2 3".'),
    new_adjacency: bool = typer.Option(
        True,
        "--new-adjacency/--no-new-adjacency",
        help="Allow single tuples to be followed by multi-rank runs.",
    ),
) -> None:
    """List the simpler shapes that may follow a led SHAPE, in order."""

    try:
        requirements = parse_shape(shape)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="SHAPE") from exc

    shapes = subsequent_decompositions(requirements, new_adjacency)
    console.print(shape_table(f"Following {format_shape(requirements)}", shapes))


@app.command()
def hand(
    codes: list[str] = typer.Argument(..., help="Card codes such as 2H 10S BJ."),
    trump_number: str = typer.Option("2", help="Trump number for the deal."),
    trump_suit: str | None = typer.Option(None, help="Trump suit (C, D, H, S); omit for no trump."),
) -> None:
    """Group a hand into ordered card counts for the given trump."""

    try:
        trump = parse_trump(trump_number, trump_suit)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--trump-number/--trump-suit") from exc
    try:
        hand_cards = cards_module.cards_from_codes(codes)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="CODES") from exc

    counts = ordered_card.make_map(hand_cards, trump)
    console.print(counts_table("Hand", counts))
    ordered = (entry.card for entry in ordered_card.cards(counts))
    console.print(cards_module.format_cards(ordered), markup=False)
