"""Top-level package for the shengji play-shape engine."""

from . import cards, decomposition, ordered_card, partitions, trump

__all__ = [
    "cards",
    "decomposition",
    "ordered_card",
    "partitions",
    "trump",
]
