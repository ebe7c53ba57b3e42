"""Cards paired with a trump context, giving them a total and an effective order."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping

from .cards import Card
from .trump import TrumpContext

__all__ = ["MatchingCards", "OrderedCard", "cards", "make_map"]


@dataclass(frozen=True, slots=True, repr=False)
class OrderedCard:
    """A card with the trump context of its deal.

    Equality and hashing use the (card, trump) pair. Ordering delegates to
    ``trump.compare``; comparing cards from two different trump contexts is a
    caller error.
    """

    card: Card
    trump: TrumpContext

    def __repr__(self) -> str:
        return self.card.code

    def _check_context(self, other: "OrderedCard") -> None:
        assert self.trump == other.trump, "ordered cards from different trump contexts"

    def cmp(self, other: "OrderedCard") -> int:
        self._check_context(other)
        return self.trump.compare(self.card, other.card)

    def cmp_effective(self, other: "OrderedCard") -> int:
        self._check_context(other)
        return self.trump.compare_effective(self.card, other.card)

    def __lt__(self, other: "OrderedCard") -> bool:
        return self.cmp(other) < 0

    def __le__(self, other: "OrderedCard") -> bool:
        return self.cmp(other) <= 0

    def __gt__(self, other: "OrderedCard") -> bool:
        return self.cmp(other) > 0

    def __ge__(self, other: "OrderedCard") -> bool:
        return self.cmp(other) >= 0

    def successor(self) -> list["OrderedCard"]:
        return [OrderedCard(card, self.trump) for card in self.trump.successor(self.card)]


MatchingCards = list[tuple[OrderedCard, int]]


def make_map(cards: Iterable[Card], trump: TrumpContext) -> dict[OrderedCard, int]:
    """Count ``cards`` under ``trump``; keys iterate in ascending trump order."""

    counts = Counter(OrderedCard(card, trump) for card in cards)
    return dict(sorted(counts.items(), key=lambda item: item[0]))


def cards(counts: Mapping[OrderedCard, int] | Iterable[tuple[OrderedCard, int]]) -> Iterator[OrderedCard]:
    """Yield each card repeated by its count, preserving key order."""

    items = counts.items() if isinstance(counts, Mapping) else counts
    for card, count in items:
        for _ in range(count):
            yield card
