"""Trump ranking: total order, strength order and rank adjacency for one deal."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

from .cards import Card, Joker, Number, Suit

__all__ = ["EffectiveSuit", "Trump", "TrumpContext"]


class EffectiveSuit(IntEnum):
    """Suit a card belongs to during play; trump ranks above every plain suit."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3
    TRUMP = 4

    @classmethod
    def of(cls, suit: Suit) -> "EffectiveSuit":
        return cls[suit.name]


class TrumpContext(Protocol):
    """Capability ranking cards for a single deal."""

    def compare(self, card1: Card, card2: Card) -> int:  # pragma: no cover - protocol only
        ...

    def compare_effective(self, card1: Card, card2: Card) -> int:  # pragma: no cover - protocol only
        ...

    def successor(self, card: Card) -> list[Card]:  # pragma: no cover - protocol only
        ...


_BIG_JOKER_STRENGTH = 100
_SMALL_JOKER_STRENGTH = 99
_TRUMP_NUMBER_IN_SUIT_STRENGTH = 98
_TRUMP_NUMBER_OFF_SUIT_STRENGTH = 97


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _cmp_tuples(left: tuple[int, ...], right: tuple[int, ...]) -> int:
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


@dataclass(frozen=True, slots=True)
class Trump:
    """Trump assignment for a deal; ``suit=None`` means the deal has no trump suit."""

    number: Number
    suit: Suit | None = None

    def is_trump(self, card: Card) -> bool:
        return card.is_joker or card.number == self.number or (
            self.suit is not None and card.suit == self.suit
        )

    def effective_suit(self, card: Card) -> EffectiveSuit:
        if self.is_trump(card):
            return EffectiveSuit.TRUMP
        assert card.suit is not None
        return EffectiveSuit.of(card.suit)

    def _strength(self, card: Card) -> int:
        if card.joker is Joker.BIG:
            return _BIG_JOKER_STRENGTH
        if card.joker is Joker.SMALL:
            return _SMALL_JOKER_STRENGTH
        assert card.number is not None
        if card.number == self.number:
            if self.suit is not None and card.suit == self.suit:
                return _TRUMP_NUMBER_IN_SUIT_STRENGTH
            return _TRUMP_NUMBER_OFF_SUIT_STRENGTH
        return card.number.rank_index

    def _sort_key(self, card: Card) -> tuple[int, int, int]:
        suit_rank = -1 if card.suit is None else Suit.ordered().index(card.suit)
        return (int(self.effective_suit(card)), self._strength(card), suit_rank)

    def compare(self, card1: Card, card2: Card) -> int:
        """Total order: effective suit, then strength, then suit as a tie-break."""

        return _cmp_tuples(self._sort_key(card1), self._sort_key(card2))

    def compare_effective(self, card1: Card, card2: Card) -> int:
        """Strength order used to decide who wins a trick.

        Cards in two different plain suits cannot beat one another and compare
        equal. Off-suit trump-number cards are equally strong.
        """

        suit1 = self.effective_suit(card1)
        suit2 = self.effective_suit(card2)
        if suit1 != suit2:
            if suit1 == EffectiveSuit.TRUMP:
                return 1
            if suit2 == EffectiveSuit.TRUMP:
                return -1
            return 0
        return _sign(self._strength(card1) - self._strength(card2))

    def _number_below(self, number: Number) -> Number | None:
        idx = number.rank_index - 1
        ordered = Number.ordered()
        if idx >= 0 and ordered[idx] == self.number:
            idx -= 1
        if idx < 0:
            return None
        return ordered[idx]

    def successor(self, card: Card) -> list[Card]:
        """Return the cards ranked immediately below ``card`` in this deal."""

        if card.joker is Joker.BIG:
            return [Card.small_joker()]
        if card.joker is Joker.SMALL:
            if self.suit is not None:
                return [Card.suited(self.number, self.suit)]
            return [Card.suited(self.number, suit) for suit in Suit.ordered()]
        assert card.number is not None and card.suit is not None
        if card.number == self.number:
            if self.suit is None:
                return []
            if card.suit == self.suit:
                return [
                    Card.suited(self.number, suit) for suit in Suit.ordered() if suit != self.suit
                ]
            top = Number.ACE if self.number != Number.ACE else Number.KING
            return [Card.suited(top, self.suit)]
        below = self._number_below(card.number)
        if below is None:
            return []
        return [Card.suited(below, card.suit)]
