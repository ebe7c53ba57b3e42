"""Card abstractions and helpers for shengji decks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


class Suit(str, Enum):
    """Enumeration of the four suits, in tie-breaking order."""

    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    @classmethod
    def ordered(cls) -> tuple["Suit", ...]:
        return (cls.CLUBS, cls.DIAMONDS, cls.HEARTS, cls.SPADES)


class Number(str, Enum):
    """Enumeration of card numbers ordered from low to high."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @classmethod
    def ordered(cls) -> tuple["Number", ...]:
        """Return numbers from lowest to highest, ignoring any trump promotion."""

        return (
            cls.TWO,
            cls.THREE,
            cls.FOUR,
            cls.FIVE,
            cls.SIX,
            cls.SEVEN,
            cls.EIGHT,
            cls.NINE,
            cls.TEN,
            cls.JACK,
            cls.QUEEN,
            cls.KING,
            cls.ACE,
        )

    @property
    def rank_index(self) -> int:
        return Number.ordered().index(self)


class Joker(str, Enum):
    SMALL = "SJ"
    BIG = "BJ"


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a physical card: a suited number or a joker."""

    number: Number | None = None
    suit: Suit | None = None
    joker: Joker | None = None

    def __post_init__(self) -> None:
        if self.joker is not None:
            if self.number is not None or self.suit is not None:
                raise ValueError("jokers carry neither number nor suit")
        elif self.number is None or self.suit is None:
            raise ValueError("suited cards need both number and suit")

    @classmethod
    def suited(cls, number: Number, suit: Suit) -> "Card":
        return cls(number=number, suit=suit)

    @classmethod
    def small_joker(cls) -> "Card":
        return cls(joker=Joker.SMALL)

    @classmethod
    def big_joker(cls) -> "Card":
        return cls(joker=Joker.BIG)

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse a short code such as ``"10H"``, ``"2s"`` or ``"BJ"``."""

        text = code.strip().upper()
        for joker in Joker:
            if text == joker.value:
                return cls(joker=joker)
        if len(text) < 2:
            raise ValueError(f"invalid card code '{code}'")
        face, suit_symbol = text[:-1], text[-1]
        try:
            return cls(number=Number(face), suit=Suit(suit_symbol))
        except ValueError as exc:
            raise ValueError(f"invalid card code '{code}'") from exc

    @property
    def is_joker(self) -> bool:
        return self.joker is not None

    @property
    def code(self) -> str:
        if self.joker is not None:
            return self.joker.value
        assert self.number is not None and self.suit is not None
        return f"{self.number.value}{self.suit.value}"

    def __str__(self) -> str:
        return self.code


def iter_deck(decks: int = 2) -> Iterator[Card]:
    """Yield every physical card in ``decks`` standard decks, jokers included."""

    if decks <= 0:
        raise ValueError("decks must be positive")
    for _ in range(decks):
        for suit in Suit.ordered():
            for number in Number.ordered():
                yield Card(number=number, suit=suit)
        yield Card.small_joker()
        yield Card.big_joker()


def cards_from_codes(codes: Iterable[str]) -> list[Card]:
    return [Card.from_code(code) for code in codes]


def format_cards(cards: Iterable[Card]) -> str:
    return " ".join(card.code for card in cards)
