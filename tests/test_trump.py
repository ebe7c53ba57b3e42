"""Tests covering trump ordering and rank adjacency."""

from __future__ import annotations

import functools

import pytest

from shengji.cards import Card, Number, Suit, iter_deck
from shengji.trump import EffectiveSuit, Trump

HEARTS_TWO = Trump(number=Number.TWO, suit=Suit.HEARTS)
NO_TRUMP_FIVE = Trump(number=Number.FIVE)


def c(code: str) -> Card:
    return Card.from_code(code)


def test_effective_suit_groups_trumps() -> None:
    assert HEARTS_TWO.effective_suit(c("2S")) == EffectiveSuit.TRUMP
    assert HEARTS_TWO.effective_suit(c("KH")) == EffectiveSuit.TRUMP
    assert HEARTS_TWO.effective_suit(c("SJ")) == EffectiveSuit.TRUMP
    assert HEARTS_TWO.effective_suit(c("KS")) == EffectiveSuit.SPADES
    assert NO_TRUMP_FIVE.effective_suit(c("KH")) == EffectiveSuit.HEARTS
    assert NO_TRUMP_FIVE.effective_suit(c("5H")) == EffectiveSuit.TRUMP


def test_compare_sorts_trumps_above_plain_suits() -> None:
    deck = sorted(set(iter_deck(1)), key=functools.cmp_to_key(HEARTS_TWO.compare))

    assert [card.code for card in deck[-6:]] == ["2C", "2D", "2S", "2H", "SJ", "BJ"]
    assert deck[-7].code == "AH"
    assert deck[0].code == "3C"


def test_compare_is_total_over_distinct_cards() -> None:
    deck = list(set(iter_deck(1)))
    for left in deck:
        for right in deck:
            result = HEARTS_TWO.compare(left, right)
            assert (result == 0) == (left == right)
            assert result == -HEARTS_TWO.compare(right, left)


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("2S", "2C", 0),
        ("2H", "2C", 1),
        ("3H", "AS", 1),
        ("AS", "KD", 0),
        ("AS", "KS", 1),
        ("SJ", "BJ", -1),
    ],
)
def test_compare_effective(left: str, right: str, expected: int) -> None:
    assert HEARTS_TWO.compare_effective(c(left), c(right)) == expected


@pytest.mark.parametrize(
    ("card", "expected"),
    [
        ("BJ", ["SJ"]),
        ("SJ", ["2H"]),
        ("2H", ["2C", "2D", "2S"]),
        ("2S", ["AH"]),
        ("AH", ["KH"]),
        ("3H", []),
        ("3S", []),
        ("KD", ["QD"]),
    ],
)
def test_successor_with_trump_suit(card: str, expected: list[str]) -> None:
    assert [s.code for s in HEARTS_TWO.successor(c(card))] == expected


@pytest.mark.parametrize(
    ("card", "expected"),
    [
        ("SJ", ["5C", "5D", "5H", "5S"]),
        ("5H", []),
        ("6S", ["4S"]),
        ("2S", []),
    ],
)
def test_successor_without_trump_suit(card: str, expected: list[str]) -> None:
    assert [s.code for s in NO_TRUMP_FIVE.successor(c(card))] == expected


def test_successor_skips_to_king_when_ace_is_trump_number() -> None:
    trump = Trump(number=Number.ACE, suit=Suit.SPADES)
    assert [s.code for s in trump.successor(c("AD"))] == ["KS"]
