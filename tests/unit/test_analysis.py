"""Tests for structural hand checks."""
import pytest
from poker_showdown.core.hand import parse_hand
from poker_showdown.evaluation.analysis import group_by_rank, is_flush, is_royal, is_straight


def hand(cards: str):
    return parse_hand(cards.split())


def test_group_by_rank():
    """Test counting cards per rank ordinal."""
    groups = group_by_rank(hand("5H 5C 6S 7S KD"))
    assert groups == {3: 2, 4: 1, 5: 1, 11: 1}
    assert sum(groups.values()) == 5


def test_group_by_rank_requires_five_cards():
    """Groups must account for exactly five cards."""
    with pytest.raises(AssertionError):
        group_by_rank(hand("5H 5C 6S 7S KD")[:4])


@pytest.mark.parametrize("cards,expected", [
    ("2H 3C 4D 5S 6H", True),
    ("6H 5C 4D 3S 2H", True),
    ("TH JC QD KS AH", True),
    ("9H TC JD QS KH", True),
    ("AH 2C 3D 4S 5H", False),  # aces only play high
    ("QH KC AD 2S 3H", False),  # no wrapping around
    ("2H 3C 4D 5S 7H", False),
    ("2H 2C 3D 4S 5H", False),
])
def test_is_straight(cards, expected):
    """Test straight detection."""
    assert is_straight(hand(cards)) == expected


@pytest.mark.parametrize("cards,expected", [
    ("2H 7H 9H JH AH", True),
    ("2c 7C 9c JC Ac", True),
    ("2H 7H 9H JH AD", False),
])
def test_is_flush(cards, expected):
    """Test flush detection."""
    assert is_flush(hand(cards)) == expected


@pytest.mark.parametrize("cards,expected", [
    ("TH JH QH KH AH", True),
    ("AS KD QC JH TS", True),  # royal ranks regardless of suit
    ("9H TH JH QH KH", False),
    ("TH JH QH KH KD", False),
])
def test_is_royal(cards, expected):
    """Test royal rank detection."""
    assert is_royal(hand(cards)) == expected


def test_checks_do_not_reorder_cards():
    """The checks leave the caller's cards untouched."""
    cards = hand("KH 2H QH 9H TH")
    before = list(cards)
    is_straight(cards)
    is_flush(cards)
    is_royal(cards)
    group_by_rank(cards)
    assert cards == before
