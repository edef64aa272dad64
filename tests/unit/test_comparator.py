"""Tests for comparing classified hands."""
import itertools

import pytest
from poker_showdown.core.hand import parse_hand, parse_line
from poker_showdown.evaluation.classifier import classify
from poker_showdown.evaluation.comparator import compare, compare_values
from poker_showdown.evaluation.types import Category, ClassifiedHand, Ordering


def classified(cards: str) -> ClassifiedHand:
    return classify(parse_hand(cards.split()))


def play(line: str) -> Ordering:
    player, opponent = parse_line(line)
    return compare(classify(player), classify(opponent))


@pytest.fixture
def ranked_hands():
    """One hand per category, weakest first."""
    return [
        classified("AH QD TH 8C 5S"),
        classified("2C 2S 3S 4D 5D"),
        classified("2D 2C 3D 3C 4H"),
        classified("2H 2D 2C 3H 4S"),
        classified("2H 3C 4D 5S 6H"),
        classified("2C 4C 6C 8C TC"),
        classified("2H 2D 2C 3H 3S"),
        classified("2H 2D 2C 2S 3H"),
        classified("2H 3H 4H 5H 6H"),
        classified("TC JC QC KC AC"),
    ]


def test_pair_of_eights_beats_pair_of_fives():
    """Matching categories fall back to the paired rank."""
    assert play("5H 5C 6S 7S KD 2C 3S 8S 8D TD") == Ordering.LESS


def test_royal_flush_beats_straight_flush():
    """Category decides before any values are looked at."""
    assert play("2H 3H 4H 5H 6H TC JC QC KC AC") == Ordering.LESS


def test_two_royal_flushes_draw():
    """Identical rankings are a draw, not a forced win."""
    assert play("AH KH QH JH TH AC KC QC JC TC") == Ordering.EQUAL


def test_higher_two_pair_wins():
    """Two pair is decided by the pairs highest first."""
    assert play("2D 2C 3D 3C 4H 4D 4C 5D 5C 6H") == Ordering.LESS
    assert play("4D 4C 5D 5C 6H 2D 2C 3D 3C 4H") == Ordering.GREATER


def test_kickers_break_ties():
    """Same pair, decided by the kickers."""
    assert play("5H 5C 6S 7S KD 5D 5S 6C 7D QD") == Ordering.GREATER
    assert play("5H 5C 6S 7S KD 5D 5S 6C 7D KC") == Ordering.EQUAL


def test_high_card_compares_every_rank():
    """High card hands compare rank by rank."""
    assert play("AH QD TH 8C 5S AD QC TS 8D 4H") == Ordering.GREATER


def test_straights_compare_top_card():
    """The higher straight wins."""
    assert play("9H 8C 7D 6S 5H TH 9C 8D 7S 6H") == Ordering.LESS


def test_category_monotonicity(ranked_hands):
    """Any higher category beats any lower one."""
    for low, high in itertools.combinations(ranked_hands, 2):
        assert compare(high, low) == Ordering.GREATER
        assert compare(low, high) == Ordering.LESS


def test_antisymmetry(ranked_hands):
    """Swapping the hands negates the result."""
    extra = [classified("5H 5C 6S 7S KD"), classified("5D 5S 6C 7D KC")]
    for a, b in itertools.product(ranked_hands + extra, repeat=2):
        assert compare(a, b) == -compare(b, a)
        assert compare(a, b) in (Ordering.LESS, Ordering.EQUAL, Ordering.GREATER)


def test_compare_does_not_modify_inputs():
    """Comparison sorts private copies."""
    a = ClassifiedHand(Category.PAIR, (3, 3), (4, 11, 5))
    b = ClassifiedHand(Category.PAIR, (3, 3), (5, 4, 11))
    assert compare(a, b) == Ordering.EQUAL
    assert a.kicker_values == (4, 11, 5)
    assert b.kicker_values == (5, 4, 11)


@pytest.mark.parametrize("a,b,expected", [
    ((), (), Ordering.EQUAL),
    ((5, 3), (5, 3), Ordering.EQUAL),
    ((6,), (5, 4), Ordering.GREATER),
    ((5, 2), (5, 3), Ordering.LESS),
    ((5, 3, 1), (5, 3), Ordering.GREATER),
    ((5,), (5, 3), Ordering.LESS),
])
def test_compare_values(a, b, expected):
    """Element by element, longer wins on a shared prefix, empty equals empty."""
    assert compare_values(a, b) == expected


def test_ordering_negation():
    """Test Ordering sign flips."""
    assert -Ordering.LESS == Ordering.GREATER
    assert -Ordering.GREATER == Ordering.LESS
    assert -Ordering.EQUAL == Ordering.EQUAL


def test_full_house_compares_highest_grouped_rank_first():
    """Grouped ranks are compared highest first, whichever group they belong to."""
    assert play("2H 2D 4C 4D 4S 3C 3D 3S 2S 2C") == Ordering.GREATER
    assert play("2H 2D 4C 4D 4S 3C 3D 3S 9S 9D") == Ordering.LESS
