"""Total ordering over classified hands."""
from typing import Sequence

from poker_showdown.evaluation.types import ClassifiedHand, Ordering


def _sign(value: int) -> Ordering:
    if value > 0:
        return Ordering.GREATER
    if value < 0:
        return Ordering.LESS
    return Ordering.EQUAL


def compare_values(a: Sequence[int], b: Sequence[int]) -> Ordering:
    """
    Compare two rank sequences highest first.

    Both sequences are sorted into fresh lists, so the inputs are never
    reordered. The first differing rank decides; if one sequence is a prefix
    of the other the longer one wins. Two empty sequences are equal.
    """
    a_sorted = sorted(a, reverse=True)
    b_sorted = sorted(b, reverse=True)
    for a_value, b_value in zip(a_sorted, b_sorted):
        if a_value != b_value:
            return _sign(a_value - b_value)
    return _sign(len(a_sorted) - len(b_sorted))


def compare(a: ClassifiedHand, b: ClassifiedHand) -> Ordering:
    """
    Compare two classified hands.

    Category decides first, then the deciding values, then the kickers.
    EQUAL is a genuine draw.
    """
    if a.category != b.category:
        return _sign(a.category - b.category)

    result = compare_values(a.deciding_values, b.deciding_values)
    if result != Ordering.EQUAL:
        return result

    return compare_values(a.kicker_values, b.kicker_values)
