# src/poker_showdown/evaluation/types.py
"""Common types for poker evaluation."""
from dataclasses import dataclass
from enum import IntEnum


class Category(IntEnum):
    """The ten hand categories, weakest first."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


class Ordering(IntEnum):
    """Outcome of comparing two hands from the first hand's point of view."""
    LESS = -1
    EQUAL = 0
    GREATER = 1

    def __neg__(self) -> 'Ordering':
        return Ordering(-self.value)


@dataclass(frozen=True)
class ClassifiedHand:
    """
    Canonical ranking of a five-card hand.

    Attributes:
        category: Hand category
        deciding_values: Rank ordinals that make up the category, descending
        kicker_values: Remaining rank ordinals used to break ties, descending
    """
    category: Category
    deciding_values: tuple[int, ...] = ()
    kicker_values: tuple[int, ...] = ()
