"""Constants for poker hand evaluation."""
from poker_showdown.core.card import Rank
from poker_showdown.evaluation.types import Category

# Pair units contributed by a group of same-rank cards: C(n, 2)
PAIR_UNITS_BY_GROUP_SIZE = {
    1: 0,
    2: 1,
    3: 3,
    4: 6,
}

# Total pair units across a hand determine its grouped category
CATEGORY_BY_PAIR_UNITS = {
    0: Category.HIGH_CARD,
    1: Category.PAIR,
    2: Category.TWO_PAIR,
    3: Category.THREE_OF_A_KIND,
    4: Category.FULL_HOUSE,
    6: Category.FOUR_OF_A_KIND,
}

CATEGORY_NAMES = {
    Category.HIGH_CARD: "High Card",
    Category.PAIR: "Pair",
    Category.TWO_PAIR: "Two Pair",
    Category.THREE_OF_A_KIND: "Three of a Kind",
    Category.STRAIGHT: "Straight",
    Category.FLUSH: "Flush",
    Category.FULL_HOUSE: "Full House",
    Category.FOUR_OF_A_KIND: "Four of a Kind",
    Category.STRAIGHT_FLUSH: "Straight Flush",
    Category.ROYAL_FLUSH: "Royal Flush",
}

ROYAL_ORDINALS = tuple(rank.ordinal for rank in (Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE))
