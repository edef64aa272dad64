"""Five-card poker hand ranking and head-to-head comparison."""

from poker_showdown.core.card import Card, Rank, Suit, make_card, parse_rank, rank_to_token
from poker_showdown.core.errors import HandParseError, InvalidHand, InvalidRank, InvalidSuit
from poker_showdown.core.hand import parse_hand, parse_line
from poker_showdown.evaluation.classifier import classify
from poker_showdown.evaluation.comparator import compare
from poker_showdown.evaluation.hand_description import category_name
from poker_showdown.evaluation.types import Category, ClassifiedHand, Ordering

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "make_card",
    "parse_rank",
    "rank_to_token",
    "HandParseError",
    "InvalidHand",
    "InvalidRank",
    "InvalidSuit",
    "parse_hand",
    "parse_line",
    "classify",
    "compare",
    "category_name",
    "Category",
    "ClassifiedHand",
    "Ordering",
]
