"""Human-readable descriptions of classified hands."""
from typing import Optional, Sequence

from poker_showdown.core.card import Card, Rank, rank_to_token
from poker_showdown.evaluation.classifier import classify
from poker_showdown.evaluation.constants import CATEGORY_NAMES
from poker_showdown.evaluation.types import Category, ClassifiedHand


def category_name(category: Category) -> str:
    """Display name of a hand category, e.g. 'Three of a Kind'."""
    return CATEGORY_NAMES[Category(category)]


def format_values(values: Sequence[int]) -> str:
    """Render rank ordinals as their tokens: (11, 5, 4) -> 'K, 7, 6'."""
    return ", ".join(rank_to_token(value) for value in values)


def describe_classified(classified: ClassifiedHand) -> str:
    """
    Render the category with its deciding and kicker ranks.

    Example: 'Pair (1): 5, 5 | K, 7, 6'
    """
    text = f"{category_name(classified.category)} ({int(classified.category)})"
    if classified.deciding_values:
        text += f": {format_values(classified.deciding_values)}"
    if classified.kicker_values:
        text += f" | {format_values(classified.kicker_values)}"
    return text


def describe_hand(cards: Sequence[Card], classified: Optional[ClassifiedHand] = None) -> str:
    """Render the cards as given followed by their classification."""
    if classified is None:
        classified = classify(cards)
    cards_str = " ".join(str(card) for card in cards)
    return f"{cards_str} -> {describe_classified(classified)}"


def describe_detailed(classified: ClassifiedHand) -> str:
    """Name the hand the way a dealer would: 'Pair of Fives', 'Full House, Aces over Kings'."""
    category = classified.category
    ranks = [Rank.from_ordinal(value) for value in classified.deciding_values]

    if category == Category.ROYAL_FLUSH:
        return "Royal Flush"
    if category in (Category.STRAIGHT_FLUSH, Category.STRAIGHT, Category.FLUSH):
        return f"{ranks[0].full_name}-high {category_name(category)}"
    if category == Category.FOUR_OF_A_KIND:
        return f"Four {ranks[0].plural_name}"
    if category == Category.FULL_HOUSE:
        # the middle of five grouped ranks always belongs to the trips
        trips = ranks[2]
        pair = next(rank for rank in ranks if rank != trips)
        return f"Full House, {trips.plural_name} over {pair.plural_name}"
    if category == Category.THREE_OF_A_KIND:
        return f"Three {ranks[0].plural_name}"
    if category == Category.TWO_PAIR:
        return f"Two Pair, {ranks[0].plural_name} and {ranks[2].plural_name}"
    if category == Category.PAIR:
        return f"Pair of {ranks[0].plural_name}"
    return f"{ranks[0].full_name} High"
