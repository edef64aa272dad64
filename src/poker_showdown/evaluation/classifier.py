"""Classification of five-card hands into categories."""
import logging
from typing import Sequence

from poker_showdown.core.card import Card
from poker_showdown.core.hand import HAND_SIZE
from poker_showdown.core.errors import InvalidHand
from poker_showdown.evaluation.analysis import (
    group_by_rank, is_flush, is_royal, is_straight, sorted_ordinals
)
from poker_showdown.evaluation.constants import CATEGORY_BY_PAIR_UNITS, PAIR_UNITS_BY_GROUP_SIZE
from poker_showdown.evaluation.types import Category, ClassifiedHand

logger = logging.getLogger(__name__)


def classify_groups(cards: Sequence[Card]) -> ClassifiedHand:
    """
    Classify a hand by its same-rank groups alone.

    Each group of n cards contributes C(n, 2) pair units; the total picks the
    category. Grouped ranks become the deciding values and singletons the
    kickers, both highest first.
    """
    groups = group_by_rank(cards)

    if any(count not in PAIR_UNITS_BY_GROUP_SIZE for count in groups.values()):
        raise RuntimeError(f"Unsupported rank group size in {dict(groups)}")

    pair_units = sum(PAIR_UNITS_BY_GROUP_SIZE[count] for count in groups.values())
    if pair_units not in CATEGORY_BY_PAIR_UNITS:
        raise RuntimeError(f"No category for {pair_units} pair units in {dict(groups)}")

    deciding = []
    kickers = []
    for ordinal, count in groups.items():
        if count > 1:
            deciding.extend([ordinal] * count)
        else:
            kickers.append(ordinal)

    return ClassifiedHand(
        category=CATEGORY_BY_PAIR_UNITS[pair_units],
        deciding_values=tuple(sorted(deciding, reverse=True)),
        kicker_values=tuple(sorted(kickers, reverse=True)),
    )


def classify(cards: Sequence[Card]) -> ClassifiedHand:
    """
    Classify a five-card hand.

    The grouped category is computed first; a straight or flush replaces it
    only when it ranks higher, and a straight flush always does. High cards,
    straights and flushes keep every rank as a deciding value and have no
    kickers. A royal flush is decided by its category alone.

    Args:
        cards: Exactly five cards

    Returns:
        The classified hand

    Raises:
        InvalidHand: If the hand does not contain five cards
    """
    if len(cards) != HAND_SIZE:
        raise InvalidHand(f"A hand must contain exactly {HAND_SIZE} cards, not {len(cards)}")

    best = classify_groups(cards)
    all_values = tuple(sorted_ordinals(cards, descending=True))

    if best.category == Category.HIGH_CARD:
        best = ClassifiedHand(Category.HIGH_CARD, all_values)

    straight = is_straight(cards)
    flush = is_flush(cards)

    if straight and best.category < Category.STRAIGHT:
        best = ClassifiedHand(Category.STRAIGHT, all_values)

    if flush and best.category < Category.FLUSH:
        best = ClassifiedHand(Category.FLUSH, all_values)

    if straight and flush:
        if is_royal(cards):
            best = ClassifiedHand(Category.ROYAL_FLUSH)
        else:
            best = ClassifiedHand(Category.STRAIGHT_FLUSH, all_values)

    logger.debug(f"Classified {[str(c) for c in cards]} as {best.category.name} {best.deciding_values} {best.kicker_values}")
    return best
