"""Structural checks over a five-card hand."""
from collections import Counter
from typing import Sequence

from poker_showdown.core.card import Card
from poker_showdown.core.hand import HAND_SIZE
from poker_showdown.evaluation.constants import ROYAL_ORDINALS

RankGroup = Counter


def group_by_rank(cards: Sequence[Card]) -> RankGroup:
    """Count how many cards share each rank ordinal."""
    groups = Counter(card.ordinal for card in cards)
    assert sum(groups.values()) == HAND_SIZE, f"rank groups cover {sum(groups.values())} cards"
    return groups


def sorted_ordinals(cards: Sequence[Card], descending: bool = False) -> list[int]:
    return sorted((card.ordinal for card in cards), reverse=descending)


def is_straight(cards: Sequence[Card]) -> bool:
    """
    Check for five consecutive ranks.

    Aces only play high, so A-2-3-4-5 is not a straight.
    """
    ordinals = sorted_ordinals(cards)
    return all(high - low == 1 for low, high in zip(ordinals, ordinals[1:]))


def is_flush(cards: Sequence[Card]) -> bool:
    """Check whether all cards share a suit."""
    return len({card.suit for card in cards}) == 1


def is_royal(cards: Sequence[Card]) -> bool:
    """Check for exactly T, J, Q, K, A."""
    return tuple(sorted_ordinals(cards)) == ROYAL_ORDINALS
