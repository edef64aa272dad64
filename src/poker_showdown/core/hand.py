"""Parsing of five-card hands from card tokens."""

import logging
from typing import Sequence, Union

from .card import Card, make_card
from .errors import HandParseError, InvalidHand

logger = logging.getLogger(__name__)

HAND_SIZE = 5
CARDS_PER_LINE = 2 * HAND_SIZE

CardToken = Union[str, tuple[str, str]]


def _token_to_card(token: CardToken) -> Card:
    if isinstance(token, str):
        if len(token) != 2:
            raise InvalidHand(f"Card token must be two characters, got {token!r}")
        rank_token, suit_token = token[0], token[1]
    else:
        try:
            rank_token, suit_token = token
        except (TypeError, ValueError):
            raise InvalidHand(f"Card token must be a (rank, suit) pair, got {token!r}")
    return make_card(rank_token, suit_token)


def parse_hand(tokens: Sequence[CardToken], offset: int = 0, count: int = HAND_SIZE) -> list[Card]:
    """
    Build a five-card hand from a slice of card tokens.

    Args:
        tokens: Card tokens, either two-character strings ('5H') or
                (rank, suit) pairs
        offset: Index of the first token belonging to the hand
        count: Number of cards in the hand, must be 5

    Returns:
        List of five cards in the order given

    Raises:
        InvalidHand: If count is not 5 or there are not enough tokens
        InvalidRank: If a rank character is unknown
        InvalidSuit: If a suit character is unknown
    """
    if count != HAND_SIZE:
        raise InvalidHand(f"A hand must contain exactly {HAND_SIZE} cards, not {count}")
    if offset < 0 or offset + count > len(tokens):
        raise InvalidHand(
            f"Need {count} cards starting at position {offset}, but only {len(tokens)} tokens given"
        )

    hand = []
    for i, token in enumerate(tokens[offset:offset + count]):
        try:
            hand.append(_token_to_card(token))
        except HandParseError as e:
            logger.debug(f"Rejected card at position {offset + i + 1}: {e}")
            raise

    logger.debug(f"Parsed hand: {[str(c) for c in hand]}")
    return hand


def parse_line(line: str) -> tuple[list[Card], list[Card]]:
    """
    Split an input line into the player's and the opponent's hands.

    The line holds ten whitespace separated card tokens: the first five
    belong to the player, the last five to the opponent.

    Raises:
        InvalidHand: If the line does not hold exactly ten tokens
    """
    tokens = line.split()
    if len(tokens) != CARDS_PER_LINE:
        raise InvalidHand(f"Expected {CARDS_PER_LINE} cards per line, got {len(tokens)}: {line.strip()!r}")
    return parse_hand(tokens, 0), parse_hand(tokens, HAND_SIZE)
