"""Card related classes and utilities."""
from collections import namedtuple
from dataclasses import dataclass
from enum import Enum

from poker_showdown.core.errors import InvalidHand, InvalidRank, InvalidSuit

# Rank tokens in ordinal order: index 0 is a deuce, index 12 is an ace.
RANK_TOKENS = ('2', '3', '4', '5', '6', '7', '8', '9', 'T', 'J', 'Q', 'K', 'A')
RANK_ORDINALS = {token: ordinal for ordinal, token in enumerate(RANK_TOKENS)}
RANK_COUNT = len(RANK_TOKENS)

RankName = namedtuple('RankName', ['name', 'plural'])

RANK_NAMES = {
    '2': RankName("Deuce", "Deuces"),
    '3': RankName("Three", "Threes"),
    '4': RankName("Four", "Fours"),
    '5': RankName("Five", "Fives"),
    '6': RankName("Six", "Sixes"),
    '7': RankName("Seven", "Sevens"),
    '8': RankName("Eight", "Eights"),
    '9': RankName("Nine", "Nines"),
    'T': RankName("Ten", "Tens"),
    'J': RankName("Jack", "Jacks"),
    'Q': RankName("Queen", "Queens"),
    'K': RankName("King", "Kings"),
    'A': RankName("Ace", "Aces"),
}


class Suit(Enum):
    """Card suits."""
    CLUBS = 'c'
    DIAMONDS = 'd'
    HEARTS = 'h'
    SPADES = 's'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: str) -> 'Suit':
        """Parse a single suit character, ignoring case."""
        try:
            return cls(token.lower())
        except (ValueError, AttributeError):
            raise InvalidSuit(token)


class Rank(Enum):
    """Card ranks, ace high."""
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = 'T'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    def __str__(self) -> str:
        return self.value

    @property
    def ordinal(self) -> int:
        """Position of the rank from 0 (deuce) to 12 (ace)."""
        return RANK_ORDINALS[self.value]

    @property
    def full_name(self) -> str:
        return RANK_NAMES[self.value].name

    @property
    def plural_name(self) -> str:
        return RANK_NAMES[self.value].plural

    @classmethod
    def from_ordinal(cls, ordinal: int) -> 'Rank':
        return cls(rank_to_token(ordinal))

    @classmethod
    def from_token(cls, token: str) -> 'Rank':
        return cls.from_ordinal(parse_rank(token))


def parse_rank(token: str) -> int:
    """
    Convert a rank character to its ordinal.

    Args:
        token: One of '2'-'9', 'T', 'J', 'Q', 'K', 'A'

    Returns:
        Ordinal from 0 (deuce) to 12 (ace)

    Raises:
        InvalidRank: If the token is not a known rank character
    """
    if not isinstance(token, str) or len(token) != 1:
        raise InvalidRank(token)
    try:
        return RANK_ORDINALS[token]
    except KeyError:
        raise InvalidRank(token)


def rank_to_token(ordinal: int) -> str:
    """Convert an ordinal produced by this package back to its rank character."""
    assert 0 <= ordinal < RANK_COUNT, f"rank ordinal out of range: {ordinal}"
    return RANK_TOKENS[ordinal]


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (clubs, diamonds, hearts, spades)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    @property
    def ordinal(self) -> int:
        return self.rank.ordinal

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' or 'AS' for Ace of spades

        Returns:
            Card instance

        Raises:
            InvalidRank: If the first character is not a rank
            InvalidSuit: If the second character is not a suit
            InvalidHand: If the string is not exactly two characters
        """
        if len(card_str) != 2:
            raise InvalidHand(f"Invalid card string: {card_str!r}")
        return make_card(card_str[0], card_str[1])


def make_card(rank_token: str, suit_token: str) -> Card:
    """Build a card from its rank and suit characters."""
    rank = Rank.from_token(rank_token)
    suit = Suit.from_token(suit_token)
    return Card(rank=rank, suit=suit)
