"""Head-to-head showdowns between a player's hand and an opponent's hand."""
import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from poker_showdown.core.card import Card
from poker_showdown.core.errors import HandParseError
from poker_showdown.core.hand import parse_line
from poker_showdown.evaluation.classifier import classify
from poker_showdown.evaluation.comparator import compare
from poker_showdown.evaluation.hand_description import describe_hand
from poker_showdown.evaluation.types import ClassifiedHand, Ordering

logger = logging.getLogger(__name__)

PLAYER = "player"
OPPONENT = "opponent"


@dataclass(frozen=True)
class ShowdownResult:
    """Outcome of one line: both hands, their rankings and the comparison."""

    player_cards: tuple[Card, ...]
    opponent_cards: tuple[Card, ...]
    player_hand: ClassifiedHand
    opponent_hand: ClassifiedHand
    ordering: Ordering
    line_number: int = 0

    @property
    def winner(self) -> Optional[str]:
        """'player', 'opponent' or None for a draw."""
        if self.ordering == Ordering.GREATER:
            return PLAYER
        if self.ordering == Ordering.LESS:
            return OPPONENT
        return None

    @property
    def player_hand_line(self) -> str:
        return describe_hand(self.player_cards, self.player_hand)

    @property
    def opponent_hand_line(self) -> str:
        return describe_hand(self.opponent_cards, self.opponent_hand)

    def __str__(self) -> str:
        verdict = f"{self.winner} wins" if self.winner else "draw"
        return f"{self.player_hand_line} | {self.opponent_hand_line} => {verdict}"


@dataclass
class ShowdownTally:
    """Running counts across many showdowns."""

    player_wins: int = 0
    opponent_wins: int = 0
    draws: int = 0
    skipped: int = 0
    skipped_lines: list[int] = field(default_factory=list)

    @property
    def hands_played(self) -> int:
        return self.player_wins + self.opponent_wins + self.draws

    def record(self, result: ShowdownResult) -> None:
        if result.winner == PLAYER:
            self.player_wins += 1
        elif result.winner == OPPONENT:
            self.opponent_wins += 1
        else:
            self.draws += 1

    def record_skip(self, line_number: int) -> None:
        self.skipped += 1
        self.skipped_lines.append(line_number)


def summary_line(tally: ShowdownTally) -> str:
    return f"Player won {tally.player_wins} times!"


class Showdown:
    """
    Plays lines of ten card tokens against each other and keeps a tally.

    Attributes:
        strict: Re-raise parse errors instead of skipping malformed lines
        tally: Counts accumulated so far
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.tally = ShowdownTally()

    def play_line(self, line: str, line_number: int = 0) -> ShowdownResult:
        """
        Compare the two hands on one line and record the outcome.

        Raises:
            HandParseError: If the line is malformed
        """
        player_cards, opponent_cards = parse_line(line)
        player_hand = classify(player_cards)
        opponent_hand = classify(opponent_cards)

        result = ShowdownResult(
            player_cards=tuple(player_cards),
            opponent_cards=tuple(opponent_cards),
            player_hand=player_hand,
            opponent_hand=opponent_hand,
            ordering=compare(player_hand, opponent_hand),
            line_number=line_number,
        )
        self.tally.record(result)
        logger.debug(f"Line {line_number}: {result}")
        return result

    def play_lines(self, lines: Iterable[str]) -> Iterator[ShowdownResult]:
        """
        Play every non-blank line, yielding results as they are produced.

        Malformed lines are logged and counted as skipped unless strict.
        """
        for line_number, line in enumerate(lines, 1):
            if not line.strip():
                continue
            try:
                yield self.play_line(line, line_number)
            except HandParseError as e:
                if self.strict:
                    raise
                logger.warning(f"Skipping line {line_number}: {e}")
                self.tally.record_skip(line_number)
