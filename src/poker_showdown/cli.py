"""Command-line interface for scoring poker hand files."""

import logging
import sys

import click

from poker_showdown.config import get_config
from poker_showdown.core.errors import HandParseError
from poker_showdown.evaluation.hand_description import describe_detailed
from poker_showdown.game.showdown import Showdown, summary_line

logger = logging.getLogger(__name__)

VERDICTS = {
    "player": "Player wins",
    "opponent": "Opponent wins",
    None: "Draw",
}


def setup_logging(level: str = "INFO") -> None:
    """Set up logging for the command line."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True
    )


@click.group()
def cli():
    """Five-card poker showdown scorer."""
    pass


@cli.command()
@click.option('--input', 'input_path', default=None, help='File of hands, ten cards per line')
@click.option('--output', 'output_path', default=None, help='File the summary is written to')
@click.option('--config', default=None, help='Configuration to use')
@click.option('--strict', is_flag=True, help='Fail on the first malformed line')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def tally(input_path, output_path, config, strict, verbose):
    """Score every line of a hand file and write how often the player won."""
    settings = get_config(config)
    setup_logging("DEBUG" if verbose else settings.LOG_LEVEL)

    input_path = input_path or settings.POKER_FILE_PATH
    output_path = output_path or settings.OUTPUT_FILE_PATH
    strict = strict or settings.STRICT_PARSING

    try:
        source = open(input_path, encoding="utf-8", errors="replace")
    except OSError as e:
        raise click.FileError(input_path, hint=f"Could not open for input: {e.strerror}")

    with source:
        try:
            sink = open(output_path, "w", encoding="utf-8")
        except OSError as e:
            raise click.FileError(output_path, hint=f"Could not open for output: {e.strerror}")

        showdown = Showdown(strict=strict)
        with sink:
            try:
                for result in showdown.play_lines(source):
                    click.echo(str(result))
            except HandParseError as e:
                raise click.ClickException(str(e))

            summary = summary_line(showdown.tally)
            sink.write(summary + "\n")

    logger.info(
        f"Played {showdown.tally.hands_played} hands: "
        f"{showdown.tally.player_wins} won, {showdown.tally.opponent_wins} lost, "
        f"{showdown.tally.draws} drawn, {showdown.tally.skipped} skipped"
    )
    click.echo(summary)


@cli.command()
@click.argument('cards', nargs=10)
def compare(cards):
    """Compare two hands given as ten cards, player first."""
    showdown = Showdown(strict=True)
    try:
        result = showdown.play_line(" ".join(cards))
    except HandParseError as e:
        raise click.BadParameter(str(e), param_hint="CARDS")

    click.echo(f"Player:   {result.player_hand_line} ({describe_detailed(result.player_hand)})")
    click.echo(f"Opponent: {result.opponent_hand_line} ({describe_detailed(result.opponent_hand)})")
    click.echo(VERDICTS[result.winner])


def main():
    cli()


if __name__ == '__main__':
    main()
