"""
Knock Out! CLI - play a single game from the command line.

Usage:
    knock-out                      Play with the configured defaults
    knock-out --players 3 --seed 7 Play a reproducible three-player game

Defaults come from the ``KNOCK_OUT_*`` environment variables.
"""

import argparse
import sys

from pydantic import ValidationError

from src.config.settings import LOG_LEVELS, Settings, configure_logging, get_settings
from src.engine.base import Die, SeededRandomSource
from src.engine.events import DiceGameTracker
from src.engine.knock_out import KnockOutGame


def build_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    """Argument parser with defaults taken from the current settings."""
    if settings is None:
        settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Knock Out! - a two-dice push-your-luck game",
        prog="knock-out",
    )
    parser.add_argument("--players", "-p", type=int, default=settings.num_players,
                        help="Number of players")
    parser.add_argument("--seed", "-s", type=int, default=settings.seed,
                        help="Seed for a reproducible game")
    parser.add_argument("--sides", type=int, default=settings.dice_sides,
                        help="Number of sides on the die")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"Error: invalid configuration\n{exc}", file=sys.stderr)
        return 1

    args = build_parser(settings).parse_args(argv)
    configure_logging(args.log_level)

    source = SeededRandomSource(args.seed)
    tracker = DiceGameTracker()
    try:
        game = KnockOutGame(
            num_players=args.players,
            die=Die(args.sides, source),
            random_source=source,
            observer=tracker,
        )
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    game.play()

    if game.winner is not None:
        print(f"Player {game.winner.id} wins with {game.winner.score} points!")
    else:
        print("All players have been knocked out!")
    print(f"The game lasted for {tracker.number_of_turns} turns.\n")

    print("Final Standings")
    for rank, player in enumerate(game.standings(), 1):
        status = "knocked out" if player.eliminated else "in play"
        print(
            f"  {rank}. Player {player.id}: {player.score} points "
            f"(knock-out {player.knock_out_number}, {status})"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
