"""
CLI entry point for the champion ranker demo.

Parses arguments, validates config, ranks a built-in roster and prints
the outcome.
"""

import argparse
import sys
from argparse import Namespace
from collections.abc import Sequence
from typing import TypedDict

from prettytable import PrettyTable

from .exceptions import ConfigurationError
from .logging_config import setup_logging, get_logger
from .models import Competitor, RankingResult
from .rankers.champion_ranker import ChampionRanker, RankerConfig
from .rosters import ROSTERS, get_roster


class CLIArgs(TypedDict):
    """Typed representation of parsed CLI arguments."""
    roster: str
    accumulate_ties: bool
    debug: bool
    log_level: str


def parse_args(argv: Sequence[str] | None = None) -> Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Champion Ranker - pick a champion and its tie group from a roster"
    )

    _ = parser.add_argument(
        "--roster",
        default="sample",
        help=f"Built-in roster to rank: {', '.join(ROSTERS)} (default: sample)"
    )
    _ = parser.add_argument(
        "--accumulate-ties",
        action="store_true",
        help="Let equal-rank competitors join an existing tie group instead of resetting it"
    )
    _ = parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    _ = parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set logging level (default: INFO)"
    )

    return parser.parse_args(argv)


def args_to_typed(ns: Namespace) -> CLIArgs:
    """Convert argparse Namespace to typed CLIArgs."""
    return CLIArgs(
        roster=ns.roster,
        accumulate_ties=ns.accumulate_ties,
        debug=ns.debug,
        log_level=ns.log_level,
    )


def validate_config(args: CLIArgs) -> None:
    """Validate configuration parameters."""
    logger = get_logger("validate_config")

    if args["roster"] not in ROSTERS:
        logger.error(f"Unknown roster: {args['roster']}")
        raise ConfigurationError(
            f"Unknown roster: {args['roster']!r} (available: {', '.join(sorted(ROSTERS))})"
        )

    logger.info(f"Roster: {args['roster']}")


def wire_components(args: CLIArgs) -> tuple[tuple[Competitor, ...], ChampionRanker]:
    """Build the roster and ranker from validated arguments."""
    logger = get_logger("wire_components")

    roster = get_roster(args["roster"])
    config = RankerConfig(accumulate_ties=args["accumulate_ties"])
    ranker = ChampionRanker.from_config(config)
    logger.info(f"Configuration: roster={args['roster']}, accumulate_ties={config.accumulate_ties}")

    return roster, ranker


def build_table(roster: Sequence[Competitor], result: RankingResult) -> PrettyTable:
    """Render the roster with the champion and tied competitors marked."""
    table = PrettyTable()
    table.field_names = ["#", "Name", "Strength", "Age", "Status"]
    table.align["#"] = "r"
    table.align["Name"] = "l"
    table.align["Strength"] = "r"
    table.align["Age"] = "r"

    for i, competitor in enumerate(roster, 1):
        if competitor == result.champion:
            status = "champion"
        elif competitor in result.tied_champions:
            status = "tied"
        else:
            status = ""
        table.add_row([i, competitor.name, competitor.strength, competitor.age, status])

    return table


def main(argv: Sequence[str] | None = None) -> None:
    """Main CLI entry point."""
    args = args_to_typed(parse_args(argv))

    setup_logging(level=args["log_level"], debug=args["debug"])
    logger = get_logger("main")

    try:
        validate_config(args)
    except ConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    roster, ranker = wire_components(args)
    result = ranker.rank(roster)

    print(f"Roster: {args['roster']} ({len(roster)} competitors)")
    print(build_table(roster, result))
    print(f"Champion: {result.champion.name}")
    if result.has_ties:
        print(f"Tied champions: {', '.join(result.tied_names())}")
    else:
        print("Tied champions: none")

    logger.info("Ranking completed")


if __name__ == "__main__":
    main()
