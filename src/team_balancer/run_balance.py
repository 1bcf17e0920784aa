"""Split the roster into balanced teams and print the results.

Usage:
    python -m src.team_balancer.run_balance [--teams N] [METRIC FLAG]

Examples:
    python -m src.team_balancer.run_balance --teams 4
    python -m src.team_balancer.run_balance --teams 3 --messages_length
    python -m src.team_balancer.run_balance --points_spent --data-dir /path/to/csvs
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from src.data_pipeline.ingestion import IngestionError, RosterIngester
from src.logging_config import setup_logging
from src.team_balancer.balancer import BalanceResult, TeamBalancer
from src.team_balancer.config import DEFAULT_METRIC, DEFAULT_NUM_TEAMS, METRIC_NAMES
from src.team_balancer.models import BalanceConfig
from src.team_balancer.report import format_results
from src.team_balancer.team_rules import InvalidTeamCount

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Split players into balanced teams with a snake draft."
    )
    parser.add_argument(
        "--teams",
        type=int,
        default=DEFAULT_NUM_TEAMS,
        help=f"number of teams to create (default: {DEFAULT_NUM_TEAMS})",
    )

    metric_group = parser.add_mutually_exclusive_group()
    for name in METRIC_NAMES:
        metric_group.add_argument(
            f"--{name}",
            dest="metric",
            action="store_const",
            const=name,
            help=f"rank players by {name.replace('_', ' ')}",
        )

    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="directory containing the roster CSV files",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="console log level (default: INFO)",
    )
    return parser


def parse_config(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments. ``metric`` is None when no flag is given."""
    return build_parser().parse_args(argv)


def run_balance(config: BalanceConfig) -> BalanceResult:
    """Load roster data for *config* and balance it.

    Raises:
        IngestionError: If the roster files cannot be read.
        InvalidTeamCount: If the team count cannot be filled.
    """
    ingester = RosterIngester(config.data_dir)
    data = ingester.read_for_metric(config.metric)

    balancer = TeamBalancer(config)
    return balancer.run(
        data.participants,
        data.auxiliary_events(balancer.metric.auxiliary_dataset),
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_config(argv)
    setup_logging(args.log_level)

    if args.metric is None:
        logger.info("No sort type specified, using default: %s", DEFAULT_METRIC)
        args.metric = DEFAULT_METRIC

    if args.teams < 1:
        logger.error("Number of teams must be at least 1")
        return 1

    config = BalanceConfig(
        num_teams=args.teams,
        metric=args.metric,
        data_dir=args.data_dir,
    )
    logger.info(
        "Starting player assignment to %d teams using %s sort...",
        config.num_teams, config.metric,
    )

    try:
        result = run_balance(config)
    except InvalidTeamCount as e:
        logger.error("%s", e)
        return 1
    except IngestionError:
        logger.exception("Could not load roster data")
        return 1

    print(format_results(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
