# startup_scout/cli.py

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace

from .domain import aggregate_startups, load_config, parse_query
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="startup-scout",
        description="Discover recently launched startups from public sources.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the filters extracted from a query
  startup-scout parse "show me AI startups in Series A last 14 days"

  # Search the last 30 days, keeping only startups matching the query filters
  startup-scout search "fintech london" --days 30 --filter
        """,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log at DEBUG level",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="parse a query into filters")
    parse_cmd.add_argument("query", help="free-text query")

    search_cmd = commands.add_parser("search", help="search every source")
    search_cmd.add_argument("query", help="free-text query")
    search_cmd.add_argument(
        "--days",
        type=int,
        default=None,
        help="days of announcements to fetch (default: parsed from the query)",
    )
    search_cmd.add_argument(
        "--limit",
        type=int,
        default=None,
        help="maximum startups to print",
    )
    search_cmd.add_argument(
        "--filter",
        action="store_true",
        help="drop startups that do not match the parsed query filters",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    if args.command == "parse":
        return _run_parse(args)
    return _run_search(args)


def _run_parse(args: argparse.Namespace) -> int:
    parsed = parse_query(args.query)
    print(parsed.model_dump_json(indent=2))
    return 0


def _run_search(args: argparse.Namespace) -> int:
    try:
        config = load_config()
    except ValueError as error:
        logger.error("Invalid configuration: %s", error)
        return 2

    if args.filter:
        config = replace(config, apply_query_filters=True)
    if args.limit is not None:
        config = replace(config, max_results=args.limit)

    days_back = args.days if args.days is not None else parse_query(args.query).timeframe

    result = asyncio.run(aggregate_startups(args.query, days_back=days_back, config=config))

    payload = {
        "startups": [startup.model_dump(mode="json") for startup in result.startups],
        "summary": result.summary.model_dump(mode="json"),
    }
    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write("\n")

    return 0 if result.summary.successful_sources else 1


if __name__ == "__main__":
    sys.exit(main())
