"""CLI entrypoint for the daily puzzle report."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date, datetime
from pathlib import Path

from nytgames.config import FetchConfig, ReportConfig
from nytgames.core.exceptions import NytGamesError
from nytgames.games.accessor import get_game
from nytgames.games.registry import ALL_GAMES, get_definition
from nytgames.io.export import dump_record
from nytgames.io.http_client import PuzzleHttpClient
from nytgames.report.assembler import ReportAssembler
from nytgames.report.writer import ReportWriter
from nytgames.utils.logger import configure_logging, get_logger

LOGGER = get_logger("nytgames.main")


def parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fetch today's puzzle solutions and write a markdown report",
    )
    parser.add_argument(
        "--date",
        type=parse_date,
        help="Report date (YYYY-MM-DD); defaults to today",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory for the report file (default: Reports, or $NYTGAMES_REPORT_DIR)",
    )
    parser.add_argument(
        "--game",
        choices=sorted(ALL_GAMES),
        help="Fetch a single game and print the decoded record as JSON instead of writing a report",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    now = datetime.now()
    if args.date:
        now = datetime.combine(args.date, now.time())
    output_dir = args.output_dir or ReportConfig.from_env().output_dir

    with PuzzleHttpClient(FetchConfig.from_env()) as client:
        try:
            if args.game:
                record = get_game(get_definition(args.game), client, now.date()).unwrap()
                print(dump_record(record))
                return 0
            text = ReportAssembler(client).build(now)
        except NytGamesError as exc:
            LOGGER.error("Aborted: %s", exc)
            return 1

    ReportWriter(output_dir).write(text, now.date())
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
