"""
Command-line entry point.

Reads a puzzle input file, parses every game and prints both answers.

    cube-tally input.txt
    cube-tally input.txt --red 20 --json
    cat input.txt | cube-tally - --export games.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from cube_tally import __version__
from cube_tally.config import TallyConfig
from cube_tally.core.errors import ParseError
from cube_tally.core.models.collection import RecordCollection
from cube_tally.core.schemas.validator import SchemaError, validate_collection
from cube_tally.core.utils.serialization import save_collection, serialize_collection

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cube-tally",
        description="Check cube game records against a bag and sum the results",
    )
    parser.add_argument("input", help="Puzzle input file, or '-' for stdin")
    parser.add_argument("--red", type=int, help="Red cubes in the bag (default 12)")
    parser.add_argument("--green", type=int, help="Green cubes in the bag (default 13)")
    parser.add_argument("--blue", type=int, help="Blue cubes in the bag (default 14)")
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")
    parser.add_argument("--export", type=Path, help="Write parsed games to this JSON file")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Warnings and errors only")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _configure_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args)

    try:
        config = TallyConfig().with_overrides(red=args.red, green=args.green, blue=args.blue)
    except ValueError as e:
        logger.error("Invalid capacity: %s", e)
        return 1

    try:
        text = _read_input(args.input)
        games = RecordCollection.parse(text)
        if args.export:
            if config.strict_schema:
                validate_collection(serialize_collection(games), strict=True)
            save_collection(games, args.export)
    except ParseError as e:
        logger.error("Failed to parse input: %s", e)
        return 1
    except SchemaError as e:
        logger.error("Export failed validation at %s: %s", e.path or "<root>", e)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        logger.error("I/O error: %s", e)
        return 1

    summary = games.summarize(config.capacity)
    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print(f"Part 1: {summary.sum_valid_ids}")
        print(f"Part 2: {summary.sum_minimal_powers}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
