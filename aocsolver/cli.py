"""Command line entry point for solving Advent of Code puzzles."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from aocsolver import year2024

__all__ = ["input_path", "solve", "main"]

_YEARS = {"2024": year2024}

_log = logging.getLogger(__name__)


def input_path(year: int | str, day: int) -> Path:
    """Location of the puzzle input for the given year and day."""
    return Path("cmd") / f"year{year}" / f"day{day}" / "1.txt"


def solve(year: int | str, day: int, text: str) -> tuple[int, int]:
    """Scores of both parts of the given puzzle for the input text."""
    module = _YEARS.get(str(year))
    if module is None:
        raise ValueError(f"no commands for year {year}")
    parts = module.solver(day)
    return parts.part1(text), parts.part2(text)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc",
        description=(
            "A command line tool for solving Advent of Code problems "
            "across multiple years."
        ),
    )
    years = parser.add_subparsers(dest="year", metavar="YEAR")
    for year, module in _YEARS.items():
        year_parser = years.add_parser(
            year,
            help=year,
            description=(
                f"{year} is a command line utility for solving "
                f"Advent of Code {year} puzzles."
            ),
        )
        day_commands = year_parser.add_subparsers(dest="command", metavar="dayN")
        for day in module.days():
            name = f"day{day}"
            day_commands.add_parser(name, help=name, description=name)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in argv; return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.year is None:
        parser.print_help()
        return 0
    if args.command is None:
        return 0

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    day = int(args.command.removeprefix("day"))
    try:
        text = input_path(args.year, day).read_text()
    except OSError as err:
        _log.error("error reading input: %s", err)
        return 1

    first, second = solve(args.year, day, text)
    _log.info("score part1: %d", first)
    _log.info("score part2: %d", second)
    return 0