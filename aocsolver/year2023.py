"""Puzzle commands for the 2023 event.

Every registered 2023 day uses the placeholder solver. Day 3 has a solver
directory but is not registered as a command.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import NamedTuple

from aocsolver import unsolved

__all__ = ["days", "solver", "main"]

YEAR = "2023"
_REGISTERED_DAYS = (1, 2, *range(4, 26))

_log = logging.getLogger(__name__)


class _Parts(NamedTuple):
    part1: Callable[[str], int]
    part2: Callable[[str], int]


def days() -> list[int]:
    """Day numbers that have a command for this year, in order."""
    return list(_REGISTERED_DAYS)


def solver(day: int) -> _Parts:
    """The (part1, part2) pair of functions that solve the given day."""
    if day not in _REGISTERED_DAYS:
        raise ValueError(f"no solver for {YEAR} day {day}")
    return _Parts(unsolved.part1, unsolved.part2)


def _input_path(day: int) -> Path:
    return Path("cmd") / f"year{YEAR}" / f"day{day}" / "1.txt"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=YEAR,
        description=(
            f"{YEAR} is a command line utility for solving "
            f"Advent of Code {YEAR} puzzles."
        ),
    )
    commands = parser.add_subparsers(dest="command", metavar="dayN")
    for day in _REGISTERED_DAYS:
        name = f"day{day}"
        commands.add_parser(name, help=name, description=name)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the puzzle command named in argv; return the exit status."""
    args = _build_parser().parse_args(argv)
    if args.command is None:
        return 0

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    day = int(args.command.removeprefix("day"))
    try:
        text = _input_path(day).read_text()
    except OSError as err:
        _log.error("error reading input: %s", err)
        return 1

    parts = solver(day)
    _log.info("score part1: %d", parts.part1(text))
    _log.info("score part2: %d", parts.part2(text))
    return 0