"""Solver for puzzles that have no solution yet.

Part one echoes the puzzle input line by line so it can be inspected.
Both parts report a score of zero.
"""

from __future__ import annotations

__all__ = ["part1", "part2"]


def part1(text: str) -> int:
    """Print every line of the input and return a score of zero."""
    for line in text.split("\n"):
        print(line)
    return 0


def part2(text: str) -> int:
    """Return a score of zero; the input is not inspected."""
    return 0