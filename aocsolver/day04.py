"""Ceres Search: find XMAS words and X-shaped MAS crosses in a letter grid."""

from __future__ import annotations

__all__ = ["count_xmas", "count_xmas_grid", "part1", "part2"]

_WORD = "XMAS"
_DIRECTIONS = (
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)
_CROSS_ARMS = frozenset({"MAS", "SAM"})


def _at(grid: list[str], x: int, y: int) -> str:
    """Letter at row x, column y, or an empty string outside the grid."""
    if 0 <= x < len(grid) and 0 <= y < len(grid[x]):
        return grid[x][y]
    return ""


def _spells(grid: list[str], x: int, y: int, dx: int, dy: int) -> bool:
    return all(
        _at(grid, x + step * dx, y + step * dy) == letter
        for step, letter in enumerate(_WORD)
    )


def _is_cross(grid: list[str], x: int, y: int) -> bool:
    falling = _at(grid, x - 1, y - 1) + grid[x][y] + _at(grid, x + 1, y + 1)
    rising = _at(grid, x - 1, y + 1) + grid[x][y] + _at(grid, x + 1, y - 1)
    return falling in _CROSS_ARMS and rising in _CROSS_ARMS


def count_xmas(grid: list[str]) -> int:
    """Count occurrences of XMAS in all eight directions."""
    return sum(
        _spells(grid, x, y, dx, dy)
        for x, row in enumerate(grid)
        for y in range(len(row))
        for dx, dy in _DIRECTIONS
    )


def count_xmas_grid(grid: list[str]) -> int:
    """Count A cells whose two diagonals both read MAS in either direction."""
    return sum(
        letter == "A" and _is_cross(grid, x, y)
        for x, row in enumerate(grid)
        for y, letter in enumerate(row)
    )


def part1(text: str) -> int:
    """Number of XMAS words in the puzzle grid."""
    return count_xmas(text.split("\n"))


def part2(text: str) -> int:
    """Number of X-MAS crosses in the puzzle grid."""
    return count_xmas_grid(text.split("\n"))