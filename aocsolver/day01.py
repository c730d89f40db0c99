"""Historian Hysteria: compare two location-id lists."""

from __future__ import annotations

from collections import Counter

__all__ = [
    "read_input_to_arrays",
    "similarity_score",
    "calculate_total_distance",
    "part1",
    "part2",
]


def read_input_to_arrays(text: str) -> tuple[list[int], list[int]]:
    """Split the input into its left and right columns of numbers.

    Every line must hold exactly two integers; otherwise ValueError is raised.
    """
    left: list[int] = []
    right: list[int] = []
    for line in text.split("\n"):
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"invalid line format: {line}")
        try:
            left_num, right_num = int(parts[0]), int(parts[1])
        except ValueError:
            raise ValueError(f"failed to parse numbers in line: {line}") from None
        left.append(left_num)
        right.append(right_num)
    return left, right


def similarity_score(left: list[int], right: list[int]) -> int:
    """Sum each left number multiplied by how often it occurs on the right."""
    counts = Counter(right)
    return sum(num * counts[num] for num in left)


def calculate_total_distance(left: list[int], right: list[int]) -> int:
    """Sum the distances between the two lists paired up in sorted order."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right), strict=True))


def part1(text: str) -> int:
    """Total distance between the lists, or 0 if the input is malformed."""
    try:
        left, right = read_input_to_arrays(text)
    except ValueError as err:
        print("Error:", err)
        return 0
    return calculate_total_distance(left, right)


def part2(text: str) -> int:
    """Similarity score of the lists, or 0 if the input is malformed."""
    try:
        left, right = read_input_to_arrays(text)
    except ValueError as err:
        print("Error:", err)
        return 0
    return similarity_score(left, right)