"""Red-Nosed Reports: count safe reactor reports."""

from __future__ import annotations

from itertools import pairwise

__all__ = ["parse_report", "is_safe", "is_safe_with_removal", "part1", "part2"]


def parse_report(line: str) -> list[int]:
    """Parse the levels of one report; an unreadable level counts as 0."""
    report = []
    for field in line.split():
        try:
            report.append(int(field))
        except ValueError:
            print(f"Invalid number in report: {field}")
            report.append(0)
    return report


def is_safe(report: list[int]) -> bool:
    """True when levels move strictly one way in steps of one to three."""
    diffs = [b - a for a, b in pairwise(report)]
    if not all(1 <= abs(d) <= 3 for d in diffs):
        return False
    return all(d > 0 for d in diffs) or all(d < 0 for d in diffs)


def is_safe_with_removal(report: list[int]) -> bool:
    """True when dropping a single level makes the report safe."""
    return any(
        is_safe(report[:i] + report[i + 1 :]) for i in range(len(report))
    )


def part1(text: str) -> int:
    """Number of safe reports."""
    return sum(is_safe(parse_report(line)) for line in text.split("\n"))


def part2(text: str) -> int:
    """Number of reports that are safe after removing at most one level."""
    return sum(
        is_safe_with_removal(parse_report(line)) for line in text.split("\n")
    )