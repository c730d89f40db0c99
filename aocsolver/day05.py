"""Print Queue: check and repair page orderings against precedence rules."""

from __future__ import annotations

from collections import deque

__all__ = [
    "parse_input",
    "is_valid_update",
    "find_middle_page",
    "topological_sort",
    "part1",
    "part2",
]

Rules = dict[int, set[int]]


def _atoi(field: str) -> int:
    try:
        return int(field)
    except ValueError:
        return 0


def parse_input(text: str) -> tuple[Rules, list[list[int]]]:
    """Split the input into ordering rules and page updates.

    Rules "X|Y" come first, mapping X to the pages that must follow it; after
    the first blank line every non-blank line is a comma-separated update.
    """
    rules: Rules = {}
    updates: list[list[int]] = []
    reading_rules = True
    for raw in text.split("\n"):
        line = raw.strip()
        if not line:
            reading_rules = False
            continue
        if reading_rules:
            parts = line.split("|")
            if len(parts) < 2:
                raise ValueError(f"invalid rule: {line}")
            rules.setdefault(_atoi(parts[0]), set()).add(_atoi(parts[1]))
        else:
            updates.append([_atoi(part) for part in line.split(",")])
    return rules, updates


def is_valid_update(rules: Rules, update: list[int]) -> bool:
    """True when no rule between two pages of the update is broken."""
    position = {page: index for index, page in enumerate(update)}
    return all(
        position[before] <= position[after]
        for before, successors in rules.items()
        if before in position
        for after in successors
        if after in position
    )


def find_middle_page(update: list[int]) -> int:
    """Middle page of the update; the lower middle for an even length."""
    if not update:
        raise ValueError("Attempted to find the middle page of an empty update")
    n = len(update)
    return update[n // 2] if n % 2 else update[n // 2 - 1]


def topological_sort(rules: Rules, update: list[int]) -> list[int]:
    """Reorder the update's pages so every applicable rule holds."""
    successors = {
        page: [other for other in update if other in rules.get(page, ())]
        for page in update
    }
    in_degree = dict.fromkeys(update, 0)
    for following in successors.values():
        for page in following:
            in_degree[page] += 1

    queue = deque(page for page, degree in in_degree.items() if degree == 0)
    ordered: list[int] = []
    while queue:
        page = queue.popleft()
        ordered.append(page)
        for successor in successors[page]:
            in_degree[successor] -= 1
            if in_degree[successor] == 0:
                queue.append(successor)

    if len(ordered) != len(update):
        raise ValueError("not all pages were sorted")
    return ordered


def part1(text: str) -> int:
    """Sum of the middle pages of the correctly ordered updates."""
    rules, updates = parse_input(text)
    total = 0
    for update in updates:
        if is_valid_update(rules, update):
            middle = find_middle_page(update)
            print(f"Middle page number from valid update: {middle}")
            total += middle
    print(f"Total of middle page numbers from valid updates: {total}")
    return total


def part2(text: str) -> int:
    """Sum of the middle pages of the wrongly ordered updates once repaired."""
    rules, updates = parse_input(text)
    total = 0
    for update in updates:
        if not is_valid_update(rules, update):
            middle = find_middle_page(topological_sort(rules, update))
            print(f"Middle page number from correctly ordered update: {middle}")
            total += middle
    print(f"Total of middle page numbers from reordered updates: {total}")
    return total