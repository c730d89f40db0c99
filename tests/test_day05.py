import pytest

from aocsolver.day05 import (
    find_middle_page,
    is_valid_update,
    parse_input,
    part1,
    part2,
    topological_sort,
)

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


@pytest.fixture
def parsed():
    return parse_input(EXAMPLE)


def test_part1_example():
    assert part1(EXAMPLE) == 143


def test_part2_example():
    assert part2(EXAMPLE) == 123


def test_parse_input(parsed):
    rules, updates = parsed
    assert rules[97] == {13, 61, 47, 29, 53, 75}
    assert rules[53] == {29, 13}
    assert len(updates) == 6
    assert updates[0] == [75, 47, 61, 53, 29]
    assert updates[-1] == [97, 13, 75, 29, 47]


def test_parse_rejects_malformed_rule():
    with pytest.raises(ValueError):
        parse_input("47-53\n\n1,2,3")


@pytest.mark.parametrize(
    "index, expected",
    [(0, True), (1, True), (2, True), (3, False), (4, False), (5, False)],
)
def test_is_valid_update(parsed, index, expected):
    rules, updates = parsed
    assert is_valid_update(rules, updates[index]) is expected


@pytest.mark.parametrize(
    "update, expected",
    [
        ([75, 97, 47, 61, 53], [97, 75, 47, 61, 53]),
        ([61, 13, 29], [61, 29, 13]),
        ([97, 13, 75, 29, 47], [97, 75, 47, 29, 13]),
    ],
)
def test_topological_sort(parsed, update, expected):
    rules, _ = parsed
    ordered = topological_sort(rules, update)
    assert ordered == expected
    assert is_valid_update(rules, ordered)


def test_topological_sort_cycle_raises():
    rules = {1: {2}, 2: {1}}
    with pytest.raises(ValueError, match="not all pages were sorted"):
        topological_sort(rules, [1, 2])


@pytest.mark.parametrize(
    "update, expected",
    [([1, 2, 3], 2), ([1, 2, 3, 4], 2), ([7], 7)],
)
def test_find_middle_page(update, expected):
    assert find_middle_page(update) == expected


def test_find_middle_page_empty_raises():
    with pytest.raises(ValueError):
        find_middle_page([])