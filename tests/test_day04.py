import pytest

from aocsolver.day04 import count_xmas, count_xmas_grid, part1, part2

EXAMPLE = "\n".join(
    [
        "MMMSXXMASM",
        "MSAMXMSMSA",
        "AMXSXMAAMM",
        "MSAMASMSMX",
        "XMASAMXAMM",
        "XXAMMXXAMA",
        "SMSMSASXSS",
        "SAXAMASAAA",
        "MAMMMXMMMM",
        "MXMXAXMASX",
    ]
)

CROSS_EXAMPLE = "\n".join(
    [
        ".M.S......",
        "..A..MSMS.",
        ".M.S.MAA..",
        "..A.ASMSM.",
        ".M.S.M....",
        "..........",
        "S.S.S.S.S.",
        ".A.A.A.A..",
        "M.M.M.M.M.",
        "..........",
    ]
)


def test_part1_example():
    assert part1(EXAMPLE) == 18


def test_part2_example():
    assert part2(EXAMPLE) == 9


def test_part2_dotted_example():
    assert part2(CROSS_EXAMPLE) == 9


@pytest.mark.parametrize(
    "grid, expected",
    [
        (["XMAS"], 1),
        (["SAMX"], 1),
        (["X", "M", "A", "S"], 1),
        (["X...", ".M..", "..A.", "...S"], 1),
        (["XMASAMX"], 2),
        (["XMA"], 0),
    ],
)
def test_count_xmas_small(grid, expected):
    assert count_xmas(grid) == expected


@pytest.mark.parametrize(
    "grid, expected",
    [
        (["M.S", ".A.", "M.S"], 1),
        (["S.S", ".A.", "M.M"], 1),
        (["M.M", ".A.", "M.M"], 0),
        (["MAS"], 0),
        (["A"], 0),
    ],
)
def test_count_xmas_grid_small(grid, expected):
    assert count_xmas_grid(grid) == expected


def test_empty_input_counts_nothing():
    assert part1("") == 0
    assert part2("") == 0