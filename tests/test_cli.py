import logging
from pathlib import Path

import pytest

from aocsolver import cli

DAY1_SAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3"
DAY2_SAMPLE = (
    "7 6 4 2 1\n1 2 7 8 9\n9 7 6 2 1\n1 3 2 4 5\n8 6 4 4 1\n1 3 6 7 9"
)


def test_input_path_layout():
    assert cli.input_path(2024, 1) == Path("cmd/year2024/day1/1.txt")
    assert cli.input_path("2024", 13) == Path("cmd/year2024/day13/1.txt")


def test_solve_day1_sample():
    assert cli.solve(2024, 1, DAY1_SAMPLE) == (11, 31)


def test_solve_day2_sample_with_string_year():
    assert cli.solve("2024", 2, DAY2_SAMPLE) == (2, 4)


def test_solve_unregistered_year_rejected():
    with pytest.raises(ValueError):
        cli.solve(2023, 1, DAY1_SAMPLE)


def test_solve_unknown_day_rejected():
    with pytest.raises(ValueError):
        cli.solve(2024, 26, DAY1_SAMPLE)


def test_main_without_arguments_prints_help(capsys):
    assert cli.main([]) == 0
    assert "Advent of Code" in capsys.readouterr().out


def test_main_year_without_day_succeeds():
    assert cli.main(["2024"]) == 0


def test_main_runs_puzzle(tmp_path, monkeypatch, caplog):
    path = tmp_path / "cmd" / "year2024" / "day1" / "1.txt"
    path.parent.mkdir(parents=True)
    path.write_text(DAY1_SAMPLE)
    monkeypatch.chdir(tmp_path)
    caplog.set_level(logging.INFO)
    assert cli.main(["2024", "day1"]) == 0
    assert "score part1: 11" in caplog.text
    assert "score part2: 31" in caplog.text


def test_main_missing_input_fails(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)
    caplog.set_level(logging.INFO)
    assert cli.main(["2024", "day5"]) == 1
    assert "error reading input" in caplog.text


def test_main_unregistered_year_exits():
    with pytest.raises(SystemExit) as info:
        cli.main(["2023", "day1"])
    assert info.value.code != 0