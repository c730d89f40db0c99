# aocsolver

Command line solvers for Advent of Code puzzles, organised by year and day.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

The `aoc` command takes a year and a day. It reads that day's puzzle input
and logs the answers to both parts:

```
aoc 2024 day1
```

Input is read from `cmd/year<year>/day<day>/1.txt`, relative to the current
directory. The command above reads `cmd/year2024/day1/1.txt`, so put your
puzzle input there before running it. If the file cannot be read, an error
is logged and the command exits with status 1.

`aoc` offers the year `2024`, with commands `day1` to `day25`. Of these,
the following have solutions:

- `day1`: total distance between two lists, and their similarity score
- `day2`: counting safe reports, with and without removing one level
- `day3`: summing `mul(x,y)` instructions, honouring `do()` and `don't()`
- `day4`: counting `XMAS` words and X-shaped `MAS` crosses
- `day5`: checking page orderings and repairing invalid updates
- `day13`: cheapest button presses to win each claw machine prize (part two
  moves every prize far away, and its reported total starts from 100)

Every other day uses a placeholder solver. Its part one prints the input line
by line, and both parts report zero.

## The 2023 commands

The 2023 days are not reachable through `aoc`. They have their own entry
point, `aocsolver.year2023.main`, which registers `day1`, `day2` and `day4`
to `day25`:

```python
from aocsolver import year2023

year2023.main(["day1"])  # reads cmd/year2023/day1/1.txt
```

All of these use the placeholder solver.

## Library use

Each solved 2024 day is a module (`day01`, `day02`, `day03`, `day04`,
`day05`, `day13`) with `part1(text)` and `part2(text)` functions that take
the puzzle input as a string and return an integer:

```python
from aocsolver import day01

text = open("cmd/year2024/day1/1.txt").read()
print(day01.part1(text), day01.part2(text))
```

Other entry points:

- `aocsolver.cli.solve(year, day, text)` runs both parts of a 2024 day and
  returns the two scores. Any other year raises `ValueError`.
- `aocsolver.cli.input_path(year, day)` returns the path the command reads.
- `aocsolver.year2024.days()` and `aocsolver.year2023.days()` list the
  registered days. `solver(day)` in either module returns the pair of part
  functions, and raises `ValueError` for a day that is not registered.

## What it does not do

- It has no solutions for any 2023 puzzle, or for the 2024 days not listed
  above.
- It does not download puzzle input or submit answers. Input must already be
  in place on disk.