[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolver"
version = "0.1.0"
description = "Command line solvers for Advent of Code puzzles, organised by year and day."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc = "aocsolver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aocsolver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
