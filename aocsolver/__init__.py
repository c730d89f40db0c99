"""Advent of Code puzzle solvers for 2024 and 2023, with a command line front end."""

__version__ = "0.1.0"