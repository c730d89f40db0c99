"""Mull It Over: add up the products of well-formed mul instructions."""

from __future__ import annotations

import re

__all__ = [
    "mul",
    "get_valid_instructions",
    "get_score",
    "strip_disabled",
    "part1",
    "part2",
]

_INSTRUCTION = re.compile(r"mul\(\d+,\d+\)", re.ASCII)
_OPERANDS = re.compile(r"mul\((\d+),(\d+)\)", re.ASCII)
_SWITCH = re.compile(r"(do\(\)|don't\(\))")


def mul(a: int, b: int) -> int:
    """Product of the two operands."""
    return a * b


def get_valid_instructions(text: str) -> list[str]:
    """All well-formed mul(X,Y) instructions in the text, in order."""
    return _INSTRUCTION.findall(text)


def get_score(text: str) -> int:
    """Sum of the products of every valid instruction, line by line."""
    score = 0
    for line in text.split("\n"):
        print(line)
        for instruction in get_valid_instructions(line):
            match = _OPERANDS.fullmatch(instruction)
            if match is None:
                print("Invalid input format.")
                continue
            x, y = int(match[1]), int(match[2])
            result = mul(x, y)
            score += result
            print(f"Multiplication of {x} and {y} is {result}")
    return score


def strip_disabled(text: str) -> str:
    """Drop text that follows don't() until the next do(); keep the switches."""
    kept = []
    include = True
    for index, piece in enumerate(_SWITCH.split(text)):
        if index % 2:
            include = piece == "do()"
            kept.append(piece)
        elif include:
            kept.append(piece)
    return "".join(kept)


def part1(text: str) -> int:
    """Score of every valid instruction."""
    return get_score(text)


def part2(text: str) -> int:
    """Score of the instructions that are enabled, lines joined together."""
    return get_score(strip_disabled("".join(text.split("\n"))))