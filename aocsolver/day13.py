"""Claw Contraption: cheapest button presses that put a claw on the prize."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass

__all__ = [
    "Machine",
    "solve_machine",
    "parse_input",
    "adjust_prizes",
    "part1",
    "part2",
]

_NUMBER = re.compile(r"[-+]?\d+", re.ASCII)
_COST_A = 3
_COST_B = 1
_PART1_MAX_PRESSES = 100
_PART2_OFFSET = 10_000_000_000_000
_PART2_MAX_PRESSES = 10_000_000_000_000


@dataclass(frozen=True)
class Machine:
    """Claw movement per press of buttons A and B, and the prize position."""

    ax: int
    ay: int
    bx: int
    by: int
    px: int
    py: int


def _ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with a*x + b*y == g and g >= 0."""
    if b == 0:
        g, x, y = a, 1, 0
    else:
        g, x0, y0 = _ext_gcd(b, a % b)
        g, x, y = g, y0, x0 - (a // b) * y0
    if g < 0:
        return -g, -x, -y
    return g, x, y


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def _bounds(start: int, step: int, limit: int) -> tuple[int, int]:
    """Range of t for which 0 <= start + step*t <= limit (step is non-zero)."""
    if step > 0:
        return _ceil_div(-start, step), (limit - start) // step
    return _ceil_div(limit - start, step), (-start) // step


def _cost(n: int, m: int) -> int:
    return _COST_A * n + _COST_B * m


def _solve_line(a: int, b: int, p: int, limit: int) -> int | None:
    """Cheapest (n, m) in [0, limit] with a*n + b*m == p; (a, b) is not zero."""
    if b == 0:
        if p % a or not 0 <= p // a <= limit:
            return None
        return _cost(p // a, 0)
    if a == 0:
        if p % b or not 0 <= p // b <= limit:
            return None
        return _cost(0, p // b)

    g, x, y = _ext_gcd(a, b)
    if p % g:
        return None
    n0, m0 = x * (p // g), y * (p // g)
    step_n, step_m = b // g, -(a // g)
    lo_n, hi_n = _bounds(n0, step_n, limit)
    lo_m, hi_m = _bounds(m0, step_m, limit)
    lo, hi = max(lo_n, lo_m), min(hi_n, hi_m)
    if lo > hi:
        return None
    # The cost is linear in t, so the cheapest solution sits at an end.
    return min(
        _cost(n0 + step_n * t, m0 + step_m * t) for t in (lo, hi)
    )


def solve_machine(machine: Machine, max_presses: int) -> int | None:
    """Lowest token cost to reach the prize pressing each button at most
    max_presses times, or None when the prize cannot be won."""
    m = machine
    det = m.ax * m.by - m.ay * m.bx
    if det != 0:
        n_num = m.px * m.by - m.py * m.bx
        m_num = m.ax * m.py - m.ay * m.px
        if n_num % det or m_num % det:
            return None
        presses_a, presses_b = n_num // det, m_num // det
        if not (0 <= presses_a <= max_presses and 0 <= presses_b <= max_presses):
            return None
        return _cost(presses_a, presses_b)

    # The two equations are proportional (or zero): reduce to one line.
    if (m.ax, m.bx) == (0, 0) and (m.ay, m.by) == (0, 0):
        return 0 if (m.px, m.py) == (0, 0) else None
    if m.ay * m.px != m.ax * m.py or m.by * m.px != m.bx * m.py:
        return None
    if (m.ax, m.bx) != (0, 0):
        return _solve_line(m.ax, m.bx, m.px, max_presses)
    return _solve_line(m.ay, m.by, m.py, max_presses)


def _numbers(line: str, what: str) -> tuple[int, int]:
    values = _NUMBER.findall(line)
    if len(values) < 2:
        raise ValueError(f"missing {what} values in line: {line!r}")
    return int(values[0]), int(values[1])


def parse_input(text: str) -> list[Machine]:
    """Read every "Button A" / "Button B" / "Prize" triple of lines."""
    lines = iter(line.rstrip("\r") for line in text.split("\n"))
    machines = []
    for line in lines:
        if not line.startswith("Button A"):
            continue
        ax, ay = _numbers(line, "button A")
        bx, by = _numbers(next(lines, ""), "button B")
        px, py = _numbers(next(lines, ""), "prize")
        machines.append(Machine(ax, ay, bx, by, px, py))
    return machines


def adjust_prizes(machines: list[Machine], offset: int) -> list[Machine]:
    """Copies of the machines with offset added to both prize coordinates."""
    return [
        dataclasses.replace(m, px=m.px + offset, py=m.py + offset)
        for m in machines
    ]


def _total_cost(machines: list[Machine], max_presses: int, start: int) -> int:
    total = start
    prizes = 0
    for number, machine in enumerate(machines, start=1):
        cost = solve_machine(machine, max_presses)
        if cost is None:
            print(f"Machine {number}: Prize cannot be won")
        else:
            print(f"Machine {number}: Prize won with cost {cost}")
            total += cost
            prizes += 1
    print(f"\nTotal prizes won: {prizes}")
    print(f"Minimum total cost: {total}")
    return total


def part1(text: str) -> int:
    """Fewest tokens to win every winnable prize within 100 presses."""
    return _total_cost(parse_input(text), _PART1_MAX_PRESSES, 0)


def part2(text: str) -> int:
    """Token total for the far-away prizes; the tally starts at 100."""
    machines = adjust_prizes(parse_input(text), _PART2_OFFSET)
    return _total_cost(machines, _PART2_MAX_PRESSES, 100)