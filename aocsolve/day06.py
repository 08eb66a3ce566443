"""Cephalopod math worksheet: solve column problems read two different ways."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, field
from pathlib import Path

OPERATORS = frozenset("+*")
_ASCII_DIGITS = frozenset("0123456789")


@dataclass
class Problem:
    """A list of numbers combined by one operator."""

    numbers: list[int] = field(default_factory=list)
    operator: str | None = None

    def solve(self) -> int:
        """Sum for ``+``, product for ``*``, zero for anything else."""
        if self.operator == "+":
            return sum(self.numbers)
        if self.operator == "*":
            return math.prod(self.numbers)
        return 0


def _parse_number(token: str) -> int | None:
    digits = token[1:] if token.startswith("+") else token
    if digits and all(c in _ASCII_DIGITS for c in digits):
        return int(digits)
    return None


def parse_rows(text: str) -> list[Problem]:
    """Read problems as whitespace-separated columns, one number per row."""
    problems: list[Problem] = []
    for line in text.splitlines():
        for index, token in enumerate(line.split()):
            number = _parse_number(token)
            if index == len(problems):
                if number is None:
                    raise ValueError(f"problem must start with a number, got {token!r}")
                problems.append(Problem([number]))
            elif number is not None:
                problems[index].numbers.append(number)
            elif len(token) == 1:
                problems[index].operator = token
            else:
                raise ValueError(f"invalid operator {token!r}")
    return problems


def _columns(lines: list[str]):
    """Yield character columns, left to right, with lines aligned on the right."""
    width = max((len(line) for line in lines), default=0)
    for offset in reversed(range(width)):
        yield [line[-1 - offset] for line in lines if offset < len(line)]


def parse_columns(text: str) -> list[Problem]:
    """Read problems column by column, each column being one number."""
    problems: list[Problem] = []
    for column in _columns(text.splitlines()):
        operator = next((c for c in column if c in OPERATORS), None)
        if operator is not None:
            problems.append(Problem(operator=operator))
        elif not problems:
            raise ValueError("first column carries no operator")
        digits = "".join(c for c in column if c not in " +*")
        number = _parse_number(digits) if not digits.startswith("+") else None
        if number is not None:
            problems[-1].numbers.append(number)
    return problems


def part_one(text: str) -> int:
    """Grand total of problems read row by row."""
    return sum(problem.solve() for problem in parse_rows(text))


def part_two(text: str) -> int:
    """Grand total of problems read column by column."""
    return sum(problem.solve() for problem in parse_columns(text))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve the math worksheet.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), help="solve only this part")
    args = parser.parse_args(argv)

    text = Path(args.input).read_text()
    solvers = {1: part_one, 2: part_two}
    parts = [args.part] if args.part else sorted(solvers)
    for part in parts:
        print(solvers[part](text))


if __name__ == "__main__":
    main()