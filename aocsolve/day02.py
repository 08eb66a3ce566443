"""Gift shop product ids: find ids made of repeated digit sequences."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from pathlib import Path


def parse_ranges(text: str) -> list[tuple[int, int]]:
    """Parse comma-separated ``first-last`` ranges."""
    ranges = []
    for piece in text.strip().split(","):
        first, sep, last = piece.partition("-")
        if not sep:
            raise ValueError(f"range {piece!r} has no '-'")
        ranges.append((int(first.strip()), int(last.strip())))
    return ranges


def is_doubled(s: str) -> bool:
    """True if the string is some sequence written exactly twice."""
    half = len(s) // 2
    return s[:half] == s[half:]


def is_repeated_pattern(s: str) -> bool:
    """True if the string is some sequence repeated at least twice."""
    length = len(s)
    return any(
        length % size == 0 and s[:size] * (length // size) == s
        for size in range(1, length // 2 + 1)
    )


def invalid_ids(first: int, last: int, predicate: Callable[[str], bool]) -> list[int]:
    """Return the ids in ``first..=last`` whose decimal form matches ``predicate``."""
    return [n for n in range(first, last + 1) if predicate(str(n))]


def _total(text: str, predicate: Callable[[str], bool]) -> int:
    return sum(
        sum(invalid_ids(first, last, predicate)) for first, last in parse_ranges(text)
    )


def part_one(text: str) -> int:
    """Sum the ids that are a sequence repeated twice."""
    return _total(text, is_doubled)


def part_two(text: str) -> int:
    """Sum the ids that are a sequence repeated two or more times."""
    return _total(text, is_repeated_pattern)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum invalid product ids.")
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