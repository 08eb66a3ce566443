"""Battery banks: pick digits from each line to form the largest number."""

from __future__ import annotations

import argparse
from itertools import combinations
from pathlib import Path

_DIGITS = frozenset("0123456789")


def _pair_value(a: str, b: str) -> int:
    if a not in _DIGITS or b not in _DIGITS:
        raise ValueError(f"not a digit pair: {a!r}{b!r}")
    return int(a + b)


def largest_pair(line: str) -> int:
    """Largest two-digit number formed by two digits of ``line`` kept in order."""
    return max((_pair_value(a, b) for a, b in combinations(line, 2)), default=0)


def largest_joltage(line: str, capacity: int = 12) -> str:
    """Largest number of up to ``capacity`` digits picked in order from ``line``."""
    bucket: list[str] = []
    for index, item in enumerate(line):
        remaining = len(line) - index
        if not bucket:
            bucket.append(item)
        elif item > bucket[-1]:
            while bucket and bucket[-1] < item and len(bucket) - 1 + remaining >= capacity:
                bucket.pop()
            bucket.append(item)
        elif len(bucket) < capacity:
            bucket.append(item)
    return "".join(bucket)


def part_one(text: str) -> int:
    """Sum the largest two-digit numbers of all lines."""
    return sum(largest_pair(line) for line in text.splitlines())


def part_two(text: str) -> int:
    """Sum the largest twelve-digit numbers of all lines."""
    return sum(int(largest_joltage(line)) for line in text.splitlines())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the largest joltage of each bank.")
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