"""Paper rolls on a grid: find rolls a forklift can reach and remove."""

from __future__ import annotations

import argparse
from pathlib import Path

ROLL = "@"
_NEIGHBOURS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]
_MAX_NEIGHBOURS = 4


def parse_rolls(text: str) -> set[tuple[int, int]]:
    """Return the (row, column) positions of every roll in the grid."""
    return {
        (row, col)
        for row, line in enumerate(text.splitlines())
        for col, char in enumerate(line)
        if char == ROLL
    }


def accessible_rolls(rolls: set[tuple[int, int]]) -> set[tuple[int, int]]:
    """Rolls with fewer than four rolls among their eight neighbours."""
    return {
        (x, y)
        for x, y in rolls
        if sum((x + dx, y + dy) in rolls for dx, dy in _NEIGHBOURS) < _MAX_NEIGHBOURS
    }


def part_one(text: str) -> int:
    """Count the rolls that can be reached right away."""
    return len(accessible_rolls(parse_rolls(text)))


def part_two(text: str) -> int:
    """Keep removing reachable rolls until none are left; count them all."""
    rolls = parse_rolls(text)
    removed = 0
    while removable := accessible_rolls(rolls):
        removed += len(removable)
        rolls -= removable
    return removed


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count reachable paper rolls.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), help="solve only this part")
    args = parser.parse_args(argv)

    text = Path(args.input).read_text()
    if args.part in (None, 1):
        print(part_one(text))
    if args.part in (None, 2):
        print(f"Total rolls removed: {part_two(text)}")


if __name__ == "__main__":
    main()