"""Tachyon manifold: follow a beam through splitters."""

from __future__ import annotations

import argparse
from bisect import bisect_right
from collections import defaultdict, deque
from dataclasses import dataclass
from pathlib import Path

START = "S"
SPLITTER = "^"


@dataclass(frozen=True)
class Manifold:
    """Where the beam starts and where the splitters stand, as (row, column)."""

    start: tuple[int, int]
    splitters: frozenset[tuple[int, int]]


def parse_manifold(text: str) -> Manifold:
    """Read the start and splitter positions; the start defaults to (0, 0)."""
    start = (0, 0)
    splitters = set()
    for row, line in enumerate(text.splitlines()):
        for col, char in enumerate(line):
            if char == START:
                start = (row, col)
            elif char == SPLITTER:
                splitters.add((row, col))
    return Manifold(start, frozenset(splitters))


def count_splits(manifold: Manifold) -> int:
    """Number of distinct splitters that some beam reaches."""
    rows_by_col: dict[int, list[int]] = defaultdict(list)
    for row, col in sorted(manifold.splitters):
        rows_by_col[col].append(row)

    hit: set[tuple[int, int]] = set()
    visited = {manifold.start}
    queue = deque([manifold.start])
    while queue:
        row, col = queue.popleft()
        rows = rows_by_col.get(col, [])
        index = bisect_right(rows, row)
        if index == len(rows):
            continue
        splitter_row = rows[index]
        hit.add((splitter_row, col))
        for beam in ((splitter_row, col - 1), (splitter_row, col + 1)):
            if beam not in visited:
                visited.add(beam)
                queue.append(beam)
    return len(hit)


def _cell_value(char: str) -> int:
    if char == SPLITTER:
        return -1
    if char == START:
        return 1
    return 0


def count_timelines(text: str) -> int:
    """Number of beam paths that reach the bottom row."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty manifold")
    width = len(lines[0])
    if any(len(line) < width for line in lines):
        raise ValueError("manifold rows are shorter than the first row")

    table = [[_cell_value(char) for char in line[:width]] for line in lines]
    above = table[0]
    for row in table[1:]:
        for col in range(width):
            if row[col] >= 0:
                row[col] += above[col]
            elif row[col] == -1:
                incoming = above[col]
                row[col] = 0
                if col > 0:
                    row[col - 1] += incoming
                if col < width - 1:
                    row[col + 1] += incoming
        above = row
    return sum(above)


def part_one(text: str) -> int:
    """Count how many splitters the beam is split by."""
    return count_splits(parse_manifold(text))


def part_two(text: str) -> int:
    """Count the timelines a single particle ends up in."""
    return count_timelines(text)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Trace beams through the manifold.")
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