"""Fresh ingredient ids: check ids against ranges and count the covered ids."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class IdRange:
    """An inclusive range of ingredient ids."""

    start: int
    end: int

    def contains(self, value: int) -> bool:
        """True if ``value`` lies within ``start..=end``."""
        return self.start <= value <= self.end

    def __len__(self) -> int:
        return self.end - self.start + 1


def _parse_id(token: str) -> int:
    token = token.strip()
    if not token.isascii() or not token.isdigit():
        raise ValueError(f"invalid ingredient id {token!r}")
    return int(token)


def parse_ranges(text: str) -> list[IdRange]:
    """Parse one ``start-end`` range per line."""
    ranges = []
    for line in text.splitlines():
        start, sep, end = line.partition("-")
        if not sep:
            raise ValueError(f"range {line!r} has no '-'")
        ranges.append(IdRange(_parse_id(start), _parse_id(end)))
    return ranges


def merge_ranges(ranges: list[IdRange]) -> list[IdRange]:
    """Merge overlapping ranges into sorted, disjoint ones."""
    merged: list[IdRange] = []
    for current in sorted(ranges, key=lambda r: r.start):
        if merged and current.start <= merged[-1].end:
            last = merged[-1]
            merged[-1] = IdRange(last.start, max(last.end, current.end))
        else:
            merged.append(current)
    return merged


def part_one(ranges_text: str, ingredients_text: str) -> int:
    """Count the ingredients whose id falls in at least one range."""
    ranges = parse_ranges(ranges_text)
    ingredients = [_parse_id(line) for line in ingredients_text.splitlines()]
    return sum(
        any(id_range.contains(ingredient) for id_range in ranges)
        for ingredient in ingredients
    )


def part_two(ranges_text: str) -> int:
    """Count every distinct id covered by the ranges."""
    ranges = parse_ranges(ranges_text)
    if not ranges:
        raise ValueError("no ranges given")
    return sum(len(id_range) for id_range in merge_ranges(ranges))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count fresh ingredients.")
    parser.add_argument("ranges", nargs="?", default="ranges.txt", help="file of id ranges")
    parser.add_argument(
        "ingredients", nargs="?", default="ingredients.txt", help="file of ingredient ids"
    )
    parser.add_argument("--part", type=int, choices=(1, 2), help="solve only this part")
    args = parser.parse_args(argv)

    ranges_text = Path(args.ranges).read_text()
    if args.part in (None, 1):
        ingredients_text = Path(args.ingredients).read_text()
        print(part_one(ranges_text, ingredients_text))
    if args.part in (None, 2):
        print(part_two(ranges_text))


if __name__ == "__main__":
    main()