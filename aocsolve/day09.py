"""Red tiles on a floor: the largest rectangle with two tiles as corners."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Point:
    """A tile position."""

    x: int
    y: int

    def area(self, other: Point) -> int:
        """Tile count of the rectangle with this point and ``other`` as corners."""
        return (abs(self.x - other.x) + 1) * (abs(self.y - other.y) + 1)


def _parse_line(line: str) -> Point:
    fields = line.split(",")
    if len(fields) < 2:
        raise ValueError(f"expected two coordinates in {line!r}")
    try:
        values = [int(field) for field in fields]
    except ValueError as exc:
        raise ValueError(f"invalid coordinate in {line!r}") from exc
    return Point(values[0], values[1])


def parse_points(text: str) -> list[Point]:
    """Parse one ``x,y`` position per line."""
    return [_parse_line(line) for line in text.splitlines()]


def largest_area(points: list[Point]) -> int:
    """Largest rectangle area over all corner pairs; zero for no points."""
    return max((a.area(b) for a in points for b in points), default=0)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the largest tile rectangle.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    points = parse_points(Path(args.input).read_text())
    print(f"Largest: {largest_area(points)}")


if __name__ == "__main__":
    main()