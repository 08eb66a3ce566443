"""Junction boxes in 3D space: join the closest pairs into circuits."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from itertools import combinations
from pathlib import Path

DEFAULT_LIMIT = 1000


@dataclass(frozen=True)
class Point3:
    """A junction box position."""

    x: int
    y: int
    z: int

    def distance(self, other: Point3) -> int:
        """Squared straight-line distance to ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz


class UnionFind:
    """Disjoint sets over ``0..n-1`` with union by size and path halving.

    ``size`` keeps one entry per element; entries of elements that are no
    longer roots keep the size they had when they were merged away.
    """

    def __init__(self, n: int) -> None:
        self.parent = list(range(n))
        self.size = [1] * n

    def find(self, x: int) -> int:
        """Return the representative of ``x``'s set."""
        parent = self.parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; False if they were already one."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        if self.size[root_x] >= self.size[root_y]:
            self.parent[root_y] = root_x
            self.size[root_x] += self.size[root_y]
        else:
            self.parent[root_x] = root_y
            self.size[root_y] += self.size[root_x]
        return True


def _parse_line(line: str) -> Point3:
    fields = line.split(",")
    if len(fields) < 3:
        raise ValueError(f"expected three coordinates in {line!r}")
    try:
        x, y, z = (int(field) for field in fields[:3])
    except ValueError as exc:
        raise ValueError(f"invalid coordinate in {line!r}") from exc
    return Point3(x, y, z)


def parse_points(text: str) -> list[Point3]:
    """Parse one ``x,y,z`` position per line."""
    return [_parse_line(line) for line in text.splitlines()]


def sorted_pairs(points: list[Point3]) -> list[tuple[int, int, int]]:
    """All ``(distance, i, j)`` with ``i < j``, closest first, ties in index order."""
    pairs = [
        (points[i].distance(points[j]), i, j)
        for i, j in combinations(range(len(points)), 2)
    ]
    pairs.sort(key=lambda pair: pair[0])
    return pairs


def part_one(text: str, limit: int = DEFAULT_LIMIT) -> int:
    """Join the ``limit`` closest pairs and multiply the three largest sizes."""
    points = parse_points(text)
    if len(points) < 3:
        raise ValueError("at least three junction boxes are needed")
    uf = UnionFind(len(points))
    for _, i, j in sorted_pairs(points)[:limit]:
        uf.union(i, j)
    largest = sorted(uf.size, reverse=True)[:3]
    return math.prod(largest)


def part_two(text: str) -> int:
    """Product of the x coordinates of the last pair that joined two circuits."""
    points = parse_points(text)
    uf = UnionFind(len(points))
    last = (0, 0)
    for _, i, j in sorted_pairs(points):
        if uf.union(i, j):
            last = (points[i].x, points[j].x)
    return last[0] * last[1]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Connect junction boxes into circuits.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), help="solve only this part")
    parser.add_argument(
        "--limit", type=int, default=DEFAULT_LIMIT, help="pairs to join in part one"
    )
    args = parser.parse_args(argv)

    text = Path(args.input).read_text()
    if args.part in (None, 1):
        print(part_one(text, args.limit))
    if args.part in (None, 2):
        print(part_two(text))


if __name__ == "__main__":
    main()