"""Device network: count the paths from one device to another."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from pathlib import Path

START = "you"
TARGET = "out"


def parse_graph(text: str) -> dict[str, list[str]]:
    """Parse ``name: out1 out2 ...`` lines; lines without exactly one colon are skipped."""
    graph: dict[str, list[str]] = {}
    for line in text.splitlines():
        parts = line.strip().split(":")
        if len(parts) == 2:
            graph[parts[0].strip()] = parts[1].split()
    return graph


def _walk(
    graph: dict[str, list[str]], start: str, target: str
) -> Iterator[list[str]]:
    stack = [(start, [start])]
    while stack:
        node, path = stack.pop()
        if node == target:
            yield path
            continue
        for output in reversed(graph.get(node, [])):
            stack.append((output, [*path, output]))


def find_all_paths(
    graph: dict[str, list[str]], start: str, target: str
) -> list[list[str]]:
    """Every path from ``start`` to ``target``, in depth-first output order."""
    return list(_walk(graph, start, target))


def count_paths(text: str) -> int:
    """Number of paths from ``you`` to ``out``."""
    return sum(1 for _ in _walk(parse_graph(text), START, TARGET))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count paths through the device network.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    print(f"Number of paths: {count_paths(Path(args.input).read_text())}")


if __name__ == "__main__":
    main()