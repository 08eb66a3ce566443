"""Safe dial: follow rotations and count how often the dial reaches zero."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DIAL_SIZE = 100
START_VALUE = 50


class Direction(Enum):
    """Which way the dial turns."""

    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class Rotation:
    """One turn of the dial by a number of clicks."""

    direction: Direction
    distance: int


def _trunc_rem(a: int, m: int) -> int:
    """Remainder whose sign follows the dividend."""
    r = abs(a) % m
    return -r if a < 0 else r


def _trunc_div_abs(a: int, m: int) -> int:
    """Absolute value of the quotient truncated toward zero."""
    return abs(a) // m


@dataclass
class Dial:
    """A dial with positions 0..99 and a password counter.

    With ``count_passes`` set, crossing zero during a rotation is counted
    as well as coming to rest on it.
    """

    value: int = START_VALUE
    password: int = 0
    count_passes: bool = False

    def rotate(self, rotation: Rotation) -> None:
        """Turn the dial and update the password count."""
        distance = rotation.distance
        if rotation.direction is Direction.LEFT:
            if self.value - distance < 0:
                if self.count_passes:
                    self.password += _trunc_div_abs(self.value + distance, DIAL_SIZE)
                self.value = _trunc_rem(
                    self.value - _trunc_rem(distance, DIAL_SIZE) + DIAL_SIZE, DIAL_SIZE
                )
            else:
                self.value -= distance
        else:
            if self.value + distance >= DIAL_SIZE:
                if self.count_passes:
                    self.password += _trunc_div_abs(self.value + distance, DIAL_SIZE)
                self.value = _trunc_rem(self.value + distance, DIAL_SIZE)
            else:
                self.value += distance

        if self.value == 0:
            self.password += 1


def _parse_line(line: str) -> Rotation:
    if not line:
        raise ValueError("empty rotation line")
    direction = Direction.LEFT if line[0] == "L" else Direction.RIGHT
    try:
        distance = int(line[1:])
    except ValueError as exc:
        raise ValueError(f"invalid rotation distance in {line!r}") from exc
    return Rotation(direction, distance)


def parse_rotations(text: str) -> list[Rotation]:
    """Parse one rotation per line, such as ``L68`` or ``R48``."""
    return [_parse_line(line) for line in text.splitlines()]


def _run(text: str, count_passes: bool) -> int:
    dial = Dial(count_passes=count_passes)
    for rotation in parse_rotations(text):
        dial.rotate(rotation)
    return dial.password


def part_one(text: str) -> int:
    """Count how many rotations leave the dial on zero."""
    return _run(text, count_passes=False)


def part_two(text: str) -> int:
    """Count zero landings plus the times the dial passes zero."""
    return _run(text, count_passes=True)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the safe's dial password.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), help="solve only this part")
    args = parser.parse_args(argv)

    text = Path(args.input).read_text()
    solvers = {1: part_one, 2: part_two}
    parts = [args.part] if args.part else sorted(solvers)
    for part in parts:
        print(f"Dialer Password is {solvers[part](text)}")


if __name__ == "__main__":
    main()