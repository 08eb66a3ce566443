# aocsolve

Solvers for a season of daily programming puzzles. Each day is a small
module of plain functions that take the puzzle input as text and return
the answer, plus a `main` function behind a command that reads an input
file and prints the answers.

| Module  | Puzzle                                                         |
|---------|----------------------------------------------------------------|
| `day01` | Safe dial: count how often the dial lands on or passes zero    |
| `day02` | Invalid product IDs made of repeated digit patterns            |
| `day03` | Largest joltage picked in order from a line of battery digits  |
| `day04` | Paper rolls reachable on a grid, removed in rounds             |
| `day05` | Fresh ingredient IDs and merged ID ranges                      |
| `day06` | Arithmetic worksheet, read by rows and by character columns    |
| `day07` | Beam splitters: splitters hit and timelines counted            |
| `day08` | Junction boxes joined into circuits with union-find            |
| `day09` | Largest rectangle with two listed tiles as corners             |
| `day11` | Number of paths from `you` to `out` in a device graph          |

## Installation

```
pip install .
```

No third-party libraries are needed; Python 3.10 or later is enough.

## Command line

Each day has its own command. The input file is optional and defaults to
`input.txt` in the current directory. Commands for two-part days print
both answers unless `--part 1` or `--part 2` is given.

```
aocsolve-day01 input.txt            # "Dialer Password is N", once per part
aocsolve-day02 input.txt
aocsolve-day03 input.txt
aocsolve-day04 input.txt            # part two prints "Total rolls removed: N"
aocsolve-day06 input.txt
aocsolve-day07 input.txt
aocsolve-day08 input.txt --limit 1000
aocsolve-day09 input.txt            # "Largest: N"
aocsolve-day11 input.txt            # "Number of paths: N"
```

`aocsolve-day08` joins the `--limit` closest pairs in part one
(1000 by default).

Day 5 reads two files, the ID ranges and the ingredient IDs, defaulting
to `ranges.txt` and `ingredients.txt`. Part two needs only the ranges:

```
aocsolve-day05 ranges.txt ingredients.txt
aocsolve-day05 ranges.txt --part 2
```

## Library use

```python
from pathlib import Path

from aocsolve import day01, day03, day08, day11

text = Path("input.txt").read_text()

day01.part_one(text)          # rotations that leave the dial on zero
day01.part_two(text)          # zero landings plus the times zero is passed

day03.largest_joltage("987654321111111", 12)   # "987654321111"

day08.part_one(text, 1000)    # product of the three largest circuit sizes
day08.part_two(text)          # product of the x coordinates of the last join

day11.count_paths(text)       # paths from "you" to "out"
```

Lower-level pieces are public too, among them `day01.Dial`,
`day02.is_repeated_pattern`, `day04.accessible_rolls`,
`day05.IdRange` and `day05.merge_ranges`, `day06.Problem`,
`day07.count_splits`, `day08.UnionFind`, `day09.largest_area` and
`day11.find_all_paths`.

Malformed input raises `ValueError`.

## What it does not do

- There are no solvers for days 10 and 12.
- `day09` answers only the plain largest-rectangle question; it has no
  second part.
- `day11` counts paths from `you` to `out` only; it has no second part.
- Puzzle inputs are not fetched; they must already be on disk.

## Running the tests

```
pip install ".[test]"
pytest
```