import random

import pytest

from aocsolve.day03 import largest_joltage, largest_pair, main, part_one, part_two

EXAMPLE = "987654321111111\n811111111111119\n234234234234278\n818181911112111\n"


@pytest.mark.parametrize(
    "line, expected",
    [
        ("987654321111111", "987654321111"),
        ("811111111111119", "811111111119"),
        ("234234234234278", "434234234278"),
        ("818181911112111", "888911112111"),
    ],
)
def test_largest_joltage_cases(line, expected):
    assert largest_joltage(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("987654321111111", 98),
        ("811111111111119", 89),
        ("234234234234278", 78),
        ("818181911112111", 92),
    ],
)
def test_largest_pair_cases(line, expected):
    assert largest_pair(line) == expected


def test_largest_pair_of_short_line_is_zero():
    assert largest_pair("7") == 0
    assert largest_pair("") == 0


def test_largest_pair_rejects_non_digits():
    with pytest.raises(ValueError):
        largest_pair("1a")


def test_largest_joltage_with_small_capacity():
    assert largest_joltage("12345", 2) == "45"


def test_largest_joltage_keeps_short_line():
    assert largest_joltage("321") == "321"


def _is_subsequence(part, whole):
    it = iter(whole)
    return all(c in it for c in part)


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_largest_joltage_is_an_ordered_pick_of_full_length(seed):
    rng = random.Random(seed)
    line = "".join(rng.choice("123456789") for _ in range(rng.randint(12, 40)))
    result = largest_joltage(line)
    assert len(result) == 12
    assert _is_subsequence(result, line)


def test_largest_joltage_with_capacity_two_matches_largest_pair():
    rng = random.Random(11)
    for _ in range(50):
        line = "".join(rng.choice("123456789") for _ in range(rng.randint(2, 15)))
        assert int(largest_joltage(line, 2)) == largest_pair(line)


def test_example_part_one():
    assert part_one(EXAMPLE) == 357


def test_example_part_two():
    assert part_two(EXAMPLE) == 3121910778619


def test_part_two_rejects_empty_line():
    with pytest.raises(ValueError):
        part_two("\n")


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    assert capsys.readouterr().out.splitlines() == [
        str(part_one(EXAMPLE)),
        str(part_two(EXAMPLE)),
    ]