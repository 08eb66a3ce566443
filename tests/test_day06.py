import pytest

from aocsolve.day06 import Problem, parse_columns, parse_rows, part_one, part_two

EXAMPLE_LINES = [
    "123 328  51 64 ",
    " 45 64  387 23 ",
    "  6 98  215 314",
    "*   +   *   +  ",
]
EXAMPLE = "\n".join(EXAMPLE_LINES)


def test_part_one_example():
    assert part_one(EXAMPLE) == 4277556


def test_part_two_example():
    assert part_two(EXAMPLE) == 3263827


def test_parse_rows_reads_columns_in_order():
    problems = parse_rows(EXAMPLE)
    assert problems[0] == Problem([123, 45, 6], "*")
    assert problems[1] == Problem([328, 64, 98], "+")
    assert [p.operator for p in problems] == ["*", "+", "*", "+"]


def test_parse_rows_without_operator_solves_to_zero():
    problems = parse_rows("1 2\n3 4")
    assert [p.operator for p in problems] == [None, None]
    assert part_one("1 2\n3 4") == 0


def test_parse_rows_rejects_operator_first():
    with pytest.raises(ValueError):
        parse_rows("+\n1")


def test_parse_rows_rejects_long_operator():
    with pytest.raises(ValueError):
        parse_rows("1\nab")


def test_unknown_operator_solves_to_zero():
    assert Problem([5, 6], "-").solve() == 0


def test_empty_sum_and_product_are_identities():
    assert Problem([], "+").solve() == 0
    assert Problem([], "*").solve() == 1


def test_part_one_ignores_row_order():
    swapped = "\n".join([EXAMPLE_LINES[2], EXAMPLE_LINES[0], EXAMPLE_LINES[1], EXAMPLE_LINES[3]])
    assert part_one(swapped) == part_one(EXAMPLE)


def test_parse_columns_operators_left_to_right():
    assert [p.operator for p in parse_columns(EXAMPLE)] == ["*", "+", "*", "+"]


def test_parse_columns_single_problem():
    assert parse_columns("1\n2\n+") == [Problem([12], "+")]


def test_part_two_ignores_trailing_blank_columns():
    padded = "\n".join(line + "   " for line in EXAMPLE_LINES)
    assert part_two(padded) == part_two(EXAMPLE)


def test_parse_columns_requires_operator_in_first_column():
    with pytest.raises(ValueError):
        parse_columns(" 1\n +")


def test_parse_columns_empty_text():
    assert parse_columns("") == []