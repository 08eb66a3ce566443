from aocsolve.day04 import accessible_rolls, main, parse_rolls, part_one, part_two

EXAMPLE = """\
..@@.@@@@.
@@@.@@.@.@
@@@@@.@.@@
@.@@@@..@.
@@.@@@@.@@
.@@@@@@@.@
.@.@.@.@@@
@.@@@.@@@@
.@@@@@@@@.
@.@.@@@.@.
"""

FULL_BLOCK = "@@@\n@@@\n@@@\n"


def test_parse_rolls_finds_every_roll():
    rolls = parse_rolls(EXAMPLE)
    assert len(rolls) == EXAMPLE.count("@")
    for row, col in rolls:
        assert EXAMPLE.splitlines()[row][col] == "@"


def test_parse_rolls_of_empty_text():
    assert parse_rolls("") == set()


def test_single_roll_is_accessible():
    assert accessible_rolls({(0, 0)}) == {(0, 0)}


def test_accessible_rolls_are_a_subset():
    rolls = parse_rolls(EXAMPLE)
    assert accessible_rolls(rolls) <= rolls


def test_centre_of_full_block_is_not_accessible():
    rolls = parse_rolls(FULL_BLOCK)
    assert (1, 1) in rolls
    assert (1, 1) not in accessible_rolls(rolls)


def test_example_part_two():
    assert part_two(EXAMPLE) == 43


def test_full_block_is_removed_completely():
    assert part_two(FULL_BLOCK) == FULL_BLOCK.count("@")


def test_removal_bounds():
    assert part_one(EXAMPLE) <= part_two(EXAMPLE) <= EXAMPLE.count("@")


def test_empty_grid_removes_nothing():
    assert part_two("....\n....\n") == part_one("....\n....\n") == 0


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    assert capsys.readouterr().out.splitlines() == [
        str(part_one(EXAMPLE)),
        f"Total rolls removed: {part_two(EXAMPLE)}",
    ]