import pytest

from aocsolve.day09 import Point, largest_area, parse_points


def test_area_with_itself_is_one_tile():
    assert Point(7, -3).area(Point(7, -3)) == 1


def test_area_is_symmetric():
    a, b = Point(2, 5), Point(11, 1)
    assert a.area(b) == b.area(a)


def test_area_of_a_row_counts_tiles():
    assert Point(0, 0).area(Point(4, 0)) == 5


def test_parse_points():
    assert parse_points("7,1\n11,7") == [Point(7, 1), Point(11, 7)]


def test_parse_points_rejects_bad_lines():
    with pytest.raises(ValueError):
        parse_points("7")
    with pytest.raises(ValueError):
        parse_points("a,b")


def test_largest_area_empty_and_single():
    assert largest_area([]) == 0
    assert largest_area([Point(3, 3)]) == 1


def test_largest_area_is_maximum_over_pairs():
    points = parse_points("7,1\n11,1\n11,7\n9,7\n9,5\n2,5\n2,3\n7,3")
    best = largest_area(points)
    assert all(a.area(b) <= best for a in points for b in points)
    assert any(a.area(b) == best for a in points for b in points)


def test_largest_area_is_order_independent():
    points = parse_points("1,1\n4,9\n-3,2\n6,-5")
    assert largest_area(points) == largest_area(list(reversed(points)))