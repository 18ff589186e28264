import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algorithmia.convex_hull import (
    HullError,
    Point,
    convex_hull,
    find_lowest,
    main,
    orientation,
    squared_distance,
)


def test_orientation_signs():
    a, b, c = Point(0, 0), Point(1, 0), Point(0, 1)
    assert orientation(a, b, c) == 1
    assert orientation(a, c, b) == -1
    assert orientation(a, b, Point(5, 0)) == 0


def test_squared_distance():
    assert squared_distance(Point(0, 0), Point(3, 4)) == 25


def test_find_lowest_prefers_leftmost_on_tie():
    points = [Point(3, 1), Point(2, 0), Point(1, 0), Point(0, 5)]
    assert find_lowest(points) == 2


def test_square_with_interior_and_edge_points():
    points = [Point(2, 2), Point(4, 4), Point(0, 0), Point(4, 0), Point(0, 4), Point(2, 0)]
    assert convex_hull(points) == [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]


def test_too_few_points():
    with pytest.raises(HullError, match="Convex hull not possible"):
        convex_hull([Point(0, 0), Point(1, 1)])


def test_all_collinear():
    with pytest.raises(HullError, match="after removing colinear points"):
        convex_hull([Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 3)])


coords = st.integers(min_value=-50, max_value=50)
extra_points = st.lists(st.builds(Point, coords, coords), max_size=30)


@given(extra_points)
def test_hull_contains_every_point(extra):
    points = [Point(-60, -60), Point(60, -60), Point(0, 60), *extra]
    hull = convex_hull(points)
    assert len(hull) >= 3
    assert set(hull) <= set(points)
    for a, b in zip(hull, hull[1:] + hull[:1]):
        assert all(orientation(a, b, c) >= 0 for c in points)


@given(extra_points)
def test_hull_is_strictly_convex(extra):
    points = [Point(-60, -60), Point(60, -60), Point(0, 60), *extra]
    hull = convex_hull(points)
    triples = zip(hull, hull[1:] + hull[:1], hull[2:] + hull[:2])
    assert all(orientation(a, b, c) == 1 for a, b, c in triples)


def test_main_prints_hull(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n0 0\n4 0\n4 4\n0 4\n2 2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.endswith("\nConvex Hull:\n0 0\n4 0\n4 4\n0 4\n")


def test_main_rejects_non_positive_count(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    main([])
    assert "Invalid number of points." in capsys.readouterr().out


def test_main_reports_impossible_hull(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0 0\n1 1\n"))
    main([])
    assert "Convex hull not possible" in capsys.readouterr().out