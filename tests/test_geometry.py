import pytest

from ride_stats.src.core.geometry import Point, distance, distance_squared


def test_distance_345_triangle():
    assert distance(Point(0, 0), Point(3, 4)) == 5.0


def test_distance_is_rounded_to_two_decimals():
    assert distance(Point(0, 0), Point(1, 1)) == 1.41


@pytest.mark.parametrize("p1, p2", [
    (Point(0, 0), Point(3, 4)),
    (Point(-1.5, 2.25), Point(7.0, -3.125)),
    (Point(100, 100), Point(100, 100)),
])
def test_distance_is_symmetric(p1, p2):
    assert distance(p1, p2) == distance(p2, p1)
    assert distance_squared(p1, p2) == distance_squared(p2, p1)


def test_distance_to_self_is_zero():
    p = Point(12.5, -7.0)
    assert distance(p, p) == 0
    assert distance_squared(p, p) == 0


def test_distance_squared_is_not_rooted_or_rounded():
    assert distance_squared(Point(0, 0), Point(3, 4)) == 25
    assert distance_squared(Point(0, 0), Point(0.001, 0)) == pytest.approx(1e-6)


def test_geometry_is_shapely_point():
    geom = Point(1.0, 2.0).geometry
    assert (geom.x, geom.y) == (1.0, 2.0)
