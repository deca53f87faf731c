import math

import pytest

from snapruler import (
    InvalidPointError,
    Point2D,
    angle_between,
    as_point,
    distance,
    line_intersection,
    midpoint,
    project_point_on_line,
)
from snapruler.geometry import polar_angle, polyline_length


def _close(p, x, y, tol=1e-9):
    return math.isclose(p.x, x, abs_tol=tol) and math.isclose(p.y, y, abs_tol=tol)


def test_distance_basic_and_zero():
    assert distance(Point2D(0, 0), Point2D(3, 4)) == pytest.approx(5.0)
    assert distance(Point2D(-3, -4), Point2D(0, 0)) == pytest.approx(5.0)
    p = Point2D(5.5, -2.25)
    assert distance(p, p) == 0.0


def test_distance_at_large_coordinates():
    d = distance(Point2D(1_000_000, 1_000_000), Point2D(1_000_001, 1_000_001))
    assert d == pytest.approx(math.sqrt(2.0), abs=1e-6)


def test_midpoint_is_equidistant_and_on_segment():
    a = Point2D(1.234567, 2.345678)
    b = Point2D(3.456789, 4.567890)
    m = midpoint(a, b)

    assert distance(a, m) == pytest.approx(distance(b, m))
    cross = (b.x - a.x) * (m.y - a.y) - (b.y - a.y) * (m.x - a.x)
    assert cross == pytest.approx(0.0, abs=1e-12)
    assert a.x < m.x < b.x
    assert a.y < m.y < b.y


def test_midpoint_of_identical_points():
    p = Point2D(5, 5)
    assert midpoint(p, p) == p


def test_projection_onto_axes():
    assert _close(project_point_on_line(Point2D(5, 10), Point2D(0, 0), Point2D(10, 0)), 5, 0)
    assert _close(project_point_on_line(Point2D(10, 5), Point2D(0, 0), Point2D(0, 10)), 0, 5)


def test_projection_is_idempotent():
    l1, l2 = Point2D(0, 0), Point2D(3, 4)
    first = project_point_on_line(Point2D(7, -2), l1, l2)
    second = project_point_on_line(first, l1, l2)
    assert _close(second, first.x, first.y)


def test_projection_onto_degenerate_line_returns_anchor():
    anchor = Point2D(2, 3)
    assert project_point_on_line(Point2D(5, 5), anchor, Point2D(2, 3)) == anchor


@pytest.mark.parametrize(
    "p1, p2, expected",
    [
        ((1, 0), (0, 1), 90.0),
        ((1, 0), (1, 1), 45.0),
        ((-1, 0), (1, 0), 180.0),
        ((1, 0), (2, 0), 0.0),
        ((math.sqrt(3.0), 1.0), (1, 0), 30.0),
    ],
)
def test_angle_between_known_values(p1, p2, expected):
    vertex = Point2D(0, 0)
    assert angle_between(Point2D(*p1), vertex, Point2D(*p2)) == pytest.approx(expected, abs=1e-9)


def test_angle_between_is_symmetric_and_bounded():
    vertex = Point2D(1, 1)
    samples = [Point2D(3, 1), Point2D(-2, 4), Point2D(1, -5), Point2D(-1, -1), Point2D(0.5, 3)]
    for a in samples:
        for b in samples:
            forward = angle_between(a, vertex, b)
            backward = angle_between(b, vertex, a)
            assert forward == pytest.approx(backward)
            assert 0.0 <= forward <= 180.0


def test_angle_between_tiny_rays():
    origin = Point2D(0, 0)
    assert angle_between(Point2D(0.001, 0), origin, Point2D(0, 0.001)) == pytest.approx(90.0)
    assert angle_between(Point2D(1e-9, 0), origin, Point2D(0, 1e-9)) == pytest.approx(90.0)


def test_line_intersection_of_crossing_segments():
    hit = line_intersection(Point2D(0, 0), Point2D(10, 10), Point2D(0, 10), Point2D(10, 0))
    assert hit is not None
    assert _close(hit, 5, 5)

    hit = line_intersection(Point2D(0, 0), Point2D(10, 0), Point2D(5, -5), Point2D(5, 5))
    assert _close(hit, 5, 0)


def test_line_intersection_outside_segments_is_returned():
    hit = line_intersection(Point2D(0, 0), Point2D(1, 0), Point2D(5, -1), Point2D(5, 1))
    assert hit is not None
    assert _close(hit, 5, 0)


def test_line_intersection_parallel_and_collinear():
    assert line_intersection(Point2D(0, 0), Point2D(10, 0), Point2D(0, 5), Point2D(10, 5)) is None
    assert line_intersection(Point2D(0, 0), Point2D(5, 0), Point2D(10, 0), Point2D(15, 0)) is None
    assert line_intersection(Point2D(0, 0), Point2D(1, 0), Point2D(0, 1), Point2D(1, 1)) is None


def test_line_intersection_near_parallel_below_threshold():
    assert line_intersection(Point2D(0, 0), Point2D(1, 0), Point2D(0, 1), Point2D(1, 1 + 1e-7)) is None


@pytest.mark.parametrize("x, y", [(float("nan"), 0.0), (0.0, float("inf")), (float("-inf"), 1.0)])
def test_point_rejects_non_finite(x, y):
    with pytest.raises(InvalidPointError):
        Point2D(x, y)


def test_as_point_accepts_pairs():
    assert as_point((1, 2)) == Point2D(1.0, 2.0)
    p = Point2D(3, 4)
    assert as_point(p) is p
    with pytest.raises(InvalidPointError):
        as_point((1, 2, 3))


def test_polar_angle():
    assert polar_angle(Point2D(1, 1), Point2D(1, 3)) == pytest.approx(math.pi / 2)
    assert polar_angle(Point2D(0, 0), Point2D(-1, 0)) == pytest.approx(math.pi)


def test_midpoint_near_float_max_stays_finite():
    m = midpoint(Point2D(1e308, 0.0), Point2D(1.5e308, -1.7e308))
    assert m.x == pytest.approx(1.25e308)
    assert m.y == pytest.approx(-0.85e308)


def test_projection_overflow_falls_back_to_anchor():
    anchor = Point2D(-1.5e308, 0.0)
    projected = project_point_on_line(Point2D(0.0, 1e308), anchor, Point2D(1.5e308, 0.0))
    assert projected == anchor


def test_polyline_length():
    pts = [Point2D(0, 0), Point2D(3, 4), Point2D(3, 10)]
    assert polyline_length(pts) == pytest.approx(11.0)
    assert polyline_length([]) == 0.0
