import pytest

from snapruler import (
    Circle,
    Line,
    NoActiveStrokeError,
    Point2D,
    PolyStroke,
    ShapeCatalog,
    make_circle,
    make_line,
    make_stroke,
)


def test_circle_rejects_non_positive_radius():
    with pytest.raises(ValueError):
        make_circle((0, 0), 0)
    with pytest.raises(ValueError):
        Circle(Point2D(0, 0), -3.0)
    assert make_circle((1, 1), 2).radius == 2.0


def test_catalog_preserves_insertion_order():
    line = make_line((0, 0), (10, 0))
    stroke = make_stroke([(1, 1), (2, 2)])
    circle = make_circle((5, 5), 3)

    catalog = ShapeCatalog([line])
    catalog.append(stroke)
    catalog.append(circle)

    assert catalog.shapes == (line, stroke, circle)
    assert catalog.lines() == [line]
    assert len(catalog) == 3


def test_catalog_rejects_empty_stroke():
    catalog = ShapeCatalog()
    with pytest.raises(ValueError):
        catalog.append(PolyStroke([]))


def test_stroke_lifecycle():
    catalog = ShapeCatalog()
    stroke = catalog.begin_stroke(Point2D(0, 0))
    catalog.add_point(Point2D(1, 0))
    catalog.add_point(Point2D(2, 0))

    assert catalog.active_stroke is stroke
    assert catalog.end_stroke() is stroke
    assert catalog.active_stroke is None
    assert stroke.points == [Point2D(0, 0), Point2D(1, 0), Point2D(2, 0)]
    assert stroke.first == Point2D(0, 0)
    assert stroke.last == Point2D(2, 0)
    assert stroke.length() == pytest.approx(2.0)


def test_add_point_without_stroke_raises():
    with pytest.raises(NoActiveStrokeError):
        ShapeCatalog().add_point(Point2D(0, 0))


def test_begin_stroke_closes_unfinished_stroke():
    catalog = ShapeCatalog()
    first = catalog.begin_stroke(Point2D(0, 0))
    second = catalog.begin_stroke(Point2D(5, 5))

    assert catalog.shapes == (first, second)
    assert catalog.active_stroke is second


def test_snapshot_is_isolated_from_later_growth():
    catalog = ShapeCatalog([make_line((0, 0), (1, 1))])
    catalog.begin_stroke(Point2D(0, 0))
    snap = catalog.snapshot()
    catalog.add_point(Point2D(9, 9))

    assert len(snap) == 2
    assert isinstance(snap[1], PolyStroke)
    assert snap[1].points == [Point2D(0, 0)]


def test_restore_swaps_whole_sequence():
    catalog = ShapeCatalog([make_line((0, 0), (1, 1))])
    saved = catalog.snapshot()
    catalog.begin_stroke(Point2D(3, 3))
    catalog.add_point(Point2D(4, 4))

    catalog.restore(saved)

    assert len(catalog) == 1
    assert isinstance(catalog[0], Line)
    assert catalog.active_stroke is None
