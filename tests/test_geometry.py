"""Test the ellipse geometry."""

import pytest

from shapebox.layout.geometry import (
    DegenerateGeometryError,
    EllipseBox,
    Rect,
    compute_geometry,
)

from .testing_utils import assert_no_logs


@assert_no_logs
def test_compute_geometry():
    box, inscribed = compute_geometry(120, 80, stroke_width=2, padding=10)
    assert box == EllipseBox(60, 40, 60, 40, 2)
    assert box.bounding_box() == Rect(0, 0, 120, 80)
    assert inscribed == Rect(10, 10, 100, 60)


@assert_no_logs
def test_compute_geometry_position():
    box, inscribed = compute_geometry(120, 80, padding=10, x=5, y=7)
    assert box.bounding_box() == Rect(5, 7, 120, 80)
    assert inscribed == Rect(15, 17, 100, 60)


@assert_no_logs
def test_stroke_does_not_change_box():
    box, _ = compute_geometry(100, 50, stroke_width=4)
    assert box.bounding_box() == Rect(0, 0, 100, 50)
    assert box.visual_extent() == Rect(-2, -2, 104, 54)


@assert_no_logs
def test_zero_padding():
    box, inscribed = compute_geometry(100, 50)
    assert inscribed == box.bounding_box()


@assert_no_logs
@pytest.mark.parametrize('width, height, padding', (
    (100, 50, 1), (100, 50, 24.9), (10, 10, 4), (3, 1000, 1.4)))
def test_containment(width, height, padding):
    box, inscribed = compute_geometry(width, height, padding=padding)
    bounding_box = box.bounding_box()
    for x, y in inscribed.corners():
        assert 0 <= x <= width
        assert 0 <= y <= height
    assert bounding_box.contains_rect(inscribed)
    assert inscribed != bounding_box


@assert_no_logs
@pytest.mark.parametrize('width, height, padding', (
    (100, 50, 25), (100, 50, 50), (100, 50, 30), (40, 100, 20),
    (0, 0, 1)))
def test_degenerate_padding(width, height, padding):
    with pytest.raises(DegenerateGeometryError):
        compute_geometry(width, height, padding=padding)


@assert_no_logs
@pytest.mark.parametrize('arguments', (
    {'width': -1, 'height': 10},
    {'width': 10, 'height': -1},
    {'width': 10, 'height': 10, 'padding': -1},
    {'width': 10, 'height': 10, 'stroke_width': -1},
))
def test_negative_values(arguments):
    with pytest.raises(DegenerateGeometryError):
        compute_geometry(**arguments)


@assert_no_logs
def test_empty_ellipse():
    box, inscribed = compute_geometry(0, 0)
    assert box.is_empty
    assert inscribed == Rect(0, 0, 0, 0)
    assert not box.contains(0, 0)
    assert compute_geometry(10, 0)[0].is_empty
    assert not compute_geometry(10, 1)[0].is_empty


@assert_no_logs
@pytest.mark.parametrize('point, inside', (
    ((60, 40), True),
    ((0, 40), True),
    ((120, 40), True),
    ((60, 0), True),
    ((1, 1), False),
    ((119, 79), False),
    ((121, 40), False),
))
def test_contains(point, inside):
    box, _ = compute_geometry(120, 80)
    assert box.contains(*point) is inside


@assert_no_logs
def test_bezier_curves():
    box, _ = compute_geometry(100, 60, x=10, y=20)
    start, curves = box.bezier_curves()
    assert start == (110, 50)
    assert len(curves) == 4
    # Curves go through the four extreme points and close the path.
    assert [curve[4:] for curve in curves] == [
        (60, 80), (10, 50), (60, 20), (110, 50)]
    for curve in curves:
        for x, y in zip(curve[::2], curve[1::2]):
            assert 10 <= x <= 110
            assert 20 <= y <= 80


@assert_no_logs
def test_translated():
    box, inscribed = compute_geometry(20, 10, padding=2)
    assert box.translated(5, 5).bounding_box() == Rect(5, 5, 20, 10)
    assert inscribed.translated(-2, 3) == Rect(0, 5, 16, 6)
