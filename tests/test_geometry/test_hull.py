"""Tests for the monotone-chain convex hull and concavity ratio."""

import pytest

from greensight.engine.hull import concavity_ratio, convex_hull
from greensight.engine.metrics import polygon_area
from tests.conftest import hexagon, l_shape, offset, square


def test_hull_drops_interior_point():
    pts = square(20) + [offset(10, 10)]
    hull = convex_hull(pts)
    assert len(hull) == 4
    assert offset(10, 10) not in hull


def test_hull_drops_collinear_point():
    pts = [offset(0, 0), offset(10, 0), offset(20, 0), offset(20, 20), offset(0, 20)]
    hull = convex_hull(pts)
    assert len(hull) == 4
    assert offset(10, 0) not in hull


def test_hull_too_few_points_returned_unchanged():
    pts = [offset(0, 0), offset(5, 5)]
    assert convex_hull(pts) == pts


def test_hull_of_convex_shape_keeps_every_vertex():
    pts = hexagon(40, 20)
    assert set(convex_hull(pts)) == set(pts)


def test_hull_area_equals_convex_area():
    pts = hexagon(40, 20)
    assert polygon_area(convex_hull(pts)) == pytest.approx(polygon_area(pts), rel=1e-5)


def test_concavity_convex_is_one():
    assert concavity_ratio(hexagon(40, 20)) == pytest.approx(1.0, rel=1e-5)
    assert concavity_ratio(square()) == pytest.approx(1.0, rel=1e-5)


def test_concavity_l_shape():
    # 700 m² L inside a 1150 m² hull
    assert concavity_ratio(l_shape()) == pytest.approx(700 / 1150, rel=1e-3)


def test_concavity_degenerate_hull():
    line = [offset(0, 0), offset(10, 0), offset(20, 0)]
    assert concavity_ratio(line) == 1.0
