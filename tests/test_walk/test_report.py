"""Tests for report assembly and display units."""

import pytest

from greensight.engine.context import GreenContext
from greensight.engine.pipeline import create_pipeline
from greensight.models.report import GreenReport
from greensight.report import build_report
from greensight.utils.units import (
    accuracy_band,
    to_display_area,
    to_display_distance,
    to_display_elevation,
)
from tests.conftest import hexagon, offset, tapered


def _report(points, closed=True) -> GreenReport:
    ctx = create_pipeline().run(GreenContext(points=points, closed=closed))
    return build_report(ctx)


def test_unrated_report():
    report = _report([offset(0, 0), offset(10, 0)], closed=False)
    assert report.point_count == 2
    assert report.egd is None
    assert report.lines == []
    assert report.egd_display == "--"


def test_simple_report():
    report = _report(hexagon(30, 20))
    assert not report.is_l_shape
    assert report.method == "Average (L+W)/2"
    assert report.portions == []
    assert report.spine is None
    assert [line.kind for line in report.lines] == ["diameter", "width"]
    assert report.lines[0].length_yd == pytest.approx(30 * 1.09361, abs=0.1)
    assert report.egd_display == f"{report.egd.egd_yd} yd"


def test_inconsistent_report_has_quarter_lines():
    report = _report(tapered(40, 20))
    assert report.egd.is_inconsistent
    quarters = [line for line in report.lines if line.kind == "quarter_width"]
    assert [line.label for line in quarters] == ["1/4", "3/4"]


def test_two_portion_report(l_green):
    report = _report(l_green)
    assert report.is_l_shape
    assert not report.has_anomaly
    assert report.method == "Two portions"
    assert len(report.portions) == 2
    assert {line.label for line in report.lines} == {"s1", "s2"}
    a, b = report.portions
    assert report.egd_display == f"{a.egd_yd} / {b.egd_yd} yd"


def test_anomalous_report(chevron_green):
    report = _report(chevron_green)
    assert report.has_anomaly
    assert report.method == "Anomalous Green Detected"
    assert report.spine is not None
    assert report.spine.is_manual_required
    assert report.spine.curved_length_yd > report.spine.straight_length_yd
    spine_lines = [line for line in report.lines if line.kind == "spine_width"]
    assert [line.label for line in spine_lines] == ["1/4", "1/2", "3/4"]
    assert spine_lines[0].color == "#f59e0b"


def test_report_serializes():
    data = _report(hexagon(30, 20)).model_dump()
    assert data["closed"] is True
    assert data["egd"]["method"] == "Average (L+W)/2"


def test_display_distance():
    assert to_display_distance(10, "Metres") == "10.0"
    assert to_display_distance(10, "Yards") == "10.9"


def test_display_elevation():
    assert to_display_elevation(1, "Metres") == "1.0"
    assert to_display_elevation(1, "Yards") == "3.3"


def test_display_area():
    assert to_display_area(100, "Metres") == "100m²"
    assert to_display_area(100, "Yards") == "120yd²"


@pytest.mark.parametrize("accuracy,band", [(1.5, "good"), (2.0, "fair"), (5.0, "fair"), (5.1, "poor")])
def test_accuracy_band(accuracy, band):
    assert accuracy_band(accuracy) == band


def test_report_display_values():
    pts = [
        offset(0, 0, alt=10.0, accuracy=1.0),
        offset(20, 0, alt=11.0),
        offset(20, 20, alt=12.0, accuracy=3.5),
    ]
    ctx = create_pipeline().run(GreenContext(points=pts, closed=True))

    metres = build_report(ctx, unit="Metres")
    assert metres.elevation_change_m == pytest.approx(2.0)
    assert metres.display.unit == "Metres"
    assert metres.display.area == "200m²"
    assert metres.display.elevation == "2.0"
    assert metres.display.accuracy == "fair"

    yards = build_report(ctx)
    assert yards.display.area == "239yd²"
    assert yards.display.elevation == "6.6"


def test_report_display_without_accuracy():
    report = _report(hexagon(30, 20))
    assert report.display.accuracy is None
    assert report.display.area == "598yd²"
    assert report.display.perimeter == "92.7"
