"""GreenContext → GreenReport model.

Numbers are rounded for display here and only here; the engine results keep
full precision.
"""

from __future__ import annotations

from greensight.engine.constants import YARDS_PER_METER
from greensight.engine.context import GreenContext
from greensight.engine.metrics import distance, elevation_change
from greensight.engine.points import GeoPoint
from greensight.engine.results import AnomalousShape, EGDResult, TwoPortionShape
from greensight.models.report import (
    DisplayValues,
    EGDSummary,
    GreenReport,
    LatLng,
    MeasurementLine,
    PortionSummary,
    SpineSummary,
)
from greensight.utils.units import (
    UnitSystem,
    accuracy_band,
    to_display_area,
    to_display_distance,
    to_display_elevation,
)


def _latlng(p: GeoPoint) -> LatLng:
    return LatLng(lat=p.lat, lng=p.lng)


def _line(kind: str, start: GeoPoint, end: GeoPoint, label: str = "", color: str = "") -> MeasurementLine:
    return MeasurementLine(
        kind=kind,
        start=_latlng(start),
        end=_latlng(end),
        length_yd=round(distance(start, end) * YARDS_PER_METER, 1),
        label=label,
        color=color,
    )


def _egd_lines(result: EGDResult, label: str = "") -> list[MeasurementLine]:
    lines = [
        _line("diameter", result.p_a, result.p_b, label),
        _line("width", result.p_c, result.p_d, label),
    ]
    if result.quarter_segments:
        for (start, end), quarter in zip(result.quarter_segments, ("1/4", "3/4")):
            lines.append(_line("quarter_width", start, end, quarter))
    return lines


def _summary(result: EGDResult) -> EGDSummary:
    return EGDSummary(
        egd_yd=result.egd,
        length_yd=round(result.length, 1),
        width_yd=round(result.width, 1),
        ratio=round(result.ratio, 2),
        method=result.method.value,
        is_inconsistent=result.is_inconsistent,
        w1_yd=round(result.w1, 1),
        w3_yd=round(result.w3, 1),
    )


def _display(report: GreenReport, ctx: GreenContext, unit: UnitSystem) -> DisplayValues:
    last_accuracy = ctx.points[-1].accuracy if ctx.points else None
    return DisplayValues(
        unit=unit,
        area=to_display_area(report.area_m2, unit),
        perimeter=to_display_distance(report.perimeter_m, unit),
        elevation=to_display_elevation(report.elevation_change_m, unit),
        accuracy=accuracy_band(last_accuracy) if last_accuracy is not None else None,
    )


def build_report(ctx: GreenContext, unit: UnitSystem = "Yards") -> GreenReport:
    """Assemble the serializable report for one pipeline run."""
    report = GreenReport(
        point_count=ctx.num_points,
        closed=ctx.closed,
        area_m2=ctx.measurements.get("area_m2", 0.0),
        perimeter_m=ctx.measurements.get("perimeter_m", 0.0),
        bunker_pct=ctx.measurements.get("bunker_pct", 0),
        concavity=ctx.measurements.get("concavity"),
        elevation_change_m=round(elevation_change(ctx.points), 2),
        errors=dict(ctx.errors),
    )
    report.display = _display(report, ctx, unit)

    shape = ctx.shape
    if shape is None:
        return report

    report.method = shape.method
    report.is_l_shape = shape.is_l_shape
    report.has_anomaly = shape.has_anomaly
    report.egd = _summary(shape.basic)

    if isinstance(shape, TwoPortionShape):
        for name, portion in (("s1", shape.s1), ("s2", shape.s2)):
            if portion is None:
                continue
            report.portions.append(PortionSummary(
                egd_yd=portion.egd,
                length_yd=round(portion.length, 1),
                width_yd=round(portion.width, 1),
                method=portion.method.value,
            ))
            report.lines.extend(_egd_lines(portion, name))
    else:
        report.lines.extend(_egd_lines(shape.basic))

    if isinstance(shape, AnomalousShape) and shape.anomaly is not None:
        anomaly = shape.anomaly
        report.spine = SpineSummary(
            points=[_latlng(p) for p in anomaly.spine],
            curved_length_yd=round(anomaly.curved_length, 1),
            straight_length_yd=round(anomaly.straight_length, 1),
            is_manual_required=anomaly.is_manual_required,
        )
        for sample in anomaly.samples:
            report.lines.append(_line("spine_width", sample.start, sample.end, sample.label, sample.color))

    return report
