"""Anomalous-shape survey — approximate medial axis ("spine") of a curved green.

Perpendicular widths are sampled at evenly spaced points along the main
axis; the midpoint of each resolved cross-section is a spine point. When the
spine is much longer than the straight axis the green is too curved for the
automatic EGD and a rater works from the spine and the three width samples.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from greensight.engine.constants import YARDS_PER_METER
from greensight.engine.metrics import distance
from greensight.engine.points import GeoPoint
from greensight.engine.results import AnomalousResult, WidthSample
from greensight.engine.width import Axis, width_at

logger = logging.getLogger(__name__)

# (label, color, fraction along the axis)
_WIDTH_MARKS = (
    ("1/4", "#f59e0b", 0.25),
    ("1/2", "#ec4899", 0.50),
    ("3/4", "#8b5cf6", 0.75),
)


def analyze_anomalous(
    points: Sequence[GeoPoint],
    p_a: GeoPoint,
    p_b: GeoPoint,
    steps: int = 15,
    manual_factor: float = 1.15,
) -> AnomalousResult | None:
    """Spine and width survey of ``points`` along the p_a → p_b axis.

    None with fewer than 3 points, a zero-length axis or ``steps < 1``.
    """
    if len(points) < 3 or steps < 1:
        return None
    axis = Axis(p_a, p_b)
    if axis.is_degenerate:
        return None

    ring = axis.project(points)

    spine: list[GeoPoint] = []
    for i in range(steps + 1):
        origin = axis.point_at(i / steps)
        span = width_at(origin, axis.normal, ring)
        if span is None:
            continue
        spine.append(axis.offset(origin, span.center))

    curved = sum(distance(spine[i], spine[i + 1]) for i in range(len(spine) - 1)) * YARDS_PER_METER
    straight = distance(p_a, p_b) * YARDS_PER_METER

    samples: list[WidthSample] = []
    for label, color, fraction in _WIDTH_MARKS:
        origin = axis.point_at(fraction)
        span = width_at(origin, axis.normal, ring)
        if span is None:
            continue
        start, end = axis.span_endpoints(origin, span)
        samples.append(WidthSample(
            label=label,
            color=color,
            fraction=fraction,
            width=span.width * YARDS_PER_METER,
            start=start,
            end=end,
        ))

    is_manual = curved > straight * manual_factor
    logger.debug(
        "Spine: %d points, curved %.1f yd vs straight %.1f yd (manual=%s)",
        len(spine), curved, straight, is_manual,
    )

    return AnomalousResult(
        spine=tuple(spine),
        curved_length=curved,
        straight_length=straight,
        samples=tuple(samples),
        is_manual_required=is_manual,
    )
