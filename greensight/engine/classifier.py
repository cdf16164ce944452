"""Green shape classification — simple, two portions (L-shape), or anomalous.

L-shape if ANY of:
  - the diameter midpoint lies outside the polygon
  - concavity (area / hull area) < concavity_threshold
  - length / width > elongation_threshold

L-shapes are split at the elbow: the perimeter point farthest from the main
axis. Each half is rated with (L + W) / 2. If either half's own diameter
midpoint falls outside the full polygon the green is anomalous and gets a
spine survey along the ORIGINAL main axis.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from greensight.engine.anomalous import analyze_anomalous
from greensight.engine.egd import analyze
from greensight.engine.hull import concavity_ratio
from greensight.engine.points import GeoPoint
from greensight.engine.projection import LocalProjection
from greensight.engine.results import (
    AnomalousShape,
    EGDResult,
    ShapeAnalysis,
    SimpleShape,
    TwoPortionShape,
)
from greensight.utils.geometry import perpendicular_distances, point_in_polygon

logger = logging.getLogger(__name__)


def _midpoint(projection: LocalProjection, result: EGDResult) -> tuple[float, float]:
    ax, ay = projection.to_local(result.p_a)
    bx, by = projection.to_local(result.p_b)
    return ((ax + bx) / 2, (ay + by) / 2)


def find_elbow(points: Sequence[GeoPoint], p_a: GeoPoint, p_b: GeoPoint) -> int:
    """Index of the point with maximum perpendicular distance from p_a → p_b."""
    projection = LocalProjection(p_a)
    ring = projection.to_local_many(points)
    dists = perpendicular_distances(ring, projection.to_local(p_a), projection.to_local(p_b))
    return int(np.argmax(dists))


def classify(
    points: Sequence[GeoPoint],
    concavity_threshold: float = 0.82,
    elongation_threshold: float = 3.6,
    spine_steps: int = 15,
    manual_rating_factor: float = 1.15,
) -> ShapeAnalysis | None:
    """Classify a closed perimeter and rate it. None with fewer than 3 points."""
    if len(points) < 3:
        return None
    basic = analyze(points)
    if basic is None:
        return None

    concavity = concavity_ratio(points)

    projection = LocalProjection(basic.p_a)
    ring = projection.to_local_many(points)
    mid_inside = point_in_polygon(_midpoint(projection, basic), ring)

    is_l_shape = (
        not mid_inside
        or concavity < concavity_threshold
        or basic.ratio > elongation_threshold
    )
    if not is_l_shape:
        return SimpleShape(basic=basic)

    elbow = find_elbow(points, basic.p_a, basic.p_b)
    s1 = analyze(points[: elbow + 1], force_simple_average=True)
    s2 = analyze(points[elbow:], force_simple_average=True)
    logger.debug(
        "Two portions: mid_inside=%s concavity=%.3f ratio=%.2f elbow=%d",
        mid_inside, concavity, basic.ratio, elbow,
    )

    has_anomaly = any(
        s is not None and not point_in_polygon(_midpoint(projection, s), ring)
        for s in (s1, s2)
    )
    if not has_anomaly:
        return TwoPortionShape(basic=basic, s1=s1, s2=s2, elbow_index=elbow)

    anomaly = analyze_anomalous(
        points, basic.p_a, basic.p_b, steps=spine_steps, manual_factor=manual_rating_factor
    )
    logger.debug("Anomalous green: spine survey %s", "attached" if anomaly else "unavailable")
    if anomaly is None:
        return TwoPortionShape(basic=basic, s1=s1, s2=s2, elbow_index=elbow, anomaly_detected=True)
    return AnomalousShape(
        basic=basic, s1=s1, s2=s2, elbow_index=elbow, anomaly_detected=True, anomaly=anomaly
    )
