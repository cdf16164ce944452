"""Effective Green Diameter.

Length = the two most distant perimeter points (all pairs, O(n²) haversine;
perimeters are tens to low hundreds of points so no spatial index is used).
Width = perpendicular cross-section at the midpoint of that diameter.

  quarter widths differ > 25%  → (L + avg(w1, w3)) / 2   "not consistent"
  L / W >= 3                   → (3W + L) / 4
  L / W >= 2                   → (2W + L) / 3
  otherwise                    → (L + W) / 2
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from greensight.engine.constants import (
    INCONSISTENCY_FRACTION,
    RATIO_THREE_TIMES,
    RATIO_TWICE,
    YARDS_PER_METER,
)
from greensight.engine.metrics import distance
from greensight.engine.points import GeoPoint
from greensight.engine.results import EGDMethod, EGDResult
from greensight.engine.width import Axis, width_at

logger = logging.getLogger(__name__)


def diameter(points: Sequence[GeoPoint]) -> tuple[GeoPoint, GeoPoint, float]:
    """Most distant pair (first found wins ties) and its distance in meters."""
    max_d = 0.0
    p_a = p_b = points[0]
    n = len(points)
    for i in range(n):
        for j in range(i + 1, n):
            d = distance(points[i], points[j])
            if d > max_d:
                max_d = d
                p_a, p_b = points[i], points[j]
    return p_a, p_b, max_d


def analyze(points: Sequence[GeoPoint], force_simple_average: bool = False) -> EGDResult | None:
    """EGD of a closed perimeter, or None with fewer than 3 points / no axis.

    ``force_simple_average`` is used on the halves of an already-split
    L-shape: they always get (L + W) / 2.
    """
    if len(points) < 3:
        return None

    p_a, p_b, max_d = diameter(points)
    axis = Axis(p_a, p_b)
    if axis.is_degenerate:
        return None

    ring = axis.project(points)

    mid = axis.point_at(0.5)
    mid_span = width_at(mid, axis.normal, ring)
    width_m = mid_span.width if mid_span else 0.0

    q1 = axis.point_at(0.25)
    q3 = axis.point_at(0.75)
    span1 = width_at(q1, axis.normal, ring)
    span3 = width_at(q3, axis.normal, ring)

    length = max_d * YARDS_PER_METER
    width = width_m * YARDS_PER_METER
    ratio = 0.0 if width == 0 else length / width

    method = EGDMethod.AVERAGE
    is_inconsistent = False
    w1 = w3 = 0.0
    quarter_segments = None

    if force_simple_average:
        egd = (length + width) / 2
    else:
        if span1 and span3:
            w1 = span1.width * YARDS_PER_METER
            w3 = span3.width * YARDS_PER_METER
            larger = max(w1, w3)
            if larger > 0 and abs(w1 - w3) / larger > INCONSISTENCY_FRACTION:
                is_inconsistent = True
                quarter_segments = (axis.span_endpoints(q1, span1), axis.span_endpoints(q3, span3))

        if is_inconsistent:
            method = EGDMethod.INCONSISTENT
            egd = (length + (w1 + w3) / 2) / 2
        elif ratio >= RATIO_THREE_TIMES:
            method = EGDMethod.THREE_TIMES
            egd = (3 * width + length) / 4
        elif ratio >= RATIO_TWICE:
            method = EGDMethod.TWICE
            egd = (2 * width + length) / 3
        else:
            egd = (length + width) / 2

    p_c, p_d = axis.span_endpoints(mid, mid_span)

    logger.debug(
        "EGD %.1f yd (%s): L=%.1f W=%.1f ratio=%.2f over %d points",
        egd, method.value, length, width, ratio, len(points),
    )

    return EGDResult(
        p_a=p_a,
        p_b=p_b,
        p_c=p_c,
        p_d=p_d,
        length=length,
        width=width,
        ratio=ratio,
        egd=round(egd, 1),
        method=method,
        is_inconsistent=is_inconsistent,
        w1=w1,
        w3=w3,
        quarter_segments=quarter_segments,
    )
