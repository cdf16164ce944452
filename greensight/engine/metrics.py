"""Metric primitives — haversine distances and planar polygon area.

Lengths use the great-circle distance so absolute measurements stay
GPS-faithful; only area goes through the local projection.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from greensight.engine.constants import EARTH_RADIUS_M
from greensight.engine.points import GeoPoint
from greensight.engine.projection import LocalProjection
from greensight.utils.geometry import signed_area


def distance(p1: GeoPoint, p2: GeoPoint) -> float:
    """Haversine great-circle distance in meters."""
    lat1 = math.radians(p1.lat)
    lat2 = math.radians(p2.lat)
    d_lat = math.radians(p2.lat - p1.lat)
    d_lng = math.radians(p2.lng - p1.lng)
    a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def polygon_area(points: Sequence[GeoPoint]) -> float:
    """Unsigned shoelace area in m², projected around ``points[0]``."""
    if len(points) < 3:
        return 0.0
    ring = LocalProjection(points[0]).to_local_many(points)
    return abs(signed_area(ring))


def path_length(points: Sequence[GeoPoint]) -> float:
    """Open path length in meters (fairway track)."""
    return sum(distance(points[i], points[i + 1]) for i in range(len(points) - 1))


def perimeter_length(points: Sequence[GeoPoint], closed: bool = True) -> float:
    """Perimeter length in meters, including the closing edge when ``closed``."""
    total = path_length(points)
    if closed and len(points) >= 2:
        total += distance(points[-1], points[0])
    return total


def bunker_share(points: Sequence[GeoPoint], closed: bool = True) -> int:
    """Percentage of the perimeter guarded by sand.

    A segment counts as bunker when the point it ends on was tagged as
    bunker. The closing edge adds to the total length only.
    """
    bunker = 0.0
    for i in range(len(points) - 1):
        if points[i + 1].is_bunker:
            bunker += distance(points[i], points[i + 1])
    total = perimeter_length(points, closed=closed)
    if total <= 0:
        return 0
    return round(bunker / total * 100)


def elevation_change(points: Sequence[GeoPoint]) -> float:
    """Last minus first altitude in meters; missing altitudes count as 0."""
    if not points:
        return 0.0
    return (points[-1].alt or 0.0) - (points[0].alt or 0.0)
