"""Convex hull & concavity.

Concavity ratio = polygon area / hull area. Convex green: 1.0, L-shape: ~0.6.
"""

from __future__ import annotations

from collections.abc import Sequence

from greensight.engine.metrics import polygon_area
from greensight.engine.points import GeoPoint


def _cross(o: GeoPoint, a: GeoPoint, b: GeoPoint) -> float:
    return (a.lng - o.lng) * (b.lat - o.lat) - (a.lat - o.lat) * (b.lng - o.lng)


def convex_hull(points: Sequence[GeoPoint]) -> list[GeoPoint]:
    """Monotone-chain hull, counter-clockwise in (lng, lat).

    Collinear points are dropped (a point is popped while the turn is not
    strictly counter-clockwise).
    """
    if len(points) < 3:
        return list(points)

    pts = sorted(points, key=lambda p: (p.lng, p.lat))

    lower: list[GeoPoint] = []
    for p in pts:
        while len(lower) >= 2 and _cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper: list[GeoPoint] = []
    for p in reversed(pts):
        while len(upper) >= 2 and _cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    return lower[:-1] + upper[:-1]


def concavity_ratio(points: Sequence[GeoPoint]) -> float:
    """Polygon area / hull area. Degenerate (zero-area) hulls count as convex."""
    hull_area = polygon_area(convex_hull(points))
    if hull_area <= 1e-10:
        return 1.0
    return polygon_area(points) / hull_area
