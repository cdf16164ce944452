"""Width sampler — perpendicular cross-sections of a closed perimeter.

A line ``origin + t * normal`` is intersected with every polygon edge
(wrap-around edge included). The extreme signed offsets bound the width at
that axis position:
  - 2+ crossings → AxisSpan(min_t, max_t), width = max_t - min_t
  - <2 crossings → None (axis point outside the shape's span)
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from greensight.engine.constants import PARALLEL_EPS, SEGMENT_EPS
from greensight.engine.points import GeoPoint
from greensight.engine.projection import LocalProjection
from greensight.engine.results import AxisSpan
from greensight.utils.geometry import ring_edges


def width_at(
    origin: tuple[float, float],
    normal: tuple[float, float],
    ring: NDArray[np.float64],
) -> AxisSpan | None:
    """Crossing interval of the normal line through ``origin`` with ``ring``."""
    if len(ring) < 2:
        return None
    ox, oy = origin
    nx, ny = normal
    starts, ends = ring_edges(ring)
    x1, y1 = starts[:, 0], starts[:, 1]
    sx = ends[:, 0] - x1
    sy = ends[:, 1] - y1

    det = -sx * ny + sy * nx
    valid = np.abs(det) >= PARALLEL_EPS
    if not np.any(valid):
        return None

    det = det[valid]
    dx = ox - x1[valid]
    dy = oy - y1[valid]
    u = (-dx * ny + dy * nx) / det
    t = (sx[valid] * dy - sy[valid] * dx) / det

    # Tolerance lets a line through a shared vertex register on its edges
    hits = t[(u >= -SEGMENT_EPS) & (u <= 1 + SEGMENT_EPS)]
    if len(hits) < 2:
        return None
    return AxisSpan(min_t=float(np.min(hits)), max_t=float(np.max(hits)))


class Axis:
    """Main measuring axis from ``p_a`` to ``p_b`` in the plane anchored at ``p_a``."""

    def __init__(self, p_a: GeoPoint, p_b: GeoPoint, projection: LocalProjection | None = None) -> None:
        self.projection = projection or LocalProjection(p_a)
        self.start = self.projection.to_local(p_a)
        self.end = self.projection.to_local(p_b)
        dx = self.end[0] - self.start[0]
        dy = self.end[1] - self.start[1]
        self.length = math.hypot(dx, dy)
        # Unit vector 90° counter-clockwise from p_a → p_b
        if self.length > 0:
            self.normal = (-dy / self.length, dx / self.length)
        else:
            self.normal = (0.0, 0.0)

    @property
    def is_degenerate(self) -> bool:
        return self.length == 0

    def point_at(self, fraction: float) -> tuple[float, float]:
        """Planar point at ``fraction`` of the way from p_a to p_b."""
        return (
            self.start[0] + (self.end[0] - self.start[0]) * fraction,
            self.start[1] + (self.end[1] - self.start[1]) * fraction,
        )

    def project(self, points: Sequence[GeoPoint]) -> NDArray[np.float64]:
        return self.projection.to_local_many(points)

    def offset(self, origin: tuple[float, float], t: float) -> GeoPoint:
        """Geographic point ``t`` meters along the normal from ``origin``."""
        return self.projection.from_local(origin[0] + self.normal[0] * t, origin[1] + self.normal[1] * t)

    def span_endpoints(self, origin: tuple[float, float], span: AxisSpan | None) -> tuple[GeoPoint, GeoPoint]:
        """Boundary endpoints (max side, min side); both collapse to ``origin`` when unresolved."""
        if span is None:
            return self.offset(origin, 0.0), self.offset(origin, 0.0)
        return self.offset(origin, span.max_t), self.offset(origin, span.min_t)
