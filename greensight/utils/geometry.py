"""Leaf-node planar geometry helpers. No engine imports.

Polygons are open rings: an (N, 2) array whose last vertex implicitly
connects back to the first.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def signed_area(ring: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area. Positive = CCW, Negative = CW."""
    if len(ring) < 3:
        return 0.0
    x = ring[:, 0]
    y = ring[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    return float(0.5 * np.sum(x * y_next - x_next * y))


def ring_edges(ring: NDArray[np.float64]) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Start and end vertices of every edge, wrap-around edge included."""
    return ring, np.roll(ring, -1, axis=0)


def point_in_polygon(point: tuple[float, float], ring: NDArray[np.float64]) -> bool:
    """Even-odd ray casting (ray towards +x)."""
    if len(ring) < 3:
        return False
    px, py = point
    starts, ends = ring_edges(ring)
    x1, y1 = starts[:, 0], starts[:, 1]
    x2, y2 = ends[:, 0], ends[:, 1]

    straddles = (y1 > py) != (y2 > py)
    with np.errstate(divide="ignore", invalid="ignore"):
        x_cross = x1 + (py - y1) * (x2 - x1) / (y2 - y1)
    crossings = np.count_nonzero(straddles & (px < x_cross))
    return bool(crossings % 2 == 1)


def perpendicular_distances(
    ring: NDArray[np.float64],
    a: tuple[float, float],
    b: tuple[float, float],
) -> NDArray[np.float64]:
    """Distance from each vertex to the infinite line through a and b."""
    ax, ay = a
    bx, by = b
    mag = float(np.hypot(bx - ax, by - ay))
    if mag < 1e-12:
        return np.hypot(ring[:, 0] - ax, ring[:, 1] - ay)
    cross = (bx - ax) * (ay - ring[:, 1]) - (ax - ring[:, 0]) * (by - ay)
    return np.abs(cross) / mag
