"""Local planar projection.

Equirectangular approximation anchored at one point: longitude is scaled by
cos(anchor latitude) so both axes have ~equal meters per degree near the
anchor. Adequate at green / fairway scale, inaccurate over kilometers.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from greensight.engine.constants import EARTH_RADIUS_M
from greensight.engine.points import GeoPoint


class LocalProjection:
    """Geographic ↔ local (x east, y north) meters around ``anchor``."""

    def __init__(self, anchor: GeoPoint) -> None:
        self.lat0 = anchor.lat
        self.lng0 = anchor.lng
        self._cos_lat0 = math.cos(math.radians(anchor.lat))

    def to_local(self, point: GeoPoint) -> tuple[float, float]:
        x = math.radians(point.lng - self.lng0) * EARTH_RADIUS_M * self._cos_lat0
        y = math.radians(point.lat - self.lat0) * EARTH_RADIUS_M
        return (x, y)

    def to_local_many(self, points: Sequence[GeoPoint]) -> NDArray[np.float64]:
        """Project a sequence to an (N, 2) array."""
        if not points:
            return np.empty((0, 2))
        lat = np.array([p.lat for p in points], dtype=np.float64)
        lng = np.array([p.lng for p in points], dtype=np.float64)
        x = np.radians(lng - self.lng0) * EARTH_RADIUS_M * self._cos_lat0
        y = np.radians(lat - self.lat0) * EARTH_RADIUS_M
        return np.column_stack([x, y])

    def from_local(self, x: float, y: float) -> GeoPoint:
        lat = self.lat0 + math.degrees(y / EARTH_RADIUS_M)
        lng = self.lng0 + math.degrees(x / (EARTH_RADIUS_M * self._cos_lat0))
        return GeoPoint(lat=lat, lng=lng)
