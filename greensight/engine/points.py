"""Position samples as captured by the device."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class PointRole(str, enum.Enum):
    PERIMETER = "perimeter"
    BUNKER = "bunker"


@dataclass(frozen=True)
class GeoPoint:
    """A single position sample.

    ``role`` is only read by callers (bunker coverage); the geometry engine
    ignores it.
    """

    lat: float
    lng: float
    # Meters above the ellipsoid, None when the device gave no altitude
    alt: float | None = None
    # Horizontal / vertical accuracy in meters
    accuracy: float | None = None
    alt_accuracy: float | None = None
    # Seconds since the epoch (wall clock)
    timestamp: float = 0.0
    role: PointRole | None = None

    @property
    def is_bunker(self) -> bool:
        return self.role is PointRole.BUNKER
