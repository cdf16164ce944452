"""Immutable analysis results.

A ShapeAnalysis is one of three variants:
  SimpleShape      → one EGD for the whole green
  TwoPortionShape  → L-shape split into s1 / s2 at the elbow
  AnomalousShape   → two portions plus a medial-axis (spine) survey
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from greensight.engine.points import GeoPoint


class EGDMethod(str, enum.Enum):
    AVERAGE = "Average (L+W)/2"
    TWICE = "One dimension twice the other"
    THREE_TIMES = "One dimension three times the other"
    INCONSISTENT = "One dimension not consistent"


TWO_PORTIONS_LABEL = "Two portions"
ANOMALOUS_LABEL = "Anomalous Green Detected"


@dataclass(frozen=True)
class AxisSpan:
    """Extreme signed offsets of boundary crossings along a normal."""

    min_t: float
    max_t: float

    @property
    def width(self) -> float:
        return self.max_t - self.min_t

    @property
    def center(self) -> float:
        return (self.min_t + self.max_t) / 2


@dataclass(frozen=True)
class WidthSample:
    label: str
    color: str
    # Position along the main axis, 0 = pA, 1 = pB
    fraction: float
    # Yards
    width: float
    start: GeoPoint
    end: GeoPoint


@dataclass(frozen=True)
class EGDResult:
    # Diameter endpoints
    p_a: GeoPoint
    p_b: GeoPoint
    # Midpoint-width endpoints
    p_c: GeoPoint
    p_d: GeoPoint
    # Yards
    length: float
    width: float
    ratio: float
    egd: float
    method: EGDMethod
    is_inconsistent: bool = False
    # Quarter widths in yards, 0 when unresolved
    w1: float = 0.0
    w3: float = 0.0
    # ((pC1, pD1), (pC3, pD3)) when inconsistent
    quarter_segments: tuple[tuple[GeoPoint, GeoPoint], tuple[GeoPoint, GeoPoint]] | None = None


@dataclass(frozen=True)
class AnomalousResult:
    spine: tuple[GeoPoint, ...]
    # Yards
    curved_length: float
    straight_length: float
    samples: tuple[WidthSample, ...]
    is_manual_required: bool

    @property
    def method(self) -> str:
        return ANOMALOUS_LABEL

    @property
    def curvature_excess(self) -> float:
        """Curved / straight length, 0 for a degenerate axis."""
        if self.straight_length <= 0:
            return 0.0
        return self.curved_length / self.straight_length


@dataclass(frozen=True)
class ShapeAnalysis:
    basic: EGDResult

    @property
    def is_l_shape(self) -> bool:
        return False

    @property
    def has_anomaly(self) -> bool:
        return False

    @property
    def method(self) -> str:
        return self.basic.method.value

    @property
    def egd_values(self) -> tuple[float, ...]:
        return (self.basic.egd,)


@dataclass(frozen=True)
class SimpleShape(ShapeAnalysis):
    pass


@dataclass(frozen=True)
class TwoPortionShape(ShapeAnalysis):
    s1: EGDResult | None = None
    s2: EGDResult | None = None
    elbow_index: int = 0
    anomaly_detected: bool = False

    @property
    def is_l_shape(self) -> bool:
        return True

    @property
    def has_anomaly(self) -> bool:
        return self.anomaly_detected

    @property
    def method(self) -> str:
        return TWO_PORTIONS_LABEL

    @property
    def egd_values(self) -> tuple[float, ...]:
        return tuple(s.egd for s in (self.s1, self.s2) if s is not None)


@dataclass(frozen=True)
class AnomalousShape(TwoPortionShape):
    anomaly: AnomalousResult | None = None

    @property
    def has_anomaly(self) -> bool:
        return True

    @property
    def method(self) -> str:
        return ANOMALOUS_LABEL
