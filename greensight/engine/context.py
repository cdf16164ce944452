"""GreenContext — the single mutable state object flowing through all transforms.

Scalar measurements → GreenContext.measurements
Shape rating        → GreenContext.shape
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from greensight.engine.config import AnalysisConfig
from greensight.engine.points import GeoPoint
from greensight.engine.results import ShapeAnalysis


@dataclass
class GreenContext:
    """Shared state for one analysis run over one perimeter."""

    # Walked perimeter, implicitly closed when ``closed`` is set
    points: list[GeoPoint] = field(default_factory=list)
    # Has the walk been finalized (loop closed)?
    closed: bool = False
    config: AnalysisConfig = field(default_factory=AnalysisConfig)

    # area_m2, perimeter_m, bunker_pct, concavity, ...
    measurements: dict[str, Any] = field(default_factory=dict)
    shape: ShapeAnalysis | None = None

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)
    # transform id -> why it did not run
    skipped: dict[str, str] = field(default_factory=dict)

    @property
    def num_points(self) -> int:
        return len(self.points)
