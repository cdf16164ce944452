"""Analysis configuration — thresholds that steer shape classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from greensight.config import Settings


@dataclass
class AnalysisConfig:
    """Controls how a perimeter is classified and rated."""

    # Polygon area / hull area below this → two portions
    concavity_threshold: float = 0.82
    # Length / width above this → two portions
    elongation_threshold: float = 3.6

    # Spine sampling intervals along the main axis (steps + 1 samples)
    spine_steps: int = 15
    # Curved spine longer than straight axis by this factor → manual rating
    manual_rating_factor: float = 1.15

    def __post_init__(self) -> None:
        if self.spine_steps < 1:
            raise ValueError("spine_steps must be >= 1")
        if self.concavity_threshold <= 0 or self.elongation_threshold <= 0:
            raise ValueError("Classification thresholds must be positive")
        if self.manual_rating_factor <= 0:
            raise ValueError("manual_rating_factor must be positive")

    @classmethod
    def from_settings(cls, settings: Settings) -> AnalysisConfig:
        return cls(
            concavity_threshold=settings.concavity_threshold,
            elongation_threshold=settings.elongation_threshold,
            spine_steps=settings.spine_steps,
            manual_rating_factor=settings.manual_rating_factor,
        )
