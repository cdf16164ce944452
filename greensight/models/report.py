"""Green report data model — the structured, serializable output of the pipeline."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LatLng(BaseModel):
    lat: float
    lng: float


class MeasurementLine(BaseModel):
    """A segment for map overlay rendering."""

    kind: str  # diameter, width, quarter_width, spine_width
    start: LatLng
    end: LatLng
    length_yd: float = 0.0
    label: str = ""
    color: str = ""


class PortionSummary(BaseModel):
    egd_yd: float
    length_yd: float
    width_yd: float
    method: str


class EGDSummary(BaseModel):
    egd_yd: float
    length_yd: float
    width_yd: float
    ratio: float
    method: str
    is_inconsistent: bool = False
    w1_yd: float = 0.0
    w3_yd: float = 0.0


class SpineSummary(BaseModel):
    points: list[LatLng] = Field(default_factory=list)
    curved_length_yd: float = 0.0
    straight_length_yd: float = 0.0
    is_manual_required: bool = False


class DisplayValues(BaseModel):
    """Preformatted strings in the rater's unit system."""

    unit: str
    area: str
    perimeter: str
    elevation: str
    # good / fair / poor, from the last fix; None without accuracy data
    accuracy: str | None = None


class GreenReport(BaseModel):
    point_count: int = 0
    closed: bool = False
    area_m2: float = 0.0
    perimeter_m: float = 0.0
    bunker_pct: int = 0
    concavity: float | None = None
    elevation_change_m: float = 0.0

    method: str = ""
    is_l_shape: bool = False
    has_anomaly: bool = False
    egd: EGDSummary | None = None
    portions: list[PortionSummary] = Field(default_factory=list)
    spine: SpineSummary | None = None
    lines: list[MeasurementLine] = Field(default_factory=list)

    display: DisplayValues | None = None

    errors: dict[str, str] = Field(default_factory=dict)

    @property
    def egd_display(self) -> str:
        """Display string, e.g. "31.2 yd", or "18.4 / 20.1 yd" for two portions."""
        if self.is_l_shape and self.portions:
            return " / ".join(f"{p.egd_yd}" for p in self.portions) + " yd"
        if self.egd is not None:
            return f"{self.egd.egd_yd} yd"
        return "--"
