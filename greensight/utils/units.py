"""Display unit conversions for reports.

The engine keeps meters (lengths, area) and yards (EGD) internally;
callers convert for display.
"""

from __future__ import annotations

from typing import Literal

from greensight.engine.constants import YARDS_PER_METER

UnitSystem = Literal["Yards", "Metres"]

FEET_PER_METER = 3.28084
SQ_YARDS_PER_SQ_METER = 1.196

# GNSS horizontal accuracy bands (meters)
_ACCURACY_GOOD = 2.0
_ACCURACY_FAIR = 5.0


def to_display_distance(meters: float, unit: UnitSystem) -> str:
    value = meters if unit == "Metres" else meters * YARDS_PER_METER
    return f"{value:.1f}"


def to_display_elevation(meters: float, unit: UnitSystem) -> str:
    """Elevation in meters or feet."""
    value = meters if unit == "Metres" else meters * FEET_PER_METER
    return f"{value:.1f}"


def to_display_area(square_meters: float, unit: UnitSystem) -> str:
    if unit == "Metres":
        return f"{round(square_meters)}m²"
    return f"{round(square_meters * SQ_YARDS_PER_SQ_METER)}yd²"


def accuracy_band(accuracy: float) -> str:
    """good (< 2 m), fair (<= 5 m) or poor."""
    if accuracy < _ACCURACY_GOOD:
        return "good"
    if accuracy <= _ACCURACY_FAIR:
        return "fair"
    return "poor"
