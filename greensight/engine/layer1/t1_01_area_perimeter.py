"""T1.01 — Area & Perimeter.

Area: shoelace on the local projection (m²).
Perimeter: haversine segment sum, closing edge included once the loop is closed.
"""

from __future__ import annotations

from greensight.engine.context import GreenContext
from greensight.engine.metrics import perimeter_length, polygon_area
from greensight.engine.registry import Layer, transform


@transform(
    id="T1.01",
    layer=Layer.MEASUREMENT,
    description="Compute enclosed area and perimeter length",
)
def area_perimeter(ctx: GreenContext) -> None:
    ctx.measurements["area_m2"] = round(polygon_area(ctx.points), 2)
    ctx.measurements["perimeter_m"] = round(perimeter_length(ctx.points, closed=ctx.closed), 2)
