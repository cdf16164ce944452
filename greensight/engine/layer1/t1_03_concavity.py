"""T1.03 — Convex Hull & Concavity.

Concavity ratio = polygon area / hull area. Convex: 1.0, L-shape: ~0.6.
"""

from __future__ import annotations

from greensight.engine.context import GreenContext
from greensight.engine.hull import concavity_ratio, convex_hull
from greensight.engine.registry import Layer, transform


@transform(
    id="T1.03",
    layer=Layer.MEASUREMENT,
    after=["T1.01"],
    min_points=3,
    description="Compute convex hull and concavity ratio",
)
def concavity(ctx: GreenContext) -> None:
    ctx.measurements["hull_vertices"] = len(convex_hull(ctx.points))
    ctx.measurements["concavity"] = round(concavity_ratio(ctx.points), 4)
