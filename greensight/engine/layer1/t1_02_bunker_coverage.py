"""T1.02 — Bunker Coverage.

Share of the perimeter walked with the bunker flag held.
"""

from __future__ import annotations

from greensight.engine.context import GreenContext
from greensight.engine.metrics import bunker_share
from greensight.engine.registry import Layer, transform


@transform(
    id="T1.02",
    layer=Layer.MEASUREMENT,
    description="Compute percentage of perimeter guarded by bunkers",
)
def bunker_coverage(ctx: GreenContext) -> None:
    ctx.measurements["bunker_pct"] = bunker_share(ctx.points, closed=ctx.closed)
