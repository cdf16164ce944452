"""T2.01 — Shape Classification & EGD.

Simple green → one EGD. L-shape → two portions. Anomalous → spine survey.
"""

from __future__ import annotations

from greensight.engine.classifier import classify
from greensight.engine.context import GreenContext
from greensight.engine.registry import Layer, transform


@transform(
    id="T2.01",
    layer=Layer.RATING,
    after=["T1.03"],
    min_points=3,
    description="Classify green shape and compute Effective Green Diameter",
)
def shape_classification(ctx: GreenContext) -> None:
    cfg = ctx.config
    ctx.shape = classify(
        ctx.points,
        concavity_threshold=cfg.concavity_threshold,
        elongation_threshold=cfg.elongation_threshold,
        spine_steps=cfg.spine_steps,
        manual_rating_factor=cfg.manual_rating_factor,
    )
