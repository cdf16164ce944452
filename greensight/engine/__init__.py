"""GreenSight green geometry engine."""

from greensight.engine.registry import transform, Layer, get_registry
from greensight.engine.context import GreenContext
from greensight.engine.pipeline import Pipeline, create_pipeline
from greensight.engine.classifier import classify
from greensight.engine.egd import analyze
from greensight.engine.anomalous import analyze_anomalous

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "GreenContext",
    "Pipeline",
    "create_pipeline",
    "classify",
    "analyze",
    "analyze_anomalous",
]
