"""Pipeline orchestrator — measures (and, once closed, rates) one walked green."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from greensight.engine.config import AnalysisConfig
from greensight.engine.context import GreenContext
from greensight.engine.registry import Layer, TransformRegistry, get_registry

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ("layer1", "layer2")


class Pipeline:
    """Runs registered transforms over a GreenContext.

    A transform is skipped (and the reason kept in ``ctx.skipped``) when the
    walk cannot support it yet, or when one of its dependencies did not
    complete. Failures are kept in ``ctx.errors`` and never abort the run.
    """

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: AnalysisConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or AnalysisConfig()

    def run(self, ctx: GreenContext, layer: Layer | None = None) -> GreenContext:
        """Run every transform, or only those in ``layer``."""
        start = time.perf_counter()
        ctx.config = self.config

        for spec in self.registry.ordered(layer):
            reason = spec.blocked_by(ctx) or self._missing_dependency(ctx, spec.after)
            if reason:
                ctx.skipped[spec.id] = reason
                logger.debug("  %s skipped: %s", spec.id, reason)
                continue

            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)
                continue
            ctx.completed_transforms.add(spec.id)
            logger.debug("  %s completed in %.1fms", spec.id, (time.perf_counter() - t0) * 1000)

        logger.info(
            "Green with %d points (%s): %d done, %d skipped, %d failed in %.0fms",
            ctx.num_points,
            "closed" if ctx.closed else "open",
            len(ctx.completed_transforms),
            len(ctx.skipped),
            len(ctx.errors),
            (time.perf_counter() - start) * 1000,
        )
        return ctx

    @staticmethod
    def _missing_dependency(ctx: GreenContext, after: list[str]) -> str | None:
        for dep_id in after:
            if dep_id not in ctx.completed_transforms:
                return f"{dep_id} did not complete"
        return None


def register_transforms() -> None:
    """Import all transform modules so @transform decorators fire."""
    for layer_name in _LAYER_PACKAGES:
        package = importlib.import_module(f"greensight.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")


def create_pipeline(config: AnalysisConfig | None = None) -> Pipeline:
    """Pipeline over the built-in green transforms."""
    register_transforms()
    return Pipeline(config=config)
