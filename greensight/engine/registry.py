"""Measurement registry — each green measurement is one decorated function.

Usage:
    @transform(id="T1.03", layer=Layer.MEASUREMENT, after=["T1.01"], min_points=3)
    def concavity(ctx: GreenContext) -> None:
        ctx.measurements["concavity"] = concavity_ratio(ctx.points)

A transform states what it needs from the walk: a minimum number of points,
and (for the rating layer) a closed loop. Those needs are checked per run.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from greensight.engine.context import GreenContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    # Raw geometry of whatever has been walked so far
    MEASUREMENT = 1
    # EGD and shape rating, closed greens only
    RATING = 2


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["GreenContext"], None]
    after: list[str] = field(default_factory=list)
    min_points: int = 0
    description: str = ""

    def blocked_by(self, ctx: GreenContext) -> str | None:
        """Reason this transform cannot run on ``ctx`` yet, or None."""
        if ctx.num_points < self.min_points:
            return f"needs {self.min_points} points, have {ctx.num_points}"
        if self.layer is Layer.RATING and not ctx.closed:
            return "green not closed"
        return None


class TransformRegistry:
    """Registered transforms, kept in a dependency-checked run order."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}
        self._order: list[TransformSpec] | None = None

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        self._order = None
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def __contains__(self, transform_id: str) -> bool:
        return transform_id in self._transforms

    def ordered(self, layer: Layer | None = None) -> list[TransformSpec]:
        """Run order: measurements before ratings, each after what it depends on."""
        if self._order is None:
            self._order = self._build_order()
        if layer is None:
            return list(self._order)
        return [s for s in self._order if s.layer is layer]

    def _build_order(self) -> list[TransformSpec]:
        placed: dict[str, TransformSpec] = {}
        visiting: set[str] = set()

        def place(spec: TransformSpec) -> None:
            if spec.id in placed:
                return
            if spec.id in visiting:
                raise ValueError(f"Circular dependency through {spec.id}")
            visiting.add(spec.id)
            for dep_id in spec.after:
                dep = self._transforms.get(dep_id)
                if dep is None:
                    raise ValueError(f"{spec.id} depends on unknown transform {dep_id}")
                if dep.layer > spec.layer:
                    raise ValueError(f"{spec.id} cannot depend on later-layer {dep_id}")
                place(dep)
            visiting.discard(spec.id)
            placed[spec.id] = spec

        for spec in sorted(self._transforms.values(), key=lambda s: (s.layer, s.id)):
            place(spec)
        return list(placed.values())


# Module-level singleton
_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    after: list[str] | None = None,
    min_points: int = 0,
    description: str = "",
):
    """Register a green measurement in the shared registry."""

    def decorator(fn: Callable[["GreenContext"], None]):
        _registry.register(TransformSpec(
            id=id,
            layer=layer,
            fn=fn,
            after=after or [],
            min_points=min_points,
            description=description,
        ))
        return fn

    return decorator
