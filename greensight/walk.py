"""GreenWalk — accumulates position samples while a rater walks a green's edge.

Samples closer than ``min_spacing_m`` to the previous accepted point are
dropped. Once more than ``auto_close_min_points`` points exist, a sample
within ``auto_close_distance_m`` of the start closes the loop. The perimeter
is re-measured after every change, so results are always current.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import replace

from greensight.config import Settings, settings as default_settings
from greensight.engine.config import AnalysisConfig
from greensight.engine.context import GreenContext
from greensight.engine.metrics import distance
from greensight.engine.pipeline import Pipeline, create_pipeline
from greensight.engine.points import GeoPoint, PointRole
from greensight.interfaces import GreenRecord, PositionStream, RecordStore, Subscription
from greensight.models.report import GreenReport
from greensight.report import build_report
from greensight.utils.units import UnitSystem

logger = logging.getLogger(__name__)


class GreenWalk:
    def __init__(
        self,
        pipeline: Pipeline | None = None,
        settings: Settings | None = None,
    ) -> None:
        cfg = settings or default_settings
        self.pipeline = pipeline or create_pipeline(AnalysisConfig.from_settings(cfg))
        self.min_spacing_m = cfg.min_point_spacing_m
        self.auto_close_distance_m = cfg.auto_close_distance_m
        self.auto_close_min_points = cfg.auto_close_min_points

        self.points: list[GeoPoint] = []
        self.closed = False
        # Held while walking past sand
        self.bunker = False
        self.context = GreenContext()
        self._subscription: Subscription | None = None

    # ------------------------------------------------------------------
    # Position feed
    # ------------------------------------------------------------------

    def attach(self, stream: PositionStream) -> None:
        self.detach()
        self._subscription = stream.subscribe(self.add_sample)

    def detach(self) -> None:
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None

    def add_sample(self, sample: GeoPoint) -> bool:
        """Record a sample; returns True if it was added to the perimeter."""
        if self.closed:
            return False

        accepted = False
        if not self.points or distance(self.points[-1], sample) >= self.min_spacing_m:
            role = PointRole.BUNKER if self.bunker else PointRole.PERIMETER
            self.points.append(replace(sample, role=role))
            accepted = True

        if (
            len(self.points) > self.auto_close_min_points
            and distance(sample, self.points[0]) < self.auto_close_distance_m
        ):
            logger.info("Auto-closing green after %d points", len(self.points))
            self.close()
        elif accepted:
            self._remeasure()
        return accepted

    def close(self) -> None:
        self.closed = True
        self.detach()
        self._remeasure()

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def report(self, unit: UnitSystem = "Yards") -> GreenReport:
        return build_report(self.context, unit)

    def finalize(self, store: RecordStore, hole_number: int | None = None) -> GreenRecord | None:
        """Close the loop and prepend the green to ``store``. None with < 3 points."""
        if len(self.points) < 3:
            return None
        if not self.closed:
            self.close()

        report = self.report()
        record = GreenRecord(
            id=uuid.uuid4().hex[:9],
            created_at=time.time(),
            points=list(self.points),
            hole_number=hole_number,
            area_m2=report.area_m2,
            bunker_pct=report.bunker_pct,
            egd_display=report.egd_display,
        )
        store.save([record, *store.load()])
        logger.info("Saved green %s (%s)", record.id, record.egd_display)
        return record

    def _remeasure(self) -> None:
        ctx = GreenContext(points=list(self.points), closed=self.closed)
        self.context = self.pipeline.run(ctx)
