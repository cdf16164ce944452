"""Collaborator interfaces injected into the walk recorder.

The engine never touches storage or the device position feed directly.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from greensight.engine.points import GeoPoint


@dataclass
class GreenRecord:
    """A finalized green as stored by the caller."""

    id: str
    created_at: float
    points: list[GeoPoint] = field(default_factory=list)
    hole_number: int | None = None
    area_m2: float = 0.0
    bunker_pct: int = 0
    egd_display: str = "--"


class RecordStore(Protocol):
    def save(self, records: list[GreenRecord]) -> None: ...

    def load(self) -> list[GreenRecord]: ...


class Subscription(Protocol):
    def cancel(self) -> None: ...


class PositionStream(Protocol):
    def subscribe(self, callback: Callable[[GeoPoint], None]) -> Subscription: ...
