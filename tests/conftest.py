"""Shared test fixtures — green outlines built from local (east, north) offsets in meters."""

from __future__ import annotations

import math

import pytest

from greensight.engine.constants import EARTH_RADIUS_M
from greensight.engine.points import GeoPoint

# A green somewhere in Fife
LAT0 = 56.0
LNG0 = -3.0


def offset(east: float, north: float, **kwargs) -> GeoPoint:
    """GeoPoint ``east`` / ``north`` meters from (LAT0, LNG0)."""
    lat = LAT0 + math.degrees(north / EARTH_RADIUS_M)
    lng = LNG0 + math.degrees(east / (EARTH_RADIUS_M * math.cos(math.radians(LAT0))))
    return GeoPoint(lat=lat, lng=lng, **kwargs)


def outline(coords: list[tuple[float, float]]) -> list[GeoPoint]:
    return [offset(e, n) for e, n in coords]


def hexagon(length: float, width: float) -> list[GeoPoint]:
    """Elongated convex hexagon with pointed ends on the east-west axis.

    The tips are the diameter; the long flat sides make every cross-section
    between ±length/3 exactly ``width`` wide.
    """
    h = length / 2
    t = length / 3
    w = width / 2
    return outline([(h, 0), (t, w), (-t, w), (-h, 0), (-t, -w), (t, -w)])


def tapered(length: float = 40.0, width: float = 20.0) -> list[GeoPoint]:
    """Convex hexagon, full ``width`` at the east end and half at the west end."""
    h = length / 2
    t = length / 3
    return outline([
        (h, 0), (t, width / 2), (-t, width / 4), (-h, 0), (-t, -width / 4), (t, -width / 2),
    ])


def square(side: float = 20.0) -> list[GeoPoint]:
    return outline([(0, 0), (side, 0), (side, side), (0, side)])


def l_shape() -> list[GeoPoint]:
    """Two 40 x 10 m arms meeting at the origin, walked from the inner corner."""
    return outline([(10, 10), (10, 40), (0, 40), (0, 0), (40, 0), (40, 10)])


def chevron() -> list[GeoPoint]:
    """A 15 m thick band bent into a ^ between tips 100 m apart."""
    return outline([(-50, 0), (0, 40), (50, 0), (0, 55)])


def circle(radius: float = 15.0, n: int = 30) -> list[GeoPoint]:
    return outline([
        (radius * math.cos(2 * math.pi * i / n), radius * math.sin(2 * math.pi * i / n))
        for i in range(n)
    ])


@pytest.fixture
def square_green() -> list[GeoPoint]:
    return square()


@pytest.fixture
def l_green() -> list[GeoPoint]:
    return l_shape()


@pytest.fixture
def chevron_green() -> list[GeoPoint]:
    return chevron()
