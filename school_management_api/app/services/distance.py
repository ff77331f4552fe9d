"""Great-circle distance between two points on a spherical earth."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Mean earth radius in metres (IUGG).
EARTH_RADIUS_M = 6371008.8


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


def distance(a: Coordinate, b: Coordinate) -> float:
    """Return the haversine distance between ``a`` and ``b`` in kilometres.

    The distance is computed in metres and rounded to the nearest metre
    before conversion.  Inputs are not validated; callers are expected
    to pass latitudes in [-90, 90] and longitudes in [-180, 180].
    """
    phi1 = math.radians(a.latitude)
    phi2 = math.radians(b.latitude)
    dphi = phi2 - phi1
    dlambda = math.radians(b.longitude - a.longitude)

    h = math.sin(dphi / 2.0) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2.0) ** 2
    # clamp: rounding can push h slightly past 1 for antipodal points
    h = min(1.0, max(0.0, h))
    metres = round(2.0 * EARTH_RADIUS_M * math.asin(math.sqrt(h)))
    return metres / 1000
