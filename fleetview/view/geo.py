"""Synthetic coordinates for the map view."""

from __future__ import annotations

import math
import random

from ..constants import COORDINATE_PRECISION, METERS_PER_DEGREE
from .types import GeoPoint


def random_geo(
    center: tuple[float, float],
    radius_m: float,
    *,
    rng: random.Random | None = None,
) -> GeoPoint:
    """Return a uniformly distributed random point within radius_m of center.

    Args:
        center: (latitude, longitude) in degrees
        radius_m: Disk radius in meters
        rng: Optional random source; the module-level generator is used if None

    Returns:
        GeoPoint rounded to 5 decimals. longitude2 carries the longitude
        corrected for east-west shrinkage, using the cosine of the center
        latitude in radians, and is not used by the map.
    """
    draw = rng.random if rng is not None else random.random
    lat0, lng0 = center
    radius_deg = radius_m / METERS_PER_DEGREE

    u = draw()
    v = draw()

    w = radius_deg * math.sqrt(u)
    t = 2 * math.pi * v
    x = w * math.cos(t)
    y = w * math.sin(t)

    x_adjusted = x / math.cos(math.radians(lat0))

    return GeoPoint(
        latitude=round(y + lat0, COORDINATE_PRECISION),
        longitude=round(x + lng0, COORDINATE_PRECISION),
        longitude2=round(x_adjusted + lng0, COORDINATE_PRECISION),
    )
