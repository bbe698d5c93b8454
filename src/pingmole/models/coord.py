"""
Geographic coordinate with great-circle distance computation.

Used to compute each relay's distance from the operator once, at catalog
load time. Holds no other invariants.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Coord:
    """Immutable latitude/longitude pair in degrees.

    Attributes:
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.

    Examples:
        ```python
        berlin = Coord(52.52, 13.405)
        paris = Coord(48.8566, 2.3522)
        berlin.distance_to(paris)  # ~877.5
        ```
    """

    latitude: float
    longitude: float

    # Mean Earth radius in meters (the Earth is a spheroid, not a sphere)
    _EARTH_RADIUS_M: ClassVar[float] = 6_371_000.0

    def distance_to(self, other: Coord) -> float:
        """Great-circle distance to *other* in kilometers (haversine formula).

        The meter-scale value is rounded to the nearest millimeter before
        converting to kilometers, so identical inputs always produce
        identical outputs.
        """
        phi1 = math.radians(self.latitude)
        phi2 = math.radians(other.latitude)
        lam1 = math.radians(self.longitude)
        lam2 = math.radians(other.longitude)

        hav_delta_phi = _haversine(phi2 - phi1)
        hav_delta_lam = math.cos(phi1) * math.cos(phi2) * _haversine(lam2 - lam1)
        # Clamp against floating-point overshoot for antipodal points
        hav_delta = min(1.0, hav_delta_phi + hav_delta_lam)

        meters = round(2.0 * self._EARTH_RADIUS_M * math.asin(math.sqrt(hav_delta)) * 1_000.0)
        return meters / 1_000.0 / 1_000.0


def _haversine(theta: float) -> float:
    """Half a versine of *theta*."""
    return (1.0 - math.cos(theta)) / 2.0
