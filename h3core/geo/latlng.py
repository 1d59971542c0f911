"""
Spherical Coordinates
=====================

Latitude/longitude points in radians, unit conversion, component-wise
approximate equality and great-circle (haversine) distances.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from ..index.constants import EARTH_RADIUS_KM, EPSILON_RAD, M_180_PI, M_PI_180


@dataclass(frozen=True)
class LatLng:
    """A point on the sphere, in radians."""
    lat: float
    lng: float

    @classmethod
    def from_degrees(cls, lat: float, lng: float) -> 'LatLng':
        return cls(degs_to_rads(lat), degs_to_rads(lng))

    def to_degrees(self) -> Tuple[float, float]:
        """(lat, lng) in decimal degrees."""
        return rads_to_degs(self.lat), rads_to_degs(self.lng)

    def is_finite(self) -> bool:
        return math.isfinite(self.lat) and math.isfinite(self.lng)


def degs_to_rads(degrees: float) -> float:
    return degrees * M_PI_180


def rads_to_degs(radians: float) -> float:
    return radians * M_180_PI


# ============================================================================
# EQUALITY
# ============================================================================

def geo_almost_equal_threshold(p1: LatLng, p2: LatLng, threshold: float) -> bool:
    """
    True if both components differ by less than ``threshold``.

    Latitude and longitude are compared independently; both must pass.
    An identical component always passes, so a point equals itself even
    at threshold 0.
    """
    d_lat = abs(p1.lat - p2.lat)
    d_lng = abs(p1.lng - p2.lng)
    return (d_lat < threshold or d_lat == 0) and (d_lng < threshold or d_lng == 0)


def geo_almost_equal(p1: LatLng, p2: LatLng) -> bool:
    """geo_almost_equal_threshold with the library epsilon."""
    return geo_almost_equal_threshold(p1, p2, EPSILON_RAD)


# ============================================================================
# DISTANCES
# ============================================================================

def great_circle_distance_rads(a: LatLng, b: LatLng) -> float:
    """
    Great-circle distance between two points, in radians.

    Uses the haversine formula, which is well conditioned for small
    distances. Longitudes need not be normalised.
    """
    sin_lat = math.sin((b.lat - a.lat) * 0.5)
    sin_lng = math.sin((b.lng - a.lng) * 0.5)

    h = sin_lat * sin_lat + math.cos(a.lat) * math.cos(b.lat) * sin_lng * sin_lng

    return 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def great_circle_distance_km(a: LatLng, b: LatLng) -> float:
    return great_circle_distance_rads(a, b) * EARTH_RADIUS_KM


def great_circle_distance_m(a: LatLng, b: LatLng) -> float:
    return great_circle_distance_km(a, b) * 1000


DISTANCE_FUNCTIONS = {
    'rads': great_circle_distance_rads,
    'km': great_circle_distance_km,
    'm': great_circle_distance_m,
}
