"""
Bounding Boxes and Cell Count Estimates
=======================================

Estimates of how many cells are needed to cover a line or a bounding box at a
given resolution. Both use the first pentagon of the resolution as the
worst case: pentagons are the most distorted (smallest) cells, so sizing by
them never under-counts.
"""

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from ..errors import FailedError, OptionInvalidError
from ..index.hierarchy import get_pentagons
from .geodesy import cell_to_boundary, cell_to_lat_lng
from .latlng import DISTANCE_FUNCTIONS, LatLng, great_circle_distance_km

logger = logging.getLogger(__name__)

# Area of a regular hexagon is 3/2 * sqrt(3) * r^2
HEXAGON_AREA_FACTOR = 2.59807621135
# Pentagon-like distortion shrinks the worst-case area by 20%
PENTAGON_AREA_REDUCTION = 0.8


# ============================================================================
# CELL RADIUS
# ============================================================================

def hex_radius(h: int, unit: str = 'km') -> float:
    """
    Distance from the center of cell ``h`` to its first boundary vertex.

    Args:
        h: Cell index
        unit: 'km', 'm' or 'rads'

    Raises:
        OptionInvalidError: If the unit is unknown
    """
    distance = DISTANCE_FUNCTIONS.get(unit)
    if distance is None:
        raise OptionInvalidError(f"Unknown distance unit {unit!r}")
    return distance(cell_to_lat_lng(h), cell_to_boundary(h)[0])


def hex_radius_km(h: int) -> float:
    return hex_radius(h, 'km')


def _pentagon_radius_km(res: int) -> float:
    pentagons = get_pentagons(res)
    if not pentagons:
        raise FailedError(f"No pentagons at resolution {res}")
    return hex_radius_km(pentagons[0])


# ============================================================================
# LINE ESTIMATE
# ============================================================================

def line_hex_estimate(origin: LatLng, destination: LatLng, res: int) -> int:
    """
    Estimated number of cells needed to trace the line origin -> destination.

    The great-circle length is divided by the diameter of the most distorted
    cell at ``res`` and rounded up, with a minimum of 1.

    Args:
        origin: Start of the line (radians)
        destination: End of the line (radians)
        res: Resolution to trace at

    Returns:
        Estimated cell count (>= 1)

    Raises:
        ResolutionDomainError: If res is outside 0..15
        FailedError: If the estimate is not finite
    """
    pentagon_radius_km = _pentagon_radius_km(res)
    if not (origin.is_finite() and destination.is_finite()):
        raise FailedError(f"Non-finite line endpoints {origin} -> {destination}")

    dist = great_circle_distance_km(origin, destination)
    steps = dist / (2 * pentagon_radius_km)
    if not math.isfinite(steps):
        raise FailedError(f"Non-finite line estimate between {origin} and {destination}")

    return max(math.ceil(steps), 1)


# ============================================================================
# BOUNDING BOX
# ============================================================================

@dataclass(frozen=True)
class BBox:
    """Geographic bounding box in radians. east < west when it crosses the antimeridian."""
    north: float
    south: float
    east: float
    west: float

    @property
    def is_transmeridian(self) -> bool:
        return self.east < self.west

    def contains(self, point: LatLng) -> bool:
        if point.lat < self.south or point.lat > self.north:
            return False
        if self.is_transmeridian:
            return point.lng >= self.west or point.lng <= self.east
        return self.west <= point.lng <= self.east


def bbox_from_vertices(verts: Sequence[LatLng]) -> BBox:
    """
    Bounding box of a ring of vertices.

    The ring crosses the antimeridian when any of its edges (including the
    closing one) spans more than pi in longitude. East/west are then the
    largest negative and smallest positive longitudes.
    """
    if not verts:
        return BBox(0.0, 0.0, 0.0, 0.0)

    lats = [v.lat for v in verts]
    lngs = [v.lng for v in verts]
    north, south = max(lats), min(lats)
    east, west = max(lngs), min(lngs)

    n = len(lngs)
    if any(abs(lngs[i] - lngs[(i + 1) % n]) > math.pi for i in range(n)):
        east = max((lng for lng in lngs if lng < 0), default=-math.inf)
        west = min((lng for lng in lngs if lng > 0), default=math.inf)

    return BBox(north=north, south=south, east=east, west=west)


def bbox_hex_estimate(bbox: BBox, res: int) -> int:
    """
    Estimated number of cells needed to cover ``bbox`` at ``res``.

    Raises:
        FailedError: If the estimate is not finite
    """
    pentagon_radius_km = _pentagon_radius_km(res)
    pentagon_area_km2 = PENTAGON_AREA_REDUCTION * (
        HEXAGON_AREA_FACTOR * pentagon_radius_km * pentagon_radius_km
    )

    p1 = LatLng(bbox.north, bbox.east)
    p2 = LatLng(bbox.south, bbox.west)
    d = great_circle_distance_km(p1, p2)

    d_lat = p1.lat - p2.lat
    d_lng = p1.lng - p2.lng
    # Aspect ratio, capped at 3:1. A box that is flat in either axis uses the cap.
    if d_lat == 0 or d_lng == 0:
        ratio = 3.0
    else:
        ratio = min(3.0, abs(d_lng / d_lat))

    area = d * d / ratio / pentagon_area_km2
    if not math.isfinite(area):
        raise FailedError(f"Non-finite bounding box estimate for {bbox}")

    estimate = max(math.ceil(area), 1)
    logger.debug(f"Bounding box estimate at res {res}: {estimate} cells")
    return estimate
