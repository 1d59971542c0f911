"""
Polygon Edge Rasterization
==========================

Traces the rings of a polygon with cells. Each edge is sampled at the number
of points given by the line estimate, every sample is converted to a cell and
new cells are recorded in a bounded set. The result (discovery order plus
membership) is the boundary seed set an interior flood-fill starts from.

Samples are interpolated linearly in raw latitude/longitude, not along the
geodesic. Accuracy degrades near the poles and the antimeridian, and the
traced cells match other implementations of the same scheme exactly.

Usage:
    polygon = GeoPolygon.from_shapely(shapely_polygon)
    cells = trace_polygon_edges(polygon, res=9)
    seeds = cells.search
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from shapely.geometry import Polygon

from ..errors import CapacityError, DomainError
from ..index.constants import POLYGON_TO_CELLS_BUFFER
from .bbox import bbox_from_vertices, bbox_hex_estimate, line_hex_estimate
from .geodesy import lat_lng_to_cell
from .latlng import LatLng

logger = logging.getLogger(__name__)


# ============================================================================
# GEOMETRY TYPES
# ============================================================================

@dataclass(frozen=True)
class GeoLoop:
    """An ordered ring of vertices (radians). The closing edge is implicit."""
    verts: Tuple[LatLng, ...] = ()

    @classmethod
    def from_degrees(cls, coords: Sequence[Tuple[float, float]]) -> 'GeoLoop':
        """Build from (lat, lng) pairs in degrees."""
        return cls(tuple(LatLng.from_degrees(lat, lng) for lat, lng in coords))

    @classmethod
    def from_lnglat_ring(cls, coords: Sequence[Tuple[float, float]]) -> 'GeoLoop':
        """Build from a GeoJSON/shapely ring of (lng, lat) degrees, dropping the closing vertex."""
        coords = list(coords)
        if len(coords) > 1 and coords[0] == coords[-1]:
            coords = coords[:-1]
        return cls(tuple(LatLng.from_degrees(lat, lng) for lng, lat, *_ in coords))

    def __len__(self) -> int:
        return len(self.verts)

    def edges(self) -> Iterator[Tuple[LatLng, LatLng]]:
        """(origin, destination) for every edge, wrapping to the first vertex."""
        n = len(self.verts)
        for i in range(n):
            yield self.verts[i], self.verts[(i + 1) % n]


@dataclass(frozen=True)
class GeoPolygon:
    """An outer ring plus zero or more holes."""
    geoloop: GeoLoop
    holes: Tuple[GeoLoop, ...] = ()

    @classmethod
    def from_shapely(cls, polygon: Polygon) -> 'GeoPolygon':
        """Build from a shapely Polygon in lng/lat degrees."""
        return cls(
            geoloop=GeoLoop.from_lnglat_ring(polygon.exterior.coords),
            holes=tuple(GeoLoop.from_lnglat_ring(ring.coords) for ring in polygon.interiors),
        )

    def rings(self) -> Iterator[GeoLoop]:
        yield self.geoloop
        yield from self.holes

    @property
    def num_verts(self) -> int:
        return sum(len(ring) for ring in self.rings())


# ============================================================================
# BOUNDED CELL SET
# ============================================================================

@dataclass
class BoundedCellSet:
    """
    Fixed-capacity open-addressing set of cells.

    A cell's home slot is ``cell % capacity``; collisions walk forward,
    wrapping. ``search`` keeps cells in discovery order. A set belongs to
    one ring scan at a time; slot placement depends on insertion order.
    """
    capacity: int
    slots: List[int] = field(init=False, repr=False)
    search: List[int] = field(init=False, default_factory=list)

    def __post_init__(self):
        if self.capacity <= 0:
            raise DomainError(f"Capacity must be positive, got {self.capacity}")
        self.slots = [0] * self.capacity

    def add(self, cell: int) -> bool:
        """
        Insert ``cell``.

        Returns:
            True if the cell was new, False if already present

        Raises:
            CapacityError: If the slot walk runs past the capacity
        """
        loc = cell % self.capacity
        loop_count = 0
        while self.slots[loc] != 0:
            if loop_count > self.capacity:
                raise CapacityError(
                    f"Cell set of capacity {self.capacity} is full while inserting {cell:x}"
                )
            if self.slots[loc] == cell:
                return False
            loc = (loc + 1) % self.capacity
            loop_count += 1

        self.slots[loc] = cell
        self.search.append(cell)
        return True

    @property
    def found(self) -> List[int]:
        """Occupied slots in slot order (0 marks an empty slot)."""
        return list(self.slots)

    def __contains__(self, cell: int) -> bool:
        loc = cell % self.capacity
        for _ in range(self.capacity):
            if self.slots[loc] == 0:
                return False
            if self.slots[loc] == cell:
                return True
            loc = (loc + 1) % self.capacity
        return False

    def __len__(self) -> int:
        return len(self.search)

    def __iter__(self) -> Iterator[int]:
        return iter(self.search)


# ============================================================================
# TRACING
# ============================================================================

def get_edge_hexagons(geoloop: GeoLoop, res: int, cells: BoundedCellSet) -> BoundedCellSet:
    """
    Trace ``geoloop`` with cells at ``res``, adding them to ``cells``.

    For each edge the line estimate gives the number of samples n; sample j
    (0 <= j < n) is ((n - j) * origin + j * destination) / n, component-wise.

    Args:
        geoloop: Ring to trace
        res: Resolution of the cells
        cells: Set to record cells in; shared across the rings of one polygon

    Returns:
        ``cells``, for chaining

    Raises:
        CapacityError: If ``cells`` is too small
        ResolutionDomainError, LatLngDomainError, FailedError: From the
            line estimate or point conversion
    """
    samples = 0
    for origin, destination in geoloop.edges():
        num_hexes_estimate = line_hex_estimate(origin, destination, res)
        for j in range(num_hexes_estimate):
            interpolate = LatLng(
                lat=(origin.lat * (num_hexes_estimate - j) / num_hexes_estimate)
                + (destination.lat * j / num_hexes_estimate),
                lng=(origin.lng * (num_hexes_estimate - j) / num_hexes_estimate)
                + (destination.lng * j / num_hexes_estimate),
            )
            cells.add(lat_lng_to_cell(interpolate, res))
        samples += num_hexes_estimate

    logger.debug(
        f"Traced ring of {len(geoloop)} vertices at res {res}: "
        f"{samples} samples, {len(cells)} cells so far"
    )
    return cells


def max_polygon_to_cells_size(
    polygon: GeoPolygon, res: int, buffer: int = POLYGON_TO_CELLS_BUFFER
) -> int:
    """
    Number of cells to allocate for covering ``polygon`` at ``res``.

    The larger of the bounding-box estimate and the vertex count, plus a
    buffer. An empty polygon needs no cells.
    """
    if len(polygon.geoloop) == 0:
        return 0
    estimate = bbox_hex_estimate(bbox_from_vertices(polygon.geoloop.verts), res)
    return max(estimate, polygon.num_verts) + buffer


def line_trace_size(polygon: GeoPolygon, res: int) -> int:
    """Total number of samples tracing every ring takes; an upper bound on traced cells."""
    return sum(
        line_hex_estimate(origin, destination, res)
        for ring in polygon.rings()
        for origin, destination in ring.edges()
    )


def trace_polygon_edges(
    polygon: GeoPolygon,
    res: int,
    capacity: Optional[int] = None,
    buffer: int = POLYGON_TO_CELLS_BUFFER,
) -> BoundedCellSet:
    """
    Trace the outer ring and every hole of ``polygon`` into one cell set.

    Args:
        polygon: Polygon to trace
        res: Resolution of the cells
        capacity: Size of the cell set. Defaults to the larger of
            max_polygon_to_cells_size and line_trace_size.
        buffer: Extra slots added to the polygon size estimate

    Returns:
        BoundedCellSet holding the boundary cells in discovery order

    Raises:
        CapacityError: If an explicit capacity is too small
    """
    if capacity is None:
        capacity = max(
            max_polygon_to_cells_size(polygon, res, buffer),
            line_trace_size(polygon, res),
            1,
        )
    if len(polygon.geoloop) == 0:
        logger.warning("Tracing an empty polygon; no cells produced")

    cells = BoundedCellSet(capacity)
    for ring in polygon.rings():
        get_edge_hexagons(ring, res, cells)
    return cells
