"""
Linked Geometry
===============

Singly linked multi-polygon output structure: a chain of polygons, each
owning a chain of loops (outer ring first, then holes), each owning a chain
of vertices. Used to present cell-set outlines.

Key Functions:
- count_linked_polygons / count_linked_loops / count_linked_coords
- cells_to_linked_multi_polygon: outline of a cell set
- linked_to_shapely / linked_to_geodataframe: export
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

import geopandas as gpd
from shapely.geometry import MultiPolygon, Polygon, shape

from .geodesy import cells_to_geo_interface
from .latlng import LatLng

logger = logging.getLogger(__name__)


# ============================================================================
# CHAIN NODES
# ============================================================================

@dataclass(eq=False)
class LinkedLatLng:
    vertex: LatLng
    next: Optional['LinkedLatLng'] = None


@dataclass(eq=False)
class LinkedGeoLoop:
    first: Optional[LinkedLatLng] = None
    last: Optional[LinkedLatLng] = None
    next: Optional['LinkedGeoLoop'] = None

    def __iter__(self) -> Iterator[LatLng]:
        coord = self.first
        while coord is not None:
            yield coord.vertex
            coord = coord.next


@dataclass(eq=False)
class LinkedGeoPolygon:
    first: Optional[LinkedGeoLoop] = None
    last: Optional[LinkedGeoLoop] = None
    next: Optional['LinkedGeoPolygon'] = None

    def loops(self) -> Iterator[LinkedGeoLoop]:
        loop = self.first
        while loop is not None:
            yield loop
            loop = loop.next

    def __iter__(self) -> Iterator['LinkedGeoPolygon']:
        """Iterate this polygon and every polygon chained after it."""
        polygon = self
        while polygon is not None:
            yield polygon
            polygon = polygon.next


# ============================================================================
# BUILDERS
# ============================================================================

def add_linked_polygon(polygon: LinkedGeoPolygon) -> LinkedGeoPolygon:
    """Append a new empty polygon after ``polygon`` and return it."""
    if polygon.next is not None:
        raise ValueError("Polygon already has a successor")
    polygon.next = LinkedGeoPolygon()
    return polygon.next


def add_linked_loop(polygon: LinkedGeoPolygon) -> LinkedGeoLoop:
    """Append a new empty loop to ``polygon`` and return it."""
    loop = LinkedGeoLoop()
    if polygon.last is None:
        polygon.first = loop
    else:
        polygon.last.next = loop
    polygon.last = loop
    return loop


def add_linked_coord(loop: LinkedGeoLoop, vertex: LatLng) -> LinkedLatLng:
    """Append a vertex to ``loop`` and return its node."""
    coord = LinkedLatLng(vertex)
    if loop.last is None:
        loop.first = coord
    else:
        loop.last.next = coord
    loop.last = coord
    return coord


# ============================================================================
# COUNTS
# ============================================================================

def count_linked_polygons(polygon: Optional[LinkedGeoPolygon]) -> int:
    """Number of polygons in the chain starting at ``polygon``."""
    count = 0
    while polygon is not None:
        count += 1
        polygon = polygon.next
    return count


def count_linked_loops(polygon: Optional[LinkedGeoPolygon]) -> int:
    """Number of loops in a single polygon."""
    count = 0
    loop = polygon.first if polygon is not None else None
    while loop is not None:
        count += 1
        loop = loop.next
    return count


def count_linked_coords(loop: Optional[LinkedGeoLoop]) -> int:
    """Number of vertices in a single loop."""
    count = 0
    coord = loop.first if loop is not None else None
    while coord is not None:
        count += 1
        coord = coord.next
    return count


# ============================================================================
# CONVERSION
# ============================================================================

def _shapely_polygons(geometry) -> List[Polygon]:
    if geometry.is_empty:
        return []
    if isinstance(geometry, MultiPolygon):
        return list(geometry.geoms)
    return [geometry]


def _append_ring(polygon: LinkedGeoPolygon, coords) -> None:
    loop = add_linked_loop(polygon)
    coords = list(coords)
    if len(coords) > 1 and coords[0] == coords[-1]:
        coords = coords[:-1]
    for lng, lat, *_ in coords:
        add_linked_coord(loop, LatLng.from_degrees(lat, lng))


def shapely_to_linked(geometry) -> LinkedGeoPolygon:
    """Linked structure for a shapely Polygon or MultiPolygon in lng/lat degrees."""
    head = LinkedGeoPolygon()
    current = None
    for poly in _shapely_polygons(geometry):
        current = head if current is None else add_linked_polygon(current)
        _append_ring(current, poly.exterior.coords)
        for interior in poly.interiors:
            _append_ring(current, interior.coords)
    return head


def cells_to_linked_multi_polygon(cells: Iterable[int]) -> LinkedGeoPolygon:
    """
    Outline of a set of cells as a linked multi-polygon.

    Polygons follow GeoJSON MultiPolygon order: outer loop first, then holes.
    Cells are expected to share one resolution and contain no duplicates.
    An empty input gives a single empty polygon.
    """
    cells = list(cells)
    if not cells:
        return LinkedGeoPolygon()

    geometry = shape(cells_to_geo_interface(cells))
    linked = shapely_to_linked(geometry)
    logger.debug(
        f"Outlined {len(cells)} cells as {count_linked_polygons(linked)} polygon(s)"
    )
    return linked


def _loop_ring(loop: LinkedGeoLoop) -> List[tuple]:
    return [(lng, lat) for lat, lng in (vertex.to_degrees() for vertex in loop)]


def _linked_polygon_to_shapely(polygon: LinkedGeoPolygon) -> Optional[Polygon]:
    rings = [_loop_ring(loop) for loop in polygon.loops()]
    if not rings:
        return None
    return Polygon(rings[0], rings[1:])


def linked_to_shapely(polygon: Optional[LinkedGeoPolygon]) -> MultiPolygon:
    """Convert a linked chain to a shapely MultiPolygon (lng/lat degrees)."""
    polys = []
    for poly in (polygon or []):
        converted = _linked_polygon_to_shapely(poly)
        if converted is not None:
            polys.append(converted)
    return MultiPolygon(polys)


def linked_to_geodataframe(polygon: Optional[LinkedGeoPolygon]) -> gpd.GeoDataFrame:
    """One row per non-empty polygon with its loop and vertex counts, in EPSG:4326."""
    data = {'num_loops': [], 'num_coords': []}
    geometries = []
    for poly in (polygon or []):
        converted = _linked_polygon_to_shapely(poly)
        if converted is None:
            continue
        data['num_loops'].append(count_linked_loops(poly))
        data['num_coords'].append(sum(count_linked_coords(loop) for loop in poly.loops()))
        geometries.append(converted)
    return gpd.GeoDataFrame(data, geometry=geometries, crs="EPSG:4326")
