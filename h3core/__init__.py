"""
h3core
======

Core of a hierarchical hexagonal geospatial index: 64-bit cell indices,
neighbor resolution across the icosahedron (including its twelve pentagons)
and polygon edge rasterization into boundary cell sets.

Subpackages:
- index: bit layout, directions, rotations, base cells, hierarchy
- grid: neighbors, k-ring traversal and directed edges
- geo: coordinates, estimates, polygon tracing, linked geometry
"""

from .errors import ErrorCode, H3CoreError, call_with_code
from .index import (
    Direction,
    cell_to_center_child,
    cell_to_parent,
    cell_to_string,
    get_num_cells,
    get_pentagons,
    get_resolution,
    is_pentagon,
    is_valid_cell,
    string_to_cell,
)
from .grid import grid_disk, neighbor_rotations
from .geo import (
    LatLng,
    cell_to_lat_lng,
    lat_lng_to_cell,
    line_hex_estimate,
    trace_polygon_edges,
)

__version__ = "0.1.0"

__all__ = [
    'ErrorCode',
    'H3CoreError',
    'call_with_code',
    'Direction',
    'cell_to_center_child',
    'cell_to_parent',
    'cell_to_string',
    'get_num_cells',
    'get_pentagons',
    'get_resolution',
    'is_pentagon',
    'is_valid_cell',
    'string_to_cell',
    'grid_disk',
    'neighbor_rotations',
    'LatLng',
    'cell_to_lat_lng',
    'lat_lng_to_cell',
    'line_hex_estimate',
    'trace_polygon_edges',
]
