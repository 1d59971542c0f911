"""
Grid Module
===========

Neighbor resolution across digits, base cells and pentagons, and the k-ring
traversals and directed edges built on it.
"""

from .directed_edge import (
    cells_to_directed_edge,
    directed_edge_to_cells,
    get_directed_edge_destination,
    get_directed_edge_origin,
    is_valid_directed_edge,
    origin_to_directed_edges,
)
from .neighbors import (
    are_neighbor_cells,
    direction_for_neighbor,
    neighbor,
    neighbor_rotations,
)
from .traversal import (
    grid_disk,
    grid_disk_distances,
    grid_disk_distances_unsafe,
    grid_disk_unsafe,
    grid_ring_unsafe,
    max_grid_disk_size,
)

__all__ = [
    'cells_to_directed_edge',
    'directed_edge_to_cells',
    'get_directed_edge_destination',
    'get_directed_edge_origin',
    'is_valid_directed_edge',
    'origin_to_directed_edges',
    'are_neighbor_cells',
    'direction_for_neighbor',
    'neighbor',
    'neighbor_rotations',
    'grid_disk',
    'grid_disk_distances',
    'grid_disk_distances_unsafe',
    'grid_disk_unsafe',
    'grid_ring_unsafe',
    'max_grid_disk_size',
]
