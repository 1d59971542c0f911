"""
Geo Module
==========

Coordinates, distances, cell-count estimates, polygon edge tracing and the
linked multi-polygon output structure.
"""

from .latlng import (
    LatLng,
    degs_to_rads,
    rads_to_degs,
    geo_almost_equal,
    geo_almost_equal_threshold,
    great_circle_distance_km,
    great_circle_distance_m,
    great_circle_distance_rads,
)
from .geodesy import (
    cell_to_boundary,
    cell_to_lat_lng,
    directed_edge_to_boundary,
    edge_length,
    lat_lng_to_cell,
)
from .bbox import (
    BBox,
    bbox_from_vertices,
    bbox_hex_estimate,
    hex_radius,
    hex_radius_km,
    line_hex_estimate,
)
from .polygon import (
    BoundedCellSet,
    GeoLoop,
    GeoPolygon,
    get_edge_hexagons,
    line_trace_size,
    max_polygon_to_cells_size,
    trace_polygon_edges,
)
from .linked_geo import (
    LinkedGeoLoop,
    LinkedGeoPolygon,
    LinkedLatLng,
    add_linked_coord,
    add_linked_loop,
    add_linked_polygon,
    cells_to_linked_multi_polygon,
    count_linked_coords,
    count_linked_loops,
    count_linked_polygons,
    linked_to_geodataframe,
    linked_to_shapely,
    shapely_to_linked,
)

__all__ = [
    'LatLng',
    'degs_to_rads',
    'rads_to_degs',
    'geo_almost_equal',
    'geo_almost_equal_threshold',
    'great_circle_distance_km',
    'great_circle_distance_m',
    'great_circle_distance_rads',
    'cell_to_boundary',
    'cell_to_lat_lng',
    'directed_edge_to_boundary',
    'edge_length',
    'lat_lng_to_cell',
    'BBox',
    'bbox_from_vertices',
    'bbox_hex_estimate',
    'hex_radius',
    'hex_radius_km',
    'line_hex_estimate',
    'BoundedCellSet',
    'GeoLoop',
    'GeoPolygon',
    'get_edge_hexagons',
    'line_trace_size',
    'max_polygon_to_cells_size',
    'trace_polygon_edges',
    'LinkedGeoLoop',
    'LinkedGeoPolygon',
    'LinkedLatLng',
    'add_linked_coord',
    'add_linked_loop',
    'add_linked_polygon',
    'cells_to_linked_multi_polygon',
    'count_linked_coords',
    'count_linked_loops',
    'count_linked_polygons',
    'linked_to_geodataframe',
    'linked_to_shapely',
    'shapely_to_linked',
]
