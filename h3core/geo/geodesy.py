"""
Geodesy Adapter
===============

Point-to-cell, cell-to-point, cell-boundary and edge-boundary conversions,
delegated to the ``h3`` library (h3-py). h3core indices are integers and coordinates are
radians; h3-py's default API uses hex strings and degrees, so this module
converts at the boundary and maps h3-py exceptions onto h3core's.
"""

from typing import List

import h3

from ..errors import (
    CellInvalidError,
    DirectedEdgeInvalidError,
    FailedError,
    LatLngDomainError,
    OptionInvalidError,
    ResolutionDomainError,
)
from ..grid.directed_edge import is_valid_directed_edge
from ..index.codec import validate_resolution
from ..index.hierarchy import is_valid_cell
from .latlng import DISTANCE_FUNCTIONS, LatLng, degs_to_rads, rads_to_degs


def _translate(e: Exception, context: str) -> Exception:
    if isinstance(e, h3.H3ResDomainError):
        return ResolutionDomainError(f"{context}: {e}")
    if isinstance(e, h3.H3LatLngDomainError):
        return LatLngDomainError(f"{context}: {e}")
    if isinstance(e, h3.H3CellInvalidError):
        return CellInvalidError(f"{context}: {e}")
    if isinstance(e, h3.H3DirEdgeInvalidError):
        return DirectedEdgeInvalidError(f"{context}: {e}")
    return FailedError(f"{context}: {e}")


def _require_cell(h: int) -> str:
    if not is_valid_cell(h):
        raise CellInvalidError(f"Not a valid cell: {h!r}")
    return h3.int_to_str(h)


def lat_lng_to_cell(point: LatLng, res: int) -> int:
    """
    Cell containing ``point`` at resolution ``res``.

    Raises:
        ResolutionDomainError: If res is outside 0..15
        LatLngDomainError: If either coordinate is not finite
    """
    res = validate_resolution(res)
    if not point.is_finite():
        raise LatLngDomainError(f"Coordinates must be finite, got {point}")

    lat, lng = rads_to_degs(point.lat), rads_to_degs(point.lng)
    try:
        cell = h3.latlng_to_cell(lat, lng, res)
    except h3.H3BaseException as e:
        raise _translate(e, f"latlng_to_cell({lat}, {lng}, {res})") from e
    return h3.str_to_int(cell)


def cell_to_lat_lng(h: int) -> LatLng:
    """Center of cell ``h``."""
    cell = _require_cell(h)
    try:
        lat, lng = h3.cell_to_latlng(cell)
    except h3.H3BaseException as e:
        raise _translate(e, f"cell_to_latlng({cell})") from e
    return LatLng(degs_to_rads(lat), degs_to_rads(lng))


def cell_to_boundary(h: int) -> List[LatLng]:
    """Boundary vertices of cell ``h``, counter-clockwise, not closed."""
    cell = _require_cell(h)
    try:
        boundary = h3.cell_to_boundary(cell)
    except h3.H3BaseException as e:
        raise _translate(e, f"cell_to_boundary({cell})") from e
    return [LatLng(degs_to_rads(lat), degs_to_rads(lng)) for lat, lng in boundary]


def cells_to_geo_interface(cells: List[int]) -> dict:
    """GeoJSON-like outline (lng/lat degrees) of a set of same-resolution cells."""
    for h in cells:
        _require_cell(h)
    try:
        shape = h3.cells_to_h3shape([h3.int_to_str(h) for h in cells])
    except h3.H3BaseException as e:
        raise _translate(e, "cells_to_h3shape") from e
    return shape.__geo_interface__


def directed_edge_to_boundary(edge: int) -> List[LatLng]:
    """
    Vertices of the boundary segment shared by an edge's two cells.

    Usually two vertices; edges touching icosahedron face distortion can
    carry a third.

    Raises:
        DirectedEdgeInvalidError: If edge is not a valid directed edge
    """
    if not is_valid_directed_edge(edge):
        raise DirectedEdgeInvalidError(f"Not a valid directed edge: {edge!r}")
    text = h3.int_to_str(edge)
    try:
        boundary = h3.directed_edge_to_boundary(text)
    except h3.H3BaseException as e:
        raise _translate(e, f"directed_edge_to_boundary({text})") from e
    return [LatLng(degs_to_rads(lat), degs_to_rads(lng)) for lat, lng in boundary]


def edge_length(edge: int, unit: str = 'km') -> float:
    """
    Length of a directed edge: the great-circle lengths of its boundary
    segments, summed.

    Raises:
        DirectedEdgeInvalidError: If edge is not a valid directed edge
        OptionInvalidError: If the unit is not 'km', 'm' or 'rads'
    """
    distance = DISTANCE_FUNCTIONS.get(unit)
    if distance is None:
        raise OptionInvalidError(f"Unknown distance unit {unit!r}")
    boundary = directed_edge_to_boundary(edge)
    return sum(distance(a, b) for a, b in zip(boundary, boundary[1:]))
