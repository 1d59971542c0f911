"""
Directed Edges
==============

A directed edge is the index of its origin cell with the mode switched to
DIRECTED_EDGE_MODE and the direction towards the destination stored in the
reserved bits. The destination is recovered with the same neighbor
resolution used for grid traversal, so edges cross base cells and pentagons
exactly like ``neighbor_rotations`` does.

Key Functions:
- cells_to_directed_edge: edge between two neighboring cells
- origin_to_directed_edges: all edges leaving a cell (5 for pentagons)
- directed_edge_to_cells: (origin, destination) of an edge
"""

from typing import List, Tuple

from ..errors import CellInvalidError, DirectedEdgeInvalidError, NotNeighborsError, ResolutionMismatchError
from ..index.codec import get_mode, get_reserved_bits, set_mode, set_reserved_bits
from ..index.constants import CELL_MODE, DIRECTED_EDGE_MODE
from ..index.direction import AXIS_DIRECTIONS, Direction
from ..index.hierarchy import is_pentagon, is_valid_cell
from .neighbors import direction_for_neighbor, neighbor_rotations


def _edge(origin: int, direction: int) -> int:
    return set_reserved_bits(set_mode(origin, DIRECTED_EDGE_MODE), direction)


def _origin(edge: int) -> int:
    return set_reserved_bits(set_mode(edge, CELL_MODE), 0)


# ============================================================================
# VALIDATION
# ============================================================================

def is_valid_directed_edge(edge: int) -> bool:
    """
    True if ``edge`` is a well-formed directed edge.

    The mode must be DIRECTED_EDGE_MODE, the stored direction one of the six
    axes, the origin a valid cell, and a pentagon origin may not point along
    its deleted K axis.
    """
    if not isinstance(edge, int) or edge < 0 or edge >> 64:
        return False
    if get_mode(edge) != DIRECTED_EDGE_MODE:
        return False

    direction = get_reserved_bits(edge)
    if direction <= Direction.CENTER or direction >= Direction.INVALID:
        return False

    origin = _origin(edge)
    if not is_valid_cell(origin):
        return False
    return not (direction == Direction.K and is_pentagon(origin))


def _require_edge(edge: int) -> None:
    if not is_valid_directed_edge(edge):
        raise DirectedEdgeInvalidError(f"Not a valid directed edge: {edge!r}")


# ============================================================================
# CONSTRUCTION
# ============================================================================

def cells_to_directed_edge(origin: int, destination: int) -> int:
    """
    Directed edge from ``origin`` to the neighboring ``destination``.

    Raises:
        CellInvalidError: If either index is not a valid cell
        NotNeighborsError: If the cells are not adjacent (different
            resolutions included)
    """
    for h in (origin, destination):
        if not is_valid_cell(h):
            raise CellInvalidError(f"Not a valid cell: {h!r}")
    try:
        direction = direction_for_neighbor(origin, destination)
    except ResolutionMismatchError as e:
        raise NotNeighborsError(str(e)) from e
    return _edge(origin, direction)


def origin_to_directed_edges(origin: int) -> List[int]:
    """
    Every directed edge leaving ``origin``, in axis order K, J, JK, I, IK, IJ.

    Pentagons have no K edge and yield five edges.

    Raises:
        CellInvalidError: If origin is not a valid cell
    """
    if not is_valid_cell(origin):
        raise CellInvalidError(f"Not a valid cell: {origin!r}")
    pentagon = is_pentagon(origin)
    return [
        _edge(origin, direction)
        for direction in AXIS_DIRECTIONS
        if not (pentagon and direction == Direction.K)
    ]


# ============================================================================
# INSPECTION
# ============================================================================

def get_directed_edge_origin(edge: int) -> int:
    """
    Origin cell of ``edge``.

    Raises:
        DirectedEdgeInvalidError: If edge is not a valid directed edge
    """
    _require_edge(edge)
    return _origin(edge)


def get_directed_edge_destination(edge: int) -> int:
    """
    Destination cell of ``edge``.

    Raises:
        DirectedEdgeInvalidError: If edge is not a valid directed edge
    """
    _require_edge(edge)
    destination, _ = neighbor_rotations(_origin(edge), get_reserved_bits(edge), 0)
    return destination


def directed_edge_to_cells(edge: int) -> Tuple[int, int]:
    """(origin, destination) of ``edge``."""
    return get_directed_edge_origin(edge), get_directed_edge_destination(edge)
