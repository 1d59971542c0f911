"""
Grid Traversal
==============

k-ring neighborhoods built on top of neighbor resolution.

The "unsafe" walks spiral outwards from the origin one ring at a time and
give up with PentagonError as soon as a pentagon (or its distortion) is met.
The safe variants fall back to a breadth-first expansion in that case.

K-ring Formula: 1 + 3k(k+1) cells within distance k (including the origin).
"""

import logging
from collections import deque
from typing import Dict, List, Tuple

from ..errors import DomainError, PentagonError
from ..index.direction import AXIS_DIRECTIONS, Direction
from ..index.hierarchy import is_pentagon
from .neighbors import neighbor_rotations

logger = logging.getLogger(__name__)

# Ring walk order; the walk enters the next ring by moving I.
DIRECTIONS = (
    Direction.J, Direction.JK, Direction.K,
    Direction.IK, Direction.I, Direction.IJ,
)
NEXT_RING_DIRECTION = Direction.I


def max_grid_disk_size(k: int) -> int:
    """Upper bound on the number of cells within distance ``k``."""
    if k < 0:
        raise DomainError(f"k must be non-negative, got {k}")
    return 3 * k * (k + 1) + 1


def _validate_k(k: int) -> None:
    if not isinstance(k, int) or k < 0:
        raise DomainError(f"k must be a non-negative integer, got {k!r}")


# ============================================================================
# UNSAFE SPIRAL WALKS
# ============================================================================

def grid_disk_distances_unsafe(origin: int, k: int) -> List[Tuple[int, int]]:
    """
    Cells within ``k`` of ``origin`` as (cell, distance), nearest first.

    Raises:
        DomainError: If k is negative
        PentagonError: If a pentagon or pentagonal distortion is met
    """
    _validate_k(k)

    out = [(origin, 0)]
    if k == 0:
        return out

    if is_pentagon(origin):
        raise PentagonError(f"Origin {origin:x} is a pentagon")

    ring = 1
    direction = 0
    i = 0
    rotations = 0

    while ring <= k:
        if direction == 0 and i == 0:
            # Step out to the next ring.
            origin, rotations = neighbor_rotations(origin, NEXT_RING_DIRECTION, rotations)
            if is_pentagon(origin):
                raise PentagonError(f"Ring {ring} reaches pentagon {origin:x}")

        origin, rotations = neighbor_rotations(origin, DIRECTIONS[direction], rotations)
        out.append((origin, ring))

        i += 1
        if i == ring:
            i = 0
            direction += 1
            if direction == 6:
                direction = 0
                ring += 1

        if is_pentagon(origin):
            raise PentagonError(f"Ring {ring} reaches pentagon {origin:x}")

    return out


def grid_disk_unsafe(origin: int, k: int) -> List[int]:
    """Cells within ``k`` of ``origin``, nearest first. See grid_disk_distances_unsafe."""
    return [cell for cell, _ in grid_disk_distances_unsafe(origin, k)]


def grid_ring_unsafe(origin: int, k: int) -> List[int]:
    """
    Hollow ring of cells at exactly distance ``k`` from ``origin``.

    Raises:
        DomainError: If k is negative
        PentagonError: If a pentagon or pentagonal distortion is met
    """
    _validate_k(k)
    if k == 0:
        return [origin]

    rotations = 0
    if is_pentagon(origin):
        raise PentagonError(f"Origin {origin:x} is a pentagon")

    for _ in range(k):
        origin, rotations = neighbor_rotations(origin, NEXT_RING_DIRECTION, rotations)
        if is_pentagon(origin):
            raise PentagonError(f"Ring {k} reaches pentagon {origin:x}")

    last = origin
    out = [origin]

    for direction in range(6):
        for position in range(k):
            origin, rotations = neighbor_rotations(origin, DIRECTIONS[direction], rotations)

            # The last step returns to the starting cell.
            if position != k - 1 or direction != 5:
                out.append(origin)
                if is_pentagon(origin):
                    raise PentagonError(f"Ring {k} reaches pentagon {origin:x}")

    if last != origin:
        # Pentagonal distortion broke the ring.
        raise PentagonError(f"Ring {k} around origin does not close")

    return out


# ============================================================================
# SAFE TRAVERSAL
# ============================================================================

def _grid_disk_distances_bfs(origin: int, k: int) -> Dict[int, int]:
    distances = {origin: 0}
    frontier = deque([origin])

    while frontier:
        cell = frontier.popleft()
        distance = distances[cell]
        if distance == k:
            continue
        for direction in AXIS_DIRECTIONS:
            try:
                next_cell, _ = neighbor_rotations(cell, direction, 0)
            except PentagonError:
                # Moving off a pentagon into its deleted direction.
                continue
            if next_cell == 0 or next_cell in distances:
                continue
            distances[next_cell] = distance + 1
            frontier.append(next_cell)

    return distances


def grid_disk_distances(origin: int, k: int) -> List[Tuple[int, int]]:
    """
    Cells within ``k`` of ``origin`` as (cell, distance), pentagon safe.

    The output is ordered by distance. Near pentagons the order within a
    ring follows the breadth-first expansion.
    """
    _validate_k(k)
    try:
        return grid_disk_distances_unsafe(origin, k)
    except PentagonError:
        logger.debug(f"Pentagon near {origin:x}, falling back to breadth-first k-ring (k={k})")

    distances = _grid_disk_distances_bfs(origin, k)
    return sorted(distances.items(), key=lambda item: item[1])


def grid_disk(origin: int, k: int) -> List[int]:
    """Cells within ``k`` of ``origin``, pentagon safe."""
    return [cell for cell, _ in grid_disk_distances(origin, k)]
