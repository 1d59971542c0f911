"""
Neighbor Resolution
===================

Finds the cell adjacent to an origin in one of the six axis directions.

The move is propagated from the finest digit towards the base cell using the
aperture-7 digit tables: each level yields a new digit and possibly a move
to carry into the next coarser level. When the carry reaches resolution 0
the base-cell adjacency tables pick the new base cell and the number of
60 degree rotations needed to express the result in its frame. Pentagon base
cells need extra handling because their K subsequence does not exist.
"""

from typing import Optional, Tuple

from ..errors import CellInvalidError, FailedError, NotNeighborsError, PentagonError, ResolutionMismatchError
from ..index.base_cells import (
    BASE_CELL_HOME_FACE,
    INVALID_BASE_CELL,
    base_cell_is_cw_offset,
    base_cell_neighbor,
    base_cell_neighbor_rotations,
    is_base_cell,
    is_base_cell_pentagon,
    is_base_cell_polar_pentagon,
)
from ..index.codec import (
    get_base_cell,
    get_digit,
    get_resolution,
    is_resolution_class_iii,
    leading_non_zero_digit,
    set_base_cell,
    set_digit,
)
from ..index.direction import AXIS_DIRECTIONS, Direction, is_axis_direction, rotate_60ccw
from ..index.rotation import (
    rotate_index_60ccw,
    rotate_index_60cw,
    rotate_pent_60ccw,
)


C, K, J, JK, I, IK, IJ = (  # noqa: E741
    Direction.CENTER, Direction.K, Direction.J, Direction.JK,
    Direction.I, Direction.IK, Direction.IJ,
)

# ============================================================================
# DIGIT TABLES
# ============================================================================

# current digit -> direction -> new digit (Class II)
NEW_DIGIT_II = (
    (C, K, J, JK, I, IK, IJ),
    (K, I, JK, IJ, IK, J, C),
    (J, JK, K, I, IJ, C, IK),
    (JK, IJ, I, IK, C, K, J),
    (I, IK, IJ, C, J, JK, K),
    (IK, J, C, K, JK, IJ, I),
    (IJ, C, IK, J, K, I, JK),
)

# current digit -> direction -> move carried to the coarser level (Class II)
NEW_ADJUSTMENT_II = (
    (C, C, C, C, C, C, C),
    (C, K, C, K, C, IK, C),
    (C, C, J, JK, C, C, J),
    (C, K, JK, JK, C, C, C),
    (C, C, C, C, I, I, IJ),
    (C, IK, C, C, I, IK, C),
    (C, C, J, C, IJ, C, IJ),
)

# current digit -> direction -> new digit (Class III)
NEW_DIGIT_III = (
    (C, K, J, JK, I, IK, IJ),
    (K, J, JK, I, IK, IJ, C),
    (J, JK, I, IK, IJ, C, K),
    (JK, I, IK, IJ, C, K, J),
    (I, IK, IJ, C, K, J, JK),
    (IK, IJ, C, K, J, JK, I),
    (IJ, C, K, J, JK, I, IK),
)

# current digit -> direction -> move carried to the coarser level (Class III)
NEW_ADJUSTMENT_III = (
    (C, C, C, C, C, C, C),
    (C, K, C, JK, C, K, C),
    (C, C, J, J, C, C, IJ),
    (C, JK, J, JK, C, C, C),
    (C, C, C, C, I, IK, I),
    (C, K, C, C, IK, IK, C),
    (C, C, IJ, C, I, C, IJ),
)


# ============================================================================
# NEIGHBOR WITH ROTATIONS
# ============================================================================

def neighbor_rotations(origin: int, direction: int, rotations: int) -> Tuple[int, int]:
    """
    Cell adjacent to ``origin`` in ``direction``.

    Args:
        origin: Origin cell index
        direction: One of the six axis directions
        rotations: Counter-clockwise rotations to apply to ``direction``
            first, accumulated by earlier moves

    Returns:
        (neighbor, rotations) where rotations is the updated count (mod 6).
        neighbor is H3_NULL (0) only when ``origin`` is a pentagon and
        the move falls into its deleted K direction.

    Raises:
        FailedError: direction is CENTER, INVALID or not a direction
        CellInvalidError: the origin has an invalid digit or base cell
        PentagonError: the move is undefined at this pentagon position
    """
    if not is_axis_direction(direction):
        raise FailedError(f"Cannot move in direction {direction!r}")

    rotations = rotations % 6
    direction = Direction(direction)
    for _ in range(rotations):
        direction = rotate_60ccw(direction)

    old_base_cell = get_base_cell(origin)
    if not is_base_cell(old_base_cell):
        raise CellInvalidError(f"Base cell {old_base_cell} out of range in {origin:x}")
    old_leading_digit = leading_non_zero_digit(origin)

    current = origin
    new_rotations = 0

    # Carry the move up through the digits; stop once nothing carries.
    r = get_resolution(current) - 1
    while True:
        if r == -1:
            current = set_base_cell(current, base_cell_neighbor(old_base_cell, direction))
            new_rotations = base_cell_neighbor_rotations(old_base_cell, direction)

            if get_base_cell(current) == INVALID_BASE_CELL:
                # Deleted K vertex at the base cell level; the edge borders
                # the IK neighbor instead.
                current = set_base_cell(current, base_cell_neighbor(old_base_cell, IK))
                new_rotations = base_cell_neighbor_rotations(old_base_cell, IK)
                current = rotate_index_60ccw(current)
                rotations += 1
            break

        old_digit = get_digit(current, r + 1)
        if old_digit == Direction.INVALID:
            raise CellInvalidError(f"Invalid digit at resolution {r + 1} in {origin:x}")

        if is_resolution_class_iii(r + 1):
            current = set_digit(current, r + 1, NEW_DIGIT_II[old_digit][direction])
            next_direction = NEW_ADJUSTMENT_II[old_digit][direction]
        else:
            current = set_digit(current, r + 1, NEW_DIGIT_III[old_digit][direction])
            next_direction = NEW_ADJUSTMENT_III[old_digit][direction]

        if next_direction == Direction.CENTER:
            break
        direction = next_direction
        r -= 1

    new_base_cell = get_base_cell(current)
    if is_base_cell_pentagon(new_base_cell):
        already_adjusted_k_subsequence = False

        # Rotate out of the missing K subsequence.
        if leading_non_zero_digit(current) == K:
            if old_base_cell != new_base_cell:
                # Entered the deleted subsequence from another base cell.
                if base_cell_is_cw_offset(new_base_cell, BASE_CELL_HOME_FACE[old_base_cell]):
                    current = rotate_index_60cw(current)
                else:
                    current = rotate_index_60ccw(current)
                already_adjusted_k_subsequence = True
            else:
                # Entered it from within the same pentagon base cell.
                if old_leading_digit == C:
                    raise PentagonError(
                        f"K direction is deleted at pentagon center {origin:x}"
                    )
                elif old_leading_digit == JK:
                    current = rotate_index_60ccw(current)
                    rotations += 1
                elif old_leading_digit == IK:
                    current = rotate_index_60cw(current)
                    rotations += 5
                else:
                    raise FailedError(
                        f"Unexpected leading digit {old_leading_digit!r} for {origin:x}"
                    )

        for _ in range(new_rotations):
            current = rotate_pent_60ccw(current)

        # Edges into pentagons do not all share the same orientation.
        if old_base_cell != new_base_cell:
            if is_base_cell_polar_pentagon(new_base_cell):
                if (
                    old_base_cell != 118
                    and old_base_cell != 8
                    and leading_non_zero_digit(current) != JK
                ):
                    rotations += 1
            elif leading_non_zero_digit(current) == IK and not already_adjusted_k_subsequence:
                rotations += 1
    else:
        for _ in range(new_rotations):
            current = rotate_index_60ccw(current)

    rotations = (rotations + new_rotations) % 6
    return current, rotations


def neighbor(origin: int, direction: int) -> Optional[int]:
    """
    Cell adjacent to ``origin`` in ``direction`` without rotation bookkeeping.

    Returns None when the direction is the deleted K axis of a pentagon.
    """
    try:
        cell, _ = neighbor_rotations(origin, direction, 0)
    except PentagonError:
        return None
    return cell or None


# ============================================================================
# ADJACENCY
# ============================================================================

def direction_for_neighbor(origin: int, destination: int) -> Direction:
    """
    Direction from ``origin`` to an adjacent ``destination``.

    Raises:
        ResolutionMismatchError: If the cells have different resolutions
        NotNeighborsError: If the cells are not adjacent
    """
    if get_resolution(origin) != get_resolution(destination):
        raise ResolutionMismatchError(
            f"{origin:x} and {destination:x} have different resolutions"
        )
    if origin != destination:
        for direction in AXIS_DIRECTIONS:
            if neighbor(origin, direction) == destination:
                return direction
    raise NotNeighborsError(f"{origin:x} and {destination:x} are not neighbors")


def are_neighbor_cells(origin: int, destination: int) -> bool:
    """True if the two cells share an edge."""
    try:
        direction_for_neighbor(origin, destination)
    except NotNeighborsError:
        return False
    return True
