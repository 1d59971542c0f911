"""
Cell Hierarchy and Inspection
=============================

Resolution-level queries over cell indices: validity, pentagon detection,
parent / center-child navigation and the global cell counts.

H3 Hierarchical Property: each parent has exactly 7 children (6 for
pentagons) at the next finer resolution, so a resolution holds
2 + 120 * 7^res cells in total.
"""

from typing import List

from ..errors import ResolutionDomainError
from .base_cells import PENTAGON_BASE_CELLS, is_base_cell_pentagon
from .codec import (
    get_base_cell,
    get_digit,
    get_high_bit,
    get_mode,
    get_reserved_bits,
    get_resolution,
    is_resolution_class_iii,
    leading_non_zero_digit,
    make_index,
    set_digit,
    set_resolution,
    validate_resolution,
    zero_index_digits,
)
from .constants import CELL_MODE, MAX_RES, NUM_BASE_CELLS, NUM_PENTAGONS
from .direction import Direction


# ============================================================================
# INSPECTION
# ============================================================================

def get_base_cell_number(h: int) -> int:
    return get_base_cell(h)


def is_res_class_iii(h: int) -> bool:
    return is_resolution_class_iii(get_resolution(h))


def is_pentagon(h: int) -> bool:
    """A cell is a pentagon when its base cell is one and every digit is CENTER."""
    return (
        is_base_cell_pentagon(get_base_cell(h))
        and leading_non_zero_digit(h) == Direction.CENTER
    )


def is_valid_cell(h: int) -> bool:
    """
    Check every structural rule of a cell index.

    Rules: high bit clear, cell mode, reserved bits clear, base cell in range,
    digits 0-6 up to the resolution, unused digits 7 past it, and no K
    digit leading a pentagon (that subsequence is deleted).
    """
    if not isinstance(h, int) or h < 0 or h >> 64:
        return False
    if get_high_bit(h) != 0 or get_mode(h) != CELL_MODE or get_reserved_bits(h) != 0:
        return False

    base_cell = get_base_cell(h)
    if base_cell >= NUM_BASE_CELLS:
        return False

    res = get_resolution(h)
    found_first_non_zero = False
    for r in range(1, res + 1):
        digit = get_digit(h, r)
        if digit == Direction.INVALID:
            return False
        if not found_first_non_zero and digit != Direction.CENTER:
            found_first_non_zero = True
            if is_base_cell_pentagon(base_cell) and digit == Direction.K:
                return False

    for r in range(res + 1, MAX_RES + 1):
        if get_digit(h, r) != Direction.INVALID:
            return False

    return True


# ============================================================================
# PARENT / CHILDREN
# ============================================================================

def cell_to_parent(h: int, parent_res: int) -> int:
    """
    Parent of ``h`` at a coarser (or equal) resolution.

    Raises:
        ResolutionDomainError: If parent_res is outside 0..resolution(h)
    """
    child_res = get_resolution(h)
    if not isinstance(parent_res, int) or parent_res < 0 or parent_res > child_res:
        raise ResolutionDomainError(
            f"Parent resolution {parent_res} outside 0..{child_res}"
        )
    if parent_res == child_res:
        return h

    parent = set_resolution(h, parent_res)
    for r in range(parent_res + 1, child_res + 1):
        parent = set_digit(parent, r, Direction.INVALID)
    return parent


def _validate_child_res(parent_res: int, child_res: int) -> None:
    if not isinstance(child_res, int) or child_res < parent_res or child_res > MAX_RES:
        raise ResolutionDomainError(
            f"Child resolution {child_res} outside {parent_res}..{MAX_RES}"
        )


def cell_to_center_child(h: int, child_res: int) -> int:
    """
    Center child of ``h`` at a finer (or equal) resolution.

    Raises:
        ResolutionDomainError: If child_res is coarser than ``h`` or beyond 15
    """
    parent_res = get_resolution(h)
    _validate_child_res(parent_res, child_res)
    if child_res == parent_res:
        return h

    child = set_resolution(h, child_res)
    return zero_index_digits(child, parent_res + 1, child_res)


def cell_to_children_size(h: int, child_res: int) -> int:
    """Number of children at ``child_res``: 7^n, or 1 + 5 * (7^n - 1) / 6 for pentagons."""
    parent_res = get_resolution(h)
    _validate_child_res(parent_res, child_res)
    n = child_res - parent_res
    if is_pentagon(h):
        return 1 + 5 * (7 ** n - 1) // 6
    return 7 ** n


def cell_to_children(h: int, child_res: int) -> List[int]:
    """
    All children of ``h`` at ``child_res``, in digit order.

    Pentagon children skip the deleted K subsequence.
    """
    parent_res = get_resolution(h)
    _validate_child_res(parent_res, child_res)

    children = [h]
    for r in range(parent_res + 1, child_res + 1):
        next_level = []
        for cell in children:
            pentagon = is_pentagon(cell)
            cell = set_resolution(cell, r)
            for digit in range(Direction.CENTER, Direction.INVALID):
                if pentagon and digit == Direction.K:
                    continue
                next_level.append(set_digit(cell, r, digit))
        children = next_level
    return children


# ============================================================================
# GLOBAL COUNTS
# ============================================================================

def get_num_cells(res: int) -> int:
    """Total number of cells at ``res``: 2 + 120 * 7^res."""
    res = validate_resolution(res)
    return 2 + 120 * 7 ** res


def res0_cell_count() -> int:
    return NUM_BASE_CELLS


def pentagon_count() -> int:
    return NUM_PENTAGONS


def get_res0_cells() -> List[int]:
    return [make_index(0, base_cell, Direction.CENTER) for base_cell in range(NUM_BASE_CELLS)]


def get_pentagons(res: int) -> List[int]:
    """The twelve pentagons at ``res``, ordered by base cell."""
    res = validate_resolution(res)
    return [make_index(res, base_cell, Direction.CENTER) for base_cell in PENTAGON_BASE_CELLS]
