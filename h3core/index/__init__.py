"""
Cell Index Module
=================

Bit layout, directions, rotations, base-cell tables and hierarchy queries for
64-bit hexagonal cell indices.

Key Functions:
- make_index / zero_index_digits / leading_non_zero_digit: index codec
- rotate_index_60ccw / rotate_pent_60ccw: whole-index rotation
- cell_to_parent / cell_to_center_child / is_valid_cell: hierarchy
"""

from .constants import H3_NULL, MAX_RES, NUM_BASE_CELLS, NUM_PENTAGONS
from .direction import (
    AXIS_DIRECTIONS,
    Direction,
    is_axis_direction,
    opposite,
    rotate_60ccw,
    rotate_60cw,
)
from .codec import (
    # Field access
    get_base_cell,
    get_digit,
    get_mode,
    get_resolution,
    set_base_cell,
    set_digit,
    set_mode,
    set_resolution,
    digits,

    # Construction
    make_index,
    zero_index_digits,
    leading_non_zero_digit,
    is_resolution_class_iii,
    validate_resolution,

    # Strings
    cell_to_string,
    string_to_cell,

    CellFields,
)
from .rotation import (
    rotate_index,
    rotate_index_60ccw,
    rotate_index_60cw,
    rotate_pent_60ccw,
    rotate_pent_60cw,
)
from .base_cells import (
    INVALID_BASE_CELL,
    PENTAGON_BASE_CELLS,
    base_cell_direction,
    is_base_cell_pentagon,
    is_base_cell_polar_pentagon,
)
from .hierarchy import (
    cell_to_center_child,
    cell_to_children,
    cell_to_children_size,
    cell_to_parent,
    get_base_cell_number,
    get_num_cells,
    get_pentagons,
    get_res0_cells,
    is_pentagon,
    is_res_class_iii,
    is_valid_cell,
    pentagon_count,
    res0_cell_count,
)

__all__ = [
    'H3_NULL',
    'MAX_RES',
    'NUM_BASE_CELLS',
    'NUM_PENTAGONS',
    'AXIS_DIRECTIONS',
    'Direction',
    'is_axis_direction',
    'opposite',
    'rotate_60ccw',
    'rotate_60cw',
    'get_base_cell',
    'get_digit',
    'get_mode',
    'get_resolution',
    'set_base_cell',
    'set_digit',
    'set_mode',
    'set_resolution',
    'digits',
    'make_index',
    'zero_index_digits',
    'leading_non_zero_digit',
    'is_resolution_class_iii',
    'validate_resolution',
    'cell_to_string',
    'string_to_cell',
    'CellFields',
    'rotate_index',
    'rotate_index_60ccw',
    'rotate_index_60cw',
    'rotate_pent_60ccw',
    'rotate_pent_60cw',
    'INVALID_BASE_CELL',
    'PENTAGON_BASE_CELLS',
    'base_cell_direction',
    'is_base_cell_pentagon',
    'is_base_cell_polar_pentagon',
    'cell_to_center_child',
    'cell_to_children',
    'cell_to_children_size',
    'cell_to_parent',
    'get_base_cell_number',
    'get_num_cells',
    'get_pentagons',
    'get_res0_cells',
    'is_pentagon',
    'is_res_class_iii',
    'is_valid_cell',
    'pentagon_count',
    'res0_cell_count',
]
