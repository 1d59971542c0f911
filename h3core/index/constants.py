"""
Cell Index Constants
====================

Bit layout of the 64-bit cell index and the numeric constants shared by the
index, grid and geo subpackages.

Layout (most significant bit first):

    bit 63        high bit (always 0 for cells)
    bits 59-62    mode (1 = cell)
    bits 56-58    reserved (0 for cells)
    bits 52-55    resolution (0-15)
    bits 45-51    base cell (0-121)
    bits 0-44     fifteen 3-bit digits, resolution 1 in the highest slot
"""

import math

# ============================================================================
# RESOLUTION / GRID
# ============================================================================

MAX_RES = 15
NUM_BASE_CELLS = 122
NUM_PENTAGONS = 12

# Extra slots added to polygon size estimates; small polygons close to an
# icosahedron edge at odd resolutions need them.
POLYGON_TO_CELLS_BUFFER = 12

# ============================================================================
# BIT LAYOUT
# ============================================================================

NUM_BITS = 64
MODE_OFFSET = 59
MODE_MASK = 15 << MODE_OFFSET

CELL_MODE = 1
DIRECTED_EDGE_MODE = 2

HIGH_BIT_OFFSET = 63
HIGH_BIT_MASK = 1 << HIGH_BIT_OFFSET

RESERVED_OFFSET = 56
RESERVED_MASK = 7 << RESERVED_OFFSET

RES_OFFSET = 52
RES_MASK = 15 << RES_OFFSET

BC_OFFSET = 45
BC_MASK = 127 << BC_OFFSET

PER_DIGIT_OFFSET = 3
DIGIT_MASK = 7

UINT64_MASK = (1 << NUM_BITS) - 1

# Resolution 0, base cell 0, every digit unused (7).
H3_INIT = 35184372088831

# The "no cell" value.
H3_NULL = 0

# ============================================================================
# GEODESY
# ============================================================================

EARTH_RADIUS_KM = 6371.007180918475

M_PI_180 = math.pi / 180.0
M_180_PI = 180.0 / math.pi

EPSILON_DEG = 0.000000001
EPSILON_RAD = EPSILON_DEG * M_PI_180
