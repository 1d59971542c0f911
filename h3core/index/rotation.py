"""
Index Rotation
==============

Whole-index 60 degree rotations. Every digit from resolution 1 to the cell's
resolution is rotated; digits past the resolution are left alone.

The pentagon variants additionally skip the deleted K-axis subsequence: at
the first non-zero digit (coarsest first), if the partially rotated index
now leads with K, the whole index is rotated once more in the same
direction. That correction is made at most once per call.
"""

from .codec import get_digit, get_resolution, leading_non_zero_digit, set_digit
from .direction import Direction, rotate_60ccw, rotate_60cw


def rotate_index_60ccw(h: int) -> int:
    """Rotate every digit of ``h`` 60 degrees counter-clockwise."""
    for r in range(1, get_resolution(h) + 1):
        h = set_digit(h, r, rotate_60ccw(get_digit(h, r)))
    return h


def rotate_index_60cw(h: int) -> int:
    """Rotate every digit of ``h`` 60 degrees clockwise."""
    for r in range(1, get_resolution(h) + 1):
        h = set_digit(h, r, rotate_60cw(get_digit(h, r)))
    return h


def rotate_pent_60ccw(h: int) -> int:
    """Rotate ``h`` counter-clockwise about a pentagonal center."""
    found_first_non_zero = False
    for r in range(1, get_resolution(h) + 1):
        h = set_digit(h, r, rotate_60ccw(get_digit(h, r)))

        if not found_first_non_zero and get_digit(h, r) != Direction.CENTER:
            found_first_non_zero = True
            if leading_non_zero_digit(h) == Direction.K:
                h = rotate_index_60ccw(h)
    return h


def rotate_pent_60cw(h: int) -> int:
    """Rotate ``h`` clockwise about a pentagonal center."""
    found_first_non_zero = False
    for r in range(1, get_resolution(h) + 1):
        h = set_digit(h, r, rotate_60cw(get_digit(h, r)))

        if not found_first_non_zero and get_digit(h, r) != Direction.CENTER:
            found_first_non_zero = True
            if leading_non_zero_digit(h) == Direction.K:
                h = rotate_index_60cw(h)
    return h


def rotate_index(h: int, rotations: int, pentagon: bool = False) -> int:
    """
    Apply ``rotations`` counter-clockwise rotations (negative for clockwise).

    Args:
        h: Index to rotate
        rotations: Number of 60 degree steps, sign selects the direction
        pentagon: Use the pentagon-aware primitives

    Returns:
        Rotated index
    """
    if rotations >= 0:
        step = rotate_pent_60ccw if pentagon else rotate_index_60ccw
    else:
        step = rotate_pent_60cw if pentagon else rotate_index_60cw
    for _ in range(abs(rotations)):
        h = step(h)
    return h
