"""
Directions
==========

The seven unit directions of the aperture-7 grid plus the INVALID sentinel.
Each value is the 3-bit digit stored per resolution level of a cell index.

Rotation of a single digit is table driven: the six axis directions form a
cycle, CENTER and INVALID map to themselves.
"""

from enum import IntEnum
from typing import Dict, Tuple


class Direction(IntEnum):
    """Digit / direction values (ijk axes)."""
    CENTER = 0
    K = 1
    J = 2
    JK = 3
    I = 4  # noqa: E741
    IK = 5
    IJ = 6
    INVALID = 7


AXIS_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.K, Direction.J, Direction.JK,
    Direction.I, Direction.IK, Direction.IJ,
)

# K -> IK -> I -> IJ -> J -> JK -> K
_CCW: Dict[Direction, Direction] = {
    Direction.CENTER: Direction.CENTER,
    Direction.K: Direction.IK,
    Direction.IK: Direction.I,
    Direction.I: Direction.IJ,
    Direction.IJ: Direction.J,
    Direction.J: Direction.JK,
    Direction.JK: Direction.K,
    Direction.INVALID: Direction.INVALID,
}

_CW: Dict[Direction, Direction] = {after: before for before, after in _CCW.items()}


def rotate_60ccw(digit: int) -> Direction:
    """Rotate a single direction 60 degrees counter-clockwise."""
    return _CCW[Direction(digit)]


def rotate_60cw(digit: int) -> Direction:
    """Rotate a single direction 60 degrees clockwise."""
    return _CW[Direction(digit)]


def opposite(digit: int) -> Direction:
    """Direction pointing the other way along the same axis."""
    digit = Direction(digit)
    if digit in (Direction.CENTER, Direction.INVALID):
        return digit
    return Direction(7 - digit)


def is_axis_direction(digit: int) -> bool:
    """True for the six axis directions (not CENTER, not INVALID)."""
    return Direction.CENTER < digit < Direction.INVALID
