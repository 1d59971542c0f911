"""
Cell Index Codec
================

Packs and unpacks the fields of a 64-bit cell index.

Indices are plain Python ints and every operation here is value-returning:
"setting" a field gives back a new index and leaves the argument untouched.

Key Functions:
- make_index: build an index from resolution, base cell and a fill digit
- zero_index_digits: clear an inclusive range of digits
- leading_non_zero_digit: first non-CENTER digit, coarsest first
- CellFields: dataclass view over all fields of an index
"""

import numbers
from dataclasses import dataclass
from typing import Tuple

from ..errors import FailedError, ResolutionDomainError
from .constants import (
    BC_MASK,
    BC_OFFSET,
    CELL_MODE,
    DIGIT_MASK,
    H3_INIT,
    HIGH_BIT_MASK,
    HIGH_BIT_OFFSET,
    MAX_RES,
    MODE_MASK,
    MODE_OFFSET,
    PER_DIGIT_OFFSET,
    RES_MASK,
    RES_OFFSET,
    RESERVED_MASK,
    RESERVED_OFFSET,
    UINT64_MASK,
)
from .direction import Direction


# ============================================================================
# FIELD ACCESSORS
# ============================================================================

def get_high_bit(h: int) -> int:
    return (h & HIGH_BIT_MASK) >> HIGH_BIT_OFFSET


def set_high_bit(h: int, value: int) -> int:
    return (h & ~HIGH_BIT_MASK) | ((value << HIGH_BIT_OFFSET) & HIGH_BIT_MASK)


def get_mode(h: int) -> int:
    return (h & MODE_MASK) >> MODE_OFFSET


def set_mode(h: int, mode: int) -> int:
    return (h & ~MODE_MASK) | ((mode << MODE_OFFSET) & MODE_MASK)


def get_reserved_bits(h: int) -> int:
    return (h & RESERVED_MASK) >> RESERVED_OFFSET


def set_reserved_bits(h: int, value: int) -> int:
    return (h & ~RESERVED_MASK) | ((value << RESERVED_OFFSET) & RESERVED_MASK)


def get_resolution(h: int) -> int:
    return (h & RES_MASK) >> RES_OFFSET


def set_resolution(h: int, res: int) -> int:
    return (h & ~RES_MASK) | ((res << RES_OFFSET) & RES_MASK)


def get_base_cell(h: int) -> int:
    return (h & BC_MASK) >> BC_OFFSET


def set_base_cell(h: int, base_cell: int) -> int:
    return (h & ~BC_MASK) | ((base_cell << BC_OFFSET) & BC_MASK)


def _digit_offset(res: int) -> int:
    return (MAX_RES - res) * PER_DIGIT_OFFSET


def get_digit(h: int, res: int) -> int:
    """Digit stored for resolution level ``res`` (1-15)."""
    return (h >> _digit_offset(res)) & DIGIT_MASK


def set_digit(h: int, res: int, digit: int) -> int:
    """Return ``h`` with the digit at resolution level ``res`` replaced."""
    offset = _digit_offset(res)
    return (h & ~(DIGIT_MASK << offset)) | ((int(digit) & DIGIT_MASK) << offset)


def digits(h: int) -> Tuple[int, ...]:
    """Digits for levels 1..resolution, coarsest first."""
    return tuple(get_digit(h, r) for r in range(1, get_resolution(h) + 1))


# ============================================================================
# CONSTRUCTION
# ============================================================================

def make_index(res: int, base_cell: int, init_digit: int) -> int:
    """
    Build a cell index.

    Digits for levels 1..res are set to ``init_digit``; digits past the
    resolution keep the unused value 7.

    Args:
        res: Resolution (0-15)
        base_cell: Base cell number (0-121)
        init_digit: Digit (0-7) written to every level up to ``res``

    Returns:
        The packed index
    """
    h = set_mode(H3_INIT, CELL_MODE)
    h = set_resolution(h, res)
    h = set_base_cell(h, base_cell)
    for r in range(1, res + 1):
        h = set_digit(h, r, init_digit)
    return h


def zero_index_digits(h: int, start: int, end: int) -> int:
    """Zero the digits for levels ``start`` to ``end`` inclusive. No-op if start > end."""
    if start > end:
        return h

    m = UINT64_MASK
    m = (m << (PER_DIGIT_OFFSET * (end - start + 1))) & UINT64_MASK
    m = ~m & UINT64_MASK
    m = (m << (PER_DIGIT_OFFSET * (MAX_RES - end))) & UINT64_MASK
    m = ~m & UINT64_MASK

    return h & m


def leading_non_zero_digit(h: int) -> Direction:
    """Coarsest non-CENTER digit of ``h``, or CENTER if every digit is zero."""
    for r in range(1, get_resolution(h) + 1):
        digit = get_digit(h, r)
        if digit:
            return Direction(digit)
    return Direction.CENTER


def is_resolution_class_iii(res: int) -> bool:
    """Odd resolutions are Class III grids, even ones Class II."""
    return res % 2 == 1


def validate_resolution(res: int) -> int:
    """
    Raise ResolutionDomainError unless 0 <= res <= 15.

    Any integral type is accepted (numpy integers included) and returned as
    a plain int.
    """
    if not isinstance(res, numbers.Integral) or res < 0 or res > MAX_RES:
        raise ResolutionDomainError(f"Resolution {res} outside 0..{MAX_RES}")
    return int(res)


# ============================================================================
# STRING CONVERSION
# ============================================================================

def cell_to_string(h: int) -> str:
    """Lower-case hexadecimal form, as used by other implementations."""
    return format(h, "x")


def string_to_cell(text: str) -> int:
    """
    Parse the hexadecimal string form of an index.

    Raises:
        FailedError: If ``text`` is not a hexadecimal 64-bit value
    """
    try:
        value = int(text, 16)
    except (TypeError, ValueError) as e:
        raise FailedError(f"Cannot parse index from {text!r}") from e
    if value < 0 or value > UINT64_MASK:
        raise FailedError(f"Index {text!r} does not fit in 64 bits")
    return value


# ============================================================================
# DATACLASS VIEW
# ============================================================================

@dataclass(frozen=True)
class CellFields:
    """All fields of an index, unpacked."""
    resolution: int
    base_cell: int
    digits: Tuple[int, ...]
    mode: int = CELL_MODE
    reserved: int = 0
    high_bit: int = 0

    @classmethod
    def unpack(cls, h: int) -> 'CellFields':
        return cls(
            resolution=get_resolution(h),
            base_cell=get_base_cell(h),
            digits=digits(h),
            mode=get_mode(h),
            reserved=get_reserved_bits(h),
            high_bit=get_high_bit(h),
        )

    def pack(self) -> int:
        if len(self.digits) != self.resolution:
            raise ValueError(
                f"Expected {self.resolution} digits, got {len(self.digits)}"
            )
        h = make_index(self.resolution, self.base_cell, Direction.CENTER)
        for r, digit in enumerate(self.digits, start=1):
            h = set_digit(h, r, digit)
        h = set_mode(h, self.mode)
        h = set_reserved_bits(h, self.reserved)
        return set_high_bit(h, self.high_bit)
