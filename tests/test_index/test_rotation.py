"""
Unit tests for digit and index rotation.
"""

import pytest

from h3core.index import (
    AXIS_DIRECTIONS,
    Direction,
    get_digit,
    is_valid_cell,
    leading_non_zero_digit,
    make_index,
    opposite,
    rotate_60ccw,
    rotate_60cw,
    rotate_index,
    rotate_index_60ccw,
    rotate_index_60cw,
    rotate_pent_60ccw,
    rotate_pent_60cw,
    set_digit,
)


class TestDigitRotation:
    """Test single digit rotation."""

    def test_ccw_cycle(self):
        """Test the ccw cycle K, IK, I, IJ, J, JK."""
        order = [Direction.K, Direction.IK, Direction.I, Direction.IJ, Direction.J, Direction.JK]
        for current, following in zip(order, order[1:] + order[:1]):
            assert rotate_60ccw(current) == following

    def test_cw_inverts_ccw(self):
        """Test cw undoes ccw."""
        for digit in Direction:
            assert rotate_60cw(rotate_60ccw(digit)) == digit

    def test_fixed_points(self):
        """Test CENTER and INVALID do not rotate."""
        for digit in (Direction.CENTER, Direction.INVALID):
            assert rotate_60ccw(digit) == digit
            assert rotate_60cw(digit) == digit

    def test_six_rotations_identity(self):
        """Test six rotations are the identity."""
        for digit in AXIS_DIRECTIONS:
            rotated = digit
            for _ in range(6):
                rotated = rotate_60ccw(rotated)
            assert rotated == digit

    def test_three_rotations_is_opposite(self):
        """Test three rotations give the opposite direction."""
        for digit in AXIS_DIRECTIONS:
            assert rotate_60ccw(rotate_60ccw(rotate_60ccw(digit))) == opposite(digit)


class TestIndexRotation:
    """Test whole-index rotation."""

    def test_six_rotations_identity(self, sample_cells):
        """Test six rotations of an index are the identity."""
        for h in sample_cells:
            for step in (rotate_index_60ccw, rotate_index_60cw):
                rotated = h
                rotations = 0
                for _ in range(6):
                    rotated = step(rotated)
                    rotations = (rotations + 1) % 6
                assert rotated == h
                assert rotations == 0

    def test_unused_digits_untouched(self):
        """Test unused digits keep their 7s."""
        h = make_index(3, 10, Direction.K)
        rotated = rotate_index_60ccw(h)
        assert [get_digit(rotated, r) for r in range(1, 4)] == [Direction.IK] * 3
        assert all(get_digit(rotated, r) == Direction.INVALID for r in range(4, 16))

    def test_rotate_index_sign(self, netherlands_cell):
        """Test positive counts are ccw and negative counts cw."""
        assert rotate_index(netherlands_cell, 2) == rotate_index_60ccw(rotate_index_60ccw(netherlands_cell))
        assert rotate_index(netherlands_cell, -1) == rotate_index_60cw(netherlands_cell)
        assert rotate_index(netherlands_cell, 0) == netherlands_cell


class TestPentagonRotation:
    """Test pentagon-aware rotation."""

    @pytest.mark.parametrize("step", [rotate_pent_60ccw, rotate_pent_60cw])
    def test_never_leads_with_k(self, step):
        """Test rotated pentagon descendants stay valid."""
        # Every pentagon child at res 2 stays out of the deleted K subsequence.
        for first in (Direction.J, Direction.JK, Direction.I, Direction.IK, Direction.IJ):
            for second in range(7):
                h = set_digit(set_digit(make_index(2, 4, Direction.CENTER), 1, first), 2, second)
                rotated = step(h)
                assert leading_non_zero_digit(rotated) != Direction.K
                assert is_valid_cell(rotated)

    def test_skips_k_counter_clockwise(self):
        """Test ccw rotation skips the deleted K digit."""
        # JK rotates onto K, which is deleted, so it moves on to IK.
        h = set_digit(make_index(1, 14, Direction.CENTER), 1, Direction.JK)
        assert get_digit(rotate_pent_60ccw(h), 1) == Direction.IK

    def test_skips_k_clockwise(self):
        """Test cw rotation skips the deleted K digit."""
        h = set_digit(make_index(1, 14, Direction.CENTER), 1, Direction.IK)
        assert get_digit(rotate_pent_60cw(h), 1) == Direction.JK

    def test_center_unchanged(self):
        """Test the pentagon itself is unchanged."""
        h = make_index(5, 38, Direction.CENTER)
        assert rotate_pent_60ccw(h) == h
        assert rotate_pent_60cw(h) == h
