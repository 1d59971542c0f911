"""
Unit tests for k-ring traversal.

Validates against actual h3 library operations.
"""

import h3
import pytest

from h3core.errors import DomainError, PentagonError
from h3core.grid import (
    grid_disk,
    grid_disk_distances,
    grid_disk_distances_unsafe,
    grid_disk_unsafe,
    grid_ring_unsafe,
    max_grid_disk_size,
)
from h3core.index import get_pentagons


def h3_disk(h, k):
    return {h3.str_to_int(c) for c in h3.grid_disk(h3.int_to_str(h), k)}


class TestMaxGridDiskSize:
    """Test the k-ring size formula 3k(k+1)+1."""

    def test_formula(self):
        """Test the first ring sizes."""
        assert [max_grid_disk_size(k) for k in range(5)] == [1, 7, 19, 37, 61]

    def test_negative_k(self):
        """Test negative k raises DomainError."""
        with pytest.raises(DomainError):
            max_grid_disk_size(-1)


class TestUnsafe:
    """Test the spiral walk."""

    @pytest.mark.parametrize("k", [0, 1, 2, 3])
    def test_disk_against_h3(self, netherlands_cell, k):
        """Validate disks against h3 grid_disk."""
        cells = grid_disk_unsafe(netherlands_cell, k)
        assert len(cells) == max_grid_disk_size(k)
        assert set(cells) == h3_disk(netherlands_cell, k)

    def test_distances_against_h3(self, netherlands_cell):
        """Validate distances against h3 grid_distance."""
        origin = h3.int_to_str(netherlands_cell)
        for cell, distance in grid_disk_distances_unsafe(netherlands_cell, 3):
            assert h3.grid_distance(origin, h3.int_to_str(cell)) == distance

    def test_origin_first(self, netherlands_cell):
        """Test the origin comes first at distance 0."""
        assert grid_disk_distances_unsafe(netherlands_cell, 2)[0] == (netherlands_cell, 0)

    def test_pentagon_origin(self):
        """Test a pentagon origin raises PentagonError."""
        with pytest.raises(PentagonError):
            grid_disk_unsafe(get_pentagons(4)[0], 1)

    def test_pentagon_k0_is_origin(self):
        """Test k=0 around a pentagon is just the pentagon."""
        pentagon = get_pentagons(4)[0]
        assert grid_disk_unsafe(pentagon, 0) == [pentagon]

    def test_reaches_pentagon(self):
        """Test walking onto a pentagon raises PentagonError."""
        pentagon = get_pentagons(5)[2]
        beside = h3.str_to_int(h3.grid_ring(h3.int_to_str(pentagon), 1)[0])
        with pytest.raises(PentagonError):
            grid_disk_unsafe(beside, 2)

    def test_negative_k(self, netherlands_cell):
        """Test negative k raises DomainError."""
        with pytest.raises(DomainError):
            grid_disk_unsafe(netherlands_cell, -1)


class TestRing:
    """Test hollow rings."""

    @pytest.mark.parametrize("k", [1, 2, 4])
    def test_against_h3(self, netherlands_cell, k):
        """Validate rings against h3 grid_ring."""
        ring = grid_ring_unsafe(netherlands_cell, k)
        expected = {h3.str_to_int(c) for c in h3.grid_ring(h3.int_to_str(netherlands_cell), k)}
        assert len(ring) == 6 * k
        assert set(ring) == expected

    def test_k0(self, netherlands_cell):
        """Test k=0 is the origin."""
        assert grid_ring_unsafe(netherlands_cell, 0) == [netherlands_cell]

    def test_pentagon_origin(self):
        """Test a pentagon origin raises PentagonError."""
        with pytest.raises(PentagonError):
            grid_ring_unsafe(get_pentagons(6)[7], 2)


class TestSafe:
    """Test the pentagon-safe disk."""

    def test_pentagon_disk_against_h3(self):
        """Validate pentagon disks against h3 grid_disk."""
        for pentagon in get_pentagons(3):
            for k in (1, 2):
                assert set(grid_disk(pentagon, k)) == h3_disk(pentagon, k)

    def test_pentagon_disk_size(self):
        """Test a pentagon has five neighbors."""
        pentagon = get_pentagons(6)[0]
        assert len(grid_disk(pentagon, 1)) == 6

    def test_sorted_by_distance(self):
        """Test the breadth-first fallback orders by distance."""
        distances = [d for _, d in grid_disk_distances(get_pentagons(5)[9], 3)]
        assert distances == sorted(distances)
        assert distances[0] == 0

    def test_hexagon_uses_spiral_order(self, netherlands_cell):
        """Test hexagon disks keep the spiral order."""
        assert grid_disk(netherlands_cell, 2) == grid_disk_unsafe(netherlands_cell, 2)

    def test_sample_cells(self, sample_cells):
        """Validate sample disks against h3 grid_disk."""
        for h in sample_cells:
            assert set(grid_disk(h, 2)) == h3_disk(h, 2)

    def test_res0_disk(self):
        """Validate resolution 0 pentagon disks against h3."""
        for pentagon in get_pentagons(0):
            assert set(grid_disk(pentagon, 2)) == h3_disk(pentagon, 2)
