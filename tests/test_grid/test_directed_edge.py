"""
Unit tests for directed edges.

Edge indices, their cells and their boundaries are validated against the h3
library, including edges leaving pentagons and their children.
"""

import h3
import pytest

from h3core.errors import CellInvalidError, DirectedEdgeInvalidError, NotNeighborsError, OptionInvalidError
from h3core.geo import directed_edge_to_boundary, edge_length
from h3core.grid import (
    cells_to_directed_edge,
    directed_edge_to_cells,
    get_directed_edge_destination,
    get_directed_edge_origin,
    grid_disk,
    is_valid_directed_edge,
    origin_to_directed_edges,
)
from h3core.index import Direction, cell_to_children, get_mode, get_pentagons, set_mode
from h3core.index.codec import get_reserved_bits, set_reserved_bits
from h3core.index.constants import DIRECTED_EDGE_MODE


def h3_edges(h):
    return [h3.str_to_int(e) for e in h3.origin_to_directed_edges(h3.int_to_str(h))]


def pentagon_cells():
    cells = list(get_pentagons(1))
    for pentagon in get_pentagons(1):
        cells.extend(cell_to_children(pentagon, 2))
    return cells


class TestOriginToEdges:
    """Edges leaving a cell match h3."""

    def test_against_actual_h3(self, sample_cells):
        """Same edge indices, same order, for hexagons."""
        for h in sample_cells:
            assert origin_to_directed_edges(h) == h3_edges(h)

    def test_pentagon_edges(self):
        """Pentagons and their children match h3, pentagons with five edges."""
        for h in pentagon_cells():
            assert origin_to_directed_edges(h) == h3_edges(h), f"{h:x}"
        for pentagon in get_pentagons(6):
            assert len(origin_to_directed_edges(pentagon)) == 5

    def test_edge_layout(self, netherlands_cell):
        """Mode 2 with the direction in the reserved bits."""
        edges = origin_to_directed_edges(netherlands_cell)
        assert [get_reserved_bits(e) for e in edges] == [1, 2, 3, 4, 5, 6]
        assert all(get_mode(e) == DIRECTED_EDGE_MODE for e in edges)

    def test_invalid_origin(self):
        """Non-cells are rejected."""
        with pytest.raises(CellInvalidError):
            origin_to_directed_edges(0)


class TestEdgeCells:
    """Origin and destination recovery."""

    def test_against_actual_h3(self, sample_cells):
        """Origin and destination agree with h3."""
        for h in sample_cells:
            for edge in origin_to_directed_edges(h):
                expected = tuple(h3.str_to_int(c) for c in h3.directed_edge_to_cells(h3.int_to_str(edge)))
                assert directed_edge_to_cells(edge) == expected

    def test_pentagon_destinations(self):
        """Destinations around pentagons agree with h3."""
        for h in pentagon_cells():
            for edge in origin_to_directed_edges(h):
                expected = h3.str_to_int(h3.get_directed_edge_destination(h3.int_to_str(edge)))
                assert get_directed_edge_destination(edge) == expected

    def test_origin(self, netherlands_cell):
        """Every edge leads back to its origin."""
        for edge in origin_to_directed_edges(netherlands_cell):
            assert get_directed_edge_origin(edge) == netherlands_cell

    def test_invalid_edge(self, netherlands_cell):
        """Cells are not edges."""
        with pytest.raises(DirectedEdgeInvalidError):
            get_directed_edge_origin(netherlands_cell)
        with pytest.raises(DirectedEdgeInvalidError):
            directed_edge_to_cells(netherlands_cell)


class TestCellsToEdge:
    """Building an edge from two cells."""

    def test_against_actual_h3(self, netherlands_cell):
        """Every ring-1 neighbor gives h3's edge index."""
        for other in grid_disk(netherlands_cell, 1):
            if other == netherlands_cell:
                continue
            expected = h3.str_to_int(h3.cells_to_directed_edge(h3.int_to_str(netherlands_cell), h3.int_to_str(other)))
            assert cells_to_directed_edge(netherlands_cell, other) == expected

    def test_round_trip_through_cells(self, sample_cells):
        """Edge -> cells -> edge returns the same edge."""
        for h in sample_cells:
            for edge in origin_to_directed_edges(h):
                assert cells_to_directed_edge(*directed_edge_to_cells(edge)) == edge

    def test_not_neighbors(self, netherlands_cell):
        """Distance-2 cells and the cell itself have no edge."""
        far = [c for c in grid_disk(netherlands_cell, 2) if c not in grid_disk(netherlands_cell, 1)]
        with pytest.raises(NotNeighborsError):
            cells_to_directed_edge(netherlands_cell, far[0])
        with pytest.raises(NotNeighborsError):
            cells_to_directed_edge(netherlands_cell, netherlands_cell)

    def test_resolution_mismatch_is_not_neighbors(self, netherlands_cell):
        """Cells of different resolutions are never neighbors."""
        parent = h3.str_to_int(h3.cell_to_parent(h3.int_to_str(netherlands_cell), 8))
        with pytest.raises(NotNeighborsError):
            cells_to_directed_edge(netherlands_cell, parent)

    def test_invalid_cell(self, netherlands_cell):
        """Invalid cells are rejected before adjacency is checked."""
        with pytest.raises(CellInvalidError):
            cells_to_directed_edge(netherlands_cell, 0)


class TestValidity:
    """Structural validation of edge indices."""

    def test_valid_edges(self, sample_cells):
        """Edges produced here are valid for both implementations."""
        for h in sample_cells:
            for edge in origin_to_directed_edges(h):
                assert is_valid_directed_edge(edge)
                assert h3.is_valid_directed_edge(h3.int_to_str(edge))

    def test_cell_is_not_edge(self, netherlands_cell):
        """Mode 1 indices are cells."""
        assert not is_valid_directed_edge(netherlands_cell)

    @pytest.mark.parametrize("direction", [Direction.CENTER, Direction.INVALID])
    def test_non_axis_direction(self, netherlands_cell, direction):
        """The reserved bits must hold one of the six axes."""
        edge = set_reserved_bits(set_mode(netherlands_cell, DIRECTED_EDGE_MODE), direction)
        assert not is_valid_directed_edge(edge)

    def test_pentagon_k_edge(self):
        """Pentagons have no edge along their deleted K axis."""
        pentagon = get_pentagons(3)[0]
        edge = set_reserved_bits(set_mode(pentagon, DIRECTED_EDGE_MODE), Direction.K)
        assert not is_valid_directed_edge(edge)
        assert not h3.is_valid_directed_edge(h3.int_to_str(edge))

    def test_non_integers(self):
        """Only 64-bit integers can be edges."""
        assert not is_valid_directed_edge(-1)
        assert not is_valid_directed_edge(1 << 64)
        assert not is_valid_directed_edge('115283473f')


class TestEdgeBoundary:
    """Edge boundaries and lengths from the h3 library."""

    def test_against_actual_h3(self, netherlands_cell):
        """Boundary vertices match h3 after converting back to degrees."""
        for edge in origin_to_directed_edges(netherlands_cell):
            expected = h3.directed_edge_to_boundary(h3.int_to_str(edge))
            actual = [v.to_degrees() for v in directed_edge_to_boundary(edge)]
            assert len(actual) == len(expected)
            for (lat, lng), (exp_lat, exp_lng) in zip(actual, expected):
                assert lat == pytest.approx(exp_lat)
                assert lng == pytest.approx(exp_lng)

    def test_hexagon_edge_has_two_vertices(self, netherlands_cell):
        """Edges between undistorted hexagons are single segments."""
        for edge in origin_to_directed_edges(netherlands_cell):
            assert len(directed_edge_to_boundary(edge)) == 2

    def test_length_against_actual_h3(self, netherlands_cell):
        """Edge length in km and m matches h3."""
        for edge in origin_to_directed_edges(netherlands_cell):
            text = h3.int_to_str(edge)
            assert edge_length(edge) == pytest.approx(h3.edge_length(text, unit='km'), rel=1e-6)
            assert edge_length(edge, 'm') == pytest.approx(h3.edge_length(text, unit='m'), rel=1e-6)

    def test_unknown_unit(self, netherlands_cell):
        """Unknown units are rejected."""
        with pytest.raises(OptionInvalidError):
            edge_length(origin_to_directed_edges(netherlands_cell)[0], 'miles')

    def test_invalid_edge(self, netherlands_cell):
        """Cells have no edge boundary."""
        with pytest.raises(DirectedEdgeInvalidError):
            directed_edge_to_boundary(netherlands_cell)
