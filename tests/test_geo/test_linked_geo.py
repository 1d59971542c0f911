"""
Unit tests for the linked multi-polygon structure and its export.
"""

import geopandas as gpd
import h3
import pytest
from shapely.geometry import MultiPolygon, Polygon

from h3core.geo import (
    LatLng,
    LinkedGeoLoop,
    LinkedGeoPolygon,
    add_linked_coord,
    add_linked_loop,
    add_linked_polygon,
    cells_to_linked_multi_polygon,
    count_linked_coords,
    count_linked_loops,
    count_linked_polygons,
    linked_to_geodataframe,
    linked_to_shapely,
    shapely_to_linked,
)
from h3core.grid import grid_disk, grid_ring_unsafe


def square(polygon: LinkedGeoPolygon, size: float = 0.01) -> LinkedGeoLoop:
    loop = add_linked_loop(polygon)
    for lat, lng in ((0.0, 0.0), (0.0, size), (size, size), (size, 0.0)):
        add_linked_coord(loop, LatLng(lat, lng))
    return loop


class TestCounts:
    """Test building and counting linked structures."""

    def test_empty(self):
        """Test counts of an empty polygon and loop."""
        polygon = LinkedGeoPolygon()
        assert count_linked_polygons(polygon) == 1
        assert count_linked_loops(polygon) == 0
        assert count_linked_coords(LinkedGeoLoop()) == 0

    def test_none_is_empty(self):
        """Test None counts as an empty chain."""
        assert count_linked_polygons(None) == 0
        assert count_linked_loops(None) == 0
        assert count_linked_coords(None) == 0

    def test_built_structure(self):
        """Test counts of a two-polygon chain with a hole."""
        head = LinkedGeoPolygon()
        outer = square(head)
        square(head, 0.005)
        second = add_linked_polygon(head)
        square(second)

        assert count_linked_polygons(head) == 2
        assert count_linked_polygons(second) == 1
        assert count_linked_loops(head) == 2
        assert count_linked_loops(second) == 1
        assert count_linked_coords(outer) == 4
        assert [p for p in head] == [head, second]

    def test_loop_iterates_vertices(self):
        """Test loop iteration and last vertex."""
        loop = square(LinkedGeoPolygon())
        assert list(loop)[1] == LatLng(0.0, 0.01)
        assert loop.last.vertex == LatLng(0.01, 0.0)

    def test_polygon_has_single_successor(self):
        """Test a polygon accepts only one next polygon."""
        head = LinkedGeoPolygon()
        add_linked_polygon(head)
        with pytest.raises(ValueError):
            add_linked_polygon(head)


class TestCellsToLinked:
    """Test outlines of cell sets."""

    def test_empty_input(self):
        """Test no cells give one empty polygon."""
        linked = cells_to_linked_multi_polygon([])
        assert count_linked_polygons(linked) == 1
        assert count_linked_loops(linked) == 0

    def test_single_cell(self, netherlands_cell):
        """Test one hexagon gives one six-vertex loop."""
        linked = cells_to_linked_multi_polygon([netherlands_cell])
        assert count_linked_polygons(linked) == 1
        assert count_linked_loops(linked) == 1
        assert count_linked_coords(linked.first) == 6

    def test_disk_outline(self, netherlands_cell):
        """Test a k=1 disk gives one 18-vertex loop."""
        linked = cells_to_linked_multi_polygon(grid_disk(netherlands_cell, 1))
        assert count_linked_polygons(linked) == 1
        assert count_linked_loops(linked) == 1
        assert count_linked_coords(linked.first) == 18

    def test_ring_has_hole(self, netherlands_cell):
        """Test a k=1 ring gives an outer loop and a hole."""
        linked = cells_to_linked_multi_polygon(grid_ring_unsafe(netherlands_cell, 1))
        assert count_linked_polygons(linked) == 1
        assert count_linked_loops(linked) == 2
        assert count_linked_coords(linked.first) == 18
        assert count_linked_coords(linked.first.next) == 6

    def test_disjoint_cells(self, netherlands_cell):
        """Test distant cells give separate polygons."""
        far = h3.str_to_int(h3.latlng_to_cell(-33.87, 151.21, 9))
        linked = cells_to_linked_multi_polygon([netherlands_cell, far])
        assert count_linked_polygons(linked) == 2
        for polygon in linked:
            assert count_linked_loops(polygon) == 1


class TestExport:
    """Test shapely and GeoDataFrame export."""

    def test_shapely_round_trip(self):
        """Test shapely to linked to shapely keeps the area."""
        outer = [(5.0, 52.0), (5.2, 52.0), (5.2, 52.2), (5.0, 52.2)]
        hole = [(5.05, 52.05), (5.1, 52.05), (5.1, 52.1), (5.05, 52.1)]
        original = Polygon(outer, [hole])

        linked = shapely_to_linked(original)
        assert count_linked_loops(linked) == 2
        assert count_linked_coords(linked.first) == 4

        exported = linked_to_shapely(linked)
        assert isinstance(exported, MultiPolygon)
        assert exported.area == pytest.approx(original.area)

    def test_cell_outline_matches_h3(self, netherlands_cell):
        """Validate a cell outline against h3.cell_to_boundary."""
        exported = linked_to_shapely(cells_to_linked_multi_polygon([netherlands_cell]))
        boundary = h3.cell_to_boundary(h3.int_to_str(netherlands_cell))
        expected = Polygon([(lng, lat) for lat, lng in boundary])
        assert exported.area == pytest.approx(expected.area, rel=1e-6)

    def test_empty_export(self):
        """Test empty structures export as empty geometry."""
        assert linked_to_shapely(LinkedGeoPolygon()).is_empty
        assert linked_to_shapely(None).is_empty

    def test_geodataframe(self, netherlands_cell):
        """Test one GeoDataFrame row per polygon in EPSG:4326."""
        far = h3.str_to_int(h3.latlng_to_cell(-33.87, 151.21, 9))
        gdf = linked_to_geodataframe(cells_to_linked_multi_polygon([netherlands_cell, far]))
        assert isinstance(gdf, gpd.GeoDataFrame)
        assert len(gdf) == 2
        assert gdf.crs.to_epsg() == 4326
        assert list(gdf['num_loops']) == [1, 1]
        assert list(gdf['num_coords']) == [6, 6]
