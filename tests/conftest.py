"""Shared fixtures: reference cells taken from the h3 library."""

import h3
import pytest


def to_int(cell: str) -> int:
    return h3.str_to_int(cell)


@pytest.fixture
def netherlands_cell():
    """Res 9 hexagon in the Netherlands."""
    return to_int(h3.latlng_to_cell(52.0, 5.0, 9))


@pytest.fixture
def sample_cells():
    """Hexagons at several resolutions and places, away from pentagons."""
    points = [(52.0, 5.0), (37.77, -122.42), (-33.87, 151.21), (0.0, 0.0), (64.1, -21.9)]
    return [
        to_int(h3.latlng_to_cell(lat, lng, res))
        for lat, lng in points
        for res in (1, 4, 7, 10, 15)
    ]
