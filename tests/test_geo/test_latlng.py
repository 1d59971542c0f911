"""
Unit tests for coordinates, equality and great-circle distances.
"""

import math

import h3
import pytest

from h3core.geo import (
    LatLng,
    degs_to_rads,
    geo_almost_equal,
    geo_almost_equal_threshold,
    great_circle_distance_km,
    great_circle_distance_m,
    great_circle_distance_rads,
    rads_to_degs,
)
from h3core.index.constants import EARTH_RADIUS_KM, EPSILON_RAD


class TestConversion:
    """Test degree and radian conversion."""

    def test_degrees_to_radians(self):
        """Test the scalar conversions."""
        assert degs_to_rads(180.0) == pytest.approx(math.pi)
        assert rads_to_degs(math.pi / 2) == pytest.approx(90.0)

    def test_latlng_degrees(self):
        """Test LatLng.from_degrees and to_degrees."""
        point = LatLng.from_degrees(52.0, 5.0)
        assert point.lat == pytest.approx(math.radians(52.0))
        lat, lng = point.to_degrees()
        assert lat == pytest.approx(52.0)
        assert lng == pytest.approx(5.0)

    def test_is_finite(self):
        """Test NaN and infinity are not finite."""
        assert LatLng(0.1, 0.2).is_finite()
        assert not LatLng(math.nan, 0.0).is_finite()
        assert not LatLng(0.0, math.inf).is_finite()


class TestAlmostEqual:
    """Test threshold equality of coordinates."""

    def test_identical(self):
        """Test a point equals itself."""
        p = LatLng(0.5, -1.2)
        assert geo_almost_equal(p, p)

    def test_within_epsilon(self):
        """Test points within epsilon are equal."""
        p = LatLng(0.5, -1.2)
        q = LatLng(0.5 + EPSILON_RAD / 2, -1.2 - EPSILON_RAD / 2)
        assert geo_almost_equal(p, q)

    def test_each_component_checked(self):
        """Test latitude and longitude are checked separately."""
        p = LatLng(0.5, -1.2)
        assert not geo_almost_equal_threshold(p, LatLng(0.5, -1.1), 0.01)
        assert not geo_almost_equal_threshold(p, LatLng(0.6, -1.2), 0.01)

    def test_threshold_is_strict(self):
        """Test a difference equal to the threshold is not equal."""
        assert not geo_almost_equal_threshold(LatLng(0.0, 0.0), LatLng(0.25, 0.0), 0.25)

    def test_reflexive_at_zero_threshold(self):
        """Test equality is reflexive at threshold zero."""
        p = LatLng(0.3, 2.1)
        assert geo_almost_equal_threshold(p, p, 0.0)
        assert not geo_almost_equal_threshold(p, LatLng(0.3, 2.1 + 1e-15), 0.0)

    def test_symmetric(self):
        """Test equality is symmetric."""
        points = [LatLng(0.1, 0.2), LatLng(0.1005, 0.2), LatLng(0.1, 0.2011), LatLng(-0.1, 0.2)]
        for a in points:
            for b in points:
                for t in (0.0, 1e-3, 0.5):
                    assert geo_almost_equal_threshold(a, b, t) == geo_almost_equal_threshold(b, a, t)


class TestDistance:
    """Test great-circle distances."""

    def test_zero(self):
        """Test the distance of a point to itself."""
        p = LatLng.from_degrees(52.0, 5.0)
        assert great_circle_distance_rads(p, p) == 0.0

    def test_quarter_meridian(self):
        """Test equator to pole is pi/2."""
        d = great_circle_distance_rads(LatLng(0.0, 0.0), LatLng(math.pi / 2, 0.0))
        assert d == pytest.approx(math.pi / 2)

    def test_antipodal(self):
        """Test antipodal points are pi apart."""
        d = great_circle_distance_rads(LatLng(0.0, 0.0), LatLng(0.0, math.pi))
        assert d == pytest.approx(math.pi)

    def test_units(self):
        """Test km and m scale the radian distance."""
        a = LatLng.from_degrees(52.37, 4.90)
        b = LatLng.from_degrees(51.92, 4.48)
        km = great_circle_distance_km(a, b)
        assert km == pytest.approx(great_circle_distance_rads(a, b) * EARTH_RADIUS_KM)
        assert great_circle_distance_m(a, b) == pytest.approx(km * 1000)

    def test_against_h3(self):
        """Validate distances against h3.great_circle_distance."""
        pairs = [((52.37, 4.90), (51.92, 4.48)), ((37.77, -122.42), (-33.87, 151.21))]
        for (lat1, lng1), (lat2, lng2) in pairs:
            expected = h3.great_circle_distance((lat1, lng1), (lat2, lng2), unit='km')
            actual = great_circle_distance_km(LatLng.from_degrees(lat1, lng1), LatLng.from_degrees(lat2, lng2))
            assert actual == pytest.approx(expected, rel=1e-9)

    def test_unnormalized_longitude(self):
        """Test longitudes past 180 degrees."""
        a = LatLng.from_degrees(10.0, 179.0)
        b = LatLng.from_degrees(10.0, -179.0)
        c = LatLng.from_degrees(10.0, 181.0)
        assert great_circle_distance_rads(a, b) == pytest.approx(great_circle_distance_rads(a, c))
