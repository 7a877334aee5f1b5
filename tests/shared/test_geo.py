"""
Tests for shared geographic functions.

Tests haversine distance, route distance, bounds and planar segment distance.
"""

import pytest

from route_pipeline.features.gpx import GeoPoint
from route_pipeline.shared.geo import (
    haversine,
    calculate_total_distance,
    calculate_bounds,
    segment_distance,
    EARTH_RADIUS_KM,
)


def _pt(lat, lng, ele=None):
    return GeoPoint(lat=lat, lng=lng, elevation=ele)


# =============================================================================
# Test Haversine Distance
# =============================================================================

class TestHaversine:
    """Tests for haversine function."""

    def test_same_point(self):
        """Distance between same point should be 0."""
        assert haversine(43.0, 76.0, 43.0, 76.0) == 0.0

    def test_one_degree_latitude(self):
        """1 degree of latitude is ~111.2 km on a 6371 km sphere."""
        dist = haversine(0.0, 0.0, 1.0, 0.0)
        assert dist == pytest.approx(111.19, abs=0.01)

    def test_symmetry(self):
        """Distance A->B should equal B->A."""
        dist_ab = haversine(43.0, 76.0, 44.0, 77.0)
        dist_ba = haversine(44.0, 77.0, 43.0, 76.0)
        assert dist_ab == pytest.approx(dist_ba, rel=0.0001)

    def test_east_west_distance(self):
        """At the equator 1 degree of longitude is ~111 km."""
        dist = haversine(0.0, 0.0, 0.0, 1.0)
        assert 110 < dist < 112

    def test_earth_radius_constant(self):
        assert EARTH_RADIUS_KM == 6371.0

    def test_negative_coordinates(self):
        """Sydney to Melbourne, ~714 km."""
        dist = haversine(-33.8688, 151.2093, -37.8136, 144.9631)
        assert 700 < dist < 730

    def test_antimeridian(self):
        """Crossing 180° longitude takes the short way round."""
        dist = haversine(0.0, 179.0, 0.0, -179.0)
        assert 220 < dist < 225

    def test_poles(self):
        """North Pole to South Pole is half the circumference."""
        dist = haversine(90.0, 0.0, -90.0, 0.0)
        assert 19900 < dist < 20100


# =============================================================================
# Test Calculate Total Distance
# =============================================================================

class TestCalculateTotalDistance:
    """Tests for calculate_total_distance function."""

    def test_empty_list(self):
        assert calculate_total_distance([]) == 0.0

    def test_single_point(self):
        assert calculate_total_distance([_pt(43.0, 76.0, 1000)]) == 0.0

    def test_two_points_equals_haversine(self):
        points = [_pt(43.0, 76.0), _pt(43.5, 76.3)]
        assert calculate_total_distance(points) == haversine(43.0, 76.0, 43.5, 76.3)

    def test_round_trip(self):
        """Out and back should be twice one way."""
        points = [_pt(43.0, 76.0), _pt(43.01, 76.0), _pt(43.0, 76.0)]
        one_way = haversine(43.0, 76.0, 43.01, 76.0)
        assert calculate_total_distance(points) == pytest.approx(2 * one_way)

    def test_elevation_ignored(self):
        flat = [_pt(43.0, 76.0, 1000), _pt(43.01, 76.0, 1000)]
        climb = [_pt(43.0, 76.0, 1000), _pt(43.01, 76.0, 2000)]
        assert calculate_total_distance(flat) == calculate_total_distance(climb)

    def test_accumulation_is_monotonic(self):
        points = [_pt(43.0 + i * 0.001, 76.0) for i in range(10)]
        running = [calculate_total_distance(points[:n]) for n in range(1, 11)]
        assert running == sorted(running)
        assert running[0] == 0.0


# =============================================================================
# Test Bounds
# =============================================================================

class TestCalculateBounds:
    """Tests for calculate_bounds function."""

    def test_bounds(self):
        points = [_pt(1.0, -3.0), _pt(-2.0, 5.0), _pt(0.5, 0.0)]
        assert calculate_bounds(points) == (-2.0, 1.0, -3.0, 5.0)

    def test_single_point(self):
        assert calculate_bounds([_pt(10.0, 20.0)]) == (10.0, 10.0, 20.0, 20.0)

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            calculate_bounds([])


# =============================================================================
# Test Segment Distance
# =============================================================================

class TestSegmentDistance:
    """Tests for planar point-to-segment distance in degree space."""

    def test_perpendicular_projection(self):
        dist = segment_distance(_pt(1.0, 1.0), _pt(0.0, 0.0), _pt(2.0, 0.0))
        assert dist == pytest.approx(1.0)

    def test_point_on_segment(self):
        dist = segment_distance(_pt(1.0, 0.0), _pt(0.0, 0.0), _pt(2.0, 0.0))
        assert dist == 0.0

    def test_beyond_end_clamps_to_endpoint(self):
        dist = segment_distance(_pt(5.0, 4.0), _pt(0.0, 0.0), _pt(2.0, 0.0))
        assert dist == pytest.approx(5.0)

    def test_before_start_clamps_to_start(self):
        dist = segment_distance(_pt(-3.0, 4.0), _pt(0.0, 0.0), _pt(2.0, 0.0))
        assert dist == pytest.approx(5.0)

    def test_zero_length_segment(self):
        dist = segment_distance(_pt(3.0, 4.0), _pt(0.0, 0.0), _pt(0.0, 0.0))
        assert dist == pytest.approx(5.0)

    def test_degrees_not_kilometers(self):
        """Distance is in raw degrees, not a geodesic projection."""
        dist = segment_distance(_pt(60.0, 0.5), _pt(60.0, 0.0), _pt(60.0, 0.0))
        assert dist == pytest.approx(0.5)
