"""Tests for distance helpers."""

import pytest

from ecopilot.modules.location_tracking.domain.services.geo import (
    format_distance,
    haversine_km,
    is_at_home,
    meters,
)


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine_km(45.4215, -75.6972, 45.4215, -75.6972) == 0

    def test_ottawa_to_montreal(self):
        """Ottawa city hall to Montréal city hall is about 167 km."""
        distance = haversine_km(45.4215, -75.6972, 45.5088, -73.5540)
        assert distance == pytest.approx(167.4, abs=1.5)

    def test_is_symmetric(self):
        a = haversine_km(45.4215, -75.6972, 43.6532, -79.3832)
        b = haversine_km(43.6532, -79.3832, 45.4215, -75.6972)
        assert a == pytest.approx(b)

    def test_antipodal_points_do_not_fail(self):
        distance = haversine_km(0, 0, 0, 180)
        assert distance == pytest.approx(20015.1, abs=1.0)


class TestZoneHelpers:
    def test_boundary_is_inside(self):
        assert is_at_home(0.1, 0.1) is True
        assert is_at_home(0.1001, 0.1) is False

    def test_outside_radius_is_not_home(self):
        assert is_at_home(0.15, 0.1) is False
        assert is_at_home(0.05, 0.1) is True

    def test_meters_rounding(self):
        assert meters(0.0556) == 56
        assert meters(0.1504) == 150

    @pytest.mark.parametrize(
        "distance_km,expected",
        [
            (0.15, "150m"),
            (1.0, "1000m"),
            (1.24, "1.2 km"),
            (12.0, "12.0 km"),
        ],
    )
    def test_format_distance(self, distance_km, expected):
        assert format_distance(distance_km) == expected
