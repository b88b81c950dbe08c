"""Tests for ZoneClassifier."""

import pytest

from ecopilot.modules.location_tracking.domain.models.notification import ZoneTransition
from ecopilot.modules.location_tracking.domain.services.zone_classifier import ZoneClassifier


class TestZoneClassifier:
    def test_initial_state_is_away(self):
        classifier = ZoneClassifier(radius_km=0.1)
        assert classifier.is_at_home is False

    def test_first_reading_inside_is_an_arrival(self):
        classifier = ZoneClassifier(radius_km=0.1)
        assert classifier.update(0.05) is ZoneTransition.ARRIVED
        assert classifier.is_at_home is True

    def test_no_transition_while_zone_unchanged(self):
        classifier = ZoneClassifier(radius_km=0.1)
        assert classifier.update(2.0) is None
        assert classifier.update(1.5) is None

    def test_departure(self):
        classifier = ZoneClassifier(radius_km=0.1, at_home=True)
        assert classifier.update(0.2) is ZoneTransition.DEPARTED
        assert classifier.is_at_home is False

    def test_hysteresis_keeps_home_until_exit_radius(self):
        classifier = ZoneClassifier(radius_km=0.1, exit_factor=1.5, at_home=True)

        assert classifier.update(0.13) is None
        assert classifier.is_at_home is True
        assert classifier.update(0.16) is ZoneTransition.DEPARTED

    def test_hysteresis_does_not_widen_entry(self):
        classifier = ZoneClassifier(radius_km=0.1, exit_factor=1.5)
        assert classifier.update(0.13) is None
        assert classifier.is_at_home is False

    def test_reconfigure(self):
        classifier = ZoneClassifier(radius_km=0.1)
        classifier.reconfigure(radius_km=0.3, exit_factor=1.2)
        assert classifier.exit_radius_km == pytest.approx(0.36)

    @pytest.mark.parametrize("radius_km,exit_factor", [(0, 1.0), (-1, 1.0), (0.1, 0.9)])
    def test_invalid_configuration(self, radius_km, exit_factor):
        with pytest.raises(ValueError):
            ZoneClassifier(radius_km=radius_km, exit_factor=exit_factor)
