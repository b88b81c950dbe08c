"""Tests for the per-session LocationTracker."""

import pytest

from ecopilot.modules.location_tracking.domain.models.notification import (
    NotificationType,
    SensorErrorCode,
    ZoneTransition,
)
from ecopilot.modules.location_tracking.domain.models.position import HomeReference, HomeSource, Position
from ecopilot.modules.location_tracking.domain.services.location_tracker import LocationTracker
from ecopilot.shared.core.exceptions import (
    HomeNotSetError,
    PositionUnknownError,
    TrackingNotActiveError,
    ValidationError,
)

HOME_LAT, HOME_LON = 45.4215, -75.6972
NEAR = Position(latitude=45.4220, longitude=HOME_LON)   # ~56 m north
FAR = Position(latitude=45.4415, longitude=HOME_LON)    # ~2.2 km north
PLANTS = ["Monstera"]


@pytest.fixture
def tracker(clock, recording_sink):
    tracker = LocationTracker("session-1", sinks=[recording_sink], clock=clock)
    tracker.set_home(HomeReference(latitude=HOME_LAT, longitude=HOME_LON))
    tracker.start()
    return tracker


class TestLifecycle:
    def test_samples_rejected_when_not_tracking(self, clock):
        tracker = LocationTracker("idle", clock=clock)
        with pytest.raises(TrackingNotActiveError):
            tracker.process_sample(NEAR, PLANTS)

    def test_start_and_stop_are_idempotent(self, clock):
        tracker = LocationTracker("s", clock=clock)
        tracker.start()
        started_at = tracker.started_at
        clock.advance(minutes=1)
        tracker.start()
        assert tracker.started_at == started_at

        tracker.stop()
        tracker.stop()
        assert tracker.is_tracking is False


class TestSampleProcessing:
    def test_first_sample_without_home_becomes_home(self, clock):
        tracker = LocationTracker("auto", clock=clock)
        tracker.start()

        evaluation = tracker.process_sample(NEAR, PLANTS, "en")

        assert evaluation.home_auto_set is True
        assert tracker.home.source is HomeSource.AUTO
        assert evaluation.distance_km == 0
        assert evaluation.is_at_home is True
        assert evaluation.transition is ZoneTransition.ARRIVED

    def test_staying_away_produces_no_notification(self, tracker, recording_sink):
        evaluation = tracker.process_sample(FAR, PLANTS)

        assert evaluation.transition is None
        assert evaluation.notification is None
        assert recording_sink.sent == []

    def test_arrival_notifies_when_plants_need_water(self, tracker, recording_sink):
        tracker.process_sample(FAR, PLANTS)
        evaluation = tracker.process_sample(NEAR, PLANTS, "en")

        notification = evaluation.notification
        assert evaluation.transition is ZoneTransition.ARRIVED
        assert notification.type is NotificationType.HOME_ARRIVAL
        assert notification.message["en"] == "1 plant(s) need water."
        assert notification.is_at_home is True
        assert recording_sink.sent == [(notification, "en")]
        assert tracker.inbox.unread_count == 1

    def test_departure_message_includes_distance(self, tracker):
        tracker.process_sample(NEAR, PLANTS)
        evaluation = tracker.process_sample(FAR, PLANTS)

        assert evaluation.transition is ZoneTransition.DEPARTED
        assert evaluation.notification.type is NotificationType.HOME_DEPARTURE
        assert evaluation.notification.message["en"] == "2.2 km from home. Don't forget your plants!"

    def test_no_notification_when_no_plant_needs_water(self, tracker):
        tracker.process_sample(FAR, [])
        evaluation = tracker.process_sample(NEAR, [])

        assert evaluation.transition is ZoneTransition.ARRIVED
        assert evaluation.notification is None
        assert evaluation.notification_suppressed is False
        assert len(tracker.inbox) == 0

    def test_repeated_arrival_is_debounced(self, tracker, clock, recording_sink):
        tracker.process_sample(NEAR, PLANTS)
        tracker.process_sample(FAR, PLANTS)

        clock.advance(minutes=2)
        evaluation = tracker.process_sample(NEAR, PLANTS)
        assert evaluation.transition is ZoneTransition.ARRIVED
        assert evaluation.notification is None
        assert evaluation.notification_suppressed is True

        clock.advance(minutes=3)
        tracker.process_sample(FAR, PLANTS)
        evaluation = tracker.process_sample(NEAR, PLANTS)
        assert evaluation.notification is not None

        arrivals = [n for n, _ in recording_sink.sent if n.type is NotificationType.HOME_ARRIVAL]
        assert len(arrivals) == 2

    def test_hysteresis_avoids_flapping(self, tracker):
        tracker.configure(exit_radius_factor=1.5)
        tracker.process_sample(NEAR, PLANTS)

        # ~130 m: outside the home radius but inside the exit radius
        evaluation = tracker.process_sample(Position(latitude=45.42267, longitude=HOME_LON), PLANTS)
        assert evaluation.transition is None
        assert evaluation.is_at_home is True

    def test_history_is_bounded_and_newest_first(self, clock):
        tracker = LocationTracker("h", clock=clock, history_size=3)
        tracker.start()
        for offset in range(5):
            tracker.process_sample(Position(latitude=45.0 + offset / 100, longitude=-75.0), [])

        history = tracker.recent_history()
        assert len(history) == 3
        assert history[0].position.latitude == pytest.approx(45.04)
        assert len(tracker.recent_history(limit=1)) == 1

    def test_changing_home_refreshes_distance(self, tracker):
        tracker.process_sample(FAR, PLANTS)
        tracker.set_home(HomeReference(latitude=FAR.latitude, longitude=FAR.longitude))
        assert tracker.distance_km == 0


class TestConfiguration:
    @pytest.mark.parametrize(
        "changes",
        [
            {"home_radius_m": 20},
            {"home_radius_m": 800},
            {"cooldown_minutes": 2},
            {"cooldown_minutes": 11},
            {"exit_radius_factor": 0.5},
        ],
    )
    def test_out_of_range_values_rejected(self, tracker, changes):
        with pytest.raises(ValidationError):
            tracker.configure(**changes)

    def test_update_radius_and_cooldown(self, tracker):
        settings = tracker.configure(home_radius_m=250, cooldown_minutes=10)

        assert settings.home_radius_m == 250
        assert tracker.classifier.radius_km == pytest.approx(0.25)
        assert tracker.debouncer.cooldown.total_seconds() == 600


class TestSensorErrors:
    @pytest.mark.parametrize(
        "code,expected",
        [
            (1, SensorErrorCode.PERMISSION_DENIED),
            ("2", SensorErrorCode.POSITION_UNAVAILABLE),
            ("timeout", SensorErrorCode.TIMEOUT),
            (42, SensorErrorCode.UNKNOWN),
        ],
    )
    def test_error_codes(self, tracker, code, expected):
        warning = tracker.report_sensor_error(code)
        assert warning.code is expected

    def test_error_stops_tracking(self, tracker):
        warning = tracker.report_sensor_error(1, "User denied Geolocation")

        assert tracker.is_tracking is False
        assert warning.message == {"fr": "Permission refusée", "en": "Permission denied"}
        assert warning.raw_message == "User denied Geolocation"
        assert tracker.last_warning is warning
        assert len(tracker.inbox) == 0


class TestDerivedViews:
    def test_all_good_without_thirsty_plants(self, clock):
        tracker = LocationTracker("s", clock=clock)
        suggestion = tracker.suggestion([])
        assert suggestion.icon == "✅"
        assert suggestion.action is None

    def test_suggestion_requires_home(self, clock):
        tracker = LocationTracker("s", clock=clock)
        with pytest.raises(HomeNotSetError):
            tracker.suggestion(PLANTS)

    def test_suggestion_requires_position(self, tracker):
        with pytest.raises(PositionUnknownError):
            tracker.suggestion(PLANTS)

    def test_suggestion_at_home(self, tracker):
        tracker.process_sample(NEAR, PLANTS)
        suggestion = tracker.suggestion(PLANTS)

        assert suggestion.action == "water"
        assert suggestion.message["en"] == "Perfect! You're home (56m). 1 plant(s) need water."
        assert suggestion.plants == PLANTS

    def test_suggestion_away(self, tracker):
        tracker.process_sample(FAR, PLANTS)
        suggestion = tracker.suggestion(["Monstera", "Pothos"])

        assert suggestion.icon == "📱"
        assert suggestion.action == "contact"
        assert "2.2 km" in suggestion.message["en"]
        assert "2 plant(s)" in suggestion.message["en"]

    def test_help_message(self, tracker):
        tracker.process_sample(FAR, PLANTS)
        help_message = tracker.help_message(["Monstera", "Pothos"])

        assert help_message.subject["en"] == "Urgent help for my plants 🌱"
        assert "2.2 km" in help_message.body["en"]
        assert "(14:30 UTC)" in help_message.body["en"]
        assert "Monstera, Pothos" in help_message.body["fr"]

    def test_help_message_in_local_time(self, tracker):
        tracker.process_sample(FAR, PLANTS)

        summer = tracker.help_message(["Monstera"], utc_offset_minutes=-240)
        india = tracker.help_message(["Monstera"], utc_offset_minutes=330)

        assert "(10:30)" in summer.body["en"]
        assert "(10:30)" in summer.body["fr"]
        assert "(20:00)" in india.body["en"]

    def test_status(self, tracker):
        tracker.process_sample(NEAR, PLANTS)
        status = tracker.status()

        assert status["session_id"] == "session-1"
        assert status["is_tracking"] is True
        assert status["is_at_home"] is True
        assert status["unread_notifications"] == 1
        assert status["history_size"] == 1
