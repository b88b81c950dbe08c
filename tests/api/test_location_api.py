"""HTTP tests for the location tracking endpoints."""

import re

import pytest

SESSION_URL = "/api/v1/location/phone-1"
HOME = {"latitude": 45.4215, "longitude": -75.6972}
NEAR = {"latitude": 45.4220, "longitude": -75.6972}
FAR = {"latitude": 45.4415, "longitude": -75.6972}


@pytest.fixture
def tracking(client):
    client.post(f"{SESSION_URL}/start")
    client.put(f"{SESSION_URL}/home", json={**HOME, "label": "Ottawa"})
    return client


@pytest.fixture
def thirsty(clock):
    # Monstera (every 7 days) was watered 5 days ago
    clock.advance(days=3)


class TestSessionLifecycle:
    def test_start_and_stop(self, client):
        started = client.post(f"{SESSION_URL}/start", params={"lang": "en"})
        assert started.status_code == 200
        body = started.json()
        assert body["message"] == "Location tracking started"
        assert body["session_id"] == "phone-1"
        assert body["is_tracking"] is True

        stopped = client.post(f"{SESSION_URL}/stop")
        assert stopped.json()["is_tracking"] is False

    def test_unknown_session(self, client):
        response = client.get("/api/v1/location/nobody/status", params={"lang": "en"})

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Location session not found"

    def test_invalid_session_id(self, client):
        assert client.post("/api/v1/location/bad%20id/start").status_code == 422

    def test_end_session(self, tracking):
        assert tracking.delete(SESSION_URL).status_code == 204
        assert tracking.get(f"{SESSION_URL}/status").status_code == 404
        assert tracking.delete(SESSION_URL).status_code == 404


class TestConfiguration:
    def test_home_is_stored(self, tracking):
        status = tracking.get(f"{SESSION_URL}/status").json()

        assert status["home"]["latitude"] == HOME["latitude"]
        assert status["home"]["source"] == "manual"
        assert status["home"]["label"] == "Ottawa"

    def test_geocoded_home(self, client, geocoding_provider):
        geocoding_provider.search_results = [
            {"display_name": "110 Laurier Avenue West, Ottawa", "lat": "45.4209", "lon": "-75.6901", "address": {}}
        ]

        response = client.post(f"{SESSION_URL}/home/geocode", json={"address": "110 Laurier Ave W"})

        assert response.status_code == 200
        assert response.json()["home"]["source"] == "geocoded"
        assert response.json()["home"]["label"] == "110 Laurier Avenue West, Ottawa"

    def test_geocoding_without_match(self, client):
        response = client.post(f"{SESSION_URL}/home/geocode", json={"address": "nowhere at all"})
        assert response.status_code == 404

    def test_settings_update(self, client):
        response = client.put(f"{SESSION_URL}/settings", json={"home_radius_m": 200, "cooldown_minutes": 10})

        assert response.status_code == 200
        assert response.json()["settings"]["home_radius_m"] == 200
        assert response.json()["settings"]["cooldown_minutes"] == 10

    def test_settings_out_of_range(self, client):
        response = client.put(f"{SESSION_URL}/settings", json={"home_radius_m": 20})

        assert response.status_code == 400
        assert response.json()["error"]["details"]["field"] == "home_radius_m"


class TestSamples:
    def test_arrival_notification(self, tracking, thirsty):
        response = tracking.post(f"{SESSION_URL}/samples", json=NEAR, params={"lang": "en"})

        assert response.status_code == 200
        body = response.json()
        assert body["is_at_home"] is True
        assert body["transition"] == "arrived"
        assert body["distance_text"] == "56m"
        assert body["notification"]["type"] == "home-arrival"
        assert body["notification"]["message"] == "1 plant(s) need water."

        inbox = tracking.get(f"{SESSION_URL}/notifications").json()
        assert inbox["total"] == 1
        assert inbox["unread_count"] == 1

    def test_no_notification_when_plants_are_fine(self, tracking):
        body = tracking.post(f"{SESSION_URL}/samples", json=NEAR).json()

        assert body["transition"] == "arrived"
        assert body["notification"] is None
        assert body["notification_suppressed"] is False

    def test_repeated_arrival_is_debounced(self, tracking, thirsty):
        tracking.post(f"{SESSION_URL}/samples", json=NEAR)
        tracking.post(f"{SESSION_URL}/samples", json=FAR)
        body = tracking.post(f"{SESSION_URL}/samples", json=NEAR).json()

        assert body["transition"] == "arrived"
        assert body["notification"] is None
        assert body["notification_suppressed"] is True

    def test_first_sample_sets_home(self, client):
        client.post(f"{SESSION_URL}/start")

        body = client.post(f"{SESSION_URL}/samples", json=FAR).json()

        assert body["home_auto_set"] is True
        assert body["distance_km"] == 0.0
        assert client.get(f"{SESSION_URL}/status").json()["home"]["source"] == "auto"

    def test_samples_require_active_tracking(self, tracking):
        tracking.post(f"{SESSION_URL}/stop")

        response = tracking.post(f"{SESSION_URL}/samples", json=NEAR)

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "BUSINESS_RULE_VIOLATION"

    def test_invalid_coordinates(self, tracking):
        response = tracking.post(f"{SESSION_URL}/samples", json={"latitude": 91, "longitude": 0})
        assert response.status_code == 422

    def test_sensor_error_stops_tracking(self, tracking):
        response = tracking.post(f"{SESSION_URL}/errors", json={"code": 1, "message": "User denied Geolocation"})

        body = response.json()
        assert body["code"] == "permission_denied"
        assert body["message"] == "Permission refusée"
        assert body["is_tracking"] is False
        assert tracking.get(f"{SESSION_URL}/status").json()["is_tracking"] is False


class TestInbox:
    def test_mark_read_and_clear(self, tracking, thirsty):
        notification = tracking.post(f"{SESSION_URL}/samples", json=NEAR).json()["notification"]

        read = tracking.post(f"{SESSION_URL}/notifications/{notification['id']}/read")
        assert read.json()["read"] is True

        marked = tracking.post(f"{SESSION_URL}/notifications/read-all").json()
        assert marked == {"marked": 0, "unread_count": 0}

        assert tracking.delete(f"{SESSION_URL}/notifications").status_code == 204
        assert tracking.get(f"{SESSION_URL}/notifications").json()["total"] == 0

    def test_unknown_notification(self, tracking):
        response = tracking.post(f"{SESSION_URL}/notifications/missing/read")
        assert response.status_code == 404


class TestDerivedViews:
    def test_history_newest_first(self, tracking):
        tracking.post(f"{SESSION_URL}/samples", json=NEAR)
        tracking.post(f"{SESSION_URL}/samples", json=FAR)

        body = tracking.get(f"{SESSION_URL}/history", params={"limit": 1}).json()

        assert body["count"] == 1
        assert body["entries"][0]["position"]["latitude"] == FAR["latitude"]
        assert body["entries"][0]["is_at_home"] is False

    def test_suggestion_requires_position(self, tracking, thirsty):
        response = tracking.get(f"{SESSION_URL}/suggestion")
        assert response.status_code == 409

    def test_suggestion_at_home(self, tracking, thirsty):
        tracking.post(f"{SESSION_URL}/samples", json=NEAR)

        body = tracking.get(f"{SESSION_URL}/suggestion", params={"lang": "en"}).json()

        assert body["action"] == "water"
        assert body["message"] == "Perfect! You're home (56m). 1 plant(s) need water."
        assert body["plants"] == ["Swiss Cheese Plant"]

    def test_help_message_when_away(self, tracking, thirsty):
        tracking.post(f"{SESSION_URL}/samples", json=FAR)

        body = tracking.get(f"{SESSION_URL}/help-message").json()

        assert body["subject"] == body["subject_fr"]
        assert body["body"].startswith("Salut ! Je suis actuellement à 2.2 km")
        assert "Monstera Deliciosa" in body["body_en"]

    def test_help_message_uses_sender_offset(self, tracking, thirsty):
        tracking.post(f"{SESSION_URL}/samples", json=FAR)

        local = tracking.get(f"{SESSION_URL}/help-message", params={"utc_offset_minutes": -240}).json()
        default = tracking.get(f"{SESSION_URL}/help-message").json()

        assert re.search(r"\(\d\d:\d\d\)", local["body_en"])
        assert "UTC" not in local["body_en"]
        assert re.search(r"\(\d\d:\d\d UTC\)", default["body_en"])

    def test_help_message_rejects_impossible_offset(self, tracking):
        response = tracking.get(f"{SESSION_URL}/help-message", params={"utc_offset_minutes": 5000})
        assert response.status_code == 422

    def test_current_address(self, tracking, geocoding_provider):
        geocoding_provider.reverse_data = {
            "display_name": "Parliament Hill, Ottawa",
            "address": {"road": "Wellington Street", "city": "Ottawa", "country": "Canada"},
        }
        tracking.post(f"{SESSION_URL}/samples", json=NEAR)

        body = tracking.get(f"{SESSION_URL}/address", params={"lang": "en"}).json()

        assert body["formatted"] == "Wellington Street, Ottawa"
        assert body["country"] == "Canada"
