"""HTTP tests for health, app info and language endpoints."""

import pytest


class TestHealth:
    def test_health_in_french(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "OK"
        assert body["message"] == "EcoPilot API fonctionne parfaitement!"
        assert body["message_en"] == "EcoPilot API is running perfectly!"
        assert body["language"] == "fr"
        assert body["features"]["bilingual"] is True
        assert body["features"]["supportedLanguages"] == ["fr", "en"]
        assert "tavily" in body["features"]["apis"]

    def test_accept_language_selects_english(self, client):
        response = client.get("/api/v1/health", headers={"Accept-Language": "en-CA,en;q=0.9"})

        assert response.json()["message"] == "EcoPilot API is running perfectly!"
        assert response.headers["Content-Language"] == "en"

    def test_root_points_to_health(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["health_check"] == "/api/v1/health"


class TestAppInfo:
    def test_bilingual_content(self, client):
        body = client.get("/api/v1/app-info", params={"lang": "en"}).json()

        assert body["name"] == "EcoPilot"
        assert body["currentLanguage"] == "en"
        assert body["tagline"]["en"] == "Discover your green thumb"
        assert len(body["features"]["fr"]) == 5
        assert set(body["stats"]["en"]) == {"fact1", "fact2", "fact3"}


class TestLanguage:
    @pytest.mark.parametrize(
        "language,message,message_en",
        [
            ("fr", "Langue changée en français", "Language changed to French"),
            ("EN", "Language changed to English", "Language changed to English"),
        ],
    )
    def test_change_language(self, client, language, message, message_en):
        response = client.post("/api/v1/language", json={"language": language})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == message
        assert body["message_en"] == message_en
        assert body["currentLanguage"] == language.lower()

    def test_unsupported_language(self, client):
        response = client.post("/api/v1/language", json={"language": "de"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == "Langue non supportée"
        assert error["details"]["supported_languages"] == ["fr", "en"]
