"""HTTP tests for the error envelope and request middleware."""


class TestErrorEnvelope:
    def test_unknown_route(self, client):
        response = client.get("/api/v1/unknown", params={"lang": "en"})

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "ROUTE_NOT_FOUND"
        assert error["message"] == "Route not found"
        assert error["message_fr"] == "Route non trouvée"
        assert error["details"]["requestedPath"] == "/api/v1/unknown"
        assert error["timestamp"]

    def test_request_validation(self, client):
        response = client.post("/api/v1/plants/", json={"watering_frequency": "often"})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == "Échec de la validation"
        fields = {item["field"] for item in error["details"]["errors"]}
        assert {"name", "watering_frequency"} <= fields


class TestRequestMiddleware:
    def test_request_id_is_generated(self, client):
        response = client.get("/api/v1/health")

        assert response.headers["X-Request-ID"]
        assert response.headers["X-Response-Time"].endswith("s")

    def test_request_id_is_propagated(self, client):
        response = client.get("/api/v1/unknown", headers={"X-Request-ID": "req-42"})

        assert response.headers["X-Request-ID"] == "req-42"
        assert response.json()["error"]["request_id"] == "req-42"

    def test_language_headers(self, client):
        response = client.get("/api/v1/health", headers={"X-Language": "en"})

        assert response.headers["Content-Language"] == "en"
        assert response.headers["X-Supported-Locales"] == "fr,en"
