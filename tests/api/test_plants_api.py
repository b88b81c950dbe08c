"""HTTP tests for the plant endpoints."""

PLANTS_URL = "/api/v1/plants/"


class TestListPlants:
    def test_lists_demo_plants_in_french_by_default(self, client):
        response = client.get(PLANTS_URL)

        assert response.status_code == 200
        assert response.headers["Content-Language"] == "fr"
        plants = response.json()
        assert [plant["id"] for plant in plants] == ["1", "2"]
        assert plants[0]["display_name"] == "Monstera Deliciosa"
        assert plants[0]["display_location"] == "Salon près de la fenêtre"
        assert plants[0]["days_since_watered"] == 5
        assert plants[0]["needs_water"] is False
        assert plants[0]["language"] == "fr"

    def test_english_display_fields(self, client):
        response = client.get(PLANTS_URL, params={"lang": "en"})

        plant = response.json()[1]
        assert plant["display_name"] == "Golden Pothos"
        assert plant["display_location"] == "Kitchen"
        assert plant["current_tip"] == "Very resilient, perfect for beginners"


class TestMutations:
    def test_add_plant(self, client):
        response = client.post(
            PLANTS_URL,
            json={"name": "Ficus", "species": "Ficus lyrata", "location": "Chambre", "watering_frequency": 7},
            headers={"X-Language": "en"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "New plant added successfully! 🌿"
        assert body["message_fr"] == "Nouvelle plante ajoutée avec succès! 🌿"
        assert body["plant"]["name_en"] == "Ficus"
        assert body["plant"]["location_en"] == "Chambre"
        assert body["plant"]["days_since_watered"] == 0
        assert len(client.get(PLANTS_URL).json()) == 3

    def test_blank_name_is_rejected(self, client):
        response = client.post(PLANTS_URL, json={"name": "   "})

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_water_plant(self, client, clock):
        clock.advance(days=3)

        before = client.get(PLANTS_URL).json()[0]
        assert before["needs_water"] is True

        response = client.put(f"{PLANTS_URL}1/water")

        assert response.status_code == 200
        assert response.json()["message"] == "Plante arrosée avec succès! 🌱"
        assert response.json()["plant"]["needs_water"] is False
        assert response.json()["plant"]["days_since_watered"] == 0

    def test_partial_update(self, client):
        response = client.put(f"{PLANTS_URL}2", json={"location": "Bureau", "watering_frequency": 4})

        plant = response.json()["plant"]
        assert response.status_code == 200
        assert plant["location"] == "Bureau"
        assert plant["watering_frequency"] == 4
        assert plant["name"] == "Pothos Doré"

    def test_delete_plant(self, client):
        response = client.delete(f"{PLANTS_URL}2", params={"lang": "en"})

        assert response.status_code == 200
        assert response.json()["message"] == "Plant deleted successfully! 👋"
        assert [plant["id"] for plant in client.get(PLANTS_URL).json()] == ["1"]


class TestUnknownPlant:
    def test_water_unknown_plant(self, client):
        response = client.put(f"{PLANTS_URL}999/water", params={"lang": "en"})

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "NOT_FOUND"
        assert error["message"] == "Plant not found"
        assert error["message_fr"] == "Plante non trouvée"

    def test_delete_unknown_plant(self, client):
        assert client.delete(f"{PLANTS_URL}999").status_code == 404
