"""Tests for the Plant model and PlantService."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from ecopilot.modules.plant_management.domain.models.plant import Plant
from ecopilot.shared.core.exceptions import PlantNotFoundError

NOW = datetime(2026, 10, 19, 14, 30, tzinfo=timezone.utc)


class TestPlantModel:
    def test_needs_water_on_the_due_day(self):
        plant = Plant(name="Ficus", last_watered=NOW - timedelta(days=7), watering_frequency=7)
        assert plant.needs_water(NOW) is True
        assert plant.needs_water(NOW - timedelta(minutes=1)) is False

    def test_days_since_watered_is_floored(self):
        plant = Plant(name="Ficus", last_watered=NOW - timedelta(days=2, hours=23))
        assert plant.days_since_watered(NOW) == 2

    def test_naive_datetimes_are_utc(self):
        plant = Plant(name="Ficus", last_watered=datetime(2026, 10, 1, 12, 0))
        assert plant.last_watered.tzinfo is timezone.utc

    def test_blank_name_rejected(self):
        with pytest.raises(PydanticValidationError):
            Plant(name="   ")

    def test_display_fields_fall_back_to_typed_text(self):
        plant = Plant(name="Ficus", location="Chambre", name_en="Fiddle-leaf fig")
        assert plant.display_name("en") == "Fiddle-leaf fig"
        assert plant.display_name("fr") == "Ficus"
        assert plant.display_location("en") == "Chambre"

    def test_current_tip_falls_back_to_french(self):
        plant = Plant(name="Ficus", tips={"fr": "Pas trop d'eau", "en": ""})
        assert plant.current_tip("en") == "Pas trop d'eau"


class TestPlantService:
    async def test_demo_plants_are_listed(self, plant_service):
        plants = await plant_service.list_plants()
        assert [plant.id for plant in plants] == ["1", "2"]

    async def test_add_plant_defaults(self, plant_service, clock):
        plant = await plant_service.add_plant(name="Ficus", location="Chambre")

        assert plant.name_fr == plant.name_en == "Ficus"
        assert plant.location_en == "Chambre"
        assert plant.last_watered == clock()
        assert plant.watering_frequency == 7
        assert plant.tips == {"fr": "", "en": ""}

    async def test_water_plant_resets_last_watered(self, plant_service, clock):
        clock.advance(days=3)
        plant = await plant_service.water_plant("1")

        assert plant.last_watered == clock()
        assert plant.needs_water(clock()) is False

    async def test_update_plant_applies_known_fields_only(self, plant_service):
        plant = await plant_service.update_plant("2", {"location": "Bureau", "id": "hijack"})

        assert plant.id == "2"
        assert plant.location == "Bureau"

    async def test_delete_plant(self, plant_service):
        await plant_service.delete_plant("1")

        with pytest.raises(PlantNotFoundError):
            await plant_service.get_plant("1")
        with pytest.raises(PlantNotFoundError):
            await plant_service.delete_plant("1")

    async def test_plants_needing_water(self, plant_service, clock):
        assert await plant_service.plants_needing_water() == []

        clock.advance(days=2)
        thirsty = await plant_service.plants_needing_water()
        assert [plant.id for plant in thirsty] == ["1"]
