# 📄 File: ecopilot/modules/plant_management/infrastructure/memory_plant_repository.py
# 🧭 Purpose (Layman Explanation):
# Keeps the plant collection in memory, starting with two demo plants so the app
# has something to show on first launch.
# 🧪 Purpose (Technical Summary):
# In-memory PlantRepository implementation with insertion-ordered storage and the
# Monstera / Golden Pothos demo seed.
# 🔗 Dependencies:
# datetime, PlantRepository, Plant
# 🔄 Connected Modules / Calls From:
# plant_management.presentation.dependencies, tests

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from ecopilot.shared.core.exceptions import PlantNotFoundError

from ..domain.models.plant import Plant
from ..domain.repositories.plant_repository import PlantRepository

logger = logging.getLogger(__name__)


def demo_plants(now: Optional[datetime] = None) -> List[Plant]:
    """The two plants every new installation starts with."""
    now = now or datetime.now(timezone.utc)
    return [
        Plant(
            id="1",
            name="Monstera Deliciosa",
            name_fr="Monstera Deliciosa",
            name_en="Swiss Cheese Plant",
            species="Monstera deliciosa",
            location="Salon près de la fenêtre",
            location_fr="Salon près de la fenêtre",
            location_en="Living room near window",
            last_watered=now - timedelta(days=5),
            watering_frequency=7,
            created_at=now,
            tips={
                "fr": "Aime la lumière indirecte et l'humidité élevée",
                "en": "Loves indirect light and high humidity",
            },
        ),
        Plant(
            id="2",
            name="Pothos Doré",
            name_fr="Pothos Doré",
            name_en="Golden Pothos",
            species="Epipremnum aureum",
            location="Cuisine",
            location_fr="Cuisine",
            location_en="Kitchen",
            last_watered=now - timedelta(days=2),
            watering_frequency=10,
            created_at=now,
            tips={
                "fr": "Très résistant, parfait pour débuter",
                "en": "Very resilient, perfect for beginners",
            },
        ),
    ]


class InMemoryPlantRepository(PlantRepository):
    """Dict-backed repository; dicts keep insertion order."""

    def __init__(self, plants: Optional[List[Plant]] = None):
        self._plants: Dict[str, Plant] = {plant.id: plant for plant in (plants or [])}

    @classmethod
    def with_demo_data(cls) -> "InMemoryPlantRepository":
        return cls(demo_plants())

    async def list_all(self) -> List[Plant]:
        return list(self._plants.values())

    async def get_by_id(self, plant_id: str) -> Optional[Plant]:
        return self._plants.get(plant_id)

    async def create(self, plant: Plant) -> Plant:
        self._plants[plant.id] = plant
        logger.debug(f"🌿 Plant stored: {plant.id}")
        return plant

    async def update(self, plant: Plant) -> Plant:
        if plant.id not in self._plants:
            raise PlantNotFoundError(plant.id)
        self._plants[plant.id] = plant
        return plant

    async def delete(self, plant_id: str) -> bool:
        return self._plants.pop(plant_id, None) is not None
