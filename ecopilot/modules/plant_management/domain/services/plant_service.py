# 📄 File: ecopilot/modules/plant_management/domain/services/plant_service.py
# 🧭 Purpose (Layman Explanation):
# Handles everything you can do with your plants: list them, add one, water it,
# edit it, remove it, and find out which ones are thirsty.
# 🧪 Purpose (Technical Summary):
# Domain service implementing plant CRUD and watering business logic over a
# PlantRepository, with an injectable clock for watering state computations.
# 🔗 Dependencies:
# Plant model, PlantRepository, shared exceptions
# 🔄 Connected Modules / Calls From:
# plant endpoints, location_service.py (plants needing water)

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from ecopilot.shared.core.exceptions import PlantNotFoundError

from ..models.plant import DEFAULT_WATERING_FREQUENCY_DAYS, Plant
from ..repositories.plant_repository import PlantRepository

logger = logging.getLogger(__name__)

# Fields a partial update may change
UPDATABLE_FIELDS = (
    "name",
    "name_fr",
    "name_en",
    "species",
    "location",
    "location_fr",
    "location_en",
    "last_watered",
    "watering_frequency",
    "tips",
)


class PlantService:
    """
    Domain service for plant management business logic.

    Implements:
    - Plant listing with derived watering state
    - Plant creation with bilingual name/location defaults
    - Watering, partial update and deletion
    """

    def __init__(
        self,
        plant_repository: PlantRepository,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.plant_repository = plant_repository
        self._clock = clock

    def now(self) -> datetime:
        return self._clock()

    async def list_plants(self) -> List[Plant]:
        return await self.plant_repository.list_all()

    async def get_plant(self, plant_id: str) -> Plant:
        """
        Get plant by ID.

        Raises:
            PlantNotFoundError: If plant not found
        """
        plant = await self.plant_repository.get_by_id(plant_id)
        if plant is None:
            raise PlantNotFoundError(plant_id)
        return plant

    async def add_plant(
        self,
        name: str,
        species: Optional[str] = None,
        location: Optional[str] = None,
        name_fr: Optional[str] = None,
        name_en: Optional[str] = None,
        location_fr: Optional[str] = None,
        location_en: Optional[str] = None,
        last_watered: Optional[datetime] = None,
        watering_frequency: Optional[int] = None,
        tips: Optional[Dict[str, str]] = None,
    ) -> Plant:
        """
        Create a new plant.

        Translations default to the text given in ``name`` / ``location``; a plant
        without ``last_watered`` is considered watered now.
        """
        now = self.now()
        plant = Plant(
            name=name,
            name_fr=name_fr or name,
            name_en=name_en or name,
            species=species,
            location=location,
            location_fr=location_fr or location,
            location_en=location_en or location,
            last_watered=last_watered or now,
            watering_frequency=watering_frequency or DEFAULT_WATERING_FREQUENCY_DAYS,
            created_at=now,
            tips=tips or {"fr": "", "en": ""},
        )
        created = await self.plant_repository.create(plant)
        logger.info(f"🌿 Plant added: {created.id} ({created.name})")
        return created

    async def water_plant(self, plant_id: str) -> Plant:
        plant = await self.get_plant(plant_id)
        plant.water(self.now())
        updated = await self.plant_repository.update(plant)
        logger.info(f"💧 Plant watered: {plant_id}")
        return updated

    async def update_plant(self, plant_id: str, changes: Dict[str, Any]) -> Plant:
        """
        Apply a partial update.

        Args:
            plant_id: Plant to update
            changes: Field values to set; unknown fields are ignored

        Raises:
            PlantNotFoundError: If plant not found
        """
        plant = await self.get_plant(plant_id)
        for field in UPDATABLE_FIELDS:
            if field in changes:
                setattr(plant, field, changes[field])
        updated = await self.plant_repository.update(plant)
        logger.info(f"✨ Plant updated: {plant_id} ({', '.join(k for k in changes if k in UPDATABLE_FIELDS)})")
        return updated

    async def delete_plant(self, plant_id: str) -> None:
        if not await self.plant_repository.delete(plant_id):
            raise PlantNotFoundError(plant_id)
        logger.info(f"👋 Plant deleted: {plant_id}")

    async def plants_needing_water(self, now: Optional[datetime] = None) -> List[Plant]:
        now = now or self.now()
        return [plant for plant in await self.plant_repository.list_all() if plant.needs_water(now)]
