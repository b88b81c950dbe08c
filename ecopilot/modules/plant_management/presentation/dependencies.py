# 📄 File: ecopilot/modules/plant_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands every plant endpoint the same plant collection, so a plant added in one
# request is still there in the next.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the plant repository and PlantService
# singletons; tests replace them through app.dependency_overrides.
# 🔗 Dependencies:
# functools.lru_cache, InMemoryPlantRepository, PlantService
# 🔄 Connected Modules / Calls From:
# plant endpoints, location_tracking dependencies

from functools import lru_cache

from ..domain.repositories.plant_repository import PlantRepository
from ..domain.services.plant_service import PlantService
from ..infrastructure.memory_plant_repository import InMemoryPlantRepository


@lru_cache()
def get_plant_repository() -> PlantRepository:
    return InMemoryPlantRepository.with_demo_data()


@lru_cache()
def get_plant_service() -> PlantService:
    return PlantService(get_plant_repository())
