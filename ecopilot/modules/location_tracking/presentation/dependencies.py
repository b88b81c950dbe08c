# 📄 File: ecopilot/modules/location_tracking/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Gives the location endpoints the shared session store plus the plant and map
# services they need.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers: process-wide tracker repository singleton and a
# LocationTrackingService assembled from overridable plant/geocoding dependencies.
# 🔗 Dependencies:
# functools.lru_cache, InMemoryTrackerRepository, plant and geocoding dependencies
# 🔄 Connected Modules / Calls From:
# location endpoints, tests (dependency_overrides)

from functools import lru_cache

from fastapi import Depends

from ecopilot.modules.geocoding.domain.services.geocoding_service import GeocodingService
from ecopilot.modules.geocoding.presentation.dependencies import get_geocoding_service
from ecopilot.modules.plant_management.domain.services.plant_service import PlantService
from ecopilot.modules.plant_management.presentation.dependencies import get_plant_service
from ecopilot.shared.config.settings import get_settings

from ..application.location_service import LocationTrackingService
from ..domain.repositories.tracker_repository import TrackerRepository
from ..infrastructure.memory_tracker_repository import InMemoryTrackerRepository


@lru_cache()
def get_tracker_repository() -> TrackerRepository:
    return InMemoryTrackerRepository()


def get_location_service(
    tracker_repository: TrackerRepository = Depends(get_tracker_repository),
    plant_service: PlantService = Depends(get_plant_service),
    geocoding_service: GeocodingService = Depends(get_geocoding_service),
) -> LocationTrackingService:
    return LocationTrackingService(
        tracker_repository=tracker_repository,
        plant_service=plant_service,
        geocoding_service=geocoding_service,
        settings=get_settings(),
    )
