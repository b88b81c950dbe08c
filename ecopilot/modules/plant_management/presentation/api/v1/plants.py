# 📄 File: ecopilot/modules/plant_management/presentation/api/v1/plants.py
# 🧭 Purpose (Layman Explanation):
# The web doors for the plant list: see your plants, add one, water one, edit
# one or say goodbye to one.
# 🧪 Purpose (Technical Summary):
# FastAPI plant CRUD endpoints returning localized plant views and bilingual
# confirmation messages; unknown ids surface as bilingual 404 errors.
# 🔗 Dependencies:
# FastAPI router, PlantService, plant schemas, shared i18n dependencies
# 🔄 Connected Modules / Calls From:
# ecopilot.api.v1.router (mounted under /api/v1/plants)

"""
Plants API Endpoints

Endpoints:
- GET /: List plants with watering state
- POST /: Add a plant (201)
- PUT /{plant_id}/water: Mark a plant as watered now
- PUT /{plant_id}: Partial update
- DELETE /{plant_id}: Remove a plant
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status

from ecopilot.shared.core.dependencies import get_request_locale
from ecopilot.shared.core.i18n import localized_payload

from ecopilot.modules.plant_management.domain.services.plant_service import PlantService
from ...dependencies import get_plant_service
from ..schemas.plant_schemas import (
    PlantCreateRequest,
    PlantDeletedResponse,
    PlantMutationResponse,
    PlantResponse,
    PlantUpdateRequest,
)

logger = logging.getLogger(__name__)

plants_router = APIRouter()


@plants_router.get(
    "/",
    response_model=List[PlantResponse],
    summary="List plants",
    description="List every plant with its watering state and localized display fields",
)
async def list_plants(
    locale: str = Depends(get_request_locale),
    plant_service: PlantService = Depends(get_plant_service),
) -> List[PlantResponse]:
    now = plant_service.now()
    plants = await plant_service.list_plants()
    return [PlantResponse.from_domain(plant, locale, now) for plant in plants]


@plants_router.post(
    "/",
    response_model=PlantMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a plant",
    responses={
        201: {"description": "Plant created"},
        422: {"description": "Invalid plant data"},
    },
)
async def add_plant(
    request: PlantCreateRequest,
    locale: str = Depends(get_request_locale),
    plant_service: PlantService = Depends(get_plant_service),
) -> PlantMutationResponse:
    plant = await plant_service.add_plant(**request.model_dump())
    return PlantMutationResponse(
        **localized_payload("plants.added", locale),
        plant=PlantResponse.from_domain(plant, locale, plant_service.now()),
    )


@plants_router.put(
    "/{plant_id}/water",
    response_model=PlantMutationResponse,
    summary="Water a plant",
    responses={404: {"description": "Plant not found"}},
)
async def water_plant(
    plant_id: str,
    locale: str = Depends(get_request_locale),
    plant_service: PlantService = Depends(get_plant_service),
) -> PlantMutationResponse:
    plant = await plant_service.water_plant(plant_id)
    return PlantMutationResponse(
        **localized_payload("plants.watered", locale),
        plant=PlantResponse.from_domain(plant, locale, plant_service.now()),
    )


@plants_router.put(
    "/{plant_id}",
    response_model=PlantMutationResponse,
    summary="Update a plant",
    responses={404: {"description": "Plant not found"}},
)
async def update_plant(
    plant_id: str,
    request: PlantUpdateRequest,
    locale: str = Depends(get_request_locale),
    plant_service: PlantService = Depends(get_plant_service),
) -> PlantMutationResponse:
    plant = await plant_service.update_plant(plant_id, request.model_dump(exclude_unset=True))
    return PlantMutationResponse(
        **localized_payload("plants.updated", locale),
        plant=PlantResponse.from_domain(plant, locale, plant_service.now()),
    )


@plants_router.delete(
    "/{plant_id}",
    response_model=PlantDeletedResponse,
    summary="Delete a plant",
    responses={404: {"description": "Plant not found"}},
)
async def delete_plant(
    plant_id: str,
    locale: str = Depends(get_request_locale),
    plant_service: PlantService = Depends(get_plant_service),
) -> PlantDeletedResponse:
    await plant_service.delete_plant(plant_id)
    return PlantDeletedResponse(**localized_payload("plants.deleted", locale))
