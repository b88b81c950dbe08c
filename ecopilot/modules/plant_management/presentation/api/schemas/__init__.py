from .plant_schemas import (
    PlantCreateRequest,
    PlantDeletedResponse,
    PlantMutationResponse,
    PlantResponse,
    PlantUpdateRequest,
)

__all__ = [
    "PlantCreateRequest",
    "PlantDeletedResponse",
    "PlantMutationResponse",
    "PlantResponse",
    "PlantUpdateRequest",
]
