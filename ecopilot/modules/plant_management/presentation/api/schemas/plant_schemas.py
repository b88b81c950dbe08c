# 📄 File: ecopilot/modules/plant_management/presentation/api/schemas/plant_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines what the app sends when adding or editing a plant, and what it gets back:
# the plant with its name, place and watering status in the right language.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the plant endpoints, including derived
# watering state and localized display fields computed from the domain entity.
# 🔗 Dependencies:
# pydantic, Plant domain model
# 🔄 Connected Modules / Calls From:
# ecopilot.modules.plant_management.presentation.api.v1.plants

"""
Plant API Schemas

Request Schemas:
- PlantCreateRequest: New plant with optional translations
- PlantUpdateRequest: Partial update, every field optional

Response Schemas:
- PlantResponse: Plant with watering state and localized display fields
- PlantMutationResponse: Bilingual confirmation message plus the plant
- PlantDeletedResponse: Bilingual confirmation message
"""

from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

from ecopilot.modules.plant_management.domain.models.plant import Plant


class PlantCreateRequest(BaseModel):
    """Plant creation request."""

    name: str = Field(..., min_length=1, max_length=100, description="Plant name as typed by the user")
    name_fr: Optional[str] = Field(None, max_length=100)
    name_en: Optional[str] = Field(None, max_length=100)
    species: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=100, description="Where the plant lives")
    location_fr: Optional[str] = Field(None, max_length=100)
    location_en: Optional[str] = Field(None, max_length=100)
    last_watered: Optional[datetime] = None
    watering_frequency: Optional[int] = Field(None, ge=1, le=365, description="Days between waterings")
    tips: Optional[Dict[str, str]] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Ficus",
                "species": "Ficus lyrata",
                "location": "Chambre",
                "watering_frequency": 7,
            }
        }
    }

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Plant name cannot be empty")
        return v.strip()


class PlantUpdateRequest(BaseModel):
    """Partial plant update; only fields present in the body are applied."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    name_fr: Optional[str] = Field(None, max_length=100)
    name_en: Optional[str] = Field(None, max_length=100)
    species: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=100)
    location_fr: Optional[str] = Field(None, max_length=100)
    location_en: Optional[str] = Field(None, max_length=100)
    last_watered: Optional[datetime] = None
    watering_frequency: Optional[int] = Field(None, ge=1, le=365)
    tips: Optional[Dict[str, str]] = None


class PlantResponse(BaseModel):
    """Plant as returned to clients."""

    id: str
    name: str
    name_fr: Optional[str] = None
    name_en: Optional[str] = None
    species: Optional[str] = None
    location: Optional[str] = None
    location_fr: Optional[str] = None
    location_en: Optional[str] = None
    last_watered: datetime
    watering_frequency: int
    created_at: datetime
    tips: Dict[str, str]
    needs_water: bool
    days_since_watered: int
    display_name: str
    display_location: Optional[str] = None
    current_tip: str
    language: str

    @classmethod
    def from_domain(cls, plant: Plant, locale: str, now: Optional[datetime] = None) -> "PlantResponse":
        return cls(
            **plant.model_dump(),
            needs_water=plant.needs_water(now),
            days_since_watered=plant.days_since_watered(now),
            display_name=plant.display_name(locale),
            display_location=plant.display_location(locale),
            current_tip=plant.current_tip(locale),
            language=locale,
        )


class PlantDeletedResponse(BaseModel):
    message: str
    message_fr: str
    message_en: str


class PlantMutationResponse(PlantDeletedResponse):
    plant: PlantResponse
