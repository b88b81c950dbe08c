# 📄 File: ecopilot/modules/plant_management/domain/models/plant.py
# 🧭 Purpose (Layman Explanation):
# Describes a houseplant: its name in French and English, where it lives, when it
# was last watered and how often it needs water.
# 🧪 Purpose (Technical Summary):
# Plant domain entity with bilingual fields, watering schedule and derived
# watering state (days since watered, needs water) with French fallbacks.
# 🔗 Dependencies:
# pydantic, datetime, uuid, ecopilot.shared.core.i18n
# 🔄 Connected Modules / Calls From:
# plant_repository.py, plant_service.py, plant schemas, location_service.py

import math
import uuid
from datetime import datetime, timezone
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

from ecopilot.shared.core.i18n import DEFAULT_LOCALE, resolve_locale

DEFAULT_WATERING_FREQUENCY_DAYS = 7
SECONDS_PER_DAY = 24 * 60 * 60


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Plant(BaseModel):
    """
    Plant domain model.

    ``name``/``location`` hold the text the user typed; ``name_fr``/``name_en``
    and ``location_fr``/``location_en`` hold translations and fall back to it.
    """

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    name: str = Field(..., min_length=1, max_length=100)
    name_fr: Optional[str] = None
    name_en: Optional[str] = None
    species: Optional[str] = None
    location: Optional[str] = None
    location_fr: Optional[str] = None
    location_en: Optional[str] = None
    last_watered: datetime = Field(default_factory=_utc_now)
    watering_frequency: int = Field(DEFAULT_WATERING_FREQUENCY_DAYS, ge=1, le=365)
    created_at: datetime = Field(default_factory=_utc_now)
    tips: Dict[str, str] = Field(default_factory=lambda: {"fr": "", "en": ""})

    model_config = {"validate_assignment": True}

    @field_validator("last_watered", "created_at")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Naive datetimes are taken as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        name = v.strip()
        if not name:
            raise ValueError("Plant name cannot be empty")
        return name

    # Business Logic Methods

    def days_since_watered(self, now: Optional[datetime] = None) -> int:
        """Whole days elapsed since the last watering (floored)."""
        elapsed = (now or _utc_now()) - self.last_watered
        return math.floor(elapsed.total_seconds() / SECONDS_PER_DAY)

    def needs_water(self, now: Optional[datetime] = None) -> bool:
        elapsed = (now or _utc_now()) - self.last_watered
        return elapsed.total_seconds() / SECONDS_PER_DAY >= self.watering_frequency

    def water(self, now: Optional[datetime] = None) -> None:
        self.last_watered = now or _utc_now()

    def display_name(self, locale: Optional[str] = None) -> str:
        if resolve_locale(locale) == "en":
            return self.name_en or self.name
        return self.name_fr or self.name

    def display_location(self, locale: Optional[str] = None) -> Optional[str]:
        if resolve_locale(locale) == "en":
            return self.location_en or self.location
        return self.location_fr or self.location

    def current_tip(self, locale: Optional[str] = None) -> str:
        return self.tips.get(resolve_locale(locale)) or self.tips.get(DEFAULT_LOCALE) or ""
