# 📄 File: ecopilot/modules/weather/domain/models/weather.py
# 🧭 Purpose (Layman Explanation):
# Describes the weather outside (temperature, humidity, wind) and what it means for
# your plants: water more, water less, or carry on as usual.
# 🧪 Purpose (Technical Summary):
# Pydantic models for raw weather observations, plant-enriched weather reports,
# plant weather alerts and daily forecasts.
# 🔗 Dependencies:
# pydantic, enum, datetime
# 🔄 Connected Modules / Calls From:
# weather_advisor.py, weather_service.py, OpenWeatherClient, weather endpoints

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CareLevel(str, Enum):
    """How much attention the current weather asks for"""
    HIGH = "high"          # Hot and dry
    LOW = "low"            # Cool
    MEDIUM = "medium"      # Humid
    PERFECT = "perfect"    # Ideal range
    NORMAL = "normal"


class AlertSeverity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"


class WeatherObservation(BaseModel):
    """Conditions as reported by a provider (or simulated)."""

    temperature: float
    humidity: float
    description: str
    wind_speed: float = 0.0
    city: str
    country: str
    is_mock: bool = False
    error: Optional[str] = None
    observed_at: datetime = Field(default_factory=_utc_now)


class WeatherReport(WeatherObservation):
    """Observation enriched with plant-care advice."""

    language: str
    plant_advice: str
    plant_advice_fr: str
    plant_advice_en: str
    care_level: CareLevel
    watering_multiplier: float
    ideal_for_plants: bool
    from_cache: bool = False


class WeatherAlert(BaseModel):
    type: str
    severity: AlertSeverity
    message: Dict[str, str]


class ForecastDay(BaseModel):
    date: datetime
    temperature: float
    humidity: float
    description: str
    is_mock: bool = True


class Forecast(BaseModel):
    forecast: List[ForecastDay]
    language: str
    is_mock: bool = True
