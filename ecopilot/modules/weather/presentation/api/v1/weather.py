# 📄 File: ecopilot/modules/weather/presentation/api/v1/weather.py
# 🧭 Purpose (Layman Explanation):
# The web doors for the weather widget: today's weather with plant advice, the next
# few days, and warnings when the weather could hurt your plants.
# 🧪 Purpose (Technical Summary):
# FastAPI weather endpoints; missing coordinates are rejected with a bilingual 400.
# 🔗 Dependencies:
# FastAPI router, WeatherService, weather schemas, shared exceptions
# 🔄 Connected Modules / Calls From:
# ecopilot.api.v1.router (mounted under /api/v1/weather)

import logging
from typing import Optional, Tuple

from fastapi import APIRouter, Depends, Query

from ecopilot.shared.core.dependencies import get_request_locale
from ecopilot.shared.core.exceptions import ValidationError

from ecopilot.modules.weather.domain.models.weather import Forecast, WeatherReport
from ecopilot.modules.weather.domain.services.weather_service import WeatherService
from ...dependencies import get_weather_service
from ..schemas.weather_schemas import WeatherAlertResponse, WeatherAlertsResponse

logger = logging.getLogger(__name__)

weather_router = APIRouter()

def get_coordinates(
    lat: Optional[float] = Query(None, ge=-90, le=90, description="Latitude"),
    lon: Optional[float] = Query(None, ge=-180, le=180, description="Longitude"),
) -> Tuple[float, float]:
    """
    Raises:
        ValidationError: When either coordinate is missing
    """
    if lat is None or lon is None:
        raise ValidationError(
            message="Latitude and longitude are required",
            field="lat" if lat is None else "lon",
            translation_key="weather.coordinates_required",
        )
    return lat, lon


@weather_router.get(
    "/current",
    response_model=WeatherReport,
    summary="Current weather with plant advice",
    responses={400: {"description": "Missing coordinates"}},
)
async def get_current_weather(
    coordinates: Tuple[float, float] = Depends(get_coordinates),
    locale: str = Depends(get_request_locale),
    weather_service: WeatherService = Depends(get_weather_service),
) -> WeatherReport:
    return await weather_service.current(*coordinates, locale)


@weather_router.get(
    "/forecast",
    response_model=Forecast,
    summary="Daily forecast",
    responses={400: {"description": "Missing coordinates"}},
)
async def get_forecast(
    coordinates: Tuple[float, float] = Depends(get_coordinates),
    days: int = Query(5, description="Number of days, clamped to 1-14"),
    locale: str = Depends(get_request_locale),
    weather_service: WeatherService = Depends(get_weather_service),
) -> Forecast:
    return await weather_service.forecast(*coordinates, locale, days)


@weather_router.get(
    "/alerts",
    response_model=WeatherAlertsResponse,
    summary="Plant weather alerts",
    responses={400: {"description": "Missing coordinates"}},
)
async def get_alerts(
    coordinates: Tuple[float, float] = Depends(get_coordinates),
    locale: str = Depends(get_request_locale),
    weather_service: WeatherService = Depends(get_weather_service),
) -> WeatherAlertsResponse:
    alerts = await weather_service.alerts(*coordinates, locale)
    return WeatherAlertsResponse(
        alerts=[WeatherAlertResponse.from_domain(alert, locale) for alert in alerts],
        count=len(alerts),
        language=locale,
    )
