# 📄 File: ecopilot/modules/weather/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Sets up the weather service once, with the real weather provider when an API key
# is configured and simulated weather otherwise.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the OpenWeather client and WeatherService singletons.
# 🔗 Dependencies:
# functools.lru_cache, settings, OpenWeatherClient, WeatherService
# 🔄 Connected Modules / Calls From:
# weather endpoints, ecopilot.main (shutdown)

import logging
from functools import lru_cache
from typing import Optional

from ecopilot.shared.config.settings import get_settings

from ..domain.services.weather_service import WeatherService
from ..infrastructure.openweather_client import OpenWeatherClient

logger = logging.getLogger(__name__)


@lru_cache()
def get_openweather_client() -> Optional[OpenWeatherClient]:
    settings = get_settings()
    if not settings.has_weather_api_key:
        logger.info("🌤️ No OpenWeather API key configured, weather will be simulated")
        return None
    return OpenWeatherClient(settings.OPENWEATHER_API_KEY, settings)


@lru_cache()
def get_weather_service() -> WeatherService:
    return WeatherService(
        provider=get_openweather_client(),
        cache_ttl=get_settings().WEATHER_CACHE_TTL,
        cache_maxsize=get_settings().WEATHER_CACHE_MAXSIZE,
    )
