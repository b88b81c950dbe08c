# 📄 File: ecopilot/modules/weather/domain/services/weather_service.py
# 🧭 Purpose (Layman Explanation):
# Gets the weather for where you are, remembers it for ten minutes, and falls back
# to simulated weather when the real service is missing or down.
# 🧪 Purpose (Technical Summary):
# Domain service combining an optional WeatherProvider, a MemoryCache keyed by
# (lat, lon, locale), the mock generator and the plant advisor.
# 🔗 Dependencies:
# WeatherProvider, MemoryCache, weather_advisor, mock_weather, shared exceptions
# 🔄 Connected Modules / Calls From:
# weather endpoints, tests

import logging
from typing import List, Optional

from ecopilot.shared.core.exceptions import ExternalAPIError, RateLimitError
from ecopilot.shared.core.i18n import resolve_locale, translate
from ecopilot.shared.infrastructure.cache import MemoryCache

from ..models.weather import Forecast, WeatherAlert, WeatherReport
from ..repositories.weather_provider import WeatherProvider
from .mock_weather import MockWeatherGenerator
from .weather_advisor import enrich, plant_alerts

logger = logging.getLogger(__name__)

WEATHER_CACHE_TTL_SECONDS = 10 * 60
WEATHER_CACHE_MAXSIZE = 512
MAX_FORECAST_DAYS = 14


class WeatherService:
    """
    Domain service for weather-aware plant care.

    Without a provider (no API key) every answer is simulated. Provider
    failures are logged and answered with simulated data flagged ``error``.
    """

    def __init__(
        self,
        provider: Optional[WeatherProvider] = None,
        cache: Optional[MemoryCache] = None,
        mock_generator: Optional[MockWeatherGenerator] = None,
        cache_ttl: float = WEATHER_CACHE_TTL_SECONDS,
        cache_maxsize: int = WEATHER_CACHE_MAXSIZE,
    ):
        self.provider = provider
        self.cache = cache if cache is not None else MemoryCache(ttl=cache_ttl, maxsize=cache_maxsize)
        self.mock_generator = mock_generator or MockWeatherGenerator()

    @staticmethod
    def _cache_key(latitude: float, longitude: float, locale: str) -> tuple:
        return ("current", round(latitude, 4), round(longitude, 4), locale)

    async def current(self, latitude: float, longitude: float, locale: Optional[str] = None) -> WeatherReport:
        """
        Current weather with plant advice.

        Cached answers are returned with ``from_cache`` set.
        """
        locale = resolve_locale(locale)
        cache_key = self._cache_key(latitude, longitude, locale)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached.model_copy(update={"from_cache": True})

        if self.provider is None:
            observation = self.mock_generator.current(latitude, longitude, locale)
        else:
            try:
                observation = await self.provider.current(latitude, longitude, locale)
            except (ExternalAPIError, RateLimitError) as e:
                logger.warning(f"⚠️ Weather provider failed, using simulated data: {e}")
                observation = self.mock_generator.current(
                    latitude,
                    longitude,
                    locale,
                    error=translate("errors.external_service", locale),
                )

        report = enrich(observation, locale)
        self.cache.set(cache_key, report)
        logger.info(
            f"🌤️ Weather for {report.city}: {report.temperature:.1f}°C, {report.humidity:.0f}% "
            f"-> {report.care_level.value}{' (mock)' if report.is_mock else ''}"
        )
        return report

    async def forecast(self, latitude: float, longitude: float, locale: Optional[str] = None, days: int = 5) -> Forecast:
        # Forecasts are always simulated
        locale = resolve_locale(locale)
        days = max(1, min(days, MAX_FORECAST_DAYS))
        return self.mock_generator.forecast(locale, days)

    async def alerts(self, latitude: float, longitude: float, locale: Optional[str] = None) -> List[WeatherAlert]:
        report = await self.current(latitude, longitude, locale)
        return plant_alerts(report.temperature, report.humidity)

    def clear_cache(self) -> None:
        self.cache.clear()
