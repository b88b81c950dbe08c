# 📄 File: ecopilot/modules/weather/infrastructure/openweather_client.py
# 🧭 Purpose (Layman Explanation):
# Asks OpenWeatherMap what the weather is like at your position.
# 🧪 Purpose (Technical Summary):
# WeatherProvider implementation calling the OpenWeather /weather endpoint (metric
# units, localized descriptions) through the shared APIClient.
# 🔗 Dependencies:
# APIClient (aiohttp + tenacity + circuit breaker), settings, WeatherObservation
# 🔄 Connected Modules / Calls From:
# weather presentation dependencies

import logging
from typing import Any, Dict, Optional

from ecopilot.shared.config.settings import Settings, get_settings
from ecopilot.shared.core.exceptions import ExternalAPIError
from ecopilot.shared.infrastructure.external_apis import APIClient

from ..domain.models.weather import WeatherObservation
from ..domain.repositories.weather_provider import WeatherProvider

logger = logging.getLogger(__name__)


class OpenWeatherClient(WeatherProvider):
    """OpenWeatherMap current weather client."""

    def __init__(self, api_key: str, settings: Optional[Settings] = None, api_client: Optional[APIClient] = None):
        settings = settings or get_settings()
        self.api_key = api_key
        self.api_client = api_client or APIClient(
            base_url=settings.OPENWEATHER_API_URL,
            api_name="openweather",
            timeout=settings.EXTERNAL_API_TIMEOUT,
            max_retries=settings.EXTERNAL_API_MAX_RETRIES,
        )

    async def current(self, latitude: float, longitude: float, locale: str) -> WeatherObservation:
        params = {
            "lat": latitude,
            "lon": longitude,
            "appid": self.api_key,
            "units": "metric",
            "lang": locale,
        }
        data = await self.api_client.get("weather", params=params)
        return self.parse_observation(data)

    @staticmethod
    def parse_observation(data: Dict[str, Any]) -> WeatherObservation:
        """
        Map an OpenWeather payload to an observation.

        Raises:
            ExternalAPIError: When mandatory fields are missing
        """
        try:
            return WeatherObservation(
                temperature=data["main"]["temp"],
                humidity=data["main"]["humidity"],
                description=data["weather"][0]["description"],
                wind_speed=data.get("wind", {}).get("speed", 0.0),
                city=data.get("name", ""),
                country=data.get("sys", {}).get("country", ""),
                is_mock=False,
            )
        except (KeyError, IndexError, TypeError) as e:
            raise ExternalAPIError(f"Unexpected OpenWeather payload: {e}", api_name="openweather") from e

    async def close(self) -> None:
        await self.api_client.close()
