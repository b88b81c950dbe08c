# 📄 File: ecopilot/modules/weather/domain/repositories/weather_provider.py
# 🧭 Purpose (Layman Explanation):
# The contract a weather service must follow to feed EcoPilot.
# 🧪 Purpose (Technical Summary):
# Abstract provider of current weather observations.
# 🔗 Dependencies:
# abc, WeatherObservation
# 🔄 Connected Modules / Calls From:
# OpenWeatherClient (implementation), WeatherService, tests (fakes)

from abc import ABC, abstractmethod

from ..models.weather import WeatherObservation


class WeatherProvider(ABC):
    """Abstract source of current weather."""

    @abstractmethod
    async def current(self, latitude: float, longitude: float, locale: str) -> WeatherObservation:
        """
        Current conditions at a coordinate pair.

        Raises:
            ExternalAPIError: When the provider cannot answer
        """
        pass
