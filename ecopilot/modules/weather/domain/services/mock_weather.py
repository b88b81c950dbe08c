# 📄 File: ecopilot/modules/weather/domain/services/mock_weather.py
# 🧭 Purpose (Layman Explanation):
# Makes up believable Canadian weather when the real weather service can't be
# reached, so the app keeps working.
# 🧪 Purpose (Technical Summary):
# Simulated observations and forecasts with an injectable random generator; the
# city is guessed from the coordinates (Montréal / Toronto / Ottawa).
# 🔗 Dependencies:
# random, datetime, weather models, shared i18n
# 🔄 Connected Modules / Calls From:
# weather_service.py, tests

import random
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Tuple

from ecopilot.shared.core.i18n import translate

from ..models.weather import Forecast, ForecastDay, WeatherObservation

_DESCRIPTION_KEYS = (
    "weather.description.sunny",
    "weather.description.partly_cloudy",
    "weather.description.cloudy",
)


def guess_city(latitude: float, longitude: float) -> Tuple[str, str]:
    """Rough city guess for simulated data; Ottawa unless another rule matches."""
    city = "Ottawa"
    if latitude > 45.6 and longitude < -73:
        city = "Montréal"
    if latitude > 43.6 and longitude > -80:
        city = "Toronto"
    return city, "CA"


class MockWeatherGenerator:
    """Simulated weather (22-32 °C, 40-80 % humidity, 0-15 wind)."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.rng = rng or random.Random()
        self._clock = clock

    def _description(self, locale: str) -> str:
        return translate(self.rng.choice(_DESCRIPTION_KEYS), locale)

    def current(
        self,
        latitude: float,
        longitude: float,
        locale: str,
        error: Optional[str] = None,
    ) -> WeatherObservation:
        city, country = guess_city(latitude, longitude)
        return WeatherObservation(
            temperature=22 + self.rng.random() * 10,
            humidity=40 + self.rng.random() * 40,
            description=translate("weather.unavailable", locale) if error else self._description(locale),
            wind_speed=self.rng.random() * 15,
            city=city,
            country=country,
            is_mock=True,
            error=error,
            observed_at=self._clock(),
        )

    def forecast(self, locale: str, days: int = 5) -> Forecast:
        today = self._clock()
        return Forecast(
            forecast=[
                ForecastDay(
                    date=today + timedelta(days=offset),
                    temperature=20 + (self.rng.random() - 0.5) * 10,
                    humidity=50 + (self.rng.random() - 0.5) * 20,
                    description=self._description(locale),
                )
                for offset in range(days)
            ],
            language=locale,
        )
