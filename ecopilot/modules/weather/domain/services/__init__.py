from .mock_weather import MockWeatherGenerator, guess_city
from .weather_advisor import care_level, enrich, plant_alerts, watering_multiplier
from .weather_service import WeatherService

__all__ = [
    "MockWeatherGenerator",
    "WeatherService",
    "care_level",
    "enrich",
    "guess_city",
    "plant_alerts",
    "watering_multiplier",
]
