from .weather_provider import WeatherProvider

__all__ = ["WeatherProvider"]
