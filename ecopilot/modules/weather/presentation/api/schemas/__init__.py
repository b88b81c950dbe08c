from .weather_schemas import WeatherAlertResponse, WeatherAlertsResponse

__all__ = ["WeatherAlertResponse", "WeatherAlertsResponse"]
