from .weather import (
    AlertSeverity,
    CareLevel,
    Forecast,
    ForecastDay,
    WeatherAlert,
    WeatherObservation,
    WeatherReport,
)

__all__ = [
    "AlertSeverity",
    "CareLevel",
    "Forecast",
    "ForecastDay",
    "WeatherAlert",
    "WeatherObservation",
    "WeatherReport",
]
