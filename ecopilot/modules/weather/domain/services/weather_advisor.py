# 📄 File: ecopilot/modules/weather/domain/services/weather_advisor.py
# 🧭 Purpose (Layman Explanation):
# Reads the weather like a gardener would: too hot and dry means more water, too
# cold means less, and some conditions deserve a warning.
# 🧪 Purpose (Technical Summary):
# Pure rule functions mapping temperature/humidity to a care level, a watering
# multiplier, bilingual advice and plant weather alerts.
# 🔗 Dependencies:
# weather models, shared i18n
# 🔄 Connected Modules / Calls From:
# weather_service.py, tests

from typing import List

from ecopilot.shared.core.i18n import bilingual, resolve_locale

from ..models.weather import AlertSeverity, CareLevel, WeatherAlert, WeatherObservation, WeatherReport

_WATERING_MULTIPLIERS = {
    CareLevel.HIGH: 1.3,
    CareLevel.LOW: 0.7,
    CareLevel.MEDIUM: 0.8,
}


def care_level(temperature: float, humidity: float) -> CareLevel:
    """First matching rule wins."""
    if temperature > 25 and humidity < 50:
        return CareLevel.HIGH
    if temperature < 15:
        return CareLevel.LOW
    if humidity > 70:
        return CareLevel.MEDIUM
    if 18 <= temperature <= 24 and 40 <= humidity <= 60:
        return CareLevel.PERFECT
    return CareLevel.NORMAL


def watering_multiplier(temperature: float, humidity: float) -> float:
    return _WATERING_MULTIPLIERS.get(care_level(temperature, humidity), 1.0)


def plant_alerts(temperature: float, humidity: float) -> List[WeatherAlert]:
    alerts = []
    if temperature > 30:
        alerts.append(WeatherAlert(type="heat", severity=AlertSeverity.HIGH, message=bilingual("weather.alert.heat")))
    if temperature < 10:
        alerts.append(WeatherAlert(type="cold", severity=AlertSeverity.MEDIUM, message=bilingual("weather.alert.cold")))
    if humidity < 30:
        alerts.append(WeatherAlert(type="dry", severity=AlertSeverity.MEDIUM, message=bilingual("weather.alert.dry")))
    return alerts


def enrich(observation: WeatherObservation, locale: str) -> WeatherReport:
    """Attach plant advice to an observation."""
    locale = resolve_locale(locale)
    level = care_level(observation.temperature, observation.humidity)
    advice = bilingual(f"weather.advice.{level.value}")
    return WeatherReport(
        **observation.model_dump(),
        language=locale,
        plant_advice=advice[locale],
        plant_advice_fr=advice["fr"],
        plant_advice_en=advice["en"],
        care_level=level,
        watering_multiplier=_WATERING_MULTIPLIERS.get(level, 1.0),
        ideal_for_plants=level is CareLevel.PERFECT,
    )
