# 📄 File: ecopilot/modules/weather/presentation/api/schemas/weather_schemas.py
# 🧭 Purpose (Layman Explanation):
# The shape of weather alert answers sent to the app.
# 🧪 Purpose (Technical Summary):
# Response schemas for weather alerts; reports and forecasts reuse the domain models.
# 🔗 Dependencies:
# pydantic, weather models, shared i18n
# 🔄 Connected Modules / Calls From:
# ecopilot.modules.weather.presentation.api.v1.weather

from typing import List

from pydantic import BaseModel

from ecopilot.shared.core.i18n import pick

from ecopilot.modules.weather.domain.models.weather import AlertSeverity, WeatherAlert


class WeatherAlertResponse(BaseModel):
    type: str
    severity: AlertSeverity
    message: str
    message_fr: str
    message_en: str

    @classmethod
    def from_domain(cls, alert: WeatherAlert, locale: str) -> "WeatherAlertResponse":
        return cls(
            type=alert.type,
            severity=alert.severity,
            message=pick(alert.message, locale),
            message_fr=alert.message["fr"],
            message_en=alert.message["en"],
        )


class WeatherAlertsResponse(BaseModel):
    alerts: List[WeatherAlertResponse]
    count: int
    language: str
