"""Tests for WeatherService (provider, cache and simulated fallback)."""

import pytest

from ecopilot.modules.weather.domain.services.weather_service import WeatherService
from ecopilot.shared.core.exceptions import ExternalAPIError


class TestCurrentWeather:
    async def test_provider_observation_is_enriched(self, weather_service):
        report = await weather_service.current(45.42, -75.69, "en")

        assert report.is_mock is False
        assert report.city == "Ottawa"
        assert report.care_level.value == "perfect"
        assert report.from_cache is False

    async def test_second_call_is_served_from_cache(self, weather_service, weather_provider):
        await weather_service.current(45.42, -75.69, "en")
        report = await weather_service.current(45.42, -75.69, "en")

        assert report.from_cache is True
        assert weather_provider.calls == 1

    async def test_cache_is_per_language(self, weather_service, weather_provider):
        await weather_service.current(45.42, -75.69, "en")
        await weather_service.current(45.42, -75.69, "fr")
        assert weather_provider.calls == 2

    async def test_provider_failure_falls_back_to_simulation(self, weather_service, weather_provider):
        weather_provider.error = ExternalAPIError("timeout", api_name="openweather")

        report = await weather_service.current(45.42, -75.69, "fr")

        assert report.is_mock is True
        assert report.error == "Service externe temporairement indisponible"

    async def test_without_provider_weather_is_simulated(self):
        service = WeatherService()
        report = await service.current(45.42, -75.69, "en")
        assert report.is_mock is True
        assert report.error is None

    async def test_clear_cache(self, weather_service, weather_provider):
        await weather_service.current(45.42, -75.69)
        weather_service.clear_cache()
        await weather_service.current(45.42, -75.69)
        assert weather_provider.calls == 2


class TestForecastAndAlerts:
    @pytest.mark.parametrize("days,expected", [(5, 5), (0, 1), (30, 14)])
    async def test_forecast_days_are_clamped(self, weather_service, days, expected):
        forecast = await weather_service.forecast(45.42, -75.69, "en", days)
        assert len(forecast.forecast) == expected

    async def test_alerts_from_current_conditions(self, weather_service, weather_provider):
        weather_provider.temperature = 35
        weather_provider.humidity = 25

        alerts = await weather_service.alerts(45.42, -75.69, "en")

        assert {alert.type for alert in alerts} == {"heat", "dry"}
