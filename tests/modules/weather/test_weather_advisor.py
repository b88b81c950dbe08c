"""Tests for weather-based plant care rules."""

import random

import pytest

from ecopilot.modules.weather.domain.models.weather import AlertSeverity, CareLevel, WeatherObservation
from ecopilot.modules.weather.domain.services.mock_weather import MockWeatherGenerator, guess_city
from ecopilot.modules.weather.domain.services.weather_advisor import (
    care_level,
    enrich,
    plant_alerts,
    watering_multiplier,
)


class TestCareLevel:
    @pytest.mark.parametrize(
        "temperature,humidity,expected",
        [
            (28, 40, CareLevel.HIGH),
            (12, 40, CareLevel.LOW),
            (12, 80, CareLevel.LOW),      # cold wins over humid
            (20, 75, CareLevel.MEDIUM),
            (21, 50, CareLevel.PERFECT),
            (24, 60, CareLevel.PERFECT),
            (26, 55, CareLevel.NORMAL),
            (16, 50, CareLevel.NORMAL),
        ],
    )
    def test_rules(self, temperature, humidity, expected):
        assert care_level(temperature, humidity) is expected

    @pytest.mark.parametrize(
        "temperature,humidity,expected",
        [(28, 40, 1.3), (12, 40, 0.7), (20, 75, 0.8), (21, 50, 1.0), (26, 55, 1.0)],
    )
    def test_watering_multiplier(self, temperature, humidity, expected):
        assert watering_multiplier(temperature, humidity) == expected


class TestAlerts:
    def test_no_alert_in_mild_weather(self):
        assert plant_alerts(21, 50) == []

    def test_heat_and_dry_air(self):
        alerts = plant_alerts(33, 20)

        assert [alert.type for alert in alerts] == ["heat", "dry"]
        assert alerts[0].severity is AlertSeverity.HIGH
        assert alerts[1].severity is AlertSeverity.MEDIUM

    def test_cold(self):
        alerts = plant_alerts(5, 50)
        assert [alert.type for alert in alerts] == ["cold"]
        assert alerts[0].message["en"].startswith("❄️")


class TestEnrich:
    def test_report_carries_bilingual_advice(self):
        observation = WeatherObservation(
            temperature=21, humidity=50, description="clear sky", city="Ottawa", country="CA"
        )
        report = enrich(observation, "en")

        assert report.care_level is CareLevel.PERFECT
        assert report.ideal_for_plants is True
        assert report.plant_advice == report.plant_advice_en == "Perfect conditions for your plants!"
        assert report.plant_advice_fr != report.plant_advice_en
        assert report.language == "en"


class TestMockWeather:
    def test_city_guess(self):
        assert guess_city(40.0, -90.0) == ("Ottawa", "CA")
        assert guess_city(46.0, -81.0) == ("Montréal", "CA")
        assert guess_city(44.0, -79.0) == ("Toronto", "CA")

    def test_current_is_within_simulated_ranges(self):
        generator = MockWeatherGenerator(rng=random.Random(7))
        observation = generator.current(45.42, -75.69, "fr")

        assert 22 <= observation.temperature <= 32
        assert 40 <= observation.humidity <= 80
        assert 0 <= observation.wind_speed <= 15
        assert observation.is_mock is True
        assert observation.error is None

    def test_error_observation_uses_unavailable_description(self):
        generator = MockWeatherGenerator(rng=random.Random(7))
        observation = generator.current(45.42, -75.69, "en", error="boom")
        assert observation.description == "Weather data unavailable"

    def test_forecast_days(self):
        generator = MockWeatherGenerator(rng=random.Random(7))
        forecast = generator.forecast("en", days=3)

        assert len(forecast.forecast) == 3
        assert forecast.is_mock is True
        assert all(15 <= day.temperature <= 25 for day in forecast.forecast)
