"""Shared fixtures: fake clocks, fake external providers and an app client."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from ecopilot.main import create_application
from ecopilot.modules.care_advice.domain.repositories.search_provider import SearchProvider
from ecopilot.modules.care_advice.domain.services.care_advice_service import CareAdviceService
from ecopilot.modules.care_advice.presentation.dependencies import get_care_advice_service
from ecopilot.modules.geocoding.domain.repositories.geocoding_provider import GeocodingProvider
from ecopilot.modules.geocoding.domain.services.geocoding_service import GeocodingService
from ecopilot.modules.geocoding.presentation.dependencies import get_geocoding_service
from ecopilot.modules.location_tracking.domain.services.notification_sink import NotificationSink
from ecopilot.modules.location_tracking.infrastructure.memory_tracker_repository import InMemoryTrackerRepository
from ecopilot.modules.location_tracking.presentation.dependencies import get_tracker_repository
from ecopilot.modules.plant_management.domain.services.plant_service import PlantService
from ecopilot.modules.plant_management.infrastructure.memory_plant_repository import (
    InMemoryPlantRepository,
    demo_plants,
)
from ecopilot.modules.plant_management.presentation.dependencies import get_plant_service
from ecopilot.modules.weather.domain.models.weather import WeatherObservation
from ecopilot.modules.weather.domain.repositories.weather_provider import WeatherProvider
from ecopilot.modules.weather.domain.services.weather_service import WeatherService
from ecopilot.modules.weather.presentation.dependencies import get_weather_service
from ecopilot.shared.config.settings import Settings


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: Any) -> None:
        self.now += timedelta(**kwargs)


class RecordingSink(NotificationSink):
    def __init__(self):
        self.sent: List[tuple] = []

    def send(self, notification, locale: str) -> None:
        self.sent.append((notification, locale))


class FakeGeocodingProvider(GeocodingProvider):
    def __init__(self):
        self.search_results: List[Dict[str, Any]] = []
        self.reverse_data: Dict[str, Any] = {}
        self.error: Optional[Exception] = None
        self.calls: List[tuple] = []

    async def search(self, query: str, locale: str) -> List[Dict[str, Any]]:
        self.calls.append(("search", query, locale))
        if self.error:
            raise self.error
        return self.search_results

    async def reverse(self, latitude: float, longitude: float, locale: str) -> Dict[str, Any]:
        self.calls.append(("reverse", latitude, longitude, locale))
        if self.error:
            raise self.error
        return self.reverse_data


class FakeWeatherProvider(WeatherProvider):
    def __init__(self, temperature: float = 21.0, humidity: float = 50.0):
        self.temperature = temperature
        self.humidity = humidity
        self.error: Optional[Exception] = None
        self.calls = 0

    async def current(self, latitude: float, longitude: float, locale: str) -> WeatherObservation:
        self.calls += 1
        if self.error:
            raise self.error
        return WeatherObservation(
            temperature=self.temperature,
            humidity=self.humidity,
            description="clear sky",
            wind_speed=3.5,
            city="Ottawa",
            country="CA",
        )


class FakeSearchProvider(SearchProvider):
    def __init__(self):
        self.payload: Dict[str, Any] = {"answer": None, "results": []}
        self.error: Optional[Exception] = None
        self.queries: List[str] = []

    async def search(self, query: str) -> Dict[str, Any]:
        self.queries.append(query)
        if self.error:
            raise self.error
        return self.payload


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 10, 19, 14, 30, tzinfo=timezone.utc))


@pytest.fixture
def settings():
    return Settings(_env_file=None, ENVIRONMENT="test", RATE_LIMIT_ENABLED=False)


@pytest.fixture
def plant_service(clock):
    return PlantService(InMemoryPlantRepository(demo_plants(clock())), clock=clock)


@pytest.fixture
def geocoding_provider():
    return FakeGeocodingProvider()


@pytest.fixture
def geocoding_service(geocoding_provider):
    return GeocodingService(geocoding_provider)


@pytest.fixture
def weather_provider():
    return FakeWeatherProvider()


@pytest.fixture
def weather_service(weather_provider):
    return WeatherService(provider=weather_provider)


@pytest.fixture
def search_provider():
    return FakeSearchProvider()


@pytest.fixture
def care_service(search_provider, clock):
    return CareAdviceService(provider=search_provider, clock=clock)


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def tracker_repository():
    return InMemoryTrackerRepository()


@pytest.fixture
def app(settings, plant_service, geocoding_service, weather_service, care_service, tracker_repository):
    app = create_application(settings)
    app.dependency_overrides[get_plant_service] = lambda: plant_service
    app.dependency_overrides[get_geocoding_service] = lambda: geocoding_service
    app.dependency_overrides[get_weather_service] = lambda: weather_service
    app.dependency_overrides[get_care_advice_service] = lambda: care_service
    app.dependency_overrides[get_tracker_repository] = lambda: tracker_repository
    return app


@pytest.fixture
def client(app):
    # No context manager: the lifespan would reconfigure root logging
    return TestClient(app)
