"""Every module router is importable and mounted under /api/v1."""

import importlib

import pytest

from ecopilot.api.v1.router import ROUTE_PREFIXES, api_v1_router
from ecopilot.main import create_application


MODULE_PRESENTATION = [
    "ecopilot.modules.care_advice.presentation.api.v1.tavily",
    "ecopilot.modules.care_advice.presentation.api.schemas.care_schemas",
    "ecopilot.modules.geocoding.presentation.api.v1.geocoding",
    "ecopilot.modules.geocoding.presentation.api.schemas.geocoding_schemas",
    "ecopilot.modules.location_tracking.presentation.api.v1.location",
    "ecopilot.modules.location_tracking.presentation.api.schemas.location_schemas",
    "ecopilot.modules.plant_management.presentation.api.v1.plants",
    "ecopilot.modules.plant_management.presentation.api.schemas.plant_schemas",
    "ecopilot.modules.weather.presentation.api.v1.weather",
    "ecopilot.modules.weather.presentation.api.schemas.weather_schemas",
]


@pytest.mark.parametrize("module_name", MODULE_PRESENTATION)
def test_presentation_module_imports(module_name):
    assert importlib.import_module(module_name) is not None


@pytest.mark.parametrize("name", sorted(ROUTE_PREFIXES))
def test_every_module_prefix_has_routes(name):
    prefix = ROUTE_PREFIXES[name]
    paths = [route.path for route in api_v1_router.routes]

    assert any(path.startswith(prefix + "/") or path == prefix for path in paths)


def test_application_mounts_module_routes_under_api_v1():
    app = create_application()
    paths = {route.path for route in app.routes}

    assert "/api/v1/health" in paths
    assert "/api/v1/plants" in paths or "/api/v1/plants/" in paths
    assert "/api/v1/location/{session_id}/help-message" in paths
    assert "/api/v1/geocoding/search" in paths
