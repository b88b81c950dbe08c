# 📄 File: ecopilot/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for version 1 of the API: plant requests go to the plant
# handlers, weather requests to the weather handlers, and so on.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregating every module router under its prefix.
# 🔗 Dependencies:
# FastAPI, ecopilot.api.v1.health, ecopilot.modules.*.presentation.api.v1
# 🔄 Connected Modules / Calls From:
# ecopilot.main

import logging

from fastapi import APIRouter

from ecopilot.modules.care_advice.presentation.api.v1 import tavily_router
from ecopilot.modules.geocoding.presentation.api.v1 import geocoding_router
from ecopilot.modules.location_tracking.presentation.api.v1 import location_router
from ecopilot.modules.plant_management.presentation.api.v1 import plants_router
from ecopilot.modules.weather.presentation.api.v1 import weather_router

from .health import health_router

logger = logging.getLogger(__name__)

ROUTE_PREFIXES = {
    "plants": "/plants",
    "weather": "/weather",
    "tavily": "/tavily",
    "location": "/location",
    "geocoding": "/geocoding",
}

api_v1_router = APIRouter()

# Health check router (no prefix - direct access)
api_v1_router.include_router(health_router)

api_v1_router.include_router(plants_router, prefix=ROUTE_PREFIXES["plants"], tags=["Plants"])
api_v1_router.include_router(weather_router, prefix=ROUTE_PREFIXES["weather"], tags=["Weather"])
api_v1_router.include_router(tavily_router, prefix=ROUTE_PREFIXES["tavily"], tags=["Care Advice"])
api_v1_router.include_router(location_router, prefix=ROUTE_PREFIXES["location"], tags=["Location"])
api_v1_router.include_router(geocoding_router, prefix=ROUTE_PREFIXES["geocoding"], tags=["Geocoding"])
