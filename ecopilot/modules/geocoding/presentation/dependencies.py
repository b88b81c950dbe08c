# 📄 File: ecopilot/modules/geocoding/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Shares one map-service connection across all address lookups.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the Nominatim client and GeocodingService singletons.
# 🔗 Dependencies:
# functools.lru_cache, NominatimClient, GeocodingService
# 🔄 Connected Modules / Calls From:
# geocoding endpoints, location_tracking dependencies, ecopilot.main (shutdown)

from functools import lru_cache

from ..domain.services.geocoding_service import GeocodingService
from ..infrastructure.nominatim_client import NominatimClient


@lru_cache()
def get_nominatim_client() -> NominatimClient:
    return NominatimClient()


@lru_cache()
def get_geocoding_service() -> GeocodingService:
    return GeocodingService(get_nominatim_client())
