# 📄 File: ecopilot/modules/geocoding/infrastructure/nominatim_client.py
# 🧭 Purpose (Layman Explanation):
# Talks to OpenStreetMap's free address service to look up Canadian addresses.
# 🧪 Purpose (Technical Summary):
# GeocodingProvider implementation on the shared APIClient calling the Nominatim
# /search and /reverse endpoints in JSON format.
# 🔗 Dependencies:
# APIClient (aiohttp + tenacity + circuit breaker), settings
# 🔄 Connected Modules / Calls From:
# geocoding presentation dependencies

import logging
from typing import Any, Dict, List, Optional

from ecopilot.shared.config.settings import Settings, get_settings
from ecopilot.shared.infrastructure.external_apis import APIClient

from ..domain.repositories.geocoding_provider import GeocodingProvider

logger = logging.getLogger(__name__)

SEARCH_RESULT_LIMIT = 5


class NominatimClient(GeocodingProvider):
    """OpenStreetMap Nominatim geocoding client."""

    def __init__(self, settings: Optional[Settings] = None, api_client: Optional[APIClient] = None):
        settings = settings or get_settings()
        self.country_codes = settings.GEOCODING_COUNTRY_CODES
        self.api_client = api_client or APIClient(
            base_url=settings.NOMINATIM_URL,
            api_name="nominatim",
            timeout=settings.EXTERNAL_API_TIMEOUT,
            max_retries=settings.EXTERNAL_API_MAX_RETRIES,
        )

    async def search(self, query: str, locale: str) -> List[Dict[str, Any]]:
        params = {
            "format": "json",
            "q": query,
            "countrycodes": self.country_codes,
            "limit": SEARCH_RESULT_LIMIT,
            "addressdetails": 1,
            "accept-language": locale,
        }
        results = await self.api_client.get("search", params=params)
        return results if isinstance(results, list) else []

    async def reverse(self, latitude: float, longitude: float, locale: str) -> Dict[str, Any]:
        params = {
            "format": "json",
            "lat": latitude,
            "lon": longitude,
            "accept-language": locale,
        }
        data = await self.api_client.get("reverse", params=params)
        return data if isinstance(data, dict) else {}

    async def close(self) -> None:
        await self.api_client.close()
