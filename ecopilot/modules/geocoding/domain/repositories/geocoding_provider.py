# 📄 File: ecopilot/modules/geocoding/domain/repositories/geocoding_provider.py
# 🧭 Purpose (Layman Explanation):
# The contract any map service must follow to be used by EcoPilot.
# 🧪 Purpose (Technical Summary):
# Abstract geocoding provider returning raw provider payloads; the domain service
# maps them to AddressSuggestion / ReverseGeocodeResult.
# 🔗 Dependencies:
# abc, typing
# 🔄 Connected Modules / Calls From:
# NominatimClient (implementation), GeocodingService, tests (fakes)

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class GeocodingProvider(ABC):
    """Abstract geocoding data source."""

    @abstractmethod
    async def search(self, query: str, locale: str) -> List[Dict[str, Any]]:
        """Forward geocoding: raw result entries for a free-text query."""
        pass

    @abstractmethod
    async def reverse(self, latitude: float, longitude: float, locale: str) -> Dict[str, Any]:
        """Reverse geocoding: raw result for a coordinate pair."""
        pass
