# 📄 File: ecopilot/modules/geocoding/domain/services/geocoding_service.py
# 🧭 Purpose (Layman Explanation):
# Turns a typed address into map coordinates and coordinates back into a readable
# address, and still answers politely when the map service is down.
# 🧪 Purpose (Technical Summary):
# Domain service over a GeocodingProvider: minimum query length, result mapping,
# address formatting, response caching and localized fallbacks on provider errors.
# 🔗 Dependencies:
# GeocodingProvider, MemoryCache, shared i18n and exceptions
# 🔄 Connected Modules / Calls From:
# geocoding endpoints, location_service.py (home geocoding, current address)

import logging
from typing import Any, Dict, List, Optional

from ecopilot.shared.core.exceptions import ExternalAPIError, RateLimitError
from ecopilot.shared.core.i18n import resolve_locale, translate
from ecopilot.shared.infrastructure.cache import MemoryCache

from ..models.address import AddressSuggestion, ReverseGeocodeResult
from ..repositories.geocoding_provider import GeocodingProvider

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 5
GEOCODING_CACHE_TTL_SECONDS = 24 * 60 * 60
GEOCODING_CACHE_MAXSIZE = 2048


def format_address(address: Optional[Dict[str, Any]], locale: str) -> str:
    """
    Short address: house number, road and city (or town).

    Returns the localized "unknown" text without address parts and the
    "incomplete" text when none of the parts is present.
    """
    if not address:
        return translate("address.unknown", locale)

    parts = [
        address.get("house_number"),
        address.get("road"),
        address.get("city") or address.get("town"),
    ]
    formatted = ", ".join(part for part in parts if part)
    return formatted or translate("address.incomplete", locale)


class GeocodingService:
    """
    Domain service for address lookups.

    Provider failures never propagate: searches return no suggestions and
    reverse lookups return localized placeholders.
    """

    def __init__(
        self,
        provider: GeocodingProvider,
        cache: Optional[MemoryCache] = None,
        min_query_length: int = MIN_QUERY_LENGTH,
    ):
        self.provider = provider
        self.cache = cache if cache is not None else MemoryCache(
            ttl=GEOCODING_CACHE_TTL_SECONDS, maxsize=GEOCODING_CACHE_MAXSIZE
        )
        self.min_query_length = min_query_length

    async def search(self, query: str, locale: Optional[str] = None) -> List[AddressSuggestion]:
        """
        Search addresses matching a free-text query.

        Args:
            query: Address typed by the user
            locale: Language of the returned names

        Returns:
            Up to five suggestions; empty for short queries or provider errors
        """
        locale = resolve_locale(locale)
        query = (query or "").strip()
        if len(query) < self.min_query_length:
            return []

        cache_key = ("search", query.lower(), locale)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        try:
            raw_results = await self.provider.search(query, locale)
        except (ExternalAPIError, RateLimitError) as e:
            logger.warning(f"⚠️ Address search failed for '{query}': {e}")
            return []

        suggestions = []
        for result in raw_results:
            suggestion = self._to_suggestion(result)
            if suggestion is not None:
                suggestions.append(suggestion)

        self.cache.set(cache_key, suggestions)
        logger.info(f"🗺️ Address search '{query}' returned {len(suggestions)} result(s)")
        return suggestions

    @staticmethod
    def _to_suggestion(result: Dict[str, Any]) -> Optional[AddressSuggestion]:
        address = result.get("address") or {}
        try:
            return AddressSuggestion(
                address=result.get("display_name", ""),
                latitude=float(result["lat"]),
                longitude=float(result["lon"]),
                city=address.get("city") or address.get("town") or "",
                province=address.get("state") or "",
            )
        except (KeyError, TypeError, ValueError):
            logger.debug(f"Skipping malformed geocoding result: {result}")
            return None

    async def reverse(self, latitude: float, longitude: float, locale: Optional[str] = None) -> ReverseGeocodeResult:
        """Describe a coordinate pair, falling back to localized placeholders."""
        locale = resolve_locale(locale)
        cache_key = ("reverse", round(latitude, 5), round(longitude, 5), locale)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        try:
            data = await self.provider.reverse(latitude, longitude, locale)
        except (ExternalAPIError, RateLimitError) as e:
            logger.warning(f"⚠️ Reverse geocoding failed for {latitude:.5f}, {longitude:.5f}: {e}")
            return self.fallback_result(latitude, longitude, locale)

        address = data.get("address") or {}
        result = ReverseGeocodeResult(
            address=data.get("display_name") or translate("address.unknown", locale),
            city=address.get("city") or address.get("town") or translate("address.unknown_city", locale),
            country=address.get("country") or translate("address.unknown_country", locale),
            formatted=format_address(data.get("address"), locale),
            latitude=latitude,
            longitude=longitude,
            locale=locale,
        )
        self.cache.set(cache_key, result)
        return result

    @staticmethod
    def fallback_result(latitude: float, longitude: float, locale: str) -> ReverseGeocodeResult:
        return ReverseGeocodeResult(
            address=translate("address.unavailable", locale),
            city=translate("address.unknown_city", locale),
            country=translate("address.unknown_country", locale),
            formatted=translate("address.approximate", locale),
            latitude=latitude,
            longitude=longitude,
            is_fallback=True,
            locale=locale,
        )
