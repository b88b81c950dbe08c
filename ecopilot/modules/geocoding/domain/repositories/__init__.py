from .geocoding_provider import GeocodingProvider

__all__ = ["GeocodingProvider"]
