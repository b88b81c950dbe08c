from .geocoding_service import GeocodingService, format_address

__all__ = ["GeocodingService", "format_address"]
