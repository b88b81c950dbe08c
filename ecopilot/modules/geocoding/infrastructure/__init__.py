from .nominatim_client import NominatimClient

__all__ = ["NominatimClient"]
