from .geocoding import geocoding_router

__all__ = ["geocoding_router"]
