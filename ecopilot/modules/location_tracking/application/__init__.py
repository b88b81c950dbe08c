from .location_service import LocationTrackingService

__all__ = ["LocationTrackingService"]
