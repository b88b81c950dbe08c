from .location import location_router

__all__ = ["location_router"]
