from .plants import plants_router

__all__ = ["plants_router"]
