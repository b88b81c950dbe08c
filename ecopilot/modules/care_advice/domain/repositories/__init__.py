from .search_provider import SearchProvider

__all__ = ["SearchProvider"]
