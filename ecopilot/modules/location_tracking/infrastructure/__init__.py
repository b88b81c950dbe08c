from .memory_tracker_repository import InMemoryTrackerRepository

__all__ = ["InMemoryTrackerRepository"]
