from .tracker_repository import TrackerRepository

__all__ = ["TrackerRepository"]
