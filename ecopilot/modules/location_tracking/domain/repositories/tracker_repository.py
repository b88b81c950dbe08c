# 📄 File: ecopilot/modules/location_tracking/domain/repositories/tracker_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines where each user's location tracking state is kept between two requests.
# 🧪 Purpose (Technical Summary):
# Repository interface for LocationTracker aggregates keyed by session id, with a
# per-session lock so samples of one session are processed one after another.
# 🔗 Dependencies:
# abc, typing, LocationTracker
# 🔄 Connected Modules / Calls From:
# location_service.py, infrastructure/memory_tracker_repository.py

from abc import ABC, abstractmethod
from typing import AsyncContextManager, List, Optional

from ..services.location_tracker import LocationTracker


class TrackerRepository(ABC):
    """
    Repository interface for LocationTracker data access operations.

    Implementation Notes:
    - Methods return live domain aggregates, not copies
    - All operations are async for non-blocking I/O
    - ``session_lock`` must share one lock between callers of the same session id
    """

    @abstractmethod
    async def get(self, session_id: str) -> Optional[LocationTracker]:
        """
        Get the tracker of a session.

        Args:
            session_id: Tracking session identifier

        Returns:
            LocationTracker if the session exists, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, tracker: LocationTracker) -> LocationTracker:
        """Create or replace the tracker of ``tracker.session_id``."""
        pass

    @abstractmethod
    async def delete(self, session_id: str) -> bool:
        """
        Delete a session.

        Returns:
            True if deleted, False if not found
        """
        pass

    @abstractmethod
    async def list_session_ids(self) -> List[str]:
        pass

    @abstractmethod
    def session_lock(self, session_id: str) -> AsyncContextManager[None]:
        """
        Hold the lock serializing operations on one session.

        The lock is shared by every concurrent caller of the same session id and
        is forgotten once no caller holds or awaits it and the session does not
        exist.
        """
        pass
