# 📄 File: ecopilot/modules/location_tracking/infrastructure/memory_tracker_repository.py
# 🧭 Purpose (Layman Explanation):
# Keeps every user's tracking state in the server's memory while the app is running.
# 🧪 Purpose (Technical Summary):
# In-memory TrackerRepository backed by a dict of session id to LocationTracker and
# per-session asyncio locks counted by their holders and waiters.
# 🔗 Dependencies:
# asyncio, contextlib, TrackerRepository
# 🔄 Connected Modules / Calls From:
# location_tracking.presentation.dependencies (singleton wiring), tests

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List, Optional

from ..domain.repositories.tracker_repository import TrackerRepository
from ..domain.services.location_tracker import LocationTracker

logger = logging.getLogger(__name__)


class InMemoryTrackerRepository(TrackerRepository):
    """Process-local session storage; state is lost on restart."""

    def __init__(self):
        self._trackers: Dict[str, LocationTracker] = {}
        self._locks: Dict[str, asyncio.Lock] = {}
        self._lock_users: Dict[str, int] = {}

    async def get(self, session_id: str) -> Optional[LocationTracker]:
        return self._trackers.get(session_id)

    async def save(self, tracker: LocationTracker) -> LocationTracker:
        if tracker.session_id not in self._trackers:
            logger.debug(f"🆕 Tracking session created: {tracker.session_id}")
        self._trackers[tracker.session_id] = tracker
        return tracker

    async def delete(self, session_id: str) -> bool:
        return self._trackers.pop(session_id, None) is not None

    async def list_session_ids(self) -> List[str]:
        return list(self._trackers)

    @asynccontextmanager
    async def session_lock(self, session_id: str) -> AsyncIterator[None]:
        lock = self._locks.get(session_id)
        if lock is None:
            lock = self._locks[session_id] = asyncio.Lock()
        self._lock_users[session_id] = self._lock_users.get(session_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[session_id] -= 1
            if not self._lock_users[session_id]:
                del self._lock_users[session_id]
                if session_id not in self._trackers:
                    del self._locks[session_id]
