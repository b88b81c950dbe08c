# 📄 File: ecopilot/modules/location_tracking/domain/services/notification_debouncer.py
# 🧭 Purpose (Layman Explanation):
# Stops EcoPilot from nagging: the same reminder cannot be sent again for a few minutes,
# and only the ten latest reminders are kept in the in-app inbox.
# 🧪 Purpose (Technical Summary):
# Per-key cooldown gate over composite (type, subject) keys and a bounded,
# newest-first notification inbox with read tracking.
# 🔗 Dependencies:
# collections.deque, datetime, notification models, shared exceptions
# 🔄 Connected Modules / Calls From:
# location_tracker.py, location_service.py (inbox endpoints)

import logging
from collections import deque
from datetime import datetime, timedelta
from typing import Deque, Dict, List, Optional, Tuple

from ecopilot.shared.core.exceptions import NotificationNotFoundError

from ..models.notification import LocationNotification

logger = logging.getLogger(__name__)

NotificationKey = Tuple[str, str]


class NotificationDebouncer:
    """
    Cooldown gate keyed by ``(notification type, subject id)``.

    ``allow`` returns True when the key was never sent or when at least
    ``cooldown`` has elapsed since it was last allowed, and records ``now``
    as the new send time. Denied calls do not touch the stored time.
    """

    def __init__(self, cooldown: timedelta):
        if cooldown < timedelta(0):
            raise ValueError("cooldown cannot be negative")
        self.cooldown = cooldown
        self._last_sent: Dict[NotificationKey, datetime] = {}

    def allow(self, key: NotificationKey, now: datetime) -> bool:
        last = self._last_sent.get(key)
        if last is not None and now - last < self.cooldown:
            logger.debug(f"🔕 Notification {key} suppressed, cooldown active")
            return False
        self._last_sent[key] = now
        return True

    def last_sent(self, key: NotificationKey) -> Optional[datetime]:
        return self._last_sent.get(key)

    def remaining(self, key: NotificationKey, now: datetime) -> timedelta:
        """Time left before ``key`` may fire again (zero when it may fire now)."""
        last = self._last_sent.get(key)
        if last is None:
            return timedelta(0)
        return max(timedelta(0), self.cooldown - (now - last))

    def reset(self, key: Optional[NotificationKey] = None) -> None:
        if key is None:
            self._last_sent.clear()
        else:
            self._last_sent.pop(key, None)


class NotificationInbox:
    """In-app notification list, newest first, capped at ``capacity`` entries."""

    def __init__(self, capacity: int = 10):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: Deque[LocationNotification] = deque(maxlen=capacity)

    def add(self, notification: LocationNotification) -> None:
        # appendleft on a bounded deque drops the oldest entry from the right
        self._items.appendleft(notification)

    def items(self) -> List[LocationNotification]:
        return list(self._items)

    def get(self, notification_id: str) -> LocationNotification:
        for notification in self._items:
            if notification.id == notification_id:
                return notification
        raise NotificationNotFoundError(notification_id)

    def mark_read(self, notification_id: str) -> LocationNotification:
        notification = self.get(notification_id)
        notification.read = True
        return notification

    def mark_all_read(self) -> int:
        count = 0
        for notification in self._items:
            if not notification.read:
                notification.read = True
                count += 1
        return count

    @property
    def unread_count(self) -> int:
        return sum(1 for notification in self._items if not notification.read)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)
