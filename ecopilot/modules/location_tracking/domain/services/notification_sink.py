# 📄 File: ecopilot/modules/location_tracking/domain/services/notification_sink.py
# 🧭 Purpose (Layman Explanation):
# The "mail slots" a location reminder is dropped into once it is allowed to go out.
# 🧪 Purpose (Technical Summary):
# Platform notification sink interface, a logging sink used by default and a
# best-effort dispatcher that isolates sink failures from tracking.
# 🔗 Dependencies:
# abc, logging, notification models, shared i18n
# 🔄 Connected Modules / Calls From:
# location_tracker.py, location dependencies (sink wiring)

import logging
from abc import ABC, abstractmethod
from typing import Iterable

from ecopilot.shared.core.i18n import pick

from ..models.notification import LocationNotification

logger = logging.getLogger(__name__)


class NotificationSink(ABC):
    """Delivers a notification outside the in-app inbox (push, email, system tray)."""

    @abstractmethod
    def send(self, notification: LocationNotification, locale: str) -> None:
        """
        Deliver one notification.

        Args:
            notification: Notification allowed by the debouncer
            locale: Language the user is currently using
        """


class LoggingNotificationSink(NotificationSink):
    """Writes notifications to the application log."""

    def send(self, notification: LocationNotification, locale: str) -> None:
        logger.info(
            f"🔔 {pick(notification.title, locale)} - {pick(notification.message, locale)}",
            extra={
                "event_type": "location_notification",
                "notification_type": notification.type.value,
                "notification_id": notification.id,
            },
        )


def dispatch(sinks: Iterable[NotificationSink], notification: LocationNotification, locale: str) -> int:
    """
    Send ``notification`` to every sink; delivery is best-effort.

    Returns:
        Number of sinks that accepted the notification
    """
    delivered = 0
    for sink in sinks:
        try:
            sink.send(notification, locale)
            delivered += 1
        except Exception:
            logger.exception(f"❌ Notification sink {type(sink).__name__} failed for {notification.id}")
    return delivered
