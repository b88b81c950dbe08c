from .geo import EARTH_RADIUS_KM, format_distance, haversine_km, is_at_home
from .location_tracker import LocationTracker
from .notification_debouncer import NotificationDebouncer, NotificationInbox
from .notification_sink import LoggingNotificationSink, NotificationSink
from .zone_classifier import ZoneClassifier

__all__ = [
    "EARTH_RADIUS_KM",
    "LocationTracker",
    "LoggingNotificationSink",
    "NotificationDebouncer",
    "NotificationInbox",
    "NotificationSink",
    "ZoneClassifier",
    "format_distance",
    "haversine_km",
    "is_at_home",
]
