from .notification import (
    HelpMessage,
    HistoryEntry,
    LocationNotification,
    LocationSuggestion,
    NotificationType,
    SensorErrorCode,
    SensorWarning,
    ZoneEvaluation,
    ZoneTransition,
)
from .position import HomeReference, HomeSource, Position, TrackerSettings

__all__ = [
    "HelpMessage",
    "HistoryEntry",
    "HomeReference",
    "HomeSource",
    "LocationNotification",
    "LocationSuggestion",
    "NotificationType",
    "Position",
    "SensorErrorCode",
    "SensorWarning",
    "TrackerSettings",
    "ZoneEvaluation",
    "ZoneTransition",
]
