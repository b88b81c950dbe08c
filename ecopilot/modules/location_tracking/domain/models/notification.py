# 📄 File: ecopilot/modules/location_tracking/domain/models/notification.py
# 🧭 Purpose (Layman Explanation):
# Describes the little messages EcoPilot sends when you come home or leave with
# thirsty plants, and the warnings shown when the phone cannot find its position.
# 🧪 Purpose (Technical Summary):
# Domain models for zone transitions, bilingual location notifications, sensor
# warnings and the results returned by the tracker for each processed sample.
# 🔗 Dependencies:
# pydantic, datetime, enum, uuid
# 🔄 Connected Modules / Calls From:
# location_tracker.py, notification_debouncer.py, notification_sink.py, location schemas

import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .position import Position, utc_now


class ZoneTransition(str, Enum):
    """Change of zone between two consecutive samples"""
    ARRIVED = "arrived"
    DEPARTED = "departed"


class NotificationType(str, Enum):
    """Kinds of location notifications, also the first half of the cooldown key"""
    HOME_ARRIVAL = "home-arrival"
    HOME_DEPARTURE = "home-departure"


class SensorErrorCode(str, Enum):
    """Geolocation failures reported by the client"""
    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Any) -> "SensorErrorCode":
        """Accept our names or the numeric W3C GeolocationPositionError codes."""
        numeric = {
            "1": cls.PERMISSION_DENIED,
            "2": cls.POSITION_UNAVAILABLE,
            "3": cls.TIMEOUT,
        }
        text = str(value).strip().lower()
        if text in numeric:
            return numeric[text]
        try:
            return cls(text)
        except ValueError:
            return cls.UNKNOWN


class LocationNotification(BaseModel):
    """
    In-app notification produced on a zone transition.

    Texts are kept in every supported language so the inbox can be rendered
    in whichever language the user switches to later.
    """

    id: str = Field(default_factory=lambda: f"location-{uuid.uuid4().hex[:12]}")
    type: NotificationType
    title: Dict[str, str]
    message: Dict[str, str]
    created_at: datetime = Field(default_factory=utc_now)
    read: bool = False
    distance_km: float
    is_at_home: bool
    plants_count: int


class SensorWarning(BaseModel):
    """Localized warning built from a geolocation failure."""

    code: SensorErrorCode
    title: Dict[str, str]
    message: Dict[str, str]
    raw_message: Optional[str] = None
    occurred_at: datetime = Field(default_factory=utc_now)


class HistoryEntry(BaseModel):
    """One processed sample kept in the session history."""

    position: Position
    distance_km: float
    is_at_home: bool
    recorded_at: datetime = Field(default_factory=utc_now)


class ZoneEvaluation(BaseModel):
    """Outcome of processing one position sample."""

    position: Position
    distance_km: float
    is_at_home: bool
    transition: Optional[ZoneTransition] = None
    home_auto_set: bool = False
    plants_needing_water: int = 0
    notification: Optional[LocationNotification] = None
    notification_suppressed: bool = False


class LocationSuggestion(BaseModel):
    """Next action suggested from the current distance to home."""

    icon: str
    action: Optional[str] = None
    message: Dict[str, str]
    plants: List[str] = Field(default_factory=list)


class HelpMessage(BaseModel):
    """Ready-to-share message asking someone to water the plants."""

    subject: Dict[str, str]
    body: Dict[str, str]
