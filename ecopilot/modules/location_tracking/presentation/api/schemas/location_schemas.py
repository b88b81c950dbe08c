# 📄 File: ecopilot/modules/location_tracking/presentation/api/schemas/location_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines what the phone sends (positions, home address, settings, sensor errors)
# and what EcoPilot answers, with every message in French and English.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the location tracking endpoints. Bilingual
# domain texts ({fr, en}) are flattened to ``field`` / ``field_fr`` / ``field_en``
# with ``field`` in the request language.
# 🔗 Dependencies:
# pydantic, location domain models, geo.format_distance, shared i18n
# 🔄 Connected Modules / Calls From:
# ecopilot.modules.location_tracking.presentation.api.v1.location

"""
Location Tracking API Schemas

Request Schemas:
- HomeRequest / GeocodeHomeRequest: Set the home point
- TrackerSettingsRequest: Radius, cooldown and hysteresis factor
- PositionSampleRequest: One device position
- SensorErrorRequest: Client geolocation failure

Response Schemas:
- SampleResponse, StatusResponse, NotificationResponse, SuggestionResponse,
  HelpMessageResponse, HistoryResponse and the session confirmation messages
"""

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from ecopilot.shared.core.i18n import pick

from ecopilot.modules.location_tracking.domain.models.notification import (
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
from ecopilot.modules.location_tracking.domain.models.position import HomeReference, Position, TrackerSettings
from ecopilot.modules.location_tracking.domain.services.geo import format_distance


def localized(texts: Dict[str, str], locale: str, field: str) -> Dict[str, str]:
    return {
        field: pick(texts, locale),
        f"{field}_fr": texts.get("fr", ""),
        f"{field}_en": texts.get("en", ""),
    }


def _distance_text(distance_km: Optional[float]) -> Optional[str]:
    return format_distance(distance_km) if distance_km is not None else None


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class HomeRequest(BaseModel):
    """Home coordinates entered by the user."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    label: Optional[str] = Field(None, max_length=300)

    model_config = {
        "json_schema_extra": {"example": {"latitude": 45.4215, "longitude": -75.6972, "label": "Ottawa"}}
    }


class GeocodeHomeRequest(BaseModel):
    """Home given as a postal address."""

    address: str = Field(..., min_length=5, max_length=300)


class TrackerSettingsRequest(BaseModel):
    """Partial settings update; omitted fields keep their value."""

    home_radius_m: Optional[int] = Field(None, description="Home radius in meters (50-500)")
    cooldown_minutes: Optional[int] = Field(None, description="Minutes between two notifications of a kind (5-10)")
    exit_radius_factor: Optional[float] = Field(None, description="Exit radius as a multiple of the home radius")


class PositionSampleRequest(Position):
    """Position reported by the device geolocation API."""

    model_config = {
        "json_schema_extra": {
            "example": {"latitude": 45.4215, "longitude": -75.6972, "accuracy": 12.0}
        }
    }

    def to_domain(self) -> Position:
        return Position(**self.model_dump())


class SensorErrorRequest(BaseModel):
    """Geolocation failure; ``code`` accepts names or the numeric codes 1-3."""

    code: Union[int, str]
    message: Optional[str] = Field(None, max_length=500)


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class MessageResponse(BaseModel):
    message: str
    message_fr: str
    message_en: str


class TrackingStateResponse(MessageResponse):
    session_id: str
    is_tracking: bool


class HomeResponse(MessageResponse):
    session_id: str
    home: HomeReference


class SettingsResponse(MessageResponse):
    session_id: str
    settings: TrackerSettings


class NotificationResponse(BaseModel):
    id: str
    type: NotificationType
    title: str
    title_fr: str
    title_en: str
    message: str
    message_fr: str
    message_en: str
    created_at: datetime
    read: bool
    distance_km: float
    distance_text: str
    is_at_home: bool
    plants_count: int

    @classmethod
    def from_domain(cls, notification: LocationNotification, locale: str) -> "NotificationResponse":
        return cls(
            id=notification.id,
            type=notification.type,
            **localized(notification.title, locale, "title"),
            **localized(notification.message, locale, "message"),
            created_at=notification.created_at,
            read=notification.read,
            distance_km=notification.distance_km,
            distance_text=format_distance(notification.distance_km),
            is_at_home=notification.is_at_home,
            plants_count=notification.plants_count,
        )


class NotificationListResponse(BaseModel):
    notifications: List[NotificationResponse]
    unread_count: int
    total: int


class MarkAllReadResponse(BaseModel):
    marked: int
    unread_count: int


class SampleResponse(BaseModel):
    distance_km: float
    distance_text: str
    is_at_home: bool
    transition: Optional[ZoneTransition] = None
    home_auto_set: bool
    plants_needing_water: int
    notification: Optional[NotificationResponse] = None
    notification_suppressed: bool

    @classmethod
    def from_domain(cls, evaluation: ZoneEvaluation, locale: str) -> "SampleResponse":
        return cls(
            distance_km=evaluation.distance_km,
            distance_text=format_distance(evaluation.distance_km),
            is_at_home=evaluation.is_at_home,
            transition=evaluation.transition,
            home_auto_set=evaluation.home_auto_set,
            plants_needing_water=evaluation.plants_needing_water,
            notification=(
                NotificationResponse.from_domain(evaluation.notification, locale)
                if evaluation.notification is not None
                else None
            ),
            notification_suppressed=evaluation.notification_suppressed,
        )


class SensorWarningResponse(BaseModel):
    code: SensorErrorCode
    title: str
    title_fr: str
    title_en: str
    message: str
    message_fr: str
    message_en: str
    raw_message: Optional[str] = None
    occurred_at: datetime
    is_tracking: bool = False

    @classmethod
    def from_domain(cls, warning: SensorWarning, locale: str) -> "SensorWarningResponse":
        return cls(
            code=warning.code,
            **localized(warning.title, locale, "title"),
            **localized(warning.message, locale, "message"),
            raw_message=warning.raw_message,
            occurred_at=warning.occurred_at,
        )


class StatusResponse(BaseModel):
    session_id: str
    is_tracking: bool
    started_at: Optional[datetime] = None
    home: Optional[HomeReference] = None
    settings: TrackerSettings
    is_at_home: bool
    distance_km: Optional[float] = None
    distance_text: Optional[str] = None
    last_position: Optional[Position] = None
    unread_notifications: int
    history_size: int
    last_warning: Optional[SensorWarningResponse] = None

    @classmethod
    def from_status(cls, status: dict, locale: str) -> "StatusResponse":
        warning = status.get("last_warning")
        return cls(
            **{key: value for key, value in status.items() if key != "last_warning"},
            distance_text=_distance_text(status.get("distance_km")),
            last_warning=SensorWarningResponse.from_domain(warning, locale) if warning else None,
        )


class HistoryResponse(BaseModel):
    entries: List[HistoryEntry]
    count: int


class SuggestionResponse(BaseModel):
    icon: str
    action: Optional[str] = None
    message: str
    message_fr: str
    message_en: str
    plants: List[str]

    @classmethod
    def from_domain(cls, suggestion: LocationSuggestion, locale: str) -> "SuggestionResponse":
        return cls(
            icon=suggestion.icon,
            action=suggestion.action,
            **localized(suggestion.message, locale, "message"),
            plants=suggestion.plants,
        )


class HelpMessageResponse(BaseModel):
    subject: str
    subject_fr: str
    subject_en: str
    body: str
    body_fr: str
    body_en: str

    @classmethod
    def from_domain(cls, help_message: HelpMessage, locale: str) -> "HelpMessageResponse":
        return cls(
            **localized(help_message.subject, locale, "subject"),
            **localized(help_message.body, locale, "body"),
        )
