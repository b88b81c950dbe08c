from .location_schemas import (
    GeocodeHomeRequest,
    HelpMessageResponse,
    HistoryResponse,
    HomeRequest,
    HomeResponse,
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationResponse,
    PositionSampleRequest,
    SampleResponse,
    SensorErrorRequest,
    SensorWarningResponse,
    SettingsResponse,
    StatusResponse,
    SuggestionResponse,
    TrackerSettingsRequest,
    TrackingStateResponse,
)

__all__ = [
    "GeocodeHomeRequest",
    "HelpMessageResponse",
    "HistoryResponse",
    "HomeRequest",
    "HomeResponse",
    "MarkAllReadResponse",
    "NotificationListResponse",
    "NotificationResponse",
    "PositionSampleRequest",
    "SampleResponse",
    "SensorErrorRequest",
    "SensorWarningResponse",
    "SettingsResponse",
    "StatusResponse",
    "SuggestionResponse",
    "TrackerSettingsRequest",
    "TrackingStateResponse",
]
