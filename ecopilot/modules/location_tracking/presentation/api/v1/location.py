# 📄 File: ecopilot/modules/location_tracking/presentation/api/v1/location.py
# 🧭 Purpose (Layman Explanation):
# The web doors the phone uses to share its position, set where home is, and get
# "you're home, water your plants" reminders and suggestions.
# 🧪 Purpose (Technical Summary):
# FastAPI endpoints for per-session location tracking: lifecycle, home and settings
# configuration, sample ingestion, sensor error reporting, notification inbox,
# history and derived suggestion/help/address views.
# 🔗 Dependencies:
# FastAPI router, LocationTrackingService, location schemas, shared i18n dependencies
# 🔄 Connected Modules / Calls From:
# ecopilot.api.v1.router (mounted under /api/v1/location)

"""
Location Tracking API Endpoints

Session lifecycle:
- POST /{session_id}/start, POST /{session_id}/stop, DELETE /{session_id}

Configuration:
- PUT /{session_id}/home, POST /{session_id}/home/geocode, PUT /{session_id}/settings

Tracking:
- POST /{session_id}/samples, POST /{session_id}/errors, GET /{session_id}/status

Inbox & views:
- GET /{session_id}/notifications, POST /{session_id}/notifications/{id}/read,
  POST /{session_id}/notifications/read-all, DELETE /{session_id}/notifications
- GET /{session_id}/history, GET /{session_id}/suggestion,
  GET /{session_id}/help-message, GET /{session_id}/address
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from ecopilot.modules.geocoding.domain.models.address import ReverseGeocodeResult
from ecopilot.shared.core.dependencies import get_request_locale
from ecopilot.shared.core.i18n import localized_payload

from ecopilot.modules.location_tracking.application.location_service import LocationTrackingService
from ecopilot.modules.location_tracking.domain.models.position import HomeSource
from ..schemas.location_schemas import (
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
from ...dependencies import get_location_service

logger = logging.getLogger(__name__)

location_router = APIRouter()

SessionId = Annotated[str, Path(pattern=r"^[A-Za-z0-9_-]{1,64}$", description="Client-generated tracking session id")]


# =========================================================================
# SESSION LIFECYCLE
# =========================================================================

@location_router.post(
    "/{session_id}/start",
    response_model=TrackingStateResponse,
    summary="Start location tracking",
)
async def start_tracking(
    session_id: SessionId,
    locale: str = Depends(get_request_locale),
    location_service: LocationTrackingService = Depends(get_location_service),
) -> TrackingStateResponse:
    tracker = await location_service.start(session_id)
    return TrackingStateResponse(
        **localized_payload("location.tracking_started", locale),
        session_id=session_id,
        is_tracking=tracker.is_tracking,
    )


@location_router.post(
    "/{session_id}/stop",
    response_model=TrackingStateResponse,
    summary="Stop location tracking",
    responses={404: {"description": "Session not found"}},
)
async def stop_tracking(
    session_id: SessionId,
    locale: str = Depends(get_request_locale),
    location_service: LocationTrackingService = Depends(get_location_service),
) -> TrackingStateResponse:
    tracker = await location_service.stop(session_id)
    return TrackingStateResponse(
        **localized_payload("location.tracking_stopped", locale),
        session_id=session_id,
        is_tracking=tracker.is_tracking,
    )


@location_router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="End a tracking session",
    responses={404: {"description": "Session not found"}},
)
async def end_session(
    session_id: SessionId,
    location_service: LocationTrackingService = Depends(get_location_service),
) -> Response:
    await location_service.end_session(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =========================================================================
# CONFIGURATION
# =========================================================================

@location_router.put(
    "/{session_id}/home",
    response_model=HomeResponse,
    summary="Set home coordinates",
)
async def set_home(
    request: HomeRequest,
    session_id: SessionId,
    locale: str = Depends(get_request_locale),
    location_service: LocationTrackingService = Depends(get_location_service),
) -> HomeResponse:
    home = await location_service.set_home(
        session_id,
        request.latitude,
        request.longitude,
        source=HomeSource.MANUAL,
        label=request.label,
    )
    return HomeResponse(**localized_payload("location.home_updated", locale), session_id=session_id, home=home)


@location_router.post(
    "/{session_id}/home/geocode",
    response_model=HomeResponse,
    summary="Set home from an address",
    responses={404: {"description": "Address not found"}},
)
async def geocode_home(
    request: GeocodeHomeRequest,
    session_id: SessionId,
    locale: str = Depends(get_request_locale),
    location_service: LocationTrackingService = Depends(get_location_service),
) -> HomeResponse:
    home = await location_service.geocode_home(session_id, request.address, locale)
    return HomeResponse(**localized_payload("location.home_updated", locale), session_id=session_id, home=home)


@location_router.put(
    "/{session_id}/settings",
    response_model=SettingsResponse,
    summary="Update tracking settings",
    responses={400: {"description": "Value outside the allowed range"}},
)
async def update_settings(
    request: TrackerSettingsRequest,
    session_id: SessionId,
    locale: str = Depends(get_request_locale),
    location_service: LocationTrackingService = Depends(get_location_service),
) -> SettingsResponse:
    settings = await location_service.configure(session_id, **request.model_dump())
    return SettingsResponse(
        **localized_payload("location.settings_updated", locale),
        session_id=session_id,
        settings=settings,
    )


# =========================================================================
# TRACKING
# =========================================================================

@location_router.post(
    "/{session_id}/samples",
    response_model=SampleResponse,
    summary="Submit a position sample",
    responses={
        404: {"description": "Session not found"},
        409: {"description": "Tracking is not active"},
    },
)
async def submit_sample(
    request: PositionSampleRequest,
    session_id: SessionId,
    locale: str = Depends(get_request_locale),
    location_service: LocationTrackingService = Depends(get_location_service),
) -> SampleResponse:
    evaluation = await location_service.process_sample(session_id, request.to_domain(), locale)
    return SampleResponse.from_domain(evaluation, locale)


@location_router.post(
    "/{session_id}/errors",
    response_model=SensorWarningResponse,
    summary="Report a geolocation error",
    description="Converts the error to a localized warning and stops tracking",
)
async def report_sensor_error(
    request: SensorErrorRequest,
    session_id: SessionId,
    locale: str = Depends(get_request_locale),
    location_service: LocationTrackingService = Depends(get_location_service),
) -> SensorWarningResponse:
    warning = await location_service.report_sensor_error(session_id, request.code, request.message)
    return SensorWarningResponse.from_domain(warning, locale)


@location_router.get(
    "/{session_id}/status",
    response_model=StatusResponse,
    summary="Tracking session status",
)
async def get_status(
    session_id: SessionId,
    locale: str = Depends(get_request_locale),
    location_service: LocationTrackingService = Depends(get_location_service),
) -> StatusResponse:
    return StatusResponse.from_status(await location_service.status(session_id), locale)


# =========================================================================
# NOTIFICATIONS
# =========================================================================

@location_router.get(
    "/{session_id}/notifications",
    response_model=NotificationListResponse,
    summary="In-app notifications (10 most recent)",
)
async def list_notifications(
    session_id: SessionId,
    locale: str = Depends(get_request_locale),
    location_service: LocationTrackingService = Depends(get_location_service),
) -> NotificationListResponse:
    notifications = await location_service.notifications(session_id)
    return NotificationListResponse(
        notifications=[NotificationResponse.from_domain(n, locale) for n in notifications],
        unread_count=sum(1 for n in notifications if not n.read),
        total=len(notifications),
    )


@location_router.post(
    "/{session_id}/notifications/read-all",
    response_model=MarkAllReadResponse,
    summary="Mark every notification as read",
)
async def mark_all_notifications_read(
    session_id: SessionId,
    location_service: LocationTrackingService = Depends(get_location_service),
) -> MarkAllReadResponse:
    marked = await location_service.mark_all_notifications_read(session_id)
    return MarkAllReadResponse(marked=marked, unread_count=await location_service.unread_count(session_id))


@location_router.post(
    "/{session_id}/notifications/{notification_id}/read",
    response_model=NotificationResponse,
    summary="Mark a notification as read",
    responses={404: {"description": "Notification not found"}},
)
async def mark_notification_read(
    notification_id: str,
    session_id: SessionId,
    locale: str = Depends(get_request_locale),
    location_service: LocationTrackingService = Depends(get_location_service),
) -> NotificationResponse:
    notification = await location_service.mark_notification_read(session_id, notification_id)
    return NotificationResponse.from_domain(notification, locale)


@location_router.delete(
    "/{session_id}/notifications",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Clear the notification inbox",
)
async def clear_notifications(
    session_id: SessionId,
    location_service: LocationTrackingService = Depends(get_location_service),
) -> Response:
    await location_service.clear_notifications(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =========================================================================
# DERIVED VIEWS
# =========================================================================

@location_router.get(
    "/{session_id}/history",
    response_model=HistoryResponse,
    summary="Recent processed positions, newest first",
)
async def get_history(
    session_id: SessionId,
    limit: Optional[int] = Query(None, ge=1, le=100),
    location_service: LocationTrackingService = Depends(get_location_service),
) -> HistoryResponse:
    entries = await location_service.history(session_id, limit)
    return HistoryResponse(entries=entries, count=len(entries))


@location_router.get(
    "/{session_id}/suggestion",
    response_model=SuggestionResponse,
    summary="Suggested next action",
    responses={409: {"description": "No home or no position yet"}},
)
async def get_suggestion(
    session_id: SessionId,
    locale: str = Depends(get_request_locale),
    location_service: LocationTrackingService = Depends(get_location_service),
) -> SuggestionResponse:
    suggestion = await location_service.suggestion(session_id, locale)
    return SuggestionResponse.from_domain(suggestion, locale)


@location_router.get(
    "/{session_id}/help-message",
    response_model=HelpMessageResponse,
    summary="Message asking someone to water the plants",
    responses={409: {"description": "No home or no position yet"}},
)
async def get_help_message(
    session_id: SessionId,
    utc_offset_minutes: Optional[int] = Query(
        None,
        ge=-720,
        le=840,
        description="Sender's offset from UTC in minutes (e.g. -240 for Montréal in summer); UTC when omitted",
    ),
    locale: str = Depends(get_request_locale),
    location_service: LocationTrackingService = Depends(get_location_service),
) -> HelpMessageResponse:
    help_message = await location_service.help_message(session_id, locale, utc_offset_minutes)
    return HelpMessageResponse.from_domain(help_message, locale)


@location_router.get(
    "/{session_id}/address",
    response_model=ReverseGeocodeResult,
    summary="Approximate address of the last position",
    responses={409: {"description": "No position yet"}},
)
async def get_current_address(
    session_id: SessionId,
    locale: str = Depends(get_request_locale),
    location_service: LocationTrackingService = Depends(get_location_service),
) -> ReverseGeocodeResult:
    return await location_service.current_address(session_id, locale)
