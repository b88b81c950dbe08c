# 📄 File: ecopilot/modules/location_tracking/application/location_service.py
# 🧭 Purpose (Layman Explanation):
# Connects the position tracker with your plant list and the map service, so a new
# phone position can be checked against which plants are thirsty right now.
# 🧪 Purpose (Technical Summary):
# Application service orchestrating per-session LocationTracker aggregates held by a
# TrackerRepository: session lifecycle, home configuration (manual or geocoded),
# serialized sample processing fed with the plants needing water, inbox and
# derived views (suggestion, help message, current address).
# 🔗 Dependencies:
# TrackerRepository, LocationTracker, PlantService, GeocodingService, settings
# 🔄 Connected Modules / Calls From:
# location endpoints (presentation/api/v1/location.py), tests

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence

from ecopilot.modules.geocoding.domain.models.address import ReverseGeocodeResult
from ecopilot.modules.geocoding.domain.services.geocoding_service import GeocodingService
from ecopilot.modules.plant_management.domain.services.plant_service import PlantService
from ecopilot.shared.config.settings import Settings, get_settings
from ecopilot.shared.core.exceptions import (
    NotFoundError,
    PositionUnknownError,
    TrackingSessionNotFoundError,
)
from ecopilot.shared.core.i18n import resolve_locale
from ecopilot.shared.utils.logging import log_context

from ..domain.models.notification import (
    HelpMessage,
    HistoryEntry,
    LocationNotification,
    LocationSuggestion,
    SensorWarning,
    ZoneEvaluation,
)
from ..domain.models.position import HomeReference, HomeSource, Position, TrackerSettings, utc_now
from ..domain.repositories.tracker_repository import TrackerRepository
from ..domain.services.location_tracker import LocationTracker
from ..domain.services.notification_sink import LoggingNotificationSink, NotificationSink

logger = logging.getLogger(__name__)


class LocationTrackingService:
    """
    Application service for location tracking sessions.

    Sessions are created by ``start``, ``set_home``, ``geocode_home`` and
    ``configure``; every other operation on an unknown session raises
    TrackingSessionNotFoundError. Sample processing for one session runs
    under the repository's per-session lock.
    """

    def __init__(
        self,
        tracker_repository: TrackerRepository,
        plant_service: PlantService,
        geocoding_service: GeocodingService,
        settings: Optional[Settings] = None,
        sinks: Optional[Sequence[NotificationSink]] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.tracker_repository = tracker_repository
        self.plant_service = plant_service
        self.geocoding_service = geocoding_service
        self.settings = settings or get_settings()
        self.sinks = list(sinks) if sinks is not None else [LoggingNotificationSink()]
        self._clock = clock

    # =========================================================================
    # SESSION ACCESS
    # =========================================================================

    def _default_tracker_settings(self) -> TrackerSettings:
        return TrackerSettings(
            home_radius_m=self.settings.HOME_RADIUS_METERS,
            cooldown_minutes=self.settings.NOTIFICATION_COOLDOWN_MINUTES,
            exit_radius_factor=self.settings.HOME_EXIT_RADIUS_FACTOR,
        )

    async def _get_or_create(self, session_id: str) -> LocationTracker:
        tracker = await self.tracker_repository.get(session_id)
        if tracker is None:
            tracker = LocationTracker(
                session_id=session_id,
                settings=self._default_tracker_settings(),
                sinks=self.sinks,
                clock=self._clock,
                inbox_capacity=self.settings.NOTIFICATION_INBOX_SIZE,
                history_size=self.settings.LOCATION_HISTORY_SIZE,
            )
            await self.tracker_repository.save(tracker)
            logger.info(f"🆕 Tracking session created: {session_id}")
        return tracker

    async def get_tracker(self, session_id: str) -> LocationTracker:
        """
        Get an existing session.

        Raises:
            TrackingSessionNotFoundError: If the session was never created
        """
        tracker = await self.tracker_repository.get(session_id)
        if tracker is None:
            raise TrackingSessionNotFoundError(session_id)
        return tracker

    async def _plant_names_needing_water(self, locale: str) -> List[str]:
        plants = await self.plant_service.plants_needing_water()
        return [plant.display_name(locale) for plant in plants]

    # =========================================================================
    # LIFECYCLE & CONFIGURATION
    # =========================================================================

    async def start(self, session_id: str) -> LocationTracker:
        async with self.tracker_repository.session_lock(session_id):
            tracker = await self._get_or_create(session_id)
            tracker.start()
            return tracker

    async def stop(self, session_id: str) -> LocationTracker:
        async with self.tracker_repository.session_lock(session_id):
            tracker = await self.get_tracker(session_id)
            tracker.stop()
            return tracker

    async def end_session(self, session_id: str) -> None:
        async with self.tracker_repository.session_lock(session_id):
            if not await self.tracker_repository.delete(session_id):
                raise TrackingSessionNotFoundError(session_id)
        logger.info(f"🗑️ Tracking session ended: {session_id}")

    async def set_home(
        self,
        session_id: str,
        latitude: float,
        longitude: float,
        source: HomeSource = HomeSource.MANUAL,
        label: Optional[str] = None,
    ) -> HomeReference:
        home = HomeReference(
            latitude=latitude,
            longitude=longitude,
            source=source,
            set_at=self._clock(),
            label=label,
        )
        async with self.tracker_repository.session_lock(session_id):
            tracker = await self._get_or_create(session_id)
            tracker.set_home(home)
        return home

    async def geocode_home(self, session_id: str, address: str, locale: Optional[str] = None) -> HomeReference:
        """
        Resolve an address and use the best match as the home.

        Raises:
            NotFoundError: When the address matches nothing
        """
        suggestions = await self.geocoding_service.search(address, locale)
        if not suggestions:
            raise NotFoundError(
                message=f"No address found for '{address}'",
                resource_type="address",
                translation_key="address.no_results",
                details={"query": address},
            )
        best = suggestions[0]
        return await self.set_home(
            session_id,
            best.latitude,
            best.longitude,
            source=HomeSource.GEOCODED,
            label=best.address,
        )

    async def configure(
        self,
        session_id: str,
        home_radius_m: Optional[int] = None,
        cooldown_minutes: Optional[int] = None,
        exit_radius_factor: Optional[float] = None,
    ) -> TrackerSettings:
        async with self.tracker_repository.session_lock(session_id):
            tracker = await self._get_or_create(session_id)
            return tracker.configure(
                home_radius_m=home_radius_m,
                cooldown_minutes=cooldown_minutes,
                exit_radius_factor=exit_radius_factor,
            )

    # =========================================================================
    # SAMPLES & SENSOR ERRORS
    # =========================================================================

    async def process_sample(self, session_id: str, position: Position, locale: Optional[str] = None) -> ZoneEvaluation:
        """
        Feed one position sample to a session.

        Raises:
            TrackingSessionNotFoundError: Unknown session
            TrackingNotActiveError: Tracking is stopped
        """
        locale = resolve_locale(locale)
        with log_context(session_id=session_id):
            async with self.tracker_repository.session_lock(session_id):
                tracker = await self.get_tracker(session_id)
                plant_names = await self._plant_names_needing_water(locale)
                return tracker.process_sample(position, plant_names, locale)

    async def report_sensor_error(self, session_id: str, code: Any, raw_message: Optional[str] = None) -> SensorWarning:
        async with self.tracker_repository.session_lock(session_id):
            tracker = await self.get_tracker(session_id)
            return tracker.report_sensor_error(code, raw_message)

    # =========================================================================
    # QUERIES
    # =========================================================================

    async def status(self, session_id: str) -> Dict[str, Any]:
        tracker = await self.get_tracker(session_id)
        return tracker.status()

    async def notifications(self, session_id: str) -> List[LocationNotification]:
        tracker = await self.get_tracker(session_id)
        return tracker.inbox.items()

    async def unread_count(self, session_id: str) -> int:
        tracker = await self.get_tracker(session_id)
        return tracker.inbox.unread_count

    async def mark_notification_read(self, session_id: str, notification_id: str) -> LocationNotification:
        tracker = await self.get_tracker(session_id)
        return tracker.inbox.mark_read(notification_id)

    async def mark_all_notifications_read(self, session_id: str) -> int:
        tracker = await self.get_tracker(session_id)
        return tracker.inbox.mark_all_read()

    async def clear_notifications(self, session_id: str) -> None:
        tracker = await self.get_tracker(session_id)
        tracker.inbox.clear()

    async def history(self, session_id: str, limit: Optional[int] = None) -> List[HistoryEntry]:
        tracker = await self.get_tracker(session_id)
        return tracker.recent_history(limit)

    async def suggestion(self, session_id: str, locale: Optional[str] = None) -> LocationSuggestion:
        tracker = await self.get_tracker(session_id)
        return tracker.suggestion(await self._plant_names_needing_water(resolve_locale(locale)))

    async def help_message(
        self,
        session_id: str,
        locale: Optional[str] = None,
        utc_offset_minutes: Optional[int] = None,
    ) -> HelpMessage:
        tracker = await self.get_tracker(session_id)
        plant_names = await self._plant_names_needing_water(resolve_locale(locale))
        return tracker.help_message(plant_names, utc_offset_minutes=utc_offset_minutes)

    async def current_address(self, session_id: str, locale: Optional[str] = None) -> ReverseGeocodeResult:
        """
        Approximate address of the last processed sample.

        Raises:
            PositionUnknownError: No sample was processed yet
        """
        tracker = await self.get_tracker(session_id)
        if tracker.last_position is None:
            raise PositionUnknownError(session_id)
        position = tracker.last_position
        return await self.geocoding_service.reverse(position.latitude, position.longitude, locale)
