# 📄 File: ecopilot/modules/location_tracking/domain/services/location_tracker.py
# 🧭 Purpose (Layman Explanation):
# The brain of the "you're home, water your plants" feature: it follows the phone's
# position, notices when you arrive or leave, and sends a reminder without spamming you.
# 🧪 Purpose (Technical Summary):
# Per-session tracker aggregate owning the home reference, the zone classifier, the
# notification debouncer, the bounded inbox and the bounded location history. Each
# sample runs a synchronous recompute-and-maybe-notify pass.
# 🔗 Dependencies:
# geo.py, zone_classifier.py, notification_debouncer.py, notification_sink.py,
# location models, shared i18n and exceptions
# 🔄 Connected Modules / Calls From:
# location_service.py, tracker repositories

import logging
from collections import deque
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Deque, Dict, List, Optional, Sequence

from ecopilot.shared.core.exceptions import (
    HomeNotSetError,
    PositionUnknownError,
    TrackingNotActiveError,
    ValidationError,
)
from ecopilot.shared.core.i18n import bilingual, get_current_locale
from ecopilot.shared.config.settings import (
    MAX_COOLDOWN_MINUTES,
    MAX_HOME_RADIUS_METERS,
    MIN_COOLDOWN_MINUTES,
    MIN_HOME_RADIUS_METERS,
)

from ..models.notification import (
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
from ..models.position import HomeReference, Position, TrackerSettings, utc_now
from .geo import format_distance, haversine_km, meters
from .notification_debouncer import NotificationDebouncer, NotificationInbox
from .notification_sink import NotificationSink, dispatch
from .zone_classifier import ZoneClassifier

logger = logging.getLogger(__name__)

_TRANSITION_TYPES = {
    ZoneTransition.ARRIVED: NotificationType.HOME_ARRIVAL,
    ZoneTransition.DEPARTED: NotificationType.HOME_DEPARTURE,
}


class LocationTracker:
    """
    Location state of one user session.

    Samples are expected one at a time; the owning service serializes them
    per session. When no home is set, the first sample becomes the home
    (source ``auto``). Notifications are only produced on a zone transition
    while at least one plant needs water, and each ``(type, home)`` key is
    rate-limited by the debouncer.
    """

    def __init__(
        self,
        session_id: str,
        settings: Optional[TrackerSettings] = None,
        sinks: Optional[Sequence[NotificationSink]] = None,
        clock: Callable[[], datetime] = utc_now,
        inbox_capacity: int = 10,
        history_size: int = 100,
    ):
        self.session_id = session_id
        self.settings = settings or TrackerSettings()
        self.sinks: List[NotificationSink] = list(sinks or [])
        self._clock = clock

        self.home: Optional[HomeReference] = None
        self.is_tracking = False
        self.started_at: Optional[datetime] = None
        self.last_position: Optional[Position] = None
        self.distance_km: Optional[float] = None
        self.last_warning: Optional[SensorWarning] = None

        self.classifier = ZoneClassifier(
            radius_km=self.settings.home_radius_km,
            exit_factor=self.settings.exit_radius_factor,
        )
        self.debouncer = NotificationDebouncer(timedelta(minutes=self.settings.cooldown_minutes))
        self.inbox = NotificationInbox(capacity=inbox_capacity)
        self.history: Deque[HistoryEntry] = deque(maxlen=history_size)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def start(self) -> None:
        if self.is_tracking:
            return
        self.is_tracking = True
        self.started_at = self._clock()
        self.last_warning = None
        logger.info(f"📍 Location tracking started for session {self.session_id}")

    def stop(self) -> None:
        if not self.is_tracking:
            return
        self.is_tracking = False
        logger.info(f"⏹️ Location tracking stopped for session {self.session_id}")

    @property
    def is_at_home(self) -> bool:
        return self.classifier.is_at_home

    # =========================================================================
    # CONFIGURATION
    # =========================================================================

    def set_home(self, home: HomeReference) -> None:
        """
        Replace the home reference.

        The zone state is kept, so the next sample is compared with the state
        observed against the previous home; the stored distance is refreshed.
        """
        self.home = home
        if self.last_position is not None:
            self.distance_km = haversine_km(
                self.last_position.latitude, self.last_position.longitude,
                home.latitude, home.longitude,
            )
        logger.info(
            f"🏠 Home set for session {self.session_id} ({home.source.value}): "
            f"{home.latitude:.5f}, {home.longitude:.5f}"
        )

    def configure(
        self,
        home_radius_m: Optional[int] = None,
        cooldown_minutes: Optional[int] = None,
        exit_radius_factor: Optional[float] = None,
    ) -> TrackerSettings:
        """
        Update session settings.

        Raises:
            ValidationError: When a value is outside its allowed range
        """
        if home_radius_m is not None and not MIN_HOME_RADIUS_METERS <= home_radius_m <= MAX_HOME_RADIUS_METERS:
            raise ValidationError(
                message=f"Home radius must be between {MIN_HOME_RADIUS_METERS} and {MAX_HOME_RADIUS_METERS} meters",
                field="home_radius_m",
                value=home_radius_m,
                constraint=f"{MIN_HOME_RADIUS_METERS}-{MAX_HOME_RADIUS_METERS}",
            )
        if cooldown_minutes is not None and not MIN_COOLDOWN_MINUTES <= cooldown_minutes <= MAX_COOLDOWN_MINUTES:
            raise ValidationError(
                message=f"Cooldown must be between {MIN_COOLDOWN_MINUTES} and {MAX_COOLDOWN_MINUTES} minutes",
                field="cooldown_minutes",
                value=cooldown_minutes,
                constraint=f"{MIN_COOLDOWN_MINUTES}-{MAX_COOLDOWN_MINUTES}",
            )
        if exit_radius_factor is not None and exit_radius_factor < 1.0:
            raise ValidationError(
                message="Exit radius factor cannot be lower than 1.0",
                field="exit_radius_factor",
                value=exit_radius_factor,
                constraint=">=1.0",
            )

        if home_radius_m is not None:
            self.settings.home_radius_m = home_radius_m
        if cooldown_minutes is not None:
            self.settings.cooldown_minutes = cooldown_minutes
            self.debouncer.cooldown = timedelta(minutes=cooldown_minutes)
        if exit_radius_factor is not None:
            self.settings.exit_radius_factor = exit_radius_factor

        self.classifier.reconfigure(
            radius_km=self.settings.home_radius_km,
            exit_factor=self.settings.exit_radius_factor,
        )
        logger.info(f"⚙️ Settings updated for session {self.session_id}: {self.settings.model_dump()}")
        return self.settings

    # =========================================================================
    # SAMPLE PROCESSING
    # =========================================================================

    def process_sample(
        self,
        position: Position,
        plants_needing_water: Sequence[str],
        locale: Optional[str] = None,
    ) -> ZoneEvaluation:
        """
        Recompute the zone for a new position and notify on transitions.

        Args:
            position: New position sample
            plants_needing_water: Names of the plants that currently need water
            locale: Language used for platform sinks

        Returns:
            ZoneEvaluation describing distance, zone, transition and notification

        Raises:
            TrackingNotActiveError: When tracking is stopped
        """
        if not self.is_tracking:
            raise TrackingNotActiveError(self.session_id)

        home_auto_set = False
        if self.home is None:
            self.set_home(HomeReference.from_position(position))
            home_auto_set = True

        distance = haversine_km(
            position.latitude, position.longitude,
            self.home.latitude, self.home.longitude,
        )
        transition = self.classifier.update(distance)

        self.last_position = position
        self.distance_km = distance
        self.history.appendleft(
            HistoryEntry(position=position, distance_km=distance, is_at_home=self.classifier.is_at_home)
        )

        evaluation = ZoneEvaluation(
            position=position,
            distance_km=distance,
            is_at_home=self.classifier.is_at_home,
            transition=transition,
            home_auto_set=home_auto_set,
            plants_needing_water=len(plants_needing_water),
        )

        if transition is not None:
            logger.info(
                f"🚪 Session {self.session_id} {transition.value} "
                f"({format_distance(distance)} from home)"
            )
            if plants_needing_water:
                notification = self._notify(transition, distance, len(plants_needing_water), locale)
                evaluation.notification = notification
                evaluation.notification_suppressed = notification is None

        return evaluation

    def _notify(
        self,
        transition: ZoneTransition,
        distance_km: float,
        plants_count: int,
        locale: Optional[str],
    ) -> Optional[LocationNotification]:
        notification_type = _TRANSITION_TYPES[transition]
        now = self._clock()

        if not self.debouncer.allow((notification_type.value, self.home.key), now):
            return None

        if notification_type is NotificationType.HOME_ARRIVAL:
            title = bilingual("location.arrival.title")
            message = bilingual("location.arrival.body", count=plants_count)
        else:
            title = bilingual("location.departure.title")
            message = bilingual("location.departure.body", distance=format_distance(distance_km))

        notification = LocationNotification(
            type=notification_type,
            title=title,
            message=message,
            created_at=now,
            distance_km=distance_km,
            is_at_home=transition is ZoneTransition.ARRIVED,
            plants_count=plants_count,
        )
        self.inbox.add(notification)
        dispatch(self.sinks, notification, locale or get_current_locale())
        return notification

    def report_sensor_error(self, code: Any, raw_message: Optional[str] = None) -> SensorWarning:
        """
        Convert a client geolocation failure into a localized warning and halt tracking.
        """
        error_code = SensorErrorCode.parse(code)
        warning = SensorWarning(
            code=error_code,
            title=bilingual("location.warning_title"),
            message=bilingual(f"location.error.{error_code.value}"),
            raw_message=raw_message,
            occurred_at=self._clock(),
        )
        self.last_warning = warning
        self.stop()
        logger.warning(f"⚠️ Geolocation error for session {self.session_id}: {error_code.value} {raw_message or ''}")
        return warning

    # =========================================================================
    # DERIVED VIEWS
    # =========================================================================

    def _require_distance(self) -> float:
        if self.home is None:
            raise HomeNotSetError(self.session_id)
        if self.distance_km is None:
            raise PositionUnknownError(self.session_id)
        return self.distance_km

    def suggestion(self, plants_needing_water: Sequence[str]) -> LocationSuggestion:
        """Suggest watering at home or asking for help when away."""
        if not plants_needing_water:
            return LocationSuggestion(icon="✅", message=bilingual("location.suggestion.all_good"))

        distance = self._require_distance()
        count = len(plants_needing_water)

        if self.is_at_home:
            return LocationSuggestion(
                icon="🏠",
                action="water",
                message=bilingual("location.suggestion.at_home", distance_m=meters(distance), count=count),
                plants=list(plants_needing_water),
            )
        return LocationSuggestion(
            icon="📱",
            action="contact",
            message=bilingual("location.suggestion.away", distance=format_distance(distance), count=count),
            plants=list(plants_needing_water),
        )

    def help_message(
        self,
        plants_needing_water: Sequence[str],
        now: Optional[datetime] = None,
        utc_offset_minutes: Optional[int] = None,
    ) -> HelpMessage:
        """
        Message to share with a neighbour who could water the plants.

        The time is shown in the sender's local time when ``utc_offset_minutes``
        is given (e.g. -240 for Eastern Daylight Time), otherwise in UTC.
        """
        distance = self._require_distance()
        now = now or self._clock()
        if utc_offset_minutes is None:
            time_label = f"{now.astimezone(timezone.utc):%H:%M} UTC"
        else:
            local = now.astimezone(timezone(timedelta(minutes=utc_offset_minutes)))
            time_label = f"{local:%H:%M}"
        return HelpMessage(
            subject=bilingual("location.help.subject"),
            body=bilingual(
                "location.help.body",
                distance=format_distance(distance),
                time=time_label,
                plants=", ".join(plants_needing_water),
            ),
        )

    def recent_history(self, limit: Optional[int] = None) -> List[HistoryEntry]:
        entries = list(self.history)
        return entries[:limit] if limit is not None else entries

    def status(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "is_tracking": self.is_tracking,
            "started_at": self.started_at,
            "home": self.home,
            "settings": self.settings,
            "is_at_home": self.is_at_home,
            "distance_km": self.distance_km,
            "last_position": self.last_position,
            "unread_notifications": self.inbox.unread_count,
            "history_size": len(self.history),
            "last_warning": self.last_warning,
        }
