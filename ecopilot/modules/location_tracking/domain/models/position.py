# 📄 File: ecopilot/modules/location_tracking/domain/models/position.py
# 🧭 Purpose (Layman Explanation):
# Describes a point where the phone was seen, the place the user calls "home",
# and how close they must be to count as being at home.
# 🧪 Purpose (Technical Summary):
# Domain models for position samples, the home reference point and the per-session
# tracker settings (home radius, notification cooldown, exit radius factor).
# 🔗 Dependencies:
# pydantic, datetime, enum, ecopilot.shared.config.settings (bounds)
# 🔄 Connected Modules / Calls From:
# location_tracker.py, location_service.py, location schemas and endpoints

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from ecopilot.shared.config.settings import (
    MAX_COOLDOWN_MINUTES,
    MAX_HOME_RADIUS_METERS,
    MIN_COOLDOWN_MINUTES,
    MIN_HOME_RADIUS_METERS,
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class HomeSource(str, Enum):
    """How the home reference point was obtained"""
    AUTO = "auto"            # First position received
    MANUAL = "manual"        # Coordinates entered by the user
    GEOCODED = "geocoded"    # Address resolved through geocoding


class Position(BaseModel):
    """
    A single position sample reported by the client device.

    ``accuracy`` is in meters, ``speed`` in m/s and ``heading`` in degrees,
    mirroring what browser and mobile geolocation APIs return.
    """

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    accuracy: Optional[float] = Field(None, ge=0)
    timestamp: datetime = Field(default_factory=utc_now)
    speed: Optional[float] = None
    heading: Optional[float] = None
    altitude: Optional[float] = None


class HomeReference(BaseModel):
    """The point distances are measured against."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    source: HomeSource = HomeSource.MANUAL
    set_at: datetime = Field(default_factory=utc_now)
    label: Optional[str] = Field(None, max_length=300)

    @property
    def key(self) -> str:
        """Stable identifier of the home point, used to scope notification cooldowns."""
        return f"{self.latitude:.5f},{self.longitude:.5f}"

    @classmethod
    def from_position(cls, position: Position) -> "HomeReference":
        return cls(
            latitude=position.latitude,
            longitude=position.longitude,
            source=HomeSource.AUTO,
        )


class TrackerSettings(BaseModel):
    """User-adjustable settings of one tracking session."""

    home_radius_m: int = Field(100, ge=MIN_HOME_RADIUS_METERS, le=MAX_HOME_RADIUS_METERS)
    cooldown_minutes: int = Field(5, ge=MIN_COOLDOWN_MINUTES, le=MAX_COOLDOWN_MINUTES)
    exit_radius_factor: float = Field(1.0, ge=1.0)

    model_config = {"validate_assignment": True}

    @property
    def home_radius_km(self) -> float:
        return self.home_radius_m / 1000
