# 📄 File: ecopilot/modules/location_tracking/domain/services/zone_classifier.py
# 🧭 Purpose (Layman Explanation):
# Decides whether you are at home or away and notices the moment you cross the line.
# 🧪 Purpose (Technical Summary):
# Stateful home/away classifier with an optional hysteresis band: a sample enters
# the home zone at distance <= radius and leaves it only beyond radius * exit_factor.
# With exit_factor = 1.0 this is exactly the single-radius rule.
# 🔗 Dependencies:
# geo.py, notification models (ZoneTransition)
# 🔄 Connected Modules / Calls From:
# location_tracker.py

from typing import Optional

from ..models.notification import ZoneTransition
from .geo import is_at_home


class ZoneClassifier:
    """
    Tracks the home/away state across consecutive distance readings.

    The initial state is "away", so the first reading inside the home zone
    reports ``ZoneTransition.ARRIVED``.
    """

    def __init__(self, radius_km: float, exit_factor: float = 1.0, at_home: bool = False):
        if radius_km <= 0:
            raise ValueError("radius_km must be positive")
        if exit_factor < 1.0:
            raise ValueError("exit_factor cannot be lower than 1.0")
        self.radius_km = radius_km
        self.exit_factor = exit_factor
        self.is_at_home = at_home

    @property
    def exit_radius_km(self) -> float:
        return self.radius_km * self.exit_factor

    def classify(self, distance_km: float) -> bool:
        """Zone for ``distance_km`` given the current state, without changing it."""
        if self.is_at_home:
            return is_at_home(distance_km, self.exit_radius_km)
        return is_at_home(distance_km, self.radius_km)

    def update(self, distance_km: float) -> Optional[ZoneTransition]:
        """Classify a new reading and return the transition it caused, if any."""
        at_home = self.classify(distance_km)
        if at_home == self.is_at_home:
            return None
        self.is_at_home = at_home
        return ZoneTransition.ARRIVED if at_home else ZoneTransition.DEPARTED

    def reconfigure(self, radius_km: Optional[float] = None, exit_factor: Optional[float] = None) -> None:
        if radius_km is not None:
            if radius_km <= 0:
                raise ValueError("radius_km must be positive")
            self.radius_km = radius_km
        if exit_factor is not None:
            if exit_factor < 1.0:
                raise ValueError("exit_factor cannot be lower than 1.0")
            self.exit_factor = exit_factor

    def reset(self, at_home: bool = False) -> None:
        self.is_at_home = at_home
