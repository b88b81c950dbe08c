# 📄 File: ecopilot/modules/location_tracking/domain/services/geo.py
# 🧭 Purpose (Layman Explanation):
# Measures how far apart two points on Earth are and writes that distance the way
# people like to read it ("150m" or "2.3 km").
# 🧪 Purpose (Technical Summary):
# Great-circle distance with the haversine formula on a spherical Earth
# (R = 6371 km), the at-home predicate and distance formatting.
# 🔗 Dependencies:
# math
# 🔄 Connected Modules / Calls From:
# zone_classifier.py, location_tracker.py, weather and geocoding helpers

import math

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance between two points.

    Args:
        lat1: Latitude of the first point in degrees
        lon1: Longitude of the first point in degrees
        lat2: Latitude of the second point in degrees
        lon2: Longitude of the second point in degrees

    Returns:
        Distance in kilometers
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push a slightly above 1 for antipodal points
    a = min(1.0, max(0.0, a))

    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def is_at_home(distance_km: float, radius_km: float) -> bool:
    """A point is at home when it lies inside or on the home circle."""
    return distance_km <= radius_km


def meters(distance_km: float) -> int:
    """Distance in whole meters, halves rounded up."""
    return int(math.floor(distance_km * 1000 + 0.5))


def format_distance(distance_km: float) -> str:
    """``"1.2 km"`` above one kilometer, rounded meters such as ``"150m"`` otherwise."""
    if distance_km > 1:
        return f"{distance_km:.1f} km"
    return f"{meters(distance_km)}m"
