"""Great-circle distance between facilities."""
import math

from coldchain.config import EARTH_RADIUS_KM


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate great-circle distance in km between two points."""
    lat1_r = math.radians(lat1)
    lat2_r = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlon / 2) ** 2
    if a > 1.0:
        a = 1.0  # float drift near antipodes
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def facility_distance_km(origin, dest) -> float:
    """Distance between two Facility records."""
    return haversine_km(origin.latitude, origin.longitude, dest.latitude, dest.longitude)
