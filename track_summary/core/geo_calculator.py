"""Geodesic calculations on Earth's surface.

Provides the great-circle distance used by the track summary:
- Distance calculation (Haversine formula), in kilometers
- Half-up decimal rounding applied to every segment distance

All calculations use a spherical Earth approximation (R = 6,371 km).
"""

from decimal import ROUND_HALF_UP, Decimal
from math import atan2, cos, isfinite, pi, sin, sqrt
from typing import Protocol

from track_summary.constants import GeoConfig, SummaryConfig

EARTH_RADIUS_KM = GeoConfig.EARTH_RADIUS_KM


class HasLatLon(Protocol):
    lat: float
    lon: float


def radians(degrees: float) -> float:
    return degrees * pi / 180


def round_half_up(value: float, digits: int = SummaryConfig.ROUND_DIGITS) -> float:
    """Round to a fixed number of decimals, ties away from zero.

    Works on the exact binary value of the float, so 0.125 becomes 0.13
    while 2.675 (stored as 2.67499999...) becomes 2.67.
    Non-finite values are returned unchanged.

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        Rounded value as float.
    """
    if not isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


class GeoCalculator:
    """Static methods for geodesic calculations on Earth's surface.

    Coordinates are in decimal degrees.
    Distances are in kilometers, rounded to SummaryConfig.ROUND_DIGITS.
    """

    EARTH_RADIUS_KM = EARTH_RADIUS_KM

    @staticmethod
    def haversine_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate great-circle distance between two points using Haversine formula.

        The result is rounded once, here, so a track distance is the sum of
        rounded segments rather than a rounded sum.

        Args:
            lat1: Latitude of first point (decimal degrees)
            lon1: Longitude of first point (decimal degrees)
            lat2: Latitude of second point (decimal degrees)
            lon2: Longitude of second point (decimal degrees)

        Returns:
            Distance in kilometers, rounded to 2 decimals.
        """
        dlat = radians(lat2) - radians(lat1)
        dlon = radians(lon2) - radians(lon1)
        a = sin(dlat / 2) ** 2 + cos(radians(lat2)) * cos(radians(lat1)) * sin(dlon / 2) ** 2
        # Float error near antipodes can push a slightly outside [0, 1]
        a = min(1.0, max(0.0, a))
        c = 2 * atan2(sqrt(a), sqrt(1 - a))
        return round_half_up(EARTH_RADIUS_KM * c)

    @staticmethod
    def segment_distance_km(start: HasLatLon, end: HasLatLon) -> float:
        """Rounded great-circle distance between two samples in kilometers."""
        return GeoCalculator.haversine_distance_km(
            lat1=start.lat,
            lon1=start.lon,
            lat2=end.lat,
            lon2=end.lon,
        )
