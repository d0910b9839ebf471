"""Configuration constants for the Track Summary engine.

All tunable parameters are centralized here.

Classes:
    GeoConfig: Earth model and coordinate ranges
    SummaryConfig: Rounding precision and unit conversion
"""


class GeoConfig:
    """Spherical Earth model and valid coordinate ranges."""

    # Mean Earth radius in kilometers (spherical approximation)
    EARTH_RADIUS_KM = 6371

    # Inclusive ranges in decimal degrees
    LAT_RANGE = (-90.0, 90.0)
    LON_RANGE = (-180.0, 180.0)


class SummaryConfig:
    """Rounding and unit conversion for track summaries."""

    # Decimal places kept for each segment distance and for the pace
    ROUND_DIGITS = 2

    SECONDS_PER_MINUTE = 60
