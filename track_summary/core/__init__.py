"""Core computations for track summaries.

- GeoCalculator: Haversine distance between two points (km, rounded)
- Aggregators: Distance, time and pace over a whole track
"""

from track_summary.core.aggregators import (
    calculate_distance,
    calculate_pace,
    calculate_time,
    segment_distances,
)
from track_summary.core.geo_calculator import GeoCalculator, round_half_up

__all__ = [
    # Geo calculator
    "GeoCalculator",
    "round_half_up",
    # Aggregators
    "calculate_distance",
    "calculate_time",
    "calculate_pace",
    "segment_distances",
]
