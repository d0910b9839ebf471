"""Aggregations over a track.

Each function takes the track (or the two totals) explicitly and performs a
single left-to-right pass. Float addition is not associative, so the order
of accumulation is part of the result.
"""

import logging

import numpy as np

from track_summary.constants import SummaryConfig
from track_summary.core.geo_calculator import GeoCalculator, round_half_up
from track_summary.model.errors import UndefinedPaceError
from track_summary.model.sample import Track

logger = logging.getLogger(__name__)


def segment_distances(points: Track) -> list[float]:
    """Rounded great-circle distance of every consecutive sample pair, in order."""
    return [GeoCalculator.segment_distance_km(start=points[i - 1], end=points[i]) for i in range(1, len(points))]


def calculate_distance(points: Track) -> float:
    """Total distance in kilometers.

    Sums the already-rounded segment distances; the total itself is not
    rounded again. Tracks with fewer than two samples yield 0.0.
    """
    result = 0.0
    for distance_km in segment_distances(points):
        result += distance_km
    return result


def calculate_time(points: Track) -> float:
    """Total elapsed seconds, including the first sample's start offset."""
    result = 0
    for point in points:
        result += point.time
    return result


def calculate_pace(total_time: float, total_distance: float, strict: bool = False) -> float:
    """Average pace in minutes per kilometer, rounded to 2 decimals.

    A zero distance follows IEEE division: positive time gives inf and zero
    time gives nan. With strict=True an UndefinedPaceError is raised instead.

    Args:
        total_time: Total elapsed seconds
        total_distance: Total kilometers
        strict: Raise instead of returning a non-finite pace

    Returns:
        Pace in minutes per kilometer.
    """
    minutes = np.float64(total_time) / SummaryConfig.SECONDS_PER_MINUTE
    with np.errstate(divide="ignore", invalid="ignore"):
        pace = float(minutes / np.float64(total_distance))

    if not np.isfinite(pace):
        if strict:
            raise UndefinedPaceError(total_time=total_time, total_distance=total_distance)
        logger.warning(f"Pace is not finite ({pace}) for {total_time}s over {total_distance}km")
        return pace

    return round_half_up(pace)
