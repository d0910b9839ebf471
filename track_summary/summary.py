"""Entry point - Summarize a track into total time, distance and pace."""

import logging

from track_summary.core.aggregators import calculate_distance, calculate_pace, calculate_time
from track_summary.model.errors import EmptyTrackError
from track_summary.model.sample import Track
from track_summary.model.summary import Summary

logger = logging.getLogger(__name__)


def track_summary(points: Track, strict: bool = False) -> Summary:
    """Compute total time, distance and average pace of a track.

    Input is trusted: samples are neither validated nor reordered.
    See track_summary.validators for optional checks before calling.

    Args:
        points: Ordered samples with time, lat and lon
        strict: Raise UndefinedPaceError instead of returning a non-finite pace

    Returns:
        Summary with time (s), distance (km) and pace (min/km).

    Raises:
        EmptyTrackError: If the track has no samples.
    """
    if len(points) == 0:
        raise EmptyTrackError()

    total_time = calculate_time(points)
    total_distance = calculate_distance(points)
    pace = calculate_pace(total_time=total_time, total_distance=total_distance, strict=strict)

    summary = Summary(time=total_time, distance=total_distance, pace=pace)
    logger.debug(f"Summarized {len(points)} samples: {summary}")
    return summary
