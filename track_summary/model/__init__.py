"""Data model classes for track summaries.

- Sample: One trajectory point (time, lat, lon)
- Track: Ordered sequence of samples
- Summary: Totals computed for a track
- Errors: Exception taxonomy and validation issues
"""

from track_summary.model.errors import (
    EmptyTrackError,
    TrackFormatError,
    TrackSummaryError,
    TrackValidationError,
    UndefinedPaceError,
    ValidationIssue,
)
from track_summary.model.sample import Sample, Track
from track_summary.model.summary import Summary

__all__ = [
    "Sample",
    "Track",
    "Summary",
    "TrackSummaryError",
    "EmptyTrackError",
    "UndefinedPaceError",
    "TrackFormatError",
    "TrackValidationError",
    "ValidationIssue",
]
