"""Validators - Optional input checks for tracks.

The summary engine trusts its input. Callers that want to reject bad data
run these first.

Design Principles:
- No exceptions for expected validation failures
- Validators return a list of ValidationIssue (empty if valid)
- ensure_valid_track() is the one raising entry point
"""

from math import isfinite

from track_summary.constants import GeoConfig
from track_summary.model.errors import TrackValidationError, ValidationIssue
from track_summary.model.sample import Sample, Track


def _check_range(value: float, bounds: tuple[float, float], field: str, index: int) -> ValidationIssue | None:
    low, high = bounds
    if not isfinite(value):
        return ValidationIssue(index=index, field=field, message=f"{field} is not finite ({value})")
    if not low <= value <= high:
        return ValidationIssue(
            index=index,
            field=field,
            message=f"{field} {value} outside [{low:g}, {high:g}]",
        )
    return None


def validate_sample(sample: Sample, index: int) -> list[ValidationIssue]:
    """Check time, latitude and longitude of one sample.

    Returns:
        Issues found, empty if the sample is valid.
    """
    issues = []
    if not isfinite(sample.time):
        issues.append(ValidationIssue(index=index, field="time", message=f"time is not finite ({sample.time})"))
    elif sample.time < 0:
        issues.append(ValidationIssue(index=index, field="time", message=f"time {sample.time} is negative"))

    for issue in (
        _check_range(sample.lat, GeoConfig.LAT_RANGE, "lat", index),
        _check_range(sample.lon, GeoConfig.LON_RANGE, "lon", index),
    ):
        if issue is not None:
            issues.append(issue)
    return issues


def validate_track(points: Track) -> list[ValidationIssue]:
    """Check that a track is non-empty and every sample is in range.

    Returns:
        Issues found in sample order, empty if the track is valid.
    """
    if len(points) == 0:
        return [ValidationIssue(index=None, field="track", message="Track has no samples")]

    issues = []
    for index, sample in enumerate(points):
        issues.extend(validate_sample(sample, index))
    return issues


def ensure_valid_track(points: Track) -> None:
    """Raise TrackValidationError if validate_track() reports anything."""
    issues = validate_track(points)
    if issues:
        raise TrackValidationError(issues)
