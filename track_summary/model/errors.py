"""Errors - Exception taxonomy for track summaries.

Every error derives from TrackSummaryError and also from the builtin the
failure corresponds to, so callers can catch either.
"""

from dataclasses import dataclass


class TrackSummaryError(Exception):
    """Base class for all track summary errors."""


class EmptyTrackError(TrackSummaryError, ValueError):
    """Raised when a summary is requested for a track without samples."""

    def __init__(self) -> None:
        super().__init__("Track must contain at least one sample")


class UndefinedPaceError(TrackSummaryError, ZeroDivisionError):
    """Raised in strict mode when pace is requested for a zero-distance track."""

    def __init__(self, total_time: float, total_distance: float) -> None:
        self.total_time = total_time
        self.total_distance = total_distance
        super().__init__(f"Pace is undefined: {total_time}s over {total_distance}km")


class TrackFormatError(TrackSummaryError, ValueError):
    """Raised when input records cannot be turned into samples."""


@dataclass(frozen=True)
class ValidationIssue:
    """A single problem found while validating a track.

    Attributes:
        index: Position of the offending sample, None for track-level issues
        field: Sample field name ("time", "lat", "lon") or "track"
        message: Human-readable description
    """

    index: int | None
    field: str
    message: str

    def __str__(self) -> str:
        if self.index is None:
            return self.message
        return f"Sample {self.index}: {self.message}"


class TrackValidationError(TrackSummaryError, ValueError):
    """Raised by ensure_valid_track() when any validation issue was found."""

    def __init__(self, issues: list[ValidationIssue]) -> None:
        self.issues = issues
        details = "; ".join(str(issue) for issue in issues)
        super().__init__(f"Invalid track ({len(issues)} issue(s)): {details}")
