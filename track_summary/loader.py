"""Loader - Build tracks from plain records or JSON files.

Accepted JSON shapes:
- An array of {"time", "lat", "lon"} objects
- An object with a "points" array of such objects

Sample order is kept exactly as read.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from track_summary.model.errors import TrackFormatError
from track_summary.model.sample import Sample

logger = logging.getLogger(__name__)


def track_from_records(records: Iterable[Mapping[str, Any]]) -> list[Sample]:
    """Convert mappings to Samples, preserving order.

    Raises:
        TrackFormatError: If a record is not a mapping or lacks a field.
    """
    samples = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise TrackFormatError(f"Record {index} is not an object: {record!r}")
        samples.append(Sample.from_dict(record))
    return samples


def load_track_json(path: Path | str) -> list[Sample]:
    """Read a track from a JSON file.

    Args:
        path: File containing a points array or an object with "points"

    Returns:
        List of samples in file order.

    Raises:
        TrackFormatError: If the file is not valid JSON or has the wrong shape.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise TrackFormatError(f"{path.name} is not valid JSON: {e}") from e

    if isinstance(data, Mapping):
        if "points" not in data:
            raise TrackFormatError(f"{path.name} has no 'points' array")
        data = data["points"]
    if not isinstance(data, list):
        raise TrackFormatError(f"{path.name} must contain an array of points")

    samples = track_from_records(data)
    logger.info(f"Loaded {len(samples)} samples from {path.name}")
    return samples
