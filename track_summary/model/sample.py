"""Sample - One time-stamped point of a journey.

A Sample is an immutable value record. It has no identity beyond its
position in the Track that holds it.

Used by:
- Distance aggregation (consecutive sample pairs)
- Time aggregation (per-sample elapsed time)
- Loader and validators (building and checking tracks)
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from track_summary.model.errors import TrackFormatError


@dataclass(frozen=True)
class Sample:
    """A trajectory point with elapsed time and GPS coordinates.

    Attributes:
        time: Seconds elapsed since the previous sample (start offset for the first)
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees

    Example:
        sample = Sample(time=0.0, lat=38.7223, lon=9.1393)
    """

    time: float
    lat: float
    lon: float

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (lat, lon) tuple - standard geographic order."""
        return (self.lat, self.lon)

    def to_dict(self) -> dict[str, float]:
        return {"time": self.time, "lat": self.lat, "lon": self.lon}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Sample":
        """Create Sample from a mapping with time, lat and lon keys.

        Raises:
            TrackFormatError: If a key is missing or a value is not numeric.
        """
        try:
            return cls(
                time=float(data["time"]),
                lat=float(data["lat"]),
                lon=float(data["lon"]),
            )
        except KeyError as e:
            raise TrackFormatError(f"Sample is missing field {e.args[0]!r}: {dict(data)}") from e
        except (TypeError, ValueError) as e:
            raise TrackFormatError(f"Sample has a non-numeric field: {dict(data)}") from e

    def __repr__(self) -> str:
        return f"Sample(time={self.time:.1f}s, lat={self.lat:.5f}, lon={self.lon:.5f})"


# Ordered, read-only sequence of samples; order defines the journey
Track = Sequence[Sample]
