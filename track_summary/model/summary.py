"""Summary - Result of summarizing a track."""

from dataclasses import asdict, dataclass

import numpy as np


@dataclass(frozen=True)
class Summary:
    """Totals for one track.

    Attributes:
        time: Total elapsed seconds, exact sum of the sample times
        distance: Total kilometers, sum of segment distances rounded per segment
        pace: Minutes per kilometer, rounded to 2 decimals (inf or nan for zero distance)
    """

    time: float
    distance: float
    pace: float

    @property
    def has_finite_pace(self) -> bool:
        return bool(np.isfinite(self.pace))

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.distance:.2f}km in {self.time:.0f}s ({self.pace:.2f} min/km)"
