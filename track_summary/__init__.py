"""Track Summary - Total time, distance and pace of a recorded journey.

Given an ordered sequence of time-stamped GPS samples, computes:
- Total elapsed time (seconds)
- Total great-circle distance (kilometers, rounded per segment)
- Average pace (minutes per kilometer)

Modules:
    core: Haversine distance and track aggregations
    model: Data structures (Sample, Summary, errors)
    loader: Build tracks from records or JSON files
    validators: Optional range checks for caller-supplied tracks

Example:
    from track_summary import Sample, track_summary

    summary = track_summary([
        Sample(time=0, lat=38.7223, lon=9.1393),
        Sample(time=10800, lat=41.1579, lon=8.6291),
    ])
    print(summary.distance)  # 274.3
"""

from track_summary.model import Sample, Summary
from track_summary.summary import track_summary

__all__ = ["Sample", "Summary", "track_summary"]
