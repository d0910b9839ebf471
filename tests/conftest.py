"""Shared pytest fixtures for track_summary tests.

COORDINATE SYSTEM:
    Meridian tracks keep lon fixed, so every segment is an arc of exactly
    dlat radians and its length is EARTH_RADIUS_KM * dlat (111.19 km per degree).
    This makes expected distances computable without the haversine formula.
"""

import pytest

from track_summary.model.sample import Sample


def meridian_track(lat_step_deg: float, n_points: int, lon: float = 0.0) -> list[Sample]:
    """Samples walking north along one meridian, one minute apart."""
    return [Sample(time=0.0 if i == 0 else 60.0, lat=i * lat_step_deg, lon=lon) for i in range(n_points)]


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def lisbon() -> Sample:
    """Lisbon 38.7223° N, 9.1393°."""
    return Sample(time=0, lat=38.7223, lon=9.1393)


@pytest.fixture
def porto() -> Sample:
    """Porto 41.1579° N, 8.6291°, reached three hours later."""
    return Sample(time=10800, lat=41.1579, lon=8.6291)


@pytest.fixture
def lisbon_to_porto(lisbon: Sample, porto: Sample) -> list[Sample]:
    """Canonical regression track: 10800s, 274.3km, 0.66 min/km."""
    return [lisbon, porto]


@pytest.fixture
def make_meridian_track():
    """Factory for meridian tracks, see meridian_track()."""
    return meridian_track


@pytest.fixture
def short_steps_track() -> list[Sample]:
    """Ten 11.1m segments along the equator meridian.

    Each segment is 0.0111 km and rounds to 0.01, so per-segment rounding
    gives 0.10 km while rounding the unrounded total gives 0.11 km.
    """
    return meridian_track(lat_step_deg=0.0001, n_points=11)
