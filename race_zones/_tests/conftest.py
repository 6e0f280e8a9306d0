"""Shared fixtures for zone planner tests."""

import math
from typing import Callable, Dict

import pytest

# Meters per degree of latitude on the 6,371 km sphere
METERS_PER_DEG_LAT = 6371000.0 * math.pi / 180.0

TORONTO = (43.65, -79.38)


def offset_poi(
    lat: float, lng: float, north_m: float = 0.0, east_m: float = 0.0
) -> Dict[str, float]:
    """POI dict displaced from (lat, lng) by the given meters."""
    d_lat = north_m / METERS_PER_DEG_LAT
    d_lng = east_m / (METERS_PER_DEG_LAT * math.cos(math.radians(lat)))
    return {"lat": lat + d_lat, "lng": lng + d_lng}


@pytest.fixture
def offset() -> Callable[..., Dict[str, float]]:
    """Build POIs at meter offsets from a reference point."""
    return offset_poi


@pytest.fixture
def tight_cluster_pois():
    """Twelve POIs within 100 m of downtown Toronto."""
    lat, lng = TORONTO
    return [
        offset_poi(lat, lng, north_m=(i % 4) * 10.0, east_m=(i // 4) * 10.0)
        for i in range(12)
    ]


@pytest.fixture
def city_pois():
    """Forty POIs scattered over roughly 10 km x 10 km (fixed seed)."""
    import numpy as np

    rng = np.random.default_rng(42)
    lat, lng = TORONTO
    return [
        offset_poi(lat, lng, north_m=float(n), east_m=float(e))
        for n, e in rng.uniform(-5000.0, 5000.0, size=(40, 2))
    ]
