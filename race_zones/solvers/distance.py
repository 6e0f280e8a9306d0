"""
Great-circle distance utilities.

Architectural Overview:
    Responsibility: Haversine distance in meters between lat/lng pairs,
        approximating Earth as a sphere of radius 6,371,000 m.
    Key Interactions:
        - haversine_distances() is used by clustering.greedy_cluster() to
          measure every unassigned POI against a seed in one call
        - haversine_distance() is used by consolidation for centroid pairs
    Navigation Guide:
        Two functions: scalar and vectorized. Same formula.
    For Navigation: Use Ctrl+Shift+O → haversine_distance

Both functions are total: any finite degree values are accepted, equal
points give 0.0, and NaN inputs propagate to a NaN distance.
"""

import math

import numpy as np

EARTH_RADIUS_M = 6371000.0


# ═══════════════════════════════════════════════════════════════════════════
# 📏 HAVERSINE DISTANCE
# ═══════════════════════════════════════════════════════════════════════════


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Distance in meters between two coordinates (haversine formula).

    Args:
        lat1, lng1: First point in degrees.
        lat2, lng2: Second point in degrees.

    Returns:
        Great-circle distance in meters.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)

    a = (
        math.sin(d_lat / 2) * math.sin(d_lat / 2)
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lng / 2)
        * math.sin(d_lng / 2)
    )
    # Rounding can push a just past 1 for near-antipodal points
    if a > 1.0:
        a = 1.0
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def haversine_distances(
    lat: float, lng: float, lats: np.ndarray, lngs: np.ndarray
) -> np.ndarray:
    """
    Distances in meters from one origin to many targets.

    Vectorized form of haversine_distance(); element i is the distance from
    (lat, lng) to (lats[i], lngs[i]).

    Args:
        lat, lng: Origin in degrees.
        lats, lngs: Target arrays in degrees, same shape.

    Returns:
        Array of distances in meters, same shape as lats.
    """
    lats = np.asarray(lats, dtype=float)
    lngs = np.asarray(lngs, dtype=float)

    d_lat = np.radians(lats - lat)
    d_lng = np.radians(lngs - lng)

    a = (
        np.sin(d_lat / 2) * np.sin(d_lat / 2)
        + np.cos(np.radians(lat))
        * np.cos(np.radians(lats))
        * np.sin(d_lng / 2)
        * np.sin(d_lng / 2)
    )
    a = np.minimum(a, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return EARTH_RADIUS_M * c


# ═══════════════════════════════════════════════════════════════════════════
# 📦 MODULE EXPORTS
# ═══════════════════════════════════════════════════════════════════════════

__all__ = [
    "EARTH_RADIUS_M",
    "haversine_distance",
    "haversine_distances",
]
