"""Data models package for typed zone-planning data structures."""

from .data_models import (
    Bounds,
    Coordinate,
    FitRegion,
    MapSize,
    Zone,
    # Duck-typed accessor functions
    get_poi_coords,
    pois_to_coords,
)

__all__ = [
    # Value types
    "Bounds",
    "Coordinate",
    "FitRegion",
    "MapSize",
    "Zone",
    # Duck-typed accessor functions
    "get_poi_coords",
    "pois_to_coords",
]
