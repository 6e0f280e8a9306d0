"""
Typed data models for zone planning.

Architectural Overview:
=======================
This module contains immutable dataclasses for the values the zone planner
produces: coordinates, bounding boxes, viewport sizes and zones. Caller POIs
are NOT modelled here - the planner accepts any POI-like record and only
ever reads its lat/lng through get_poi_coords().

Key Interactions:
-----------------
- Input: plan_zones() reads caller POIs via get_poi_coords()/pois_to_coords()
- Output: Zone instances returned by plan_zones(); as_dict() gives the
  camelCase wire shape expected by the map client
- Navigation: Use VS Code outline (Ctrl+Shift+O) for quick navigation

Ownership:
----------
Zones reference caller POIs by index (poi_indices) only. POIs are never
copied or mutated.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Sequence, Tuple

import numpy as np


# ═══════════════════════════════════════════════════════════════════════════
# 📍 COORDINATE / BOUNDS / VIEWPORT
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lng: float

    def as_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box in degrees.

    Invariant: north >= south. east/west are NOT wraparound-normalized, so a
    box crossing the antimeridian is not representable.
    """

    north: float
    south: float
    east: float
    west: float

    def as_dict(self) -> Dict[str, float]:
        return {
            "north": self.north,
            "south": self.south,
            "east": self.east,
            "west": self.west,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Bounds":
        """Create Bounds from a {"north", "south", "east", "west"} mapping."""
        return cls(
            north=float(d["north"]),
            south=float(d["south"]),
            east=float(d["east"]),
            west=float(d["west"]),
        )


@dataclass(frozen=True)
class MapSize:
    """Map viewport in pixels. Only consumed by the zoom calculator."""

    width: int = 400
    height: int = 600

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "MapSize":
        """Create MapSize from a {"width", "height"} mapping."""
        return cls(
            width=d.get("width", 400),
            height=d.get("height", 600),
        )

    def as_dict(self) -> Dict[str, int]:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class FitRegion:
    """Center + padded spans used to fit a set of POIs on screen.

    Spans are in degrees, already multiplied by the padding factor and
    floored at the minimum span.
    """

    center: Coordinate
    lat_span: float
    lng_span: float


# ═══════════════════════════════════════════════════════════════════════════
# 🗺️ ZONE DATACLASS
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Zone:
    """A group of POIs displayed together on one map view.

    Why Immutable (frozen=True):
    ----------------------------
    The orderer renumbers ids after sorting. It does so by creating NEW Zone
    instances with dataclasses.replace(), so a zone handed out by one stage
    can never change underneath another.

    Attributes:
        id: "zone-<n>", authoritative only after ordering
        poi_indices: Positions in the caller's original POI list, in
            insertion order (seed first, then nearest candidates)
        bounds: Bounding box of the member POIs
        center: Midpoint of bounds (NOT the member centroid)
        zoom: Recommended zoom level for the map viewport

    Usage Examples:
    ---------------
    ```python
    zones = plan_zones(pois)
    payload = [zone.as_dict() for zone in zones]
    first_zone_pois = get_zone_pois(pois, zones[0])
    ```
    """

    id: str
    poi_indices: Tuple[int, ...]
    bounds: Bounds
    center: Coordinate
    zoom: float

    def __len__(self) -> int:
        return len(self.poi_indices)

    def as_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase wire shape used by the map client.

        Returns:
            {"id", "poiIndices", "bounds", "center", "zoom"}
        """
        return {
            "id": self.id,
            "poiIndices": list(self.poi_indices),
            "bounds": self.bounds.as_dict(),
            "center": self.center.as_dict(),
            "zoom": self.zoom,
        }


# ═══════════════════════════════════════════════════════════════════════════
# 🔧 DUCK-TYPED ACCESSOR FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════


def get_poi_coords(poi: Any) -> Tuple[float, float]:
    """Extract (lat, lng) from a POI-like record (duck-typed).

    Accepts anything with lat/lng attributes (Coordinate, ORM rows,
    namedtuples) or a mapping with "lat"/"lng" keys. Any other field on the
    record is ignored.

    Args:
        poi: POI-like record

    Returns:
        Tuple of (lat, lng) as raw floats

    Raises:
        TypeError: If the record exposes neither shape
    """
    if hasattr(poi, "lat") and hasattr(poi, "lng"):
        return (float(poi.lat), float(poi.lng))
    if isinstance(poi, Mapping) and "lat" in poi and "lng" in poi:
        return (float(poi["lat"]), float(poi["lng"]))
    raise TypeError(
        f"POI must have lat/lng attributes or keys, got {type(poi).__name__}"
    )


def pois_to_coords(pois: Sequence[Any]) -> np.ndarray:
    """Batch-convert POI-like records to an (N, 2) array of (lat, lng).

    Row i corresponds to pois[i], so array indices ARE poi indices.
    """
    if len(pois) == 0:
        return np.empty((0, 2), dtype=float)
    return np.array([get_poi_coords(poi) for poi in pois], dtype=float)
