"""
═══════════════════════════════════════════════════════════════════════════════
🗺️ ZONE PLANNER
═══════════════════════════════════════════════════════════════════════════════

ARCHITECTURAL OVERVIEW
----------------------
Responsibility: Split a race's POIs into map-sized zones. Each zone gets a
bounding box, center and zoom so the client can show one zone per screen.

Key Interactions:
    - solvers.greedy_cluster() builds the initial partition
    - solvers.merge_small_clusters() folds undersized clusters into neighbours
    - map_view.calculate_bounds/center/zoom() give each zone its view
    - Callers resolve zone members with get_zone_pois()

Data Flow:
    pois (caller records, never copied)
    → pois_to_coords() → (N, 2) lat/lng array
    → greedy_cluster() → merge_small_clusters()
    → build_zone() per cluster
    → order_zones() (north→south rows, west→east within a row, ids renumbered)
    → List[Zone]

Every call is independent: config is merged into a fresh immutable
ZoneConfig and all working state is local.

NAVIGATION GUIDE
----------------
# ═════ IMPORTS
# ═════ ZONE BUILDING
# ═════ ZONE ORDERING
# ═════ PUBLIC API
# ═════ MODULE EXPORTS

For Navigation: Use VS Code outline (Ctrl+Shift+O)
═══════════════════════════════════════════════════════════════════════════════
"""

# ═══════════════════════════════════════════════════════════════════════════
# 📦 IMPORTS
# ═══════════════════════════════════════════════════════════════════════════

from dataclasses import replace
from functools import cmp_to_key
from typing import Any, Dict, List, Optional, Sequence, TypeVar, Union
import logging

import numpy as np

from race_zones.config_types import (
    DEFAULT_MAP_VIEW_CONFIG,
    DEFAULT_ZONE_CONFIG,
    ZoneConfig,
)
from race_zones.map_view import calculate_bounds, calculate_center, calculate_zoom
from race_zones.models.data_models import Bounds, MapSize, Zone, pois_to_coords
from race_zones.solvers.clustering import greedy_cluster
from race_zones.solvers.consolidation import merge_small_clusters

# Module-level logger
_logger = logging.getLogger(__name__)

P = TypeVar("P")

ROW_TOLERANCE_DEG = DEFAULT_MAP_VIEW_CONFIG.row_tolerance_deg


# ═══════════════════════════════════════════════════════════════════════════
# 🏗️ ZONE BUILDING
# ═══════════════════════════════════════════════════════════════════════════


def build_zone(
    poi_indices: Sequence[int],
    coords: np.ndarray,
    map_size: MapSize,
    position: int,
) -> Zone:
    """
    Turn one index cluster into a Zone.

    Args:
        poi_indices: Member POI indices (nonempty), kept in this order.
        coords: (N, 2) lat/lng array for all POIs.
        map_size: Viewport for the zoom calculation.
        position: Cluster position, used for the placeholder id only.

    Returns:
        Zone with bounds of its members, center at the bounds midpoint, and
        a viewport-fit zoom. The id is replaced by order_zones().
    """
    bounds = calculate_bounds(coords[list(poi_indices)])
    return Zone(
        id=f"zone-{position}",
        poi_indices=tuple(int(i) for i in poi_indices),
        bounds=bounds,
        center=calculate_center(bounds),
        zoom=calculate_zoom(bounds, map_size),
    )


# ═══════════════════════════════════════════════════════════════════════════
# ↕️ ZONE ORDERING
# ═══════════════════════════════════════════════════════════════════════════


def _compare_zones(a: Zone, b: Zone) -> float:
    """Reading order: north→south rows, west→east within a row."""
    if abs(a.bounds.north - b.bounds.north) > ROW_TOLERANCE_DEG:
        return b.bounds.north - a.bounds.north
    return a.bounds.west - b.bounds.west


def order_zones(zones: Sequence[Zone]) -> List[Zone]:
    """
    Sort zones into display order and renumber their ids.

    Zones whose north edges are within ROW_TOLERANCE_DEG of each other are
    treated as one row and ordered west to east. The sort is stable. After
    sorting, ids become "zone-0", "zone-1", ... by position; these are the
    only authoritative ids.

    Returns:
        New list of new Zone instances; the input is left untouched.
    """
    ordered = sorted(zones, key=cmp_to_key(_compare_zones))
    return [replace(zone, id=f"zone-{index}") for index, zone in enumerate(ordered)]


# ═══════════════════════════════════════════════════════════════════════════
# 🚀 PUBLIC API
# ═══════════════════════════════════════════════════════════════════════════


def plan_zones(
    pois: Sequence[Any],
    config: Optional[Union[ZoneConfig, Dict[str, Any]]] = None,
) -> List[Zone]:
    """
    Plan display zones for a list of POIs.

    Args:
        pois: POI-like records (mappings with "lat"/"lng", or objects with
            lat/lng attributes). Extra fields are ignored.
        config: Optional partial options (dict, camelCase or snake_case
            keys) or a complete ZoneConfig. Unset options use the defaults.

    Returns:
        Zones in display order. Together their poi_indices hold every index
        0..len(pois)-1 exactly once. Empty input returns [].

    Example:
        ```python
        pois = [
            {"lat": 43.65, "lng": -79.38},
            {"lat": 43.66, "lng": -79.39},
        ]
        zones = plan_zones(pois)
        # => [Zone(id="zone-0", poi_indices=(1, 0), bounds=..., center=..., zoom=...)]
        ```
    """
    if len(pois) == 0:
        return []

    zone_config = DEFAULT_ZONE_CONFIG.merged(config)
    coords = pois_to_coords(pois)

    clusters = greedy_cluster(
        coords,
        radius_m=zone_config.cluster_radius_m,
        max_size=zone_config.max_pois_per_zone,
    )
    clusters = merge_small_clusters(clusters, coords, zone_config)

    zones = [
        build_zone(poi_indices, coords, zone_config.map_size, position)
        for position, poi_indices in enumerate(clusters)
    ]
    zones = order_zones(zones)

    _logger.info(
        f"🗺️ Planned {len(zones)} zone(s) for {len(pois)} POIs "
        f"(min={zone_config.min_pois_per_zone}, "
        f"max={zone_config.max_pois_per_zone}, "
        f"radius={zone_config.cluster_radius_m:.0f}m)"
    )

    return zones


def get_zone_pois(pois: Sequence[P], zone: Zone) -> List[P]:
    """Resolve a zone's indices to the caller's own POI records, in zone order."""
    return [pois[i] for i in zone.poi_indices]


def calculate_overall_bounds(zones: Sequence[Zone]) -> Optional[Bounds]:
    """
    Bounding box spanning every zone (birds-eye overview).

    Returns:
        Bounds across all zones' bounds, or None for an empty list.
    """
    if len(zones) == 0:
        return None

    return Bounds(
        north=max(zone.bounds.north for zone in zones),
        south=min(zone.bounds.south for zone in zones),
        east=max(zone.bounds.east for zone in zones),
        west=min(zone.bounds.west for zone in zones),
    )


# ═══════════════════════════════════════════════════════════════════════════
# 📦 MODULE EXPORTS
# ═══════════════════════════════════════════════════════════════════════════

__all__ = [
    "plan_zones",
    "get_zone_pois",
    "calculate_overall_bounds",
    "build_zone",
    "order_zones",
    "ROW_TOLERANCE_DEG",
]
