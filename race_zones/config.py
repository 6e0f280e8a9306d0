#!/usr/bin/env python3
"""
Race Zone Planner - Configuration

ARCHITECTURAL OVERVIEW:
=======================
Responsibility: Centralized default configuration for zone planning.
Single source of truth for zone sizing, clustering radius, and map view
(zoom) parameters.

Configuration Sections (ordered by importance for clustering tuning):
1. zones: POIs per zone, cluster radius, map viewport size
2. map_view: Zoom clamping, tile size, fit padding, row ordering tolerance

Callers never mutate CONFIG. Per-call options are merged into an immutable
ZoneConfig (see config_types.ZoneConfig.merged).

Navigation Guide:
- Use VS Code outline (Ctrl+Shift+O) to jump between sections
"""

import os
from typing import Dict, Any, TypeVar, Callable, Optional

T = TypeVar("T")


def _env_or_default(
    key: str, default: T, type_fn: Optional[Callable[[str], T]] = None
) -> T:
    """
    Get value from environment variable or use default.

    Args:
        key: Environment variable name (e.g., "RACE_ZONES_MAX_POIS")
        default: Default value if env var not set
        type_fn: Optional type conversion function (e.g., float, int)

    Returns:
        Value from environment (converted) or default

    Example:
        >>> _env_or_default("RACE_ZONES_CLUSTER_RADIUS_M", 1000.0, float)
        1000.0  # If env var not set
    """
    val = os.getenv(key)
    if val is not None:
        if type_fn is not None:
            return type_fn(val)
        return val  # type: ignore
    return default


# ═══════════════════════════════════════════════════════════════════════════
# 🔧 ENVIRONMENT VARIABLE OVERRIDES
# ═══════════════════════════════════════════════════════════════════════════
# Default zone sizing can be overridden via environment variables:
#
# RACE_ZONES_MIN_POIS         - int, soft lower bound per zone (default: 3)
# RACE_ZONES_MAX_POIS         - int, hard upper bound per zone (default: 10)
# RACE_ZONES_CLUSTER_RADIUS_M - float, seed radius in meters (default: 1000)
#
# Values are read once, when this module is imported.
# ═══════════════════════════════════════════════════════════════════════════

# ═══════════════════════════════════════════════════════════════════════════
# ⚙️ MASTER CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════

CONFIG: Dict[str, Any] = {
    # ═══════════════════════════════════════════════════════════════════════
    # 📍 ZONE SIZING
    # ═══════════════════════════════════════════════════════════════════════
    "zones": {
        # Soft target: undersized clusters are merged into neighbours when a
        # legal merge exists, otherwise they stay small
        "min_pois_per_zone": _env_or_default("RACE_ZONES_MIN_POIS", 3, int),
        # Hard bound: never exceeded
        "max_pois_per_zone": _env_or_default("RACE_ZONES_MAX_POIS", 10, int),
        # Max distance from a cluster seed for initial membership.
        # Merges are allowed up to 3x this distance (centroid to centroid)
        "cluster_radius_m": _env_or_default(
            "RACE_ZONES_CLUSTER_RADIUS_M", 1000.0, float
        ),
        # Viewport used only for zoom calculation (phone portrait map)
        "map_size": {"width": 400, "height": 600},
    },
    # ═══════════════════════════════════════════════════════════════════════
    # 🗺️ MAP VIEW (zoom + fit region)
    # ═══════════════════════════════════════════════════════════════════════
    "map_view": {
        "min_zoom": 1,
        "max_zoom": 18,  # Street level; also used for single-POI zones
        "tile_size_px": 256,  # Web Mercator tile edge
        "padding_factor": 1.5,  # Span multiplier so markers are not on the edge
        "min_span_deg": 0.01,  # Floor for fit-region spans
        # Zones whose north edges differ by <= this are treated as one row
        "row_tolerance_deg": 0.01,
    },
}
