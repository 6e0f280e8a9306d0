"""
═══════════════════════════════════════════════════════════════════════════════
📋 CONFIGURATION TYPES
═══════════════════════════════════════════════════════════════════════════════

ARCHITECTURAL OVERVIEW
----------------------
Responsibility: Typed, immutable configuration for the zone planner.
Wraps the CONFIG dictionary in frozen dataclasses.

It provides:
1. ZoneConfig - clustering/sizing options, merged once per plan_zones() call
2. MapViewConfig - zoom and fit-region constants for map_view
3. Module-level defaults built from CONFIG at import time

Usage:
    from race_zones.config_types import DEFAULT_ZONE_CONFIG

    # Caller-supplied partial options override the defaults
    config = DEFAULT_ZONE_CONFIG.merged({"maxPoisPerZone": 8})

For Navigation: Use VS Code outline (Ctrl+Shift+O)

NAVIGATION GUIDE
----------------
# ═════ 1. ZONE CONFIGURATION
# ═════ 2. MAP VIEW CONFIGURATION
# ═════ 3. MODULE DEFAULTS

═══════════════════════════════════════════════════════════════════════════════
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Any, Mapping, Optional, Union
import logging

from race_zones.config import CONFIG
from race_zones.models.data_models import MapSize

_logger = logging.getLogger(__name__)

# Client-side (camelCase) option names accepted alongside the field names
_ZONE_KEY_ALIASES: Dict[str, str] = {
    "minPoisPerZone": "min_pois_per_zone",
    "maxPoisPerZone": "max_pois_per_zone",
    "clusterRadiusMeters": "cluster_radius_m",
    "cluster_radius_meters": "cluster_radius_m",
    "mapSize": "map_size",
}

_ZONE_FIELDS = ("min_pois_per_zone", "max_pois_per_zone", "cluster_radius_m", "map_size")


# ═══════════════════════════════════════════════════════════════════════════════
# 📍 1. ZONE CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════


def _normalize_zone_options(d: Dict[str, Any]) -> Dict[str, Any]:
    """Map camelCase keys to field names and drop unset (None) values."""
    options: Dict[str, Any] = {}
    for key, value in d.items():
        name = _ZONE_KEY_ALIASES.get(key, key)
        if name not in _ZONE_FIELDS:
            _logger.debug(f"Ignoring unknown zone option '{key}'")
            continue
        if value is None:
            continue
        if name == "map_size" and not isinstance(value, MapSize):
            if not isinstance(value, Mapping):
                raise TypeError(
                    f"mapSize must be a mapping or MapSize, got {type(value).__name__}"
                )
            value = MapSize.from_dict(value)
        options[name] = value
    return options


@dataclass(frozen=True)
class ZoneConfig:
    """
    Zone planning options.

    No validation happens on construction: plan_zones() is total over any
    config, and degenerate values (max <= 0, min > max) simply produce
    degenerate clustering. Callers building config from user input should
    call validate() themselves.

    Attributes:
        min_pois_per_zone: Soft lower bound; undersized clusters are merged
            when a legal partner exists, otherwise left as-is.
        max_pois_per_zone: Hard upper bound, never exceeded.
        cluster_radius_m: Max distance from a seed for initial membership.
        map_size: Viewport used only by the zoom calculator.
    """

    min_pois_per_zone: int = 3
    max_pois_per_zone: int = 10
    cluster_radius_m: float = 1000.0
    map_size: MapSize = field(default_factory=MapSize)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ZoneConfig":
        """Create ZoneConfig from CONFIG['zones'] or a client options dict.

        Accepts both field names and camelCase client names
        (minPoisPerZone, maxPoisPerZone, clusterRadiusMeters, mapSize).
        Missing keys fall back to the dataclass defaults.
        """
        return cls(**_normalize_zone_options(d))

    @property
    def max_merge_distance_m(self) -> float:
        """Largest centroid-to-centroid distance allowed for a merge."""
        return self.cluster_radius_m * 3

    def merged(
        self, overrides: Optional[Union["ZoneConfig", Dict[str, Any]]] = None
    ) -> "ZoneConfig":
        """Return a new config with caller-supplied options layered on top.

        Args:
            overrides: None (use self), a complete ZoneConfig (used as-is),
                or a partial options dict whose set keys replace ours.

        Returns:
            Immutable ZoneConfig for a single planning call

        Raises:
            TypeError: If overrides is not None, a dict, or a ZoneConfig,
                or if its mapSize is neither a mapping nor a MapSize
        """
        if overrides is None:
            return self
        if isinstance(overrides, ZoneConfig):
            return overrides
        if isinstance(overrides, dict):
            return replace(self, **_normalize_zone_options(overrides))
        raise TypeError(
            f"Zone options must be a dict or ZoneConfig, got {type(overrides).__name__}"
        )

    def validate(self) -> None:
        """Check the options describe a sane clustering.

        Raises:
            ValueError: On non-positive sizes, min > max, non-positive radius,
                or a non-positive map viewport
        """
        if self.max_pois_per_zone <= 0:
            raise ValueError(
                f"max_pois_per_zone must be > 0, got {self.max_pois_per_zone}"
            )
        if self.min_pois_per_zone <= 0:
            raise ValueError(
                f"min_pois_per_zone must be > 0, got {self.min_pois_per_zone}"
            )
        if self.min_pois_per_zone > self.max_pois_per_zone:
            raise ValueError(
                f"min_pois_per_zone ({self.min_pois_per_zone}) must be <= "
                f"max_pois_per_zone ({self.max_pois_per_zone})"
            )
        if self.cluster_radius_m <= 0:
            raise ValueError(
                f"cluster_radius_m must be > 0, got {self.cluster_radius_m}"
            )
        if self.map_size.width <= 0 or self.map_size.height <= 0:
            raise ValueError(
                f"map_size must be positive, got "
                f"{self.map_size.width}x{self.map_size.height}"
            )


# ═══════════════════════════════════════════════════════════════════════════════
# 🗺️ 2. MAP VIEW CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class MapViewConfig:
    """
    Constants for zoom calculation, fit regions and zone ordering.

    Attributes:
        min_zoom: Lowest zoom level returned by calculate_zoom.
        max_zoom: Highest zoom level (also used for zero-area bounds).
        tile_size_px: Web Mercator tile edge in pixels.
        padding_factor: Span multiplier applied before fitting.
        min_span_deg: Minimum fit-region span in degrees.
        row_tolerance_deg: North-edge difference treated as the same row.
    """

    min_zoom: int = 1
    max_zoom: int = 18
    tile_size_px: int = 256
    padding_factor: float = 1.5
    min_span_deg: float = 0.01
    row_tolerance_deg: float = 0.01

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "MapViewConfig":
        """Create MapViewConfig from CONFIG['map_view'] dictionary."""
        return cls(
            min_zoom=d.get("min_zoom", 1),
            max_zoom=d.get("max_zoom", 18),
            tile_size_px=d.get("tile_size_px", 256),
            padding_factor=d.get("padding_factor", 1.5),
            min_span_deg=d.get("min_span_deg", 0.01),
            row_tolerance_deg=d.get("row_tolerance_deg", 0.01),
        )

    def __post_init__(self) -> None:
        """Validate map view configuration."""
        if self.min_zoom > self.max_zoom:
            raise ValueError(
                f"min_zoom ({self.min_zoom}) must be <= max_zoom ({self.max_zoom})"
            )
        if self.tile_size_px <= 0:
            raise ValueError(f"tile_size_px must be > 0, got {self.tile_size_px}")
        if self.padding_factor <= 0:
            raise ValueError(
                f"padding_factor must be > 0, got {self.padding_factor}"
            )


# ═══════════════════════════════════════════════════════════════════════════════
# 📦 3. MODULE DEFAULTS
# ═══════════════════════════════════════════════════════════════════════════════

DEFAULT_ZONE_CONFIG = ZoneConfig.from_dict(CONFIG["zones"])
DEFAULT_MAP_VIEW_CONFIG = MapViewConfig.from_dict(CONFIG["map_view"])

__all__ = [
    "ZoneConfig",
    "MapViewConfig",
    "DEFAULT_ZONE_CONFIG",
    "DEFAULT_MAP_VIEW_CONFIG",
]
