"""
Map view calculations: bounds, center, zoom and fit regions.

═══════════════════════════════════════════════════════════════════════════════
ARCHITECTURAL OVERVIEW
═══════════════════════════════════════════════════════════════════════════════

Responsibility: Pure functions turning a set of POIs into what a map client
needs to show them: a bounding box, its midpoint, a zoom level for a given
viewport, and a padded fit region for the race editor.

Key Features:
- Bounds via numpy min/max (NaN coordinates propagate)
- Zoom via Web Mercator (EPSG:3857) projection with pyproj
- No antimeridian handling: east/west are raw longitudes

Key Interactions:
- zone_planner.build_zone() calls calculate_bounds/center/zoom per cluster
- Editors call calculate_fit_region() to frame every POI of a race

For Navigation: Use VS Code outline (Ctrl+Shift+O)

═══════════════════════════════════════════════════════════════════════════════
"""

import logging
import math
from functools import lru_cache
from typing import Any, Optional, Sequence, Union

import numpy as np
from pyproj import Transformer

from race_zones.config_types import DEFAULT_MAP_VIEW_CONFIG, MapViewConfig
from race_zones.models.data_models import (
    Bounds,
    Coordinate,
    FitRegion,
    MapSize,
    pois_to_coords,
)

logger = logging.getLogger(__name__)

CRS_WGS84 = "EPSG:4326"
CRS_WEB_MERCATOR = "EPSG:3857"

# Equatorial circumference of the Web Mercator sphere
WEB_MERCATOR_WORLD_M = 2 * math.pi * 6378137.0


# ═══════════════════════════════════════════════════════════════════════════════
# 🗺️ COORDINATE TRANSFORMATION
# ═══════════════════════════════════════════════════════════════════════════════


@lru_cache(maxsize=1)
def _get_mercator_transformer() -> Transformer:
    """WGS84 → Web Mercator transformer, built once per process."""
    return Transformer.from_crs(CRS_WGS84, CRS_WEB_MERCATOR, always_xy=True)


def _as_coords(points: Union[np.ndarray, Sequence[Any]]) -> np.ndarray:
    """Accept an (N, 2) lat/lng array or a sequence of POI-like records."""
    if isinstance(points, np.ndarray):
        return points
    return pois_to_coords(points)


# ═══════════════════════════════════════════════════════════════════════════════
# 📐 BOUNDS + CENTER
# ═══════════════════════════════════════════════════════════════════════════════


def calculate_bounds(points: Union[np.ndarray, Sequence[Any]]) -> Bounds:
    """Compute the bounding box of a set of points.

    Args:
        points: POI-like records, or an (N, 2) array of (lat, lng)

    Returns:
        Bounds with north/south from latitudes and east/west from longitudes

    Raises:
        ValueError: If points is empty
    """
    coords = _as_coords(points)
    if len(coords) == 0:
        raise ValueError("Cannot compute bounds of an empty point set")

    lats = coords[:, 0]
    lngs = coords[:, 1]
    return Bounds(
        north=float(np.max(lats)),
        south=float(np.min(lats)),
        east=float(np.max(lngs)),
        west=float(np.min(lngs)),
    )


def calculate_center(bounds: Bounds) -> Coordinate:
    """Midpoint of the bounding box (not the centroid of its points)."""
    return Coordinate(
        lat=(bounds.north + bounds.south) / 2.0,
        lng=(bounds.east + bounds.west) / 2.0,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# 🔍 ZOOM
# ═══════════════════════════════════════════════════════════════════════════════


def calculate_zoom(
    bounds: Bounds,
    map_size: MapSize,
    view_config: MapViewConfig = DEFAULT_MAP_VIEW_CONFIG,
) -> float:
    """
    Largest whole zoom level at which the padded bounds fit the viewport.

    Bounds corners are projected to Web Mercator meters. At zoom z a
    tile_size_px tile spans WEB_MERCATOR_WORLD_M / 2**z meters, so the
    fitting zoom per axis is log2(viewport_px * world_m / (tile_px * span_m)).
    The tighter axis wins, the result is floored and clamped to
    [min_zoom, max_zoom]. Zero-area bounds (one POI) give max_zoom.

    Args:
        bounds: Area that must be visible
        map_size: Viewport in pixels
        view_config: Zoom limits, tile size and padding

    Returns:
        Zoom level as float (NaN if bounds contain NaN)
    """
    # Projection maps NaN to inf, which would clamp instead of propagating
    if np.isnan([bounds.north, bounds.south, bounds.east, bounds.west]).any():
        return math.nan

    transformer = _get_mercator_transformer()
    west_x, south_y = transformer.transform(bounds.west, bounds.south)
    east_x, north_y = transformer.transform(bounds.east, bounds.north)

    span_x = np.abs(np.float64(east_x) - west_x) * view_config.padding_factor
    span_y = np.abs(np.float64(north_y) - south_y) * view_config.padding_factor
    tile = view_config.tile_size_px

    with np.errstate(divide="ignore", invalid="ignore"):
        zoom_x = np.log2(map_size.width * WEB_MERCATOR_WORLD_M / (tile * span_x))
        zoom_y = np.log2(map_size.height * WEB_MERCATOR_WORLD_M / (tile * span_y))

    zoom = np.floor(np.minimum(zoom_x, zoom_y))
    return float(np.clip(zoom, view_config.min_zoom, view_config.max_zoom))


# ═══════════════════════════════════════════════════════════════════════════════
# 🖼️ FIT REGION (editor "show all POIs")
# ═══════════════════════════════════════════════════════════════════════════════


def calculate_fit_region(
    points: Union[np.ndarray, Sequence[Any]],
    padding: Optional[float] = None,
    min_span_deg: Optional[float] = None,
    view_config: MapViewConfig = DEFAULT_MAP_VIEW_CONFIG,
) -> Optional[FitRegion]:
    """Center and padded degree spans that frame every point.

    Args:
        points: POI-like records, or an (N, 2) array of (lat, lng)
        padding: Span multiplier (default: view_config.padding_factor)
        min_span_deg: Span floor in degrees (default: view_config.min_span_deg)

    Returns:
        FitRegion, or None when there are no points
    """
    coords = _as_coords(points)
    if len(coords) == 0:
        return None

    padding = view_config.padding_factor if padding is None else padding
    min_span_deg = view_config.min_span_deg if min_span_deg is None else min_span_deg

    bounds = calculate_bounds(coords)
    lat_span = (bounds.north - bounds.south) * padding
    lng_span = (bounds.east - bounds.west) * padding

    region = FitRegion(
        center=calculate_center(bounds),
        lat_span=max(lat_span, min_span_deg),
        lng_span=max(lng_span, min_span_deg),
    )
    logger.debug(
        f"🖼️ Fit region for {len(coords)} POIs: "
        f"{region.lat_span:.4f}° x {region.lng_span:.4f}°"
    )
    return region


__all__ = [
    "calculate_bounds",
    "calculate_center",
    "calculate_zoom",
    "calculate_fit_region",
]
