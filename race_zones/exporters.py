"""
Zone Export Module - dicts, tables, GeoDataFrames and GeoJSON.

ARCHITECTURAL OVERVIEW:
=======================
Responsibility: Convert planned zones into the shapes map clients and GIS
tools consume. Everything here is in-memory; nothing touches the disk.

Export Formats:
- Dicts: camelCase wire shape for the map client (Zone.as_dict)
- DataFrame: one row per POI with its zone assignment (pandas)
- GeoDataFrame: one rectangle per zone in EPSG:4326 (geopandas + shapely)
- GeoJSON: FeatureCollection of zone rectangles, optionally with POI points

Key Entry Points:
- zones_to_dicts(): JSON-ready list for the client
- zone_assignments_frame(): POI → zone lookup table
- zones_to_geodataframe(): GIS-ready zone rectangles
- zones_to_geojson() / zones_to_json_string(): FeatureCollection

For Navigation: Use VS Code outline (Ctrl+Shift+O)
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

import geopandas as gpd
import pandas as pd
from shapely.geometry import Point, box, mapping
from shapely.geometry.base import BaseGeometry

from race_zones.models.data_models import Zone, get_poi_coords

logger = logging.getLogger(__name__)

CRS_WGS84 = "EPSG:4326"


# ═══════════════════════════════════════════════════════════════════════════
# 🔧 HELPER FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════


def _zone_geometry(zone: Zone) -> BaseGeometry:
    """Zone bounds as a shapely rectangle (x = lng, y = lat)."""
    return box(zone.bounds.west, zone.bounds.south, zone.bounds.east, zone.bounds.north)


def _zone_properties(zone: Zone) -> Dict[str, Any]:
    """Flat property dict shared by the GeoDataFrame and GeoJSON exports."""
    return {
        "zone_id": zone.id,
        "poi_count": len(zone),
        "poi_indices": list(zone.poi_indices),
        "center_lat": zone.center.lat,
        "center_lng": zone.center.lng,
        "zoom": zone.zoom,
    }


# ═══════════════════════════════════════════════════════════════════════════
# 📤 CLIENT / TABLE EXPORT
# ═══════════════════════════════════════════════════════════════════════════


def zones_to_dicts(zones: Sequence[Zone]) -> List[Dict[str, Any]]:
    """Zones in the camelCase wire shape, in display order."""
    return [zone.as_dict() for zone in zones]


def zone_assignments_frame(zones: Sequence[Zone], pois: Sequence[Any]) -> pd.DataFrame:
    """
    One row per POI with the zone it was placed in.

    Columns:
        poi_index: Position in the caller's POI list
        zone_id: Owning zone
        order_in_zone: Position within the zone (0 = seed)
        lat, lng: POI coordinates

    Rows are sorted by poi_index.
    """
    rows = []
    for zone in zones:
        for order, poi_index in enumerate(zone.poi_indices):
            lat, lng = get_poi_coords(pois[poi_index])
            rows.append(
                {
                    "poi_index": poi_index,
                    "zone_id": zone.id,
                    "order_in_zone": order,
                    "lat": lat,
                    "lng": lng,
                }
            )

    columns = ["poi_index", "zone_id", "order_in_zone", "lat", "lng"]
    df = pd.DataFrame(rows, columns=columns)
    return df.sort_values("poi_index").reset_index(drop=True)


# ═══════════════════════════════════════════════════════════════════════════
# 🌍 GIS EXPORT
# ═══════════════════════════════════════════════════════════════════════════


def zones_to_geodataframe(zones: Sequence[Zone]) -> gpd.GeoDataFrame:
    """
    Zone rectangles as a GeoDataFrame in WGS84.

    Columns: zone_id, poi_count, poi_indices, center_lat, center_lng, zoom,
    geometry (Polygon from bounds).
    """
    rows = []
    for zone in zones:
        row = _zone_properties(zone)
        row["geometry"] = _zone_geometry(zone)
        rows.append(row)

    if not rows:
        return gpd.GeoDataFrame({"zone_id": []}, geometry=[], crs=CRS_WGS84)

    return gpd.GeoDataFrame(rows, geometry="geometry", crs=CRS_WGS84)


def zones_to_geojson(
    zones: Sequence[Zone], pois: Optional[Sequence[Any]] = None
) -> Dict[str, Any]:
    """
    Zones as a GeoJSON FeatureCollection.

    Args:
        zones: Planned zones.
        pois: Optional POI list. When given, each POI is added as a Point
            feature with its zone_id and poi_index.

    Returns:
        GeoJSON FeatureCollection dict (coordinates are [lng, lat])
    """
    features = []
    for zone in zones:
        features.append(
            {
                "type": "Feature",
                "id": zone.id,
                "properties": {"layer": "zone", **_zone_properties(zone)},
                "geometry": mapping(_zone_geometry(zone)),
            }
        )

    if pois is not None:
        for zone in zones:
            for poi_index in zone.poi_indices:
                lat, lng = get_poi_coords(pois[poi_index])
                features.append(
                    {
                        "type": "Feature",
                        "properties": {
                            "layer": "poi",
                            "zone_id": zone.id,
                            "poi_index": poi_index,
                        },
                        "geometry": mapping(Point(lng, lat)),
                    }
                )

    logger.debug(f"📄 GeoJSON built: {len(zones)} zones, {len(features)} features")

    return {
        "type": "FeatureCollection",
        "features": features,
    }


def zones_to_json_string(
    zones: Sequence[Zone], pois: Optional[Sequence[Any]] = None
) -> str:
    """Serialize zones_to_geojson() to a compact JSON string."""
    return json.dumps(zones_to_geojson(zones, pois), separators=(",", ":"))


__all__ = [
    "zones_to_dicts",
    "zone_assignments_frame",
    "zones_to_geodataframe",
    "zones_to_geojson",
    "zones_to_json_string",
]
