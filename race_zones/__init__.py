"""
Race Zone Planner

Splits a race's checkpoints (POIs) into map-sized zones, each with a
bounding box, center and zoom level for one screen of the map.
"""

from race_zones.zone_planner import (
    plan_zones,
    get_zone_pois,
    calculate_overall_bounds,
)
from race_zones.config import CONFIG
from race_zones.config_types import ZoneConfig
from race_zones.models.data_models import Bounds, Coordinate, MapSize, Zone

__all__ = [
    "plan_zones",
    "get_zone_pois",
    "calculate_overall_bounds",
    "CONFIG",
    "ZoneConfig",
    "Bounds",
    "Coordinate",
    "MapSize",
    "Zone",
]
