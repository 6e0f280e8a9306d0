"""
Unit tests for zone exporters (dicts, DataFrame, GeoDataFrame, GeoJSON).

Run with: python -m pytest race_zones/_tests/test_exporters.py -v
"""

import json

import pytest

from race_zones import plan_zones
from race_zones.exporters import (
    zone_assignments_frame,
    zones_to_dicts,
    zones_to_geodataframe,
    zones_to_geojson,
    zones_to_json_string,
)


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def race_pois():
    """Two groups of POIs ~8 km apart, one per zone."""
    return [
        {"lat": 43.650, "lng": -79.380, "clue": "Clock tower"},
        {"lat": 43.651, "lng": -79.381, "clue": "Fountain"},
        {"lat": 43.652, "lng": -79.379, "clue": "Mural"},
        {"lat": 43.720, "lng": -79.380, "clue": "Ravine"},
        {"lat": 43.721, "lng": -79.381, "clue": "Bridge"},
        {"lat": 43.722, "lng": -79.382, "clue": "Gazebo"},
    ]


@pytest.fixture
def race_zones(race_pois):
    return plan_zones(race_pois)


# ============================================================================
# TESTS
# ============================================================================


class TestZonesToDicts:
    """Client wire shape."""

    def test_one_dict_per_zone(self, race_zones):
        dicts = zones_to_dicts(race_zones)
        assert [d["id"] for d in dicts] == ["zone-0", "zone-1"]
        assert dicts[0]["poiIndices"] == [5, 4, 3]

    def test_json_serializable(self, race_zones):
        json.dumps(zones_to_dicts(race_zones))


class TestZoneAssignmentsFrame:
    """POI → zone table."""

    def test_one_row_per_poi(self, race_zones, race_pois):
        df = zone_assignments_frame(race_zones, race_pois)

        assert list(df["poi_index"]) == list(range(6))
        assert list(df["zone_id"]) == ["zone-1"] * 3 + ["zone-0"] * 3

    def test_order_in_zone_starts_at_seed(self, race_zones, race_pois):
        df = zone_assignments_frame(race_zones, race_pois)
        seed_row = df[df["poi_index"] == 5].iloc[0]
        assert seed_row["order_in_zone"] == 0

    def test_empty(self):
        df = zone_assignments_frame([], [])
        assert len(df) == 0
        assert "zone_id" in df.columns


class TestZonesToGeoDataFrame:
    """GIS export."""

    def test_rows_and_crs(self, race_zones):
        gdf = zones_to_geodataframe(race_zones)

        assert len(gdf) == 2
        assert gdf.crs.to_epsg() == 4326
        assert list(gdf["poi_count"]) == [3, 3]

    def test_geometry_matches_bounds(self, race_zones):
        gdf = zones_to_geodataframe(race_zones)
        zone = race_zones[0]

        minx, miny, maxx, maxy = gdf.geometry.iloc[0].bounds

        assert (minx, miny, maxx, maxy) == pytest.approx(
            (zone.bounds.west, zone.bounds.south, zone.bounds.east, zone.bounds.north)
        )

    def test_empty(self):
        gdf = zones_to_geodataframe([])
        assert len(gdf) == 0
        assert gdf.crs.to_epsg() == 4326


class TestZonesToGeoJSON:
    """FeatureCollection export."""

    def test_zone_features_only(self, race_zones):
        geojson = zones_to_geojson(race_zones)

        assert geojson["type"] == "FeatureCollection"
        assert len(geojson["features"]) == 2
        feature = geojson["features"][0]
        assert feature["geometry"]["type"] == "Polygon"
        assert feature["properties"]["zone_id"] == "zone-0"
        assert feature["properties"]["layer"] == "zone"

    def test_with_poi_features(self, race_zones, race_pois):
        geojson = zones_to_geojson(race_zones, race_pois)

        points = [f for f in geojson["features"] if f["properties"]["layer"] == "poi"]
        assert len(points) == 6
        first = points[0]
        assert first["properties"] == {"layer": "poi", "zone_id": "zone-0", "poi_index": 5}
        # GeoJSON is [lng, lat]
        assert tuple(first["geometry"]["coordinates"]) == pytest.approx((-79.382, 43.722))

    def test_json_string_round_trips(self, race_zones, race_pois):
        parsed = json.loads(zones_to_json_string(race_zones, race_pois))
        assert len(parsed["features"]) == 8
