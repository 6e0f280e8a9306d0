"""
Unit tests for zone-planning data models and duck-typed POI access.
"""

from collections import namedtuple
from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from race_zones.models import (
    Bounds,
    Coordinate,
    MapSize,
    Zone,
    get_poi_coords,
    pois_to_coords,
)


@pytest.fixture
def sample_zone():
    return Zone(
        id="zone-0",
        poi_indices=(2, 0),
        bounds=Bounds(north=43.66, south=43.65, east=-79.37, west=-79.38),
        center=Coordinate(lat=43.655, lng=-79.375),
        zoom=15.0,
    )


class TestGetPoiCoords:
    """Accepted POI shapes."""

    def test_mapping(self):
        """Dicts with lat/lng keys; other keys ignored."""
        assert get_poi_coords({"lat": 1.5, "lng": -2.5, "clue": "x"}) == (1.5, -2.5)

    def test_attributes(self):
        """Objects with lat/lng attributes."""
        Poi = namedtuple("Poi", ["name", "lat", "lng"])
        assert get_poi_coords(Poi("Tower", 43.64, -79.39)) == (43.64, -79.39)

    def test_coordinate(self):
        """Coordinate is itself POI-like."""
        assert get_poi_coords(Coordinate(lat=1.0, lng=2.0)) == (1.0, 2.0)

    def test_numeric_strings_are_converted(self):
        """Values are coerced to float."""
        assert get_poi_coords({"lat": "43.65", "lng": "-79.38"}) == (43.65, -79.38)

    def test_missing_shape_raises(self):
        """Records without lat/lng are rejected."""
        with pytest.raises(TypeError):
            get_poi_coords({"latitude": 1.0, "longitude": 2.0})

    def test_tuple_is_not_a_poi(self):
        """Bare tuples are ambiguous and rejected."""
        with pytest.raises(TypeError):
            get_poi_coords((1.0, 2.0))


class TestPoisToCoords:
    """Batch conversion."""

    def test_rows_follow_input_order(self):
        coords = pois_to_coords([{"lat": 1.0, "lng": 2.0}, {"lat": 3.0, "lng": 4.0}])
        np.testing.assert_array_equal(coords, [[1.0, 2.0], [3.0, 4.0]])

    def test_empty(self):
        assert pois_to_coords([]).shape == (0, 2)


class TestZone:
    """Zone record."""

    def test_len_is_member_count(self, sample_zone):
        assert len(sample_zone) == 2

    def test_as_dict_wire_shape(self, sample_zone):
        """camelCase keys, indices as a list."""
        assert sample_zone.as_dict() == {
            "id": "zone-0",
            "poiIndices": [2, 0],
            "bounds": {"north": 43.66, "south": 43.65, "east": -79.37, "west": -79.38},
            "center": {"lat": 43.655, "lng": -79.375},
            "zoom": 15.0,
        }

    def test_frozen(self, sample_zone):
        with pytest.raises(FrozenInstanceError):
            sample_zone.id = "zone-9"


class TestBoundsAndMapSize:
    """Small value types."""

    def test_bounds_from_dict(self):
        d = {"north": 2.0, "south": 1.0, "east": 4.0, "west": 3.0}
        assert Bounds.from_dict(d).as_dict() == d

    def test_map_size_from_partial_dict(self):
        assert MapSize.from_dict({"width": 1024}) == MapSize(width=1024, height=600)
