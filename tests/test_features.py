"""Tests for GeoJSON feature building and palette assignment."""

import pytest

from gps_trips import Trip, TripMetrics, TripParams, build_feature, build_feature_collection
from gps_trips.features import pick_color, round_half_up
from gps_trips.models import DEFAULT_PALETTE


@pytest.fixture
def metrics():
    return TripMetrics(
        total_distance_km=1.23456,
        duration_min=12.3456,
        avg_speed_kmh=6.005,
        max_speed_kmh=9.8765,
    )


class TestBuildFeature:
    def test_coordinates_are_lon_lat(self, make_point, metrics):
        trip = Trip(name="trip_1", points=(make_point(10.5, 20.25, 0), make_point(11.0, 21.0, 60)))
        feature = build_feature(trip, metrics, 0)
        assert feature.geometry.type == "LineString"
        assert feature.geometry.coordinates == [(20.25, 10.5), (21.0, 11.0)]

    def test_properties_rounded(self, make_point, metrics):
        trip = Trip(name="trip_7", points=(make_point(0, 0, 0),))
        props = build_feature(trip, metrics, 0).properties
        assert props.trip_name == "trip_7"
        assert props.total_distance_km == 1.235
        assert props.duration_min == 12.35
        assert props.max_speed_kmh == 9.88
        assert props.color == "#FF0000"

    def test_serializes_as_geojson(self, make_point, metrics):
        trip = Trip(name="trip_1", points=(make_point(1, 2, 0),))
        data = build_feature(trip, metrics, 1).model_dump(mode="json")
        assert data["type"] == "Feature"
        assert set(data["properties"]) == {
            "trip_name",
            "total_distance_km",
            "duration_min",
            "avg_speed_kmh",
            "max_speed_kmh",
            "color",
        }
        assert data["properties"]["color"] == "#0000FF"
        assert data["geometry"] == {"type": "LineString", "coordinates": [[2.0, 1.0]]}


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, decimals, expected",
        [(1.005, 2, 1.01), (2.675, 2, 2.68), (0.0005, 3, 0.001), (1.0045, 3, 1.005), (0.0, 2, 0.0), (7.0, 3, 7.0)],
    )
    def test_halves_round_up(self, value, decimals, expected):
        assert round_half_up(value, decimals) == expected

    def test_feature_properties_use_half_up(self, make_point):
        metrics = TripMetrics(total_distance_km=0.0005, duration_min=1.005, avg_speed_kmh=2.675, max_speed_kmh=2.675)
        props = build_feature(Trip(name="trip_1", points=(make_point(0, 0, 0),)), metrics, 0).properties
        assert props.total_distance_km == 0.001
        assert props.duration_min == 1.01
        assert props.avg_speed_kmh == 2.68
        assert props.max_speed_kmh == 2.68


class TestPalette:
    def test_seven_trips_cycle(self, make_point, metrics):
        trips = [Trip(name=f"trip_{i + 1}", points=(make_point(0, 0, i),)) for i in range(7)]
        collection = build_feature_collection(trips, [metrics] * 7)
        colors = [f.properties.color for f in collection.features]
        assert colors == [DEFAULT_PALETTE[i] for i in [0, 1, 2, 3, 4, 0, 1]]

    def test_custom_palette(self):
        palette = TripParams(palette=("red", "blue")).palette
        assert [pick_color(i, palette) for i in range(3)] == ["red", "blue", "red"]

    def test_empty_palette_rejected(self):
        with pytest.raises(ValueError):
            TripParams(palette=())


class TestBuildFeatureCollection:
    def test_empty(self):
        collection = build_feature_collection([], [])
        assert collection.model_dump() == {"type": "FeatureCollection", "features": []}

    def test_length_mismatch(self, make_point, metrics):
        trip = Trip(name="trip_1", points=(make_point(0, 0, 0),))
        with pytest.raises(ValueError):
            build_feature_collection([trip], [metrics, metrics])
