"""Build GeoJSON features from trips and their metrics."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from .models import (
    DEFAULT_PALETTE,
    Feature,
    FeatureCollection,
    LineString,
    Trip,
    TripMetrics,
    TripProperties,
)

DISTANCE_DECIMALS = 3
DURATION_DECIMALS = 2
SPEED_DECIMALS = 2


def round_half_up(value: float, decimals: int) -> float:
    """Round halves away from zero, working on the shortest decimal repr of ``value``."""
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def pick_color(color_index: int, palette: Sequence[str] = DEFAULT_PALETTE) -> str:
    return palette[color_index % len(palette)]


def build_feature(
    trip: Trip,
    metrics: TripMetrics,
    color_index: int,
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> Feature:
    """Map a trip and its metrics to a LineString feature (``[lon, lat]`` positions)."""
    properties = TripProperties(
        trip_name=trip.name,
        total_distance_km=round_half_up(metrics.total_distance_km, DISTANCE_DECIMALS),
        duration_min=round_half_up(metrics.duration_min, DURATION_DECIMALS),
        avg_speed_kmh=round_half_up(metrics.avg_speed_kmh, SPEED_DECIMALS),
        max_speed_kmh=round_half_up(metrics.max_speed_kmh, SPEED_DECIMALS),
        color=pick_color(color_index, palette),
    )
    geometry = LineString(coordinates=[(p.lon, p.lat) for p in trip.points])
    return Feature(properties=properties, geometry=geometry)


def build_feature_collection(
    trips: Sequence[Trip],
    metrics: Sequence[TripMetrics],
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> FeatureCollection:
    """Build one feature per trip, cycling the palette in trip order."""
    if len(trips) != len(metrics):
        raise ValueError(f"Got {len(trips)} trips but {len(metrics)} metrics")

    features = [
        build_feature(trip, trip_metrics, color_index, palette)
        for color_index, (trip, trip_metrics) in enumerate(zip(trips, metrics))
    ]
    return FeatureCollection(features=features)
