"""Split a chronological point stream into trips on time or distance gaps."""

from __future__ import annotations

from typing import Iterable, Sequence

from .geo import haversine_km
from .models import Point, Trip, TripParams


def sort_points(points: Iterable[Point]) -> list[Point]:
    """Order points by epoch time; equal timestamps keep their input order."""
    return sorted(points, key=lambda p: p.time)


def is_trip_break(prev: Point, point: Point, params: TripParams) -> bool:
    """True when ``point`` must start a new trip after ``prev``."""
    time_diff_min = (point.time - prev.time) / 60
    dist_km = haversine_km(prev.lat, prev.lon, point.lat, point.lon)
    return time_diff_min > params.max_gap_minutes or dist_km > params.max_gap_km


def segment_trips(points: Sequence[Point], params: TripParams | None = None) -> list[Trip]:
    """Partition time-sorted points into named trips.

    Each point is compared with the immediately preceding one only, so a slow drift
    of small steps stays a single trip no matter how far it goes in total.
    """
    params = params or TripParams()
    trips: list[Trip] = []
    current: list[Point] = []
    prev: Point | None = None

    for point in points:
        if prev is not None and is_trip_break(prev, point, params):
            trips.append(Trip(name=f"trip_{len(trips) + 1}", points=tuple(current)))
            current = []
        current.append(point)
        prev = point

    if current:
        trips.append(Trip(name=f"trip_{len(trips) + 1}", points=tuple(current)))

    return trips
