"""Per-trip distance, duration and speed statistics."""

from .geo import haversine_km
from .models import Trip, TripMetrics


def compute_metrics(trip: Trip) -> TripMetrics:
    """Aggregate consecutive point pairs of a trip into summary metrics.

    Values are left unrounded; rounding belongs to the output layer.
    """
    points = trip.points
    total_km = 0.0
    max_speed_kmh = 0.0

    for i in range(1, len(points)):
        p1, p2 = points[i - 1], points[i]
        dist_km = haversine_km(p1.lat, p1.lon, p2.lat, p2.lon)
        total_km += dist_km

        time_diff_h = (p2.time - p1.time) / 3600
        if time_diff_h > 0:
            max_speed_kmh = max(max_speed_kmh, dist_km / time_diff_h)

    duration_min = (points[-1].time - points[0].time) / 60
    avg_speed_kmh = total_km / (duration_min / 60) if duration_min > 0 else 0.0

    return TripMetrics(
        total_distance_km=total_km,
        duration_min=duration_min,
        avg_speed_kmh=avg_speed_kmh,
        max_speed_kmh=max_speed_kmh,
    )
