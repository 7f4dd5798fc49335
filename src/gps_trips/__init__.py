"""GPS fix cleaning, trip segmentation and GeoJSON export."""

from .features import build_feature, build_feature_collection
from .geo import haversine_km
from .metrics import compute_metrics
from .models import (
    Feature,
    FeatureCollection,
    PipelineResult,
    Point,
    RawRecord,
    Rejected,
    Trip,
    TripMetrics,
    TripParams,
)
from .pipeline import process_file, process_records
from .reader import read_records
from .segments import segment_trips, sort_points
from .validation import validate, validate_records

__all__ = [
    "Feature",
    "FeatureCollection",
    "PipelineResult",
    "Point",
    "RawRecord",
    "Rejected",
    "Trip",
    "TripMetrics",
    "TripParams",
    "build_feature",
    "build_feature_collection",
    "compute_metrics",
    "haversine_km",
    "process_file",
    "process_records",
    "read_records",
    "segment_trips",
    "sort_points",
    "validate",
    "validate_records",
]
