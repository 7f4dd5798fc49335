"""End-to-end trip pipeline: raw records in, GeoJSON feature collection out."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from .features import build_feature_collection
from .metrics import compute_metrics
from .models import FeatureCollection, PipelineResult, RawRecord, Rejected, TripParams
from .reader import read_records
from .segments import segment_trips, sort_points
from .validation import validate_records

logger = logging.getLogger(__name__)


def process_records(
    records: Sequence[RawRecord],
    params: TripParams | None = None,
) -> PipelineResult:
    """Validate, sort, segment and summarize a batch of raw records."""
    params = params or TripParams()

    points, rejects = validate_records(records)
    ordered = sort_points(points)
    trips = segment_trips(ordered, params)
    metrics = [compute_metrics(trip) for trip in trips]
    collection = build_feature_collection(trips, metrics, params.palette)

    logger.info(
        "Processed %d records: %d points, %d rejects, %d trips",
        len(records),
        len(points),
        len(rejects),
        len(trips),
    )
    return PipelineResult(
        rows_total=len(records),
        points=ordered,
        rejects=rejects,
        trips=trips,
        metrics=metrics,
        collection=collection,
    )


def process_file(
    input_path: str | Path,
    rejects_path: str | Path,
    output_path: str | Path,
    params: TripParams | None = None,
    *,
    has_header: bool = True,
) -> PipelineResult:
    """Run the pipeline over a CSV file and write the reject log and GeoJSON.

    A missing input raises ``FileNotFoundError`` before anything is written. The
    reject log is only written when at least one record was rejected.
    """
    records = read_records(input_path, has_header=has_header)
    result = process_records(records, params)

    if result.rejects:
        write_rejects(result.rejects, rejects_path)
    write_geojson(result.collection, output_path)
    return result


def rejects_text(rejects: Sequence[Rejected]) -> str:
    return "\n".join(r.raw_text for r in rejects)


def write_rejects(rejects: Sequence[Rejected], path: str | Path) -> None:
    """Write raw comma-joined rejected rows, one per line, in input order."""
    Path(path).write_text(rejects_text(rejects), encoding="utf-8")
    logger.info("Wrote %d rejects to %s", len(rejects), path)


def write_geojson(collection: FeatureCollection, path: str | Path) -> None:
    """Write the feature collection as pretty-printed GeoJSON."""
    Path(path).write_text(collection.model_dump_json(indent=4), encoding="utf-8")
    logger.info("Wrote %d features to %s", len(collection.features), path)
