"""FastAPI server for GPS trip processing."""

from __future__ import annotations

import io

from fastapi import FastAPI, HTTPException, Query, UploadFile
from fastapi.responses import StreamingResponse

from .models import PipelineResult, Rejected, TripParams
from .pipeline import process_records
from .reader import ENCODING, read_records

app = FastAPI(title="GPS Trip Pipeline", version="0.1.0")


@app.post("/process")
async def process_points(
    file: UploadFile,
    format: str = Query("geojson", pattern="^(geojson|json|rejects)$"),
    max_gap_minutes: float = Query(25.0, gt=0),
    max_gap_km: float = Query(2.0, gt=0),
    has_header: bool = Query(True),
):
    """Process an uploaded GPS CSV (device_id, latitude, longitude, timestamp).

    Returns:
    - ``geojson``: the trip FeatureCollection
    - ``json``: row/point/reject counts, reject lines and the FeatureCollection
    - ``rejects``: the reject log as plain text
    """
    text = await _read_upload_text(file)
    params = TripParams(max_gap_minutes=max_gap_minutes, max_gap_km=max_gap_km)
    result = process_records(read_records(io.StringIO(text, newline=""), has_header=has_header), params)

    if format == "geojson":
        return result.collection.model_dump()
    if format == "json":
        return _summary(result)
    return _rejects_to_text_response(result.rejects)


async def _read_upload_text(upload: UploadFile) -> str:
    content = await upload.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    return content.decode(ENCODING, errors="replace")


def _summary(result: PipelineResult) -> dict:
    return {
        "rows_total": result.rows_total,
        "points": len(result.points),
        "rejects": [r.raw_text for r in result.rejects],
        "trips": len(result.trips),
        "collection": result.collection.model_dump(),
    }


def _rejects_to_text_response(rejects: list[Rejected]) -> StreamingResponse:
    """Stream rejected rows back one per line, in input order."""

    def generate():
        for i, rejected in enumerate(rejects):
            yield rejected.raw_text if i == 0 else "\n" + rejected.raw_text

    return StreamingResponse(
        generate(),
        media_type="text/plain",
        headers={"Content-Disposition": "attachment; filename=rejects.log"},
    )
