"""Pydantic data models for the GPS trip pipeline."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_PALETTE = ("#FF0000", "#0000FF", "#00FF00", "#FFA500", "#800080")


class RawRecord(BaseModel):
    """A single input row exactly as read, untyped and untrusted."""

    model_config = ConfigDict(frozen=True)

    line_number: int
    fields: tuple[str, ...]

    @property
    def device_id(self) -> str | None:
        return self._field(0)

    @property
    def lat(self) -> str | None:
        return self._field(1)

    @property
    def lon(self) -> str | None:
        return self._field(2)

    @property
    def timestamp(self) -> str | None:
        return self._field(3)

    @property
    def raw_text(self) -> str:
        """Original fields joined with commas, as written to the reject log."""
        return ",".join(self.fields)

    def _field(self, idx: int) -> str | None:
        return self.fields[idx] if idx < len(self.fields) else None


class Point(BaseModel):
    """A validated GPS fix."""

    model_config = ConfigDict(frozen=True)

    device_id: str
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    timestamp_text: str
    time: int


class Rejected(BaseModel):
    """A record that failed validation, with the reason it was diverted."""

    model_config = ConfigDict(frozen=True)

    record: RawRecord
    reason: str

    @property
    def raw_text(self) -> str:
        return self.record.raw_text


class Trip(BaseModel):
    """A maximal run of chronologically consecutive points.

    Points must be in non-decreasing ``time`` order.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    points: tuple[Point, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _points_in_time_order(self) -> "Trip":
        for prev, point in zip(self.points, self.points[1:]):
            if point.time < prev.time:
                raise ValueError(
                    f"{self.name}: points must be in ascending time order "
                    f"({point.time} follows {prev.time})"
                )
        return self


class TripMetrics(BaseModel):
    """Unrounded summary statistics for one trip."""

    model_config = ConfigDict(frozen=True)

    total_distance_km: float = Field(ge=0)
    duration_min: float = Field(ge=0)
    avg_speed_kmh: float = Field(ge=0)
    max_speed_kmh: float = Field(ge=0)


class TripParams(BaseModel):
    """Thresholds that split the point stream into trips, plus the display palette."""

    model_config = ConfigDict(frozen=True)

    max_gap_minutes: float = Field(default=25.0, gt=0)
    max_gap_km: float = Field(default=2.0, gt=0)
    palette: tuple[str, ...] = DEFAULT_PALETTE

    @field_validator("palette")
    @classmethod
    def _palette_not_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("palette must contain at least one color")
        return value


class LineString(BaseModel):
    """GeoJSON LineString geometry with ``[lon, lat]`` positions."""

    model_config = ConfigDict(frozen=True)

    type: Literal["LineString"] = "LineString"
    coordinates: list[tuple[float, float]]


class TripProperties(BaseModel):
    """Rounded per-trip properties attached to a feature."""

    model_config = ConfigDict(frozen=True)

    trip_name: str
    total_distance_km: float
    duration_min: float
    avg_speed_kmh: float
    max_speed_kmh: float
    color: str


class Feature(BaseModel):
    """One trip as a GeoJSON feature."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Feature"] = "Feature"
    properties: TripProperties
    geometry: LineString


class FeatureCollection(BaseModel):
    """GeoJSON document holding every trip feature."""

    model_config = ConfigDict(frozen=True)

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[Feature] = Field(default_factory=list)


class PipelineResult(BaseModel):
    """Complete result of processing a batch of GPS records."""

    rows_total: int
    points: list[Point]
    rejects: list[Rejected]
    trips: list[Trip]
    metrics: list[TripMetrics]
    collection: FeatureCollection
