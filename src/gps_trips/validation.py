"""Record validation: the single boundary between raw text rows and typed points."""

from __future__ import annotations

import calendar
import logging
import re
import warnings
from datetime import timezone
from typing import Iterable

from dateutil import parser
from dateutil.parser import UnknownTimezoneWarning

from .models import Point, RawRecord, Rejected

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = 4

_HOUR = 3600

# Offsets in seconds east of UTC for zone abbreviations seen in GPS exports.
TZ_ABBREVIATIONS = {
    "UTC": 0,
    "GMT": 0,
    "WET": 0,
    "WEST": _HOUR,
    "BST": _HOUR,
    "CET": _HOUR,
    "CEST": 2 * _HOUR,
    "EET": 2 * _HOUR,
    "EEST": 3 * _HOUR,
    "MSK": 3 * _HOUR,
    "JST": 9 * _HOUR,
    "KST": 9 * _HOUR,
    "AEST": 10 * _HOUR,
    "AEDT": 11 * _HOUR,
    "NZST": 12 * _HOUR,
    "NZDT": 13 * _HOUR,
    "HST": -10 * _HOUR,
    "AKST": -9 * _HOUR,
    "AKDT": -8 * _HOUR,
    "PST": -8 * _HOUR,
    "PDT": -7 * _HOUR,
    "MST": -7 * _HOUR,
    "MDT": -6 * _HOUR,
    "CST": -6 * _HOUR,
    "CDT": -5 * _HOUR,
    "EST": -5 * _HOUR,
    "EDT": -4 * _HOUR,
}

# Plain decimal or exponent notation, optional sign, surrounding whitespace.
_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def is_numeric(text: str) -> bool:
    return bool(_NUMERIC_RE.match(text))


def is_valid_coordinate(lat: str, lon: str) -> bool:
    """Check that both values are numeric and inside WGS84 bounds."""
    if not (is_numeric(lat) and is_numeric(lon)):
        return False
    lat_f = float(lat)
    lon_f = float(lon)
    return -90 <= lat_f <= 90 and -180 <= lon_f <= 180


def parse_timestamp(text: str) -> int | None:
    """Parse free-form timestamp text to epoch seconds, or None if unparseable.

    Naive timestamps are taken as UTC. Common zone abbreviations (``EST``, ``CET``, ...)
    are resolved through ``TZ_ABBREVIATIONS``; any other abbreviation is rejected rather
    than read as UTC. Sub-second precision is dropped.
    """
    if not text or not text.strip():
        return None
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("error", UnknownTimezoneWarning)
            dt = parser.parse(text, tzinfos=TZ_ABBREVIATIONS)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return calendar.timegm(dt.utctimetuple())
    except (ValueError, OverflowError, UnknownTimezoneWarning) as e:
        logger.debug("Failed to parse timestamp %r: %s", text, e)
        return None


def validate(record: RawRecord) -> Point | Rejected:
    """Classify a raw record as an accepted ``Point`` or a ``Rejected`` outcome."""
    if len(record.fields) < REQUIRED_FIELDS:
        return Rejected(record=record, reason=f"expected at least {REQUIRED_FIELDS} fields")

    device_id, lat, lon, timestamp = record.fields[:REQUIRED_FIELDS]

    if not is_valid_coordinate(lat, lon):
        return Rejected(record=record, reason="invalid coordinate")

    epoch = parse_timestamp(timestamp)
    if epoch is None:
        return Rejected(record=record, reason="unparseable timestamp")

    return Point(
        device_id=device_id,
        lat=float(lat),
        lon=float(lon),
        timestamp_text=timestamp,
        time=epoch,
    )


def validate_records(records: Iterable[RawRecord]) -> tuple[list[Point], list[Rejected]]:
    """Split records into accepted points and rejects, both in input order."""
    points: list[Point] = []
    rejects: list[Rejected] = []

    for record in records:
        outcome = validate(record)
        if isinstance(outcome, Rejected):
            logger.debug("Rejected line %d (%s): %s", record.line_number, outcome.reason, record.raw_text)
            rejects.append(outcome)
        else:
            points.append(outcome)

    if rejects:
        logger.warning("%d records rejected during validation", len(rejects))
    return points, rejects
