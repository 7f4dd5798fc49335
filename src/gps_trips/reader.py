"""CSV reader for raw GPS fixes (device_id, latitude, longitude, timestamp)."""

from __future__ import annotations

import csv
import logging
import sys
from pathlib import Path
from typing import TextIO

from .models import RawRecord

logger = logging.getLogger(__name__)

ENCODING = "utf-8-sig"


def _raise_field_size_limit() -> None:
    # malformed rows can carry arbitrarily long fields
    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return
        except OverflowError:
            limit //= 10


def read_records(
    source: str | Path | TextIO,
    *,
    has_header: bool = True,
) -> list[RawRecord]:
    """Read every row of a GPS CSV into ``RawRecord`` objects.

    Supports two modes:
    - File path: pass a ``str`` or ``Path`` (missing file raises ``FileNotFoundError``)
    - Text stream: pass any object with a ``readline``/iterator interface

    Rows are kept as read, including short and blank ones; validation happens later.
    Undecodable bytes in a file are replaced so that one bad row cannot abort the read.
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")
        with path.open("r", encoding=ENCODING, errors="replace", newline="") as f:
            return _read_rows(f, has_header)
    return _read_rows(source, has_header)


def _read_rows(stream: TextIO, has_header: bool) -> list[RawRecord]:
    _raise_field_size_limit()
    reader = csv.reader(stream)
    records: list[RawRecord] = []

    if has_header:
        header = next(reader, None)
        if header is not None:
            logger.debug("Skipping header row: %s", header)

    for row in reader:
        records.append(RawRecord(line_number=reader.line_num, fields=tuple(row)))

    logger.debug("Read %d records", len(records))
    return records
