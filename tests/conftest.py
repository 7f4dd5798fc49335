from pathlib import Path

import pytest

from gps_trips import Point, RawRecord

SAMPLEDATA = Path(__file__).parent.parent / "sampledata"


@pytest.fixture
def sample_csv_path():
    return SAMPLEDATA / "points.csv"


@pytest.fixture
def make_point():
    def _make(lat: float, lon: float, time: int, device_id: str = "dev1") -> Point:
        return Point(device_id=device_id, lat=lat, lon=lon, timestamp_text=str(time), time=time)

    return _make


@pytest.fixture
def make_record():
    counter = iter(range(2, 10_000))

    def _make(*fields: str) -> RawRecord:
        return RawRecord(line_number=next(counter), fields=fields)

    return _make
