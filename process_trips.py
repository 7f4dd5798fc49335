"""Clean a GPS points CSV, split it into trips and export them as GeoJSON.

Reads ``points.csv`` (device_id, latitude, longitude, timestamp) from the working
directory, writes rejected rows to ``rejects.log`` and the trips to ``output.geojson``.
"""

import argparse
import logging
import sys
from pathlib import Path

from gps_trips import TripParams, process_file

INPUT_CSV = Path("points.csv")
REJECT_LOG = Path("rejects.log")
OUTPUT_GEOJSON = Path("output.geojson")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    p.add_argument("input", nargs="?", type=Path, default=INPUT_CSV, help="input CSV path")
    p.add_argument("--rejects", type=Path, default=REJECT_LOG, help="reject log path")
    p.add_argument("--out", type=Path, default=OUTPUT_GEOJSON, help="GeoJSON output path")
    p.add_argument("--max-gap-minutes", type=float, default=25.0, help="time gap that starts a new trip")
    p.add_argument("--max-gap-km", type=float, default=2.0, help="distance gap that starts a new trip")
    p.add_argument("--no-header", action="store_true", help="first row is data, not a header")
    return p


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)

    if not args.input.is_file():
        print(f"Error: {args.input} not found.", file=sys.stderr)
        return 1

    params = TripParams(max_gap_minutes=args.max_gap_minutes, max_gap_km=args.max_gap_km)
    print(f"Reading points: {args.input}\n")
    result = process_file(args.input, args.rejects, args.out, params, has_header=not args.no_header)

    print(f"Rows read:     {result.rows_total:,}")
    print(f"Valid points:  {len(result.points):,}")
    print(f"Rejected:      {len(result.rejects):,}")
    print(f"Trips:         {len(result.trips):,}")
    if result.rejects:
        print(f"Rejects saved: {args.rejects}")
    print()

    print(f"Processing complete. Output saved to {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
