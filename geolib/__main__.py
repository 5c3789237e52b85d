"""
geolib command-line entry point.

Usage:
    python -m geolib merge FILE [--prox P] [--verbose]
    python -m geolib info FILE
    python -m geolib close FILE

FILE is JSON: {"points": [[x, y(, z)], ...], "polylines": [[ids], ...]}
"""

import json
import logging
import sys
from pathlib import Path

from geolib.errors import PolylineError
from geolib.polyline import (
    close_polyline,
    construct_polyline_from_segments,
    parse_fragments,
    polyline_to_dict,
)

USAGE = "Usage: python -m geolib {merge|info|close} FILE [--prox P] [--verbose]"


def _summary(ply) -> dict:
    return {
        **polyline_to_dict(ply),
        "closed": ply.is_closed(),
        "length": ply.length,
    }


def run(cmd: str, path: Path, prox: float = 0.0) -> dict:
    """Execute one command against a fragments file and return the result."""
    data = json.loads(path.read_text(encoding="utf-8"))
    _, polylines = parse_fragments(data)

    if cmd == "merge":
        merged = construct_polyline_from_segments(polylines, prox)
        return _summary(merged)
    if cmd == "info":
        return {
            "polylines": [
                {"number_of_points": len(ply), **_summary(ply)}
                for ply in polylines
            ]
        }
    if cmd == "close":
        return {"polylines": [_summary(close_polyline(ply)) for ply in polylines]}
    raise ValueError(f"Unknown command: {cmd}")


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2 or args[0] not in ("merge", "info", "close"):
        print(USAGE)
        sys.exit(1)

    cmd, path = args[0], Path(args[1])
    prox = 0.0
    for i, a in enumerate(args):
        if a == "--prox" and i + 1 < len(args):
            prox = float(args[i + 1])
        elif a == "--verbose":
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            )

    try:
        result = run(cmd, path, prox)
    except PolylineError as e:
        print(f"Error: {e}")
        sys.exit(1)
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
