"""Conversion between polylines and Shapely line strings."""

from __future__ import annotations

from shapely.geometry import LineString

from geolib.errors import DegenerateInputError
from geolib.points import PointStore

from .core import Polyline


def polyline_to_linestring(ply: Polyline) -> LineString:
    """Build a 3D Shapely LineString through the polyline's points."""
    if len(ply) < 2:
        raise DegenerateInputError("A LineString needs at least 2 points", len(ply))
    return LineString([p.as_tuple() for p in ply])


def polyline_from_linestring(line: LineString) -> Polyline:
    """Build a polyline over a fresh PointStore holding the line's vertices."""
    store = PointStore(line.coords)
    return Polyline(store, range(len(store)))
