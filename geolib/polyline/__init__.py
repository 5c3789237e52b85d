"""Polylines: ordered chains of point ids over a shared PointStore.

Submodules:
  core          Polyline class (ids, cumulative-length cache, point location).
  queries       Edge membership and segment-crossing tests.
  merge         Closing a polyline and stitching fragments into one chain.
  serialization Text rendering and JSON conversion.
  interop       Shapely LineString conversion.
"""

from .core import Polyline
from .queries import contains_edge, is_line_segment_intersecting
from .merge import close_polyline, construct_polyline_from_segments, points_are_identical
from .serialization import (
    format_polyline,
    polyline_to_dict, parse_polyline,
    point_store_to_dict, parse_point_store,
    parse_fragments,
)
from .interop import polyline_to_linestring, polyline_from_linestring

__all__ = [
    # Core
    "Polyline",
    # Queries
    "contains_edge", "is_line_segment_intersecting",
    # Merge
    "close_polyline", "construct_polyline_from_segments", "points_are_identical",
    # Serialization
    "format_polyline", "polyline_to_dict", "parse_polyline",
    "point_store_to_dict", "parse_point_store", "parse_fragments",
    # Shapely interop
    "polyline_to_linestring", "polyline_from_linestring",
]
