"""geolib: polylines over a shared point store, plus 2D predicates."""

from .config import GeometryTolerances, TOLERANCES
from .errors import (
    PolylineError,
    InvalidIndexError,
    OutOfRangeError,
    DegenerateInputError,
    EmptyInputError,
    IncompatiblePointStoresError,
    DisconnectedFragmentsError,
)
from .geo_object import GeoObject, GeoType
from .points import Point, PointStore
from .geometry import Location, classify_point, segments_intersect
from .polyline import (
    Polyline,
    close_polyline,
    construct_polyline_from_segments,
    contains_edge,
    is_line_segment_intersecting,
)

__all__ = [
    "GeometryTolerances", "TOLERANCES",
    "PolylineError", "InvalidIndexError", "OutOfRangeError",
    "DegenerateInputError", "EmptyInputError",
    "IncompatiblePointStoresError", "DisconnectedFragmentsError",
    "GeoObject", "GeoType",
    "Point", "PointStore",
    "Location", "classify_point", "segments_intersect",
    "Polyline", "close_polyline", "construct_polyline_from_segments",
    "contains_edge", "is_line_segment_intersecting",
]
