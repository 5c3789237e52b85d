"""Points and the shared, read-only point store polylines index into.

A PointStore is built once and never changes size or contents, so any
number of polylines can borrow it at the same time.  Polylines hold
integer ids into the store, never the points themselves.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Union

from .errors import InvalidIndexError
from .geo_object import GeoType


@dataclass(frozen=True)
class Point:
    """An immutable point in 3D space; 2D data leaves ``z`` at 0."""

    x: float
    y: float
    z: float = 0.0

    @property
    def geo_type(self) -> GeoType:
        return GeoType.POINT

    def __getitem__(self, axis: int) -> float:
        if axis == 0:
            return self.x
        if axis == 1:
            return self.y
        if axis == 2:
            return self.z
        raise IndexError(f"Point axis must be 0, 1 or 2, got {axis!r}")

    def sqr_distance_to(self, other: Point) -> float:
        return (
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def distance_to(self, other: Point) -> float:
        return math.sqrt(self.sqr_distance_to(other))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


PointLike = Union[Point, Sequence[float]]


def as_point(value: PointLike) -> Point:
    """Coerce a Point or an (x, y[, z]) sequence into a Point."""
    if isinstance(value, Point):
        return value
    coords = [float(c) for c in value]
    if len(coords) == 2:
        return Point(coords[0], coords[1])
    if len(coords) == 3:
        return Point(coords[0], coords[1], coords[2])
    raise ValueError(f"Expected 2 or 3 coordinates, got {len(coords)}")


class PointStore:
    """Ordered, index-stable collection of points.

    The store is immutable after construction.  Ids are plain ints in
    ``[0, size())``.
    """

    def __init__(self, points: Iterable[PointLike] = ()) -> None:
        self._points: tuple[Point, ...] = tuple(as_point(p) for p in points)

    def size(self) -> int:
        return len(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, pnt_id: int) -> Point:
        return self.at(pnt_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointStore):
            return NotImplemented
        return self._points == other._points

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PointStore({len(self._points)} points)"

    def is_valid_id(self, pnt_id: object) -> bool:
        return (
            isinstance(pnt_id, int)
            and not isinstance(pnt_id, bool)
            and 0 <= pnt_id < len(self._points)
        )

    def validate_id(self, pnt_id: object) -> int:
        """Return ``pnt_id`` unchanged, or raise InvalidIndexError."""
        if not self.is_valid_id(pnt_id):
            raise InvalidIndexError(pnt_id, len(self._points))
        return pnt_id  # type: ignore[return-value]

    def at(self, pnt_id: int) -> Point:
        return self._points[self.validate_id(pnt_id)]

    def distance(self, i: int, j: int) -> float:
        """Euclidean distance between the points stored at ids i and j."""
        return self.at(i).distance_to(self.at(j))
