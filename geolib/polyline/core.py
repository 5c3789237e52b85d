"""An ordered chain of ids into a shared point store.

The polyline borrows its PointStore; it never copies or mutates it, and
it is only valid for as long as that store is.  Alongside the ids it
keeps the cumulative path length at every vertex.  Each mutating method
invalidates the affected tail of that cache and recomputes it before
returning, so read accessors never do any work.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from geolib.config import TOLERANCES, GeometryTolerances
from geolib.errors import OutOfRangeError
from geolib.geo_object import GeoType
from geolib.geometry import Location, classify_point
from geolib.points import Point, PointStore


class Polyline:
    """A chain of line segments given by point ids.

    A polyline with one id has no segments.  Ids may repeat; a closed
    polyline repeats its first id as its last.
    """

    def __init__(self, points: PointStore, point_ids: Iterable[int] = ()) -> None:
        self._points = points
        self._ids: list[int] = []
        self._lengths: list[float] = []
        for pnt_id in point_ids:
            self._ids.append(points.validate_id(pnt_id))
        self._update_lengths()

    @property
    def geo_type(self) -> GeoType:
        return GeoType.POLYLINE

    # ── mutation ───────────────────────────────────────────────────

    def add_point(self, pnt_id: int) -> None:
        """Append a point id at the end of the polyline."""
        self._ids.append(self._points.validate_id(pnt_id))
        self._update_lengths()

    def insert_point(self, pos: int, pnt_id: int) -> None:
        """Insert a point id before position ``pos``, in [0, number of points)."""
        self._check_position("Insert position", pos)
        self._ids.insert(pos, self._points.validate_id(pnt_id))
        self._invalidate_lengths(pos)
        self._update_lengths()

    def set_point_id(self, idx: int, pnt_id: int) -> None:
        """Replace the point id stored at position ``idx``."""
        self._check_position("Point position", idx)
        self._ids[idx] = self._points.validate_id(pnt_id)
        self._invalidate_lengths(max(idx - 1, 0))
        self._update_lengths()

    def copy(self) -> Polyline:
        """Return a new polyline over the same point store."""
        return Polyline(self._points, self._ids)

    __copy__ = copy

    # ── access ─────────────────────────────────────────────────────

    @property
    def points(self) -> PointStore:
        """The borrowed point store."""
        return self._points

    @property
    def point_ids(self) -> tuple[int, ...]:
        return tuple(self._ids)

    @property
    def number_of_points(self) -> int:
        return len(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def point_id(self, i: int) -> int:
        """Index of the i-th polyline point in the point store."""
        self._check_position("Point position", i)
        return self._ids[i]

    def point(self, i: int) -> Point:
        return self._points.at(self.point_id(i))

    def __getitem__(self, i: int) -> Point:
        return self.point(i)

    def __iter__(self) -> Iterator[Point]:
        return (self._points.at(pnt_id) for pnt_id in self._ids)

    def segments(self) -> Iterator[tuple[Point, Point]]:
        """Yield (start, end) points of every line segment in order."""
        for k in range(len(self._ids) - 1):
            yield self.point(k), self.point(k + 1)

    def is_closed(self) -> bool:
        return len(self._ids) > 1 and self._ids[0] == self._ids[-1]

    def is_point_id_in_polyline(self, pnt_id: int) -> bool:
        return pnt_id in self._ids

    # ── lengths ────────────────────────────────────────────────────

    @property
    def lengths(self) -> tuple[float, ...]:
        """Cumulative path length at every point; entry 0 is 0."""
        return tuple(self._lengths)

    @property
    def length(self) -> float:
        """Total path length (0 for an empty or single-point polyline)."""
        return self._lengths[-1] if self._lengths else 0.0

    def length_at(self, k: int) -> float:
        """Length of the polyline up to the k-th point."""
        _check_index("Length index", k, len(self._lengths))
        return self._lengths[k]

    def _invalidate_lengths(self, from_pos: int) -> None:
        del self._lengths[from_pos:]

    def _update_lengths(self) -> None:
        """Recompute every missing cache entry up to the last point."""
        for k in range(len(self._lengths), len(self._ids)):
            if k == 0:
                self._lengths.append(0.0)
                continue
            step = self._points.distance(self._ids[k - 1], self._ids[k])
            self._lengths.append(self._lengths[k - 1] + step)

    # ── classification ─────────────────────────────────────────────

    def location_of_point(
        self,
        k: int,
        pnt: Point,
        tolerances: GeometryTolerances = TOLERANCES,
    ) -> Location:
        """Locate ``pnt`` relative to the k-th segment, ignoring z.

        The segment is directed from point k to point k + 1.
        """
        n_segments = len(self._ids) - 1
        _check_index("Segment index", k, max(n_segments, 0))
        return classify_point(self.point(k), self.point(k + 1), pnt, tolerances)

    # ── comparison / rendering ─────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        """Same point data and the same segments in the same order.

        A reversed traversal of the same segments is not equal.
        """
        if not isinstance(other, Polyline):
            return NotImplemented
        if self._points is not other._points and self._points != other._points:
            return False
        return self._ids == other._ids

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Polyline({self._ids!r})"

    def __str__(self) -> str:
        from .serialization import format_polyline
        return format_polyline(self)

    def _check_position(self, what: str, pos: object) -> None:
        _check_index(what, pos, len(self._ids))


def _check_index(what: str, index: object, size: int) -> None:
    """Raise OutOfRangeError unless index is a plain int in [0, size)."""
    if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < size:
        raise OutOfRangeError(what, index, size)
