"""Pure-Python 2D predicates on points and segments.

All predicates ignore the z coordinate.  Thresholds come from
``geolib.config.TOLERANCES`` unless a caller passes its own.
"""

from __future__ import annotations

import math
from enum import Enum

from .config import TOLERANCES, GeometryTolerances
from .points import Point


class Location(Enum):
    """Position of a point relative to a directed segment."""

    LEFT = "left"
    RIGHT = "right"
    BEYOND = "beyond"
    BEHIND = "behind"
    BETWEEN = "between"
    SOURCE = "source"
    DESTINATION = "destination"


# ── core primitives ─────────────────────────────────────────────────


def cross(o: Point, a: Point, b: Point) -> float:
    """Twice the signed area of triangle (o, a, b); positive = CCW."""
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def orientation(o: Point, a: Point, b: Point, eps: float = TOLERANCES.collinear_eps) -> int:
    """Side of line o → a that b falls on: 1 left, -1 right, 0 on the line.

    ``eps`` is a distance: b counts as on the line when it is at most
    ``eps`` away from it.
    """
    det = cross(o, a, b)
    if abs(det) <= eps * math.hypot(a.x - o.x, a.y - o.y):
        return 0
    return 1 if det > 0 else -1


def _on_segment(p: Point, q: Point, r: Point) -> bool:
    """True if q lies inside the bounding range of segment p-r."""
    return (min(p.x, r.x) <= q.x <= max(p.x, r.x) and
            min(p.y, r.y) <= q.y <= max(p.y, r.y))


# ── segment intersection ───────────────────────────────────────────


def segments_intersect(
    a1: Point, a2: Point, b1: Point, b2: Point,
    eps: float = TOLERANCES.collinear_eps,
) -> bool:
    """Check if segments (a1-a2) and (b1-b2) intersect.

    Touching endpoints and collinear overlaps count as intersections.
    """
    d1 = orientation(b1, b2, a1, eps)
    d2 = orientation(b1, b2, a2, eps)
    d3 = orientation(a1, a2, b1, eps)
    d4 = orientation(a1, a2, b2, eps)
    if d1 * d2 < 0 and d3 * d4 < 0:
        return True
    if d1 == 0 and _on_segment(b1, a1, b2):
        return True
    if d2 == 0 and _on_segment(b1, a2, b2):
        return True
    if d3 == 0 and _on_segment(a1, b1, a2):
        return True
    if d4 == 0 and _on_segment(a1, b2, a2):
        return True
    return False


# ── point location ─────────────────────────────────────────────────


def classify_point(
    source: Point,
    dest: Point,
    pnt: Point,
    tolerances: GeometryTolerances = TOLERANCES,
) -> Location:
    """Locate ``pnt`` relative to the directed segment source → dest.

    A point farther than ``collinear_eps`` from the supporting line is
    LEFT or RIGHT by the sign of the signed area.  On the line, the
    projection onto the segment direction decides between BEHIND,
    SOURCE, BETWEEN, DESTINATION and BEYOND.  A zero-length segment
    reports every distinct point BEYOND.
    """
    ax, ay = dest.x - source.x, dest.y - source.y
    bx, by = pnt.x - source.x, pnt.y - source.y

    seg_len_sq = ax * ax + ay * ay
    det = ax * by - ay * bx
    if abs(det) > tolerances.collinear_eps * math.sqrt(seg_len_sq):
        return Location.LEFT if det > 0 else Location.RIGHT

    if bx * bx + by * by <= tolerances.point_eps_sq:
        return Location.SOURCE
    cx, cy = pnt.x - dest.x, pnt.y - dest.y
    if cx * cx + cy * cy <= tolerances.point_eps_sq:
        return Location.DESTINATION

    dot = ax * bx + ay * by
    if dot < 0.0:
        return Location.BEHIND
    if seg_len_sq == 0.0 or dot > seg_len_sq:
        return Location.BEYOND
    return Location.BETWEEN
