"""Read-only queries on a polyline's edges."""

from __future__ import annotations

import logging

from geolib.config import TOLERANCES, GeometryTolerances
from geolib.geometry import segments_intersect
from geolib.points import Point

from .core import Polyline

log = logging.getLogger(__name__)


def contains_edge(ply: Polyline, id0: int, id1: int) -> bool:
    """True if ids ``id0`` and ``id1`` are consecutive somewhere in ``ply``.

    The edge is unordered: (a, b) and (b, a) are the same edge.
    """
    if id0 == id1:
        log.warning("contains_edge: no valid edge, id0 == id1 == %s", id0)
        return False
    wanted = {id0, id1}
    ids = ply.point_ids
    return any({ids[k], ids[k + 1]} == wanted for k in range(len(ids) - 1))


def is_line_segment_intersecting(
    ply: Polyline,
    s0: Point,
    s1: Point,
    tolerances: GeometryTolerances = TOLERANCES,
) -> bool:
    """True if segment (s0, s1) crosses or touches any segment of ``ply``.

    Segments are scanned in order; the first hit ends the scan.
    """
    for k, (p0, p1) in enumerate(ply.segments()):
        if segments_intersect(p0, p1, s0, s1, tolerances.collinear_eps):
            log.debug("Segment %s-%s hits polyline segment %d", s0, s1, k)
            return True
    return False
