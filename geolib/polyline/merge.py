"""Building new polylines out of existing ones.

``close_polyline`` turns an open chain into a loop.
``construct_polyline_from_segments`` stitches fragments that share a
point store into a single chain, growing it at both ends.
"""

from __future__ import annotations

import logging
from typing import Sequence

from geolib.config import TOLERANCES, GeometryTolerances
from geolib.errors import (
    DegenerateInputError,
    DisconnectedFragmentsError,
    EmptyInputError,
    IncompatiblePointStoresError,
)
from geolib.points import PointStore

from .core import Polyline

log = logging.getLogger(__name__)


def close_polyline(ply: Polyline, tolerances: GeometryTolerances = TOLERANCES) -> Polyline:
    """Return a copy of ``ply`` with its first point id appended.

    An already closed polyline is copied as is.
    """
    if len(ply) < tolerances.min_closed_points:
        raise DegenerateInputError(
            f"Closing a polyline needs at least {tolerances.min_closed_points} points",
            len(ply),
        )
    closed = ply.copy()
    if not closed.is_closed():
        closed.add_point(ply.point_id(0))
    return closed


def points_are_identical(store: PointStore, i: int, j: int, prox: float = 0.0) -> bool:
    """Same id, or two ids whose points are at most ``prox`` apart."""
    if i == j:
        return True
    return store.distance(i, j) <= prox


def construct_polyline_from_segments(
    fragments: Sequence[Polyline],
    prox: float = 0.0,
) -> Polyline:
    """Stitch connected fragments into one polyline.

    The first fragment seeds the chain.  Each pass attaches the first
    remaining fragment (in input order) with an endpoint identical to
    the chain's tail or head, reversing it when it connects by its far
    end.  The chain keeps its own point at every junction.  Stitching
    stops once the chain closes into a loop.

    Raises:
        EmptyInputError: no fragments were given.
        IncompatiblePointStoresError: fragments borrow different stores.
        DegenerateInputError: a fragment has no points.
        DisconnectedFragmentsError: some fragments could not be attached.
    """
    if not fragments:
        raise EmptyInputError()

    store = fragments[0].points
    for i, frag in enumerate(fragments):
        if frag.points is not store and frag.points != store:
            raise IncompatiblePointStoresError(i)
        if len(frag) == 0:
            raise DegenerateInputError(f"Fragment {i} is empty", 0)

    chain = list(fragments[0].point_ids)
    remaining = list(range(1, len(fragments)))

    # proximity only closes a chain built from joined fragments
    closed = len(chain) > 1 and chain[0] == chain[-1]
    while remaining and not closed:
        for pos in remaining:
            joined = _attach(store, chain, fragments[pos].point_ids, prox)
            if joined is not None:
                log.debug("Attached fragment %d (%d points)", pos, len(fragments[pos]))
                chain = joined
                remaining.remove(pos)
                closed = points_are_identical(store, chain[0], chain[-1], prox)
                break
        else:
            break

    if closed and remaining:
        log.debug("Chain closed at point id %d; %d fragment(s) left",
                  chain[0], len(remaining))

    if remaining:
        raise DisconnectedFragmentsError(remaining, chain)

    log.info("Merged %d fragment(s) into a polyline of %d points",
             len(fragments), len(chain))
    return Polyline(store, chain)


def _attach(
    store: PointStore,
    chain: list[int],
    ids: Sequence[int],
    prox: float,
) -> list[int] | None:
    """Join ``ids`` to the tail or head of ``chain``, or return None."""
    head, tail = chain[0], chain[-1]
    if points_are_identical(store, tail, ids[0], prox):
        return chain + list(ids[1:])
    if points_are_identical(store, tail, ids[-1], prox):
        return chain + list(reversed(ids[:-1]))
    if points_are_identical(store, head, ids[-1], prox):
        return list(ids[:-1]) + chain
    if points_are_identical(store, head, ids[0], prox):
        return list(reversed(ids[1:])) + chain
    return None
