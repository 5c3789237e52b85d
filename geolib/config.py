"""Shared numeric tolerances for the polyline predicates.

The location classifier, the segment-intersection test and the fragment
merger all compare floating-point quantities against zero.  They read
their thresholds from this single source so a caller working at a
different coordinate magnitude can swap them in one place.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class GeometryTolerances:
    """Absolute thresholds used by the 2D predicates.

    Coordinates are unitless; pick values matching the magnitude of the
    point data in use.
    """

    collinear_eps: float = math.sqrt(sys.float_info.epsilon)
    """Distance from a segment's supporting line below which a point is on it."""

    point_eps: float = math.sqrt(sys.float_info.epsilon)
    """Distance below which a query point coincides with a segment endpoint."""

    min_closed_points: int = 3
    """Fewest points a polyline needs before it can be closed into a loop."""

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def point_eps_sq(self) -> float:
        """Squared ``point_eps``, compared against squared distances."""
        return self.point_eps * self.point_eps


# Module-level singleton, importable everywhere.
TOLERANCES = GeometryTolerances()
