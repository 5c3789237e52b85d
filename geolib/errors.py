"""Error taxonomy for polyline operations.

Every error is an input-validation failure raised straight to the
caller; nothing is retried, clamped or silently dropped.
"""

from __future__ import annotations

from typing import Sequence


class PolylineError(Exception):
    """Base class for every polyline operation failure."""


class InvalidIndexError(PolylineError, IndexError):
    """Raised when a point id is not valid in the bound point store."""

    def __init__(self, pnt_id: object, store_size: int) -> None:
        self.pnt_id = pnt_id
        self.store_size = store_size
        super().__init__(
            f"Point id {pnt_id!r} is not valid for a point store of size {store_size}"
        )


class OutOfRangeError(PolylineError, IndexError):
    """Raised when a position or segment index exceeds the polyline size."""

    def __init__(self, what: str, index: object, size: int) -> None:
        self.what = what
        self.index = index
        self.size = size
        super().__init__(f"{what} {index!r} out of range [0, {size})")


class DegenerateInputError(PolylineError, ValueError):
    """Raised when an operation needs more points than it was given."""

    def __init__(self, reason: str, number_of_points: int) -> None:
        self.reason = reason
        self.number_of_points = number_of_points
        super().__init__(f"{reason} (got {number_of_points} points)")


class EmptyInputError(PolylineError, ValueError):
    """Raised when a merge receives no fragments at all."""

    def __init__(self) -> None:
        super().__init__("Cannot construct a polyline from zero fragments")


class IncompatiblePointStoresError(PolylineError, ValueError):
    """Raised when fragments to be merged borrow different point stores."""

    def __init__(self, fragment_index: int) -> None:
        self.fragment_index = fragment_index
        super().__init__(
            f"Fragment {fragment_index} is based on a different point store "
            f"than fragment 0"
        )


class DisconnectedFragmentsError(PolylineError):
    """Raised when fragments do not form one connected chain.

    ``unattached`` holds the original positions of the fragments that
    could not be joined to the chain.
    """

    def __init__(self, unattached: Sequence[int], chain_ids: Sequence[int]) -> None:
        self.unattached = list(unattached)
        self.chain_ids = list(chain_ids)
        super().__init__(
            f"No connection found for fragment(s) {self.unattached}; "
            f"chain stopped at point ids {self.chain_ids[0]}..{self.chain_ids[-1]}"
        )
