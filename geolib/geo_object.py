"""Type tags shared by every geometric object in the library."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class GeoType(Enum):
    POINT = "point"
    POLYLINE = "polyline"
    SURFACE = "surface"
    VOLUME = "volume"
    GEODOMAIN = "geodomain"
    COLUMN = "column"


@runtime_checkable
class GeoObject(Protocol):
    """Anything that can report which kind of geometric object it is.

    Consumers dispatch on ``geo_type`` instead of on concrete classes.
    """

    @property
    def geo_type(self) -> GeoType: ...
