"""Polyline serialization: text rendering and JSON-safe dicts."""

from __future__ import annotations

from geolib.points import PointStore

from .core import Polyline


def format_polyline(ply: Polyline) -> str:
    """Render the polyline's points, one ``x y z`` line per point."""
    return "".join(f"{p.x} {p.y} {p.z}\n" for p in ply)


def point_store_to_dict(store: PointStore) -> dict:
    """Serialize a PointStore to a JSON-safe dict."""
    return {"points": [list(p.as_tuple()) for p in store]}


def parse_point_store(data: dict) -> PointStore:
    """Parse a ``{"points": [[x, y(, z)], ...]}`` dict into a PointStore."""
    return PointStore(data.get("points", []))


def polyline_to_dict(ply: Polyline) -> dict:
    """Serialize a Polyline's ids to a JSON-safe dict."""
    return {"point_ids": list(ply.point_ids)}


def parse_polyline(data: dict, store: PointStore) -> Polyline:
    """Parse a polyline dict against an existing store; ids are validated."""
    return Polyline(store, data["point_ids"])


def parse_fragments(data: dict) -> tuple[PointStore, list[Polyline]]:
    """Parse a shared store and the polylines that borrow it.

    Format:
        {"points": [[0, 0], [1, 0], ...], "polylines": [[0, 1, 2], [2, 3]]}
    """
    store = parse_point_store(data)
    polylines = [Polyline(store, ids) for ids in data.get("polylines", [])]
    return store, polylines
