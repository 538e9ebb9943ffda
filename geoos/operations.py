"""Overlay operations dispatched on the type of the first geometry."""

from __future__ import annotations

from typing import Optional

from geoos.geometry import (
    Collection,
    GeometryError,
    LineString,
    NotMatchTypeError,
    Point,
    Polygon,
    UnsupportedCollectionError,
)
from geoos.line_overlay import LineOverlay, intersect_line
from geoos.overlay import Geometry, PointOverlay
from geoos.polygon_overlay import PolygonOverlay


def _single(result: Optional[Geometry]) -> Optional[Geometry]:
    if isinstance(result, Collection) and len(result) == 1:
        return result[0]
    return result


def sym_difference(m0: Geometry, m1: Geometry) -> Collection:
    """Return the parts of m0 and m1 that the other does not share.

    A difference that cannot be computed is left out.
    """
    parts = []
    for a, b in ((m0, m1), (m1, m0)):
        try:
            result = difference(a, b)
        except GeometryError:
            continue
        if isinstance(result, Collection):
            parts.extend(result)
        else:
            parts.append(result)
    return Collection(parts)


def difference(m0: Geometry, m1: Optional[Geometry]) -> Optional[Geometry]:
    """Return the part of m0 that does not intersect m1.

    A point is returned unchanged; a single line result is unwrapped.
    """
    if isinstance(m0, Point):
        return m0
    if isinstance(m0, LineString):
        try:
            return _single(LineOverlay(m0, m1).difference())
        except GeometryError:
            return None
    if isinstance(m0, Polygon):
        return PolygonOverlay(m0, m1).difference()
    raise UnsupportedCollectionError()


def intersection(m0: Geometry, m1: Optional[Geometry]) -> Optional[Geometry]:
    """Return the intersection of m0 and m1; a single line result is unwrapped."""
    if isinstance(m0, Point):
        return PointOverlay(m0, m1).intersection()
    if isinstance(m0, LineString):
        try:
            return _single(LineOverlay(m0, m1).intersection())
        except GeometryError:
            return None
    if isinstance(m0, Polygon):
        return PolygonOverlay(m0, m1).intersection()
    raise UnsupportedCollectionError()


def unary_union(geometries: Geometry) -> Optional[Geometry]:
    """Union all polygons of a collection; None for anything else."""
    if isinstance(geometries, Collection):
        return unary_union_by_half(geometries, 0, len(geometries))
    return None


def unary_union_by_half(
    geometries: Optional[Collection], start: int, end: int
) -> Optional[Geometry]:
    """Union geometries[start:end] by recursive binary union of each half."""
    if geometries is None or start >= len(geometries):
        return None
    members = geometries[start:end]
    if not all(g is None or isinstance(g, Polygon) for g in members):
        raise NotMatchTypeError("only polygons can be unioned")
    if end - start <= 1:
        return union(geometries[start], None)
    if end - start == 2:
        return union(geometries[start], geometries[start + 1])
    mid = (start + end) // 2
    return union(
        unary_union_by_half(geometries, start, mid),
        unary_union_by_half(geometries, mid, end),
    )


def union(m0: Optional[Polygon], m1: Optional[Polygon]) -> Optional[Geometry]:
    """Union two polygons, either of which may be None; None if they do not match."""
    try:
        return PolygonOverlay(m0, m1).union()
    except GeometryError:
        return None


def union_line(m0: LineString, m1: LineString) -> Collection:
    """Return the shared stretches of two lines followed by their symmetric difference."""
    parts: list = [
        LineString([il.ips[0].point, il.ips[1].point])
        for il in intersect_line(m0, m1)
        if len(il.ips) > 1
    ]
    parts.extend(sym_difference(m0, m1))
    return Collection(parts)