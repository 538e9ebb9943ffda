"""Paths shared by two lineal geometries."""

from __future__ import annotations

from typing import Iterator, Optional

from geoos.geometry import Collection, LineString, NotMatchTypeError
from geoos.line_overlay import intersect_line
from geoos.overlay import Geometry


def _is_lineal(geometry: Optional[Geometry]) -> bool:
    if isinstance(geometry, LineString):
        return True
    if isinstance(geometry, Collection):
        return all(isinstance(member, LineString) for member in geometry)
    return False


def _lines(geometry: Geometry) -> Iterator[LineString]:
    if isinstance(geometry, Collection):
        yield from geometry
    else:
        yield geometry


def shared_paths(g1: Geometry, g2: Geometry) -> tuple[Collection, Collection]:
    """Return the paths shared by two lineal geometries.

    The first collection holds the paths running in the same direction in
    both inputs, the second those running in opposite directions. Paths are
    given in the direction of g1. Raises NotMatchTypeError unless both inputs
    are line strings or collections of line strings.
    """
    if not (_is_lineal(g1) and _is_lineal(g2)):
        raise NotMatchTypeError("shared paths need lineal geometries")
    forward: list[LineString] = []
    backward: list[LineString] = []
    for line in _lines(g1):
        for other in _lines(g2):
            for il in intersect_line(line, other):
                if len(il.ips) < 2:
                    continue
                path = LineString([il.ips[0].point, il.ips[1].point])
                (backward if il.ips[1].is_entering else forward).append(path)
    return Collection(forward), Collection(backward)