"""Planar geometry values, measures and the vertex/edge records used by overlays."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Tuple


class GeometryError(Exception):
    """Base error for geometry operations."""


class NotMatchTypeError(GeometryError):
    """Raised when the geometry types of an operation do not match."""

    def __init__(self, message: str = "geometry types do not match") -> None:
        super().__init__(message)


class UnsupportedCollectionError(GeometryError):
    """Raised when a collection is given where it is not supported."""

    def __init__(self, message: str = "geometry collections are not supported") -> None:
        super().__init__(message)


class _Geometry(tuple):
    """Immutable sequence geometry; equal only to geometries of the same type."""

    __slots__ = ()

    def _rebuild(self, items):
        return type(self)(items)

    def __getitem__(self, index):
        item = tuple.__getitem__(self, index)
        if isinstance(index, slice):
            return self._rebuild(item)
        return item

    def __eq__(self, other):
        if isinstance(other, _Geometry) and type(other) is not type(self):
            return False
        return tuple.__eq__(self, other)

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = tuple.__hash__

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


Bound = Tuple["Point", "Point"]


def _bound_of(points: Iterable[Sequence[float]]) -> Optional[Bound]:
    pts = [p for p in points if len(p) >= 2]
    if not pts:
        return None
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    return Point(min(xs), min(ys)), Point(max(xs), max(ys))


def _merge_bounds(bounds: Iterable[Optional[Bound]]) -> Optional[Bound]:
    corners = [corner for b in bounds if b is not None for corner in b]
    return _bound_of(corners)


class Point(_Geometry):
    """A point given by its coordinates."""

    __slots__ = ()

    def __new__(cls, *coords: float) -> "Point":
        return super().__new__(cls, (float(c) for c in coords))

    def __getnewargs__(self):
        return tuple(self)

    def _rebuild(self, items):
        return Point(*items)

    def __repr__(self) -> str:
        return f"Point({', '.join(repr(c) for c in self)})"

    @classmethod
    def of(cls, value: Sequence[float]) -> "Point":
        """Return value as a Point, converting any coordinate sequence."""
        return value if isinstance(value, Point) else cls(*value)

    @property
    def x(self) -> float:
        return self[0]

    @property
    def y(self) -> float:
        return self[1]

    def equals(self, other) -> bool:
        return isinstance(other, Point) and tuple.__eq__(self, other)

    def is_empty(self) -> bool:
        return len(self) == 0

    def compare(self, other: Sequence[float]) -> int:
        """Order points lexicographically by coordinate: -1, 0 or 1."""
        if len(self) != len(other):
            raise GeometryError("points have different dimensions")
        for a, b in zip(self, other):
            if a < b:
                return -1
            if a > b:
                return 1
        return 0

    def dimension(self) -> int:
        return 0

    def boundary_dimension(self) -> int:
        return -1

    def bound(self) -> Optional[Bound]:
        return None if self.is_empty() else _bound_of([self])


@dataclass(frozen=True)
class Segment:
    """A straight segment between two points."""

    p0: Point
    p1: Point


class LineString(_Geometry):
    """A sequence of points joined by straight segments."""

    __slots__ = ()

    def __new__(cls, points: Iterable[Sequence[float]] = ()) -> "LineString":
        return super().__new__(cls, (Point.of(p) for p in points))

    def equals(self, other) -> bool:
        return (
            isinstance(other, LineString)
            and len(self) == len(other)
            and all(a.equals(b) for a, b in zip(self, other))
        )

    def is_empty(self) -> bool:
        return len(self) == 0

    def is_closed(self) -> bool:
        return len(self) > 0 and self[0].equals(self[-1])

    def segments(self) -> list[Segment]:
        return [Segment(a, b) for a, b in zip(self, self[1:])]

    def dimension(self) -> int:
        return 1

    def boundary_dimension(self) -> int:
        return -1 if self.is_closed() else 0

    def bound(self) -> Optional[Bound]:
        return _bound_of(self)


class Polygon(_Geometry):
    """A shell ring followed by any number of hole rings."""

    __slots__ = ()

    def __new__(cls, rings: Iterable[Iterable[Sequence[float]]] = ()) -> "Polygon":
        return super().__new__(
            cls, (r if isinstance(r, LineString) else LineString(r) for r in rings)
        )

    def equals(self, other) -> bool:
        return (
            isinstance(other, Polygon)
            and len(self) == len(other)
            and all(a.equals(b) for a, b in zip(self, other))
        )

    def is_empty(self) -> bool:
        return len(self) == 0

    def dimension(self) -> int:
        return 2

    def boundary_dimension(self) -> int:
        return 1

    def bound(self) -> Optional[Bound]:
        return _bound_of(p for ring in self for p in ring)


class Collection(_Geometry):
    """A heterogeneous collection of geometries; members may be None."""

    __slots__ = ()

    def __new__(cls, items: Iterable = ()) -> "Collection":
        members = tuple(items)
        for member in members:
            if member is not None and not isinstance(member, _Geometry):
                raise TypeError(f"not a geometry: {member!r}")
        return super().__new__(cls, members)

    def equals(self, other) -> bool:
        if not isinstance(other, Collection) or len(self) != len(other):
            return False
        for a, b in zip(self, other):
            if a is None or b is None:
                if a is not b:
                    return False
            elif not a.equals(b):
                return False
        return True

    def is_empty(self) -> bool:
        return all(g is None or g.is_empty() for g in self)

    def dimension(self) -> int:
        return max((g.dimension() for g in self if g is not None), default=-1)

    def boundary_dimension(self) -> int:
        return max((g.boundary_dimension() for g in self if g is not None), default=-1)

    def bound(self) -> Optional[Bound]:
        return _merge_bounds(g.bound() for g in self if g is not None)


def bounds_intersect(b0: Optional[Bound], b1: Optional[Bound]) -> bool:
    """Return True if two bounding boxes overlap or touch."""
    if b0 is None or b1 is None:
        return False
    (min0, max0), (min1, max1) = b0, b1
    return not (
        min1[0] > max0[0] or max1[0] < min0[0] or min1[1] > max0[1] or max1[1] < min0[1]
    )


def planar_distance(p: Sequence[float], q: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p[0] - q[0], p[1] - q[1])


def distance_segment_to_point(
    p: Sequence[float], a: Sequence[float], b: Sequence[float]
) -> float:
    """Distance from point p to the segment a-b."""
    if a[0] == b[0] and a[1] == b[1]:
        return planar_distance(p, a)
    dx, dy = b[0] - a[0], b[1] - a[1]
    len2 = dx * dx + dy * dy
    r = ((p[0] - a[0]) * dx + (p[1] - a[1]) * dy) / len2
    if r <= 0.0:
        return planar_distance(p, a)
    if r >= 1.0:
        return planar_distance(p, b)
    s = ((a[1] - p[1]) * dx - (a[0] - p[0]) * dy) / len2
    return abs(s) * math.sqrt(len2)


def area_direction(ring: Sequence[Sequence[float]]) -> float:
    """Signed area of a ring: positive when clockwise, negative when counter-clockwise."""
    if len(ring) < 3:
        return 0.0
    total = 0.0
    for i, p in enumerate(ring):
        q = ring[(i + 1) % len(ring)]
        total += p[0] * q[1] - q[0] * p[1]
    return -total / 2.0


@dataclass
class Vertex:
    """A point of an overlay ring, with its overlay flags."""

    point: Point
    is_intersection_point: bool = False
    is_entering: bool = False
    is_checked: bool = False

    def __post_init__(self) -> None:
        self.point = Point.of(self.point)

    @property
    def x(self) -> float:
        return self.point[0]

    @property
    def y(self) -> float:
        return self.point[1]

    def sub(self, other: "Vertex") -> "Vertex":
        return Vertex(Point(self.x - other.x, self.y - other.y))

    def same_position(self, other: "Vertex") -> bool:
        return self.x == other.x and self.y == other.y


@dataclass(eq=False)
class Edge:
    """A ring of vertices built during an overlay."""

    vertices: list[Vertex] = field(default_factory=list)
    is_clockwise: bool = False
    now_status: int = 0

    def area_direction(self) -> float:
        return area_direction([v.point for v in self.vertices])

    def set_clockwise(self) -> None:
        self.is_clockwise = self.area_direction() > 0


@dataclass(eq=False)
class Line:
    """A directed segment between two vertices."""

    start: Vertex
    end: Vertex
    is_main: bool = False