"""Segment intersection, point-on-line and point-in-polygon predicates."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Sequence

from geoos.geometry import Point, Segment


@dataclass
class IntersectionPoint:
    """A point where two segments meet, with how it was found."""

    point: Point
    is_intersection_point: bool = False
    is_entering: bool = False
    is_original: bool = False
    is_collinear: bool = False

    def __post_init__(self) -> None:
        self.point = Point.of(self.point)

    @property
    def x(self) -> float:
        return self.point[0]

    @property
    def y(self) -> float:
        return self.point[1]


def is_original(points: Iterable[IntersectionPoint]) -> bool:
    """Return True if any point lies on an original vertex."""
    return any(p.is_original for p in points)


def sort_points(
    points: Iterable[IntersectionPoint], reverse: bool = False
) -> list[IntersectionPoint]:
    """Return the points ordered by x, then y."""
    return sorted(points, key=lambda p: (p.point[0], p.point[1]), reverse=reverse)


def is_intersection_segment(l: Segment, o: Segment) -> bool:
    return intersection(l.p0, l.p1, o.p0, o.p1)[0]


def intersection_segment(l: Segment, o: Segment) -> tuple[bool, list[IntersectionPoint]]:
    return intersection(l.p0, l.p1, o.p0, o.p1)


def intersection(
    a_start: Sequence[float],
    a_end: Sequence[float],
    b_start: Sequence[float],
    b_end: Sequence[float],
) -> tuple[bool, list[IntersectionPoint]]:
    """Intersect segments a and b; return whether they meet and where."""
    a_start, a_end = Point.of(a_start), Point.of(a_end)
    b_start, b_end = Point.of(b_start), Point.of(b_end)

    a1 = a_end[1] - a_start[1]
    b1 = a_start[0] - a_end[0]
    c1 = -a_start[0] * a1 - b1 * a_start[1]
    a2 = b_end[1] - b_start[1]
    b2 = b_start[0] - b_end[0]
    c2 = -a2 * b_start[0] - b2 * b_start[1]

    u = (a_end[0] - a_start[0], a_end[1] - a_start[1])
    v = (b_end[0] - b_start[0], b_end[1] - b_start[1])
    determinant = cross_product(u, v)

    ips: list[IntersectionPoint] = []
    if determinant == 0:
        same_direction = (u[0] > 0 and v[0] > 0) or (u[1] > 0 and v[1] > 0) or (
            u[0] < 0 and v[0] < 0
        ) or (u[1] < 0 and v[1] < 0)
        entering = not same_direction
        candidates = []
        if in_line(b_start, a_start, a_end):
            candidates.append(b_start)
        if in_line(b_end, a_start, a_end):
            candidates.append(b_end)
        if in_line(a_start, b_start, b_end) and not a_start.equals(b_start) and not a_start.equals(b_end):
            candidates.append(a_start)
        if in_line(a_end, b_start, b_end) and not a_end.equals(b_start) and not a_end.equals(b_end):
            candidates.append(a_end)
        ips = [IntersectionPoint(p, True, entering, True, True) for p in candidates]
        return bool(ips), ips

    ip = Point((b1 * c2 - b2 * c1) / determinant, (a2 * c1 - a1 * c2) / determinant)
    if in_line(ip, a_start, a_end) and in_line(ip, b_start, b_end):
        original = any(ip.equals(p) for p in (a_start, a_end, b_start, b_end))
        ips.append(IntersectionPoint(ip, True, determinant < 0, original, False))
        return True, ips
    return False, ips


def cross_product(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[1] - a[1] * b[0]


def in_line(spot: Sequence[float], a: Sequence[float], b: Sequence[float]) -> bool:
    """Return True if spot lies on the segment a-b."""
    return (
        (spot[0] - a[0]) * (a[1] - b[1]) == (a[0] - b[0]) * (spot[1] - a[1])
        and min(a[0], b[0]) <= spot[0] <= max(a[0], b[0])
        and min(a[1], b[1]) <= spot[1] <= max(a[1], b[1])
    )


def in_line_vertex(spot: Sequence[float], line: Sequence[Sequence[float]]) -> tuple[bool, bool]:
    """Return (is a vertex of line, is an end vertex of line)."""
    target = Point.of(spot)
    for i, vertex in enumerate(line):
        if target.equals(Point.of(vertex)):
            return True, i == 0 or i == len(line) - 1
    return False, False


def in_line_matrix(spot: Sequence[float], line: Sequence[Sequence[float]]) -> bool:
    """Return True if spot lies on any segment of line."""
    return any(in_line(spot, a, b) for a, b in pairwise(line))


def is_intersection_edge(
    a_line: Sequence[Sequence[float]], b_line: Sequence[Sequence[float]]
) -> bool:
    return intersection_edge(a_line, b_line)[0]


def intersection_edge(
    a_line: Sequence[Sequence[float]], b_line: Sequence[Sequence[float]]
) -> tuple[bool, list[IntersectionPoint]]:
    """Intersect two polylines; points are unique by position, first found kept."""
    mark = False
    found: list[IntersectionPoint] = []
    for a0, a1 in pairwise(a_line):
        for b0, b1 in pairwise(b_line):
            hit, ips = intersection(a0, a1, b0, b1)
            if hit:
                mark = True
                found.extend(ips)
    unique: list[IntersectionPoint] = []
    for ip in found:
        if not any(u.point.equals(ip.point) for u in unique):
            unique.append(ip)
    return mark, unique


def in_polygon(point: Sequence[float], poly: Sequence[Sequence[float]]) -> bool:
    """Even-odd ray casting test of point against the ring poly.

    Points exactly on an edge or vertex may be reported either way.
    """
    if len(poly) < 3:
        return False
    a = poly[0]
    inside = _ray_intersects_segment(point, poly[-1], a)
    for b in poly[1:]:
        if _ray_intersects_segment(point, a, b):
            inside = not inside
        a = b
    return inside


def _ray_intersects_segment(p: Sequence[float], a: Sequence[float], b: Sequence[float]) -> bool:
    return (a[1] > p[1]) != (b[1] > p[1]) and p[0] < (b[0] - a[0]) * (p[1] - a[1]) / (
        b[1] - a[1]
    ) + a[0]