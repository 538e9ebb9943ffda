"""Weiler-Atherton overlay of polygons."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from geoos import relate
from geoos.geometry import (
    Collection,
    Edge,
    GeometryError,
    LineString,
    NotMatchTypeError,
    Point,
    Polygon,
    Vertex,
    bounds_intersect,
)
from geoos.intersect import in_line_vertex, intersection
from geoos.line_overlay import intersect_line
from geoos.linemerge import line_merge
from geoos.overlay import Geometry, PointOverlay
from geoos.plane import Plane, Rank, add_point_to_vertex_slice, index_of_vertex


class _OverlayWalker:
    """Walks the rings of a prepared overlay from one intersection to the next.

    The step is the direction taken along a counter-clockwise ring; it is
    reversed on clockwise rings.
    """

    def __init__(self, overlay: "PolygonOverlay") -> None:
        self.overlay = overlay

    def _walk_next(self, pol: Plane, start: Vertex) -> Vertex:
        reached = self.compute(pol, start, True)
        return self.compute(pol, reached, False)

    def _walk(self, pol: Plane, start: Vertex, which: bool, step: int) -> Vertex:
        plane = self.overlay.subject_plane if which else self.overlay.clipping_plane
        if plane is None:
            raise GeometryError("overlay has not been prepared")
        for ring in plane.rings:
            index = index_of_vertex(ring.vertices, start)
            if index is None:
                continue
            vertices = ring.vertices
            direction = -step if ring.is_clockwise else step
            for _ in range(len(vertices)):
                pol.add_point_which(vertices[index], which)
                index = (index + direction) % len(vertices)
                if vertices[index].is_intersection_point:
                    return vertices[index]
            raise GeometryError("ring holds no intersection point to walk to")
        raise GeometryError(f"vertex ({start.x}, {start.y}) is on no ring")

    def compute(self, pol: Plane, start: Vertex, which: bool) -> Vertex:
        raise NotImplementedError


class ComputeMergeOverlay(_OverlayWalker):
    """Walk that yields the union of two polygons."""

    def next(self, pol: Plane, start: Vertex) -> Vertex:
        """Walk the subject and then the clipping rings, adding points to pol."""
        return self._walk_next(pol, start)

    def compute(self, pol: Plane, start: Vertex, which: bool) -> Vertex:
        """Add points to pol from start up to the next intersection vertex."""
        return self._walk(pol, start, which, 1)


class ComputeClipOverlay(_OverlayWalker):
    """Walk that yields the intersection of two polygons."""

    def next(self, pol: Plane, start: Vertex) -> Vertex:
        """Walk the subject and then the clipping rings, adding points to pol."""
        return self._walk_next(pol, start)

    def compute(self, pol: Plane, start: Vertex, which: bool) -> Vertex:
        """Add points to pol from start up to the next intersection vertex."""
        return self._walk(pol, start, which, -1)


class ComputeMainOverlay(_OverlayWalker):
    """Walk that yields the difference of two polygons."""

    def next(self, pol: Plane, start: Vertex) -> Vertex:
        """Walk the subject and then the clipping rings, adding points to pol."""
        return self._walk_next(pol, start)

    def compute(self, pol: Plane, start: Vertex, which: bool) -> Vertex:
        """Add points to pol from start up to the next intersection vertex."""
        return self._walk(pol, start, which, 1 if which else -1)


def _pieces(line: LineString, ring: LineString) -> Iterator[Geometry]:
    for il in intersect_line(line, ring):
        if len(il.ips) > 1:
            yield LineString(ip.point for ip in il.ips)
        else:
            yield il.ips[0].point


def to_polygon(plane: Plane) -> Polygon:
    """Return the rings of plane as a polygon, closing every ring."""
    rings = []
    for ring in plane.rings:
        points = [v.point for v in ring.vertices]
        if not points:
            continue
        if not points[-1].equals(points[0]):
            points.append(points[0])
        rings.append(LineString(points))
    return Polygon(rings)


@dataclass
class PolygonOverlay(PointOverlay):
    """Overlay of a subject polygon with a clipping geometry."""

    subject_plane: Optional[Plane] = field(default=None, repr=False, compare=False)
    clipping_plane: Optional[Plane] = field(default=None, repr=False, compare=False)

    def _both_polygons(self) -> bool:
        return isinstance(self.subject, Polygon) and isinstance(self.clipping, Polygon)

    def _overlay(self, walker_type: type[_OverlayWalker]) -> Polygon:
        walker = walker_type(self)
        self.prepare()
        _, exiting = self.weiler()
        return to_polygon(self.compute_polygon(exiting, walker))

    def union(self) -> Optional[Geometry]:
        decided, result = self._union_check()
        if decided:
            return result
        if self._both_polygons():
            return self._overlay(ComputeMergeOverlay)
        raise NotMatchTypeError()

    def intersection(self) -> Optional[Geometry]:
        decided, result = self._intersection_check()
        if decided:
            return result
        poly, c = self.subject, self.clipping
        if not isinstance(poly, Polygon):
            raise NotMatchTypeError()
        if isinstance(c, Point):
            inter = bounds_intersect(poly.bound(), c.bound())
            return c if relate.im(poly, c, inter).is_contains() else None
        if isinstance(c, LineString):
            parts = [piece for ring in poly for piece in _pieces(c, ring)]
            return line_merge(Collection(parts))
        if isinstance(c, Polygon):
            return self._overlay(ComputeClipOverlay)
        raise NotMatchTypeError()

    def difference(self) -> Optional[Geometry]:
        """Return the part of the subject polygon outside the clipping polygon."""
        decided, result = self._difference_check()
        if decided:
            return result
        if not self._both_polygons():
            raise NotMatchTypeError()
        poly, c = self.subject, self.clipping
        inter = bounds_intersect(poly.bound(), c.bound())
        if relate.im(poly, c, inter).is_within():
            return Polygon()
        return self._overlay(ComputeMainOverlay)

    def difference_reverse(self) -> Optional[Geometry]:
        """Return the part of the clipping polygon outside the subject."""
        return PolygonOverlay(self.clipping, self.subject).difference()

    def sym_difference(self) -> Collection:
        """Return the non-empty differences both ways."""
        parts = []
        for operation in (self.difference, self.difference_reverse):
            try:
                result = operation()
            except GeometryError:
                continue
            if result is not None and not result.is_empty():
                parts.append(result)
        return Collection(parts)

    def prepare(self) -> None:
        """Build the subject and clipping planes from the two polygons."""
        if not self._both_polygons():
            raise NotMatchTypeError()
        self.subject_plane = self._plane_of(self.subject, Rank.MAIN)
        self.clipping_plane = self._plane_of(self.clipping, Rank.CUT)

    @staticmethod
    def _plane_of(polygon: Polygon, rank: Rank) -> Plane:
        plane = Plane()
        for ring in polygon:
            for point in ring[:-1]:
                plane.add_point(Vertex(point))
            plane.close_ring()
            plane.rank = rank
        return plane

    def weiler(self) -> tuple[list[Vertex], list[Vertex]]:
        """Insert the crossing points into both planes.

        Returns the entering and the exiting points, each unique by position.
        """
        if self.subject_plane is None or self.clipping_plane is None:
            raise GeometryError("overlay has not been prepared")
        entering: list[Vertex] = []
        exiting: list[Vertex] = []
        for line in self.subject_plane.lines:
            for clip in self.clipping_plane.lines:
                mark, ips = intersection(
                    line.start.point, line.end.point, clip.start.point, clip.end.point
                )
                for ip in ips:
                    if ip.is_collinear:
                        continue
                    on_line = in_line_vertex(ip.point, [line.start.point, line.end.point])[0]
                    on_clip = in_line_vertex(ip.point, [clip.start.point, clip.end.point])[0]
                    if on_line and on_clip:
                        continue
                    if not mark:
                        continue
                    vertex = Vertex(ip.point, ip.is_intersection_point, ip.is_entering)
                    (entering if vertex.is_entering else exiting).append(vertex)
                    add_point_to_vertex_slice(self.subject_plane.rings, line.start, line.end, vertex)
                    add_point_to_vertex_slice(self.clipping_plane.rings, clip.start, clip.end, vertex)
        return _unique(entering), _unique(exiting)

    def compute_polygon(self, exiting_points: list[Vertex], walker: _OverlayWalker) -> Plane:
        """Trace result rings starting from each unvisited exiting point."""
        planes = [p for p in (self.subject_plane, self.clipping_plane) if p is not None]
        limit = sum(len(r.vertices) for p in planes for r in p.rings) + 1
        pol = Plane()
        for start in exiting_points:
            if start.is_checked:
                continue
            edge = Edge()
            pol.edge = edge
            pol.rings.append(edge)
            current = Vertex(Point(start.x, start.y))
            for _ in range(limit):
                current = walker.next(pol, current)
                where = index_of_vertex(exiting_points, current)
                if where is not None:
                    exiting_points[where].is_checked = True
                if current.same_position(start):
                    pol.close_ring()
                    break
            else:
                raise GeometryError("overlay walk does not return to its start")
        return pol


def _unique(vertices: list[Vertex]) -> list[Vertex]:
    unique: list[Vertex] = []
    for vertex in vertices:
        if not any(u.point.equals(vertex.point) for u in unique):
            unique.append(vertex)
    return unique