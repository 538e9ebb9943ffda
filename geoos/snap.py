"""Snapping the vertices and segments of geometries to other geometries."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from geoos.geometry import (
    Collection,
    LineString,
    Point,
    Polygon,
    distance_segment_to_point,
    planar_distance,
)
from geoos.overlay import Geometry


def _coordinates(geometry: Optional[Geometry]) -> list[Point]:
    """Return every vertex of a geometry in order."""
    if geometry is None:
        return []
    if isinstance(geometry, Point):
        return [] if geometry.is_empty() else [geometry]
    if isinstance(geometry, LineString):
        return list(geometry)
    if isinstance(geometry, Polygon):
        return [p for ring in geometry for p in ring]
    if isinstance(geometry, Collection):
        return [p for member in geometry for p in _coordinates(member)]
    raise TypeError(f"not a geometry: {geometry!r}")


@dataclass
class LineSnapper:
    """Snaps the points of a line to the vertices of a snap geometry."""

    src_pts: Sequence[Sequence[float]]
    snap_pts: Optional[Geometry]
    snap_tolerance: float

    def snap_to(self) -> LineString:
        """Return the source points snapped to vertices, then cracked at snap points."""
        points = [Point.of(p) for p in self.src_pts]
        snap_points = _coordinates(self.snap_pts)
        self._snap_vertices(points, snap_points)
        self._snap_segments(points, snap_points)
        return LineString(points)

    def _snap_vertices(self, points: list[Point], snap_points: list[Point]) -> None:
        closed = bool(points) and points[0].equals(points[-1])
        end = len(points) - 1 if closed else len(points)
        for i, point in enumerate(points[:end]):
            snapped = self._find_snap_for_vertex(point, snap_points)
            if snapped is None:
                continue
            points[i] = snapped
            if i == 0 and closed:
                points[-1] = snapped

    def _find_snap_for_vertex(
        self, point: Point, snap_points: list[Point]
    ) -> Optional[Point]:
        for candidate in snap_points:
            if point.equals(candidate):
                return None
            if planar_distance(point, candidate) < self.snap_tolerance:
                return candidate
        return None

    def _snap_segments(self, points: list[Point], snap_points: list[Point]) -> None:
        """Crack source segments at nearby snap points, at most one segment each."""
        if not snap_points:
            return
        distinct = snap_points
        if snap_points[0].equals(snap_points[-1]):
            distinct = snap_points[:-1]
        for snap_point in distinct:
            index = self._find_segment_index_to_snap(points, snap_point)
            if index is not None:
                points.insert(index + 1, snap_point)

    def _find_segment_index_to_snap(
        self, points: list[Point], snap_point: Point
    ) -> Optional[int]:
        """Return the index of the closest segment within tolerance.

        None if there is none, or if snap_point is already a source vertex.
        """
        min_dist = math.inf
        found: Optional[int] = None
        for i, (p0, p1) in enumerate(zip(points, points[1:])):
            if p0.equals(snap_point) or p1.equals(snap_point):
                return None
            dist = distance_segment_to_point(snap_point, p0, p1)
            if dist < self.snap_tolerance and dist < min_dist:
                min_dist = dist
                found = i
        return found


@dataclass
class Snapper:
    """Snaps geometries to the vertices of snap_geom."""

    src_geom: Optional[Geometry]
    snap_geom: Optional[Geometry]
    snap_tolerance: float

    def snap_to(
        self, snap_geom: Optional[Geometry], snap_tolerance: Optional[float] = None
    ) -> Optional[Geometry]:
        """Return snap_geom with its lines snapped to this snapper's snap geometry.

        Points come back as one-point line strings.
        """
        tolerance = self.snap_tolerance if snap_tolerance is None else snap_tolerance
        return self._transform(snap_geom, tolerance)

    def _transform(
        self, geometry: Optional[Geometry], tolerance: float
    ) -> Optional[Geometry]:
        if isinstance(geometry, Point):
            return self._snap_line([geometry], tolerance)
        if isinstance(geometry, LineString):
            return self._snap_line(geometry, tolerance)
        if isinstance(geometry, Polygon):
            return Polygon(self._snap_line(ring, tolerance) for ring in geometry)
        if isinstance(geometry, Collection):
            transformed = (self._transform(member, tolerance) for member in geometry)
            return Collection(g for g in transformed if g is not None)
        return None

    def _snap_line(self, points: Sequence[Sequence[float]], tolerance: float) -> LineString:
        return LineSnapper(points, self.snap_geom, tolerance).snap_to()


def snap(
    g0: Optional[Geometry], g1: Optional[Geometry], snap_tolerance: float
) -> Collection:
    """Snap two geometries together with the given tolerance."""
    first = Snapper(g0, g1, snap_tolerance).snap_to(g1, snap_tolerance)
    second = Snapper(g1, g0, snap_tolerance).snap_to(first, snap_tolerance)
    return Collection([first, second])