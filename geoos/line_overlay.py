"""Overlay operations with a line string as subject."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Sequence

from geoos.geometry import (
    Collection,
    LineString,
    NotMatchTypeError,
    Point,
    Polygon,
    Segment,
)
from geoos.intersect import (
    IntersectionPoint,
    in_line,
    in_line_matrix,
    intersection_edge,
    sort_points,
)
from geoos.linemerge import line_merge
from geoos.overlay import Geometry, PointOverlay


@dataclass
class IntersectionLineSegment:
    """Intersection points found on one segment of a line."""

    pos: int
    line: Segment
    ips: list[IntersectionPoint] = field(default_factory=list)


def intersect_line(
    m: Sequence[Sequence[float]], m1: Sequence[Sequence[float]]
) -> list[IntersectionLineSegment]:
    """Return, per segment of m, the points where m meets m1.

    The points of each segment are ordered along the segment's direction.
    """
    mark, ips = intersection_edge(m, m1)
    if not mark or not ips:
        return []
    found = []
    for pos, seg in enumerate(LineString(m).segments()):
        on = [ip for ip in ips if in_line(ip.point, seg.p0, seg.p1)]
        if on:
            ordered = sort_points(on, reverse=seg.p0.compare(seg.p1) >= 0)
            found.append(IntersectionLineSegment(pos, seg, ordered))
    return found


def _pieces(segments: Iterable[IntersectionLineSegment]) -> Iterator[Geometry]:
    for il in segments:
        if len(il.ips) > 1:
            yield LineString(ip.point for ip in il.ips)
        else:
            yield il.ips[0].point


def _difference_line(m: LineString, m1: LineString) -> Geometry:
    mark, ips = intersection_edge(m, m1)
    if not mark or len(ips) <= 1:
        return m
    crossings = []
    for pos, seg in enumerate(m.segments()):
        on = sort_points(ip for ip in ips if in_line(ip.point, seg.p0, seg.p1))
        if on:
            crossings.append((pos, on))

    result = []
    start = 0
    piece: list[Point] = []
    for pos, on in crossings:
        first, last = on[0].point, on[-1].point
        if m[pos].equals(first):
            piece.extend(m[start:pos])
        else:
            piece.extend(m[start : pos + 1])
            piece.append(first)
        if len(piece) > 1:
            result.append(LineString(piece))
        if pos < len(m) - 1 and m[pos + 1].equals(last):
            start = pos + 2
        else:
            start = pos + 1
        piece = [last]
    piece.extend(m[start:])
    if len(piece) > 1:
        result.append(LineString(piece))
    return Collection(result)


@dataclass
class LineOverlay(PointOverlay):
    """Overlay of a subject line string with a clipping geometry."""

    def union(self) -> Optional[Geometry]:
        decided, result = self._union_check()
        if decided:
            return result
        s, c = self.subject, self.clipping
        if isinstance(s, LineString) and isinstance(c, LineString):
            return line_merge(Collection([s, c]))
        raise NotMatchTypeError()

    def intersection(self) -> Optional[Geometry]:
        decided, result = self._intersection_check()
        if decided:
            return result
        line, c = self.subject, self.clipping
        if not isinstance(line, LineString):
            raise NotMatchTypeError()
        if isinstance(c, Point):
            return c if in_line_matrix(c, line) else None
        if isinstance(c, LineString):
            return line_merge(Collection(_pieces(intersect_line(line, c))))
        if isinstance(c, Polygon):
            parts = [piece for ring in c for piece in _pieces(intersect_line(line, ring))]
            return line_merge(Collection(parts))
        raise NotMatchTypeError()

    def difference(self) -> Optional[Geometry]:
        """Return the parts of the subject line not shared with the clipping line."""
        decided, result = self._difference_check()
        if decided:
            return result
        s, c = self.subject, self.clipping
        if isinstance(s, LineString) and isinstance(c, LineString):
            return _difference_line(s, c)
        raise NotMatchTypeError()

    def difference_reverse(self) -> Optional[Geometry]:
        """Return the parts of the clipping line not shared with the subject."""
        return LineOverlay(self.clipping, self.subject).difference()

    def sym_difference(self) -> Collection:
        """Return both differences; an operation that fails is left out."""
        return super().sym_difference()