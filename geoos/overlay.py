"""Overlay operations on point geometries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from geoos import relate
from geoos.geometry import (
    Collection,
    GeometryError,
    LineString,
    NotMatchTypeError,
    Point,
    Polygon,
    bounds_intersect,
)
from geoos.intersect import in_line_matrix

Geometry = Union[Point, LineString, Polygon, Collection]


@dataclass
class PointOverlay:
    """Overlay of a subject point with a clipping geometry; either may be None."""

    subject: Optional[Geometry] = None
    clipping: Optional[Geometry] = None

    def _union_check(self) -> tuple[bool, Optional[Geometry]]:
        """Return (decided, result) for a union with a missing operand."""
        if self.subject is None:
            return True, self.clipping
        if self.clipping is None:
            return True, self.subject
        return False, None

    def _intersection_check(self) -> tuple[bool, Optional[Geometry]]:
        """Return (decided, result) for an intersection with a missing operand."""
        if self.subject is None or self.clipping is None:
            return True, None
        return False, None

    def _difference_check(self) -> tuple[bool, Optional[Geometry]]:
        """Return (decided, result) for a difference with a missing operand."""
        if self.subject is None:
            return True, None
        if self.clipping is None:
            return True, self.subject
        return False, None

    def union(self) -> Optional[Geometry]:
        decided, result = self._union_check()
        if decided:
            return result
        s, c = self.subject, self.clipping
        if isinstance(s, Point) and isinstance(c, Point):
            return s if s.equals(c) else Collection([s, c])
        raise NotMatchTypeError()

    def intersection(self) -> Optional[Geometry]:
        decided, result = self._intersection_check()
        if decided:
            return result
        s, c = self.subject, self.clipping
        if not isinstance(s, Point):
            raise NotMatchTypeError()
        if isinstance(c, Point):
            return s if s.equals(c) else None
        if isinstance(c, LineString):
            return s if in_line_matrix(s, c) else None
        if isinstance(c, Polygon):
            inter = bounds_intersect(c.bound(), s.bound())
            return s if relate.im(c, s, inter).is_covers() else None
        raise NotMatchTypeError()

    def difference(self) -> Optional[Geometry]:
        """Return the part of the subject not shared with the clipping geometry."""
        decided, result = self._difference_check()
        if decided:
            return result
        s, c = self.subject, self.clipping
        if isinstance(s, Point) and isinstance(c, Point):
            return None if s.equals(c) else s
        raise NotMatchTypeError()

    def difference_reverse(self) -> Optional[Geometry]:
        """Return the part of the clipping geometry not shared with the subject."""
        return PointOverlay(self.clipping, self.subject).difference()

    def sym_difference(self) -> Collection:
        """Return both differences; an operation that fails is left out."""
        parts = []
        for operation in (self.difference, self.difference_reverse):
            try:
                parts.append(operation())
            except GeometryError:
                continue
        return Collection(parts)