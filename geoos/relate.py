"""Dimensionally extended intersection matrices and the relate computation."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Union

from geoos.geometry import Collection, LineString, Point, Polygon
from geoos.intersect import (
    in_line_matrix,
    in_line_vertex,
    in_polygon,
    intersection_edge,
    is_intersection_edge,
    is_original,
)

Geometry = Union[Point, LineString, Polygon, Collection]


class Location(IntEnum):
    """Topological location of a point relative to a geometry."""

    INTERIOR = 0
    BOUNDARY = 1
    EXTERIOR = 2


FALSE = -1
TRUE = -2
DONTCARE = -3

_SYMBOLS = {FALSE: "F", TRUE: "T", DONTCARE: "*", 0: "0", 1: "1", 2: "2"}
_VALUES = {symbol: value for value, symbol in _SYMBOLS.items()}
_VALUES.update({"f": FALSE, "t": TRUE})


def _is_true(value: int) -> bool:
    return value >= 0 or value == TRUE


class IntersectionMatrix:
    """A 3x3 matrix of dimension values, rows for A and columns for B."""

    def __init__(self) -> None:
        self._cells = [[FALSE] * 3 for _ in range(3)]

    def get(self, row: int, column: int) -> int:
        return self._cells[row][column]

    def set(self, row: int, column: int, value: int) -> None:
        self._cells[row][column] = value

    def set_at_least(self, row: int, column: int, value: int) -> None:
        """Raise the cell to value if it currently holds less."""
        if self._cells[row][column] < value:
            self._cells[row][column] = value

    def set_at_least_string(self, pattern: str) -> None:
        """Raise every cell to at least the value its symbol in pattern gives."""
        if len(pattern) != 9:
            raise ValueError(f"pattern must have 9 symbols: {pattern!r}")
        for index, symbol in enumerate(pattern):
            try:
                value = _VALUES[symbol]
            except KeyError:
                raise ValueError(f"unknown dimension symbol {symbol!r}") from None
            row, column = divmod(index, 3)
            self.set_at_least(row, column, value)

    def transpose(self) -> "IntersectionMatrix":
        """Swap rows and columns in place and return self."""
        cells = self._cells
        self._cells = [[cells[c][r] for c in range(3)] for r in range(3)]
        return self

    def is_covers(self) -> bool:
        c = self._cells
        has_point_in_common = (
            _is_true(c[0][0]) or _is_true(c[0][1]) or _is_true(c[1][0]) or _is_true(c[1][1])
        )
        return has_point_in_common and c[2][0] == FALSE and c[2][1] == FALSE

    def is_contains(self) -> bool:
        c = self._cells
        return _is_true(c[0][0]) and c[2][0] == FALSE and c[2][1] == FALSE

    def is_within(self) -> bool:
        c = self._cells
        return _is_true(c[0][0]) and c[0][2] == FALSE and c[1][2] == FALSE

    def __str__(self) -> str:
        return "".join(_SYMBOLS[value] for row in self._cells for value in row)

    def __repr__(self) -> str:
        return f"IntersectionMatrix({str(self)!r})"


def relate(g0: Geometry, g1: Geometry, intersect_bound: bool) -> str:
    """Return the relate pattern string of g0 against g1."""
    return str(im(g0, g1, intersect_bound))


def im(g0: Geometry, g1: Geometry, intersect_bound: bool) -> IntersectionMatrix:
    """Compute the intersection matrix of g0 against g1.

    intersect_bound tells whether the bounding boxes of the two overlap.
    """
    matrix = IntersectionMatrix()
    matrix.set(Location.EXTERIOR, Location.EXTERIOR, 2)
    if not intersect_bound:
        _compute_disjoint(g0, g1, matrix)
        return matrix
    if g0.equals(g1):
        if isinstance(g0, Point):
            matrix.set_at_least_string("0FFFFFFF2")
        elif isinstance(g0, LineString):
            matrix.set_at_least_string("1FFF0FFF2")
        elif isinstance(g0, Polygon):
            matrix.set_at_least_string("2FFF1FFF2")
        return matrix
    if isinstance(g0, Point):
        return _relate_point(g0, g1, matrix)
    if isinstance(g0, LineString):
        return _relate_line(g0, g1, matrix)
    if isinstance(g0, Polygon):
        return _relate_polygon(g0, g1, matrix)
    _compute_proper_intersection(g0, g1, matrix)
    return matrix


def _compute_disjoint(g0: Geometry, g1: Geometry, matrix: IntersectionMatrix) -> None:
    if not g0.is_empty():
        matrix.set(Location.INTERIOR, Location.EXTERIOR, g0.dimension())
        matrix.set(Location.BOUNDARY, Location.EXTERIOR, g0.boundary_dimension())
    if not g1.is_empty():
        matrix.set(Location.EXTERIOR, Location.INTERIOR, g1.dimension())
        matrix.set(Location.EXTERIOR, Location.BOUNDARY, g1.boundary_dimension())


def _compute_proper_intersection(
    g0: Geometry, g1: Geometry, matrix: IntersectionMatrix
) -> None:
    dims = (g0.dimension(), g1.dimension())
    pattern: Optional[str] = {
        (2, 2): "212101212",
        (2, 1): "1FFFFF1FF",
        (1, 2): "1F1FFFFFF",
        (1, 1): "0FFFFFFFF",
    }.get(dims)
    if pattern is not None:
        matrix.set_at_least_string(pattern)


def _relate_point(point: Point, other: Geometry, matrix: IntersectionMatrix) -> IntersectionMatrix:
    if isinstance(other, Point):
        matrix.set_at_least_string("0FFFFFFF2")
    elif isinstance(other, LineString):
        matrix.set_at_least_string(_point_line_pattern(point, other))
    elif isinstance(other, Polygon):
        matrix.set_at_least_string(_point_polygon_pattern(point, other))
    return matrix


def _point_line_pattern(point: Point, line: LineString) -> str:
    on_vertex, on_end = in_line_vertex(point, line)
    if on_vertex:
        return "F0FFFF102" if on_end else "0FFFFF102"
    if line.is_closed():
        return "0FFFFF1F2" if in_line_matrix(point, line) else "FF0FFF1F2"
    return "0FFFFF102" if in_line_matrix(point, line) else "FF0FFF102"


def _point_polygon_pattern(point: Point, polygon: Polygon) -> str:
    in_ring = -1
    for i, ring in enumerate(polygon):
        if i == 0:
            if in_line_matrix(point, ring):
                in_ring = 1
            elif in_polygon(point, ring):
                in_ring = 0
            else:
                in_ring = 2
        elif in_line_matrix(point, ring):
            in_ring = 1
            break
        elif in_polygon(point, ring) and in_ring != 2:
            in_ring = 2
            break
    return {0: "0FFFFF212", 1: "F0FFFF212", 2: "FF0FFF212"}.get(in_ring, "FFFFFFFFF")


def _relate_line(line: LineString, other: Geometry, matrix: IntersectionMatrix) -> IntersectionMatrix:
    if isinstance(other, Point):
        return _relate_point(other, line, matrix).transpose()
    if isinstance(other, LineString):
        matrix.set_at_least_string(_line_line_pattern(line, other))
    elif isinstance(other, Polygon):
        pattern = _line_polygon_pattern(line, other)
        if pattern is not None:
            matrix.set_at_least_string(pattern)
    return matrix


def _line_line_pattern(line: LineString, other: LineString) -> str:
    mark, ips = intersection_edge(line, other)
    if mark:
        if is_original(ips):
            return "1FF00F102"
        return "0F1FF01F2" if other.is_closed() else "0F1FF0102"
    return "FF1FF01F2" if other.is_closed() else "1FF00F102"


def _line_polygon_pattern(line: LineString, polygon: Polygon) -> Optional[str]:
    in_ring = -1
    touches_vertex = False
    for i, ring in enumerate(polygon):
        mark, ips = intersection_edge(line, ring)
        if is_original(ips):
            touches_vertex = True
        if mark:
            in_ring = 1
            break
        if i == 0:
            in_ring = 0 if in_polygon(line[0], ring) else 2
        elif in_polygon(line[0], ring) and in_ring != 2:
            in_ring = 2
            break
    if in_ring == 0:
        return "1FF0FF212"
    if in_ring == 1:
        return "F1FF0F212" if touches_vertex else "1010F0212"
    if in_ring == 2:
        return "FF1FF0212"
    return None


def _relate_polygon(
    polygon: Polygon, other: Geometry, matrix: IntersectionMatrix
) -> IntersectionMatrix:
    if isinstance(other, Point):
        return _relate_point(other, polygon, matrix).transpose()
    if isinstance(other, LineString):
        return _relate_line(other, polygon, matrix).transpose()
    if isinstance(other, Polygon):
        pattern = _polygon_polygon_pattern(polygon, other)
        if pattern is not None:
            matrix.set_at_least_string(pattern)
    return matrix


def _count_in_out(shell: LineString, ring: LineString) -> tuple[int, int]:
    inside = outside = 0
    for vertex in shell:
        if in_line_matrix(vertex, ring):
            continue
        if in_polygon(vertex, ring):
            inside += 1
        else:
            outside += 1
    return inside, outside


def _polygon_polygon_pattern(polygon: Polygon, other: Polygon) -> Optional[str]:
    in_ring = -1
    shell = polygon[0]
    for i, ring in enumerate(other):
        if is_intersection_edge(shell, ring):
            in_ring = 1
        if i == 0:
            if in_ring != 1:
                in_ring = 0 if in_polygon(shell[0], ring) else 2
            else:
                inside, outside = _count_in_out(shell, ring)
                if inside > 0 and outside == 0:
                    in_ring = 0
                elif inside > 0 and outside > 0:
                    in_ring = 1
                elif inside == 0 and outside > 0:
                    in_ring = 2
        elif in_ring != 1:
            if in_polygon(shell[0], ring) and in_ring != 2:
                in_ring = 2
                break
        else:
            inside, outside = _count_in_out(shell, ring)
            if inside > 0 and outside == 0:
                in_ring = 2
                break
            if inside > 0 and outside > 0:
                in_ring = 1
                break
    return {0: "2FF1FF212", 1: "212101212", 2: "FF2FF1212"}.get(in_ring)