"""Planes of rings built while walking a polygon overlay."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from geoos.geometry import Edge, Line, Point, Vertex, planar_distance

CLOSED = 1


class Rank(Enum):
    """Role of a plane in an overlay."""

    MAIN = "main"
    CUT = "cut"


@dataclass(eq=False)
class Plane:
    """A closed area: the first ring is the shell, the others are holes."""

    lines: list[Line] = field(default_factory=list)
    rings: list[Edge] = field(default_factory=list)
    edge: Optional[Edge] = None
    rank: Optional[Rank] = None

    def add_point_which(self, point: Vertex, which: bool) -> None:
        """Add a point to the current ring, starting a new ring if none is open.

        A point equal to the last one of the ring is ignored.
        """
        new_vertex = Vertex(Point(point.x, point.y))
        if self.edge is None or self.edge.now_status == CLOSED:
            self.edge = Edge(vertices=[new_vertex], is_clockwise=False, now_status=0)
            self.rings.append(self.edge)
            return
        vertices = self.edge.vertices
        if vertices and vertices[-1].point.equals(point.point):
            return
        vertices.append(new_vertex)
        if len(vertices) > 1:
            self.lines.append(Line(vertices[-2], vertices[-1], is_main=which))

    def add_point(self, point: Vertex) -> None:
        self.add_point_which(point, False)

    def close_ring(self) -> None:
        """Close the open ring, fix its orientation and add its closing line."""
        if self.edge is None:
            return
        self.edge.now_status = CLOSED
        self.edge.set_clockwise()
        vertices = self.edge.vertices
        self.lines.append(Line(vertices[-1], vertices[0]))

    def change_rank(self) -> None:
        self.rank = Rank.CUT if self.rank is Rank.MAIN else Rank.MAIN

    def __str__(self) -> str:
        return "".join(
            "{" + "".join(f"{{{v.x:.2f},{v.y:.2f}}}," for v in ring.vertices) + "}"
            for ring in self.rings
        )


def index_of_vertex(vertices: Sequence[Vertex], point: Vertex) -> Optional[int]:
    """Return the index of the first vertex at point's position, or None."""
    for i, vertex in enumerate(vertices):
        if vertex.same_position(point):
            return i
    return None


def add_point_to_vertex_slice(
    edges: Sequence[Edge], start: Vertex, end: Vertex, ip: Vertex
) -> None:
    """Insert a copy of ip between start and end in the first edge holding start.

    Among several points already inserted on that segment, ip is placed by
    its distance from start.
    """
    for edge in edges:
        vertices = edge.vertices
        start_index = index_of_vertex(vertices, start)
        if start_index is None:
            continue
        end_index = index_of_vertex(vertices, end)
        if end_index is None:
            end_index = len(vertices)
        origin = vertices[start_index].point
        dist_from_start = planar_distance(ip.point, origin)
        position = start_index
        while position != end_index and position != len(vertices):
            if planar_distance(vertices[position].point, origin) >= dist_from_start:
                break
            position += 1
        vertices.insert(position, dataclasses.replace(ip))
        break