"""A two-dimensional K-D tree over a list of points, searched by spherical distance."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from geoos.distance import distance_spherical_fast
from geoos.geometry import Point


@dataclass(eq=False)
class KDNode:
    """A tree node holding the index of its point and of points equal to it."""

    point_id: int
    split: int = 0
    equal_ids: list[int] = field(default_factory=list)
    left: Optional["KDNode"] = None
    right: Optional["KDNode"] = None

    def height(self) -> int:
        left = self.left.height() if self.left is not None else 0
        right = self.right.height() if self.right is not None else 0
        return max(left, right) + 1


@dataclass
class _PreSorted:
    """Point indices sorted on each dimension."""

    points: Sequence[Point]
    cur: list[list[int]]


def _pre_sort(points: Sequence[Point]) -> _PreSorted:
    cur = [
        sorted(range(len(points)), key=lambda i, d=dim: (points[i][d], points[i][1 - d]))
        for dim in (0, 1)
    ]
    return _PreSorted(points, cur)


def _split_med(
    pre: _PreSorted, dim: int
) -> tuple[int, list[int], _PreSorted, _PreSorted]:
    """Split at the median on dim.

    Returns the median index, the indices of points equal to the median, and
    the indices below and at-or-above the median, still sorted on each dimension.
    """
    pts = pre.points
    ids = pre.cur[dim]
    m = len(ids) // 2
    while m > 0 and pts[ids[m - 1]][dim] == pts[ids[m]][dim]:
        m -= 1
    mh = m
    while mh < len(ids) - 1 and pts[ids[mh + 1]].equals(pts[ids[m]]):
        mh += 1
    med = ids[m]
    equal = ids[m + 1 : mh + 1]
    pivot = pts[med][dim]

    other = 1 - dim
    skip = {med, *equal}
    rest = [n for n in pre.cur[other] if n not in skip]
    left_cur: list[list[int]] = [[], []]
    right_cur: list[list[int]] = [[], []]
    left_cur[dim] = ids[:m]
    right_cur[dim] = ids[mh + 1 :]
    left_cur[other] = [n for n in rest if not pts[n].is_empty() and pts[n][dim] < pivot]
    right_cur[other] = [n for n in rest if pts[n].is_empty() or not pts[n][dim] < pivot]
    return med, equal, _PreSorted(pts, left_cur), _PreSorted(pts, right_cur)


def _build(depth: int, pre: _PreSorted) -> Optional[KDNode]:
    split = depth % 2
    ids = pre.cur[split]
    if not ids:
        return None
    if len(ids) == 1:
        return KDNode(ids[0], split)
    med, equal, left, right = _split_med(pre, split)
    return KDNode(
        med,
        split,
        list(equal),
        _build(depth + 1, left),
        _build(depth + 1, right),
    )


class KDTree:
    """A K-D tree whose nodes hold indices into its list of points."""

    def __init__(self, points: Iterable[Sequence[float]] = ()) -> None:
        self.points: list[Point] = [Point.of(p) for p in points]
        self.root: Optional[KDNode] = (
            _build(0, _pre_sort(self.points)) if self.points else None
        )

    def insert(self, point: Sequence[float]) -> None:
        """Add a point to the list and insert a node for it."""
        self.points.append(Point.of(point))
        node = KDNode(len(self.points) - 1)
        new = self.points[node.point_id]
        if self.root is None:
            node.split = 0
            self.root = node
            return
        current = self.root
        depth = 0
        while True:
            depth += 1
            here = self.points[current.point_id]
            if new[current.split] < here[current.split]:
                if current.left is None:
                    node.split = depth % 2
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    node.split = depth % 2
                    current.right = node
                    return
                current = current.right

    def in_range(self, point: Sequence[float], dist: float) -> list[int]:
        """Return the indices of points closer than dist to point.

        Distances are those of distance_spherical_fast, compared with dist squared.
        """
        if dist < 0:
            return []
        found: list[int] = []
        self._in_range(self.root, Point.of(point), dist, found)
        return found

    def _in_range(
        self, node: Optional[KDNode], pt: Point, r: float, found: list[int]
    ) -> None:
        if node is None:
            return
        here = self.points[node.point_id]
        split = node.split
        diff = pt[split] - here[split]
        this_side, other_side = node.right, node.left
        if diff < 0:
            this_side, other_side = node.left, node.right

        mid = (pt[1 - split] + here[1 - split]) / 2
        p1 = [0.0, 0.0]
        p1[1 - split] = mid
        p1[split] = pt[split]
        p2 = [0.0, 0.0]
        p2[1 - split] = mid
        p2[split] = here[split]

        plane_dist = distance_spherical_fast(p1, p2)
        self._in_range(this_side, pt, r, found)
        if plane_dist <= r * r:
            if distance_spherical_fast(here, pt) < r * r:
                found.append(node.point_id)
                found.extend(node.equal_ids)
            self._in_range(other_side, pt, r, found)

    def height(self) -> int:
        return self.root.height() if self.root is not None else 0