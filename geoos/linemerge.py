"""Merging of line strings that continue one another."""

from __future__ import annotations

from itertools import combinations
from typing import Optional, Sequence

from geoos.geometry import Collection, LineString
from geoos.intersect import in_line_vertex, intersection_edge


def line_merge(lines: Sequence) -> Collection:
    """Repeatedly join pairs of line strings until no pair can be merged.

    Members that are not line strings are carried through untouched.
    """
    merged = Collection(lines)
    while True:
        for i, j in combinations(range(len(merged)), 2):
            candidate, changed = merge_line(merged, i, j)
            if changed:
                merged = candidate
                break
        else:
            return merged


def merge_line(lines: Sequence, i: int, j: int) -> tuple[Sequence, bool]:
    """Try to join members i and j of lines.

    Returns the new collection and True when they were joined; the other
    members keep their order and the joined line is appended at the end.
    Otherwise returns lines unchanged and False.
    """
    first, second = lines[i], lines[j]
    if not isinstance(first, LineString) or not isinstance(second, LineString):
        return lines, False
    mark, ips = intersection_edge(first, second)
    if not mark:
        return lines, False
    for ip in ips:
        for head, tail in ((first, second), (second, first)):
            if not in_line_vertex(ip.point, head)[0]:
                continue
            joined = _merge_check(head, tail)
            if joined is not None:
                rest = [g for k, g in enumerate(lines) if k not in (i, j)]
                return Collection([*rest, joined]), True
    return lines, False


def _merge_check(m0: LineString, m1: LineString) -> Optional[LineString]:
    """Join m1 onto the end of m0 when m1 continues from m0's last vertex."""
    if not m0 or not m1:
        return None
    tail = m0[-1]
    for i, vertex in enumerate(m1):
        if not vertex.equals(tail):
            continue
        j = 1
        while len(m1) - 1 - j >= 0 and i - j >= 0:
            k = len(m0) - 1 - j
            if k < 0 or not m1[i - j].equals(m0[k]):
                return None
            if i - j == 0:
                return LineString([*m0, *m1[1:]])
            j += 1
        return LineString([*m0, *m1[j:]])
    return None