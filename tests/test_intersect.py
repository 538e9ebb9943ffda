import pytest
from hypothesis import given
from hypothesis import strategies as st

from geoos.geometry import Point, Segment
from geoos.intersect import (
    IntersectionPoint,
    cross_product,
    in_line,
    in_line_matrix,
    in_line_vertex,
    in_polygon,
    intersection,
    intersection_edge,
    intersection_segment,
    is_intersection_edge,
    is_intersection_segment,
    is_original,
    sort_points,
)

POLYGONS = {
    "rc square": (
        [(0, 0), (10, 0), (10, 10), (0, 10)],
        [((5, 5), True), ((5, 8), True), ((-10, 5), False), ((8, 5), True),
         ((1, 2), True), ((2, 1), True), ((0, 0), True)],
    ),
    "rc square hole": (
        [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0),
         (2.5, 2.5), (7.5, 2.5), (7.5, 7.5), (2.5, 7.5), (2.5, 2.5)],
        [((5, 5), False), ((5, 8), True), ((-10, 5), False), ((8, 5), True),
         ((1, 2), True), ((2, 1), True)],
    ),
    "rc strange": (
        [(0, 0), (2.5, 2.5), (0, 10), (2.5, 7.5), (7.5, 7.5), (10, 10), (10, 0), (2.5, 2.5)],
        [((5, 5), True), ((5, 8), False), ((-10, 5), False), ((8, 5), True),
         ((1, 2), False), ((2, 1), False)],
    ),
    "rc exagon": (
        [(3, 0), (7, 0), (10, 5), (7, 10), (3, 10), (0, 5)],
        [((5, 5), True), ((5, 8), True), ((-10, 5), False), ((8, 5), True),
         ((10, 10), False), ((1, 2), False), ((2, 1), False)],
    ),
    "jm rectangle": (
        [(1, 1), (1, 2), (2, 2), (2, 1)],
        [((1.1, 1.1), True), ((1.2, 1.2), True), ((1.3, 1.3), True), ((1.4, 1.4), True),
         ((1.5, 1.5), True), ((1.6, 1.6), True), ((1.7, 1.7), True), ((1.8, 1.8), True),
         ((-4.9, 1.2), False), ((10.0, 10.0), False), ((-5.0, -6.0), False),
         ((-13.0, 1.0), False), ((4.9, -1.2), False), ((10.0, -10.0), False),
         ((5.0, 6.0), False), ((-13.0, 1.0), False)],
    ),
    "ss box": (
        [(1, 1), (1, 2), (2, 2), (2, 1)],
        [((1.5, 1.5), True), ((1.2, 1.9), True), ((0, 1.9), False), ((1.5, 2), False),
         ((1.5, 2.2), False), ((3, 5), False)],
    ),
    "sr simple": (
        [(1, 3), (2, 8), (5, 4), (5, 9), (7, 5), (6, 1), (3, 1)],
        [((5.5, 7), True), ((4.5, 7), False)],
    ),
    "sr holes": (
        [(1, 2), (1, 6), (8, 7), (8, 1), (2, 3), (5, 5), (6, 2), (8, 1),
         (6, 6), (7, 6), (7, 5), (8, 1)],
        [((6, 5), True), ((4, 3), False), ((6.5, 5.8), False)],
    ),
}

CASES = [
    pytest.param(poly, point, want, id=f"{name}-{point}")
    for name, (poly, checks) in POLYGONS.items()
    for point, want in checks
]


@pytest.mark.parametrize("poly, point, want", CASES)
def test_in_polygon(poly, point, want):
    assert in_polygon(Point(*point), [Point(*p) for p in poly]) is want


def test_in_polygon_needs_three_points():
    assert in_polygon((0.5, 0.5), [(0, 0), (1, 1)]) is False


def test_crossing_segments():
    mark, ips = intersection((0, 0), (10, 10), (0, 10), (10, 0))
    assert mark
    assert len(ips) == 1
    assert ips[0].point == Point(5, 5)
    assert ips[0].is_entering
    assert not ips[0].is_original
    assert not ips[0].is_collinear


def test_segments_touching_at_vertex_are_original():
    mark, ips = intersection((0, 0), (5, 5), (5, 5), (10, 0))
    assert mark
    assert [ip.point for ip in ips] == [Point(5, 5)]
    assert ips[0].is_original


def test_collinear_overlap():
    mark, ips = intersection((0, 0), (10, 0), (5, 0), (15, 0))
    assert mark
    assert [ip.point for ip in ips] == [Point(5, 0), Point(10, 0)]
    assert all(ip.is_collinear and ip.is_original for ip in ips)
    assert not any(ip.is_entering for ip in ips)


def test_collinear_opposite_direction_is_entering():
    mark, ips = intersection((0, 0), (10, 0), (15, 0), (5, 0))
    assert mark
    assert all(ip.is_entering for ip in ips)


@pytest.mark.parametrize(
    "a0, a1, b0, b1",
    [((0, 0), (1, 0), (0, 1), (1, 1)), ((0, 0), (1, 1), (3, 0), (2, 1))],
)
def test_non_intersecting_segments(a0, a1, b0, b1):
    assert intersection(a0, a1, b0, b1) == (False, [])


def test_segment_wrappers():
    l = Segment(Point(0, 0), Point(10, 10))
    o = Segment(Point(0, 10), Point(10, 0))
    assert is_intersection_segment(l, o)
    mark, ips = intersection_segment(l, o)
    assert mark and ips[0].point == Point(5, 5)


def test_cross_product():
    assert cross_product((1, 0), (0, 1)) == 1
    assert cross_product((2, 3), (4, 6)) == 0


def test_in_line():
    assert in_line((5, 5), (0, 0), (10, 10))
    assert not in_line((11, 11), (0, 0), (10, 10))
    assert not in_line((5, 6), (0, 0), (10, 10))


def test_in_line_vertex():
    line = [(0, 0), (1, 1), (2, 2)]
    assert in_line_vertex((0, 0), line) == (True, True)
    assert in_line_vertex((1, 1), line) == (True, False)
    assert in_line_vertex((2, 2), line) == (True, True)
    assert in_line_vertex((5, 5), line) == (False, False)


def test_in_line_matrix():
    line = [(0, 0), (1, 1), (2, 0)]
    assert in_line_matrix((0.5, 0.5), line)
    assert in_line_matrix((1.5, 0.5), line)
    assert not in_line_matrix((0.5, 0.6), line)


def test_intersection_edge_deduplicates():
    mark, ips = intersection_edge([(0, 0), (10, 10), (20, 0)], [(0, 10), (20, 10)])
    assert mark
    assert [ip.point for ip in ips] == [Point(10, 10)]


def test_is_intersection_edge_disjoint():
    assert not is_intersection_edge([(0, 0), (1, 0)], [(0, 5), (1, 5)])
    assert intersection_edge([(0, 0), (1, 0)], [(0, 5), (1, 5)]) == (False, [])


def test_is_original():
    assert is_original([IntersectionPoint(Point(0, 0)), IntersectionPoint(Point(1, 1), is_original=True)])
    assert not is_original([IntersectionPoint(Point(0, 0))])
    assert not is_original([])


def test_sort_points():
    pts = [IntersectionPoint(Point(2, 1)), IntersectionPoint(Point(1, 5)), IntersectionPoint(Point(1, 2))]
    assert [p.point for p in sort_points(pts)] == [Point(1, 2), Point(1, 5), Point(2, 1)]
    assert [p.point for p in sort_points(pts, reverse=True)] == [Point(2, 1), Point(1, 5), Point(1, 2)]


def test_intersection_point_coordinates():
    ip = IntersectionPoint((3, 4))
    assert (ip.x, ip.y) == (3.0, 4.0)
    assert ip.point == Point(3, 4)


coord = st.integers(min_value=-100, max_value=100)


@given(coord, coord, coord, coord, coord, coord, coord, coord)
def test_intersection_points_lie_on_both_segments(a, b, c, d, e, f, g, h):
    a0, a1, b0, b1 = (a, b), (c, d), (e, f), (g, h)
    mark, ips = intersection(a0, a1, b0, b1)
    assert mark == bool(ips)
    for ip in ips:
        if ip.is_collinear:
            assert in_line(ip.point, a0, a1) or in_line(ip.point, b0, b1)
        else:
            assert in_line(ip.point, a0, a1) and in_line(ip.point, b0, b1)