import pytest

from geoos.geometry import Collection, LineString, NotMatchTypeError, Point, Polygon
from geoos.overlay import PointOverlay


@pytest.mark.parametrize(
    "subject, clipping, want",
    [
        (Point(100, 100), Point(100, 100), Point(100, 100)),
        (Point(100, 100), Point(100, 101), None),
        (Point(100, 100), LineString([(100, 100), (100, 101)]), Point(100, 100)),
        (Point(100, 100), LineString([(100, 105), (100, 101)]), None),
        (
            Point(100, 100),
            Polygon([[(90, 90), (90, 101), (101, 101), (101, 90), (90, 90)]]),
            Point(100, 100),
        ),
        (
            Point(100, 100),
            Polygon([[(100, 100), (100, 101), (101, 101), (101, 100), (100, 100)]]),
            Point(100, 100),
        ),
        (
            Point(100, 100),
            Polygon([[(105, 105), (105, 101), (101, 101), (101, 105), (105, 105)]]),
            None,
        ),
    ],
)
def test_point_overlay_intersection(subject, clipping, want):
    assert PointOverlay(subject, clipping).intersection() == want


def test_intersection_with_missing_operand():
    assert PointOverlay(Point(1, 1), None).intersection() is None
    assert PointOverlay(None, Point(1, 1)).intersection() is None


def test_intersection_wrong_subject_type():
    with pytest.raises(NotMatchTypeError):
        PointOverlay(LineString([(0, 0), (1, 1)]), Point(0, 0)).intersection()


def test_intersection_wrong_clipping_type():
    with pytest.raises(NotMatchTypeError):
        PointOverlay(Point(0, 0), Collection([Point(0, 0)])).intersection()


def test_union_points():
    assert PointOverlay(Point(1, 1), Point(1, 1)).union() == Point(1, 1)
    assert PointOverlay(Point(1, 1), Point(2, 2)).union() == Collection(
        [Point(1, 1), Point(2, 2)]
    )


def test_union_missing_operand():
    assert PointOverlay(None, Point(2, 2)).union() == Point(2, 2)
    assert PointOverlay(Point(1, 1), None).union() == Point(1, 1)
    assert PointOverlay(None, None).union() is None


def test_union_wrong_type():
    with pytest.raises(NotMatchTypeError):
        PointOverlay(Point(1, 1), LineString([(0, 0), (1, 1)])).union()


def test_difference():
    assert PointOverlay(Point(1, 1), Point(1, 1)).difference() is None
    assert PointOverlay(Point(1, 1), Point(2, 2)).difference() == Point(1, 1)
    assert PointOverlay(Point(1, 1), None).difference() == Point(1, 1)
    assert PointOverlay(None, Point(1, 1)).difference() is None


def test_difference_reverse():
    assert PointOverlay(Point(1, 1), Point(2, 2)).difference_reverse() == Point(2, 2)


def test_sym_difference():
    assert PointOverlay(Point(1, 1), Point(2, 2)).sym_difference() == Collection(
        [Point(1, 1), Point(2, 2)]
    )
    assert PointOverlay(Point(1, 1), Point(1, 1)).sym_difference() == Collection(
        [None, None]
    )


def test_sym_difference_skips_failures():
    line = LineString([(0, 0), (1, 1)])
    assert PointOverlay(line, line).sym_difference() == Collection([])