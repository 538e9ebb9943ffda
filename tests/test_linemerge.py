from geoos.geometry import Collection, LineString, Point
from geoos.linemerge import line_merge, merge_line


def test_merge_line_joins_continuing_lines():
    a = LineString([(0, 0), (1, 0)])
    b = LineString([(1, 0), (2, 0)])
    merged, changed = merge_line(Collection([a, b]), 0, 1)
    assert changed is True
    assert merged == Collection([LineString([(0, 0), (1, 0), (2, 0)])])


def test_merge_line_is_symmetric_for_reversed_order():
    a = LineString([(0, 0), (1, 0)])
    b = LineString([(1, 0), (2, 0)])
    forward, _ = merge_line(Collection([a, b]), 0, 1)
    backward, changed = merge_line(Collection([b, a]), 0, 1)
    assert changed is True
    assert backward == forward


def test_merge_line_disjoint_lines_unchanged():
    lines = Collection([LineString([(0, 0), (1, 0)]), LineString([(5, 5), (6, 6)])])
    merged, changed = merge_line(lines, 0, 1)
    assert changed is False
    assert merged is lines


def test_merge_line_with_missing_member():
    lines = Collection([LineString([(0, 0), (1, 0)]), None])
    merged, changed = merge_line(lines, 0, 1)
    assert changed is False
    assert merged == lines


def test_merge_line_ignores_points():
    lines = Collection([LineString([(0, 0), (1, 0)]), Point(1, 0)])
    _, changed = merge_line(lines, 0, 1)
    assert changed is False


def test_line_merge_chains_three_pieces():
    pieces = Collection(
        [
            LineString([(0, 0), (1, 0)]),
            LineString([(1, 0), (2, 0)]),
            LineString([(2, 0), (3, 0)]),
        ]
    )
    result = line_merge(pieces)
    assert len(result) == 1
    assert result[0][0] == pieces[0][0]
    assert result[0][-1] == pieces[2][-1]


def test_line_merge_single_member_unchanged():
    lines = Collection([LineString([(100, 100), (100, 101)])])
    assert line_merge(lines) == lines


def test_line_merge_empty():
    assert line_merge(Collection()) == Collection()


def test_line_merge_keeps_unrelated_lines():
    lines = Collection([LineString([(0, 0), (1, 1)]), LineString([(5, 0), (6, 1)])])
    assert line_merge(lines) == lines