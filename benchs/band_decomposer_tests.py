"""
Band decomposition tests on hand-drawn shapes.

Each shape is given as a closed edge loop; the expected bands were worked
out on paper, row by row.

Usage:
    python3 -m pytest benchs/band_decomposer_tests.py -v
"""

import pytest

from band_sweep.bands import (
    Band, BandDecomposer, Inside, bands, collect_reds, push_run, scan_row,
    sort_row_edges,
)
from band_sweep.edges import MalformedPolygon
from testcase import shapes


def decompose(loop):
    return list(BandDecomposer.from_edges(loop))


def test_square_simple():
    assert decompose(shapes.SQUARE_SIMPLE) == [
        Band((12, 21), [(10, 21)], [10, 20]),
        Band((22, 22), [(10, 21)], [10, 20]),
    ]


def test_reversed_square():
    assert decompose(shapes.REVERSED_SQUARE) == [
        Band((12, 21), [(10, 21)], [10, 20]),
        Band((22, 22), [(10, 21)], [10, 20]),
    ]


def test_square_from_vertices():
    vertices = [(12, 10), (12, 20), (22, 20), (22, 10)]
    assert list(bands(vertices)) == decompose(shapes.SQUARE_SIMPLE)


def test_horizontal_line():
    assert decompose(shapes.HORIZONTAL_LINE) == [
        Band((12, 12), [(10, 21)], [10, 20]),
    ]


def test_vertical_line():
    assert decompose(shapes.VERTICAL_LINE) == [
        Band((12, 21), [(10, 11)], [10]),
        Band((22, 22), [(10, 11)], [10]),
    ]


def test_u_shape():
    assert decompose(shapes.U_SHAPE) == [
        Band((10, 19), [(10, 21), (30, 41)], [10, 20, 30, 40]),
        Band((20, 29), [(10, 41)], [20, 30]),
        Band((30, 30), [(10, 41)], [10, 40]),
    ]


def test_j_shape():
    assert decompose(shapes.J_SHAPE) == [
        Band((10, 19), [(10, 21)], [10, 20]),
        Band((20, 29), [(10, 21), (30, 41)], [30, 40]),
        Band((30, 39), [(10, 41)], [20, 30]),
        Band((40, 40), [(10, 41)], [10, 40]),
    ]


def test_lower_case_r_shape():
    assert decompose(shapes.LOWER_CASE_R) == [
        Band((10, 19), [(10, 41)], [10, 40]),
        # The row with the two inner corners is still a single run,
        # the full width of the figure.
        Band((20, 20), [(10, 41)], [20, 30]),
        # Two disjoint runs begin below the inner corners.
        Band((21, 29), [(10, 21), (30, 41)], []),
        # The row that ends the r's right side is a one-row band too.
        Band((30, 30), [(10, 21), (30, 41)], [30, 40]),
        Band((31, 39), [(10, 21)], []),
        Band((40, 40), [(10, 21)], [10, 20]),
    ]


def test_square_with_midpoints_clockwise():
    assert decompose(shapes.SQUARE_WITH_MIDPOINTS_CW) == [
        Band((10, 19), [(10, 31)], [10, 20, 30]),
        Band((20, 29), [(10, 31)], [10, 30]),
        Band((30, 30), [(10, 31)], [10, 20, 30]),
    ]


def test_square_with_midpoints_counterclockwise():
    assert decompose(shapes.SQUARE_WITH_MIDPOINTS_CCW) == [
        Band((10, 19), [(10, 31)], [10, 20, 30]),
        Band((20, 29), [(10, 31)], [10, 30]),
        Band((30, 30), [(10, 31)], [10, 20, 30]),
    ]


def test_example():
    assert list(bands(shapes.EXAMPLE)) == [
        Band((1, 2), [(7, 12)], [7, 11]),
        Band((3, 4), [(2, 12)], [2, 7]),
        Band((5, 5), [(2, 12)], [2, 9]),
        Band((6, 6), [(9, 12)], []),
        Band((7, 7), [(9, 12)], [9, 11]),
    ]


def test_advance_returns_none_when_done():
    decomposer = BandDecomposer.from_edges(shapes.SQUARE_SIMPLE)
    assert decomposer.advance() is not None
    assert decomposer.advance() is not None
    assert decomposer.advance() is None
    assert decomposer.advance() is None
    assert decomposer.bands_produced == 2


def test_trace_receives_messages():
    messages = []
    list(bands(shapes.EXAMPLE, trace=messages.append))
    assert any("bottom edge" in message for message in messages)
    assert messages[0].startswith("band at row 1")


# Row automaton

def test_push_run_merges_touching_runs():
    runs = []
    push_run(runs, (10, 21))
    push_run(runs, (21, 30))
    push_run(runs, (35, 40))
    push_run(runs, (38, 45))
    assert runs == [(10, 30), (35, 45)]


def test_sort_row_edges_puts_horizontal_between_verticals():
    left = ((22, 10), (12, 10))
    top = ((12, 10), (12, 20))
    right = ((12, 20), (22, 20))
    assert sort_row_edges([right, top, left]) == [left, top, right]


def test_sort_row_edges_incoming_before_outgoing():
    incoming = ((30, 10), (20, 10))
    outgoing = ((20, 10), (10, 10))
    assert sort_row_edges([outgoing, incoming]) == [incoming, outgoing]


def test_scan_row_passing_verticals():
    runs, bottom = scan_row([((0, 5), (10, 5)), ((10, 9), (0, 9))], 4)
    assert runs == [(5, 10)]
    assert not bottom


def test_scan_row_detects_bottom_edge():
    row_edges = sort_row_edges([e for e in shapes.SQUARE_SIMPLE if 22 in (e[0][0], e[1][0])])
    runs, bottom = scan_row(row_edges, 22)
    assert runs == [(10, 21)]
    assert bottom


def test_scan_row_top_edge_is_not_bottom():
    row_edges = sort_row_edges([e for e in shapes.SQUARE_SIMPLE if 12 in (e[0][0], e[1][0])])
    runs, bottom = scan_row(row_edges, 12)
    assert runs == [(10, 21)]
    assert not bottom


def test_inside_state_defaults_to_no_dangling_edge():
    entry = ((0, 5), (10, 5))
    assert Inside(entry) == Inside(entry, None)


# Malformed input

def test_scan_row_ending_inside():
    with pytest.raises(MalformedPolygon, match="row ends inside"):
        scan_row([((0, 5), (10, 5))], 5)


def test_scan_row_bare_horizontal_outside():
    with pytest.raises(MalformedPolygon, match="bare horizontal edge outside") as info:
        scan_row([((5, 0), (5, 10))], 5)
    assert info.value.edge == ((5, 0), (5, 10))
    assert info.value.row == 5


def test_scan_row_bare_horizontal_inside():
    with pytest.raises(MalformedPolygon, match="bare horizontal edge inside"):
        scan_row([((0, 5), (10, 5)), ((5, 7), (5, 9))], 5)


def test_collect_reds_requires_pairs():
    with pytest.raises(MalformedPolygon, match="red tiles"):
        collect_reds([((0, 0), (10, 0))], 0)


def test_collect_reds_requires_each_column_twice():
    # Column 5 three times and column 7 once: the total count is still even.
    row_edges = [((0, 5), (10, 5)), ((0, 5), (20, 5)), ((0, 5), (0, 7))]
    with pytest.raises(MalformedPolygon, match="not each shared by two edges"):
        collect_reds(row_edges, 0)


def test_collect_reds_deduplicates_columns():
    row_edges = [((10, 5), (0, 5)), ((0, 5), (0, 7)), ((0, 7), (10, 7))]
    assert collect_reds(row_edges, 0) == [5, 7]


def test_self_intersecting_polygon():
    crossing = [(0, 0), (0, 10), (10, 10), (10, 20), (5, 20), (5, 0)]
    with pytest.raises(MalformedPolygon) as info:
        list(bands(crossing))
    assert info.value.row == 5


def test_disconnected_loop():
    loop = [((0, 0), (0, 10)), ((0, 10), (10, 10)), ((10, 0), (0, 0))]
    with pytest.raises(MalformedPolygon, match="does not start"):
        BandDecomposer.from_edges(loop)


def test_diagonal_edge_in_loop():
    with pytest.raises(MalformedPolygon, match="neither horizontal nor vertical"):
        BandDecomposer.from_edges([((0, 0), (5, 5)), ((5, 5), (0, 0))])
