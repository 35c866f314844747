"""
Edge model tests.

Usage:
    python3 -m pytest benchs/edge_model_tests.py -v
"""

import pytest

from band_sweep.edges import (
    MalformedPolygon, are_connected, bottom, edges, goes_down, is_horizontal,
    is_vertical, left, right, top, touches_row, validate_loop,
)
from testcase import shapes


def test_edges_close_the_loop():
    assert edges([(12, 10), (12, 20), (22, 20), (22, 10)]) == shapes.SQUARE_SIMPLE


def test_two_vertices_make_a_line_loop():
    assert edges([(12, 10), (22, 10)]) == shapes.VERTICAL_LINE


def test_edges_accept_lists_as_vertices():
    assert edges([[1, 7], [1, 11]]) == [((1, 7), (1, 11)), ((1, 11), (1, 7))]


def test_too_few_vertices():
    with pytest.raises(MalformedPolygon, match="at least 2 vertices"):
        edges([(1, 1)])
    with pytest.raises(MalformedPolygon):
        edges([])


def test_fractional_coordinates_are_rejected():
    # Truncating would turn two distinct vertices into a zero-length edge.
    with pytest.raises(MalformedPolygon, match="integer coordinates"):
        edges([(0.2, 0), (0.7, 0)])
    with pytest.raises(MalformedPolygon, match="integer coordinates"):
        edges([(0, 0), (0, 5), (5.0, 5), (5, 0)])


def test_validate_loop_rejects_fractional_coordinates():
    with pytest.raises(MalformedPolygon, match="integer coordinates"):
        validate_loop([((0, 0), (0, 2.5)), ((0, 2.5), (0, 0))])


def test_repeated_vertex():
    with pytest.raises(MalformedPolygon, match="zero-length") as info:
        edges([(0, 0), (0, 5), (0, 5), (5, 5), (5, 0)])
    assert info.value.edge == ((0, 5), (0, 5))
    assert info.value.row == 0


def test_diagonal_closing_edge():
    with pytest.raises(MalformedPolygon, match="neither horizontal nor vertical") as info:
        edges([(0, 0), (0, 5), (5, 5)])
    assert info.value.edge == ((5, 5), (0, 0))


def test_error_message_names_edge_and_row():
    error = MalformedPolygon("bad", edge=((1, 2), (3, 4)), row=1)
    assert str(error) == "bad (edge (1, 2) -> (3, 4), row 1)"
    assert isinstance(error, ValueError)


def test_validate_loop_accepts_closed_loop():
    assert validate_loop(shapes.U_SHAPE) == shapes.U_SHAPE


def test_validate_loop_rejects_open_loop():
    with pytest.raises(MalformedPolygon, match="does not start"):
        validate_loop(shapes.U_SHAPE[:-1])


def test_projections():
    up = ((30, 10), (10, 10))
    across = ((10, 40), (10, 10))
    assert is_vertical(up) and not is_horizontal(up)
    assert is_horizontal(across) and not is_vertical(across)
    assert not goes_down(up)
    assert (top(up), bottom(up), left(up), right(up)) == (10, 30, 10, 10)
    assert (top(across), bottom(across), left(across), right(across)) == (10, 10, 10, 40)
    assert touches_row(up, 10) and touches_row(up, 30) and not touches_row(up, 20)
    assert are_connected(across, up) is False
    assert are_connected(((10, 10), (10, 40)), up) is True
