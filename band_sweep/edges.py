"""
Edge model for rectilinear polygons.

A polygon is an ordered list of (row, col) vertices. Consecutive vertices,
including the closing pair last -> first, are joined by edges that must be
either horizontal (same row) or vertical (same column).

Edges are plain tuples of two vertices: ((row, col), (row, col)).
"""

import operator
from typing import List, Optional, Sequence, Tuple

Point = Tuple[int, int]
Edge = Tuple[Point, Point]


class MalformedPolygon(ValueError):
    """Raised when the vertex list cannot describe a simple rectilinear polygon."""

    def __init__(self, message: str, edge: Optional[Edge] = None,
                 row: Optional[int] = None):
        details = []
        if edge is not None:
            details.append(f"edge {edge[0]} -> {edge[1]}")
        if row is not None:
            details.append(f"row {row}")
        if details:
            message = f"{message} ({', '.join(details)})"
        super().__init__(message)
        self.edge = edge
        self.row = row


def is_horizontal(edge: Edge) -> bool:
    return edge[0][0] == edge[1][0]


def is_vertical(edge: Edge) -> bool:
    return edge[0][1] == edge[1][1]


def goes_down(edge: Edge) -> bool:
    return edge[0][0] < edge[1][0]


def are_connected(a: Edge, b: Edge) -> bool:
    """True if one edge ends where the other starts."""
    return a[0] == b[1] or b[0] == a[1]


def top(edge: Edge) -> int:
    return min(edge[0][0], edge[1][0])


def bottom(edge: Edge) -> int:
    return max(edge[0][0], edge[1][0])


def left(edge: Edge) -> int:
    return min(edge[0][1], edge[1][1])


def right(edge: Edge) -> int:
    return max(edge[0][1], edge[1][1])


def touches_row(edge: Edge, row: int) -> bool:
    """True if one of the edge's endpoints lies on `row`."""
    return edge[0][0] == row or edge[1][0] == row


def _vertex(point) -> Point:
    row, col = point
    try:
        return (operator.index(row), operator.index(col))
    except TypeError:
        raise MalformedPolygon(
            f"vertex ({row!r}, {col!r}) does not have integer coordinates") from None


def _check_edge(edge: Edge):
    start, end = edge
    if start == end:
        raise MalformedPolygon("zero-length edge", edge=edge, row=start[0])
    if start[0] != end[0] and start[1] != end[1]:
        raise MalformedPolygon("edge is neither horizontal nor vertical",
                               edge=edge, row=start[0])


def edges(polygon: Sequence[Point]) -> List[Edge]:
    """
    Build the closed edge loop of a polygon.

    Args:
        polygon: Ordered (row, col) vertices

    Returns:
        List of edges, one per vertex, ending with the closing edge
        from the last vertex back to the first

    Raises:
        MalformedPolygon: fewer than 2 vertices, a non-integer coordinate,
            or a zero-length or diagonal edge
    """
    vertices = [_vertex(point) for point in polygon]
    if len(vertices) < 2:
        raise MalformedPolygon(f"need at least 2 vertices, got {len(vertices)}")

    loop = list(zip(vertices, vertices[1:]))
    loop.append((vertices[-1], vertices[0]))

    for edge in loop:
        _check_edge(edge)
    return loop


def validate_loop(loop: Sequence[Edge]) -> List[Edge]:
    """
    Check that an explicit edge sequence forms a closed rectilinear loop.

    Every edge must be axis-aligned and non-degenerate, start where the
    previous one ended, and the last edge must end where the first starts.
    """
    loop = [(_vertex(start), _vertex(end)) for start, end in loop]
    if len(loop) < 2:
        raise MalformedPolygon(f"need at least 2 edges, got {len(loop)}")

    prev_end = loop[-1][1]
    for edge in loop:
        _check_edge(edge)
        if edge[0] != prev_end:
            raise MalformedPolygon(f"edge does not start at {prev_end}",
                                   edge=edge, row=edge[0][0])
        prev_end = edge[1]
    return loop
