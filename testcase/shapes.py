"""Hand-drawn test shapes, as closed (row, col) edge loops or vertex lists."""

SQUARE_SIMPLE = [
    ((12, 10), (12, 20)),
    ((12, 20), (22, 20)),
    ((22, 20), (22, 10)),
    ((22, 10), (12, 10)),
]

REVERSED_SQUARE = [
    ((22, 20), (12, 20)),
    ((12, 20), (12, 10)),
    ((12, 10), (22, 10)),
    ((22, 10), (22, 20)),
]

HORIZONTAL_LINE = [
    ((12, 10), (12, 20)),
    ((12, 20), (12, 10)),
]

VERTICAL_LINE = [
    ((12, 10), (22, 10)),
    ((22, 10), (12, 10)),
]

U_SHAPE = [
    ((10, 10), (10, 20)),
    ((10, 20), (20, 20)),
    ((20, 20), (20, 30)),
    ((20, 30), (10, 30)),
    ((10, 30), (10, 40)),
    ((10, 40), (30, 40)),
    ((30, 40), (30, 10)),
    ((30, 10), (10, 10)),
]

J_SHAPE = [
    ((10, 10), (10, 20)),
    ((10, 20), (30, 20)),
    ((30, 20), (30, 30)),
    ((30, 30), (20, 30)),
    ((20, 30), (20, 40)),
    ((20, 40), (40, 40)),
    ((40, 40), (40, 10)),
    ((40, 10), (10, 10)),
]

LOWER_CASE_R = [
    ((10, 10), (10, 40)),
    ((10, 40), (30, 40)),
    ((30, 40), (30, 30)),
    ((30, 30), (20, 30)),
    ((20, 30), (20, 20)),
    ((20, 20), (40, 20)),
    ((40, 20), (40, 10)),
    ((40, 10), (10, 10)),
]

# A square with red tiles at the corners and the midpoint of every side.
SQUARE_WITH_MIDPOINTS_CW = [
    ((10, 10), (10, 20)),
    ((10, 20), (10, 30)),
    ((10, 30), (20, 30)),
    ((20, 30), (30, 30)),
    ((30, 30), (30, 20)),
    ((30, 20), (30, 10)),
    ((30, 10), (20, 10)),
    ((20, 10), (10, 10)),
]

SQUARE_WITH_MIDPOINTS_CCW = [
    ((10, 10), (20, 10)),
    ((20, 10), (30, 10)),
    ((30, 10), (30, 20)),
    ((30, 20), (30, 30)),
    ((30, 30), (20, 30)),
    ((20, 30), (10, 30)),
    ((10, 30), (10, 20)),
    ((10, 20), (10, 10)),
]

# The puzzle's worked example; see default_input.txt.
EXAMPLE = [
    (1, 7), (1, 11), (7, 11), (7, 9), (5, 9), (5, 2), (3, 2), (3, 7),
]


def vertices(loop):
    """The vertex list a closed edge loop was drawn from."""
    return [start for start, _ in loop]
