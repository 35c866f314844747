"""
Random rectilinear polygons and a flood-fill oracle for property tests.

Polygons are outlines of polyominoes (sets of grid cells) with no holes and
no cells touching only at a corner, so the outline is a single simple loop.
The outline is scaled by at least 2 so that no two edges share or abut
tiles.
"""

from hypothesis import strategies as st

NEIGHBORS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _outside_cells(cells):
    """Empty cells reachable from outside the bounding box."""
    rows = [r for r, _ in cells]
    cols = [c for _, c in cells]
    r0, r1 = min(rows) - 1, max(rows) + 1
    c0, c1 = min(cols) - 1, max(cols) + 1

    seen = {(r0, c0)}
    stack = [(r0, c0)]
    while stack:
        r, c = stack.pop()
        for dr, dc in NEIGHBORS:
            nxt = (r + dr, c + dc)
            if nxt in seen or nxt in cells:
                continue
            if r0 <= nxt[0] <= r1 and c0 <= nxt[1] <= c1:
                seen.add(nxt)
                stack.append(nxt)
    return seen, (r0, r1, c0, c1)


def repair(cells):
    """Fill holes and corner-only contacts until the polyomino is simple."""
    cells = set(cells)
    changed = True
    while changed:
        changed = False

        outside, (r0, r1, c0, c1) = _outside_cells(cells)
        for r in range(r0, r1 + 1):
            for c in range(c0, c1 + 1):
                if (r, c) not in cells and (r, c) not in outside:
                    cells.add((r, c))
                    changed = True

        for r in range(r0, r1):
            for c in range(c0, c1):
                a, b = (r, c) in cells, (r, c + 1) in cells
                d, e = (r + 1, c) in cells, (r + 1, c + 1) in cells
                if a and e and not b and not d:
                    cells.add((r, c + 1))
                    changed = True
                elif b and d and not a and not e:
                    cells.add((r, c))
                    changed = True
    return cells


def outline(cells, simplify=True):
    """
    Trace the boundary of a simple polyomino as lattice corner points.

    Cell (r, c) covers corners (r, c) .. (r + 1, c + 1). With `simplify`,
    points in the middle of straight runs are dropped.
    """
    step = {}
    for r, c in cells:
        if (r - 1, c) not in cells:
            step[(r, c)] = (r, c + 1)
        if (r, c + 1) not in cells:
            step[(r, c + 1)] = (r + 1, c + 1)
        if (r + 1, c) not in cells:
            step[(r + 1, c + 1)] = (r + 1, c)
        if (r, c - 1) not in cells:
            step[(r + 1, c)] = (r, c)

    start = min(step)
    points = [start]
    point = step[start]
    while point != start:
        points.append(point)
        point = step[point]
    assert len(points) == len(step), "outline is not a single loop"

    if not simplify:
        return points

    corners = []
    for i, cur in enumerate(points):
        prev, nxt = points[i - 1], points[(i + 1) % len(points)]
        straight = (prev[0] == cur[0] == nxt[0]) or (prev[1] == cur[1] == nxt[1])
        if not straight:
            corners.append(cur)
    return corners


@st.composite
def polyominoes(draw, max_cells=14, extent=5):
    cells = {(0, 0)}
    for _ in range(draw(st.integers(min_value=0, max_value=max_cells - 1))):
        frontier = sorted({
            (r + dr, c + dc)
            for r, c in cells
            for dr, dc in NEIGHBORS
            if 0 <= r + dr < extent and 0 <= c + dc < extent
        } - cells)
        if not frontier:
            break
        cells.add(draw(st.sampled_from(frontier)))
    return repair(cells)


@st.composite
def rectilinear_polygons(draw):
    """Vertex lists of simple rectilinear polygons, in either orientation."""
    cells = draw(polyominoes())
    points = outline(cells, simplify=draw(st.booleans()))

    scale = draw(st.integers(min_value=2, max_value=4))
    row_offset = draw(st.integers(min_value=0, max_value=3))
    col_offset = draw(st.integers(min_value=0, max_value=3))
    vertices = [(r * scale + row_offset, c * scale + col_offset) for r, c in points]

    if draw(st.booleans()):
        vertices.reverse()
    shift = draw(st.integers(min_value=0, max_value=len(vertices) - 1))
    return vertices[shift:] + vertices[:shift]


def edge_tiles(vertices):
    """All tiles covered by the polygon's edges."""
    tiles = set()
    for (r1, c1), (r2, c2) in zip(vertices, vertices[1:] + vertices[:1]):
        for r in range(min(r1, r2), max(r1, r2) + 1):
            for c in range(min(c1, c2), max(c1, c2) + 1):
                tiles.add((r, c))
    return tiles


def rasterize(vertices):
    """
    Tiles inside or on the boundary of the polygon, by flood fill.

    Returns:
        dict mapping each row to the set of columns inside the polygon
    """
    wall = edge_tiles(vertices)
    rows = [r for r, _ in wall]
    cols = [c for _, c in wall]
    r0, r1 = min(rows) - 1, max(rows) + 1
    c0, c1 = min(cols) - 1, max(cols) + 1

    outside = {(r0, c0)}
    stack = [(r0, c0)]
    while stack:
        r, c = stack.pop()
        for dr, dc in NEIGHBORS:
            nxt = (r + dr, c + dc)
            if nxt in outside or nxt in wall:
                continue
            if r0 <= nxt[0] <= r1 and c0 <= nxt[1] <= c1:
                outside.add(nxt)
                stack.append(nxt)

    inside = {}
    for r in range(r0 + 1, r1):
        inside[r] = {c for c in range(c0 + 1, c1) if (r, c) not in outside}
    return inside


def encloses(inside, a, b):
    """True if every tile of the rectangle with corners `a`, `b` is inside."""
    for r in range(min(a[0], b[0]), max(a[0], b[0]) + 1):
        row = inside.get(r, set())
        for c in range(min(a[1], b[1]), max(a[1], b[1]) + 1):
            if c not in row:
                return False
    return True


def run_columns(runs):
    """Set of columns covered by half-open runs."""
    return {c for start, end in runs for c in range(start, end)}
