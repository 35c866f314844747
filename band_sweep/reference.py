"""
Brute-force reference for the largest enclosed rectangle.

Tries every pair of polygon vertices as opposite corners and validates
the rectangle directly against every edge. O(V^3) overall, but simple
enough to trust, so it serves as the cross-check for the band sweep.

Coordinates are scaled by 4 so a rectangle and its copy shrunk by one
tile on every side both sit on integer coordinates:
- CHECK 1: No polygon vertex strictly inside the rectangle
- CHECK 2: No polygon edge crosses the rectangle shrunk by one tile
- CHECK 3: Every corner has an odd ray-casting crossing count
- CHECK 4: ...or lies on the polygon boundary

Edges are assumed to be at least two tiles apart from non-adjacent
parallel edges, as in puzzle inputs.
"""

from typing import List, Sequence

from band_sweep.edges import Point


class ReferenceFinder:
    """Pairwise rectangle validation over a rectilinear polygon."""

    # Coordinate scaling factor: one tile is SCALE_FACTOR units wide
    SCALE_FACTOR = 4

    def __init__(self, polygon: Sequence[Point] = ()):
        self.vertices: List[Point] = []
        self.max_area = 0
        self.rectangles_tested = 0
        self.rectangles_pruned = 0
        self.valid_rectangles_found = 0
        for row, col in polygon:
            self.add_vertex(row, col)

    def add_vertex(self, row: int, col: int):
        """Add a vertex to the polygon (coordinates are scaled internally)."""
        self.vertices.append((row * self.SCALE_FACTOR, col * self.SCALE_FACTOR))

    def _edges(self):
        # Current and next vertex, wrapping around
        return zip(self.vertices, self.vertices[1:] + self.vertices[:1])

    def contains_rectangle(self, a: Point, b: Point) -> bool:
        """True if the rectangle with unscaled corners `a` and `b` is enclosed."""
        scale = self.SCALE_FACTOR
        return self._validate_rectangle(
            min(a[0], b[0]) * scale, min(a[1], b[1]) * scale,
            max(a[0], b[0]) * scale, max(a[1], b[1]) * scale)

    def find_max_rectangle(self) -> int:
        """
        Find the largest enclosed rectangle with vertices at opposite corners.

        Degenerate pairs (sharing a row or column) are skipped.

        Returns:
            Maximum rectangle area in tiles
        """
        self.max_area = 0
        self.rectangles_tested = 0
        self.rectangles_pruned = 0
        self.valid_rectangles_found = 0

        scale = self.SCALE_FACTOR
        count = len(self.vertices)
        for i in range(count):
            for j in range(i + 1, count):
                (r1, c1), (r2, c2) = self.vertices[i], self.vertices[j]
                top, bottom = min(r1, r2), max(r1, r2)
                left, right = min(c1, c2), max(c1, c2)
                if top == bottom or left == right:
                    continue

                # Tile area: both corner tiles are included
                candidate_area = (bottom - top + scale) * (right - left + scale)

                # Area pruning: skip if it can't beat the current max
                if candidate_area <= self.max_area:
                    self.rectangles_pruned += 1
                    continue

                self.rectangles_tested += 1
                if self._validate_rectangle(top, left, bottom, right):
                    self.max_area = candidate_area
                    self.valid_rectangles_found += 1

        return self.max_area // (scale * scale)

    def _validate_rectangle(self, top: int, left: int, bottom: int, right: int) -> bool:
        """Validate a scaled rectangle with the four checks."""
        scale = self.SCALE_FACTOR
        inner = (top + scale, left + scale, bottom - scale, right - scale)

        for start, end in self._edges():
            # CHECK 1: vertex strictly inside
            row, col = start
            if top < row < bottom and left < col < right:
                return False

            # CHECK 2: edge crosses the shrunken rectangle
            if self._edge_intersects_rect(start, end, *inner):
                return False

        # CHECK 3 & 4 on all four corners
        for corner in ((top, left), (top, right), (bottom, left), (bottom, right)):
            if self._point_on_polygon_boundary(corner):
                continue
            if self._ray_cast_crossings(corner) % 2 == 0:
                return False

        return True

    @staticmethod
    def _edge_intersects_rect(start: Point, end: Point, top: int, left: int,
                              bottom: int, right: int) -> bool:
        r1, r2 = sorted((start[0], end[0]))
        c1, c2 = sorted((start[1], end[1]))

        # Horizontal edge crossing the rectangle's rows
        if r1 == r2 and top < r1 < bottom:
            if not (c2 <= left or c1 >= right):
                return True

        # Vertical edge crossing the rectangle's columns
        if c1 == c2 and left < c1 < right:
            if not (r2 <= top or r1 >= bottom):
                return True

        return False

    def _point_on_polygon_boundary(self, point: Point) -> bool:
        row, col = point
        for (r1, c1), (r2, c2) in self._edges():
            if r1 == r2 and row == r1 and min(c1, c2) <= col <= max(c1, c2):
                return True
            if c1 == c2 and col == c1 and min(r1, r2) <= row <= max(r1, r2):
                return True
        return False

    def _ray_cast_crossings(self, point: Point) -> int:
        """
        Count vertical edges crossed by a ray from `point` towards column 0.

        Rows are half-open, [top, bottom), so a ray through a vertex is
        counted once.
        """
        row, col = point
        crossings = 0
        for (r1, c1), (r2, c2) in self._edges():
            if r1 == r2:
                continue
            if c1 <= col and min(r1, r2) <= row < max(r1, r2):
                crossings += 1
        return crossings

    def get_statistics(self) -> dict:
        """Return algorithm statistics."""
        scale = self.SCALE_FACTOR
        return {
            'vertices': len(self.vertices),
            'rectangles_tested': self.rectangles_tested,
            'rectangles_pruned': self.rectangles_pruned,
            'valid_rectangles': self.valid_rectangles_found,
            'max_area': self.max_area // (scale * scale),
        }
