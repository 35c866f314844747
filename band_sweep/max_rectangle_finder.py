#!/usr/bin/env python3
"""
Largest enclosed rectangle in a rectilinear polygon, via band sweep.

Algorithm:
1. Input polygon vertices ("red tiles") as row,col pairs
2. Decompose the polygon into bands of rows with constant interior runs
3. Track which red tiles stay visible from band to band
4. Every red tile visible from a newly reached red tile spans an
   enclosed rectangle; keep the largest area

Areas count tiles, corners included: (|dr| + 1) * (|dc| + 1).
"""

import sys
import time
from typing import List, Optional, Sequence, Tuple

from band_sweep.bands import BandDecomposer, Trace
from band_sweep.edges import MalformedPolygon, Point
from band_sweep.reference import ReferenceFinder
from band_sweep.visibility import VisibilityTracker, area, is_degenerate


class MaxRectangleFinder:
    """Band-sweep search for the largest enclosed rectangle."""

    def __init__(self, trace: Optional[Trace] = None):
        self.vertices: List[Point] = []
        self.trace = trace
        self.max_area = 0
        self.best: Optional[Tuple[Point, Point]] = None
        # Same, over pairs that don't share a row or column
        self.max_proper_area = 0
        self.best_proper: Optional[Tuple[Point, Point]] = None
        self.bands = 0
        self.candidates = 0
        self.peak_active = 0

    def add_vertex(self, row: int, col: int):
        """Add a vertex to the polygon."""
        self.vertices.append((row, col))

    def find_max_rectangle(self) -> int:
        """
        Find the maximum rectangle area within the polygon.

        Returns:
            Largest area over all enclosed red tile pairs, 0 if none

        Raises:
            MalformedPolygon: the vertices don't form a simple rectilinear loop
        """
        self.max_area = 0
        self.best = None
        self.max_proper_area = 0
        self.best_proper = None

        decomposer = BandDecomposer(self.vertices, trace=self.trace)
        tracker = VisibilityTracker(trace=self.trace)
        for band in decomposer:
            for a, b in tracker.absorb(band):
                candidate_area = area(a, b)
                if candidate_area > self.max_area:
                    self.max_area = candidate_area
                    self.best = (a, b)
                if candidate_area > self.max_proper_area and not is_degenerate(a, b):
                    self.max_proper_area = candidate_area
                    self.best_proper = (a, b)

        self.bands = decomposer.bands_produced
        self.candidates = tracker.candidates_emitted
        self.peak_active = tracker.peak_active
        return self.max_area

    def get_statistics(self) -> dict:
        """Return algorithm statistics."""
        return {
            'vertices': len(self.vertices),
            'bands': self.bands,
            'candidates': self.candidates,
            'peak_active': self.peak_active,
            'max_area': self.max_area,
            'best': self.best,
            'max_proper_area': self.max_proper_area,
            'best_proper': self.best_proper,
        }


def largest_any_rectangle(vertices: Sequence[Point]) -> int:
    """Largest rectangle with red tiles at opposite corners, enclosed or not."""
    best = 0
    for i, a in enumerate(vertices):
        for b in vertices[:i]:
            best = max(best, area(a, b))
    return best


def parse_polygon_text(text: str) -> List[Point]:
    """
    Parse polygon from text format.

    Format: "row,col\\nrow,col\\n...\\n\\n" (empty line terminates)

    Args:
        text: Text with row,col coordinates per line

    Returns:
        List of (row, col) vertex tuples
    """
    vertices = []
    started = False
    for line in text.splitlines():
        line = line.strip()
        if not line:
            if started:
                break  # Empty line terminates polygon
            continue
        if ',' in line:
            row, col = line.split(',')
            vertices.append((int(row), int(col)))
            started = True
    return vertices


def _stderr_trace(message: str):
    print(message, file=sys.stderr)


def main(argv=None):
    """Command-line interface for MaxRectangleFinder."""
    import argparse

    parser = argparse.ArgumentParser(
        description='Find maximum rectangle within rectilinear polygon'
    )
    parser.add_argument('input_file', nargs='?', type=argparse.FileType('r'),
                        default=sys.stdin,
                        help='Input file with polygon vertices (default: stdin)')
    parser.add_argument('--part1', action='store_true',
                        help='Also print the largest rectangle ignoring the polygon')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Print algorithm statistics')
    parser.add_argument('--trace', action='store_true',
                        help='Trace the band sweep on stderr')
    parser.add_argument('--compare', action='store_true',
                        help='Cross-check against the brute-force reference')
    args = parser.parse_args(argv)

    # Read input
    input_text = args.input_file.read()
    try:
        vertices = parse_polygon_text(input_text)
    except ValueError as e:
        print(f"Error: bad coordinate line: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Processing polygon with {len(vertices)} vertices", file=sys.stderr)

    finder = MaxRectangleFinder(trace=_stderr_trace if args.trace else None)
    for row, col in vertices:
        finder.add_vertex(row, col)

    start_time = time.time()
    try:
        max_area = finder.find_max_rectangle()
    except MalformedPolygon as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    elapsed = time.time() - start_time

    # Output result
    if args.part1:
        print(largest_any_rectangle(vertices))
    print(max_area)

    if args.verbose:
        stats = finder.get_statistics()
        print("\nStatistics:", file=sys.stderr)
        print(f"  Vertices: {stats['vertices']}", file=sys.stderr)
        print(f"  Bands: {stats['bands']}", file=sys.stderr)
        print(f"  Candidates: {stats['candidates']}", file=sys.stderr)
        print(f"  Peak active: {stats['peak_active']}", file=sys.stderr)
        print(f"  Best: {stats['best']}", file=sys.stderr)
        print(f"  Max area: {stats['max_area']}", file=sys.stderr)
        print(f"  Time: {elapsed:.3f}s", file=sys.stderr)

    if args.compare:
        reference = ReferenceFinder(vertices)
        ref_area = reference.find_max_rectangle()
        # The reference skips rectangles one tile thick.
        if finder.max_proper_area != max_area:
            print(f"  Largest rectangle {finder.best} is a line, comparing "
                  f"{finder.max_proper_area} instead", file=sys.stderr)
        if ref_area == finder.max_proper_area:
            print(f"✓ Results match: {ref_area}", file=sys.stderr)
        else:
            print("✗ Results differ:", file=sys.stderr)
            print(f"    Band sweep: {finder.max_proper_area}", file=sys.stderr)
            print(f"    Reference:  {ref_area}", file=sys.stderr)
            return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
