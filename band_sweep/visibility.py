"""
Enclosed rectangle enumeration over a stream of Bands.

A red tile stays "active" while some later band could still form a
rectangle enclosed by the shape using that tile as a corner. Each active
tile carries the range of columns within which it is still visible: the
columns a downward edge from the tile could reach while staying inside
every band seen since the tile appeared.

For each band:
1. Cull: narrow every active tile's visible range to the run containing
   its column, dropping tiles whose column left the shape or whose range
   became empty
2. Absorb: make an active tile for every red in the band, visible across
   the run that contains it
3. Emit: pair every older tile with every new tile in its visible range,
   and the new tiles among themselves
4. Merge the new tiles into the active list, sorted by column
"""

from typing import Callable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from band_sweep.bands import Band, BandDecomposer, Run, Trace
from band_sweep.edges import MalformedPolygon, Point

Pair = Tuple[Point, Point]


class ActiveVertex(NamedTuple):
    position: Point
    visible: Run


def intersection(a: Run, b: Run) -> Optional[Run]:
    candidate = (max(a[0], b[0]), min(a[1], b[1]))
    return candidate if candidate[0] < candidate[1] else None


def sees(vertex: ActiveVertex, col: int) -> bool:
    start, end = vertex.visible
    return start <= col < end


def area(a: Point, b: Point) -> int:
    """Tile count of the rectangle with opposite corners `a` and `b`."""
    return (abs(a[0] - b[0]) + 1) * (abs(a[1] - b[1]) + 1)


def is_degenerate(a: Point, b: Point) -> bool:
    """True for pairs sharing a row or column (a line, not a rectangle)."""
    return a[0] == b[0] or a[1] == b[1]


def cull(active: Sequence[ActiveVertex], runs: Sequence[Run]) -> List[ActiveVertex]:
    """Constrain active tiles to `runs`, dropping those no longer visible."""
    kept = []
    j = 0
    for vertex in active:
        col = vertex.position[1]

        # Both lists are sorted, so runs left of this tile are done with.
        while j < len(runs) and runs[j][1] <= col:
            j += 1
        if j == len(runs):
            break

        # The tile's own column must extend into the band, even if its
        # visible range still overlaps some run.
        run = runs[j]
        if col < run[0]:
            continue

        remaining = intersection(vertex.visible, run)
        if remaining is not None:
            kept.append(vertex._replace(visible=remaining))
    return kept


def new_vertices(band: Band) -> List[ActiveVertex]:
    """Active tiles for the band's reds, each visible across its run."""
    row = band.rows[0]
    fresh = []
    j = 0
    for col in band.reds:
        while j < len(band.runs) and band.runs[j][1] <= col:
            j += 1
        if j == len(band.runs) or col < band.runs[j][0]:
            raise MalformedPolygon(f"red tile at column {col} lies in no run of {band}",
                                   row=row)
        fresh.append(ActiveVertex((row, col), band.runs[j]))
    return fresh


class VisibilityTracker:
    """Consumes Bands in order and reports enclosed red tile pairs."""

    def __init__(self, trace: Optional[Trace] = None):
        self.trace = trace
        self.active: Tuple[ActiveVertex, ...] = ()
        self.candidates_emitted = 0
        self.peak_active = 0

    def absorb(self, band: Band) -> List[Pair]:
        """
        Advance past `band` and return the pairs it completes.

        Each pair is (older, newer); within the band, left before right.
        """
        culled = cull(self.active, band.runs)
        fresh = new_vertices(band)
        if self.trace:
            self.trace(f"culled active: {culled}")
            self.trace(f"new active: {fresh}")

        pairs = []
        for a in culled:
            for b in fresh:
                # The upper tile may have been constrained by earlier bands,
                # so visibility only has to hold downward.
                assert not sees(a, b.position[1]) or sees(b, a.position[1])
                if sees(a, b.position[1]):
                    pairs.append((a.position, b.position))

        for i, a in enumerate(fresh):
            for b in fresh[i + 1:]:
                assert sees(a, b.position[1]) == sees(b, a.position[1])
                if sees(a, b.position[1]):
                    pairs.append((a.position, b.position))

        if self.trace:
            for a, b in pairs:
                self.trace(f"    rectangle {a} .. {b} is contained")

        self.active = tuple(sorted(culled + fresh, key=lambda v: v.position[1]))
        self.candidates_emitted += len(pairs)
        self.peak_active = max(self.peak_active, len(self.active))
        return pairs


def for_each_contained_rectangle(polygon: Sequence[Point],
                                 body: Callable[[Point, Point], None],
                                 trace: Optional[Trace] = None):
    """Call `body(a, b)` for every pair of red tiles spanning an enclosed rectangle."""
    tracker = VisibilityTracker(trace=trace)
    for band in BandDecomposer(polygon, trace=trace):
        for a, b in tracker.absorb(band):
            body(a, b)


def contained_rectangles(polygon: Sequence[Point],
                         trace: Optional[Trace] = None) -> Iterator[Pair]:
    """Yield every enclosed pair, band by band."""
    tracker = VisibilityTracker(trace=trace)
    for band in BandDecomposer(polygon, trace=trace):
        yield from tracker.absorb(band)


def largest_contained_rectangle(polygon: Sequence[Point],
                                trace: Optional[Trace] = None) -> int:
    """Area of the largest enclosed rectangle with red tiles at opposite corners."""
    largest = 0
    for a, b in contained_rectangles(polygon, trace=trace):
        largest = max(largest, area(a, b))
    return largest
