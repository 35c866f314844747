"""
Band decomposition of a rectilinear polygon.

Sweeps the polygon's rows from top to bottom and yields Bands: ranges of
rows within which the columns lying inside the shape do not change, and
within which boundary vertices ("red tiles") appear only on the first row.
Since bands don't overlap, every red tile appears in exactly one band.

Algorithm:
1. Put every edge in a `pending` heap ordered by top row (then left column)
2. Move the edges touching the current row into an `active` heap ordered
   by bottom row (then left column)
3. Walk the active edges left to right with a two-state automaton
   (Outside / Inside) to rebuild the interior runs of the current row
4. Retire edges that end on the current row, and extend the band down to
   the row before the next edge starts or ends

Edges must not traverse the same tiles as other edges. In particular the
shape cannot be self-intersecting, and a horizontal line through the shape
can't exit it and re-enter it in the same tile.
"""

import functools
from collections import Counter
from heapq import heapify, heappop, heappush
from typing import Callable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from band_sweep.edges import (
    Edge, MalformedPolygon, Point, are_connected, bottom, edges, goes_down,
    is_horizontal, is_vertical, left, right, top, touches_row, validate_loop,
)

Run = Tuple[int, int]
Trace = Callable[[str], None]


class Band(NamedTuple):
    """
    Rows `rows[0]..rows[1]` (inclusive) sharing the same interior runs.

    `runs` are sorted, disjoint, half-open (start, end) column intervals.
    `reds` are the sorted columns of red tiles on the band's top row.
    """
    rows: Tuple[int, int]
    runs: List[Run]
    reds: List[int]


class Inside(NamedTuple):
    """
    We entered the shape at the vertical edge `entry`.

    `dangling`, if set, is the most recent edge touching the row whose
    connecting edge we haven't seen yet.
    """
    entry: Edge
    dangling: Optional[Edge] = None


# The automaton is either OUTSIDE or an Inside instance.
OUTSIDE = None


def push_run(runs: List[Run], new_run: Run):
    """Append `new_run` to `runs`, merging it into the last run if they touch."""
    if runs and new_run[0] <= runs[-1][1]:
        last_start, last_end = runs[-1]
        runs[-1] = (last_start, max(last_end, new_run[1]))
    else:
        runs.append(new_run)


def _compare_edges(a: Edge, b: Edge) -> int:
    # Left to right, verticals before and after the horizontal joining them.
    for key in (left, right):
        if key(a) != key(b):
            return -1 if key(a) < key(b) else 1

    # Two joined verticals at the same column: incoming before outgoing.
    if a[1] == b[0]:
        return -1
    if a[0] == b[1]:
        return 1
    return 0


def sort_row_edges(row_edges: Sequence[Edge]) -> List[Edge]:
    """Order the edges touching a row for the row automaton."""
    return sorted(row_edges, key=functools.cmp_to_key(_compare_edges))


def collect_reds(row_edges: Sequence[Edge], row: int) -> List[int]:
    """
    Columns of the red tiles lying on `row`.

    Every red tile is the end of one edge and the start of another, so
    each column must be reported exactly twice before deduplication.
    """
    reds = []
    for edge in row_edges:
        if is_horizontal(edge):
            if edge[0][0] != row:
                raise MalformedPolygon("horizontal edge off the band's top row",
                                       edge=edge, row=row)
            reds.append(edge[0][1])
            reds.append(edge[1][1])
        elif touches_row(edge, row):
            reds.append(edge[0][1])
    counts = Counter(reds)
    if any(count != 2 for count in counts.values()):
        raise MalformedPolygon(f"red tiles {sorted(reds)} are not each shared by two edges",
                               row=row)
    return sorted(counts)


def scan_row(row_edges: Sequence[Edge], row: int,
             trace: Optional[Trace] = None) -> Tuple[List[Run], bool]:
    """
    Rebuild the interior runs of `row` from the edges touching it.

    Args:
        row_edges: Edges touching `row`, in `sort_row_edges` order
        row: The row being scanned
        trace: Optional callback receiving diagnostic messages

    Returns:
        (runs, includes_bottom_edge) where includes_bottom_edge is True if
        some horizontal edge on `row` has the outside of the shape directly
        below it. The edge itself is inside, but the next row isn't, so the
        band must end on this row.

    Raises:
        MalformedPolygon: the edges don't describe a closed boundary here
    """
    runs: List[Run] = []
    includes_bottom_edge = False
    state = OUTSIDE

    i = 0
    while i < len(row_edges):
        edge = row_edges[i]
        i += 1
        if trace:
            trace(f"    considering edge {edge}")

        if is_vertical(edge):
            if state is OUTSIDE:
                dangling = edge if touches_row(edge, row) else None
                state = Inside(edge, dangling)

            elif state.dangling is None:
                if are_connected(edge, state.entry):
                    # Just a continuation of the edge we entered at.
                    pass
                elif touches_row(edge, row):
                    # We need to see more to tell whether we're exiting.
                    state = Inside(state.entry, edge)
                else:
                    push_run(runs, (state.entry[0][1], edge[0][1] + 1))
                    state = OUTSIDE

            else:
                if not are_connected(edge, state.dangling):
                    raise MalformedPolygon(
                        f"vertical edge not connected to dangling {state.dangling}",
                        edge=edge, row=row)
                if goes_down(edge) == goes_down(state.entry):
                    # Continues the boundary in the direction `entry` set.
                    state = Inside(state.entry)
                else:
                    push_run(runs, (state.entry[0][1], edge[0][1] + 1))
                    state = OUTSIDE

        elif state is OUTSIDE:
            # A two-edge horizontal loop is a line with nothing below it.
            if i < len(row_edges) and row_edges[i] == (edge[1], edge[0]):
                i += 1
                push_run(runs, (left(edge), right(edge) + 1))
                includes_bottom_edge = True
            else:
                raise MalformedPolygon("bare horizontal edge outside the shape",
                                       edge=edge, row=row)

        elif state.dangling is None:
            raise MalformedPolygon(f"bare horizontal edge inside {state.entry}",
                                   edge=edge, row=row)

        else:
            dangling = state.dangling
            if not are_connected(edge, dangling):
                raise MalformedPolygon(
                    f"horizontal edge not connected to dangling {dangling}",
                    edge=edge, row=row)

            if dangling == state.entry:
                # The entry edge starts or ends on this row.
                is_bottom = bottom(dangling) == row
            else:
                is_bottom = is_vertical(dangling) and top(dangling) == row
            if is_bottom:
                if trace:
                    trace(f"    bottom edge {edge}")
                includes_bottom_edge = True

            state = Inside(state.entry, edge)

        if trace:
            trace(f"    -> {state}")

    if state is not OUTSIDE:
        raise MalformedPolygon(f"row ends inside the shape, entered at {state.entry}",
                               edge=state.dangling or state.entry, row=row)
    return runs, includes_bottom_edge


class BandDecomposer:
    """
    Forward-only generator of Bands over a closed edge loop.

    Call `advance()` for the next Band (None when done), or iterate.
    """

    def __init__(self, polygon: Sequence[Point] = (), trace: Optional[Trace] = None,
                 loop: Optional[Sequence[Edge]] = None):
        if loop is None:
            loop = edges(polygon)
        self.trace = trace
        self.bands_produced = 0

        # Edges we have not reached yet, by top row.
        self.pending = [(top(e), left(e), e) for e in loop]
        heapify(self.pending)

        # Edges touching `next_row`, by bottom row. Since the shape is
        # connected this is only empty once iteration is over.
        self.active: List[Tuple[int, int, Edge]] = []

        self.next_row = self.pending[0][0]
        self._drain_pending()

    @classmethod
    def from_edges(cls, loop: Sequence[Edge], trace: Optional[Trace] = None):
        """Build a decomposer from an explicit, validated edge loop."""
        return cls(loop=validate_loop(loop), trace=trace)

    def _drain_pending(self):
        while self.pending and self.pending[0][0] == self.next_row:
            _, _, edge = heappop(self.pending)
            heappush(self.active, (bottom(edge), left(edge), edge))

    def advance(self) -> Optional[Band]:
        """Produce the next Band, or None when the sweep is finished."""
        if not self.active:
            return None

        band_top = self.next_row
        row_edges = [edge for _, _, edge in self.active]
        if self.trace:
            self.trace(f"band at row {band_top}: {len(row_edges)} edges, "
                       f"{len(self.pending)} pending")

        reds = collect_reds(row_edges, band_top)
        runs, includes_bottom_edge = scan_row(sort_row_edges(row_edges), band_top,
                                              self.trace)

        # Retire edges that end on this row.
        while self.active and self.active[0][0] == band_top:
            heappop(self.active)

        if includes_bottom_edge:
            # Red tiles only appear on a band's top row, so this is a one-row band.
            band_bottom = band_top
        else:
            events = []
            if self.active:
                events.append(self.active[0][0])
            if self.pending:
                events.append(self.pending[0][0])
            band_bottom = min(events) - 1 if events else band_top

        self.next_row = band_bottom + 1
        self._drain_pending()

        self.bands_produced += 1
        band = Band((band_top, band_bottom), runs, reds)
        if self.trace:
            self.trace(f"  {band}")
        return band

    def __iter__(self) -> Iterator[Band]:
        return self

    def __next__(self) -> Band:
        band = self.advance()
        if band is None:
            raise StopIteration
        return band


def bands(polygon: Sequence[Point], trace: Optional[Trace] = None) -> Iterator[Band]:
    """Yield the Bands of a polygon from top to bottom."""
    yield from BandDecomposer(polygon, trace=trace)
