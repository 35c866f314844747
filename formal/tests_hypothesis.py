"""
Property-based tests for the band sweep using Hypothesis.

Random simple rectilinear polygons are decomposed into bands and searched
for enclosed rectangles; every result is checked against a flood-filled
rasterization of the same polygon and against the brute-force reference.
"""

import itertools

import pytest
from hypothesis import given, settings, HealthCheck

from band_sweep.bands import bands
from band_sweep.reference import ReferenceFinder
from band_sweep.visibility import area, contained_rectangles, is_degenerate
from formal.shapes import (
    encloses, outline, rasterize, rectilinear_polygons, repair, run_columns,
)

SETTINGS = dict(max_examples=150, deadline=None,
                suppress_health_check=[HealthCheck.too_slow])


def unordered(pairs):
    return {tuple(sorted(pair)) for pair in pairs}


# Property 1: Bands partition the rows of the polygon
@given(rectilinear_polygons())
@settings(**SETTINGS)
def test_bands_partition_rows(vertices):
    """
    Property: band row intervals are contiguous, strictly increasing and
    cover every row from the top edge to the bottom edge exactly once.
    """
    result = list(bands(vertices))
    rows = [r for r, _ in vertices]

    assert result[0].rows[0] == min(rows)
    assert result[-1].rows[1] == max(rows)
    for band in result:
        assert band.rows[0] <= band.rows[1], f"Empty band: {band}"
    for upper, lower in zip(result, result[1:]):
        assert lower.rows[0] == upper.rows[1] + 1, \
            f"Bands not contiguous: {upper.rows} then {lower.rows}"


# Property 1b: Bands are maximal
@given(rectilinear_polygons())
@settings(**SETTINGS)
def test_bands_are_maximal(vertices):
    """
    Property: a band starts only where something changes, so it either has
    red tiles on its top row or different runs from the band above it.
    """
    result = list(bands(vertices))
    for upper, lower in zip(result, result[1:]):
        assert lower.reds or lower.runs != upper.runs, \
            f"Band {lower} could have been merged into {upper}"


# Property 2: Every row of a band has exactly the band's runs inside
@given(rectilinear_polygons())
@settings(**SETTINGS)
def test_runs_match_flood_fill(vertices):
    """
    Property: for every row in a band, the columns inside the polygon are
    exactly the columns covered by the band's runs.
    """
    inside = rasterize(vertices)
    for band in bands(vertices):
        covered = run_columns(band.runs)
        for row in range(band.rows[0], band.rows[1] + 1):
            assert inside[row] == covered, \
                f"Row {row} of {band} differs: flood fill {sorted(inside[row])}"


# Property 3: Runs are sorted, disjoint and non-empty
@given(rectilinear_polygons())
@settings(**SETTINGS)
def test_runs_are_disjoint(vertices):
    for band in bands(vertices):
        for start, end in band.runs:
            assert start < end
        for (_, end), (start, _) in zip(band.runs, band.runs[1:]):
            assert end < start, f"Runs overlap or touch: {band.runs}"


# Property 4: Red tiles sit exactly on the top rows of bands
@given(rectilinear_polygons())
@settings(**SETTINGS)
def test_reds_on_band_tops(vertices):
    """
    Property: each band's reds are the columns of the vertices on its top
    row, and no vertex lies below the top row of its band.
    """
    by_row = {}
    for row, col in vertices:
        by_row.setdefault(row, set()).add(col)

    tops = set()
    for band in bands(vertices):
        tops.add(band.rows[0])
        assert band.reds == sorted(by_row.get(band.rows[0], ()))

    assert set(by_row) <= tops


# Property 5: Every emitted rectangle is enclosed
@given(rectilinear_polygons())
@settings(**SETTINGS)
def test_emitted_rectangles_are_enclosed(vertices):
    inside = rasterize(vertices)
    for a, b in contained_rectangles(vertices):
        assert encloses(inside, a, b), f"Rectangle {a} .. {b} leaves the polygon"


# Property 6: Every enclosed vertex pair is emitted, exactly once
@given(rectilinear_polygons())
@settings(**SETTINGS)
def test_all_enclosed_pairs_emitted(vertices):
    """
    Property: the emitted pairs are exactly the vertex pairs whose
    rectangle lies inside the polygon.
    """
    inside = rasterize(vertices)
    expected = unordered(
        (a, b) for a, b in itertools.combinations(vertices, 2) if encloses(inside, a, b)
    )

    emitted = list(contained_rectangles(vertices))
    assert len(emitted) == len(unordered(emitted)), "Pair emitted twice"
    assert unordered(emitted) == expected


# Property 7: Maximum area agrees with exhaustive search
@given(rectilinear_polygons())
@settings(**SETTINGS)
def test_max_area_matches_brute_force(vertices):
    inside = rasterize(vertices)
    expected = max(
        (area(a, b) for a, b in itertools.combinations(vertices, 2)
         if encloses(inside, a, b)),
        default=0,
    )
    actual = max((area(a, b) for a, b in contained_rectangles(vertices)), default=0)
    assert actual == expected


# Property 8: Maximum proper rectangle agrees with the pairwise reference
@given(rectilinear_polygons())
@settings(**SETTINGS)
def test_max_area_matches_reference(vertices):
    actual = max(
        (area(a, b) for a, b in contained_rectangles(vertices) if not is_degenerate(a, b)),
        default=0,
    )
    assert actual == ReferenceFinder(vertices).find_max_rectangle()


# Property 9: Orientation and starting vertex don't matter
@given(rectilinear_polygons())
@settings(**SETTINGS)
def test_orientation_independence(vertices):
    forward = list(bands(vertices))
    backward = list(bands(list(reversed(vertices))))
    assert forward == backward
    assert unordered(contained_rectangles(vertices)) == \
        unordered(contained_rectangles(list(reversed(vertices))))


# Concrete checks of the polygon generator itself
def test_repair_fills_holes():
    ring = {(r, c) for r in range(3) for c in range(3)} - {(1, 1)}
    assert (1, 1) in repair(ring)


def test_repair_joins_corner_contacts():
    cells = repair({(0, 0), (1, 1)})
    assert len(cells) == 3


def test_outline_of_single_cell():
    assert outline({(0, 0)}) == [(0, 0), (0, 1), (1, 1), (1, 0)]


def test_outline_keeps_midpoints():
    points = outline({(0, 0), (0, 1)}, simplify=False)
    assert points == [(0, 0), (0, 1), (0, 2), (1, 2), (1, 1), (1, 0)]


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short", "--hypothesis-show-statistics"])
