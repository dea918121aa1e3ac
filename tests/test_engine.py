"""End-to-end tests for overlap management."""

import copy
import math
from pathlib import Path

import pytest

from transit_overlap import manage_overlapping_lines
from transit_overlap.geodata import LineFeature, LineFeatureCollection, read_feature_collection
from transit_overlap.layout.constants import OFFSET_STEP
from transit_overlap.layout.overlap import build_overlap_groups, find_overlapping_lines
from transit_overlap.layout.overlap.offsets import length_to_degrees

FIXTURES = Path(__file__).parent / "fixtures"
D = length_to_degrees(OFFSET_STEP)


def _collection(*lines):
    return LineFeatureCollection(
        features=[LineFeature(coordinates=[tuple(map(float, c)) for c in line])
                  for line in lines]
    )


def _coords(collection):
    return [list(f.coordinates) for f in collection]


def test_disjoint_lines_untouched():
    collection = _collection([(0, 0), (1, 0), (2, 0)], [(0, 1), (1, 1), (2, 1)])
    before = _coords(collection)
    manage_overlapping_lines(collection)
    assert _coords(collection) == before


def test_single_touching_vertex_untouched():
    collection = _collection([(0, 0), (1, 0)], [(1, 0), (1, 1)])
    before = _coords(collection)
    manage_overlapping_lines(collection)
    assert _coords(collection) == before


def test_coincident_lines_fan_out_by_one_step():
    line = [(0, 0), (1, 0), (2, 0)]
    collection = _collection(line, line)
    manage_overlapping_lines(collection)
    assert collection[0].coordinates == [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]
    assert collection[1].coordinates == [(0.0, -D), (1.0, -D), (2.0, -D)]


def test_returns_same_collection_and_features():
    collection = _collection([(0, 0), (1, 0)], [(0, 0), (1, 0)])
    features = list(collection.features)
    result = manage_overlapping_lines(collection)
    assert result is collection
    assert all(a is b for a, b in zip(result.features, features))


def test_chained_overlaps():
    """A-B share one segment, B-C the next one; each pair offsets one member."""
    collection = _collection(
        [(0, 0), (1, 0), (2, 0)],
        [(1, 0), (2, 0), (3, 0)],
        [(2, 0), (3, 0), (4, 0)],
    )
    groups = build_overlap_groups(find_overlapping_lines(collection), collection)
    assert [(g.segment.coordinates, g.member_lines) for g in groups] == [
        (((1.0, 0.0), (2.0, 0.0)), [0, 1]),
        (((2.0, 0.0), (3.0, 0.0)), [1, 2]),
    ]

    manage_overlapping_lines(collection)
    assert collection[0].coordinates == [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]
    assert collection[1].coordinates == [(1.0, -D), (2.0, -D), (3.0, 0.0)]
    assert collection[2].coordinates == [(2.0, -D), (3.0, -D), (4.0, 0.0)]


@pytest.mark.parametrize("lines", [
    [[(0, 0), (1, 0), (2, 0)], [(0, 0), (1, 0), (2, 0)]],
    [[(0, 0), (1, 0), (2, 0)], [(1, 0), (2, 0), (3, 0)], [(2, 0), (3, 0), (4, 0)]],
])
def test_second_run_is_noop(lines):
    collection = _collection(*lines)
    manage_overlapping_lines(collection)
    once = _coords(collection)
    manage_overlapping_lines(collection)
    assert _coords(collection) == once


def test_coordinate_counts_preserved():
    collection = read_feature_collection(FIXTURES / "downtown.geojson")
    before = collection.coordinate_counts()
    manage_overlapping_lines(collection, match_reversed=True)
    assert collection.coordinate_counts() == before


def test_downtown_shared_corridor():
    collection = read_feature_collection(FIXTURES / "downtown.geojson")
    original = copy.deepcopy(collection)
    manage_overlapping_lines(collection)

    # 24 and 55 share three vertices; 24 keeps them, 55 moves
    assert collection[0].coordinates == original[0].coordinates
    moved = collection[1].coordinates
    assert moved[0] == original[1].coordinates[0]
    assert moved[4] == original[1].coordinates[4]
    assert all(moved[k] != original[1].coordinates[k] for k in (1, 2, 3))
    # 80 runs the corridor backwards and is not an overlap by default
    assert collection[2].coordinates == original[2].coordinates
    assert collection[3].coordinates == original[3].coordinates


def test_match_reversed_offsets_same_direction_only():
    forward = [(0, 0), (1, 0), (2, 0)]
    collection = _collection(forward, forward[::-1], forward)
    manage_overlapping_lines(collection, match_reversed=True)
    # First line each way keeps its alignment
    assert collection[0].coordinates == [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]
    assert collection[1].coordinates == [(2.0, 0.0), (1.0, 0.0), (0.0, 0.0)]
    # Second forward line moves one step to the right (south)
    assert collection[2].coordinates == [(0.0, -D), (1.0, -D), (2.0, -D)]


def test_degenerate_segment_cleaned():
    """Repeated vertices in a shared run produce NaNs that must not survive."""
    line = [(0, 0), (1, 0), (1, 0), (2, 0)]
    collection = _collection(line, line)
    manage_overlapping_lines(collection)
    for feature in collection:
        for x, y in feature.coordinates:
            assert math.isfinite(x) and math.isfinite(y)
    assert len(collection[0].coordinates) == 4
    assert collection[1].coordinates == [(0.0, -D), (2.0, -D)]


def test_tolerance_groups_reprojected_lines():
    collection = _collection(
        [(0, 0), (1, 0), (2, 0)],
        [(0, 0.0000001), (1, 0.0000001), (2, 0)],
    )
    manage_overlapping_lines(collection)
    # Exact matching only finds a single vertex in common: no offset
    assert collection[1].coordinates[0] == (0.0, 0.0000001)

    manage_overlapping_lines(collection, tolerance=1e-5)
    assert collection[1].coordinates[0][1] == pytest.approx(-D)
