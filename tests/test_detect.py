"""Tests for shared segment detection."""

from transit_overlap.geodata import LineFeature, LineFeatureCollection
from transit_overlap.layout.overlap import common_runs, find_overlapping_lines
from transit_overlap.layout.overlap.common import coord_key, coords_equal, segment_key


def _collection(*lines):
    return LineFeatureCollection(
        features=[LineFeature(coordinates=[tuple(map(float, c)) for c in line])
                  for line in lines]
    )


def _segments(overlap_map):
    return {seg.coordinates: members for seg, members in overlap_map.items()}


# ---------------------------------------------------------------------------
# Coordinate keys
# ---------------------------------------------------------------------------
def test_exact_key_is_the_coordinate():
    assert coord_key((1.5, -2.25)) == (1.5, -2.25)
    assert not coords_equal((1.0, 2.0), (1.0, 2.0000001))


def test_tolerance_key_snaps_to_grid():
    assert coords_equal((1.0, 2.0), (1.0, 2.0000001), tolerance=1e-5)
    assert not coords_equal((1.0, 2.0), (1.0, 2.001), tolerance=1e-5)


def test_tolerance_is_a_grid_not_an_epsilon():
    """Close points in different cells differ; the relation stays transitive."""
    assert not coords_equal((0.0, 4.9e-06), (0.0, 5.1e-06), tolerance=1e-05)
    assert coords_equal((0.0, 1.0e-06), (0.0, 4.9e-06), tolerance=1e-05)


def test_segment_key_keeps_order():
    assert segment_key([(0, 0), (1, 0)]) != segment_key([(1, 0), (0, 0)])


# ---------------------------------------------------------------------------
# common_runs
# ---------------------------------------------------------------------------
def test_common_runs_identical_lines():
    a = [(0, 0), (1, 0), (2, 0)]
    assert common_runs(a, list(a)) == [a]


def test_common_runs_sub_run():
    a = [(0, 0), (1, 0), (2, 0), (3, 0)]
    b = [(5, 5), (1, 0), (2, 0), (9, 9)]
    assert common_runs(a, b) == [[(1, 0), (2, 0)]]


def test_common_runs_ignores_single_touch():
    a = [(0, 0), (1, 0), (2, 0)]
    b = [(2, 0), (3, 0), (4, 0)]
    assert common_runs(a, b) == []


def test_common_runs_is_maximal():
    a = [(0, 0), (1, 0), (2, 0), (3, 0)]
    b = [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)]
    runs = common_runs(a, b)
    assert runs == [[(0, 0), (1, 0), (2, 0), (3, 0)]]


def test_common_runs_two_separate_runs():
    a = [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (5, 0)]
    b = [(0, 0), (1, 0), (7, 7), (4, 0), (5, 0)]
    assert common_runs(a, b) == [[(0, 0), (1, 0)], [(4, 0), (5, 0)]]


def test_common_runs_ignores_reversed_order():
    a = [(0, 0), (1, 0), (2, 0)]
    assert common_runs(a, a[::-1]) == []


def test_common_runs_reported_once_for_looping_line():
    a = [(0, 0), (1, 0)]
    b = [(0, 0), (1, 0), (1, 1), (0, 0), (1, 0)]
    assert common_runs(a, b) == [[(0, 0), (1, 0)]]


# ---------------------------------------------------------------------------
# find_overlapping_lines
# ---------------------------------------------------------------------------
def test_no_overlap():
    collection = _collection([(0, 0), (1, 0)], [(0, 1), (1, 1)])
    assert find_overlapping_lines(collection) == {}


def test_chained_overlaps():
    collection = _collection(
        [(0, 0), (1, 0), (2, 0)],
        [(1, 0), (2, 0), (3, 0)],
        [(2, 0), (3, 0), (4, 0)],
    )
    segments = _segments(find_overlapping_lines(collection))
    assert segments == {
        ((1.0, 0.0), (2.0, 0.0)): [0, 1],
        ((2.0, 0.0), (3.0, 0.0)): [1, 2],
    }


def test_members_accumulate_across_pairs():
    line = [(0, 0), (1, 0), (2, 0)]
    collection = _collection(line, line, line)
    segments = _segments(find_overlapping_lines(collection))
    assert list(segments.values()) == [[0, 1, 2]]


def test_match_reversed_records_first_line_order():
    collection = _collection(
        [(0, 0), (1, 0), (2, 0)],
        [(2, 0), (1, 0), (0, 0)],
    )
    assert find_overlapping_lines(collection) == {}
    segments = _segments(find_overlapping_lines(collection, match_reversed=True))
    assert segments == {((0.0, 0.0), (1.0, 0.0), (2.0, 0.0)): [0, 1]}


def test_tolerance_merges_near_identical_runs():
    collection = _collection(
        [(0, 0), (1, 0), (2, 0)],
        [(0, 0.0000001), (1, 0), (2, 0)],
    )
    assert len(find_overlapping_lines(collection)) == 1
    segments = find_overlapping_lines(collection, tolerance=1e-5)
    assert len(segments) == 1
    (segment,) = segments
    assert len(segment) == 3
