"""Tests for direction classification of overlap group members."""

from transit_overlap.geodata import LineFeature, LineFeatureCollection
from transit_overlap.layout.overlap import build_overlap_groups, classify_direction
from transit_overlap.layout.overlap.common import make_segment

SEGMENT = make_segment([(0.0, 0.0), (1.0, 0.0)])


def test_forward_when_start_seen_first():
    assert classify_direction(SEGMENT, [(0, 0), (1, 0), (2, 0)]) is True


def test_backward_when_end_seen_first():
    assert classify_direction(SEGMENT, [(2, 0), (1, 0), (0, 0)]) is False


def test_unmatched_line():
    assert classify_direction(SEGMENT, [(5, 5), (6, 6)]) is None


def test_opposite_lines_get_different_directions():
    """Lines sharing a run in opposite order land in different direction groups."""
    collection = LineFeatureCollection(features=[
        LineFeature(coordinates=[(-1.0, 0.0), (0.0, 0.0), (1.0, 0.0)]),
        LineFeature(coordinates=[(1.0, 0.0), (0.0, 0.0), (-1.0, 0.0)]),
    ])
    (group,) = build_overlap_groups({SEGMENT: [0, 1]}, collection)
    assert group.forward_lines == [0]
    assert group.backward_lines == [1]


def test_first_hit_wins_on_looping_line():
    """A loop touching the segment end before its start is read as backward."""
    looping = [(1, 0), (1, 1), (0, 1), (0, 0), (1, 0)]
    assert classify_direction(SEGMENT, looping) is False


def test_tolerance_applies_to_endpoints():
    near = [(0.0000001, 0.0), (1.0, 0.0)]
    # Exact matching misses the start and meets the end first
    assert classify_direction(SEGMENT, near) is False
    assert classify_direction(SEGMENT, near, tolerance=1e-5) is True


def test_unmatched_members_are_omitted():
    collection = LineFeatureCollection(features=[
        LineFeature(coordinates=[(0.0, 0.0), (1.0, 0.0)]),
        LineFeature(coordinates=[(7.0, 7.0), (8.0, 8.0)]),
        LineFeature(coordinates=[(1.0, 0.0), (0.0, 0.0)]),
    ])
    (group,) = build_overlap_groups({SEGMENT: [0, 1, 2]}, collection)
    assert group.member_lines == [0, 1, 2]
    assert group.classified_lines == [0, 2]
    assert group.directions == [True, False]
    assert len(group.directions) <= len(group.member_lines)
    assert group.oriented_members == [(0, True), (2, False)]
