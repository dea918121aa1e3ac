"""Pairwise detection of coordinate runs shared between lines."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from transit_overlap.geodata.model import Coord, LineFeatureCollection, SharedSegment
from transit_overlap.layout.constants import COORD_TOLERANCE, MIN_SEGMENT_COORDS
from transit_overlap.layout.overlap.common import coord_key, make_segment

logger = logging.getLogger(__name__)


def common_runs(
    a: Sequence[Coord],
    b: Sequence[Coord],
    tolerance: float = COORD_TOLERANCE,
    min_length: int = MIN_SEGMENT_COORDS,
) -> list[list[Coord]]:
    """Find every maximal run of coordinates that *a* and *b* share in order.

    A run starts wherever ``a[p] == b[q]`` and the preceding pair does not
    also match, then extends while both sequences keep matching. Runs
    shorter than *min_length* (a single touching vertex) are ignored, and a
    run found twice (a looping line) is reported once. Coordinates are
    returned as they appear in *a*.
    """
    keys_a = [coord_key(c, tolerance) for c in a]
    keys_b = [coord_key(c, tolerance) for c in b]

    runs: list[list[Coord]] = []
    seen: set[tuple] = set()
    for p, key_a in enumerate(keys_a):
        for q, key_b in enumerate(keys_b):
            if key_a != key_b:
                continue
            if p > 0 and q > 0 and keys_a[p - 1] == keys_b[q - 1]:
                continue  # inside a run that started earlier

            length = 1
            while (
                p + length < len(keys_a)
                and q + length < len(keys_b)
                and keys_a[p + length] == keys_b[q + length]
            ):
                length += 1

            if length < min_length:
                continue
            run_key = tuple(keys_a[p:p + length])
            if run_key in seen:
                continue
            seen.add(run_key)
            runs.append(list(a[p:p + length]))

    return runs


def find_overlapping_lines(
    collection: LineFeatureCollection,
    tolerance: float = COORD_TOLERANCE,
    match_reversed: bool = False,
) -> dict[SharedSegment, list[int]]:
    """Map every shared segment to the indices of the lines containing it.

    Each unordered pair of lines is compared once. Member lists keep the
    order in which lines were first found on the segment, which later
    decides who gets the zero offset.

    With *match_reversed*, runs that the second line of a pair traverses
    backwards also count; the segment is still recorded in the first
    line's order.
    """
    overlap_map: dict[SharedSegment, list[int]] = {}
    features = collection.features

    for i in range(len(features) - 1):
        coords_i = features[i].coordinates
        for j in range(i + 1, len(features)):
            coords_j = features[j].coordinates
            runs = common_runs(coords_i, coords_j, tolerance)
            if match_reversed:
                for run in common_runs(coords_i, coords_j[::-1], tolerance):
                    if run not in runs:
                        runs.append(run)
            if not runs:
                continue

            logger.debug("lines %d and %d share %d run(s)", i, j, len(runs))
            for run in runs:
                segment = make_segment(run, tolerance)
                members = overlap_map.setdefault(segment, [])
                for lid in (i, j):
                    if lid not in members:
                        members.append(lid)

    return overlap_map
