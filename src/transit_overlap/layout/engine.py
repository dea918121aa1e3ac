"""Overlap coordinator: detection, direction classification, offsets, cleanup.

The collection passed in is modified in place and returned, so callers
holding references to its features (a map layer, for instance) see the
offset geometry without re-binding anything.
"""

from __future__ import annotations

import logging

from transit_overlap.geodata.model import LineFeatureCollection
from transit_overlap.layout.constants import COORD_TOLERANCE, OFFSET_STEP
from transit_overlap.layout.overlap import (
    apply_offsets,
    build_overlap_groups,
    clean_lines,
    find_overlapping_lines,
)

logger = logging.getLogger(__name__)


def manage_overlapping_lines(
    collection: LineFeatureCollection,
    offset_step: float = OFFSET_STEP,
    tolerance: float = COORD_TOLERANCE,
    match_reversed: bool = False,
) -> LineFeatureCollection:
    """Fan out lines that share segments so each stays visible."""
    overlap_map = find_overlapping_lines(
        collection, tolerance=tolerance, match_reversed=match_reversed
    )
    groups = build_overlap_groups(overlap_map, collection, tolerance=tolerance)
    applied = apply_offsets(
        groups, collection, offset_step=offset_step, tolerance=tolerance
    )
    logger.info(
        "%d lines, %d shared segments, %d offsets applied",
        len(collection), len(groups), applied,
    )
    return clean_lines(collection)
