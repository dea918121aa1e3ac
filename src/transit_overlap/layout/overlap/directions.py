"""Direction inference for lines crossing a shared segment."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from transit_overlap.geodata.model import (
    Coord,
    LineFeatureCollection,
    OverlapGroup,
    SharedSegment,
)
from transit_overlap.layout.constants import COORD_TOLERANCE
from transit_overlap.layout.overlap.common import coord_key

logger = logging.getLogger(__name__)


def classify_direction(
    segment: SharedSegment,
    coordinates: Sequence[Coord],
    tolerance: float = COORD_TOLERANCE,
) -> bool | None:
    """Decide whether a line runs through *segment* forwards or backwards.

    Scans the line from its start: reaching the segment's first coordinate
    before its last means forward (True), the other way round means
    backward (False). The first hit decides, so a looping line that touches
    the segment's end before entering it is reported as backward. Returns
    None when the line contains neither endpoint.
    """
    first = coord_key(segment.first, tolerance)
    last = coord_key(segment.last, tolerance)
    for coord in coordinates:
        key = coord_key(coord, tolerance)
        if key == first:
            return True
        if key == last:
            return False
    return None


def build_overlap_groups(
    overlap_map: dict[SharedSegment, list[int]],
    collection: LineFeatureCollection,
    tolerance: float = COORD_TOLERANCE,
) -> list[OverlapGroup]:
    """Turn the detector's segment map into direction-annotated groups."""
    groups: list[OverlapGroup] = []
    for segment, members in overlap_map.items():
        group = OverlapGroup(segment=segment, member_lines=list(members))
        for lid in members:
            forward = classify_direction(
                segment, collection.features[lid].coordinates, tolerance
            )
            if forward is None:
                logger.debug(
                    "line %d matches neither end of a %d-point segment; skipped",
                    lid, len(segment),
                )
                continue
            group.classified_lines.append(lid)
            group.directions.append(forward)
        groups.append(group)
    return groups
