"""Lateral offsets for lines sharing a segment.

Within each overlap group, lines are split by the direction they travel
through the segment. Each direction gets its own counter, so the k-th line
going one way is shifted by ``k * offset_step`` meters::

    forward:  0, 1, 2, ... * offset_step   (segment order)
    backward: 0, 1, 2, ... * offset_step   (reversed segment order)

Offsets are always taken to the right of the base segment's direction of
travel. Reversing the base for backward lines therefore puts the two
directions on opposite sides of the shared street.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from transit_overlap.geodata.model import Coord, LineFeatureCollection, OverlapGroup
from transit_overlap.layout.constants import (
    COORD_TOLERANCE,
    EARTH_RADIUS_M,
    OFFSET_STEP,
    PARALLEL_TOLERANCE,
)
from transit_overlap.layout.overlap.splice import replace_coordinates

logger = logging.getLogger(__name__)

_UNIT_FACTORS = {
    "meters": 1.0,
    "metres": 1.0,
    "kilometers": 1000.0,
    "kilometres": 1000.0,
    "feet": 0.3048,
}


def length_to_degrees(distance: float, units: str = "meters") -> float:
    """Convert a ground distance to degrees of arc on a spherical earth."""
    try:
        factor = _UNIT_FACTORS[units]
    except KeyError:
        raise ValueError(f"Unknown distance unit {units!r}") from None
    return math.degrees(distance * factor / EARTH_RADIUS_M)


# ---------------------------------------------------------------------------
# Primitive: parallel offset with a stable vertex count
# ---------------------------------------------------------------------------


def _offset_segment(p1: Coord, p2: Coord, offset: float) -> list[Coord]:
    """Shift a single segment sideways by *offset* degrees (right is positive)."""
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    length = math.hypot(dx, dy)
    if length == 0:
        # Degenerate segment: no normal exists
        return [(math.nan, math.nan), (math.nan, math.nan)]
    nx = offset * dy / length
    ny = -offset * dx / length
    return [(p1[0] + nx, p1[1] + ny), (p2[0] + nx, p2[1] + ny)]


def _intersection(a: list[Coord], b: list[Coord]) -> Coord | None:
    """Intersect the supporting lines of two segments; None when parallel."""
    rx, ry = a[1][0] - a[0][0], a[1][1] - a[0][1]
    sx, sy = b[1][0] - b[0][0], b[1][1] - b[0][1]
    cross = rx * sy - ry * sx
    # NaN fails this test and propagates into the result
    if abs(cross) <= PARALLEL_TOLERANCE * math.hypot(rx, ry) * math.hypot(sx, sy):
        return None
    qx, qy = b[0][0] - a[0][0], b[0][1] - a[0][1]
    t = (qx * sy - qy * sx) / cross
    return (a[0][0] + t * rx, a[0][1] + t * ry)


def line_offset(
    coords: Sequence[Coord],
    distance: float,
    units: str = "meters",
) -> list[Coord]:
    """Return a copy of a polyline shifted sideways by *distance*.

    The result has exactly as many vertices as the input, so it can be
    written back over the original run. Each segment is moved along its
    right-hand normal and neighbours are re-joined where their shifted
    supporting lines cross; collinear neighbours keep their shifted
    endpoints. Zero-length segments yield NaN vertices, which the cleaner
    removes later.
    """
    if distance == 0 or len(coords) < 2:
        return [(float(x), float(y)) for x, y in coords]

    offset = length_to_degrees(distance, units)
    segments: list[list[Coord]] = []
    result: list[Coord] = []
    last = len(coords) - 1

    for index in range(last):
        segment = _offset_segment(coords[index], coords[index + 1], offset)
        segments.append(segment)
        if index == 0:
            continue
        previous = segments[index - 1]
        crossing = _intersection(segment, previous)
        if crossing is not None:
            previous[1] = crossing
            segment[0] = crossing
        result.append(previous[0])
        if index == last - 1:
            result.extend(segment)

    if last == 1:
        result = list(segments[0])
    return result


# ---------------------------------------------------------------------------
# Per-group assignment
# ---------------------------------------------------------------------------


def apply_offsets(
    groups: Sequence[OverlapGroup],
    collection: LineFeatureCollection,
    offset_step: float = OFFSET_STEP,
    tolerance: float = COORD_TOLERANCE,
) -> int:
    """Offset every classified member of every group, in stored order.

    The first line in each direction keeps its alignment; every further
    line moves one more *offset_step* away. Returns how many replacements
    were written back into the collection.
    """
    applied = 0
    for group in groups:
        forward_count = 0
        backward_count = 0
        for lid, forward in group.oriented_members:
            if forward:
                base = list(group.segment.coordinates)
                distance = offset_step * forward_count
                forward_count += 1
            else:
                base = group.segment.reversed_coordinates()
                distance = offset_step * backward_count
                backward_count += 1

            replacement = line_offset(base, distance)
            if replace_coordinates(base, replacement, lid, collection, tolerance):
                applied += 1

        logger.debug(
            "segment of %d points: %d forward, %d backward",
            len(group.segment), forward_count, backward_count,
        )
    return applied
