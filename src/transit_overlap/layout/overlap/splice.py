"""In-place replacement of a shared run inside a full line."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from transit_overlap.geodata.model import Coord, LineFeatureCollection
from transit_overlap.layout.constants import COORD_TOLERANCE
from transit_overlap.layout.overlap.common import coord_key

logger = logging.getLogger(__name__)


def find_run(
    coordinates: Sequence[Coord],
    run: Sequence[Coord],
    tolerance: float = COORD_TOLERANCE,
) -> int | None:
    """Return the first index where *run* occurs contiguously, or None."""
    pattern = [coord_key(c, tolerance) for c in run]
    length = len(pattern)
    if length == 0:
        return None
    for start in range(len(coordinates) - length + 1):
        if all(
            coord_key(coordinates[start + k], tolerance) == pattern[k]
            for k in range(length)
        ):
            return start
    return None


def replace_coordinates(
    original: Sequence[Coord],
    replacement: Sequence[Coord],
    line_index: int,
    collection: LineFeatureCollection,
    tolerance: float = COORD_TOLERANCE,
) -> bool:
    """Overwrite the first occurrence of *original* in a line with *replacement*.

    The line's coordinate list is modified in place and keeps its length.
    When the run cannot be found (it may already have been moved by an
    earlier group) the line is left untouched and False is returned.
    """
    if len(replacement) != len(original):
        logger.debug(
            "line %d: replacement has %d points for a %d-point run; skipped",
            line_index, len(replacement), len(original),
        )
        return False

    line = collection.features[line_index].coordinates
    start = find_run(line, original, tolerance)
    if start is None:
        logger.debug("line %d: shared run not found; left unchanged", line_index)
        return False

    line[start:start + len(original)] = list(replacement)
    return True
