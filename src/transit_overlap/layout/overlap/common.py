"""Canonical coordinate keys shared by detection, classification and splicing."""

from __future__ import annotations

import math
from collections.abc import Sequence

from transit_overlap.geodata.model import Coord, SharedSegment
from transit_overlap.layout.constants import COORD_TOLERANCE


def coord_key(coord: Sequence[float], tolerance: float = COORD_TOLERANCE) -> tuple:
    """Return the hashable identity of a coordinate.

    With ``tolerance <= 0`` the key is the exact ``(x, y)`` pair. Otherwise
    both components are snapped to a grid of ``tolerance`` units, so nearby
    positions in the same cell compare equal. This is not an epsilon test:
    two points closer than ``tolerance`` that straddle a cell boundary still
    get different keys.
    """
    x, y = coord[0], coord[1]
    if tolerance <= 0 or not (math.isfinite(x) and math.isfinite(y)):
        return (x, y)
    return (round(x / tolerance), round(y / tolerance))


def coords_equal(
    a: Sequence[float],
    b: Sequence[float],
    tolerance: float = COORD_TOLERANCE,
) -> bool:
    return coord_key(a, tolerance) == coord_key(b, tolerance)


def segment_key(
    coords: Sequence[Sequence[float]],
    tolerance: float = COORD_TOLERANCE,
) -> tuple:
    return tuple(coord_key(c, tolerance) for c in coords)


def make_segment(
    coords: Sequence[Coord],
    tolerance: float = COORD_TOLERANCE,
) -> SharedSegment:
    """Build a SharedSegment keyed by its canonical coordinate sequence."""
    return SharedSegment(
        key=segment_key(coords, tolerance),
        coordinates=tuple((float(x), float(y)) for x, y in coords),
    )
