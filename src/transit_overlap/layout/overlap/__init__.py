"""Overlap resolution subpackage.

Public API:
- find_overlapping_lines: Shared segment detection across line pairs
- build_overlap_groups: Direction classification per segment member
- apply_offsets: Per-group lateral offset assignment and write-back
- replace_coordinates: In-place splice of one offset run
- clean_lines: Removal of non-finite coordinates
- line_offset: Vertex-preserving parallel offset of a polyline
"""

from transit_overlap.layout.overlap.clean import clean_lines
from transit_overlap.layout.overlap.detect import common_runs, find_overlapping_lines
from transit_overlap.layout.overlap.directions import (
    build_overlap_groups,
    classify_direction,
)
from transit_overlap.layout.overlap.offsets import apply_offsets, line_offset
from transit_overlap.layout.overlap.splice import replace_coordinates

__all__ = [
    "apply_offsets",
    "build_overlap_groups",
    "classify_direction",
    "clean_lines",
    "common_runs",
    "find_overlapping_lines",
    "line_offset",
    "replace_coordinates",
]
