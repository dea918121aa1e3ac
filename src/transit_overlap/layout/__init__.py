"""Overlap layout: offsets for lines sharing segments, and viewport filtering."""

from transit_overlap.layout.engine import manage_overlapping_lines
from transit_overlap.layout.viewport import bbox_polygon, get_lines_in_view

__all__ = ["bbox_polygon", "get_lines_in_view", "manage_overlapping_lines"]
