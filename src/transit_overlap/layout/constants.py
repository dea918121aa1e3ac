"""Layout constants used across the overlap modules."""

# ---------------------------------------------------------------------------
# Offsets
# ---------------------------------------------------------------------------
OFFSET_STEP: float = 3.0
"""Per-line lateral offset increment in meters for lines sharing a segment."""

EARTH_RADIUS_M: float = 6371008.8
"""Mean earth radius used to convert meters to degrees of arc."""

# ---------------------------------------------------------------------------
# Coordinate identity
# ---------------------------------------------------------------------------
COORD_TOLERANCE: float = 0.0
"""Grid size for coordinate equality, in degrees.

0 means exact numeric match. A positive value snaps both components to a
grid of that size before comparing, which absorbs reprojection noise.
"""

MIN_SEGMENT_COORDS: int = 2
"""Shortest coordinate run that counts as a shared segment."""

PARALLEL_TOLERANCE: float = 1e-9
"""Sine of the angle below which consecutive segments are treated as parallel."""
