"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 40.0
"""Default padding around the drawn lines."""

DEFAULT_WIDTH: int = 800
"""Canvas width when none is given; height follows the data's aspect."""

TITLE_HEIGHT: float = 40.0
"""Vertical space reserved above the lines when a title is drawn."""

LEGEND_GAP: float = 20.0
"""Gap between the drawing area and the legend."""

# ---------------------------------------------------------------------------
# Legend
# ---------------------------------------------------------------------------
LEGEND_LINE_HEIGHT: float = 22.0
"""Vertical height per line entry in legend."""

LEGEND_PADDING: float = 10.0
"""Internal padding of legend box."""

LEGEND_SWATCH_WIDTH: float = 24.0
"""Width of color swatch line in legend."""

LEGEND_TEXT_GAP: float = 10.0
"""Gap between swatch end and label text."""

LEGEND_CHAR_WIDTH_RATIO: float = 0.55
"""Character width as a fraction of font size for legend text sizing."""

LEGEND_BORDER_RADIUS: int = 6
"""Corner radius for legend background rectangle."""
