"""Legend generation for line preview SVGs."""

from __future__ import annotations

import drawsvg as draw

from transit_overlap.geodata.model import LineFeature, LineFeatureCollection
from transit_overlap.render.constants import (
    LEGEND_BORDER_RADIUS,
    LEGEND_CHAR_WIDTH_RATIO,
    LEGEND_LINE_HEIGHT,
    LEGEND_PADDING,
    LEGEND_SWATCH_WIDTH,
    LEGEND_TEXT_GAP,
)
from transit_overlap.render.style import Theme

_COLOR_KEYS = ("color", "colour", "route_color", "stroke")


def line_color(feature: LineFeature, index: int, theme: Theme) -> str:
    """Pick a line's stroke colour from its properties or the theme palette."""
    for key in _COLOR_KEYS:
        value = feature.properties.get(key)
        if value:
            value = str(value)
            # GTFS route_color is bare hex
            if key == "route_color" and not value.startswith("#"):
                value = "#" + value
            return value
    return theme.palette[index % len(theme.palette)]


def legend_entries(
    collection: LineFeatureCollection,
    theme: Theme,
) -> list[tuple[str, str]]:
    """Return (label, colour) for every line that has a name."""
    entries = []
    for i, feature in enumerate(collection.features):
        name = feature.display_name
        if name:
            entries.append((name, line_color(feature, i, theme)))
    return entries


def compute_legend_dimensions(
    collection: LineFeatureCollection,
    theme: Theme,
) -> tuple[float, float]:
    """Compute the width and height of the legend without rendering it.

    Returns (0, 0) if no line has a name.
    """
    entries = legend_entries(collection, theme)
    if not entries:
        return (0.0, 0.0)

    max_name_len = max(len(name) for name, _ in entries)
    char_width = theme.legend_font_size * LEGEND_CHAR_WIDTH_RATIO
    text_offset = LEGEND_SWATCH_WIDTH + LEGEND_TEXT_GAP

    width = LEGEND_PADDING * 2 + text_offset + max_name_len * char_width
    height = LEGEND_PADDING * 2 + len(entries) * LEGEND_LINE_HEIGHT
    return (width, height)


def render_legend(
    drawing: draw.Drawing,
    collection: LineFeatureCollection,
    theme: Theme,
    x: float,
    y: float,
) -> None:
    """Render a legend of line names and colours at (x, y), drawing downward."""
    entries = legend_entries(collection, theme)
    if not entries:
        return

    padding = LEGEND_PADDING
    line_height = LEGEND_LINE_HEIGHT
    swatch_width = LEGEND_SWATCH_WIDTH
    text_offset = swatch_width + LEGEND_TEXT_GAP
    legend_width, legend_height = compute_legend_dimensions(collection, theme)

    drawing.append(
        draw.Rectangle(
            x,
            y,
            legend_width,
            legend_height,
            rx=LEGEND_BORDER_RADIUS,
            ry=LEGEND_BORDER_RADIUS,
            fill=theme.legend_background,
        )
    )

    for i, (name, color) in enumerate(entries):
        entry_y = y + padding + i * line_height + line_height / 2

        drawing.append(
            draw.Line(
                x + padding,
                entry_y,
                x + padding + swatch_width,
                entry_y,
                stroke=color,
                stroke_width=theme.line_width,
                stroke_linecap="round",
            )
        )

        drawing.append(
            draw.Text(
                name,
                theme.legend_font_size,
                x + padding + text_offset,
                entry_y,
                fill=theme.legend_text_color,
                font_family=theme.label_font_family,
                dominant_baseline="central",
            )
        )
