"""SVG preview of a line collection using drawsvg."""

from __future__ import annotations

import math

import drawsvg as draw

from transit_overlap.geodata.model import Coord, LineFeatureCollection
from transit_overlap.render.constants import (
    CANVAS_PADDING,
    DEFAULT_WIDTH,
    LEGEND_GAP,
    TITLE_HEIGHT,
)
from transit_overlap.render.legend import compute_legend_dimensions, line_color, render_legend
from transit_overlap.render.style import Theme


def _finite_coords(collection: LineFeatureCollection) -> list[Coord]:
    return [
        (x, y)
        for feature in collection
        for x, y in feature.coordinates
        if math.isfinite(x) and math.isfinite(y)
    ]


def render_svg(
    collection: LineFeatureCollection,
    theme: Theme,
    width: int | None = None,
    height: int | None = None,
    padding: float = CANVAS_PADDING,
) -> str:
    """Render every line of a collection to an SVG string.

    Longitude is scaled by the cosine of the mean latitude so shapes keep
    roughly their ground proportions; north is up.
    """
    coords = _finite_coords(collection)
    if not coords:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    min_x = min(x for x, _ in coords)
    max_x = max(x for x, _ in coords)
    min_y = min(y for _, y in coords)
    max_y = max(y for _, y in coords)
    x_scale = math.cos(math.radians((min_y + max_y) / 2))

    span_x = (max_x - min_x) * x_scale
    span_y = max_y - min_y
    extent = max(span_x, span_y) or 1.0

    svg_width = width or DEFAULT_WIDTH
    top = TITLE_HEIGHT if collection.name else 0.0
    _, legend_h = compute_legend_dimensions(collection, theme)

    scale = (svg_width - 2 * padding) / extent
    if height:
        available = height - 2 * padding - top - (legend_h + LEGEND_GAP if legend_h else 0)
        if span_y > 0 and available > 0:
            scale = min(scale, available / span_y)
    map_height = span_y * scale

    auto_height = map_height + 2 * padding + top
    if legend_h:
        auto_height += legend_h + LEGEND_GAP
    svg_height = height or int(math.ceil(auto_height))

    def project(x: float, y: float) -> tuple[float, float]:
        return (
            padding + (x - min_x) * x_scale * scale,
            top + padding + (max_y - y) * scale,
        )

    d = draw.Drawing(svg_width, svg_height)

    if theme.background_color != "none":
        d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    if collection.name:
        d.append(draw.Text(
            collection.name,
            theme.title_font_size,
            padding, top / 2 + theme.title_font_size / 2,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    for i, feature in enumerate(collection.features):
        pts = [
            project(x, y) for x, y in feature.coordinates
            if math.isfinite(x) and math.isfinite(y)
        ]
        if len(pts) < 2:
            continue
        color = line_color(feature, i, theme)
        flat = [v for p in pts for v in p]
        d.append(draw.Lines(
            *flat,
            close=False,
            fill="none",
            stroke=color,
            stroke_width=theme.line_width,
            stroke_opacity=theme.line_opacity,
            stroke_linejoin="round",
            stroke_linecap="round",
        ))
        if theme.vertex_radius > 0:
            for px, py in pts:
                d.append(draw.Circle(
                    px, py, theme.vertex_radius,
                    fill=theme.vertex_fill,
                    stroke=theme.vertex_stroke,
                    stroke_width=0.5,
                ))

    legend_y = top + padding + map_height + LEGEND_GAP
    render_legend(d, collection, theme, padding, legend_y)

    return d.as_svg()
