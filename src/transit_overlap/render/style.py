"""Theme and style constants for line previews."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Theme:
    """Visual theme for an SVG line preview."""

    name: str
    background_color: str
    line_width: float
    line_opacity: float
    vertex_fill: str
    vertex_stroke: str
    vertex_radius: float
    title_color: str
    title_font_size: float
    label_font_family: str
    legend_background: str
    legend_text_color: str
    legend_font_size: float
    # Fallback colours for lines without a colour property
    palette: list[str] = field(default_factory=lambda: [
        "#e41a1c", "#377eb8", "#4daf4a", "#984ea3",
        "#ff7f00", "#a65628", "#f781bf", "#999999",
    ])
