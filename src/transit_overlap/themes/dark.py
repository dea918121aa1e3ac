"""Dark grey theme (the default)."""

from transit_overlap.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    line_width=3.0,
    line_opacity=0.9,
    vertex_fill="#ffffff",
    vertex_stroke="#333333",
    vertex_radius=0.0,
    title_color="#ffffff",
    title_font_size=20.0,
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    legend_background="rgba(0, 0, 0, 0.3)",
    legend_text_color="#e0e0e0",
    legend_font_size=13.0,
)
