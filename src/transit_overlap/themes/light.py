"""Light theme."""

from transit_overlap.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    line_width=3.0,
    line_opacity=0.85,
    vertex_fill="#ffffff",
    vertex_stroke="#333333",
    vertex_radius=2.0,
    title_color="#111111",
    title_font_size=22.0,
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    legend_background="rgba(255, 255, 255, 0.8)",
    legend_text_color="#333333",
    legend_font_size=14.0,
)
