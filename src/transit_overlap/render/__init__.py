"""SVG preview rendering for line collections."""

from transit_overlap.render.svg import render_svg

__all__ = ["render_svg"]
