"""Theme definitions for line previews."""

from transit_overlap.themes.dark import DARK_THEME
from transit_overlap.themes.light import LIGHT_THEME

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}

__all__ = ["THEMES", "DARK_THEME", "LIGHT_THEME"]
