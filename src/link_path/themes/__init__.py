"""Theme definitions for link previews."""

from link_path.themes.dark import DARK_THEME
from link_path.themes.default import DEFAULT_THEME

THEMES = {
    "default": DEFAULT_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "DEFAULT_THEME", "DARK_THEME"]
