"""Color themes for turmite renderers.

Themes are frozen dataclasses grouping the three fill colors a turmite
issues. Swap palettes via the ``--theme`` CLI argument or programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass

from turmite.config.constants import ANT_COLOR, EMPTY_COLOR, FILL_COLOR


@dataclass(frozen=True)
class Theme:
    """Fill colors as ``rgb(r, g, b)`` strings."""

    empty_color: str = EMPTY_COLOR
    filled_color: str = FILL_COLOR
    agent_color: str = ANT_COLOR

    def color_for(self, color: str) -> str:
        """Map an engine color onto this theme's palette."""
        mapping = {
            EMPTY_COLOR: self.empty_color,
            FILL_COLOR: self.filled_color,
            ANT_COLOR: self.agent_color,
        }
        return mapping.get(color, color)


DEFAULT_THEME = Theme()

DARK_THEME = Theme(
    empty_color="rgb(26, 26, 26)",
    filled_color="rgb(240, 240, 240)",
    agent_color="rgb(255, 87, 34)",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "dark": DARK_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
