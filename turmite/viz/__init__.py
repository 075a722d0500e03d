"""Visualization layer: drawing surfaces, themes, renderers, and CLI."""

from turmite.viz.cli import main
from turmite.viz.render import (
    capture_at_ticks,
    capture_frames,
    render_animation,
    render_filmstrip,
    render_final_frame,
)
from turmite.viz.surface import ArraySurface, RecordingSurface, parse_rgb
from turmite.viz.theme import (
    DARK_THEME,
    DEFAULT_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "ArraySurface",
    "DARK_THEME",
    "DEFAULT_THEME",
    "REGISTERED_THEMES",
    "RecordingSurface",
    "Theme",
    "capture_at_ticks",
    "capture_frames",
    "get_theme",
    "main",
    "parse_rgb",
    "render_animation",
    "render_filmstrip",
    "render_final_frame",
]
