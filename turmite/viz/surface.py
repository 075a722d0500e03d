"""Concrete drawing surfaces accepted by ``Turmite.tick``."""

from __future__ import annotations

import re

import numpy as np

from turmite.viz.theme import DEFAULT_THEME, Theme

_RGB_RE = re.compile(r"^\s*rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)\s*$")


def parse_rgb(color: str) -> tuple[int, int, int]:
    """Parse an ``rgb(r, g, b)`` string into a channel tuple."""
    match = _RGB_RE.match(color)
    if match is None:
        raise ValueError(f"Expected rgb(r, g, b) color, got: {color!r}")
    channels = tuple(int(c) for c in match.groups())
    if any(c > 255 for c in channels):
        raise ValueError(f"RGB channels must be in [0, 255], got: {color!r}")
    return channels  # type: ignore[return-value]


class RecordingSurface:
    """Stores every render command in call order."""

    def __init__(self) -> None:
        self.commands: list[tuple[object, ...]] = []

    def set_fill_style(self, color: str) -> None:
        self.commands.append(("fill_style", color))

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None:
        self.commands.append(("fill_rect", x, y, width, height))

    def rects(self) -> list[tuple[str, int, int, int, int]]:
        """Pair each ``fill_rect`` with the fill style active when it was issued."""
        current: str | None = None
        out: list[tuple[str, int, int, int, int]] = []
        for command in self.commands:
            if command[0] == "fill_style":
                current = str(command[1])
            elif current is not None:
                _, x, y, w, h = command
                out.append((current, int(x), int(y), int(w), int(h)))  # type: ignore[call-overload]
        return out

    def clear(self) -> None:
        self.commands.clear()


class ArraySurface:
    """RGB pixel canvas backed by a (height, width, 3) ``uint8`` array.

    Engine colors are mapped through *theme*. Rectangles are clipped to the
    canvas, matching canvas semantics for off-screen draws.
    """

    def __init__(self, width: int, height: int, theme: Theme = DEFAULT_THEME) -> None:
        if width < 1 or height < 1:
            raise ValueError("surface width and height must be >= 1")
        self.width = width
        self.height = height
        self.pixels = np.empty((height, width, 3), dtype=np.uint8)
        self.theme = theme
        self.pixels[:, :] = parse_rgb(theme.empty_color)
        self._fill: tuple[int, int, int] = (0, 0, 0)

    def set_fill_style(self, color: str) -> None:
        self._fill = parse_rgb(self.theme.color_for(color))

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None:
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + width, self.width), min(y + height, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        self.pixels[y0:y1, x0:x1] = self._fill

    def snapshot(self) -> np.ndarray:
        return self.pixels.copy()
