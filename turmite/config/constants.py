"""Centralized constants for turmite simulation runs.

Colors are RGB strings in the form accepted by canvas-style drawing surfaces.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

EMPTY_COLOR = "rgb(255, 255, 255)"
"""Fill color for cells whose value is False."""

FILL_COLOR = "rgb(0, 0, 0)"
"""Fill color for cells whose value is True."""

ANT_COLOR = "rgb(200, 0, 0)"
"""Fill color for the turmite's current head position."""

CANVAS_WIDTH = 400
"""Default drawing-surface width in pixels."""

CANVAS_HEIGHT = 400
"""Default drawing-surface height in pixels."""

PIXEL_SCALE = 4
"""Default edge length, in pixels, of one logical grid cell."""

MAX_TICKS = 200_000
"""Default cap on ticks for a single headless run."""

FLUSH_THRESHOLD = 8_192
"""Flush trace rows to Parquet once this in-memory row count is reached."""

MAX_BATCH_WORK_UNITS = 100_000_000
"""Safety cap on total ticks across all runs of a batch."""
