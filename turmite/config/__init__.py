"""Configuration layer: constants and typed config dataclasses."""

from turmite.config.constants import (
    ANT_COLOR,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    EMPTY_COLOR,
    FILL_COLOR,
    FLUSH_THRESHOLD,
    MAX_BATCH_WORK_UNITS,
    MAX_TICKS,
    PIXEL_SCALE,
)
from turmite.config.types import RunConfig, RunResult

__all__ = [
    "ANT_COLOR",
    "CANVAS_HEIGHT",
    "CANVAS_WIDTH",
    "EMPTY_COLOR",
    "FILL_COLOR",
    "FLUSH_THRESHOLD",
    "MAX_BATCH_WORK_UNITS",
    "MAX_TICKS",
    "PIXEL_SCALE",
    "RunConfig",
    "RunResult",
]
