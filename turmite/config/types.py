"""Configuration and result dataclasses for headless turmite runs."""

from __future__ import annotations

from dataclasses import dataclass

from turmite.config.constants import CANVAS_HEIGHT, CANVAS_WIDTH, MAX_TICKS, PIXEL_SCALE
from turmite.domain.decisions import get_table

__all__ = [
    "RunConfig",
    "RunResult",
]


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunResult:
    """Summary of one turmite run."""

    run_id: str
    table_name: str
    seed: int
    ticks: int
    exited: bool
    final_x: int
    final_y: int
    filled_cells: int


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunConfig:
    """Drawing-surface geometry and run limits shared by single and batch runs.

    ``table_name`` pins the behavior table; ``None`` draws one at random per run.
    """

    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT
    pixel_scale: int = PIXEL_SCALE
    max_ticks: int = MAX_TICKS
    table_name: str | None = None
    record_trace: bool = True

    def __post_init__(self) -> None:
        if self.pixel_scale < 1:
            raise ValueError("pixel_scale must be >= 1")
        if self.canvas_width < self.pixel_scale:
            raise ValueError("canvas_width must be >= pixel_scale")
        if self.canvas_height < self.pixel_scale:
            raise ValueError("canvas_height must be >= pixel_scale")
        if self.max_ticks < 1:
            raise ValueError("max_ticks must be >= 1")
        if self.table_name is not None:
            get_table(self.table_name)

    @property
    def grid_width(self) -> int:
        return self.canvas_width // self.pixel_scale

    @property
    def grid_height(self) -> int:
        return self.canvas_height // self.pixel_scale
