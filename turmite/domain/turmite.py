"""Turmite engine: a two-state Turing-machine ant on a bounded binary grid.

Each tick reads the cell under the turmite and its internal state, looks up a
decision, writes the new color and state, turns, renders the updated cell and
steps forward. Leaving the grid is a normal terminal transition: the turmite
becomes inactive and every later tick is a no-op.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from random import Random
from typing import Protocol

from turmite.config.constants import ANT_COLOR, EMPTY_COLOR, FILL_COLOR
from turmite.domain.decisions import DecisionTable, decide, random_table
from turmite.domain.grid import Grid
from turmite.domain.orientation import Orientation, apply_rotation, step_delta

logger = logging.getLogger(__name__)


class DrawingSurface(Protocol):
    """Canvas-like sink for render commands."""

    def set_fill_style(self, color: str) -> None: ...

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None: ...


@dataclass
class Turmite:
    """Mutable simulation state of one turmite and the grid it owns."""

    x: int
    y: int
    orientation: Orientation
    behavior: DecisionTable
    state: bool
    grid: Grid
    pixel_scale: int = 1
    active: bool = True
    ticks: int = 0

    def __post_init__(self) -> None:
        if self.pixel_scale < 1:
            raise ValueError("pixel_scale must be >= 1")

    @classmethod
    def create(
        cls,
        canvas_width: int,
        canvas_height: int,
        pixel_scale: int,
        rng: Random | None = None,
        table: DecisionTable | None = None,
    ) -> Turmite:
        """Place a turmite at the grid center facing right.

        The rng draws the internal state, then the behavior table (unless
        *table* is given), then the color of the starting cell.
        """
        if pixel_scale < 1:
            raise ValueError("pixel_scale must be >= 1")
        rng = rng if rng is not None else Random()
        grid = Grid.empty(canvas_width // pixel_scale, canvas_height // pixel_scale)

        state = rng.random() < 0.5
        behavior = table if table is not None else random_table(rng)
        logger.info("Using %s as behavior table", behavior.name)

        turmite = cls(
            x=grid.width // 2,
            y=grid.height // 2,
            orientation=Orientation.RIGHT,
            behavior=behavior,
            state=state,
            grid=grid,
            pixel_scale=pixel_scale,
        )
        turmite.grid.set(turmite.x, turmite.y, rng.random() < 0.5)
        return turmite

    def is_active(self) -> bool:
        return self.active

    def current_color(self) -> bool:
        return self.grid.get(self.x, self.y)

    def tick(self, surface: DrawingSurface) -> None:
        """Advance one transition and issue its render commands."""
        if not self.active:
            return
        if not self.grid.contains(self.x, self.y):
            # Stepped past the right or bottom edge on the previous tick.
            self.active = False
            return
        self._tick_state()
        self._render_cell(surface)
        self._tick_pos()
        self._render_self(surface)
        self.ticks += 1

    def _tick_state(self) -> None:
        decision = decide(self.behavior, self.state, self.current_color())
        self.state = decision.state
        self.orientation = apply_rotation(self.orientation, decision.rotate)
        self.grid.set(self.x, self.y, decision.color)

    def _tick_pos(self) -> None:
        if not self.grid.contains(self.x, self.y):
            self.active = False
            return
        dx, dy = step_delta(self.orientation)
        self._move_by(dx, dy)

    def _move_by(self, dx: int, dy: int) -> None:
        new_x = self.x + dx
        if new_x < 0:
            self.active = False
            new_x = 0
        new_y = self.y + dy
        if new_y < 0:
            self.active = False
            new_y = 0
        self.x = new_x
        self.y = new_y

    def _render(self, surface: DrawingSurface, color: str) -> None:
        if not self.active:
            return
        surface.set_fill_style(color)
        surface.fill_rect(
            self.x * self.pixel_scale,
            self.y * self.pixel_scale,
            self.pixel_scale,
            self.pixel_scale,
        )

    def _render_cell(self, surface: DrawingSurface) -> None:
        self._render(surface, FILL_COLOR if self.current_color() else EMPTY_COLOR)

    def _render_self(self, surface: DrawingSurface) -> None:
        self._render(surface, ANT_COLOR)

    def debug_dump(self) -> str:
        """Grid dimensions on the first line, row-major cells on the second."""
        return (
            f"Turmite {{ width: {self.grid.width}, height: {self.grid.height} }}\n"
            f"{self.grid.dump()}"
        )

    def log(self) -> None:
        logger.debug("%s", self.debug_dump())

    def __str__(self) -> str:
        return self.debug_dump()
