"""Fixed-size binary grid stored as a flat row-major list."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class Grid:
    """Width x height boolean cells; ``True`` is the filled color."""

    width: int
    height: int
    cells: list[bool]  # index = y * width + x

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("grid width and height must be >= 1")
        if len(self.cells) != self.width * self.height:
            raise ValueError("cells length must equal width * height")

    @classmethod
    def empty(cls, width: int, height: int) -> Grid:
        """Create a grid with every cell unfilled."""
        return cls(width=width, height=height, cells=[False] * max(width * height, 0))

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return y * self.width + x

    def get(self, x: int, y: int) -> bool:
        return self.cells[self._index(x, y)]

    def set(self, x: int, y: int, value: bool) -> None:
        self.cells[self._index(x, y)] = value

    def filled_count(self) -> int:
        return sum(self.cells)

    def dump(self) -> str:
        """Serialize cells as a row-major string of '0'/'1' characters."""
        return "".join("1" if cell else "0" for cell in self.cells)

    def to_array(self) -> np.ndarray:
        """Return a (height, width) bool array copy of the cells."""
        return np.array(self.cells, dtype=bool).reshape(self.height, self.width)
