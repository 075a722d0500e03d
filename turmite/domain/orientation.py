"""Heading algebra for a turmite on a square grid.

All functions are total lookups over the four-element ``Orientation`` set, so
every transformation yields another valid heading.
"""

from __future__ import annotations

from enum import Enum


class Orientation(Enum):
    """Compass-like heading of the turmite."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"


class Rotate(Enum):
    """Turn applied to the heading by a decision."""

    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"
    NOOP = "noop"
    UTURN = "uturn"


_UTURN: dict[Orientation, Orientation] = {
    Orientation.UP: Orientation.DOWN,
    Orientation.RIGHT: Orientation.LEFT,
    Orientation.DOWN: Orientation.UP,
    Orientation.LEFT: Orientation.RIGHT,
}

_CLOCKWISE: dict[Orientation, Orientation] = {
    Orientation.UP: Orientation.RIGHT,
    Orientation.RIGHT: Orientation.DOWN,
    Orientation.DOWN: Orientation.LEFT,
    Orientation.LEFT: Orientation.UP,
}

_COUNTER_CLOCKWISE: dict[Orientation, Orientation] = {
    after: before for before, after in _CLOCKWISE.items()
}

# Screen coordinates: y grows downwards.
_STEP_DELTAS: dict[Orientation, tuple[int, int]] = {
    Orientation.UP: (0, -1),
    Orientation.RIGHT: (1, 0),
    Orientation.DOWN: (0, 1),
    Orientation.LEFT: (-1, 0),
}


def uturn(orientation: Orientation) -> Orientation:
    """Return the opposite heading."""
    return _UTURN[orientation]


def clockwise(orientation: Orientation) -> Orientation:
    """Return the heading a quarter turn to the right."""
    return _CLOCKWISE[orientation]


def counter_clockwise(orientation: Orientation) -> Orientation:
    """Return the heading a quarter turn to the left."""
    return _COUNTER_CLOCKWISE[orientation]


def apply_rotation(orientation: Orientation, rotate: Rotate) -> Orientation:
    """Apply a decision's turn to *orientation*."""
    if rotate == Rotate.CLOCKWISE:
        return clockwise(orientation)
    if rotate == Rotate.COUNTER_CLOCKWISE:
        return counter_clockwise(orientation)
    if rotate == Rotate.UTURN:
        return uturn(orientation)
    return orientation


def step_delta(orientation: Orientation) -> tuple[int, int]:
    """Return the ``(dx, dy)`` offset of one step along *orientation*."""
    return _STEP_DELTAS[orientation]
