"""Tests for turmite.viz.surface: recording and pixel-array drawing surfaces."""

from __future__ import annotations

import random

import numpy as np
import pytest

from turmite.config.constants import ANT_COLOR, EMPTY_COLOR, FILL_COLOR
from turmite.config.types import RunConfig
from turmite.simulation.engine import create_turmite, run_turmite
from turmite.viz.surface import ArraySurface, RecordingSurface, parse_rgb
from turmite.viz.theme import DARK_THEME


class TestParseRgb:
    def test_parses_engine_colors(self) -> None:
        assert parse_rgb(EMPTY_COLOR) == (255, 255, 255)
        assert parse_rgb(FILL_COLOR) == (0, 0, 0)
        assert parse_rgb(ANT_COLOR) == (200, 0, 0)

    def test_tolerates_whitespace(self) -> None:
        assert parse_rgb(" rgb( 1,2 ,3 ) ") == (1, 2, 3)

    @pytest.mark.parametrize("color", ["#ffffff", "rgb(1, 2)", "rgba(1, 2, 3, 4)", ""])
    def test_malformed_rejected(self, color: str) -> None:
        with pytest.raises(ValueError, match="Expected rgb"):
            parse_rgb(color)

    def test_channel_range(self) -> None:
        with pytest.raises(ValueError, match="0, 255"):
            parse_rgb("rgb(256, 0, 0)")


class TestRecordingSurface:
    def test_records_in_call_order(self) -> None:
        surface = RecordingSurface()
        surface.set_fill_style(FILL_COLOR)
        surface.fill_rect(1, 2, 3, 3)
        assert surface.commands == [("fill_style", FILL_COLOR), ("fill_rect", 1, 2, 3, 3)]

    def test_rects_pairs_with_active_style(self) -> None:
        surface = RecordingSurface()
        surface.set_fill_style(FILL_COLOR)
        surface.fill_rect(0, 0, 1, 1)
        surface.fill_rect(1, 0, 1, 1)
        surface.set_fill_style(ANT_COLOR)
        surface.fill_rect(2, 0, 1, 1)
        assert surface.rects() == [
            (FILL_COLOR, 0, 0, 1, 1),
            (FILL_COLOR, 1, 0, 1, 1),
            (ANT_COLOR, 2, 0, 1, 1),
        ]

    def test_clear(self) -> None:
        surface = RecordingSurface()
        surface.fill_rect(0, 0, 1, 1)
        surface.clear()
        assert surface.commands == []


class TestArraySurface:
    def test_starts_with_empty_color(self) -> None:
        surface = ArraySurface(4, 3)
        assert surface.pixels.shape == (3, 4, 3)
        assert (surface.pixels == 255).all()

    def test_fill_rect(self) -> None:
        surface = ArraySurface(6, 6)
        surface.set_fill_style(ANT_COLOR)
        surface.fill_rect(2, 1, 2, 3)
        assert tuple(surface.pixels[1, 2]) == (200, 0, 0)
        assert tuple(surface.pixels[3, 3]) == (200, 0, 0)
        assert tuple(surface.pixels[4, 2]) == (255, 255, 255)
        assert tuple(surface.pixels[1, 4]) == (255, 255, 255)

    def test_off_canvas_rect_is_clipped(self) -> None:
        surface = ArraySurface(4, 4)
        surface.set_fill_style(FILL_COLOR)
        surface.fill_rect(3, 3, 4, 4)
        surface.fill_rect(10, 10, 2, 2)
        assert int((surface.pixels.sum(axis=2) == 0).sum()) == 1

    def test_theme_maps_engine_colors(self) -> None:
        surface = ArraySurface(2, 2, theme=DARK_THEME)
        assert tuple(surface.pixels[0, 0]) == parse_rgb(DARK_THEME.empty_color)
        surface.set_fill_style(FILL_COLOR)
        surface.fill_rect(0, 0, 1, 1)
        assert tuple(surface.pixels[0, 0]) == parse_rgb(DARK_THEME.filled_color)

    def test_snapshot_is_a_copy(self) -> None:
        surface = ArraySurface(2, 2)
        snap = surface.snapshot()
        surface.set_fill_style(FILL_COLOR)
        surface.fill_rect(0, 0, 2, 2)
        assert (snap == 255).all()

    def test_invalid_size(self) -> None:
        with pytest.raises(ValueError):
            ArraySurface(0, 5)


def test_finished_canvas_mirrors_grid() -> None:
    config = RunConfig(canvas_width=40, canvas_height=40, pixel_scale=2, table_name="langton")
    turmite = create_turmite(config, random.Random(0))
    surface = ArraySurface(config.canvas_width, config.canvas_height)
    run_turmite(turmite, surface, max_ticks=100_000)
    assert not turmite.is_active()

    # Sample the top-left pixel of every cell.
    sampled = surface.pixels[::2, ::2]
    filled = np.all(sampled == 0, axis=2)
    np.testing.assert_array_equal(filled, turmite.grid.to_array())
