"""Tests for turmite.config.types module."""

from __future__ import annotations

import dataclasses

import pytest

from turmite.config.types import RunConfig, RunResult


class TestRunConfig:
    def test_defaults_are_valid(self) -> None:
        config = RunConfig()
        assert config.grid_width == config.canvas_width // config.pixel_scale
        assert config.grid_height == config.canvas_height // config.pixel_scale
        assert config.table_name is None
        assert config.record_trace is True

    def test_grid_dimensions_floor(self) -> None:
        config = RunConfig(canvas_width=41, canvas_height=39, pixel_scale=4)
        assert (config.grid_width, config.grid_height) == (10, 9)

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"pixel_scale": 0}, "pixel_scale"),
            ({"canvas_width": 2, "pixel_scale": 4}, "canvas_width"),
            ({"canvas_height": 3, "pixel_scale": 4}, "canvas_height"),
            ({"max_ticks": 0}, "max_ticks"),
        ],
    )
    def test_invalid_values_rejected(self, kwargs: dict[str, int], message: str) -> None:
        with pytest.raises(ValueError, match=message):
            RunConfig(**kwargs)  # type: ignore[arg-type]

    def test_unknown_table_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown decision table"):
            RunConfig(table_name="not_a_table")

    def test_known_table_accepted(self) -> None:
        assert RunConfig(table_name="spiral_two").table_name == "spiral_two"

    def test_frozen(self) -> None:
        config = RunConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_ticks = 5  # type: ignore[misc]


def test_run_result_as_dict() -> None:
    result = RunResult(
        run_id="langton_s0",
        table_name="langton",
        seed=0,
        ticks=12,
        exited=True,
        final_x=0,
        final_y=3,
        filled_cells=7,
    )
    assert dataclasses.asdict(result)["run_id"] == "langton_s0"
