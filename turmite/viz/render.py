"""Matplotlib-based rendering of turmite runs onto a pixel canvas."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from matplotlib import animation

from turmite.config.types import RunConfig
from turmite.domain.turmite import Turmite
from turmite.simulation.engine import create_turmite, run_single
from turmite.viz.surface import ArraySurface
from turmite.viz.theme import DEFAULT_THEME, Theme


def capture_frames(
    config: RunConfig,
    seed: int,
    frame_every: int = 1,
    max_frames: int | None = None,
    theme: Theme = DEFAULT_THEME,
) -> tuple[list[np.ndarray], Turmite]:
    """Run one seeded turmite, snapshotting the canvas every *frame_every* ticks.

    The first frame is the blank canvas and the last frame is always the
    final state, so at least two frames are returned.
    """
    if frame_every < 1:
        raise ValueError("frame_every must be >= 1")
    if max_frames is not None and max_frames < 2:
        raise ValueError("max_frames must be >= 2")

    turmite = create_turmite(config, random.Random(seed))
    surface = ArraySurface(config.canvas_width, config.canvas_height, theme=theme)
    frames = [surface.snapshot()]
    for _ in range(config.max_ticks):
        if not turmite.is_active():
            break
        before = turmite.ticks
        turmite.tick(surface)
        if turmite.ticks != before and turmite.ticks % frame_every == 0:
            frames.append(surface.snapshot())
            if max_frames is not None and len(frames) >= max_frames - 1:
                break
    frames.append(surface.snapshot())
    return frames, turmite


def capture_at_ticks(
    config: RunConfig,
    seed: int,
    ticks: list[int],
    theme: Theme = DEFAULT_THEME,
) -> tuple[dict[int, np.ndarray], Turmite]:
    """Run one seeded turmite and snapshot the canvas after each tick count in *ticks*.

    Tick counts the run never reaches map to the final canvas.
    """
    wanted = set(ticks)
    turmite = create_turmite(config, random.Random(seed))
    surface = ArraySurface(config.canvas_width, config.canvas_height, theme=theme)
    frames: dict[int, np.ndarray] = {}
    if 0 in wanted:
        frames[0] = surface.snapshot()
    for _ in range(config.max_ticks):
        if not turmite.is_active() or len(frames) == len(wanted):
            break
        turmite.tick(surface)
        if turmite.ticks in wanted and turmite.ticks not in frames:
            frames[turmite.ticks] = surface.snapshot()
    final = surface.snapshot()
    for tick in wanted:
        frames.setdefault(tick, final)
    return frames, turmite


def _draw_canvas(ax: plt.Axes, pixels: np.ndarray) -> Any:
    img = ax.imshow(pixels, origin="upper", aspect="equal", interpolation="nearest")
    ax.set_xticks([])
    ax.set_yticks([])
    return img


def render_final_frame(
    config: RunConfig,
    seed: int,
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
) -> Turmite:
    """Run to completion and save the final canvas as a static image."""
    output_path = Path(output_path)
    turmite = create_turmite(config, random.Random(seed))
    surface = ArraySurface(config.canvas_width, config.canvas_height, theme=theme)
    for _ in range(config.max_ticks):
        if not turmite.is_active():
            break
        turmite.tick(surface)

    fig, ax = plt.subplots(figsize=(6, 6))
    _draw_canvas(ax, surface.pixels)
    ax.set_title(f"{turmite.behavior.name} (ticks={turmite.ticks})")
    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return turmite


def render_animation(
    config: RunConfig,
    seed: int,
    output_path: Path,
    fps: int = 30,
    frame_every: int = 50,
    max_frames: int | None = 600,
    theme: Theme = DEFAULT_THEME,
) -> Turmite:
    """Render one run as an animation; ``.gif`` uses Pillow, anything else FFmpeg."""
    if fps < 1:
        raise ValueError("fps must be >= 1")
    output_path = Path(output_path)
    frames, turmite = capture_frames(
        config, seed, frame_every=frame_every, max_frames=max_frames, theme=theme
    )

    fig, ax = plt.subplots(figsize=(6, 6))
    img = _draw_canvas(ax, frames[0])
    ax.set_title(turmite.behavior.name)
    fig.tight_layout()

    def update(frame_index: int) -> tuple[Any, ...]:
        img.set_data(frames[frame_index])
        return (img,)

    anim = animation.FuncAnimation(
        fig, update, frames=len(frames), interval=max(1, int(1000 / fps)), blit=False
    )

    output_path.parent.mkdir(parents=True, exist_ok=True)
    suffix = output_path.suffix.lower()
    writer: animation.PillowWriter | animation.FFMpegWriter
    if suffix == ".gif":
        writer = animation.PillowWriter(fps=fps)
    else:
        writer = animation.FFMpegWriter(fps=fps)
    anim.save(output_path, writer=writer)
    plt.close(fig)
    return turmite


def render_filmstrip(
    config: RunConfig,
    seed: int,
    output_path: Path,
    n_frames: int = 6,
    theme: Theme = DEFAULT_THEME,
) -> Turmite:
    """Render a horizontal strip of evenly spaced canvas snapshots with tick labels."""
    if n_frames < 2:
        raise ValueError("n_frames must be >= 2")
    output_path = Path(output_path)
    total = run_single(config, seed).ticks
    picks = sorted({round(i * total / (n_frames - 1)) for i in range(n_frames)})
    frames, turmite = capture_at_ticks(config, seed, picks, theme=theme)

    fig, axes = plt.subplots(1, len(picks), figsize=(3 * len(picks), 3), squeeze=False)
    for ax, tick in zip(axes[0], picks, strict=True):
        _draw_canvas(ax, frames[tick])
        ax.set_title(f"tick {tick}")
    fig.suptitle(turmite.behavior.name)
    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return turmite
