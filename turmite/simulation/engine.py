"""Headless driver: run turmites to termination and persist seeded batches."""

from __future__ import annotations

import json
import logging
import random
from collections.abc import Callable
from dataclasses import asdict
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from turmite.config.constants import FLUSH_THRESHOLD, MAX_BATCH_WORK_UNITS
from turmite.config.types import RunConfig, RunResult
from turmite.domain.decisions import get_table
from turmite.domain.turmite import DrawingSurface, Turmite
from turmite.io.paths import logs_dir, run_summary_path, runs_dir, trace_log_path
from turmite.io.schemas import RUN_PAYLOAD_SCHEMA_VERSION, RUN_SUMMARY_SCHEMA
from turmite.simulation.persistence import flush_trace_columns, new_trace_columns

logger = logging.getLogger(__name__)


class NullSurface:
    """Drawing surface that discards every command."""

    def set_fill_style(self, color: str) -> None:
        pass

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None:
        pass


def _deterministic_run_id(table_name: str, seed: int) -> str:
    """Build reproducible run ID stable across runs for identical seeds."""
    return f"{table_name}_s{seed}"


def create_turmite(config: RunConfig, rng: random.Random) -> Turmite:
    """Build a turmite for *config*, honoring a pinned table name."""
    table = get_table(config.table_name) if config.table_name is not None else None
    return Turmite.create(
        config.canvas_width,
        config.canvas_height,
        config.pixel_scale,
        rng=rng,
        table=table,
    )


def run_turmite(
    turmite: Turmite,
    surface: DrawingSurface,
    max_ticks: int,
    on_tick: Callable[[Turmite], None] | None = None,
) -> int:
    """Tick until inactive or *max_ticks* calls; return transitions executed.

    *on_tick* is invoked after every call that executed a transition.
    """
    if max_ticks < 1:
        raise ValueError("max_ticks must be >= 1")
    start = turmite.ticks
    for _ in range(max_ticks):
        if not turmite.is_active():
            break
        before = turmite.ticks
        turmite.tick(surface)
        if on_tick is not None and turmite.ticks != before:
            on_tick(turmite)
    return turmite.ticks - start


def summarize(turmite: Turmite, run_id: str, seed: int) -> RunResult:
    return RunResult(
        run_id=run_id,
        table_name=turmite.behavior.name,
        seed=seed,
        ticks=turmite.ticks,
        exited=not turmite.is_active(),
        final_x=turmite.x,
        final_y=turmite.y,
        filled_cells=turmite.grid.filled_count(),
    )


def run_single(
    config: RunConfig | None = None,
    seed: int = 0,
    surface: DrawingSurface | None = None,
) -> RunResult:
    """Run one seeded turmite headlessly (or onto *surface*) and summarize it."""
    config = config or RunConfig()
    turmite = create_turmite(config, random.Random(seed))
    run_turmite(turmite, surface if surface is not None else NullSurface(), config.max_ticks)
    return summarize(turmite, _deterministic_run_id(turmite.behavior.name, seed), seed)


def _trace_row(columns: dict[str, list[object]], run_id: str, turmite: Turmite) -> None:
    in_bounds = turmite.grid.contains(turmite.x, turmite.y)
    columns["run_id"].append(run_id)
    columns["tick"].append(turmite.ticks)
    columns["x"].append(turmite.x)
    columns["y"].append(turmite.y)
    columns["orientation"].append(turmite.orientation.value)
    columns["state"].append(turmite.state)
    columns["color"].append(turmite.current_color() if in_bounds else False)
    columns["active"].append(turmite.is_active())


def run_batch(
    n_runs: int,
    out_dir: Path,
    config: RunConfig | None = None,
    base_seed: int = 0,
) -> list[RunResult]:
    """Run seeded turmites and persist JSON/Parquet outputs.

    Layout under *out_dir*: ``runs/<run_id>.json`` table payloads,
    ``logs/trace_log.parquet`` (when ``config.record_trace``) and
    ``logs/run_summary.parquet``.
    """
    if n_runs < 1:
        raise ValueError("n_runs must be >= 1")
    run_config = config or RunConfig()
    work_units = n_runs * run_config.max_ticks
    if work_units > MAX_BATCH_WORK_UNITS:
        raise ValueError(
            f"batch work {work_units} exceeds MAX_BATCH_WORK_UNITS={MAX_BATCH_WORK_UNITS}"
        )

    out_dir = Path(out_dir)
    runs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    trace_writer: pq.ParquetWriter | None = None
    trace_columns = new_trace_columns()
    results: list[RunResult] = []
    surface = NullSurface()

    try:
        for i in range(n_runs):
            seed = base_seed + i
            turmite = create_turmite(run_config, random.Random(seed))
            run_id = _deterministic_run_id(turmite.behavior.name, seed)

            def on_tick(t: Turmite, run_id: str = run_id) -> None:
                nonlocal trace_writer
                if not run_config.record_trace:
                    return
                _trace_row(trace_columns, run_id, t)
                if len(trace_columns["run_id"]) >= FLUSH_THRESHOLD:
                    trace_writer = flush_trace_columns(
                        trace_columns, trace_log_path(out_dir), trace_writer
                    )

            if run_config.record_trace:
                _trace_row(trace_columns, run_id, turmite)
            run_turmite(turmite, surface, run_config.max_ticks, on_tick=on_tick)
            result = summarize(turmite, run_id, seed)
            results.append(result)

            payload = {
                "schema_version": RUN_PAYLOAD_SCHEMA_VERSION,
                "run_id": run_id,
                "seed": seed,
                "table": turmite.behavior.to_payload(),
                "config": asdict(run_config),
                "result": asdict(result),
            }
            (runs_dir(out_dir) / f"{run_id}.json").write_text(
                json.dumps(payload, ensure_ascii=False, indent=2)
            )
            logger.info(
                "Run %s finished after %d ticks (exited=%s)", run_id, result.ticks, result.exited
            )

        trace_writer = flush_trace_columns(trace_columns, trace_log_path(out_dir), trace_writer)
    finally:
        if trace_writer is not None:
            trace_writer.close()

    summary_table = pa.Table.from_pylist([asdict(r) for r in results], schema=RUN_SUMMARY_SCHEMA)
    pq.write_table(summary_table, run_summary_path(out_dir))
    logger.info("Wrote %d run summaries to %s", len(results), run_summary_path(out_dir))
    return results
