"""Simulation driver: headless runs, seeded batches, and Parquet persistence."""

from turmite.simulation.engine import (
    NullSurface,
    create_turmite,
    run_batch,
    run_single,
    run_turmite,
    summarize,
)
from turmite.simulation.persistence import flush_trace_columns, new_trace_columns

__all__ = [
    "NullSurface",
    "create_turmite",
    "flush_trace_columns",
    "new_trace_columns",
    "run_batch",
    "run_single",
    "run_turmite",
    "summarize",
]
